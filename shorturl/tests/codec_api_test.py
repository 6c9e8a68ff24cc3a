import pytest

from shorturl.main import app
from shorturl.services.codec import get_codec
from shorturl.utils.encoding import Codec


def test_codec_info(client):
    response = client.get("/api/v1/codec")
    assert response.status_code == 200
    data = response.json()
    assert data["base"] == 62
    assert data["use_secondary"] is False
    assert data["offset"] == 0
    assert "".join(data["alphabet"]).startswith("abc")


def test_encode_endpoint(client):
    response = client.get("/api/v1/codec/encode/10000")
    assert response.status_code == 200
    assert response.json() == {"value": 10000, "short_code": "cLs"}


def test_decode_endpoint(client):
    response = client.get("/api/v1/codec/decode/cLs")
    assert response.status_code == 200
    assert response.json() == {"short_code": "cLs", "value": 10000}


def test_endpoints_follow_configured_codec(client):
    app.dependency_overrides[get_codec] = lambda: Codec(offset=10000, use_secondary=True)
    assert client.get("/api/v1/codec/encode/0").json()["short_code"] == "dlu"
    assert client.get("/api/v1/codec/decode/dlu").json()["value"] == 0
    assert client.get("/api/v1/codec").json()["alphabet"][0] == "G"


def test_decode_invalid_character(client):
    response = client.get("/api/v1/codec/decode/ab-c")
    assert response.status_code == 400
    assert "invalid character '-'" in response.json()["detail"]


def test_decode_negative_result(client):
    app.dependency_overrides[get_codec] = lambda: Codec(offset=100)
    response = client.get("/api/v1/codec/decode/b")
    assert response.status_code == 400
    assert "negative" in response.json()["detail"]


def test_encode_negative_value(client):
    response = client.get("/api/v1/codec/encode/-1")
    assert response.status_code == 400
    assert "must not be negative" in response.json()["detail"]


@pytest.mark.parametrize("offset,value", [(-10, 3), (-1, 0)])
def test_encode_below_zero_after_offset(client, offset, value):
    app.dependency_overrides[get_codec] = lambda: Codec(offset=offset)
    response = client.get(f"/api/v1/codec/encode/{value}")
    assert response.status_code == 400
    assert f"offset {offset}" in response.json()["detail"]


def test_encode_non_integer(client):
    response = client.get("/api/v1/codec/encode/abc")
    assert response.status_code == 422
