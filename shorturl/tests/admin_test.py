def test_get_url_stats(client):
    """Test retrieving URL statistics."""
    create_response = client.post(
        "/api/v1/shorten",
        json={"url": "https://example.com/stats"}
    )
    short_code = create_response.json()["short_code"]

    response = client.get(f"/api/v1/admin/stats/{short_code}")
    assert response.status_code == 200
    data = response.json()
    assert data["url"] == "https://example.com/stats"
    assert data["short_code"] == short_code
    assert data["click_count"] == 0
    assert "created_at" in data


def test_get_url_stats_not_found(client):
    """Test getting stats for non-existent URL."""
    response = client.get("/api/v1/admin/stats/nonexistent")
    assert response.status_code == 404


def test_get_url_stats_invalid_code(client):
    response = client.get("/api/v1/admin/stats/not-a-code")
    assert response.status_code == 404


def test_list_urls_empty(client):
    """Test listing URLs when database is empty."""
    response = client.get("/api/v1/admin/list")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == 0
    assert data["urls"] == []


def test_list_urls_with_data(client, sample_urls):
    """Test listing URLs with pagination."""
    for url in sample_urls:
        client.post("/api/v1/shorten", json={"url": url})

    response = client.get("/api/v1/admin/list?skip=0&limit=10")
    assert response.status_code == 200
    data = response.json()
    assert data["total"] == len(sample_urls)
    assert [u["short_code"] for u in data["urls"]] == ["b", "c", "d"]


def test_list_urls_pagination(client):
    """Test URL listing pagination."""
    for i in range(5):
        client.post("/api/v1/shorten", json={"url": f"https://example.com/test{i}"})

    response = client.get("/api/v1/admin/list?skip=0&limit=2")
    data = response.json()
    assert data["total"] == 5
    assert len(data["urls"]) == 2
    assert data["skip"] == 0
    assert data["limit"] == 2

    response = client.get("/api/v1/admin/list?skip=2&limit=2")
    data = response.json()
    assert len(data["urls"]) == 2
    assert data["skip"] == 2


def test_total_clicks(client, sample_urls):
    codes = [client.post("/api/v1/shorten", json={"url": url}).json()["short_code"] for url in sample_urls]
    assert client.get("/api/v1/admin/analytics/total_clicks").json() == {"total_clicks": 0}

    client.get(f"/{codes[0]}", follow_redirects=False)
    client.get(f"/{codes[0]}", follow_redirects=False)
    client.get(f"/{codes[2]}", follow_redirects=False)

    assert client.get("/api/v1/admin/analytics/total_clicks").json() == {"total_clicks": 3}


def test_get_url_stats_code_beyond_id_range(client):
    response = client.get(f"/api/v1/admin/stats/{'9' * 20}")
    assert response.status_code == 404
