from fastapi import APIRouter, Depends
import logging

from shorturl.schemas.codec import CodecInfo, DecodeResponse, EncodeResponse
from shorturl.services.codec import get_codec
from shorturl.utils.encoding import Codec

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/codec", tags=["codec"])

# ShortCodeError raised here is turned into a 400 by the app-level handler


@router.get("", response_model=CodecInfo)
def codec_info_endpoint(codec: Codec = Depends(get_codec)):
    config = codec.config
    return CodecInfo(
        base=config.base,
        alphabet=list(config.active_alphabet),
        use_secondary=config.use_secondary,
        offset=config.offset,
    )


@router.get("/encode/{value}", response_model=EncodeResponse)
def encode_endpoint(value: int, codec: Codec = Depends(get_codec)):
    return EncodeResponse(value=value, short_code=codec.encode(value))


@router.get("/decode/{short_code}", response_model=DecodeResponse)
def decode_endpoint(short_code: str, codec: Codec = Depends(get_codec)):
    return DecodeResponse(short_code=short_code, value=codec.decode(short_code))
