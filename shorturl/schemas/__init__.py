# re-export common schemas for simpler imports
from .URLCreateRequest import URLCreateRequest
from .URLInfoResponse import URLInfoResponse
from .PaginatedURLList import PaginatedURLList
from .codec import CodecInfo, DecodeResponse, EncodeResponse

__all__ = [
    "URLCreateRequest",
    "URLInfoResponse",
    "PaginatedURLList",
    "CodecInfo",
    "DecodeResponse",
    "EncodeResponse",
]
