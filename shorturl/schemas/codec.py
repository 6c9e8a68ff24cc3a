from pydantic import BaseModel
from typing import List


class EncodeResponse(BaseModel):
    value: int
    short_code: str


class DecodeResponse(BaseModel):
    short_code: str
    value: int


class CodecInfo(BaseModel):
    base: int
    alphabet: List[str]
    use_secondary: bool
    offset: int
