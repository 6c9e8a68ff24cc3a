from pydantic import BaseModel, ConfigDict, HttpUrl, Field
from datetime import datetime


# Response DTOs
class URLInfoResponse(BaseModel):
    # original_url is the Python field, 'url' is the JSON key
    original_url: HttpUrl = Field(..., alias="url")
    short_code: str
    short_url: str
    created_at: datetime
    last_accessed_at: datetime
    click_count: int

    # populate_by_name lets services build it with original_url=...
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    @classmethod
    def from_item(cls, item, base_url: str) -> "URLInfoResponse":
        return cls(
            original_url=item.original_url,
            short_code=item.short_code,
            short_url=f"{base_url}/{item.short_code}",
            created_at=item.created_at,
            last_accessed_at=item.last_accessed_at,
            click_count=item.click_count or 0,
        )
