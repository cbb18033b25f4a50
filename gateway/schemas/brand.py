"""Brand request/response schemas."""

from pydantic import BaseModel, ConfigDict


class CustomUrl(BaseModel):
    url: str | None = None
    is_default: bool = False


class Brand(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int = 0
    name: str | None = None
    page_title: str | None = None
    meta_keywords: list[str] | None = None
    meta_description: str | None = None
    search_keywords: str | None = None
    image_url: str | None = None
    custom_url: CustomUrl | None = None


class BrandCreate(BaseModel):
    name: str = ""
    page_title: str | None = None
    meta_keywords: list[str] | None = None
    meta_description: str | None = None
    search_keywords: str | None = None
    image_url: str | None = None


class BrandSummary(BaseModel):
    id: int
    name: str | None = None
