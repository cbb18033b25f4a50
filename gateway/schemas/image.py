"""Product image as returned by the upstream images endpoint."""

from pydantic import BaseModel, ConfigDict


class Image(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: int = 0
    product_id: int = 0
    is_thumbnail: bool = False
    sort_order: int = 0
    description: str | None = None
    image_file: str | None = None
    url_zoom: str | None = None
    url_standard: str | None = None
    url_thumbnail: str | None = None
    url_tiny: str | None = None
    date_modified: str | None = None
