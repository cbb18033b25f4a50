"""Product request/response schemas - upstream record, projection and caller DTOs."""

from pydantic import BaseModel, ConfigDict

# Sentinel for "leave inventory_level unchanged" (0 is a legitimate stock level)
INVENTORY_UNCHANGED = -1


class Product(BaseModel):
    """Upstream product record. Only the fields we read are declared; the rest are kept as extras."""

    model_config = ConfigDict(extra="allow")

    id: int = 0
    name: str | None = None
    type: str | None = None
    sku: str | None = None
    description: str | None = None
    weight: float = 0
    price: float = 0
    brand_id: int = 0
    brand_name: str | None = None
    inventory_level: int = 0
    is_visible: bool | None = None
    date_modified: str | None = None


class ProductSummary(BaseModel):
    """Fields the gateway exposes. brand_id only: resolving the name costs one call per item."""

    id: int = 0
    name: str | None = None
    type: str | None = None
    weight: float = 0
    price: float = 0
    brand_id: int = 0
    sku: str | None = None
    inventory_level: int = 0

    @classmethod
    def from_product(cls, product: Product) -> "ProductSummary":
        return cls(
            id=product.id,
            name=product.name,
            type=product.type,
            weight=product.weight,
            price=product.price,
            brand_id=product.brand_id,
            sku=product.sku,
            inventory_level=product.inventory_level,
        )


class NewProduct(BaseModel):
    # Everything optional here: missing fields are rejected by the repository with a 400 result
    name: str = ""
    type: str = ""
    sku: str = ""
    price: float = 0
    weight: float = 0
    inventory_level: int = 0
    brand_name: str = ""
    brand_id: int = 0


class ProductUpdate(BaseModel):
    """Sparse update. "", 0 and -1 (inventory) mean unchanged; so does null."""

    name: str | None = ""
    type: str | None = ""
    sku: str | None = ""
    weight: float | None = 0
    price: float | None = 0
    brand_id: int | None = 0
    inventory_level: int | None = INVENTORY_UNCHANGED
