"""
Typed records for the JSON columns (dimensions, addresses, order line items).
- ORM validators run incoming values through these models before storing them.
- Response schemas reuse them so reads are validated the same way.
"""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class Dimensions(BaseModel):
    """Package/product dimensions in centimetres. Any side may be unknown."""

    model_config = ConfigDict(extra="forbid")

    length: float | None = Field(None, ge=0)
    width: float | None = Field(None, ge=0)
    height: float | None = Field(None, ge=0)

    @property
    def volume(self) -> float | None:
        if self.length is None or self.width is None or self.height is None:
            return None
        return self.length * self.width * self.height


class Address(BaseModel):
    model_config = ConfigDict(extra="forbid")

    street: str
    city: str
    state: str
    zip: str
    country: str = "USA"


class OrderLineItem(BaseModel):
    model_config = ConfigDict(extra="forbid")

    sku: str
    qty: int = Field(ge=1)
    unit_price: Decimal = Field(ge=0, decimal_places=2)
    total_price: Decimal | None = Field(None, ge=0, decimal_places=2)

    def line_total(self) -> Decimal:
        """Stored total if present, otherwise qty × unit price."""
        if self.total_price is not None:
            return self.total_price
        return self.unit_price * self.qty


def to_json_record(model_cls: type[BaseModel], value) -> dict | None:
    """Validate a dict/model into model_cls and dump it JSON-safe; None passes through."""
    if value is None:
        return None
    try:
        record = model_cls.model_validate(value)
    except ValidationError as e:
        raise ValueError(f"invalid {model_cls.__name__}: {e}") from e
    return record.model_dump(mode="json", exclude_none=True)
