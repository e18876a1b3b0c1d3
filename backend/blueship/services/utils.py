"""
Small conversion helpers shared by the query services.
"""

from decimal import Decimal


def enum_val(v):
    """Safe enum value extraction"""
    return v.value if hasattr(v, "value") else str(v) if v is not None else None


def to_decimal(v) -> Decimal:
    """Money column value -> Decimal. Floats go through str() so 799.99 stays 799.99."""
    if v is None:
        return Decimal("0")
    if isinstance(v, Decimal):
        return v
    return Decimal(str(v))
