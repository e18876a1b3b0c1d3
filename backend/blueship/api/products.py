"""
Product API — product details for the inventory drawer
"""

from fastapi import APIRouter, Depends, HTTPException

from blueship.api.deps import get_inventory_service
from blueship.schemas.inventory import ProductDetail
from blueship.services.inventory_query import InventoryQueryService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/{sku}", response_model=ProductDetail)
def get_product(sku: str, service: InventoryQueryService = Depends(get_inventory_service)):
    product = service.get_product_by_sku(sku)
    if product is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
