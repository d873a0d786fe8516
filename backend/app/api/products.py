from fastapi import APIRouter, Query
from typing import List, Optional
from app.schemas.product import ProductResponse
from app.services.catalog import PRODUCTS, search_products

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("/", response_model=List[ProductResponse])
def list_products(
    q: Optional[str] = Query(None, description="Search by name or code"),
    exclude: List[str] = Query([], description="Already selected product codes"),
):
    """Каталог товаров для выбора в акцию"""
    if q is None:
        return PRODUCTS
    return search_products(q, exclude=exclude)
