"""Демо-каталог товаров аптеки (бэкенда товаров пока нет)"""
from typing import Iterable, List

from app.schemas.product import ProductResponse

SEARCH_LIMIT = 10

PRODUCTS: List[ProductResponse] = [
    ProductResponse(id=1, product_code="A0001", name="Panadol Extra Strength"),
    ProductResponse(id=2, product_code="A0002", name="Ibuprofen 400mg"),
    ProductResponse(id=3, product_code="A0003", name="Aspirin 325mg"),
    ProductResponse(id=4, product_code="B0001", name="Vitamin C 1000mg"),
    ProductResponse(id=5, product_code="B0002", name="Multivitamin Daily"),
    ProductResponse(id=6, product_code="C0001", name="Allergy Relief Tablets"),
    ProductResponse(id=7, product_code="C0002", name="Cough Syrup"),
    ProductResponse(id=8, product_code="D0001", name="Antibiotic Ointment"),
    ProductResponse(id=9, product_code="D0002", name="Bandages Assorted"),
    ProductResponse(id=10, product_code="E0001", name="Eye Drops"),
    ProductResponse(id=11, product_code="F0001", name="Hand Sanitizer"),
    ProductResponse(id=12, product_code="F0002", name="Face Masks 50pk"),
]


def search_products(query: str, exclude: Iterable[str] = (), limit: int = SEARCH_LIMIT) -> List[ProductResponse]:
    """Поиск по названию или коду, без уже выбранных товаров"""
    search = (query or "").strip().lower()
    if not search:
        return []
    
    excluded = set(exclude)
    results = [
        p for p in PRODUCTS
        if (search in p.name.lower() or search in p.product_code.lower())
        and p.product_code not in excluded
    ]
    return results[:limit]


def get_products_by_codes(codes: Iterable[str]) -> List[ProductResponse]:
    """Товары каталога по кодам (неизвестные коды пропускаются)"""
    by_code = {p.product_code: p for p in PRODUCTS}
    return [by_code[code] for code in codes if code in by_code]
