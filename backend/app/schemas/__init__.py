from .product import ProductResponse
from .promotion import (
    FileMetadata,
    PromotionCreate, PromotionUpdate,
    PromotionResponse, PromotionDetailResponse, PromotionStatsResponse,
)

__all__ = [
    "ProductResponse",
    "FileMetadata",
    "PromotionCreate", "PromotionUpdate",
    "PromotionResponse", "PromotionDetailResponse", "PromotionStatsResponse",
]
