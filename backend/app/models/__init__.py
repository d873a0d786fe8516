from .promotion import DiscountType, ApplyToType, PromotionType, PromotionStatus
from .storage import StorageEntry

__all__ = [
    "DiscountType", "ApplyToType", "PromotionType", "PromotionStatus",
    "StorageEntry",
]
