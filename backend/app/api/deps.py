from fastapi import Depends
from app.core.config import settings
from app.db.storage import SQLStorage, StorageMedium
from app.services.promotion_store import PromotionStore


def get_storage() -> StorageMedium:
    return SQLStorage()


def get_store(storage: StorageMedium = Depends(get_storage)) -> PromotionStore:
    return PromotionStore(storage, key=settings.PROMOTIONS_STORAGE_KEY)
