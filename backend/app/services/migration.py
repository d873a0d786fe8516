"""
Миграция акций, сохранённых в старых форматах.

Версии схемы в хранилище нет: неполную запись узнаём по отсутствующим полям.
Каждое исправление независимое и идемпотентное.
"""
from typing import List

from app.models.promotion import ApplyToType, PromotionType

DEFAULT_MIN_CART_QTY = 1
DEFAULT_MAX_USES_PER_USER = 100
DEFAULT_TOTAL_USES_LIMIT = 10000


def needs_migration(promotion: dict) -> bool:
    """Запись неполная: нет списка files, условий или правил"""
    return (
        not isinstance(promotion.get("files"), list)
        or "terms_and_conditions" not in promotion
        or "rules" not in promotion
    )


def migrate_promotion(promotion: dict) -> dict:
    """Вернуть копию акции, доведённую до текущей схемы"""
    migrated = dict(promotion)
    
    if not isinstance(migrated.get("files"), list):
        migrated["files"] = []
    
    migrated.setdefault("terms_and_conditions", "")
    migrated.setdefault("rules", "")
    
    if migrated.get("promotion_type") == PromotionType.PARTNER.value and not migrated.get("partner_name"):
        migrated["partner_name"] = ""
    
    migrated.setdefault("min_cart_qty", DEFAULT_MIN_CART_QTY)
    migrated.setdefault("max_uses_per_user", DEFAULT_MAX_USES_PER_USER)
    migrated.setdefault("total_uses_limit", DEFAULT_TOTAL_USES_LIMIT)
    
    # Товары бандла раньше хранились в target_identifiers.
    # Исходное поле не очищаем: коды остаются в обоих полях.
    if migrated.get("apply_to") == ApplyToType.BUNDLE.value and not isinstance(
        migrated.get("bundledProductCodes"), list
    ):
        targets = migrated.get("target_identifiers")
        migrated["bundledProductCodes"] = list(targets) if targets else []
    
    return migrated


def migrate_promotions(promotions: List[dict]) -> List[dict]:
    return [migrate_promotion(p) for p in promotions]
