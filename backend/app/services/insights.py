import random
from collections import Counter
from datetime import datetime, timedelta
from typing import List, Optional

from app.core.utils import format_file_size, parse_datetime, utcnow
from app.models.promotion import ApplyToType, DiscountType, PromotionStatus, PromotionType
from app.schemas.promotion import PromotionResponse
from app.services.catalog import get_products_by_codes

RECENT_LIMIT = 5


def promotion_status(promo: dict, now: datetime) -> PromotionStatus:
    """Статус акции на момент now"""
    if not promo.get("is_active"):
        return PromotionStatus.INACTIVE
    if now < parse_datetime(promo["start_datetime"]):
        return PromotionStatus.SCHEDULED
    if now > parse_datetime(promo["end_datetime"]):
        return PromotionStatus.EXPIRED
    return PromotionStatus.RUNNING


def time_remaining(promo: dict, now: datetime) -> str:
    """Сколько осталось до конца: "3d 4h 5m" или "Expired" """
    end = parse_datetime(promo["end_datetime"])
    if now > end:
        return "Expired"
    
    diff = end - now
    hours, rest = divmod(diff.seconds, 3600)
    return f"{diff.days}d {hours}h {rest // 60}m"


def days_active(promo: dict, now: datetime) -> int:
    """Полных дней с начала акции"""
    days = (now - parse_datetime(promo["start_datetime"])) // timedelta(days=1)
    return max(days, 0)


def progress_percentage(promo: dict, now: datetime) -> int:
    """Сколько процентов срока акции прошло"""
    start = parse_datetime(promo["start_datetime"])
    end = parse_datetime(promo["end_datetime"])
    
    if now < start:
        return 0
    if now > end:
        return 100
    
    total = (end - start).total_seconds()
    if total <= 0:
        return 100
    # как Math.round: .5 вверх
    return int((now - start).total_seconds() / total * 100 + 0.5)


def demo_claimed() -> int:
    """Случайное число использований (демо, не сохраняется)"""
    return random.randrange(50)


def format_discount(promo: dict) -> str:
    value = promo.get("discount_value")
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if promo.get("discount_type") == DiscountType.PERCENTAGE.value:
        return f"{value}%"
    return f"{value} KSH"


def selected_codes(promo: dict) -> List[str]:
    """Коды товаров, к которым применяется акция"""
    if promo.get("apply_to") == ApplyToType.BUNDLE.value:
        return promo.get("bundledProductCodes") or []
    return promo.get("target_identifiers") or []


def build_promotion_detail(promo: dict, now: Optional[datetime] = None) -> dict:
    """Построить ответ детальной страницы с вычисленными полями"""
    now = now or utcnow()
    
    return {
        **promo,
        "claimed": demo_claimed(),
        "status": promotion_status(promo, now),
        "discount_label": format_discount(promo),
        "time_remaining": time_remaining(promo, now),
        "days_active": days_active(promo, now),
        "progress_percentage": progress_percentage(promo, now),
        "products": get_products_by_codes(selected_codes(promo)),
        "files_total_size": format_file_size(sum(f.get("size") or 0 for f in promo.get("files") or [])),
    }


def build_dashboard_summary(promotions: List[dict], now: Optional[datetime] = None) -> dict:
    """Сводка по акциям для дашборда"""
    now = now or utcnow()
    
    statuses = Counter(promotion_status(p, now).value for p in promotions)
    by_apply_to = Counter(p.get("apply_to") for p in promotions)
    by_discount_type = Counter(p.get("discount_type") for p in promotions)
    by_promotion_type = Counter(p.get("promotion_type") or PromotionType.PHARMAPLUS.value for p in promotions)
    
    # Самые свежие сверху; createdAt в ISO, сортируется как строка
    recent = sorted(promotions, key=lambda p: p.get("createdAt") or "", reverse=True)[:RECENT_LIMIT]
    active = sum(1 for p in promotions if p.get("is_active"))
    
    return {
        "total": len(promotions),
        "active": active,
        "inactive": len(promotions) - active,
        "by_status": {s.value: statuses.get(s.value, 0) for s in PromotionStatus},
        "by_apply_to": {t.value: by_apply_to.get(t.value, 0) for t in ApplyToType},
        "by_discount_type": {t.value: by_discount_type.get(t.value, 0) for t in DiscountType},
        "by_promotion_type": {t.value: by_promotion_type.get(t.value, 0) for t in PromotionType},
        "recent": [PromotionResponse.model_validate(p) for p in recent],
    }
