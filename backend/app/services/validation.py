from datetime import datetime
from typing import Dict, Optional

from app.core.utils import to_naive_utc, utcnow
from app.models.promotion import ApplyToType, DiscountType, PromotionType
from app.schemas.promotion import PromotionBase

FORM_ERROR_MESSAGE = "Please fix the errors in the form."


def validate_promotion(
    data: PromotionBase,
    now: Optional[datetime] = None,
    check_dates: bool = True,
) -> Dict[str, str]:
    """
    Проверка формы акции. Возвращает {поле: сообщение}, пусто если всё ок.
    Даты проверяются только при создании.
    """
    errors: Dict[str, str] = {}
    
    if not data.name.strip():
        errors["name"] = "Name is required"
    if not data.description.strip():
        errors["description"] = "Description is required"
    
    if not data.discount_value or data.discount_value <= 0:
        errors["discount_value"] = "Discount must be greater than 0"
    elif data.discount_type == DiscountType.PERCENTAGE and data.discount_value > 100:
        errors["discount_value"] = "Percentage discount cannot exceed 100"
    
    if data.apply_to == ApplyToType.PRODUCT and not data.target_identifiers:
        errors["products"] = "Please select at least one product"
    elif data.apply_to == ApplyToType.BUNDLE and not data.bundled_product_codes:
        errors["products"] = "Please select at least one product for the bundle"
    
    if data.promotion_type == PromotionType.PARTNER and not (data.partner_name or "").strip():
        errors["partner_name"] = "Partner name is required"
    
    if check_dates:
        now = now or utcnow()
        start = to_naive_utc(data.start_datetime)
        end = to_naive_utc(data.end_datetime)
        if start < now:
            errors["start_datetime"] = "Start date must be in the future"
        if end <= start:
            errors["end_datetime"] = "End date must be after start date"
    
    return errors
