from pydantic import BaseModel, Field
from typing import Optional, List, Dict
from datetime import datetime
from app.models.promotion import DiscountType, ApplyToType, PromotionType, PromotionStatus
from app.schemas.product import ProductResponse


class FileMetadata(BaseModel):
    """Метаданные файла (содержимое не храним)"""
    name: str
    size: int = Field(default=0, ge=0)
    type: str = ""


class PromotionBase(BaseModel):
    name: str
    description: str
    promotion_type: PromotionType = PromotionType.PHARMAPLUS
    partner_name: Optional[str] = None
    
    discount_type: DiscountType = DiscountType.PERCENTAGE
    discount_value: float
    
    apply_to: ApplyToType = ApplyToType.PRODUCT
    target_identifiers: List[str] = []
    bundled_product_codes: List[str] = Field(default_factory=list, alias="bundledProductCodes")
    
    # Лимиты использования
    min_cart_qty: int = Field(default=1, ge=1)
    max_uses_per_user: int = Field(default=100, ge=1)
    total_uses_limit: int = Field(default=10000, ge=1)
    
    start_datetime: datetime
    end_datetime: datetime
    is_active: bool = True
    
    files: List[FileMetadata] = []
    terms_and_conditions: str = ""
    rules: str = ""
    terms_file: Optional[FileMetadata] = None

    class Config:
        populate_by_name = True

    def to_record(self) -> dict:
        """Словарь в формате хранилища (ключи как в pharmaplus_promotions)"""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class PromotionCreate(PromotionBase):
    pass


class PromotionUpdate(PromotionBase):
    """Полная замена акции (createdAt не меняется)"""
    pass


class PromotionResponse(PromotionBase):
    id: str
    created_at: Optional[str] = Field(default=None, alias="createdAt")
    claimed: Optional[int] = None


class PromotionDetailResponse(PromotionResponse):
    """Детальная страница акции"""
    status: PromotionStatus
    discount_label: str
    time_remaining: str
    days_active: int
    progress_percentage: int
    products: List[ProductResponse] = []
    files_total_size: str = "0 Bytes"


class PromotionStatsResponse(BaseModel):
    """Сводка для дашборда"""
    total: int
    active: int
    inactive: int
    by_status: Dict[str, int]
    by_apply_to: Dict[str, int]
    by_discount_type: Dict[str, int]
    by_promotion_type: Dict[str, int]
    recent: List[PromotionResponse]
