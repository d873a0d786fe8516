from enum import Enum


class DiscountType(str, Enum):
    PERCENTAGE = "PERCENTAGE"
    FIXED = "FIXED"


class ApplyToType(str, Enum):
    PRODUCT = "PRODUCT"
    BUNDLE = "BUNDLE"


class PromotionType(str, Enum):
    PHARMAPLUS = "PHARMAPLUS"
    PARTNER = "PARTNER"


class PromotionStatus(str, Enum):
    INACTIVE = "inactive"
    SCHEDULED = "scheduled"
    RUNNING = "running"
    EXPIRED = "expired"
