"""
Seed-скрипт: демо-акции, если коллекция пуста
Запуск: python -m app.scripts.seed_promotions
"""
import time
from datetime import timedelta
from app.core.utils import utcnow
from app.db.session import create_tables
from app.db.storage import SQLStorage
from app.models.promotion import ApplyToType, DiscountType, PromotionType
from app.schemas.promotion import PromotionCreate
from app.services.promotion_store import PromotionStore


def demo_promotions() -> list:
    """Демо-акции: обычная скидка на товары и партнёрский бандл"""
    now = utcnow()
    return [
        PromotionCreate(
            name="Pain Relief Week",
            description="10% off selected pain relief products",
            discount_type=DiscountType.PERCENTAGE,
            discount_value=10,
            apply_to=ApplyToType.PRODUCT,
            target_identifiers=["A0001", "A0002", "A0003"],
            start_datetime=now,
            end_datetime=now + timedelta(days=7),
        ),
        PromotionCreate(
            name="Winter Immunity Bundle",
            description="Vitamin C and multivitamin together for less",
            promotion_type=PromotionType.PARTNER,
            partner_name="HealthCo",
            discount_type=DiscountType.FIXED,
            discount_value=250,
            apply_to=ApplyToType.BUNDLE,
            bundled_product_codes=["B0001", "B0002"],
            start_datetime=now + timedelta(days=1),
            end_datetime=now + timedelta(days=31),
        ),
    ]


def seed_promotions(store: PromotionStore) -> int:
    """Создание демо-акций если их нет"""
    existing = store.load_all()
    if existing:
        print(f"Promotions already exist: {len(existing)}")
        return 0
    
    created = 0
    for data in demo_promotions():
        promo = store.save(data.to_record())
        # следующий id должен попасть в другую миллисекунду
        time.sleep(0.002)
        created += 1
        print(f"Promotion created: {promo['name']}")
    return created


def main():
    print("Creating tables...")
    create_tables()
    print("Seeding promotions...")
    seed_promotions(PromotionStore(SQLStorage()))
    print("Done!")


if __name__ == "__main__":
    main()
