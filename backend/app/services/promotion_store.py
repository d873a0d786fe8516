"""
Хранилище акций поверх key-value носителя.

Вся коллекция читается и пишется целиком под одним ключом. Блокировок нет:
два параллельных read-modify-write могут затереть изменения друг друга.
"""
import json
import logging
from datetime import datetime
from typing import Callable, List, Optional

from app.core.config import settings
from app.core.utils import epoch_ms, isoformat_js, utcnow
from app.db.storage import StorageMedium
from app.services.migration import migrate_promotions, needs_migration

logger = logging.getLogger(__name__)


class PromotionStore:
    def __init__(
        self,
        storage: StorageMedium,
        key: Optional[str] = None,
        clock: Callable[[], datetime] = utcnow,
    ):
        self.storage = storage
        self.key = key or settings.PROMOTIONS_STORAGE_KEY
        self.clock = clock

    def load_all(self) -> List[dict]:
        """
        Все акции из хранилища.
        Ошибка разбора JSON не перехватывается.
        Если хоть одна запись неполная, мигрируем всю коллекцию и сразу пишем обратно.
        """
        raw = self.storage.get(self.key)
        if not raw:
            return []
        
        promotions = json.loads(raw)
        
        if any(needs_migration(p) for p in promotions):
            promotions = migrate_promotions(promotions)
            self._write(promotions)
            logger.info(f"Migrated {len(promotions)} promotions under '{self.key}'")
        
        return promotions

    def find_by_id(self, promotion_id: str) -> Optional[dict]:
        for promotion in self.load_all():
            if promotion.get("id") == promotion_id:
                return promotion
        return None

    def save(self, promotion: dict) -> dict:
        """Добавить новую акцию: назначает id и createdAt"""
        promotions = self.load_all()
        now = self.clock()
        
        saved = {
            **promotion,
            # Миллисекунды как id: в пределах одного тика возможна коллизия
            "id": str(epoch_ms(now)),
            "createdAt": isoformat_js(now),
        }
        promotions.append(saved)
        self._write(promotions)
        logger.debug(f"Promotion {saved['id']} created")
        return saved

    def remove(self, promotion_id: str) -> None:
        promotions = self.load_all()
        remaining = [p for p in promotions if p.get("id") != promotion_id]
        self._write(remaining)
        logger.debug(f"Promotion {promotion_id} removed ({len(promotions) - len(remaining)} records)")

    def update(self, promotion: dict) -> None:
        """
        Заменить акцию с тем же id, сохранив исходный createdAt.
        Если id не найден, ничего не происходит.
        """
        promotions = self.load_all()
        
        for index, existing in enumerate(promotions):
            if existing.get("id") == promotion.get("id"):
                updated = {key: value for key, value in promotion.items() if key != "createdAt"}
                if "createdAt" in existing:
                    updated["createdAt"] = existing["createdAt"]
                promotions[index] = updated
                self._write(promotions)
                logger.debug(f"Promotion {promotion.get('id')} updated")
                return

    def _write(self, promotions: List[dict]) -> None:
        self.storage.set(self.key, json.dumps(promotions, ensure_ascii=False, separators=(",", ":")))

