import pytest
from datetime import datetime, timedelta
from fastapi.testclient import TestClient
from sqlmodel import create_engine

from app.core.config import settings
from app.db.session import create_tables
from app.db.storage import InMemoryStorage, SQLStorage
from app.services.promotion_store import PromotionStore


class TickingClock:
    """Часы, которые сдвигаются на 1 мс при каждом вызове"""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(milliseconds=1)
        return current


@pytest.fixture()
def storage():
    return InMemoryStorage()


@pytest.fixture()
def clock():
    return TickingClock(datetime(2024, 3, 1, 9, 30, 0))


@pytest.fixture()
def store(storage, clock):
    return PromotionStore(storage, key=settings.PROMOTIONS_STORAGE_KEY, clock=clock)


@pytest.fixture()
def promotion_data():
    """Полная (уже мигрированная) акция без id"""
    return {
        "name": "Pain Relief Week",
        "description": "10% off pain relief",
        "promotion_type": "PHARMAPLUS",
        "discount_type": "PERCENTAGE",
        "discount_value": 10,
        "apply_to": "PRODUCT",
        "target_identifiers": ["A0001", "A0002"],
        "bundledProductCodes": [],
        "min_cart_qty": 1,
        "max_uses_per_user": 100,
        "total_uses_limit": 10000,
        "start_datetime": "2024-03-02T09:00",
        "end_datetime": "2024-03-09T09:00",
        "is_active": True,
        "files": [{"name": "banner.png", "size": 2048, "type": "image/png"}],
        "terms_and_conditions": "",
        "rules": "",
    }


@pytest.fixture()
def client(storage, monkeypatch):
    """Клиент API с хранилищем в памяти и без задержки"""
    from app.main import app
    from app.api.deps import get_storage

    monkeypatch.setattr(settings, "SIMULATED_LATENCY_MS", 0)
    app.dependency_overrides[get_storage] = lambda: storage
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture()
def sql_engine(tmp_path):
    """Временный SQLite с таблицей storage_entries"""
    engine = create_engine(
        f"sqlite:///{tmp_path / 'storage.db'}",
        connect_args={"check_same_thread": False},
    )
    create_tables(engine)
    yield engine
    engine.dispose()


@pytest.fixture()
def sql_client(sql_engine, monkeypatch):
    """Клиент API поверх того же SQL-носителя, что и в продакшене"""
    from app.main import app
    from app.api.deps import get_storage

    monkeypatch.setattr(settings, "SIMULATED_LATENCY_MS", 0)
    app.dependency_overrides[get_storage] = lambda: SQLStorage(sql_engine)
    yield TestClient(app)
    app.dependency_overrides.clear()
