"""
Key-value носители для хранилища акций.

Вся коллекция лежит под одним ключом одной строкой JSON, носитель значения
не интерпретирует.
"""
from datetime import datetime, timezone
from typing import Dict, Optional, Protocol

from sqlmodel import Session

from app.db.session import engine as default_engine
from app.models.storage import StorageEntry


class StorageMedium(Protocol):
    def get(self, key: str) -> Optional[str]:
        ...

    def set(self, key: str, value: str) -> None:
        ...


class InMemoryStorage:
    """Носитель в памяти процесса (тесты, демо)"""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class SQLStorage:
    """Постоянный носитель поверх таблицы storage_entries"""

    def __init__(self, engine=None):
        self.engine = engine or default_engine

    def get(self, key: str) -> Optional[str]:
        with Session(self.engine) as session:
            entry = session.get(StorageEntry, key)
            return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        with Session(self.engine) as session:
            entry = session.get(StorageEntry, key)
            if entry:
                entry.value = value
                entry.updated_at = datetime.now(timezone.utc)
            else:
                entry = StorageEntry(key=key, value=value)
            session.add(entry)
            session.commit()
