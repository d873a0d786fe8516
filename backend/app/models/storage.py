from sqlmodel import SQLModel, Field
from datetime import datetime, timezone


class StorageEntry(SQLModel, table=True):
    """Одна запись key-value хранилища (аналог localStorage)"""
    __tablename__ = "storage_entries"
    
    key: str = Field(primary_key=True)
    value: str
    
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
