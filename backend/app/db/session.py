from sqlmodel import SQLModel, create_engine
from app.core.config import settings

connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, connect_args=connect_args)


def create_tables(bind=None):
    """Создание всех таблиц"""
    # Импорт регистрирует таблицы в metadata
    from app.models import storage  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)
