# staffboard/database.py

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from staffboard.core.settings import settings


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """
    SQLite по умолчанию не проверяет внешние ключи — включаем PRAGMA на каждом соединении.
    """
    if engine.dialect.name != "sqlite":
        return

    @event.listens_for(engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

# Создаем движок подключения к БД
engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    connect_args=connect_args,
)
enable_sqlite_foreign_keys(engine)

# Фабрика сессий: одна сессия на запрос, транзакциями управляет UnitOfWork
SessionLocal = sessionmaker(
    autoflush=False,
    bind=engine,
    expire_on_commit=False,
)
