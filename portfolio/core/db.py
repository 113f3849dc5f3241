from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from .config import settings


def enable_sqlite_pragmas(engine: Engine, wal: bool = True) -> None:
    """
    Turns on foreign key enforcement for every new SQLite connection, so the
    ON DELETE CASCADE / SET NULL rules are applied by the database itself.
    """
    @event.listens_for(engine, "connect")
    def set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        try:
            cursor.execute("PRAGMA foreign_keys=ON;")
            if wal:
                cursor.execute("PRAGMA journal_mode=WAL;")
        finally:
            cursor.close()


is_sqlite = settings.DATABASE_URL.startswith("sqlite")

connect_args = {}
if is_sqlite:
    # The same connection may be used from FastAPI's threadpool workers.
    connect_args = {"check_same_thread": False, "timeout": 15}

engine = create_engine(
    settings.DATABASE_URL,
    connect_args=connect_args,
    pool_pre_ping=not is_sqlite,
)

if is_sqlite:
    # WAL is meaningless for in-memory databases.
    enable_sqlite_pragmas(engine, wal=":memory:" not in settings.DATABASE_URL and settings.DATABASE_URL != "sqlite://")


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

def get_db():
    """
    FastAPI dependency to get a database session.
    Ensures the session is always closed after the request.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
