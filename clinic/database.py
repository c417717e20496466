from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from .config import DATABASE_URL, DB_CONNECT_TIMEOUT, DB_POOL_TIMEOUT, SQL_ECHO


def engine_options(url: str) -> dict:
    """Driver-specific timeouts for the connection pool behind ``url``."""
    if url.startswith("sqlite"):
        # in-memory SQLite pools reject pool_timeout
        return {"connect_args": {"check_same_thread": False, "timeout": DB_CONNECT_TIMEOUT}}
    options = {"pool_pre_ping": True, "pool_timeout": DB_POOL_TIMEOUT}
    if url.startswith("mysql"):
        options["connect_args"] = {
            "connect_timeout": DB_CONNECT_TIMEOUT,
            "read_timeout": DB_POOL_TIMEOUT,
            "write_timeout": DB_POOL_TIMEOUT,
        }
    elif url.startswith("postgresql"):
        options["connect_args"] = {"connect_timeout": DB_CONNECT_TIMEOUT}
    return options


engine = create_engine(DATABASE_URL, echo=SQL_ECHO, **engine_options(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
