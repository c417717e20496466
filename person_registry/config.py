import os

from dotenv import load_dotenv

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


DATABASE_URL = os.getenv("PERSON_DATABASE_URL", os.getenv("DATABASE_URL", "sqlite:///./persons.db"))

HOST = os.getenv("PERSON_HOST", "0.0.0.0")
PORT = int(os.getenv("PERSON_PORT", "8080"))

DB_CONNECT_TIMEOUT = int(os.getenv("DB_CONNECT_TIMEOUT", "10"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "30"))

CREATE_TABLES = _flag("CREATE_TABLES", "true")
SQL_ECHO = _flag("SQL_ECHO", "false")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
