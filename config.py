from __future__ import annotations
import os
from urllib.parse import quote_plus


def database_uri() -> str | None:
    """DATABASE_URL или сборка URL из DB_HOST/DB_USER/DB_PASSWORD/DB_NAME."""
    url = os.getenv("DATABASE_URL")
    if url:
        return url
    host, user, password, name = (os.getenv(k) for k in ("DB_HOST", "DB_USER", "DB_PASSWORD", "DB_NAME"))
    if not (host and user and password and name):
        return None
    driver = os.getenv("DB_DRIVER", "mysql+pymysql")
    port = os.getenv("DB_PORT")
    netloc = f"{host}:{port}" if port else host
    return f"{driver}://{quote_plus(user)}:{quote_plus(password)}@{netloc}/{name}"


def _courts() -> tuple[str, ...]:
    raw = os.getenv("BOOKING_COURTS", "A,B")
    return tuple(c.strip() for c in raw.split(",") if c.strip())


class BaseConfig:
    SECRET_KEY = os.getenv("SECRET_KEY")
    # заполняется в create_app из окружения; встроенных учётных данных нет
    SQLALCHEMY_DATABASE_URI = None
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    SQLALCHEMY_ENGINE_OPTIONS = {"pool_pre_ping": True}
    JSON_SORT_KEYS = False
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    BOOKING_SLOT_PRICE = int(os.getenv("BOOKING_SLOT_PRICE", "500"))
    BOOKING_COURTS = _courts()


class DevConfig(BaseConfig):
    DEBUG = True


class ProdConfig(BaseConfig):
    DEBUG = False


class TestConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test"
    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    SQLALCHEMY_ENGINE_OPTIONS = {"connect_args": {"check_same_thread": False}}
    BOOKING_SLOT_PRICE = 500
    BOOKING_COURTS = ("A", "B")


config_map = {
    "dev": DevConfig,
    "prod": ProdConfig,
    "testing": TestConfig,
    "default": DevConfig,
}
