from contextlib import contextmanager

from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate

db = SQLAlchemy()
migrate = Migrate()


@contextmanager
def store_session():
    """Сессия на одну операцию: commit при успехе, rollback при любой ошибке,
    соединение возвращается в пул на каждом пути выхода."""
    session = db.session
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
