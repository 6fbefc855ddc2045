# init_db.py
import logging
from decimal import Decimal
from sqlalchemy.orm import sessionmaker
from app import config
from app.database import Base, build_engine, build_session_factory
from app.db.models import User, Store, Product

logger = logging.getLogger(__name__)

def seed(session_factory: sessionmaker) -> None:
    """Add a demo user owning one store with one product, unless users exist."""
    db = session_factory()
    try:
        if db.query(User).first():
            return

        user = User(name="Demo Owner", email="owner@example.com", password="changeme")
        store = Store(name="Demo Store", user=user)
        db.add_all([
            user,
            store,
            Product(name="Demo Product", price=Decimal("19.99"), store=store),
        ])
        db.commit()
        logger.info("Seed data added")
    finally:
        db.close()

def init(database_url: str = config.DATABASE_URL) -> None:
    engine = build_engine(database_url, echo=config.SQL_ECHO)
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Tables created")
        seed(build_session_factory(engine))
    finally:
        engine.dispose()

if __name__ == "__main__":
    logging.basicConfig(level=config.LOG_LEVEL)
    init()
