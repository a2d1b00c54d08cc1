import logging
import os
import sys
from sqlmodel import Session, SQLModel, select

# Add the repository root to the path so `src` imports resolve
sys.path.append(os.path.dirname(os.path.dirname(os.path.dirname(
    os.path.dirname(os.path.abspath(__file__))))))

from src.api.auth.models.user import User  # noqa: E402
from src.api.common.utils.database import engine  # noqa: E402
from src.api.common.utils.encryption import hash_password  # noqa: E402
from src.api.customers.models.customer import Customer  # noqa: E402,F401
from src.api.invoices.models.invoice import Invoice  # noqa: E402,F401

logger = logging.getLogger(__name__)


def init_db(db_engine=engine):
    """Initialize the database by creating all tables"""
    logger.info("Creating database tables...")
    SQLModel.metadata.create_all(db_engine)
    logger.info("Database tables created successfully.")


def seed_user(session: Session, name: str, email: str, password: str) -> User:
    """Create a dashboard user unless one with that email already exists"""
    user = session.exec(select(User).where(User.email == email)).first()
    if user:
        logger.info(f"User {email} already exists")
        return user
    user = User(name=name, email=email, password=hash_password(password))
    session.add(user)
    session.commit()
    session.refresh(user)
    logger.info(f"Created user {email}")
    return user


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    init_db()
    email = os.getenv("SEED_USER_EMAIL")
    password = os.getenv("SEED_USER_PASSWORD")
    if email and password:
        with Session(engine) as session:
            seed_user(session, os.getenv("SEED_USER_NAME", "Admin"), email, password)
