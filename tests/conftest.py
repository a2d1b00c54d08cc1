import os
from cryptography.fernet import Fernet

# Must be set before the application modules build the engine and cipher
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTH_SECRET", Fernet.generate_key().decode())
os.environ["ENV"] = "test"

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

# Import all models to ensure they're registered with SQLModel
from src.api.auth.models.user import User  # noqa: E402
from src.api.customers.models.customer import Customer  # noqa: E402
from src.api.invoices.models.invoice import Invoice  # noqa: E402
from src.api.common.utils.cache import PageCache, page_cache  # noqa: E402
from src.api.common.utils.database import get_db  # noqa: E402
from src.api.common.utils.encryption import hash_password  # noqa: E402


@pytest.fixture
def test_engine():
    """Create an in-memory SQLite database for testing"""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    return engine


@pytest.fixture
def test_session(test_engine):
    """Create a test database session"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture
def test_cache():
    """Fresh page cache so tests can see exactly what was revalidated"""
    return PageCache()


@pytest.fixture
def sample_invoice_form():
    """Valid invoice form as submitted by the browser"""
    return {
        "customerId": "c1",
        "amount": "125.50",
        "status": "pending",
    }


@pytest.fixture
def sample_user_data():
    """Sample login credentials for testing"""
    return {
        "name": "User",
        "email": "user@nextmail.com",
        "password": "123456",
    }


# Test data factories
class TestDataFactory:
    @staticmethod
    def create_customer(session: Session, **kwargs) -> Customer:
        """Create a test customer"""
        data = {
            "id": "c1",
            "name": "Evil Rabbit",
            "email": "evil@rabbit.com",
            "image_url": "/customers/evil-rabbit.png",
        }
        data.update(kwargs)

        customer = Customer(**data)
        session.add(customer)
        session.commit()
        session.refresh(customer)
        return customer

    @staticmethod
    def create_invoice(session: Session, customer_id: str = "c1", **kwargs) -> Invoice:
        """Create a test invoice"""
        data = {
            "customer_id": customer_id,
            "amount": 15795,
            "status": "pending",
            "date": "2024-01-15",
        }
        data.update(kwargs)

        invoice = Invoice(**data)
        session.add(invoice)
        session.commit()
        session.refresh(invoice)
        return invoice

    @staticmethod
    def create_user(session: Session, email: str = "user@nextmail.com",
                    password: str = "123456", **kwargs) -> User:
        """Create a test user with a hashed password"""
        data = {"name": "User", "email": email, "password": hash_password(password)}
        data.update(kwargs)

        user = User(**data)
        session.add(user)
        session.commit()
        session.refresh(user)
        return user


@pytest.fixture
def test_data_factory():
    """Provide test data factory"""
    return TestDataFactory


@pytest.fixture
def app(test_session):
    """Application wired to the test database"""
    from src.main import create_app

    application = create_app()

    def override_get_db():
        yield test_session

    application.dependency_overrides[get_db] = override_get_db
    page_cache.clear()
    yield application
    page_cache.clear()


@pytest.fixture
def client(app):
    """HTTP client that reports redirects instead of following them"""
    return TestClient(app, follow_redirects=False)
