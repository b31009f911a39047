import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from app.config import Settings, get_settings
from app.database import get_db, get_engine, init_db
from app.main import app


@pytest.fixture
def test_settings():
    return Settings(secret_key="test-secret", environment="development")


@pytest.fixture
def test_db(tmp_path):
    engine = get_engine(f"sqlite:///{tmp_path / 'db.sqlite'}")
    init_db(engine)
    TestSession = sessionmaker(bind=engine, autoflush=False, autocommit=False)

    def override_get_db():
        db = TestSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestSession
    app.dependency_overrides.clear()
    engine.dispose()


@pytest.fixture
def client(test_db, test_settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    return TestClient(app)


@pytest.fixture
def make_job():
    def _make_job(**overrides) -> dict:
        job = {
            "title": "Logo Design",
            "category": "design",
            "deadline": "2024-06-01",
            "description": "A logo for a coffee shop",
            "min_price": 50,
            "max_price": 150,
            "buyer": {"email": "buyer@x.com", "name": "Buyer", "photo": "https://example.com/b.png"},
        }
        job.update(overrides)
        return job

    return _make_job


@pytest.fixture
def make_bid():
    def _make_bid(job_id: str, **overrides) -> dict:
        bid = {
            "jobId": job_id,
            "email": "seller@x.com",
            "buyer": "buyer@x.com",
            "price": 100,
            "comment": "I can do this",
            "status": "Pending",
        }
        bid.update(overrides)
        return bid

    return _make_bid
