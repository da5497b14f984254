import os

# Must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from app.core.security import Role, create_access_token
from app.database import Base, SessionLocal, engine
from app.main import app
from app.utils.user import create_user


@pytest.fixture()
def db_session():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture()
def client(db_session):
    return TestClient(app)


def auth_header(user) -> dict:
    token = create_access_token(user.id, user.role, email=user.email)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture()
def customer(db_session):
    return create_user(db_session, "user1@sweetshop.com", "user123", "Regular User One", Role.USER)


@pytest.fixture()
def admin(db_session):
    return create_user(db_session, "admin1@sweetshop.com", "admin123", "Admin One", Role.ADMIN)


@pytest.fixture()
def super_admin(db_session):
    return create_user(db_session, "superadmin@sweetshop.com", "admin123", "Super Admin", Role.SUPER_ADMIN)


@pytest.fixture()
def customer_headers(customer):
    return auth_header(customer)


@pytest.fixture()
def admin_headers(admin):
    return auth_header(admin)


@pytest.fixture()
def super_admin_headers(super_admin):
    return auth_header(super_admin)


@pytest.fixture()
def make_sweet(client, admin_headers):
    def _make(name="Ladoo", category="Indian Sweet", price=10, quantity=5, **extra):
        body = {"name": name, "category": category, "price": price, "quantity": quantity, **extra}
        response = client.post("/sweets", json=body, headers=admin_headers)
        assert response.status_code == 201, response.text
        return response.json()["sweet"]
    return _make
