import os

#ustawienia musza byc przed pierwszym importem storefront.utils.settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["REDIS_URL"] = ""
os.environ["JWT_SECRET"] = "test-secret-do-not-use-0123456789abcdef"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from storefront.api import create_app
from storefront.api.dependencies import (
    get_asset_storage,
    get_lock_service,
    get_password_hasher,
    get_token_service,
)
from storefront.data.database import Base, get_db, make_engine
from storefront.data.models import UserModel, ProductModel  # noqa: F401
from storefront.services.asset_storage import AssetStorage
from storefront.services.auth_service import AuthService
from storefront.services.password_hasher import PasswordHasher
from storefront.services.token_service import SessionTokenService

TEST_SECRET = "test-secret-do-not-use-0123456789abcdef"


@pytest.fixture
def engine(tmp_path):
    #plikowa baza - kilka sesji naraz widzi te same dane
    engine = make_engine(f"sqlite:///{tmp_path / 'storefront.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return SessionTokenService(secret=TEST_SECRET)


@pytest.fixture
def auth_service(db, hasher, token_service):
    return AuthService(db=db, hasher=hasher, token_service=token_service)


@pytest.fixture
def upload_dir(tmp_path):
    return tmp_path / "images"


@pytest.fixture
def client(session_factory, hasher, token_service, upload_dir):
    app = create_app(upload_dir=str(upload_dir))

    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: hasher
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_lock_service] = lambda: None
    app.dependency_overrides[get_asset_storage] = lambda: AssetStorage(
        directory=str(upload_dir), base_url="http://testserver"
    )

    with TestClient(app) as c:
        yield c
