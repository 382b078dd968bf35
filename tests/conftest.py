"""Shared fixtures for catalog tests."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from archive_api.core.database import build_engine, get_db
from archive_api.core.storage import FileStore, get_file_store
from archive_api.main import app
from archive_api.models import Base, Category, Folder, Subcategory


@pytest.fixture
def engine(tmp_path):
    """File-backed SQLite engine with the full catalog schema.

    Yields:
        Engine bound to a throwaway database.
    """
    engine = build_engine(f"sqlite:///{tmp_path / 'catalog.db'}")
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    """Session for service-level tests.

    Yields:
        Open Session, closed after the test.
    """
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def store(tmp_path):
    """Content area inside the test's temporary directory.

    Returns:
        FileStore writing under tmp_path/files.
    """
    return FileStore(str(tmp_path / 'files'))


@pytest.fixture
def client(session_factory, store):
    """HTTP client wired to the test database and content area.

    Yields:
        TestClient for the application.
    """
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_file_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def category(db):
    category = Category(name='Legal')
    db.add(category)
    db.commit()
    db.refresh(category)
    return category


@pytest.fixture
def subcategory(db, category):
    subcategory = Subcategory(name='Contracts', category_id=category.id)
    db.add(subcategory)
    db.commit()
    db.refresh(subcategory)
    return subcategory


@pytest.fixture
def folder(db, subcategory):
    folder = Folder(name='2024', subcategory_id=subcategory.id)
    db.add(folder)
    db.commit()
    db.refresh(folder)
    return folder
