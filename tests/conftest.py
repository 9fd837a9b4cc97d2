import pytest
from sqlalchemy.orm import sessionmaker

import rentaldb.models  # noqa: F401
from rentaldb.database import Base, create_db_engine
from rentaldb.services.seed_service import seed_service

# ---------- TEST FIXTURES ----------

# Use in-memory SQLite for test isolation
TEST_DATABASE_URL = "sqlite:///:memory:"


@pytest.fixture(scope="session")
def engine():
    engine = create_db_engine(TEST_DATABASE_URL, echo=False)
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def db_session(engine):
    """A new DB session for each test, rolled back afterwards."""
    connection = engine.connect()
    transaction = connection.begin()
    Session = sessionmaker(
        bind=connection,
        autoflush=False,
        expire_on_commit=False,
        join_transaction_mode="create_savepoint",
    )
    session = Session()
    yield session
    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def seeded_session(db_session):
    """Session over a schema holding the sample data."""
    seed_service.load(db_session)
    return db_session


@pytest.fixture(scope="function")
def loose_engine():
    """Separate in-memory database that does not enforce foreign keys."""
    engine = create_db_engine(TEST_DATABASE_URL, echo=False, enforce_foreign_keys=False)
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def sqlite_url(tmp_path):
    return f"sqlite:///{tmp_path / 'rental.db'}"
