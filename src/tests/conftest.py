import pytest
from sqlalchemy import create_engine

from jalali_convert.sql_functions import register_jalali_functions


def pytest_addoption(parser):
    parser.addoption(
        "--db-url",
        action="store",
        default="sqlite://",
        help="SQLAlchemy URL of the database the jalali functions are registered on (default: in-memory SQLite)",
    )


@pytest.fixture(scope="session")
def db_url(request):
    return request.config.getoption("--db-url")


@pytest.fixture(scope="session")
def db_engine(db_url):
    """Engine with jalali_to_gregorian / gregorian_to_jalali available in SQL."""
    engine = register_jalali_functions(create_engine(db_url))
    yield engine
    engine.dispose()


@pytest.fixture
def fresh_engine():
    """Private in-memory database per test, for tests that create tables."""
    engine = register_jalali_functions(create_engine("sqlite://"))
    yield engine
    engine.dispose()
