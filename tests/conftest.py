import pytest

from presenter.core.config import get_settings

from fixtures import User, make_users


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    monkeypatch.delenv("PRESENTER_PAGE_NAME", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def user() -> User:
    return User("Jane", "Doe", "jane@example.com")


@pytest.fixture
def users() -> list[User]:
    return make_users(3)
