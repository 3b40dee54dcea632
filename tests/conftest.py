import pytest


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch):
    """Start every test without the service's environment variables."""
    for name in ("PORT", "APP_ENV", "NODE_ENV"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def client():
    from app import create_app

    app = create_app()
    app.config.update(TESTING=True)

    with app.test_client() as test_client:
        yield test_client
