"""
Tests for settings loading.
"""

from skillsphere.core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.delenv("JWT_SECRET", raising=False)
    settings = Settings(_env_file=None)
    assert settings.ACCESS_TOKEN_EXPIRE_MINUTES == 60
    assert settings.ALGORITHM == "HS256"
    assert settings.PORT == 5000


def test_jwt_secret_alias(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)
    monkeypatch.setenv("JWT_SECRET", "from-env")
    assert Settings(_env_file=None).SECRET_KEY == "from-env"


def test_cors_origins_from_comma_separated_env(monkeypatch):
    monkeypatch.setenv("BACKEND_CORS_ORIGINS", "https://a.example/, https://b.example")
    settings = Settings(_env_file=None)
    assert settings.BACKEND_CORS_ORIGINS == ["https://a.example", "https://b.example"]
