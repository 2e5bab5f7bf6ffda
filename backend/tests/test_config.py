"""Tests for environment-driven settings."""

from app.config import Settings


def test_defaults(monkeypatch):
    for name in ("POLYGON_API_KEY", "PORT", "HOST", "CORS_ORIGIN", "REQUEST_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    settings = Settings(_env_file=None)

    assert settings.polygon_api_key == ""
    assert settings.port == 8080
    assert settings.cors_origin == "http://localhost:3000"
    assert settings.request_timeout == 25.0


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("POLYGON_API_KEY", "abc123")
    monkeypatch.setenv("PORT", "9090")

    settings = Settings(_env_file=None)

    assert settings.polygon_api_key == "abc123"
    assert settings.port == 9090


def test_reads_dotenv_file(tmp_path, monkeypatch):
    monkeypatch.delenv("POLYGON_API_KEY", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("POLYGON_API_KEY=from-file\n")

    settings = Settings(_env_file=env_file)

    assert settings.polygon_api_key == "from-file"
