from community_site.config import load_settings


def test_defaults(monkeypatch):
    for name in ("COMMUNITY_API_URL", "ALLOWED_ORIGINS", "VERCEL_URL", "STORE_BACKEND", "PORT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setattr("community_site.config.load_dotenv", lambda: None)

    settings = load_settings()

    assert settings.api_url == "http://localhost:5000"
    assert settings.store_backend == "mongo"
    assert settings.port == 5000
    assert settings.allowed_origins == ["http://localhost:5173", "http://localhost:5000"]


def test_overrides_from_environment(monkeypatch):
    monkeypatch.setattr("community_site.config.load_dotenv", lambda: None)
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("VERCEL_URL", "preview-123.vercel.app")
    monkeypatch.setenv("STORE_BACKEND", "Memory")
    monkeypatch.setenv("FETCH_TIMEOUT_SEC", "2.5")

    settings = load_settings()

    assert settings.allowed_origins == [
        "https://a.example",
        "https://b.example",
        "https://preview-123.vercel.app",
    ]
    assert settings.store_backend == "memory"
    assert settings.fetch_timeout_sec == 2.5
