from studio_booking.config import DEFAULT_DATABASE_URL, load_settings, split_origins

ENV_KEYS = (
    "DATABASE_URL", "CORS_ORIGIN", "SMTP_HOST", "SMTP_PORT", "SMTP_SECURE", "SMTP_USER",
    "SMTP_PASS", "GMAIL_USER", "GMAIL_PASS", "NOTIFY_TO", "PUBLIC_BASE", "PORT",
    "MAIL_TIMEOUT", "OPEN_HOUR", "CLOSE_HOUR",
)


def clear_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults(monkeypatch):
    clear_env(monkeypatch)
    s = load_settings()
    assert s.database_url == DEFAULT_DATABASE_URL
    assert s.cors_origins == []
    assert s.smtp_host is None
    assert s.smtp_port == 587
    assert s.smtp_secure is False
    assert s.port == 10000
    assert (s.open_hour, s.close_hour) == (9, 17)


def test_reads_environment(monkeypatch):
    clear_env(monkeypatch)
    monkeypatch.setenv("CORS_ORIGIN", "https://a.example, https://b.example,,")
    monkeypatch.setenv("SMTP_HOST", "mail.example.com")
    monkeypatch.setenv("SMTP_PORT", "465")
    monkeypatch.setenv("SMTP_SECURE", "true")
    monkeypatch.setenv("NOTIFY_TO", "admin@example.com")
    monkeypatch.setenv("PUBLIC_BASE", "https://api.example/")
    monkeypatch.setenv("PORT", "8080")

    s = load_settings()
    assert s.cors_origins == ["https://a.example", "https://b.example"]
    assert (s.smtp_host, s.smtp_port, s.smtp_secure) == ("mail.example.com", 465, True)
    assert s.notify_to == "admin@example.com"
    assert s.public_base == "https://api.example"
    assert s.port == 8080


def test_split_origins_empty():
    assert split_origins("") == []
    assert split_origins(" , ") == []
