import logging

from config import logger as logger_module

SERVICE_VARS = ["OPENAI_API_KEY", "SENDGRID_API_KEY", "SUPABASE_URL",
                "SUPABASE_SERVICE_KEY", "SUPABASE_ANON_KEY"]


def test_warns_for_each_missing_service(monkeypatch, caplog):
    for name in SERVICE_VARS:
        monkeypatch.delenv(name, raising=False)

    with caplog.at_level(logging.WARNING):
        logger_module.warn_missing_settings()

    messages = [r.getMessage() for r in caplog.records]
    assert "OPENAI_API_KEY not set. AI news will use fallback content." in messages
    assert "SENDGRID_API_KEY not set. Newsletter distribution will fail." in messages
    assert "SUPABASE_URL not set. Subscriber lookups will fail." in messages
    assert "No subscriber database key set. Subscriber lookups will fail." in messages


def test_no_warnings_when_fully_configured(monkeypatch, caplog):
    for name in SERVICE_VARS:
        monkeypatch.setenv(name, "set")

    with caplog.at_level(logging.WARNING):
        logger_module.warn_missing_settings()

    assert caplog.records == []


def test_module_logger_name():
    assert logger_module.logger.name == "daily_good_vibes"
