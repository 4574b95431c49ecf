import io
import logging

import pytest
import structlog

from objtasks.config.logging import setup_logging
from objtasks.config.settings import Settings, get_settings
from objtasks.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.mark.unit
class TestSettings:
    def test_default_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("OBJTASKS_LOG_LEVEL", raising=False)
        monkeypatch.delenv("OBJTASKS_JSON_LOGS", raising=False)
        settings = Settings()
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.debug is False

    def test_settings_from_env(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OBJTASKS_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("OBJTASKS_JSON_LOGS", "true")
        settings = Settings()
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is True

    def test_get_settings_is_cached(self) -> None:
        assert get_settings() is get_settings()

    def test_unknown_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OBJTASKS_LOG_LEVEL", "LOUD")
        with pytest.raises(ConfigError):
            get_settings()


@pytest.mark.unit
class TestLogging:
    def test_setup_logging_configures_structlog(self) -> None:
        setup_logging(log_level="DEBUG", json_output=True, stream=io.StringIO())
        config = structlog.get_config()
        assert isinstance(config["processors"][-1], structlog.processors.JSONRenderer)
        assert isinstance(config["logger_factory"], structlog.stdlib.LoggerFactory)

    def test_reconfiguring_replaces_handler(self) -> None:
        first, second = io.StringIO(), io.StringIO()
        setup_logging(log_level="DEBUG", stream=first)
        setup_logging(log_level="WARNING", stream=second)
        package_logger = logging.getLogger("objtasks")
        assert len(package_logger.handlers) == 1
        assert package_logger.handlers[0].stream is second
        assert package_logger.level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self) -> None:
        setup_logging(log_level="nonsense", stream=io.StringIO())
        assert logging.getLogger("objtasks").level == logging.INFO

    def test_non_tty_stream_renders_json(self) -> None:
        setup_logging(stream=io.StringIO())
        assert isinstance(structlog.get_config()["processors"][-1], structlog.processors.JSONRenderer)
