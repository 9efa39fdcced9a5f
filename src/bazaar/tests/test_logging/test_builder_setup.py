import logging

from bazaar.core.logging.builder import make_dict_config, setup_logging


# Minimal Settings-like object; the builder only reads these attributes
class DummySettings:
    LOG_FORMAT = "json"
    LOG_LEVEL = "INFO"
    LOG_TO_STDOUT = False
    LOG_DIR = None  # set per test
    LOG_MAX_BYTES = 1000
    LOG_BACKUP_COUNT = 1
    ENV = "development"
    ENABLE_SQL_LOGGING = False


def test_make_dict_config_contains_file_handlers(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path
    cfg = make_dict_config(settings)

    assert "console" in cfg["handlers"]
    # file logging when not writing to stdout
    assert "file" in cfg["handlers"]
    assert "error_file" in cfg["handlers"]
    assert "error_console" not in cfg["handlers"]
    assert cfg["handlers"]["file"]["filename"] == str(tmp_path / "app.log")
    assert "json" in cfg["formatters"]
    assert set(cfg["filters"]) == {"request_id", "redact"}


def test_make_dict_config_stdout_mode_has_no_files(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path
    settings.LOG_TO_STDOUT = True
    cfg = make_dict_config(settings)

    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["loggers"][""]["handlers"] == ["console", "error_console"]


def test_sql_logging_is_opt_in(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path
    assert make_dict_config(settings)["loggers"]["sqlalchemy.engine"]["level"] == "WARNING"

    settings.ENABLE_SQL_LOGGING = True
    assert make_dict_config(settings)["loggers"]["sqlalchemy.engine"]["level"] == "DEBUG"


def test_text_format_uses_standard_formatter(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path
    settings.LOG_FORMAT = "text"
    cfg = make_dict_config(settings)

    assert cfg["handlers"]["console"]["formatter"] == "standard"
    # error files stay structured
    assert cfg["handlers"]["error_file"]["formatter"] == "json"


def test_setup_logging_creates_log_dir(tmp_path):
    settings = DummySettings()
    settings.LOG_DIR = tmp_path / "logs"
    assert not settings.LOG_DIR.exists()

    setup_logging(settings)

    assert settings.LOG_DIR.exists()
    root = logging.getLogger()
    assert root.handlers
