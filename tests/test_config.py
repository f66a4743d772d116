import logging
from pathlib import Path

from linkvault_api.app.core.config import Settings
from linkvault_api.app.core.logging_config import _build_handlers, setup_logging


def test_cors_origin_list():
    settings = Settings(cors_origins=" http://a.example , http://b.example,, ")
    assert settings.cors_origin_list == ["http://a.example", "http://b.example"]


def test_setup_logging_is_idempotent():
    root = logging.getLogger()
    handlers = list(root.handlers)
    setup_logging("DEBUG")
    setup_logging("DEBUG")
    if handlers:
        assert root.handlers == handlers
    else:
        assert len(root.handlers) == 1


def test_log_file_handler_creates_directory(tmp_path):
    logfile = tmp_path / "logs" / "linkvault.log"
    handlers = _build_handlers(str(logfile))
    try:
        assert len(handlers) == 2
        assert isinstance(handlers[1], logging.FileHandler)
        assert logfile.parent.is_dir()
    finally:
        for handler in handlers:
            handler.close()


def test_console_only_without_log_file():
    handlers = _build_handlers("")
    assert len(handlers) == 1
    assert isinstance(handlers[0], logging.StreamHandler)


def test_import_time_app_does_not_use_project_database():
    from linkvault_api.app.main import app

    project_root = Path(__file__).resolve().parents[1]
    assert project_root not in app.state.store.path.resolve().parents
