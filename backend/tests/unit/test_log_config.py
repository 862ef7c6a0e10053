"""Unit tests for the per-category logging setup."""

import logging

import pytest

from app.config import Settings
from app.infrastructure.logging import setup_logging


@pytest.fixture(autouse=True)
def _restore_levels():
    names = ["", "sqlalchemy.engine", "uvicorn.access", "app.application"]
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_setup_logging_applies_category_levels():
    settings = Settings(
        _env_file=None,
        log_level="DEBUG",
        log_level_sql="ERROR",
        log_level_uvicorn="WARNING",
        log_level_api="INFO",
    )

    setup_logging(settings)

    assert logging.getLogger().level == logging.DEBUG
    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
    assert logging.getLogger("app.application").level == logging.INFO


def test_setup_logging_falls_back_to_info_for_unknown_levels():
    setup_logging(Settings(_env_file=None, log_level_sql="chatty"))
    assert logging.getLogger("sqlalchemy.engine").level == logging.INFO
