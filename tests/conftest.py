# File: tests/conftest.py
import logging

import pytest

from link_crawler.config import CrawlerConfig
from link_crawler.logger import LOGGER_NAME, init_logging


@pytest.fixture()
def fast_config() -> CrawlerConfig:
    """Config with short timeouts and no backoff delay for quick tests."""
    return CrawlerConfig(
        connect_timeout=1.0,
        read_timeout=1.0,
        max_retries=3,
        backoff_unit=0.0,
        join_timeout=5.0,
        shutdown_grace=1.0,
        max_concurrency=8,
    )


@pytest.fixture(autouse=True)
def reset_project_logger():
    """Undo handlers and propagation set up by the CLI so caplog keeps working."""
    yield
    lg = logging.getLogger(LOGGER_NAME)
    for handler in list(lg.handlers):
        lg.removeHandler(handler)
        handler.close()
    lg.setLevel(logging.NOTSET)
    lg.propagate = True


@pytest.fixture()
def diagnostics(caplog):
    """
    Apply the diagnostics toggle and capture the project logger in caplog.

    The project logger does not propagate once configured, so caplog's
    handler is attached to it directly.
    """
    lg = logging.getLogger(LOGGER_NAME)

    def _apply(debug: bool) -> None:
        lg.removeHandler(caplog.handler)
        caplog.clear()
        init_logging(debug=debug)
        lg.addHandler(caplog.handler)

    yield _apply
    lg.removeHandler(caplog.handler)
