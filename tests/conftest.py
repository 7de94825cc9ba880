"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from the real log and config
directories.
"""

from __future__ import annotations

import logging
import logging.handlers
from unittest.mock import patch

import pytest

from tinytodo_cli.services import TaskService, TaskStore


# ---------------------------------------------------------------------------
# Filesystem isolation
# ---------------------------------------------------------------------------


def _drop_file_handlers() -> None:
    logger = logging.getLogger("tinytodo_cli")
    for handler in list(logger.handlers):
        if isinstance(handler, logging.handlers.RotatingFileHandler):
            logger.removeHandler(handler)
            handler.close()


@pytest.fixture(autouse=True)
def isolated_logger(tmp_path):
    """Send the application log to tmp_path and reset the logger singleton."""
    import tinytodo_cli.utils.logger as logger_mod

    log_dir = tmp_path / "logs"
    _drop_file_handlers()
    logger_mod._logger = None
    with patch("tinytodo_cli.utils.logger.user_log_dir", return_value=str(log_dir)):
        yield log_dir
    _drop_file_handlers()
    logger_mod._logger = None


@pytest.fixture(autouse=True)
def isolated_config(tmp_path):
    """Point ConfigService at tmp_path and clear the lru_cache around each test."""
    from tinytodo_cli.services.config_service import get_config_service
    from tinytodo_cli.utils.ui.console import set_color_enabled

    config_dir = tmp_path / "config"
    get_config_service.cache_clear()
    with patch(
        "tinytodo_cli.services.config_service.user_config_dir",
        return_value=str(config_dir),
    ):
        yield config_dir
    get_config_service.cache_clear()
    set_color_enabled(True)


# ---------------------------------------------------------------------------
# Core wiring
# ---------------------------------------------------------------------------


@pytest.fixture()
def store() -> TaskStore:
    return TaskStore()


@pytest.fixture()
def service(store) -> TaskService:
    return TaskService(store)

