import logging
from typing import Generator

import pytest

from delete_package_version.logging import get_logger
from delete_package_version.testing.fixtures import (  # noqa: F401
    action_config,
    mock_client,
    mock_client_with_versions,
    sample_coordinate,
    sample_versions,
)


@pytest.fixture
def restore_package_handlers() -> Generator[None, None, None]:
    """Drop handlers installed by configure_logging during a test."""
    logger = get_logger()
    before = list(logger.handlers)
    yield
    for handler in list(logger.handlers):
        if handler not in before:
            logger.removeHandler(handler)


@pytest.fixture
def caplog_info(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """caplog capturing the package loggers at INFO."""
    caplog.set_level(logging.INFO, logger="delete_package_version")
    return caplog
