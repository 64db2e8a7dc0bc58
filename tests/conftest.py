from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path

import pytest

from querylog.core import ColumnDefinition, Host, PreparedStatement, types
from querylog.observability import ObservabilityConfig, QueryLogger
from querylog.utils.logging import ROOT_LOGGER_NAME

here = Path(__file__).parent
root_path = here.parent


@pytest.fixture(autouse=True)
def restore_querylog_logging() -> Generator[None, None, None]:
    """Undo handler, level and propagation changes made to the querylog root logger."""
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    handlers = list(root_logger.handlers)
    level = root_logger.level
    propagate = root_logger.propagate
    yield
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)
    root_logger.propagate = propagate


@pytest.fixture
def host() -> Host:
    return Host("127.0.0.1")


@pytest.fixture
def config() -> ObservabilityConfig:
    return ObservabilityConfig()


@pytest.fixture
def query_logger(config: ObservabilityConfig) -> QueryLogger:
    return QueryLogger(config)


@pytest.fixture
def update_statement() -> PreparedStatement:
    return PreparedStatement(
        "UPDATE t SET c=? WHERE pk=?", (ColumnDefinition("c", types.TEXT), ColumnDefinition("pk", types.INT))
    )
