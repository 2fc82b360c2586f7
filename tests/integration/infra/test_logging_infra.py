from __future__ import annotations

"""
Integration tests for Logging Infrastructure.

Verifies the QueueListener architecture, idempotent configuration,
log file rotation and teardown.
"""

import logging
import time
from pathlib import Path

import pytest

from treewright.infra.logging import (
    _CONFIGURED_FLAG_ATTR,
    _HANDLER_TAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    LoggingConfig,
    configure_logging,
    shutdown_logging,
)


@pytest.fixture(autouse=True)
def reset_logging():
    """Detach our handlers before and after each test."""
    shutdown_logging()
    yield
    shutdown_logging()


def test_logging_idempotency() -> None:
    """TC-01: Repeated configuration does not duplicate handlers."""
    cfg = LoggingConfig(level="INFO", console=True)

    configure_logging(cfg)
    root = logging.getLogger()
    initial_handler_count = len(root.handlers)

    configure_logging(cfg)
    assert len(root.handlers) == initial_handler_count, "Handlers were duplicated."


def test_force_reconfigures_level() -> None:
    """TC-02: force=True replaces the previous setup."""
    configure_logging(LoggingConfig(level="INFO"))
    configure_logging(LoggingConfig(level="DEBUG"), force=True)

    root = logging.getLogger()
    ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]
    assert root.level == logging.DEBUG
    assert len(ours) == 1


def test_log_rotation(tmp_path: Path) -> None:
    """TC-03: The log file rotates once the size limit is exceeded."""
    log_file = tmp_path / "logs" / "treewright.log"
    cfg = LoggingConfig(
        level="DEBUG",
        console=False,
        log_file=str(log_file),
        max_bytes=100,
        backup_count=1,
    )

    configure_logging(cfg)
    logger = logging.getLogger("test_rotate")
    for _ in range(10):
        logger.debug("This is a long log message to trigger rotation." * 5)

    # Let the listener thread drain the queue
    time.sleep(0.5)

    assert log_file.exists()
    assert (tmp_path / "logs" / "treewright.log.1").exists(), "Rotation backup file was not created."


def test_queue_listener_architecture() -> None:
    """TC-04: The root logger receives a single tagged QueueHandler."""
    configure_logging(LoggingConfig(level="INFO", console=True))

    root = logging.getLogger()
    tagged = [h for h in root.handlers if getattr(h, _HANDLER_TAG_ATTR, False)]

    assert len(tagged) == 1
    assert getattr(root, _QUEUE_LISTENER_ATTR) is not None


def test_shutdown_detaches_handlers() -> None:
    """TC-05: shutdown_logging restores an unconfigured root logger."""
    configure_logging(LoggingConfig(level="INFO"))
    shutdown_logging()

    root = logging.getLogger()
    assert not any(getattr(h, _HANDLER_TAG_ATTR, False) for h in root.handlers)
    assert not hasattr(root, _CONFIGURED_FLAG_ATTR)
