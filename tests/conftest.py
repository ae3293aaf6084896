import logging

import pytest


@pytest.fixture(autouse=True)
def restore_root_logger():
    """StructuredLogger.setup_logging replaces root handlers; undo it per test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
