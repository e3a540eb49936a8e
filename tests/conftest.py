import logging

import pytest

from tgf.logs import ExitStreamHandler


@pytest.fixture(autouse=True)
def reset_logging():
    """Remove handlers installed by setup_logging during a test."""
    yield
    root = logging.getLogger()
    for handler in list(root.handlers):
        if isinstance(handler, ExitStreamHandler):
            root.removeHandler(handler)
    root.setLevel(logging.WARNING)
