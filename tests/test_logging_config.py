import logging

from rich.logging import RichHandler

from eui64tool.logging_config import setup_logging


def test_setup_logging_replaces_handlers():
    root = logging.getLogger()
    saved = (root.level, root.handlers[:])
    try:
        root.addHandler(logging.NullHandler())
        setup_logging("debug")
        assert root.level == logging.DEBUG
        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)
    finally:
        root.handlers[:] = saved[1]
        root.setLevel(saved[0])
