"""
Shared fixtures for mdinclude tests
"""

import pytest
from loguru import logger


@pytest.fixture
def warnings_captured():
    """Collect messages logged at WARNING level or above"""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="WARNING")
    yield messages
    logger.remove(handler_id)


@pytest.fixture
def write(tmp_path):
    """Write a file beneath tmp_path and return its path"""

    def _write(relative: str, text: str):
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        return path

    return _write
