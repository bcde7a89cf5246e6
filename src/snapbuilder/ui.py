import logging
from typing import List

logger = logging.getLogger(__name__)


class LoggingUi:
    """Routes build messages to the ``snapbuilder.ui`` logger."""

    def say(self, message: str) -> None:
        logger.info(message)

    def error(self, message: str) -> None:
        logger.error(message)


class MemoryUi:
    """Keeps build messages in memory, for embedding callers and tests."""

    def __init__(self):
        self.said: List[str] = []
        self.errors: List[str] = []

    def say(self, message: str) -> None:
        self.said.append(message)

    def error(self, message: str) -> None:
        self.errors.append(message)
