from __future__ import annotations

import logging
from typing import List

logger = logging.getLogger(__name__)


class Journal:
    """
    Log sink shared by the machine and its payment processor.

    Keeps every message in memory (for the demo output and tests) and
    forwards it to the standard logger at INFO.
    """

    def __init__(self) -> None:
        self.entries: List[str] = []

    def log(self, message: str) -> None:
        self.entries.append(message)
        logger.info(message)
