# src/mazechase/persistence.py
# Best-score scalar stored as a bare integer string.

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PATH = os.path.join(os.path.expanduser("~"), ".mazechase_best")


class BestScoreStore:
    def __init__(self, path: str = DEFAULT_PATH):
        self.path = path

    def load(self) -> int:
        """Missing, unreadable or garbled files all read as 0."""
        try:
            with open(self.path, encoding="utf-8") as f:
                raw = f.read().strip()
        except FileNotFoundError:
            return 0
        except OSError as e:
            logger.warning("Could not read best score from %s: %s", self.path, e)
            return 0
        try:
            value = int(raw)
        except ValueError:
            logger.warning("Ignoring corrupt best score %r in %s", raw, self.path)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(f"{int(value)}")
        except OSError as e:
            logger.warning("Could not write best score to %s: %s", self.path, e)
