"""
High score persistence.
NO UI DEPENDENCIES.

The best score is kept as a string-encoded integer under a fixed key in a
small JSON file, so it survives restarts.
"""
import json
import logging
from pathlib import Path
from typing import Union

from .constants import HIGHSCORE_KEY

logger = logging.getLogger(__name__)


class HighScoreStore:
    """Reads and writes the persisted high score."""

    def __init__(self, path: Union[str, Path], key: str = HIGHSCORE_KEY):
        self.path = Path(path)
        self.key = key

    def load(self) -> int:
        """
        Return the stored high score.
        A missing or unreadable value counts as no high score yet (0).
        """
        if not self.path.exists():
            return 0

        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
            score = int(data.get(self.key, "0"))
        except (OSError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Ignoring unreadable high score in {self.path}: {e}")
            return 0

        if score < 0:
            logger.warning(f"Ignoring negative high score {score} in {self.path}")
            return 0
        return score

    def save(self, score: int) -> None:
        """Store score, keeping any other keys already in the file."""
        data = {}
        if self.path.exists():
            try:
                loaded = json.loads(self.path.read_text(encoding="utf-8"))
                if isinstance(loaded, dict):
                    data = loaded
            except ValueError as e:
                logger.warning(f"Overwriting unreadable high score file {self.path}: {e}")

        data[self.key] = str(int(score))
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data), encoding="utf-8")

    def submit(self, score: int) -> bool:
        """
        Persist score if it beats the stored one.
        Returns True if a new high score was written.
        """
        if score <= self.load():
            return False
        self.save(score)
        return True
