"""
Pattern memory: persistent map from line signature to a learned score delta.

The store is read fresh from its backend on every load; concurrent writers
(two games sharing one file) race and the last write wins.
"""

import json
import logging
import os
from abc import ABC, abstractmethod
from typing import Dict, Mapping, Optional

from tictactoe.ai.config import default_memory_path

logger = logging.getLogger(__name__)

PatternScores = Dict[str, int]


def _validated(data: object) -> Optional[PatternScores]:
    """
    Return data as a str -> int map, or None if it is not a JSON object.

    Integral floats (2.0) are kept as ints; any other bad entry is skipped.
    """
    if not isinstance(data, dict):
        return None
    scores: PatternScores = {}
    for key, value in data.items():
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            logger.warning("Skipping pattern %r with non-integer score %r", key, value)
            continue
        if isinstance(value, float):
            if not value.is_integer():
                logger.warning("Skipping pattern %r with non-integer score %r", key, value)
                continue
            value = int(value)
        scores[key] = value
    return scores


class MemoryBackend(ABC):
    """Load/save of one flat pattern-score record."""

    @abstractmethod
    def load(self) -> PatternScores:
        """Return the stored map; empty if absent or unreadable."""
        raise NotImplementedError

    @abstractmethod
    def save(self, scores: Mapping[str, int]) -> None:
        raise NotImplementedError


class InMemoryBackend(MemoryBackend):
    """Keeps the record as serialized JSON in the process, like a browser storage slot."""

    def __init__(self, raw: Optional[str] = None) -> None:
        self.raw = raw

    def load(self) -> PatternScores:
        if self.raw is None:
            return {}
        try:
            data = json.loads(self.raw)
        except ValueError:
            logger.warning("Pattern memory is not valid JSON; starting empty")
            return {}
        scores = _validated(data)
        if scores is None:
            logger.warning("Pattern memory has an unexpected shape; starting empty")
            return {}
        return scores

    def save(self, scores: Mapping[str, int]) -> None:
        self.raw = json.dumps(dict(scores), sort_keys=True)


class JsonFileBackend(MemoryBackend):
    """One JSON file holding the whole record."""

    def __init__(self, path: Optional[str] = None) -> None:
        self.path = path or default_memory_path()

    def load(self) -> PatternScores:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Could not read pattern memory %s: %s; starting empty", self.path, e)
            return {}
        scores = _validated(data)
        if scores is None:
            logger.warning("Pattern memory %s has an unexpected shape; starting empty", self.path)
            return {}
        return scores

    def save(self, scores: Mapping[str, int]) -> None:
        """Write the record; an unwritable path is logged and the update is lost."""
        tmp_path = f"{self.path}.tmp"
        try:
            directory = os.path.dirname(self.path)
            if directory:
                os.makedirs(directory, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(dict(scores), f, sort_keys=True, indent=1)
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning("Could not write pattern memory %s: %s", self.path, e)
            if os.path.isfile(tmp_path):
                os.remove(tmp_path)


class PatternMemory:
    """
    Signature -> integer delta, absent keys read as 0.

    Keys are never removed. Every read goes to the backend.
    """

    def __init__(self, backend: Optional[MemoryBackend] = None) -> None:
        self.backend = backend if backend is not None else JsonFileBackend()

    @classmethod
    def in_memory(cls) -> "PatternMemory":
        return cls(InMemoryBackend())

    @classmethod
    def from_file(cls, path: str) -> "PatternMemory":
        return cls(JsonFileBackend(path))

    def load(self) -> PatternScores:
        return self.backend.load()

    def save(self, scores: Mapping[str, int]) -> None:
        self.backend.save(scores)

    def get(self, key: str) -> int:
        return self.load().get(key, 0)

    def increment(self, key: str, delta: int) -> None:
        scores = self.load()
        scores[key] = scores.get(key, 0) + delta
        self.save(scores)

    def __len__(self) -> int:
        return len(self.load())
