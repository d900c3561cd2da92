"""
Persistent key-value storage and the high score kept in it.

A KeyValueStore holds string values under string keys, the same shape as
browser localStorage. JsonFileStore keeps them in a single JSON object on
disk; MemoryStore keeps them in a dict for tests and throwaway sessions.
"""
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from clicker.logging import get_logger

log = get_logger('storage')

HIGH_SCORE_KEY = 'record'


class KeyValueStore(ABC):
    """Abstract string key-value store."""

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the value stored under key, or None if absent."""
        pass

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""
        pass


class MemoryStore(KeyValueStore):
    """Dict-backed store. Nothing survives the process."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """Store backed by a JSON object in a file.

    A missing, unreadable or malformed file reads as an empty store.
    Writes rewrite the whole file and create parent directories.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path).expanduser()

    def _read(self) -> Dict[str, str]:
        try:
            data = json.loads(self.path.read_text(encoding='utf-8'))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            log.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            log.warning("Ignoring store %s: expected a JSON object", self.path)
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def get(self, key: str) -> Optional[str]:
        return self._read().get(key)

    def set(self, key: str, value: str) -> None:
        data = self._read()
        data[key] = value
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(data, indent=2), encoding='utf-8')


class HighScoreStore:
    """Reads and writes the best score as a non-negative integer."""

    def __init__(self, store: KeyValueStore, key: str = HIGH_SCORE_KEY):
        self._store = store
        self._key = key

    def load(self) -> int:
        """Return the stored high score.

        Absent, non-numeric and negative values all read as 0.
        """
        raw = self._store.get(self._key)
        if raw is None:
            return 0

        try:
            value = int(raw.strip())
        except ValueError:
            log.warning("Stored high score %r is not a number, using 0", raw)
            return 0

        if value < 0:
            log.warning("Stored high score %d is negative, using 0", value)
            return 0
        return value

    def save(self, score: int) -> None:
        """Persist score as the new high score.

        Raises:
            ValueError: If score is negative
        """
        if score < 0:
            raise ValueError(f"High score must be non-negative, got {score}")
        self._store.set(self._key, str(score))
        log.debug("Saved high score %d", score)
