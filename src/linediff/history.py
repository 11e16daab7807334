import json
import logging
import os
import time
from dataclasses import dataclass, field
from typing import List, Optional

from .algorithms.utils import Stats
from .config import DEFAULT_HISTORY_LIMIT, default_history_path


logger = logging.getLogger(__name__)


@dataclass
class HistoryItem:
    left: str
    right: str
    date: int
    stats: Stats = field(default_factory=Stats)

    def to_dict(self) -> dict:
        return {'left': self.left, 'right': self.right, 'date': self.date, 'stats': self.stats.as_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> 'HistoryItem':
        return cls(left=str(data['left']), right=str(data['right']), date=int(data['date']),
                   stats=Stats.from_dict(data.get('stats') or {}))


def now_millis() -> int:
    return int(time.time() * 1000)


class HistoryStore:
    """Saved comparisons in a JSON file, newest first, at most ``limit`` of them.

    A missing, unreadable or malformed file reads as empty history.
    """

    def __init__(self, path: Optional[str] = None, limit: int = DEFAULT_HISTORY_LIMIT):
        self.path = path or default_history_path()
        self.limit = limit

    def load(self) -> List[HistoryItem]:
        if not os.path.exists(self.path):
            return []
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                raw = json.load(f)
            return [HistoryItem.from_dict(item) for item in raw][:self.limit]
        except (OSError, ValueError, TypeError, KeyError) as e:
            logger.warning("Ignoring unreadable history file %s: %s", self.path, e)
            return []

    def _write(self, items: List[HistoryItem]):
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        tmp_path = self.path + '.tmp'
        with open(tmp_path, 'w', encoding='utf-8') as f:
            json.dump([item.to_dict() for item in items], f, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def save(self, item: HistoryItem) -> List[HistoryItem]:
        items = ([item] + self.load())[:self.limit]
        self._write(items)
        logger.debug("Saved comparison to %s (%d entries)", self.path, len(items))
        return items

    def record(self, left: str, right: str, stats: Stats, date: Optional[int] = None) -> HistoryItem:
        item = HistoryItem(left=left, right=right, date=now_millis() if date is None else date, stats=stats)
        self.save(item)
        return item

    def clear(self):
        self._write([])
