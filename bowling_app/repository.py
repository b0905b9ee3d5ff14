from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from threading import Lock
from uuid import UUID, uuid4

from bowling_app.game import BowlingGame

logger = logging.getLogger(__name__)


@dataclass
class StoredGame:
    id: UUID
    created_at: datetime
    expires_at: datetime
    game: BowlingGame
    lock: Lock = field(default_factory=Lock, repr=False, compare=False)


class InMemoryRepository:
    def __init__(self, ttl_hours: int = 24) -> None:
        self._ttl_hours = ttl_hours
        self._items: dict[UUID, StoredGame] = {}
        self._lock = Lock()

    def _utcnow(self) -> datetime:
        return datetime.now(timezone.utc)

    def _prune(self) -> None:
        now = self._utcnow()
        expired = [item_id for item_id, item in self._items.items() if item.expires_at <= now]
        for item_id in expired:
            del self._items[item_id]
        if expired:
            logger.info("Dropped %d expired games", len(expired))

    def create(self, game: BowlingGame | None = None) -> StoredGame:
        with self._lock:
            self._prune()
            now = self._utcnow()
            item = StoredGame(
                id=uuid4(),
                created_at=now,
                expires_at=now + timedelta(hours=self._ttl_hours),
                game=game or BowlingGame(),
            )
            self._items[item.id] = item
            logger.info("Stored game %s", item.id)
            return item

    def get(self, item_id: UUID) -> StoredGame | None:
        with self._lock:
            self._prune()
            return self._items.get(item_id)

    def __len__(self) -> int:
        with self._lock:
            self._prune()
            return len(self._items)
