"""
Generation tokens for detecting superseded LLM responses.

Every request issued for a (session, operation) pair gets a strictly
increasing token. When a response completes, it is current only if no newer
request for the same pair was issued in the meantime.

Counters live in process memory, so the service runs as a single worker
process. The table keeps the most recently used pairs and evicts the oldest
once ``max_entries`` is reached.
"""
import asyncio
from collections import OrderedDict
from typing import Tuple

DEFAULT_MAX_ENTRIES = 10_000


class RequestSequencer:

    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        if max_entries < 1:
            raise ValueError("max_entries must be at least 1")
        self.max_entries = max_entries
        self._latest: "OrderedDict[Tuple[str, str], int]" = OrderedDict()
        self._lock = asyncio.Lock()

    def __len__(self) -> int:
        return len(self._latest)

    async def issue(self, session_id: str, operation: str) -> int:
        async with self._lock:
            key = (session_id, operation)
            token = self._latest.get(key, 0) + 1
            self._latest[key] = token
            self._latest.move_to_end(key)
            while len(self._latest) > self.max_entries:
                self._latest.popitem(last=False)
            return token

    def is_current(self, session_id: str, operation: str, token: int) -> bool:
        return self._latest.get((session_id, operation)) == token

    def latest(self, session_id: str, operation: str) -> int:
        return self._latest.get((session_id, operation), 0)
