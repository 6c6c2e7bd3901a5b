"""Server-side conversation memory.

Each session keeps only its most recent exchanges (5 by default). Logs live
for the lifetime of the process unless the client clears them; there is no
TTL, so the number of sessions is unbounded.
"""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Dict, List

from pydantic import BaseModel


class ConversationEntry(BaseModel):
    user_message: str
    bot_reply: str


class ConversationStore:
    def __init__(self, limit: int = 5) -> None:
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._logs: Dict[str, Deque[ConversationEntry]] = {}
        self._lock = threading.Lock()

    def record(self, session_id: str, user_message: str, bot_reply: str) -> ConversationEntry:
        entry = ConversationEntry(user_message=user_message, bot_reply=bot_reply)
        with self._lock:
            log = self._logs.setdefault(session_id, deque())
            log.append(entry)
            while len(log) > self.limit:
                log.popleft()
        return entry

    def clear(self, session_id: str) -> None:
        with self._lock:
            self._logs.pop(session_id, None)

    def history(self, session_id: str) -> List[ConversationEntry]:
        with self._lock:
            return list(self._logs.get(session_id, ()))

    def __contains__(self, session_id: object) -> bool:
        return session_id in self._logs

    def __len__(self) -> int:
        return len(self._logs)
