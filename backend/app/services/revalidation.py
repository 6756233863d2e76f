"""View invalidation signals.

The public site re-fetches a listing after its path is signalled. Signals
are logged and the most recent ones kept in memory for inspection.
"""

import logging
import threading
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import Deque, List

from app.models.types import utcnow

logger = logging.getLogger(__name__)

PUBLIC_POST_PATHS = ("/", "/blog")
MAX_SIGNALS = 200


@dataclass(frozen=True)
class RevalidationSignal:
    path: str
    signalled_at: datetime


_signals: Deque[RevalidationSignal] = deque(maxlen=MAX_SIGNALS)
_lock = threading.Lock()


def revalidate_path(path: str) -> RevalidationSignal:
    signal = RevalidationSignal(path=path, signalled_at=utcnow())
    with _lock:
        _signals.append(signal)
    logger.info("[revalidate] %s", path)
    return signal


def recent_signals() -> List[RevalidationSignal]:
    with _lock:
        return list(_signals)


def recent_paths() -> List[str]:
    return [signal.path for signal in recent_signals()]


def clear_signals() -> None:
    with _lock:
        _signals.clear()
