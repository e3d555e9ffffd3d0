"""In-memory health registry for weather lookups.

The registry counts successful and failed lookups per provider so the health
endpoint can show whether enrichment currently works.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from threading import Lock
from typing import Dict, Optional


@dataclass(frozen=True)
class LookupStats:
    """Counters for a single weather provider."""

    succeeded: int = 0
    failed: int = 0

    def as_dict(self) -> Dict[str, int]:
        return {"succeeded": self.succeeded, "failed": self.failed}


class HealthRegistry:
    """Stores lookup counters and the time of the last lookup."""

    def __init__(self) -> None:
        self._providers: Dict[str, LookupStats] = {}
        self._last_lookup_at: Optional[str] = None
        self._lock = Lock()

    def record_lookup(
        self, provider: str, *, ok: bool, when: Optional[datetime] = None
    ) -> None:
        if not provider:
            raise ValueError("provider must be provided")
        when = when or datetime.now(timezone.utc)
        with self._lock:
            stats = self._providers.get(provider, LookupStats())
            if ok:
                stats = LookupStats(succeeded=stats.succeeded + 1, failed=stats.failed)
            else:
                stats = LookupStats(succeeded=stats.succeeded, failed=stats.failed + 1)
            self._providers[provider] = stats
            self._last_lookup_at = self._format_datetime(when)

    def reset(self) -> None:
        with self._lock:
            self._providers.clear()
            self._last_lookup_at = None

    def snapshot(self) -> Dict[str, object]:
        with self._lock:
            providers = {name: stats.as_dict() for name, stats in self._providers.items()}
            last_lookup_at = self._last_lookup_at
        return {"providers": providers, "lastLookupAt": last_lookup_at}

    @staticmethod
    def _format_datetime(value: datetime) -> str:
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
