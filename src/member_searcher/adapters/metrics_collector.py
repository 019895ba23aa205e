"""
In-Memory Metrics Collector.

Keeps every recorded value in memory, keyed by metric name.
"""

from __future__ import annotations

from datetime import datetime
from threading import Lock
from typing import Any, Dict, List, Optional


class InMemoryMetricsCollector:
    """In-memory metrics collector with per-name summaries."""

    def __init__(self) -> None:
        self._entries: Dict[str, List[Dict[str, Any]]] = {}
        self._lock = Lock()

    def record_timing(
        self,
        name: str,
        duration_seconds: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._append(name, "timing", duration_seconds, tags)

    def record_count(
        self,
        name: str,
        value: int,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._append(name, "count", value, tags)

    def record_gauge(
        self,
        name: str,
        value: float,
        tags: Optional[Dict[str, str]] = None,
    ) -> None:
        self._append(name, "gauge", value, tags)

    def get_metrics(self) -> Dict[str, Any]:
        """
        Summarize collected metrics.

        Returns:
            Dict of metric name -> {"type", "count", "total", "last"}
        """
        with self._lock:
            return {
                name: {
                    "type": entries[-1]["type"],
                    "count": len(entries),
                    "total": sum(e["value"] for e in entries),
                    "last": entries[-1]["value"],
                }
                for name, entries in self._entries.items()
                if entries
            }

    def get_entries(self, name: str) -> List[Dict[str, Any]]:
        """Raw entries for one metric, oldest first."""
        with self._lock:
            return list(self._entries.get(name, []))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def _append(
        self,
        name: str,
        metric_type: str,
        value: float,
        tags: Optional[Dict[str, str]],
    ) -> None:
        entry = {
            "type": metric_type,
            "value": value,
            "tags": dict(tags or {}),
            "timestamp": datetime.now().isoformat(),
        }
        with self._lock:
            self._entries.setdefault(name, []).append(entry)
