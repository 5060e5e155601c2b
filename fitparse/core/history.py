"""Frequently logged phrases, ranked by recency and frequency."""

from __future__ import annotations

import math
from collections import Counter
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Sequence


@dataclass(frozen=True)
class CommonLog:
    text: str
    count: int
    last_used: datetime
    category: Optional[str] = None


@dataclass(frozen=True)
class RankedLog:
    log: CommonLog
    score: float


def record_common_log(
    logs: Sequence[CommonLog],
    text: str,
    now: datetime,
    category: Optional[str] = None,
    limit: int = 10,
) -> List[CommonLog]:
    """Return a new list with ``text`` counted once more.

    Matching is case-insensitive. The list is ordered by count, then by most
    recent use. A new text is only added while there is room under
    ``limit``.
    """
    key = text.strip().lower()
    updated: List[CommonLog] = []
    found = False
    for log in logs:
        if log.text.strip().lower() == key:
            updated.append(replace(log, count=log.count + 1, last_used=now, category=category or log.category))
            found = True
        else:
            updated.append(log)
    if not found and len(updated) < limit:
        updated.append(CommonLog(text=text.strip(), count=1, last_used=now, category=category))

    updated.sort(key=lambda log: (log.count, log.last_used.timestamp()), reverse=True)
    return updated[:limit]


def match_score(text: str, query: str) -> float:
    if not query:
        return 0.0
    text_lower = text.lower()
    query_lower = query.lower()
    if text_lower == query_lower:
        return 1.0
    if text_lower.startswith(query_lower):
        return 0.8
    if query_lower in text_lower:
        return 0.5
    words = query_lower.split()
    matched = [word for word in words if word in text_lower]
    return len(matched) / len(words) * 0.3 if words else 0.0


def _days_between(earlier: datetime, later: datetime) -> float:
    if earlier.tzinfo is None and later.tzinfo is not None:
        earlier = earlier.replace(tzinfo=later.tzinfo)
    elif later.tzinfo is None and earlier.tzinfo is not None:
        later = later.replace(tzinfo=earlier.tzinfo)
    return max((later - earlier).total_seconds(), 0.0) / 86400.0


def rank_common_logs(
    logs: Iterable[CommonLog],
    now: datetime,
    query: str = "",
    limit: int = 10,
) -> List[RankedLog]:
    """Score logs by frequency (40%), recency with a 7 day decay (30%) and query match (30%)."""
    ranked: List[RankedLog] = []
    query_lower = query.strip().lower()
    for log in logs:
        if query_lower and query_lower not in log.text.lower():
            continue
        recency = math.exp(-_days_between(log.last_used, now) / 7.0)
        frequency = math.log10(log.count + 1)
        score = frequency * 0.4 + recency * 0.3 + match_score(log.text, query_lower) * 0.3
        ranked.append(RankedLog(log=log, score=round(score, 4)))

    ranked.sort(key=lambda item: item.score, reverse=True)
    return ranked[:limit]


def dominant_category(logs: Iterable[CommonLog]) -> Optional[str]:
    """Return the category with the most logged uses, if any."""
    totals: Counter = Counter()
    for log in logs:
        if log.category:
            totals[log.category] += log.count
    if not totals:
        return None
    return totals.most_common(1)[0][0]


def common_log_to_dict(log: CommonLog) -> Dict[str, Any]:
    return {
        "text": log.text,
        "count": log.count,
        "last_used": log.last_used.isoformat(),
        "category": log.category,
    }


def common_logs_from_data(raw: Any) -> List[CommonLog]:
    """Build logs from decoded JSON, skipping malformed entries."""
    if not isinstance(raw, list):
        return []
    logs: List[CommonLog] = []
    for item in raw:
        if not isinstance(item, dict) or not item.get("text"):
            continue
        try:
            logs.append(
                CommonLog(
                    text=str(item["text"]),
                    count=int(item.get("count", 1)),
                    last_used=datetime.fromisoformat(str(item["last_used"])),
                    category=item.get("category"),
                )
            )
        except (KeyError, TypeError, ValueError):
            continue
    return logs
