"""Core data processing for chat export analytics.

Extracts and computes statistics from Telegram "Export chat history" HTML
documents.  Used by both the CLI (chat_stats_summary.py) and the web
service (app.py).
"""

from __future__ import annotations

import csv
import json
import logging
import math
import os
import re
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from pathlib import Path
from typing import Any, Iterable

from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)

TOP_WORDS_LIMIT = 50
TOP_MENTIONS_LIMIT = 20
LONGEST_THREADS_LIMIT = 10
TOP_USERS_LIMIT = 10
MIN_WORD_LENGTH = 4

# Only date headings containing this literal year end up in dates_covered.
# Known defect kept for parity with existing dashboards: headings from any
# other year are silently dropped.
DATES_COVERED_YEAR = "2024"

WEEKDAY_NAMES = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

MENTION_RE = re.compile(r"@\w+", re.ASCII)
DIGITS_RE = re.compile(r"\d+")
EXPORT_FILE_RE = re.compile(r"^messages(\d*)\.html$")


class ExportParseError(ValueError):
    """Raised when a whole export document cannot be analyzed."""


@dataclass(frozen=True)
class MessageRecord:
    """One message pulled out of an export document."""

    sender_name: str | None
    is_service: bool
    is_user: bool
    timestamp_text: str | None
    timestamp_full: str | None
    body_text: str | None
    reaction_count: int
    mentions: tuple[str, ...]
    links: tuple[str, ...]
    reply_target_id: str | None
    date_heading: str | None = None


# ---------------------------------------------------------------------------
# Loading
# ---------------------------------------------------------------------------

def load_export(path: str | Path) -> str:
    """Read one export HTML file.

    Args:
        path: Filesystem path to a ``messages*.html`` export file.

    Returns:
        The file content as text.  Undecodable bytes are replaced rather
        than failing the read.

    Raises:
        FileNotFoundError: If the file at *path* does not exist.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        return f.read()


def _export_sort_key(path: Path) -> tuple[int, str]:
    match = EXPORT_FILE_RE.match(path.name)
    if match is None:
        return (0, path.name)
    # messages.html is page 1, messages2.html is page 2, ...
    return (int(match.group(1) or 1), path.name)


def find_export_files(directory: str | Path) -> list[Path]:
    """Return the export pages in *directory* in page order.

    Telegram splits large exports into ``messages.html``,
    ``messages2.html``, ... ``messages10.html``; plain lexical sorting
    would put page 10 before page 2.
    """
    root = Path(directory)
    if not root.is_dir():
        return []
    files = [p for p in root.iterdir() if p.is_file() and EXPORT_FILE_RE.match(p.name)]
    return sorted(files, key=_export_sort_key)


# ---------------------------------------------------------------------------
# Extraction
# ---------------------------------------------------------------------------

def parse_export_date(full_date: str) -> date:
    """Parse the date part of an export timestamp.

    Args:
        full_date: Machine-readable timestamp, e.g.
            ``"05.01.2024 14:03:27 UTC+02:00"``.

    Returns:
        The calendar date.  The time and UTC offset are discarded, which is
        fine for day-level buckets.

    Raises:
        ValueError: If the date part is missing or not ``DD.MM.YYYY``.
    """
    parts = full_date.split()
    if not parts:
        raise ValueError(f"empty timestamp: {full_date!r}")
    day, month, year = parts[0].split(".")
    return date(int(year), int(month), int(day))


def parse_hour(time_text: str) -> int | None:
    """Return the hour from display text like ``"14:03"``, or None."""
    if ":" not in time_text:
        return None
    try:
        hour = int(time_text.split(":", 1)[0].strip())
    except ValueError:
        return None
    if 0 <= hour <= 23:
        return hour
    return None


def _element_text(element) -> str | None:
    if element is None:
        return None
    return element.get_text().strip()


def _extract_reply_target(message) -> str | None:
    reply = message.select_one(".reply_to")
    if reply is None:
        return None
    anchor = reply.select_one("a")
    if anchor is None:
        return None
    for attr in ("onclick", "href"):
        value = anchor.get(attr)
        if value:
            match = DIGITS_RE.search(value)
            if match:
                return match.group(0)
    return None


def _extract_record(message) -> MessageRecord:
    """Build a MessageRecord from one ``.message`` element."""
    classes = message.get("class") or []

    sender_name = _element_text(message.select_one(".from_name")) or None

    timestamp_text = None
    timestamp_full = None
    date_elem = message.select_one(".date.details")
    if date_elem is not None:
        timestamp_text = date_elem.get_text().strip()
        timestamp_full = date_elem.get("title") or None

    body_text = _element_text(message.select_one(".text"))
    mentions = tuple(MENTION_RE.findall(body_text)) if body_text else ()

    links = tuple(
        a["href"]
        for a in message.select("a[href]")
        if a["href"] and not a["href"].startswith("@")
    )

    return MessageRecord(
        sender_name=sender_name,
        is_service="service" in classes,
        is_user="default" in classes,
        timestamp_text=timestamp_text,
        timestamp_full=timestamp_full,
        body_text=body_text,
        reaction_count=len(message.select(".reaction")),
        mentions=mentions,
        links=links,
        reply_target_id=_extract_reply_target(message),
        date_heading=_element_text(message.select_one(".body.details")),
    )


def extract_messages(content: str) -> list[MessageRecord]:
    """Parse one export document into message records, in document order.

    Missing sub-elements leave the matching record field empty; nothing
    here raises for a malformed fragment.
    """
    soup = BeautifulSoup(content, "html.parser")
    return [_extract_record(msg) for msg in soup.select(".message")]


# ---------------------------------------------------------------------------
# Per-document metrics
# ---------------------------------------------------------------------------

def _increment(counts: dict, key: Any, amount: int = 1) -> None:
    counts[key] = counts.get(key, 0) + amount


def _rank(counts: dict, limit: int | None = None) -> list[list]:
    """Sort a frequency map descending by count as ``[key, count]`` pairs.

    ``sorted`` is stable, so equal counts keep first-encounter order.
    """
    ranked = sorted(counts.items(), key=lambda kv: kv[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return [[key, count] for key, count in ranked]


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _mean_length(lengths: list[int]) -> int:
    if not lengths:
        return 0
    return _round_half_up(sum(lengths) / len(lengths))


def classify_user_types(name: str) -> list[str]:
    """Tag a sender name using substring heuristics.

    Checks are case-sensitive and independent, so one name can collect
    several tags.
    """
    tags = []
    if "|" in name:
        tags.append("Team Member")
    if "admin" in name:
        tags.append("Admin")
    if "mod" in name:
        tags.append("Moderator")
    return tags


def _message_date(record: MessageRecord) -> date | None:
    if not record.timestamp_full:
        return None
    try:
        return parse_export_date(record.timestamp_full)
    except ValueError:
        logger.debug("Skipping unparseable message date: %r", record.timestamp_full)
        return None


def compute_document_metrics(records: list[MessageRecord]) -> dict[str, Any]:
    """Reduce one document's message records into a metrics snapshot.

    Args:
        records: Output of ``extract_messages`` for a single document.

    Returns:
        Dict with keys: total_messages, user_messages, service_messages,
        unique_users, messages_by_user, messages_by_hour,
        messages_by_day_of_week, messages_by_date, user_messages_by_date,
        reactions_by_user, dates_covered, average_message_length,
        message_length_distribution, top_words, top_mentions,
        unique_links, user_types, longest_threads, plus the unranked
        word_frequency, mention_frequency and reply_chains maps that
        ``aggregate_metrics`` merges before ranking.
    """
    messages_by_user: dict[str, int] = {}
    reactions_by_user: dict[str, int] = {}
    user_messages_by_date: dict[str, dict[str, int]] = {}
    user_types: dict[str, None] = {}

    messages_by_hour: dict[int, int] = {}
    messages_by_day_of_week: dict[str, int] = {}
    messages_by_date: dict[str, int] = {}
    dates_covered: set[str] = set()

    lengths: list[int] = []
    word_frequency: dict[str, int] = {}
    mention_frequency: dict[str, int] = {}
    links: dict[str, None] = {}
    reply_chains: dict[str, int] = {}

    user_count = 0
    service_count = 0

    for record in records:
        msg_date = _message_date(record)

        if record.timestamp_text:
            hour = parse_hour(record.timestamp_text)
            if hour is not None:
                _increment(messages_by_hour, hour)
        if msg_date is not None:
            _increment(messages_by_day_of_week, WEEKDAY_NAMES[msg_date.weekday()])
            _increment(messages_by_date, msg_date.isoformat())

        heading = record.date_heading
        if heading and DATES_COVERED_YEAR in heading and ":" not in heading:
            dates_covered.add(heading)

        if record.is_service:
            service_count += 1
        if not record.is_user:
            continue
        user_count += 1

        name = record.sender_name
        if name:
            _increment(messages_by_user, name)
            if record.reaction_count > 0:
                _increment(reactions_by_user, name, record.reaction_count)
            if msg_date is not None:
                _increment(user_messages_by_date.setdefault(name, {}), msg_date.isoformat())
            for tag in classify_user_types(name):
                user_types.setdefault(tag, None)

        if record.body_text is not None:
            text = record.body_text
            lengths.append(len(text))
            for word in text.lower().split():
                if len(word) >= MIN_WORD_LENGTH:
                    _increment(word_frequency, word)
            for mention in record.mentions:
                _increment(mention_frequency, mention)
            for link in record.links:
                links.setdefault(link, None)

        if record.reply_target_id:
            _increment(reply_chains, record.reply_target_id)

    return {
        "total_messages": len(records),
        "user_messages": user_count,
        "service_messages": service_count,
        "unique_users": len(messages_by_user),
        "messages_by_user": messages_by_user,
        "messages_by_hour": messages_by_hour,
        "messages_by_day_of_week": messages_by_day_of_week,
        "messages_by_date": messages_by_date,
        "user_messages_by_date": user_messages_by_date,
        "reactions_by_user": reactions_by_user,
        "dates_covered": sorted(dates_covered),
        "average_message_length": _mean_length(lengths),
        "message_length_distribution": lengths,
        "top_words": _rank(word_frequency, TOP_WORDS_LIMIT),
        "top_mentions": _rank(mention_frequency),
        "unique_links": list(links),
        "user_types": list(user_types),
        "longest_threads": _rank(reply_chains, LONGEST_THREADS_LIMIT),
        "word_frequency": word_frequency,
        "mention_frequency": mention_frequency,
        "reply_chains": reply_chains,
    }


def analyze_chat_log(content: str) -> dict[str, Any]:
    """Extract and compute metrics for a single export document.

    Raises:
        ExportParseError: If *content* is not text or is blank.
    """
    if not isinstance(content, str):
        raise ExportParseError(f"expected document text, got {type(content).__name__}")
    if not content.strip():
        raise ExportParseError("document is empty")
    return compute_document_metrics(extract_messages(content))


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

def _init_accumulator() -> dict[str, Any]:
    """Create a fresh, zeroed aggregation accumulator."""
    return {
        "total_messages": 0,
        "user_messages": 0,
        "service_messages": 0,
        "unique_users": set(),
        "messages_by_user": {},
        "messages_by_hour": {},
        "messages_by_day_of_week": {},
        "messages_by_date": {},
        "user_messages_by_date": {},
        "reactions_by_user": {},
        "dates_covered": set(),
        "message_lengths": [],
        "word_frequency": {},
        "mention_frequency": {},
        "links": {},
        "user_types": {},
        "reply_chains": {},
    }


def _merge_counts(target: dict, source: dict) -> None:
    for key, count in source.items():
        _increment(target, key, count)


def _fold_metrics(acc: dict[str, Any], metrics: dict[str, Any]) -> None:
    """Merge one document's metrics into the accumulator in place.

    Not thread-safe; ``aggregate_metrics`` calls it from a single thread.
    """
    acc["total_messages"] += metrics["total_messages"]
    acc["user_messages"] += metrics["user_messages"]
    acc["service_messages"] += metrics["service_messages"]

    acc["unique_users"].update(metrics["messages_by_user"])
    for key in (
        "messages_by_user",
        "messages_by_hour",
        "messages_by_day_of_week",
        "messages_by_date",
        "reactions_by_user",
        "word_frequency",
        "mention_frequency",
        "reply_chains",
    ):
        _merge_counts(acc[key], metrics[key])

    for name, by_date in metrics["user_messages_by_date"].items():
        _merge_counts(acc["user_messages_by_date"].setdefault(name, {}), by_date)

    acc["dates_covered"].update(metrics["dates_covered"])
    acc["message_lengths"].extend(metrics["message_length_distribution"])
    for link in metrics["unique_links"]:
        acc["links"].setdefault(link, None)
    for tag in metrics["user_types"]:
        acc["user_types"].setdefault(tag, None)


def _user_ranking(counts: dict[str, int]) -> list[dict[str, Any]]:
    return [
        {"user": user, "count": count}
        for user, count in _rank(counts, TOP_USERS_LIMIT)
    ]


def _finalize(acc: dict[str, Any]) -> dict[str, Any]:
    """Turn the accumulator into the public aggregated metrics dict."""
    return {
        "total_messages": acc["total_messages"],
        "user_messages": acc["user_messages"],
        "service_messages": acc["service_messages"],
        "unique_users": len(acc["unique_users"]),
        "messages_by_user": acc["messages_by_user"],
        "messages_by_hour": acc["messages_by_hour"],
        "messages_by_day_of_week": acc["messages_by_day_of_week"],
        "messages_by_date": acc["messages_by_date"],
        "user_messages_by_date": acc["user_messages_by_date"],
        "reactions_by_user": acc["reactions_by_user"],
        "dates_covered": sorted(acc["dates_covered"]),
        "average_message_length": _mean_length(acc["message_lengths"]),
        "message_length_distribution": acc["message_lengths"],
        "top_words": _rank(acc["word_frequency"], TOP_WORDS_LIMIT),
        "top_mentions": _rank(acc["mention_frequency"], TOP_MENTIONS_LIMIT),
        "unique_links": list(acc["links"]),
        "user_types": list(acc["user_types"]),
        "longest_threads": _rank(acc["reply_chains"], LONGEST_THREADS_LIMIT),
        "word_frequency": acc["word_frequency"],
        "mention_frequency": acc["mention_frequency"],
        "reply_chains": acc["reply_chains"],
        "most_active_users": _user_ranking(acc["messages_by_user"]),
        "most_reacted_to": _user_ranking(acc["reactions_by_user"]),
    }


def _analyze_document(content: str) -> tuple[dict[str, Any] | None, str | None]:
    try:
        return analyze_chat_log(content), None
    except Exception as exc:
        return None, f"{type(exc).__name__}: {exc}"


def aggregate_metrics(
    contents: Iterable[str],
    max_workers: int = 1,
) -> dict[str, Any]:
    """Analyze several export documents and merge them into one result.

    Rankings (top words, mentions, threads, most active and most reacted-to
    users) are computed from the fully merged frequency maps, never from
    each document's already truncated lists.  The mean message length is
    computed once over the pooled length samples.

    Args:
        contents: Document texts, in the order they should be merged.
        max_workers: Number of threads used for per-document analysis.
            Results are always folded in input order by the calling thread.

    Returns:
        Dict with every key of ``compute_document_metrics`` plus
        most_active_users, most_reacted_to (lists of {"user", "count"}),
        documents_processed, documents_skipped and errors (one
        {"index", "error"} dict per skipped document).
    """
    contents = list(contents)
    if max_workers > 1 and len(contents) > 1:
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            results = list(pool.map(_analyze_document, contents))
    else:
        results = [_analyze_document(c) for c in contents]

    acc = _init_accumulator()
    errors: list[dict[str, Any]] = []
    for index, (metrics, error) in enumerate(results):
        if metrics is None:
            logger.warning("Skipping document %d: %s", index, error)
            errors.append({"index": index, "error": error})
            continue
        _fold_metrics(acc, metrics)

    if contents and len(errors) == len(contents):
        logger.warning(
            "None of the %d documents could be analyzed. "
            "Check that the files are chat export HTML pages.",
            len(contents),
        )

    result = _finalize(acc)
    result["documents_processed"] = len(contents) - len(errors)
    result["documents_skipped"] = len(errors)
    result["errors"] = errors
    return result


# ---------------------------------------------------------------------------
# Dashboard series
# ---------------------------------------------------------------------------

def _rolling_avg(values: list[float], window: int) -> list[float]:
    """Compute rolling average, using available values when the window is not yet full."""
    result = []
    for i in range(len(values)):
        start = max(0, i - window + 1)
        w = values[start : i + 1]
        result.append(sum(w) / len(w))
    return result


def _expanding_avg(values: list[float]) -> list[float]:
    """Compute expanding (lifetime) average."""
    result: list[float] = []
    s = 0.0
    for i, v in enumerate(values, 1):
        s += v
        result.append(s / i)
    return result


def _build_chart_series(values: list[float]) -> dict[str, list[float]]:
    """Raw values plus 7-day, 28-day and lifetime averages, rounded to 2dp."""
    return {
        "values": values,
        "avg_7d": [round(v, 2) for v in _rolling_avg(values, 7)],
        "avg_28d": [round(v, 2) for v in _rolling_avg(values, 28)],
        "avg_lifetime": [round(v, 2) for v in _expanding_avg(values)],
    }


def compute_daily_series(messages_by_date: dict[str, int]) -> dict[str, Any]:
    """Build a gap-free daily message series from a date -> count map.

    Days without messages between the first and last date are filled
    with zero so rolling averages cover calendar days, not active days.

    Returns:
        Dict with keys: dates (ISO strings) and messages (values, avg_7d,
        avg_28d, avg_lifetime).
    """
    if not messages_by_date:
        return {"dates": [], "messages": _build_chart_series([])}

    days = sorted(date.fromisoformat(d) for d in messages_by_date)
    dates = []
    values = []
    current = days[0]
    while current <= days[-1]:
        key = current.isoformat()
        dates.append(key)
        values.append(messages_by_date.get(key, 0))
        current += timedelta(days=1)
    return {"dates": dates, "messages": _build_chart_series(values)}


def compute_hourly_data(metrics: dict[str, Any]) -> dict[str, list[int]]:
    """Dense hour-of-day and day-of-week totals (weekday 0 is Monday)."""
    by_hour = metrics["messages_by_hour"]
    by_weekday = metrics["messages_by_day_of_week"]
    return {
        "hourly_totals": [by_hour.get(h, 0) for h in range(24)],
        "weekday_totals": [by_weekday.get(name, 0) for name in WEEKDAY_NAMES],
    }


def compute_summary_stats(metrics: dict[str, Any]) -> dict[str, Any]:
    """High-level totals and the covered date range."""
    dates = sorted(metrics["messages_by_date"])
    first_date = dates[0] if dates else None
    last_date = dates[-1] if dates else None
    busiest = _rank(metrics["messages_by_date"], 5)
    return {
        "total_messages": metrics["total_messages"],
        "user_messages": metrics["user_messages"],
        "service_messages": metrics["service_messages"],
        "unique_users": metrics["unique_users"],
        "average_message_length": metrics["average_message_length"],
        "first_date": first_date,
        "last_date": last_date,
        "days_active": len(dates),
        "top_days_by_messages": [{"date": d, "total_messages": c} for d, c in busiest],
    }


def build_dashboard_payload(
    paths: Iterable[str | Path],
    max_workers: int = 1,
) -> dict[str, Any]:
    """One-call entry point: load, aggregate and shape data for the dashboard.

    Args:
        paths: Export HTML files, merged in the given order.
        max_workers: Passed through to ``aggregate_metrics``.

    Returns:
        Dict with keys: generated_at, documents, summary, metrics, charts,
        hourly.

    Raises:
        FileNotFoundError: If one of the files does not exist.
    """
    paths = [Path(p) for p in paths]
    contents = [load_export(p) for p in paths]
    metrics = aggregate_metrics(contents, max_workers=max_workers)
    for error in metrics["errors"]:
        error["document"] = paths[error["index"]].name

    return {
        "generated_at": datetime.now().isoformat(),
        "documents": [p.name for p in paths],
        "summary": compute_summary_stats(metrics),
        "metrics": metrics,
        "charts": compute_daily_series(metrics["messages_by_date"]),
        "hourly": compute_hourly_data(metrics),
    }


# ---------------------------------------------------------------------------
# CLI helpers
# ---------------------------------------------------------------------------

def save_analytics_files(
    metrics: dict[str, Any],
    output_dir: str = "chat_analytics",
) -> None:
    """Write JSON/CSV analytics files to output_dir.

    Creates the output directory if it doesn't exist and writes:
    metrics.json, daily_stats.csv, hourly_stats.csv and user_stats.csv.

    Args:
        metrics: Aggregated metrics dict (from ``aggregate_metrics``).
        output_dir: Directory path for output files.  Created if it
            doesn't exist.  Defaults to "chat_analytics".
    """
    os.makedirs(output_dir, exist_ok=True)

    with open(f"{output_dir}/metrics.json", "w", encoding="utf-8") as f:
        json.dump(metrics, f, indent=2, ensure_ascii=False)

    with open(f"{output_dir}/daily_stats.csv", "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["date", "total_messages"])
        writer.writeheader()
        for day in sorted(metrics["messages_by_date"]):
            writer.writerow({"date": day, "total_messages": metrics["messages_by_date"][day]})

    with open(f"{output_dir}/hourly_stats.csv", "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["hour", "total_messages"])
        writer.writeheader()
        for hour in range(24):
            writer.writerow(
                {"hour": hour, "total_messages": metrics["messages_by_hour"].get(hour, 0)}
            )

    with open(f"{output_dir}/user_stats.csv", "w", newline="", encoding="utf-8") as f:
        writer = csv.DictWriter(f, fieldnames=["user", "messages", "reactions"])
        writer.writeheader()
        for user, count in _rank(metrics["messages_by_user"]):
            writer.writerow(
                {
                    "user": user,
                    "messages": count,
                    "reactions": metrics["reactions_by_user"].get(user, 0),
                }
            )


def print_summary_report(metrics: dict[str, Any], output_dir: str | None = None) -> None:
    """Print the CLI summary report to stdout.

    Args:
        metrics: Aggregated metrics dict (from ``aggregate_metrics``).
        output_dir: Where analytics files were saved, if they were.
    """
    stats = compute_summary_stats(metrics)

    print(f"\n{'=' * 60}")
    print("Chat Export Summary")
    print(f"{'=' * 60}")
    print(f"Documents Analyzed: {metrics.get('documents_processed', 0):,}")
    if metrics.get("documents_skipped"):
        print(f"Documents Skipped: {metrics['documents_skipped']:,}")
    print(f"Total Messages: {stats['total_messages']:,}")
    print(f"User Messages: {stats['user_messages']:,}")
    print(f"Service Messages: {stats['service_messages']:,}")
    print(f"Unique Users: {stats['unique_users']:,}")
    print(f"Average Message Length: {stats['average_message_length']:,} chars")

    if stats["first_date"] and stats["last_date"]:
        print(f"First Message: {stats['first_date']}")
        print(f"Last Message: {stats['last_date']}")
        print(f"Days with Messages: {stats['days_active']:,}")

    if stats["top_days_by_messages"]:
        print("\nTop 5 Days by Messages:")
        for rec in stats["top_days_by_messages"]:
            print(f"  {rec['date']}: {rec['total_messages']:,} messages")

    if metrics["most_active_users"]:
        print("\nMost Active Users:")
        for i, entry in enumerate(metrics["most_active_users"], 1):
            print(f"  {i:>2}. {entry['user']}: {entry['count']:,} messages")

    if metrics["most_reacted_to"]:
        print("\nMost Reacted To:")
        for i, entry in enumerate(metrics["most_reacted_to"], 1):
            print(f"  {i:>2}. {entry['user']}: {entry['count']:,} reactions")

    if metrics["top_words"]:
        print("\nTop 10 Words:")
        for word, count in metrics["top_words"][:10]:
            print(f"  {word}: {count:,}")

    if metrics["top_mentions"]:
        print("\nTop Mentions:")
        for mention, count in metrics["top_mentions"][:10]:
            print(f"  {mention}: {count:,}")

    print(f"\nUnique Links Shared: {len(metrics['unique_links']):,}")
    print(f"{'=' * 60}")

    if output_dir:
        print(f"\nAnalytics data has been saved to the '{output_dir}' directory:")
        print("1. metrics.json - Full aggregated metrics")
        print("2. daily_stats.csv - Messages per day")
        print("3. hourly_stats.csv - Messages per hour of day")
        print("4. user_stats.csv - Messages and reactions per user")
