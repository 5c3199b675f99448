"""Shared test helpers for chat_stats tests.

Regular functions (not fixtures) that can be imported by any test module.
"""

from __future__ import annotations

from itertools import count

_ids = count(1)


def make_message(
    name: str | None = "Alice",
    text: str | None = "hello",
    full_date: str | None = "01.01.2024 10:15:00 UTC+02:00",
    time_text: str | None = "10:15",
    reactions: int = 0,
    reply_to: int | None = None,
    links: list[str] | None = None,
) -> str:
    """Build one user message div in the Telegram export layout.

    Passing None for a field leaves its element out entirely.
    """
    parts = []
    if full_date is not None or time_text is not None:
        title = f' title="{full_date}"' if full_date is not None else ""
        parts.append(f'<div class="pull_right date details"{title}>{time_text or ""}</div>')
    if name is not None:
        parts.append(f'<div class="from_name">{name}</div>')
    if reply_to is not None:
        parts.append(
            '<div class="reply_to details">In reply to '
            f'<a href="#go_to_message{reply_to}" onclick="return GoToMessage({reply_to})">'
            "this message</a></div>"
        )
    if text is not None:
        anchors = "".join(f' <a href="{href}">{href}</a>' for href in links or [])
        parts.append(f'<div class="text">{text}{anchors}</div>')
    if reactions:
        spans = "".join('<span class="reaction">👍 1</span>' for _ in range(reactions))
        parts.append(f'<span class="reactions">{spans}</span>')

    body = "".join(parts)
    return (
        f'<div class="message default clearfix" id="message{next(_ids)}">'
        '<div class="pull_left userpic_wrap"></div>'
        f'<div class="body">{body}</div></div>'
    )


def make_service_message(text: str, full_date: str | None = None, time_text: str = "") -> str:
    """Build a service message div (date heading or membership notice)."""
    date_elem = ""
    if full_date is not None:
        date_elem = f'<div class="pull_right date details" title="{full_date}">{time_text}</div>'
    return (
        f'<div class="message service" id="message-{next(_ids)}">'
        f'{date_elem}<div class="body details">{text}</div></div>'
    )


def make_export(messages: list[str], title: str = "Test Group") -> str:
    """Wrap message divs in a minimal export page."""
    return (
        "<!DOCTYPE html><html><head><meta charset=\"utf-8\"/>"
        f"<title>Exported Data</title></head><body><div class=\"page_wrap\">"
        f"<div class=\"page_header\"><div class=\"text bold\">{title}</div></div>"
        f"<div class=\"page_body chat_page\"><div class=\"history\">"
        f"{''.join(messages)}"
        "</div></div></div></body></html>"
    )


def make_word_export(prefix: str, target: str, words: int = 50, repeats: int = 27, target_repeats: int = 26) -> str:
    """Build a one-message export where *target* ranks just below the top *words*.

    Each of the *words* filler tokens appears *repeats* times and *target*
    appears *target_repeats* times, so *target* lands at rank words + 1.
    """
    tokens = []
    for i in range(words):
        tokens.extend([f"{prefix}{i:02d}"] * repeats)
    tokens.extend([target] * target_repeats)
    return make_export([make_message(text=" ".join(tokens))])
