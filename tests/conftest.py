"""Shared fixtures for chat_stats tests."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

from helpers import make_export, make_message, make_service_message


# ── Sample export documents ──


@pytest.fixture()
def sample_export() -> str:
    """One export page with a date heading, a join notice and five user messages."""
    return make_export([
        make_service_message("1 January 2024"),
        make_service_message(
            "Carol joined group by link", full_date="01.01.2024 09:00:00 UTC+02:00", time_text="09:00"
        ),
        make_message(
            "Alice", "Hello @bob welcome aboard",
            full_date="01.01.2024 10:15:00 UTC+02:00", time_text="10:15",
            reactions=2, links=["https://example.com"],
        ),
        make_message(
            "Bob | Team", "thanks @alice really happy here",
            full_date="01.01.2024 10:20:00 UTC+02:00", time_text="10:20",
            reply_to=101,
        ),
        make_message(
            "Alice", "happy happy days",
            full_date="02.01.2024 23:05:00 UTC+02:00", time_text="23:05",
            reactions=1, reply_to=101, links=["https://example.com", "https://docs.example.org"],
        ),
        make_message(
            None, "another note from alice",
            full_date="02.01.2024 23:06:00 UTC+02:00", time_text="23:06",
        ),
        make_message(
            "superadmin", "ok",
            full_date="03.01.2024 08:00:00 UTC+02:00", time_text="08:00",
        ),
    ])


@pytest.fixture()
def export_dir(tmp_path: Path, sample_export: str) -> Path:
    """Directory laid out like a multi-page Telegram export."""
    (tmp_path / "messages.html").write_text(sample_export, encoding="utf-8")
    (tmp_path / "messages2.html").write_text(
        make_export([make_message("Dave", "second page message", full_date="04.01.2024 12:00:00 UTC+02:00", time_text="12:00")]),
        encoding="utf-8",
    )
    (tmp_path / "style.css").write_text("body {}", encoding="utf-8")
    return tmp_path


# ── Minimal dashboard payload for app.py tests ──


def _minimal_dashboard_payload() -> dict:
    """Return a minimal payload matching build_dashboard_payload() shape."""
    return {
        "generated_at": "2024-01-15T12:00:00",
        "documents": ["messages.html", "messages2.html"],
        "summary": {
            "total_messages": 3,
            "user_messages": 3,
            "service_messages": 0,
            "unique_users": 2,
            "average_message_length": 12,
            "first_date": "2024-01-01",
            "last_date": "2024-01-02",
            "days_active": 2,
            "top_days_by_messages": [],
        },
        "metrics": {
            "total_messages": 3,
            "errors": [{"index": 1, "error": "ExportParseError: document is empty", "document": "messages2.html"}],
        },
        "charts": {
            "dates": [],
            "messages": {"values": [], "avg_7d": [], "avg_28d": [], "avg_lifetime": []},
        },
        "hourly": {
            "hourly_totals": [0] * 24,
            "weekday_totals": [0] * 7,
        },
    }


@pytest.fixture()
def mock_payload():
    """Return the minimal dashboard payload dict."""
    return _minimal_dashboard_payload()


@pytest.fixture()
def client(mock_payload):
    """TestClient for app.py with mocked analytics data.

    Patches build_dashboard_payload and export discovery so no export
    directory is needed.  Resets the module-level cache between tests.
    """
    import app as app_module

    with patch.object(
        app_module, "_cache", {"data": None, "built_at": 0.0}
    ):
        with patch(
            "app.find_export_files", return_value=[Path("messages.html")]
        ):
            with patch(
                "app.build_dashboard_payload", return_value=mock_payload
            ):
                with TestClient(app_module.app) as tc:
                    yield tc
