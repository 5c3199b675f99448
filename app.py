"""FastAPI service for the chat export statistics dashboard.

Serves the aggregated metrics of every export page found in EXPORTS_DIR,
cached for CACHE_TTL_SECONDS since the data only changes on a new export.

Deployment: uvicorn app:app --host 127.0.0.1 --port 8204
"""

from __future__ import annotations

import logging
import os
import threading
import time
from pathlib import Path
from typing import Any

from fastapi import FastAPI, HTTPException

from analytics import build_dashboard_payload, find_export_files

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Config
# ---------------------------------------------------------------------------
EXPORTS_DIR = Path(
    os.environ.get("CHAT_STATS_EXPORTS_DIR", Path(__file__).parent / "exports")
)
CACHE_TTL_SECONDS = 3600  # 1 hour
MAX_WORKERS = 4

# ---------------------------------------------------------------------------
# App
# ---------------------------------------------------------------------------
app = FastAPI(
    title="Chat Export Statistics",
    root_path="/chat_stats",
)

# ---------------------------------------------------------------------------
# Thread-safe cache
# ---------------------------------------------------------------------------
_cache_lock = threading.Lock()
_cache: dict[str, Any] = {
    "data": None,
    "built_at": 0.0,
}


def _build_payload() -> dict[str, Any]:
    files = find_export_files(EXPORTS_DIR)
    if not files:
        logger.warning("No export files found in %s", EXPORTS_DIR)
        raise HTTPException(status_code=503, detail="No export files found")
    return build_dashboard_payload(files, max_workers=MAX_WORKERS)


def _get_cached_data(force_refresh: bool = False) -> dict[str, Any]:
    """Return cached dashboard data, rebuilding if stale or forced."""
    now = time.monotonic()
    with _cache_lock:
        if (
            not force_refresh
            and _cache["data"] is not None
            and (now - _cache["built_at"]) < CACHE_TTL_SECONDS
        ):
            return _cache["data"]

    data = _build_payload()

    with _cache_lock:
        _cache["data"] = data
        _cache["built_at"] = time.monotonic()

    return data


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
@app.get("/health")
@app.get("/healthz")
def healthz():
    return {"status": "ok"}


@app.get("/api/data")
def api_data():
    """Return the full dashboard JSON payload."""
    return _get_cached_data()


@app.get("/api/documents")
def api_documents():
    """List the analyzed export pages and any that had to be skipped."""
    data = _get_cached_data()
    return {
        "documents": data["documents"],
        "errors": data["metrics"]["errors"],
    }


@app.get("/api/refresh")
def api_refresh():
    """Force a cache rebuild and return fresh data."""
    data = _get_cached_data(force_refresh=True)
    return {
        "status": "refreshed",
        "generated_at": data["generated_at"],
    }
