from __future__ import annotations

from datetime import date


def today_iso() -> str:
    """Today's local date in YYYY-MM-DD form; a module function so tests can monkeypatch it."""
    return date.today().isoformat()
