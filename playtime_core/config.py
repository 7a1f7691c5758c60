from __future__ import annotations
import logging
import os
import re

# ===== App defaults (seconds) =====
DEFAULT_SETTINGS = {
    "periods": 4,
    "period_length": 600,           # 10 minutes
    "players_on_field": 5,
    "rotation_duration": None,      # None -> advisor recommendation
    "balance_strength": True,
}

# ===== Control steps / floors =====
MIN_PERIODS = 1
MIN_PLAYERS_ON_FIELD = 1
PERIOD_LENGTH_STEP = 60
MIN_PERIOD_LENGTH = 60

# Bulk roster paste: newlines, commas or semicolons
BULK_SPLIT = re.compile(r"[\n,;]+")

TIER_LABELS = {True: "Strong", False: "Developing"}

LOG_LEVEL_ENV = "ROTATION_LOG_LEVEL"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Basic stream logging for the app; level from ROTATION_LOG_LEVEL if not given."""
    lvl = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()
    logging.basicConfig(level=getattr(logging, lvl, logging.INFO), format=LOG_FORMAT)


# ===== Visual theme (wrapped in <style>) =====
def ui_css() -> str:
    return """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap" rel="stylesheet">
<style>
:root{
  --bg:#0b0e14;
  --surface: rgba(18, 22, 31, 0.78);
  --muted: rgba(24, 30, 44, 0.7);
  --line:#2a3142;
  --text:#eaf1fb;
  --sub:#B7C2D3;
  --accent: hsl(210, 90%, 60%);
  --good:#25d790; --warn:#ffb547;
  --radius:16px;
}
body, .stApp, .block-container {
  font-family: Inter, system-ui, Segoe UI, Roboto, Helvetica, Arial, sans-serif;
}
.block-container { padding-top: 1rem; max-width: 1200px; }

.clock{
  font-size: 44px; font-weight: 700; letter-spacing: .02em;
  font-variant-numeric: tabular-nums;
}
.chip{
  display:inline-block; margin:2px 4px 2px 0;
  padding:6px 10px; border:1px solid var(--line);
  border-radius:999px; background:var(--muted); color:var(--text);
}
.chip.strong{ border-color: var(--good); }
.caption { color: var(--sub); font-size: 12px; margin-top: 6px }
</style>
"""
