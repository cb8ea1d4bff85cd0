# utils/date_parser.py
from __future__ import annotations
from datetime import date, datetime
from typing import Optional
import re

import dateparser

# Hint dateparser with the languages our users type dates in.
PREFERRED_LANGS = ["en"]
_ISO_PREFIX = re.compile(r"^(\d{4})-(\d{2})-(\d{2})(?:[T ].*)?$")


def parse_date(value: str) -> Optional[date]:
    """
    Parses common date inputs. Supports:
    - YYYY-MM-DD (also as the prefix of an ISO timestamp, e.g. "2025-10-15T00:00:00.000Z")
    - YYYY/MM/DD
    - DD.MM.YYYY
    - MM/DD/YYYY
    - Natural language dates (e.g., "October 15, 2025", "tomorrow") via dateparser
    If parsing fails, returns None.
    """
    if not value:
        return None

    v = value.strip()
    if not v:
        return None

    iso = _ISO_PREFIX.match(v)
    if iso:
        try:
            return date(int(iso.group(1)), int(iso.group(2)), int(iso.group(3)))
        except ValueError:
            return None

    fmts = ["%Y/%m/%d", "%d.%m.%Y", "%m/%d/%Y"]
    for fmt in fmts:
        try:
            return datetime.strptime(v, fmt).date()
        except ValueError:
            pass

    # Natural language fallback
    parsed = dateparser.parse(
        v,
        languages=PREFERRED_LANGS,
        settings={"STRICT_PARSING": True},
    )
    if parsed:
        return parsed.date()
    parsed = dateparser.parse(v, languages=PREFERRED_LANGS)
    if parsed and not any(ch.isdigit() for ch in v):
        # relative expressions such as "today" or "next friday"
        return parsed.date()
    return None


def format_display_date(value: date) -> str:
    """Long US form used on hotel cards, e.g. "October 15, 2025"."""
    return f"{value.strftime('%B')} {value.day}, {value.year}"
