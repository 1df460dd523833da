from __future__ import annotations

import re
from collections.abc import Iterable


def content_lines(text: str) -> list[str]:
    """Trimmed, non-empty lines in document order."""
    return [line.strip() for line in (text or "").split("\n") if line.strip()]


def collect_matches(patterns: Iterable[re.Pattern[str]], text: str) -> list[str]:
    """First capture group of every match, pattern order then appearance order."""
    found: list[str] = []
    for pattern in patterns:
        for match in pattern.finditer(text or ""):
            captured = match.group(1)
            if captured and captured.strip():
                found.append(captured.strip())
    return found
