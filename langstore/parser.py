"""Parser for the flat ``key = value`` language file format.

One entry per line. Blank separator lines are collapsed before parsing,
lines without a ``=`` are skipped, and there is no comment or escape syntax.
"""

import re

from langstore.models import LocaleTable

ENTRY_PATTERN = re.compile(r"^(.+?) *?= *?([^\n]+)")


def parse(raw_text: str) -> LocaleTable:
    """Parse raw language file text into a locale table.

    Every "\\n\\n" is collapsed into a single "\\n" before the lines are read.

    Args:
        raw_text: Full text of a language file.

    Returns:
        Parsed key -> value table. Never raises on malformed input.
    """
    return parse_lines(raw_text.replace("\n\n", "\n"))


def parse_lines(raw_text: str) -> LocaleTable:
    """Parse language file lines without the blank-line pre-pass.

    Args:
        raw_text: Newline separated entries.

    Returns:
        Parsed key -> value table; later duplicate keys win.
    """
    lang: LocaleTable = {}
    for line in raw_text.split("\n"):
        matches = ENTRY_PATTERN.match(line)
        if matches:
            lang[matches.group(1)] = matches.group(2).strip()
    return lang
