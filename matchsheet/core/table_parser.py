"""Parse the free-text "label:key" lists typed in by the user.

Each line reads label:key, e.g. "Alice:1234567" for a player or
"NM1:2719327" for a pool map. The key is the osu! id and becomes the
lookup key; the label is only ever displayed. Lines without a ':' are
skipped, and nothing is trimmed.
"""

import re

from .models import MapEntry


_LINE_BREAK = re.compile(r'\r?\n')


def split_lines(text: str | None) -> list[str]:
    """Split on \\n or \\r\\n."""
    if not text:
        return []
    return _LINE_BREAK.split(text)


def _label_key_pairs(text: str | None):
    for line in split_lines(text):
        parts = line.split(':', 1)
        if len(parts) < 2:
            continue
        yield parts[0], parts[1]


def parse_participants(text: str | None) -> dict[str, str]:
    """Return {participant key: display name}."""
    return {key: label for label, key in _label_key_pairs(text)}


def parse_map_pool(text: str | None) -> dict[str, MapEntry]:
    """Return {beatmap key: MapEntry} in the order the pool was typed."""
    return {key: MapEntry(key=key, name=label)
            for label, key in _label_key_pairs(text)}


def parse_match_links(text: str | None) -> list[str]:
    """One match link (or id) per line; blank lines are dropped."""
    return [line.strip() for line in split_lines(text) if line.strip()]
