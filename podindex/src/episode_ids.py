"""Episode identifier, title and ordering rules."""

from __future__ import annotations

import re

PILOT_EPISODE_ID = "0"
PILOT_TITLE = "番組の方向性"
EXTRA_PREFIX = "番外編"

_FILENAME_RE = re.compile(rf"^(\d+(?:-\d+)?|{EXTRA_PREFIX}-\d+)\.md$")
_HEADING_RE = re.compile(r"^##\s*")


def extract_episode_id(filename: str) -> str | None:
    """Return the episode id encoded in ``filename``, or None when it is not an episode file."""
    match = _FILENAME_RE.match(filename)
    return match.group(1) if match else None


def is_extra_episode(episode_id: str) -> bool:
    return episode_id.startswith(EXTRA_PREFIX)


def generate_title(episode_id: str, content: str) -> str:
    """Derive the display title for an episode."""
    if episode_id == PILOT_EPISODE_ID:
        return PILOT_TITLE
    if is_extra_episode(episode_id):
        return f"{EXTRA_PREFIX} {episode_id.split('-')[1]}"

    for line in content.split("\n"):
        # level-2 only; the summary heading never names the episode
        if line.startswith("##") and not line.startswith("###") and "サマリー" not in line:
            return _HEADING_RE.sub("", line, count=1).strip()

    return f"エピソード {episode_id}"


def episode_sort_key(episode_id: str) -> tuple[int, int]:
    """Canonical display rank as (tier, position).

    The pilot is tier 0, numbered episodes tier 1 ranked by number * 10 + part,
    and extras tier 2 ranked by their own number, so every extra follows every
    numbered episode however large the numbering grows.
    """
    if episode_id == PILOT_EPISODE_ID:
        return (0, 0)
    if is_extra_episode(episode_id):
        return (2, int(episode_id.split("-")[1]))
    parts = episode_id.split("-")
    suffix = int(parts[1]) if len(parts) > 1 else 0
    return (1, int(parts[0]) * 10 + suffix)
