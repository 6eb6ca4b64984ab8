# --- file: pushblock_core/levels/resolve.py
from __future__ import annotations
from typing import List, Tuple

from ..parser import parse_level_str
from ..state import State


def parse_level_id(level_id: str) -> Tuple[str, int]:
    """Parses a string of the form "path/to/file.txt#3" into (path, index)."""
    if "#" not in level_id:
        return level_id, 0
    path, idx = level_id.rsplit("#", 1)
    try:
        k = int(idx)
    except ValueError:
        raise ValueError(f"bad level index {idx!r} in {level_id!r}") from None
    return path, k


def split_on_blank_lines(text: str) -> List[str]:
    """Splits a multi-level file (or a rendered trace) into level blocks.

    Only empty lines separate levels; a line of spaces is an all-empty glyph row.
    """
    blocks: List[str] = []
    cur: List[str] = []
    for line in text.splitlines():
        if line == "":
            if cur:
                blocks.append("\n".join(cur))
                cur = []
        else:
            cur.append(line)
    if cur:
        blocks.append("\n".join(cur))
    return blocks


def load_level_by_id(level_id: str) -> State:
    """Loads level `index` of a file that may hold several levels separated by blank lines."""
    path, wanted = parse_level_id(level_id)
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    blocks = split_on_blank_lines(content)
    if not blocks:
        raise ValueError(f"No levels found in {path}")
    if wanted < 0 or wanted >= len(blocks):
        raise IndexError(f"Index {wanted} out of range for {path} (total {len(blocks)})")
    return parse_level_str(blocks[wanted])


def read_level_ids(list_path: str) -> List[str]:
    """Level ids from a list file, one per line; blank lines and '#' comments skipped."""
    with open(list_path, "r", encoding="utf-8") as f:
        return [ln.strip() for ln in f if ln.strip() and not ln.strip().startswith("#")]
