from __future__ import annotations

from typing import Iterable, List

from .constants import ROOT_PATH


def escape_segment(segment) -> str:
    """Escape one property name for use inside a dot path.

    Property names may contain dots (``"v1.2"``), so ``.`` becomes ``\\.`` and
    ``\\`` becomes ``\\\\``.
    """
    if not isinstance(segment, str):
        segment = str(segment)
    return segment.replace('\\', '\\\\').replace('.', '\\.')


def join_path(segments: Iterable[str]) -> str:
    parts = [escape_segment(s) for s in segments]
    if not parts:
        return ROOT_PATH
    return '.'.join(parts)


def split_path(path: str) -> List[str]:
    """Split a dot path on unescaped dots, unescaping each segment.

    ``None``, ``''`` and ``'(root)'`` all name the top-level schema and split
    to an empty list.
    """
    if path in (None, '', ROOT_PATH):
        return []
    if not isinstance(path, str):
        path = str(path)

    segments: List[str] = []
    buf: List[str] = []
    chars = iter(path)
    for ch in chars:
        if ch == '\\':
            # Trailing backslash stays literal.
            buf.append(next(chars, '\\'))
        elif ch == '.':
            segments.append(''.join(buf))
            buf = []
        else:
            buf.append(ch)
    segments.append(''.join(buf))
    return [s for s in segments if s != '']
