"""
POSIX path string transforms.

Trailing slashes are ignored, as in Node's ``path`` module. The
``change_*`` helpers keep a trailing ``?query`` part untouched.
"""

from __future__ import annotations

import posixpath
from typing import Optional


def _strip_trailing_slashes(path: str) -> str:
    stripped = path.rstrip("/")
    if not stripped and path.startswith("/"):
        return "/"
    return stripped


def _split_query(path: str) -> tuple[str, str]:
    index = path.find("?")
    if index > 0:
        return path[:index], path[index:]
    return path, ""


def basename(path: str, ext: Optional[str] = None) -> str:
    """
    Last portion of ``path``.

    ``basename("/a/b.html", ".html")`` -> ``"b"``
    """
    path = _strip_trailing_slashes(path)
    if path == "/":
        return ""
    base = posixpath.basename(path)
    if ext and base.endswith(ext) and base != ext:
        base = base[: -len(ext)]
    return base


def extname(path: str) -> str:
    """Extension of the last portion, dot included; ``""`` when none."""
    return posixpath.splitext(basename(path))[1]


def dirname(path: str) -> str:
    path = _strip_trailing_slashes(path)
    if path == "/":
        return "/"
    result = posixpath.dirname(path)
    return result or "."


def _prefix(path: str) -> str:
    """Directory part of ``path`` including its trailing slash."""
    index = path.rstrip("/").rfind("/")
    return path[: index + 1] if index >= 0 else ""


def change_extname(path: str, extname: str) -> str:
    """
    Replace the extension of ``path``.

    ``change_extname("a/b.js?v=1", ".ts")`` -> ``"a/b.ts?v=1"``
    """
    path, query = _split_query(path)
    base = basename(path)
    stem = posixpath.splitext(base)[0]
    return _prefix(path) + stem + (extname or "") + query


def change_basename(path: str, basename_: str, is_same_ext: bool = False) -> str:
    """
    Replace the last portion of ``path``.

    With ``is_same_ext`` the original extension is kept and ``basename_``
    only replaces the stem.
    """
    path, query = _split_query(path)
    new_base = basename_
    if is_same_ext:
        new_base = basename_ + extname(path)
    return _prefix(path) + new_base + query
