from __future__ import annotations

import re
from typing import Iterable

SEPARATOR = "/"
ROOT = "/"
WILDCARD_SUFFIX = "/*"

# :id (goji), {id} / {id:int} (starlette), <id> / <int:id> (flask)
_PARAM_COLON = re.compile(r"^:([^/]+)$")
_PARAM_BRACE = re.compile(r"^\{([^}:]+)(?::[^}]*)?\}$")
_PARAM_ANGLE = re.compile(r"^<(?:[^>:]+:)?([^>:]+)>$")


def segments(pattern: str) -> list[str]:
    """
    Normalize a route pattern into its ordered path segments.

      "/users/:id/"  -> ["/users", "/:id"]
      "/admin/*"     -> ["/admin"]
      "" or "///"    -> ["/"]

    Never fails; anything that trims to nothing is the root.
    """
    p = pattern or ""
    if p.endswith(WILDCARD_SUFFIX):
        p = p[: -len(WILDCARD_SUFFIX)]

    p = p.strip(SEPARATOR)
    if not p:
        return [ROOT]

    return [SEPARATOR + part for part in p.split(SEPARATOR) if part]


def is_root(segs: list[str]) -> bool:
    return segs == [ROOT]


def _param_match(segment: str) -> re.Match[str] | None:
    body = segment[len(SEPARATOR):] if segment.startswith(SEPARATOR) else segment
    for rx in (_PARAM_COLON, _PARAM_BRACE, _PARAM_ANGLE):
        m = rx.match(body)
        if m is not None:
            return m
    return None


def is_param(segment: str) -> bool:
    return _param_match(segment) is not None


def param_name(segment: str) -> str:
    """Bare parameter name of a parameter segment ("" for a literal segment)."""
    m = _param_match(segment)
    if m is None:
        return ""
    return m.group(1).strip()


def param_names(segs: Iterable[str]) -> list[str]:
    # keeps repeats and order; callers dedupe if they care
    return [param_name(s) for s in segs if is_param(s)]


def join(segs: Iterable[str]) -> str:
    out = "".join(segs)
    return out or ROOT
