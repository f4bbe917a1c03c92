from __future__ import annotations

import copy
import logging
from typing import Optional

from webdoc.domain.models import DocEntry
from webdoc.paths.segmenter import is_root, join, param_names, segments
from webdoc.tree.model import Node, RouteTree

logger = logging.getLogger(__name__)


def upsert_path(
    root: Node,
    segs: list[str],
    method: Optional[str] = None,
    doc: Optional[DocEntry] = None,
) -> Node:
    """
    Walk root.children along segs, creating structural nodes where missing.

    Existing nodes are reused, never rebuilt. When a method is given, the
    terminal node's methods map is copied and only that key is replaced.
    Returns the terminal node.
    """
    node = root
    for seg in segs:
        nxt = node.children.get(seg)
        if nxt is None:
            nxt = Node()
            node.children[seg] = nxt
        node = nxt

    if method is not None:
        node.methods = {**node.methods, method: doc if doc is not None else DocEntry()}
    return node


def register(tree: RouteTree, method: str, pattern: str, doc: Optional[DocEntry] = None) -> Node:
    """
    Record one (method, pattern) registration.

    Path parameters are auto-documented with tree.default_param_type unless
    the doc already declares them. Re-registering a method at the same path
    replaces that method's entry only.
    """
    segs = segments(pattern)
    key = (method or "").upper()

    # stored docs never share dicts with the caller
    doc = doc.model_copy(deep=True) if doc is not None else DocEntry()

    names = param_names(segs)
    if names:
        doc = doc.with_url_params(names, tree.default_param_type)

    node = upsert_path(tree.root, [] if is_root(segs) else segs, key, doc)

    logger.debug("registered %s %s", key, join(segs))
    return node


def mount(tree: RouteTree, pattern: str, child: RouteTree) -> Node:
    """
    Graft child's root children under the node addressed by pattern.

    Keys collide last-writer-wins. The target keeps its own methods; methods
    the child registered on its root are added only where the target has no
    entry for that method. Child nodes are copied, the trees never share nodes.
    """
    segs = segments(pattern)
    target = tree.root if is_root(segs) else upsert_path(tree.root, segs)

    for seg, node in child.root.children.items():
        target.children[seg] = copy.deepcopy(node)

    extra = {m: d for m, d in child.root.methods.items() if m not in target.methods}
    if extra:
        target.methods = {**target.methods, **extra}

    logger.debug(
        "mounted %d route group(s) at %s", len(child.root.children), join(segs)
    )
    return target
