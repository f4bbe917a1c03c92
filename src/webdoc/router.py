from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Optional

from fastapi import APIRouter
from fastapi.types import DecoratedCallable

from webdoc.config import get_settings
from webdoc.domain.models import DocEntry
from webdoc.paths.segmenter import is_root, join, segments
from webdoc.tree import builder
from webdoc.tree.export import tree_to_dict
from webdoc.tree.model import RouteTree

logger = logging.getLogger(__name__)

_Decorator = Callable[[DecoratedCallable], DecoratedCallable]


def mount_prefix(pattern: str) -> str:
    """FastAPI include prefix for a mount pattern: "/admin/*" -> "/admin", "/" -> ""."""
    segs = segments(pattern)
    if is_root(segs):
        return ""
    return join(segs)


class Router:
    """
    Thin façade over a FastAPI APIRouter.

    Every registration goes to the engine first and is then recorded in
    the documentation tree, once per method. Dispatch, matching and path
    validation stay with FastAPI.

        users = Router()

        @users.get("/{id}", doc=DocEntry(title="Fetch one user"))
        def read_user(id: int): ...

        api = Router()
        api.mount("/users", users)
    """

    def __init__(
        self,
        tree: Optional[RouteTree] = None,
        *,
        default_param_type: Optional[str] = None,
        **engine_kwargs: Any,
    ) -> None:
        if tree is not None and default_param_type is not None:
            raise ValueError("pass default_param_type to the RouteTree, not alongside it")
        if tree is None:
            tree = RouteTree(
                default_param_type=default_param_type or get_settings().DEFAULT_PARAM_TYPE
            )
        self._tree = tree
        self._engine = APIRouter(**engine_kwargs)

    @property
    def engine(self) -> APIRouter:
        return self._engine

    @property
    def doc_tree(self) -> RouteTree:
        return self._tree

    # ----------------------------
    # Registration
    # ----------------------------

    def add_route(
        self,
        pattern: str,
        endpoint: Callable[..., Any],
        *,
        methods: Iterable[str],
        doc: Optional[DocEntry] = None,
        **engine_kwargs: Any,
    ) -> None:
        methods = [m.upper() for m in methods]
        self._engine.add_api_route(pattern, endpoint, methods=methods, **engine_kwargs)
        for m in methods:
            builder.register(self._tree, m, pattern, doc)

    def api_route(
        self,
        pattern: str,
        *,
        methods: Iterable[str],
        doc: Optional[DocEntry] = None,
        **engine_kwargs: Any,
    ) -> _Decorator:
        def decorator(func: DecoratedCallable) -> DecoratedCallable:
            self.add_route(pattern, func, methods=methods, doc=doc, **engine_kwargs)
            return func

        return decorator

    def get(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["GET"], doc=doc, **engine_kwargs)

    def head(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["HEAD"], doc=doc, **engine_kwargs)

    def post(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["POST"], doc=doc, **engine_kwargs)

    def put(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["PUT"], doc=doc, **engine_kwargs)

    def patch(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["PATCH"], doc=doc, **engine_kwargs)

    def delete(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["DELETE"], doc=doc, **engine_kwargs)

    def options(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["OPTIONS"], doc=doc, **engine_kwargs)

    def connect(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["CONNECT"], doc=doc, **engine_kwargs)

    def trace(self, pattern: str, doc: Optional[DocEntry] = None, **engine_kwargs: Any) -> _Decorator:
        return self.api_route(pattern, methods=["TRACE"], doc=doc, **engine_kwargs)

    # ----------------------------
    # Composition / introspection
    # ----------------------------

    def mount(self, pattern: str, sub: Router, **engine_kwargs: Any) -> None:
        """Nest a fully built sub-router (route group) under pattern."""
        prefix = mount_prefix(pattern)
        self._engine.include_router(sub.engine, prefix=prefix, **engine_kwargs)
        builder.mount(self._tree, pattern, sub.doc_tree)
        logger.debug("included sub-router with prefix %r", prefix)

    def add_doc_route(self, path: Optional[str] = None) -> str:
        """Serve the documentation tree as JSON at path (not itself documented)."""
        path = path or get_settings().DOC_ROUTE
        tree = self._tree

        def read_doc_tree() -> dict[str, Any]:
            return tree_to_dict(tree)

        self._engine.add_api_route(
            path, read_doc_tree, methods=["GET"], include_in_schema=False
        )
        return path
