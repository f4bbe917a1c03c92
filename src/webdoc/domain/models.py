from __future__ import annotations

from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field

HTTP_METHODS: tuple[str, ...] = (
    "GET",
    "HEAD",
    "POST",
    "PUT",
    "PATCH",
    "DELETE",
    "OPTIONS",
    "CONNECT",
    "TRACE",
)


class DocEntry(BaseModel):
    """
    Documentation attached to one (path, method) pair.

    Frozen: auto-completion returns a new instance, so one DocEntry can be
    handed to several registrations without being mutated.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    input: Optional[Any] = Field(default=None, alias="in")
    output: Optional[Any] = Field(default=None, alias="out")
    form_value: dict[str, str] = Field(default_factory=dict)
    url_params: dict[str, str] = Field(default_factory=dict)

    def with_url_params(self, names: Iterable[str], default_type: str = "string") -> DocEntry:
        """Copy with every name documented; explicit declarations win."""
        missing = {n: default_type for n in names if n and n not in self.url_params}
        if not missing:
            return self
        return self.model_copy(update={"url_params": {**self.url_params, **missing}}, deep=True)

    def dump(self) -> dict[str, Any]:
        """Wire form: keys "in"/"out", empty or absent fields omitted."""
        raw = {
            "title": self.title,
            "description": self.description,
            "in": _schema_of(self.input),
            "out": _schema_of(self.output),
            "form_value": dict(self.form_value),
            "url_params": dict(self.url_params),
        }
        return {k: v for k, v in raw.items() if not _is_empty(v)}


def _schema_of(value: Any) -> Any:
    # pydantic models document themselves; anything else is passed through
    if isinstance(value, type) and issubclass(value, BaseModel):
        return value.model_json_schema()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    return value


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, dict, list, tuple, set)) and not value:
        return True
    return False
