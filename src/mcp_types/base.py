"""Base models shared by every wire type."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, SerializerFunctionWrapHandler, model_serializer


class WireModel(BaseModel):
    """Immutable model serialized with the protocol's camelCase field names.

    Optional fields that are still ``None`` are left out of the output, so an
    absent field never comes back as ``null``. An explicit ``null`` received
    for such a field reads the same as an absent one and is not re-emitted.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @model_serializer(mode="wrap")
    def _omit_absent(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data: dict[str, Any] = handler(self)
        for name, field in type(self).model_fields.items():
            if field.default is None and getattr(self, name) is None:
                data.pop(name, None)
                if field.serialization_alias:
                    data.pop(field.serialization_alias, None)
        return data

    def to_dict(self) -> dict[str, Any]:
        """Dump to a JSON-compatible dict using wire field names."""
        return self.model_dump(mode="json", by_alias=True)

    def to_json(self) -> str:
        """Dump to compact JSON text using wire field names."""
        return self.model_dump_json(by_alias=True)


# ---------------------------------------------------------------------------
# Pagination
# ---------------------------------------------------------------------------


class PaginatedRequest(WireModel):
    """Params of a ``*/list`` request."""

    cursor: str | None = None


class PaginatedResult(WireModel):
    """Result of a ``*/list`` request; ``next_cursor`` is set when more pages exist."""

    next_cursor: str | None = Field(default=None, alias="nextCursor")


class EmptyResult(WireModel):
    """Result of requests that only acknowledge (``ping``, ``resources/subscribe``)."""
