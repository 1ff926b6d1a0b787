"""
Input validation for album payloads.

Each payload is checked against a pydantic model before anything reaches the
database. Failures are reported as a ``ValidationError`` carrying a mapping of
field name to a human readable message, e.g. ``{"title": "Title is required."}``.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, TypeVar
from uuid import UUID

import pydantic
from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import ValidationError

ModelT = TypeVar("ModelT", bound=BaseModel)

# Length of the String columns these fields are stored in
MAX_TEXT_LENGTH = 255

REQUEST_LOCATIONS = {"body", "path", "query", "header", "cookie"}


def _require_text(value: str | None, field: str) -> str:
    if value is None or not value.strip():
        raise ValueError(f"{field.capitalize()} is required.")
    return value


class AlbumRecordCreate(BaseModel):
    """Body of ``POST /create`` on the REST service."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str = Field(max_length=MAX_TEXT_LENGTH)
    artist: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str) -> str:
        return _require_text(value, "title")


class AlbumRecordUpdate(BaseModel):
    """Body of ``POST /{id}/update``; only the provided fields are applied."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)
    artist: str | None = Field(default=None, max_length=MAX_TEXT_LENGTH)

    @field_validator("title")
    @classmethod
    def title_required(cls, value: str | None) -> str:
        return _require_text(value, "title")


class UserCreate(BaseModel):
    username: str = Field(max_length=MAX_TEXT_LENGTH)

    @field_validator("username")
    @classmethod
    def username_required(cls, value: str) -> str:
        return _require_text(value, "username")


class ArtistCreate(BaseModel):
    name: str = Field(max_length=MAX_TEXT_LENGTH)

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        return _require_text(value, "name")


class CollectionAlbumCreate(BaseModel):
    """Arguments of the ``createAlbum`` GraphQL mutation."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str = Field(max_length=MAX_TEXT_LENGTH)
    artist: str = Field(max_length=MAX_TEXT_LENGTH)
    owner: UUID
    art: str | None = None
    year: int | None = None
    rating: int | None = None

    @field_validator("title", "artist")
    @classmethod
    def text_required(cls, value: str, info: pydantic.ValidationInfo) -> str:
        return _require_text(value, info.field_name or "value")


def _error_message(field: str, error: Mapping[str, Any]) -> str:
    if error["type"] == "missing" or ("input" in error and error["input"] is None):
        return f"{field.capitalize()} is required."
    ctx = error.get("ctx") or {}
    if error["type"] == "string_too_long":
        return f"{field.capitalize()} must be at most {ctx['max_length']} characters."
    if "error" in ctx:
        return str(ctx["error"])
    return str(error["msg"])


def error_messages(errors: Iterable[Mapping[str, Any]]) -> dict[str, str]:
    """Map pydantic/FastAPI error details to field -> message, first error per field wins.

    Request-level locations (``body``, ``path``, ...) are dropped from field
    names, so ``("path", "album_id")`` is reported as ``album_id``.
    """
    messages: dict[str, str] = {}
    for error in errors:
        if error["type"] == "json_invalid":
            messages.setdefault("body", "Malformed JSON body.")
            continue
        loc = [str(part) for part in error["loc"]]
        if len(loc) > 1 and loc[0] in REQUEST_LOCATIONS:
            loc = loc[1:]
        field = ".".join(loc) or "body"
        messages.setdefault(field, _error_message(field, error))
    return messages


def validate_payload(model: type[ModelT], payload: Any) -> ModelT:
    """Validate ``payload`` against ``model``.

    Raises:
        ValidationError: with one message per offending field
    """
    if not isinstance(payload, Mapping):
        raise ValidationError({"body": "Expected a JSON object."})

    try:
        return model.model_validate(dict(payload))
    except pydantic.ValidationError as exc:
        raise ValidationError(error_messages(exc.errors())) from exc
