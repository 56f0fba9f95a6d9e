"""JSON-in-text column adapters.

Tags, training programs, specialties, certifications and social links are
persisted as JSON text. Everything above the repositories works with the
typed values; these helpers are the only place that touches the raw text.
"""

from __future__ import annotations

from typing import Any, TypeVar

import structlog
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .schemas.program import Certification, ProgramDay

logger = structlog.get_logger(__name__)

T = TypeVar("T")

_STRING_LIST = TypeAdapter(list[str])
_PROGRAM = TypeAdapter(list[ProgramDay])
_CERTIFICATIONS = TypeAdapter(list[Certification])
_SOCIAL_LINKS = TypeAdapter(dict[str, str])


def _dump(adapter: TypeAdapter, value: Any) -> str | None:
    if value is None:
        return None
    # exclude_none keeps optional exercise fields absent instead of null
    return adapter.dump_json(value, exclude_none=True).decode("utf-8")


def _load(adapter: TypeAdapter[T], raw: str | None, default: T, *, column: str) -> T:
    if not raw:
        return default
    try:
        return adapter.validate_json(raw)
    except PydanticValidationError as exc:
        logger.warning("stored_json_invalid", column=column, error=str(exc), preview=raw[:200])
        return default


def dump_tags(tags: list[str] | None) -> str | None:
    return _dump(_STRING_LIST, tags)


def load_tags(raw: str | None) -> list[str]:
    return _load(_STRING_LIST, raw, [], column="tags")


def dump_program(program: list[ProgramDay] | None) -> str | None:
    return _dump(_PROGRAM, program)


def load_program(raw: str | None) -> list[ProgramDay]:
    return _load(_PROGRAM, raw, [], column="program")


def dump_specialties(specialties: list[str] | None) -> str | None:
    return _dump(_STRING_LIST, specialties)


def load_specialties(raw: str | None) -> list[str]:
    return _load(_STRING_LIST, raw, [], column="specialties")


def dump_certifications(certifications: list[Certification] | None) -> str | None:
    return _dump(_CERTIFICATIONS, certifications)


def load_certifications(raw: str | None) -> list[Certification]:
    return _load(_CERTIFICATIONS, raw, [], column="certifications")


def dump_social_links(links: dict[str, str] | None) -> str | None:
    return _dump(_SOCIAL_LINKS, links)


def load_social_links(raw: str | None) -> dict[str, str]:
    return _load(_SOCIAL_LINKS, raw, {}, column="social_links")
