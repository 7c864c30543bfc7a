"""Pydantic integration for Swiss UIDs.

This module provides an annotated type and a field helper so SwissUid can be
used directly as a field of Pydantic models.

Example:
    >>> from pydantic import BaseModel
    >>> class Company(BaseModel):
    ...     name: str
    ...     uid: SwissUidField = uid_field()
    >>> Company(name="ACME", uid="CHE-109.322.551 MWST").uid
    CHE-109.322.55[1]
"""

from __future__ import annotations

from typing import Annotated, Any, cast

from pydantic import Field, PlainSerializer, PlainValidator, WithJsonSchema
from pydantic.fields import FieldInfo

from .uid import SwissUid

UID_PATTERN = r"^(CHE|ADM)-\d{3}\.\d{3}\.\d{3}$"


def _validate(value: Any) -> SwissUid:
    if isinstance(value, SwissUid):
        return value
    if not isinstance(value, str):
        raise ValueError(f"UID must be a string, got {type(value).__name__}")
    # ParseError is a ValueError, so Pydantic reports it as a validation error
    return SwissUid(value)


SwissUidField = Annotated[
    SwissUid,
    PlainValidator(_validate),
    PlainSerializer(SwissUid.to_string_plain, return_type=str),
    WithJsonSchema({"type": "string", "pattern": UID_PATTERN}),
]


def uid_field(**kwargs: Any) -> FieldInfo:
    """Create a Swiss UID field.

    This is a convenience wrapper around Pydantic's Field() that fills in a
    description and an example unless they are given.

    Args:
        **kwargs: Additional Field() arguments (default, alias, etc.)

    Returns:
        Pydantic FieldInfo suitable for use as a field default/metadata.

    Example:
        >>> class Company(BaseModel):
        ...     uid: SwissUidField = uid_field()
        ...     vat_uid: Optional[SwissUidField] = uid_field(default=None)
    """
    kwargs.setdefault("description", "Swiss business identifier (eCH-0097)")
    kwargs.setdefault("examples", ["CHE-109.322.551"])
    return cast(FieldInfo, Field(**kwargs))
