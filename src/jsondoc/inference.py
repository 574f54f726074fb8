"""Inference Engine - convert host values into documents.

Supported shapes, checked in this order:
1. None -> null
2. Existing documents -> returned unchanged
3. bool -> boolean
4. Enum members -> string holding the member name
5. str -> string
6. Real numbers -> number (widened to float)
7. Mappings with string keys -> object, iteration order kept. A key that
   is not a str instance raises NonStringKeyError
8. Records (named tuples, dataclasses, pydantic models) -> object with
   one property per field, in declaration order
9. Lists, tuples and other non-text sequences -> array

Anything else raises UnsupportedTypeError. Containers are tracked while
they are being converted so self-referencing values fail fast instead of
recursing forever.
"""

import dataclasses
import logging
import numbers
from collections.abc import Iterator, Mapping, Sequence
from contextlib import contextmanager
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

from jsondoc.config import settings
from jsondoc.errors import (
    CyclicReferenceError,
    InferenceDepthError,
    NonStringKeyError,
    UnsupportedTypeError,
)
from jsondoc.models import (
    NULL,
    DocumentBase,
    JsonArray,
    JsonBoolean,
    JsonNumber,
    JsonObject,
    JsonString,
    finite_number,
)

logger = logging.getLogger(__name__)

_TEXT_TYPES = (str, bytes, bytearray, memoryview)


def _is_named_tuple(value: Any) -> bool:
    return isinstance(value, tuple) and hasattr(type(value), "_fields")


def _record_fields(value: Any) -> Optional[Iterator[tuple[str, Any]]]:
    """Yield (name, value) for each declared field, or None if not a record."""
    if _is_named_tuple(value):
        return ((name, getattr(value, name)) for name in type(value)._fields)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return ((field.name, getattr(value, field.name)) for field in dataclasses.fields(value))
    if isinstance(value, BaseModel):
        return ((name, getattr(value, name)) for name in type(value).model_fields)
    return None


def _key_name(key: Any) -> str:
    if isinstance(key, str):
        return str.__str__(key)
    raise NonStringKeyError(key)


class InferenceEngine:
    """
    Converts host values into documents by inspecting their runtime type.

    Args:
        max_depth: Deepest container nesting accepted before giving up.
    """

    def __init__(self, max_depth: Optional[int] = None):
        self.max_depth = max_depth if max_depth is not None else settings.max_inference_depth

    def infer(self, value: Any) -> DocumentBase:
        """Convert a host value into a document.

        Raises:
            UnsupportedTypeError: A value has no document representation.
            NonStringKeyError: A mapping has a key that is not a string.
            CyclicReferenceError: A container contains itself.
            InferenceDepthError: Nesting exceeds ``max_depth``.
            NonFiniteNumberError: A number is NaN, infinite or overflows a float.
        """
        return self._infer(value, depth=0, active=set())

    def _infer(self, value: Any, depth: int, active: set[int]) -> DocumentBase:
        if value is None:
            return NULL
        if isinstance(value, DocumentBase):
            return value
        if isinstance(value, bool):
            return JsonBoolean(value)
        if isinstance(value, Enum):
            return JsonString(value.name)
        if isinstance(value, str):
            return JsonString(value)
        if isinstance(value, numbers.Real):
            return finite_number(value)
        if isinstance(value, _TEXT_TYPES):
            raise UnsupportedTypeError(value)

        if isinstance(value, Mapping):
            with self._entering(value, depth, active):
                return JsonObject(
                    [
                        (_key_name(key), self._infer(item, depth + 1, active))
                        for key, item in value.items()
                    ]
                )

        fields = _record_fields(value)
        if fields is not None:
            with self._entering(value, depth, active):
                logger.debug("Inferring %s as a record", type(value).__name__)
                return JsonObject(
                    [(name, self._infer(item, depth + 1, active)) for name, item in fields]
                )

        if isinstance(value, Sequence):
            with self._entering(value, depth, active):
                return JsonArray([self._infer(item, depth + 1, active) for item in value])

        raise UnsupportedTypeError(value)

    @contextmanager
    def _entering(self, value: Any, depth: int, active: set[int]) -> Iterator[None]:
        """Track a container while its children are converted."""
        if depth >= self.max_depth:
            raise InferenceDepthError(self.max_depth)
        ident = id(value)
        if ident in active:
            raise CyclicReferenceError(value)
        active.add(ident)
        try:
            yield
        finally:
            active.discard(ident)


def infer(value: Any) -> DocumentBase:
    """Convert a host value into a document using the default settings."""
    return InferenceEngine().infer(value)
