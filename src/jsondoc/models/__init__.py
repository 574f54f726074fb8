"""Document model for JSON-like values.

A document is one of six frozen variants: string, number, boolean, null,
array and object. Arrays and objects hold other documents, so a document is
always a finite tree built from fully formed children.

Every variant supports:
- ``serialize()`` - compact JSON text, no whitespace
- ``accept(visitor)`` - double dispatch into a ``JsonVisitor``
"""

from .base import (
    DocumentBase,
    DocumentKind,
    quote,
    serialize,
)
from .container import (
    Document,
    JsonArray,
    JsonObject,
)
from .scalar import (
    NULL,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonString,
    finite_number,
)

__all__ = [
    # Base types
    "DocumentBase",
    "DocumentKind",
    "quote",
    "serialize",
    # Leaf variants
    "JsonString",
    "JsonNumber",
    "JsonBoolean",
    "JsonNull",
    "NULL",
    "finite_number",
    # Composite variants
    "Document",
    "JsonArray",
    "JsonObject",
]
