"""Visitors over the document model.

- JsonVisitor - abstract base, one method per variant
- ObjectValidationVisitor - unique keys, no nulls
- ArrayHomogeneityVisitor - one element kind per array
"""

from jsondoc.models import DocumentBase

from .base import JsonVisitor
from .validation import ArrayHomogeneityVisitor, ObjectValidationVisitor


def is_valid(document: DocumentBase) -> bool:
    """True when every object has unique keys and no value is null."""
    return document.accept(ObjectValidationVisitor())


def is_homogeneous(document: DocumentBase) -> bool:
    """True when every array in the document holds one kind of element."""
    return document.accept(ArrayHomogeneityVisitor())


__all__ = [
    "JsonVisitor",
    "ObjectValidationVisitor",
    "ArrayHomogeneityVisitor",
    "is_valid",
    "is_homogeneous",
]
