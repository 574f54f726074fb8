"""Structural validators.

Validators answer with a verdict instead of raising: a document that is
well formed but has undesirable content (duplicate keys, nulls, mixed
arrays) yields ``False``.
"""

import logging

from jsondoc.models import (
    DocumentKind,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)

from .base import JsonVisitor

logger = logging.getLogger(__name__)


class ObjectValidationVisitor(JsonVisitor[bool]):
    """
    Check that objects have unique keys and that no value anywhere is null.
    """

    def visit_object(self, obj: JsonObject) -> bool:
        keys = obj.keys()
        if len(keys) != len(set(keys)):
            logger.debug("Object has duplicate keys: %s", keys)
            return False
        return all(value.accept(self) for value in obj.values())

    def visit_array(self, array: JsonArray) -> bool:
        return all(element.accept(self) for element in array.elements)

    def visit_string(self, string: JsonString) -> bool:
        return True

    def visit_number(self, number: JsonNumber) -> bool:
        return True

    def visit_boolean(self, boolean: JsonBoolean) -> bool:
        return True

    def visit_null(self, null: JsonNull) -> bool:
        logger.debug("Null value found")
        return False


class ArrayHomogeneityVisitor(JsonVisitor[bool]):
    """
    Check that every array holds a single kind of non-null element.

    Nulls are ignored. Nested arrays must be homogeneous themselves;
    objects are only searched for arrays, their properties may differ.
    """

    def visit_array(self, array: JsonArray) -> bool:
        non_null = [e for e in array.elements if e.kind is not DocumentKind.NULL]
        if not non_null:
            return True
        expected = non_null[0].kind
        for element in non_null:
            if element.kind is not expected:
                logger.debug(
                    "Array mixes %s and %s elements", expected.value, element.kind.value
                )
                return False
            if not element.accept(self):
                return False
        return True

    def visit_object(self, obj: JsonObject) -> bool:
        return all(value.accept(self) for value in obj.values())

    def visit_string(self, string: JsonString) -> bool:
        return True

    def visit_number(self, number: JsonNumber) -> bool:
        return True

    def visit_boolean(self, boolean: JsonBoolean) -> bool:
        return True

    def visit_null(self, null: JsonNull) -> bool:
        return True
