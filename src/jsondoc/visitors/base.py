"""Visitor interface for traversing documents."""

from abc import ABC, abstractmethod
from typing import Generic

from jsondoc.models import (
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
)
from jsondoc.models.base import R


class JsonVisitor(ABC, Generic[R]):
    """
    One operation per document variant, each returning ``R``.

    Call ``document.accept(visitor)`` to run a visitor; recursive visitors
    call ``accept`` on child documents themselves.
    """

    @abstractmethod
    def visit_object(self, obj: JsonObject) -> R: ...

    @abstractmethod
    def visit_array(self, array: JsonArray) -> R: ...

    @abstractmethod
    def visit_string(self, string: JsonString) -> R: ...

    @abstractmethod
    def visit_number(self, number: JsonNumber) -> R: ...

    @abstractmethod
    def visit_boolean(self, boolean: JsonBoolean) -> R: ...

    @abstractmethod
    def visit_null(self, null: JsonNull) -> R: ...
