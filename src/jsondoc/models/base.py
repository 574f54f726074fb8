"""Base types shared by every document variant."""

import json
from abc import abstractmethod
from enum import Enum
from typing import TYPE_CHECKING, ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from jsondoc.visitors.base import JsonVisitor

R = TypeVar("R")


class DocumentKind(str, Enum):
    """Tag identifying which variant a document is."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    NULL = "null"
    ARRAY = "array"
    OBJECT = "object"


class DocumentBase(BaseModel):
    """
    Base class for all document variants.

    Documents are frozen once built. Operations that change a document
    return a new instance and leave the original untouched.
    """

    kind: ClassVar[DocumentKind]

    model_config = ConfigDict(frozen=True)

    @abstractmethod
    def serialize(self) -> str:
        """Render this document as compact JSON text."""

    @abstractmethod
    def accept(self, visitor: "JsonVisitor[R]") -> R:
        """Dispatch to the visitor method matching this variant."""

    def __str__(self) -> str:
        return self.serialize()


def quote(text: str) -> str:
    """Quote text as a JSON string literal, escaping as required."""
    return json.dumps(text, ensure_ascii=False)


def serialize(document: DocumentBase) -> str:
    """Render a document as compact JSON text."""
    return document.serialize()
