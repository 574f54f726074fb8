"""Composite document variants: arrays and objects."""

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Optional, Union

from pydantic import Field, InstanceOf, field_validator

from .base import DocumentBase, DocumentKind, R, quote
from .scalar import JsonBoolean, JsonNull, JsonNumber, JsonString

if TYPE_CHECKING:
    from jsondoc.visitors.base import JsonVisitor


class JsonArray(DocumentBase):
    """An ordered sequence of documents."""

    kind: ClassVar[DocumentKind] = DocumentKind.ARRAY

    elements: tuple[InstanceOf[DocumentBase], ...] = Field(default=())

    def __init__(self, elements: Iterable[DocumentBase] = (), **data: Any) -> None:
        super().__init__(elements=tuple(elements), **data)

    def __len__(self) -> int:
        return len(self.elements)

    def __getitem__(self, index: int) -> DocumentBase:
        return self.elements[index]

    def __iter__(self) -> Iterator[DocumentBase]:  # type: ignore[override]
        return iter(self.elements)

    def serialize(self) -> str:
        return _serialize_tree(self)

    def accept(self, visitor: "JsonVisitor[R]") -> R:
        return visitor.visit_array(self)


class JsonObject(DocumentBase):
    """
    An ordered collection of key/value properties.

    Properties are stored as ``(key, document)`` pairs in insertion order.
    Building from a mapping gives unique keys; building from pairs keeps
    whatever it is given, duplicates included. Duplicate keys are reported
    by ``ObjectValidationVisitor`` rather than rejected here.
    """

    kind: ClassVar[DocumentKind] = DocumentKind.OBJECT

    properties: tuple[tuple[str, InstanceOf[DocumentBase]], ...] = Field(default=())

    def __init__(
        self,
        properties: Union[
            Mapping[str, DocumentBase], Iterable[tuple[str, DocumentBase]]
        ] = (),
        **data: Any,
    ) -> None:
        super().__init__(properties=properties, **data)

    @field_validator("properties", mode="before")
    @classmethod
    def _pairs_from_mapping(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return tuple(value.items())
        if isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            return tuple(value)
        return value

    def keys(self) -> list[str]:
        """Property keys in insertion order."""
        return [key for key, _ in self.properties]

    def values(self) -> list[DocumentBase]:
        """Property values in insertion order."""
        return [value for _, value in self.properties]

    def items(self) -> list[tuple[str, DocumentBase]]:
        return list(self.properties)

    def get(self, key: str, default: Optional[DocumentBase] = None) -> Optional[DocumentBase]:
        """Look up a property. With duplicate keys the last one wins."""
        found = default
        for name, value in self.properties:
            if name == key:
                found = value
        return found

    def __contains__(self, key: object) -> bool:
        return any(name == key for name, _ in self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def __iter__(self) -> Iterator[str]:  # type: ignore[override]
        """Iterate over keys, like a dict."""
        return iter(self.keys())

    def serialize(self) -> str:
        return _serialize_tree(self)

    def accept(self, visitor: "JsonVisitor[R]") -> R:
        return visitor.visit_object(self)


Document = Union[JsonString, JsonNumber, JsonBoolean, JsonNull, JsonArray, JsonObject]


def _serialize_tree(root: DocumentBase) -> str:
    """Render a document with an explicit stack so nesting depth is unbounded."""
    parts: list[str] = []
    stack: list[Union[str, DocumentBase]] = [root]
    while stack:
        item = stack.pop()
        if isinstance(item, str):
            parts.append(item)
        elif isinstance(item, JsonArray):
            pending: list[Union[str, DocumentBase]] = ["["]
            for index, element in enumerate(item.elements):
                if index:
                    pending.append(",")
                pending.append(element)
            pending.append("]")
            stack.extend(reversed(pending))
        elif isinstance(item, JsonObject):
            pending = ["{"]
            for index, (key, value) in enumerate(item.properties):
                if index:
                    pending.append(",")
                pending.append(f"{quote(key)}:")
                pending.append(value)
            pending.append("}")
            stack.extend(reversed(pending))
        else:
            parts.append(item.serialize())
    return "".join(parts)
