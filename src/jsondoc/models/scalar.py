"""Leaf document variants: strings, numbers, booleans and null."""

import math
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import Field, StrictBool, field_validator

from jsondoc.errors import NonFiniteNumberError

from .base import DocumentBase, DocumentKind, R, quote

if TYPE_CHECKING:
    from jsondoc.visitors.base import JsonVisitor


class JsonString(DocumentBase):
    """A text value."""

    kind: ClassVar[DocumentKind] = DocumentKind.STRING

    value: str

    def __init__(self, value: str, **data: Any) -> None:
        super().__init__(value=value, **data)

    def serialize(self) -> str:
        return quote(self.value)

    def accept(self, visitor: "JsonVisitor[R]") -> R:
        return visitor.visit_string(self)


class JsonNumber(DocumentBase):
    """
    A numeric value.

    Integers are widened to float so every number renders the same way
    (``25`` becomes ``25.0``). NaN and infinities are rejected because JSON
    has no literal for them.
    """

    kind: ClassVar[DocumentKind] = DocumentKind.NUMBER

    value: float = Field(..., allow_inf_nan=False)

    def __init__(self, value: float, **data: Any) -> None:
        super().__init__(value=value, **data)

    @field_validator("value", mode="before")
    @classmethod
    def _widen_to_float(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("booleans must be wrapped in JsonBoolean")
        if isinstance(value, int):
            return float(value)
        return value

    def serialize(self) -> str:
        return repr(float(self.value))

    def accept(self, visitor: "JsonVisitor[R]") -> R:
        return visitor.visit_number(self)


def finite_number(value: Any) -> JsonNumber:
    """Build a number, raising NonFiniteNumberError when it has no JSON form."""
    try:
        number = float(value)
    except OverflowError as exc:
        raise NonFiniteNumberError(value) from exc
    if not math.isfinite(number):
        raise NonFiniteNumberError(value)
    return JsonNumber(number)


class JsonBoolean(DocumentBase):
    """A true/false value."""

    kind: ClassVar[DocumentKind] = DocumentKind.BOOLEAN

    value: StrictBool

    def __init__(self, value: bool, **data: Any) -> None:
        super().__init__(value=value, **data)

    def serialize(self) -> str:
        return "true" if self.value else "false"

    def accept(self, visitor: "JsonVisitor[R]") -> R:
        return visitor.visit_boolean(self)


class JsonNull(DocumentBase):
    """The null value. Use the shared ``NULL`` instance."""

    kind: ClassVar[DocumentKind] = DocumentKind.NULL

    def serialize(self) -> str:
        return "null"

    def accept(self, visitor: "JsonVisitor[R]") -> R:
        return visitor.visit_null(self)


NULL = JsonNull()
