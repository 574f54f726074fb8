"""Transform operations that derive new documents from existing ones.

Nothing here mutates its input. Filters keep the relative order of the
entries they retain; maps keep the array length.
"""

from collections.abc import Callable, Iterable, Sequence
from typing import Any, Optional, TypeVar, Union

from jsondoc.errors import NonFiniteNumberError, UnsupportedTypeError
from jsondoc.models import (
    NULL,
    DocumentBase,
    DocumentKind,
    JsonArray,
    JsonBoolean,
    JsonNumber,
    JsonObject,
    JsonString,
    finite_number,
)

Container = TypeVar("Container", JsonArray, JsonObject)

# Kinds that filter_by_type understands. Any other tag, "object" included,
# matches nothing.
FILTERABLE_KINDS = frozenset(
    {
        DocumentKind.STRING,
        DocumentKind.NUMBER,
        DocumentKind.BOOLEAN,
        DocumentKind.ARRAY,
        DocumentKind.NULL,
    }
)


def _filterable_kind(type_name: Union[str, DocumentKind]) -> Optional[DocumentKind]:
    try:
        kind = DocumentKind(type_name)
    except ValueError:
        return None
    return kind if kind in FILTERABLE_KINDS else None


def filter_by_type(container: Container, type_name: Union[str, DocumentKind]) -> Container:
    """Keep only the elements or property values of the given kind.

    Args:
        container: Array or object to filter.
        type_name: One of ``string``, ``number``, ``boolean``, ``array`` or
            ``null``. Unrecognised names give an empty result.

    Returns:
        New container of the same variant.
    """
    kind = _filterable_kind(type_name)
    if isinstance(container, JsonObject):
        return JsonObject(
            [(key, value) for key, value in container.properties if value.kind is kind]
        )
    if isinstance(container, JsonArray):
        return JsonArray([element for element in container.elements if element.kind is kind])
    raise TypeError(f"Cannot filter a {type(container).__name__}")


def filter_by_keys(obj: JsonObject, keys: Iterable[str]) -> JsonObject:
    """Keep only the properties whose key is listed. Unknown keys are ignored."""
    if not isinstance(obj, JsonObject):
        raise TypeError(f"Cannot filter keys of a {type(obj).__name__}")
    wanted = set(keys)
    return JsonObject([(key, value) for key, value in obj.properties if key in wanted])


def map_elements(array: JsonArray, operation: Callable[[DocumentBase], DocumentBase]) -> JsonArray:
    """Apply ``operation`` to every element, in order.

    The operation sees each element as-is and decides for itself what to
    do with each variant.
    """
    if not isinstance(array, JsonArray):
        raise TypeError(f"Cannot map over a {type(array).__name__}")
    return JsonArray([operation(element) for element in array.elements])


def map_numbers(array: JsonArray, transform: Callable[[float], float]) -> JsonArray:
    """Transform the value of every number element, passing others through.

    Raises:
        NonFiniteNumberError: A result is NaN, infinite or overflows a float.
    """

    def apply(element: DocumentBase) -> DocumentBase:
        if isinstance(element, JsonNumber):
            try:
                result = transform(element.value)
            except OverflowError as exc:
                raise NonFiniteNumberError(element.value) from exc
            return finite_number(result)
        return element

    return map_elements(array, apply)


def map_strings(array: JsonArray, transform: Callable[[str], str]) -> JsonArray:
    """Transform the value of every string element, passing others through."""

    def apply(element: DocumentBase) -> DocumentBase:
        if isinstance(element, JsonString):
            return JsonString(transform(element.value))
        return element

    return map_elements(array, apply)


def multiply_by(array: JsonArray, factor: float) -> JsonArray:
    return map_numbers(array, lambda value: value * factor)


def divide_by(array: JsonArray, divisor: float) -> JsonArray:
    """Divide every number element. A zero divisor raises ZeroDivisionError."""
    return map_numbers(array, lambda value: value / divisor)


def to_upper_case(array: JsonArray) -> JsonArray:
    return map_strings(array, str.upper)


def to_lower_case(array: JsonArray) -> JsonArray:
    return map_strings(array, str.lower)


def capitalize_each(array: JsonArray) -> JsonArray:
    """Upper-case the first character of every string; the rest is unchanged."""
    return map_strings(array, lambda value: value[:1].upper() + value[1:])


def _from_primitive(value: Any) -> DocumentBase:
    if value is None:
        return NULL
    if isinstance(value, bool):
        return JsonBoolean(value)
    if isinstance(value, str):
        return JsonString(value)
    if isinstance(value, (int, float)):
        return finite_number(value)
    if isinstance(value, (list, tuple)):
        return from_list(value)
    raise UnsupportedTypeError(value)


def from_list(values: Sequence[Any]) -> JsonArray:
    """Build an array from host primitives.

    Accepts strings, ints, floats, booleans, None and nested lists or
    tuples of the same. Anything else raises UnsupportedTypeError.
    """
    return JsonArray([_from_primitive(value) for value in values])
