"""Tests for the inference engine."""

from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from typing import NamedTuple, Optional

import pytest
from pydantic import BaseModel

from jsondoc.errors import (
    CyclicReferenceError,
    InferenceDepthError,
    JsonDocError,
    NonFiniteNumberError,
    NonStringKeyError,
    UnsupportedTypeError,
)
from jsondoc.inference import InferenceEngine, infer
from jsondoc.models import (
    NULL,
    JsonArray,
    JsonBoolean,
    JsonNumber,
    JsonObject,
    JsonString,
)


class Color(Enum):
    RED = 1
    GREEN = 2


class Status(str, Enum):
    ACTIVE = "active-value"


@dataclass
class Address:
    city: str
    zip_code: Optional[str] = None


@dataclass
class Person:
    name: str
    age: int
    address: Address
    tags: list[str] = field(default_factory=list)


class Point(NamedTuple):
    x: float
    y: float


class Profile(BaseModel):
    handle: str
    followers: int
    color: Color


class Opaque:
    def __init__(self):
        self.hidden = 1


class TestPrimitives:
    """Leaf values."""

    def test_none(self):
        assert infer(None) is NULL

    def test_string(self):
        assert infer("hello") == JsonString("hello")

    def test_int_widened(self):
        assert infer(7) == JsonNumber(7.0)

    def test_float(self):
        assert infer(2.5).serialize() == "2.5"

    def test_other_real_numbers(self):
        assert infer(Fraction(1, 4)) == JsonNumber(0.25)

    def test_bool_is_not_a_number(self):
        assert infer(True) == JsonBoolean(True)

    def test_enum_uses_name(self):
        assert infer(Color.GREEN) == JsonString("GREEN")

    def test_str_enum_uses_name(self):
        assert infer(Status.ACTIVE) == JsonString("ACTIVE")

    def test_document_passes_through(self, alice):
        assert infer(alice) is alice


class TestContainers:
    """Sequences and mappings."""

    def test_list(self):
        assert infer([1, "a", None]).serialize() == '[1.0,"a",null]'

    def test_tuple(self):
        assert isinstance(infer((1, 2)), JsonArray)

    def test_nested_list(self):
        assert infer([[1, 2], []]).serialize() == "[[1.0,2.0],[]]"

    def test_mapping_keeps_order(self):
        doc = infer({"z": 1, "a": [True], "m": {"k": None}})
        assert doc.serialize() == '{"z":1.0,"a":[true],"m":{"k":null}}'

    def test_enum_key_rejected(self):
        with pytest.raises(NonStringKeyError) as exc_info:
            infer({Color.RED: 1})
        assert exc_info.value.key is Color.RED

    def test_str_enum_key_is_a_string(self):
        assert infer({Status.ACTIVE: 1}).keys() == ["active-value"]

    def test_non_string_key(self):
        with pytest.raises(NonStringKeyError) as exc_info:
            infer({"ok": 1, 2: "two"})
        assert exc_info.value.key == 2

    def test_non_string_key_is_a_type_error(self):
        with pytest.raises(TypeError):
            infer({(1, 2): "pair"})

    def test_same_list_twice_is_not_a_cycle(self):
        shared = [1]
        assert infer([shared, shared]).serialize() == "[[1.0],[1.0]]"


class TestRecords:
    """Records become objects in field declaration order."""

    def test_dataclass(self):
        person = Person("Alice", 30, Address("Lisbon"), ["admin"])
        expected = (
            '{"name":"Alice","age":30.0,'
            '"address":{"city":"Lisbon","zip_code":null},"tags":["admin"]}'
        )
        assert infer(person).serialize() == expected

    def test_named_tuple(self):
        assert infer(Point(1, 2)).serialize() == '{"x":1.0,"y":2.0}'

    def test_pydantic_model(self):
        doc = infer(Profile(handle="al", followers=3, color=Color.RED))
        assert doc.serialize() == '{"handle":"al","followers":3.0,"color":"RED"}'

    def test_record_in_list(self):
        assert infer([Point(0, 0)]).serialize() == '[{"x":0.0,"y":0.0}]'

    def test_dataclass_class_itself_unsupported(self):
        with pytest.raises(UnsupportedTypeError):
            infer(Address)


class TestUnsupported:
    """Shapes with no document representation."""

    @pytest.mark.parametrize(
        "value, type_name",
        [
            (Opaque(), "Opaque"),
            ({1, 2}, "set"),
            (b"bytes", "bytes"),
            (len, "builtin_function_or_method"),
        ],
    )
    def test_raises_with_type_name(self, value, type_name):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            infer(value)
        assert exc_info.value.type_name == type_name
        assert type_name in str(exc_info.value)

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf"), 10**400])
    def test_non_finite_numbers(self, value):
        with pytest.raises(NonFiniteNumberError) as exc_info:
            infer(value)
        assert isinstance(exc_info.value, JsonDocError)
        assert exc_info.value.type_name == type(value).__name__

    def test_non_finite_number_inside_container(self):
        with pytest.raises(NonFiniteNumberError):
            infer({"ok": 1, "bad": [float("nan")]})

    def test_nested_failure_aborts_whole_conversion(self):
        with pytest.raises(UnsupportedTypeError):
            infer({"ok": [1, 2], "bad": [Opaque()]})


class TestCycleGuard:
    """Self-referencing values fail instead of recursing forever."""

    def test_self_containing_list(self):
        loop = [1]
        loop.append(loop)
        with pytest.raises(CyclicReferenceError):
            infer(loop)

    def test_mutually_referencing_dicts(self):
        a = {}
        b = {"a": a}
        a["b"] = b
        with pytest.raises(CyclicReferenceError):
            infer(a)

    def test_self_referencing_dataclass(self):
        person = Person("Bob", 1, Address("x"), [])
        person.tags.append(person)
        with pytest.raises(CyclicReferenceError):
            infer(person)

    def test_depth_limit(self):
        engine = InferenceEngine(max_depth=3)
        assert engine.infer([[[1]]]).serialize() == "[[[1.0]]]"
        with pytest.raises(InferenceDepthError) as exc_info:
            engine.infer([[[[1]]]])
        assert exc_info.value.max_depth == 3

    def test_default_depth_from_settings(self, monkeypatch):
        from jsondoc import inference

        monkeypatch.setattr(inference.settings, "max_inference_depth", 1)
        with pytest.raises(InferenceDepthError):
            infer([[1]])


class TestInferredDocuments:
    """Inferred documents behave like directly built ones."""

    def test_equivalent_to_direct_construction(self):
        built = JsonObject({"n": JsonNumber(1), "s": JsonArray([JsonString("x")])})
        assert infer({"n": 1, "s": ["x"]}) == built
