"""Pytest configuration and fixtures."""

import pytest

from jsondoc.models import JsonArray, JsonBoolean, JsonNumber, JsonObject, JsonString


@pytest.fixture
def alice():
    """Object with one property of each common kind."""
    return JsonObject(
        {
            "name": JsonString("Alice"),
            "age": JsonNumber(25.0),
            "active": JsonBoolean(True),
            "skill": JsonArray(
                [JsonString("Python"), JsonString("Kotlin"), JsonString("Java")]
            ),
        }
    )


@pytest.fixture
def mixed_array():
    """Array holding a number, a string and a boolean."""
    return JsonArray([JsonNumber(1.0), JsonString("a"), JsonBoolean(False)])
