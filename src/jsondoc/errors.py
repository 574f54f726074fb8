"""Exception types raised while building documents from host values."""

from typing import Any


class JsonDocError(Exception):
    """Base class for all jsondoc errors."""


class UnsupportedTypeError(JsonDocError, TypeError):
    """Raised when a host value has no document representation."""

    def __init__(self, value: Any):
        self.type_name = type(value).__name__
        super().__init__(f"Unsupported type: {self.type_name}")


class NonStringKeyError(JsonDocError, TypeError):
    """Raised when a mapping being converted has a non-string key."""

    def __init__(self, key: Any):
        self.key = key
        super().__init__(
            f"Only maps with string keys are supported, got {type(key).__name__} key {key!r}"
        )


class CyclicReferenceError(JsonDocError, ValueError):
    """Raised when a host value contains itself."""

    def __init__(self, value: Any):
        self.type_name = type(value).__name__
        super().__init__(f"Cyclic reference detected in {self.type_name} value")


class InferenceDepthError(JsonDocError, ValueError):
    """Raised when a host value is nested deeper than the configured limit."""

    def __init__(self, max_depth: int):
        self.max_depth = max_depth
        super().__init__(f"Value nested deeper than {max_depth} levels")


class NonFiniteNumberError(JsonDocError, ValueError):
    """Raised when a number is NaN, infinite or too large for a 64-bit float."""

    def __init__(self, value: Any):
        self.type_name = type(value).__name__
        super().__init__(f"{self.type_name} value is not a finite 64-bit number")
