"""In-memory document model for JSON-like values.

Build documents directly from the variant classes or from ordinary Python
values with ``infer()``, then serialize, filter, map or validate them.
"""

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
    Document,
    DocumentBase,
    DocumentKind,
    JsonArray,
    JsonBoolean,
    JsonNull,
    JsonNumber,
    JsonObject,
    JsonString,
    serialize,
)
from jsondoc.visitors import (
    ArrayHomogeneityVisitor,
    JsonVisitor,
    ObjectValidationVisitor,
    is_homogeneous,
    is_valid,
)

__version__ = "0.1.0"

__all__ = [
    # Model
    "Document",
    "DocumentBase",
    "DocumentKind",
    "JsonString",
    "JsonNumber",
    "JsonBoolean",
    "JsonNull",
    "NULL",
    "JsonArray",
    "JsonObject",
    "serialize",
    # Inference
    "InferenceEngine",
    "infer",
    # Visitors
    "JsonVisitor",
    "ObjectValidationVisitor",
    "ArrayHomogeneityVisitor",
    "is_valid",
    "is_homogeneous",
    # Errors
    "JsonDocError",
    "UnsupportedTypeError",
    "NonStringKeyError",
    "NonFiniteNumberError",
    "CyclicReferenceError",
    "InferenceDepthError",
]
