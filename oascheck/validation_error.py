"""Validation error types and advice on how to fix them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .model import Request

HOW_TO_FIX_RESERVED_VALUES = (
    "parameter values need to URL Encoded to ensure reserved "
    "values are correctly encoded, for example: '{}'"
)
HOW_TO_FIX_PARAM_INVALID_NUMBER = "Convert the value '{}' into a number"
HOW_TO_FIX_PARAM_INVALID_STRING = (
    "Convert the value '{}' into a string (cannot start with a number, or be a floating point)"
)
HOW_TO_FIX_PARAM_INVALID_BOOLEAN = "Convert the value '{}' into a true/false value"
HOW_TO_FIX_PARAM_INVALID_ENUM = "Instead of '{}', use one of the allowed values: '{}'"
HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE = (
    "Use a form style encoding for parameter values, for example: '{}'"
)
HOW_TO_FIX_INVALID_SCHEMA = "Ensure that the object being submitted, matches the schema correctly"
HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE = (
    "When using 'explode' with space delimited parameters, "
    "they should be separated by spaces. For example: '{}'"
)
HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE = (
    "When using 'explode' with pipe delimited parameters, "
    "they should be separated by pipes '|'. For example: '{}'"
)
HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES = (
    "There can only be a single value per property name, "
    "deepObject parameters should contain the property key in square brackets "
    "next to the parameter name. For example: '{}'"
)
HOW_TO_FIX_INVALID_JSON = "The JSON submitted is invalid, please check the syntax"
HOW_TO_FIX_DECODING_ERROR = (
    "The object can't be decoded, so make sure it's being encoded correctly according to the spec."
)
HOW_TO_FIX_INVALID_CONTENT_TYPE = (
    "The content type is invalid, Use one of the {} supported types for this operation: {}"
)
HOW_TO_FIX_INVALID_RESPONSE_CODE = (
    "The service is responding with a code that is not defined in the spec, "
    "fix the service or add the code to the specification"
)
HOW_TO_FIX_INVALID_ENCODING = "Ensure the correct encoding has been used on the object"
HOW_TO_FIX_MISSING_VALUE = "Ensure the value has been set"
HOW_TO_FIX_PATH = (
    "Check the path is correct, and check that the correct HTTP method has been used "
    "(e.g. GET, POST, PUT, DELETE)"
)
HOW_TO_FIX_PATH_METHOD = "Add the missing operation to the contract for the path"


@dataclass
class SchemaValidationFailure:
    """One schema violation found while validating a value."""

    reason: str = ""
    location: str = ""
    deep_location: str = ""
    absolute_location: str = ""
    line: int = 0
    column: int = 0
    reference_schema: str = ""
    reference_object: str = ""
    reference_example: str = ""
    original_error: Any = None

    def __str__(self) -> str:
        return f"Reason: {self.reason}, Location: {self.location}"


@dataclass
class ValidationError:
    """Everything known about a single validation failure."""

    message: str = ""
    reason: str = ""
    validation_type: str = ""
    validation_sub_type: str = ""
    spec_line: int = 0
    spec_col: int = 0
    how_to_fix: str = ""
    request_path: str = ""
    spec_path: str = ""
    request_method: str = ""
    schema_validation_errors: list[SchemaValidationFailure] | None = None
    context: Any = field(default=None, repr=False, compare=False)

    def __str__(self) -> str:
        text = f"Error: {self.message}, Reason: {self.reason}"
        if self.schema_validation_errors is not None:
            failures = " ".join(str(f) for f in self.schema_validation_errors)
            text += f", Validation Errors: [{failures}]"
        if self.spec_line > 0 and self.spec_col > 0:
            text += f", Line: {self.spec_line}, Column: {self.spec_col}"
        return text

    def is_path_missing_error(self) -> bool:
        """True when the request path was not found in the specification."""
        return self.validation_type == "path" and self.validation_sub_type == "missing"

    def is_operation_missing_error(self) -> bool:
        """True when the path exists but the requested operation does not."""
        return self.validation_type == "path" and self.validation_sub_type == "missingOperation"


def populate_validation_errors(
    validation_errors: list[ValidationError], request: Request, path: str
) -> None:
    """Fill in the spec path, request method and request path of each error."""
    for error in validation_errors:
        error.spec_path = path
        error.request_method = request.method
        error.request_path = request.path