"""Errors for header, cookie and path parameters that break their definition."""

from __future__ import annotations

from typing import Any

from .constants import (
    PARAMETER_VALIDATION,
    PARAMETER_VALIDATION_COOKIE,
    PARAMETER_VALIDATION_HEADER,
    PARAMETER_VALIDATION_PATH,
)
from .model import Location, Parameter, Schema
from .query_errors import _allowed_values, _items_type_location, _schema_location
from .validation_error import (
    HOW_TO_FIX_INVALID_ENCODING,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    ValidationError,
)


def _param_error(sub_type: str, location: Location, **fields: Any) -> ValidationError:
    return ValidationError(
        validation_type=PARAMETER_VALIDATION,
        validation_sub_type=sub_type,
        spec_line=location.line,
        spec_col=location.column,
        **fields,
    )


def _missing(sub_type: str, label: str, param: Parameter) -> ValidationError:
    return _param_error(
        sub_type,
        param.location("required"),
        message=f"{label.capitalize()} parameter '{param.name}' is missing",
        reason=(
            f"The {label} parameter '{param.name}' is defined as being required, "
            "however it's missing from the requests"
        ),
        how_to_fix=HOW_TO_FIX_MISSING_VALUE,
    )


def _enum(sub_type: str, label: str, param: Parameter, ef: str, sch: Schema) -> ValidationError:
    return _param_error(
        sub_type,
        _schema_location(param, "enum"),
        message=f"{label.capitalize()} parameter '{param.name}' does not match allowed values",
        reason=(
            f"The {label} parameter '{param.name}' has pre-defined values set via an enum. "
            f"The value '{ef}' is not one of those values."
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_ENUM.format(ef, _allowed_values(sch.enum)),
    )


def _number(sub_type: str, label: str, param: Parameter, ef: str, sch: Schema) -> ValidationError:
    return _param_error(
        sub_type,
        param.location("schema"),
        message=f"{label.capitalize()} parameter '{param.name}' is not a valid number",
        reason=(
            f"The {label} parameter '{param.name}' is defined as being a number, "
            f"however the value '{ef}' is not a valid number"
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_NUMBER.format(ef),
    )


def _boolean(sub_type: str, label: str, param: Parameter, ef: str, sch: Schema) -> ValidationError:
    return _param_error(
        sub_type,
        param.location("schema"),
        message=f"{label.capitalize()} parameter '{param.name}' is not a valid boolean",
        reason=(
            f"The {label} parameter '{param.name}' is defined as being a boolean, "
            f"however the value '{ef}' is not a valid boolean"
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format(ef),
    )


def _array_boolean(
    sub_type: str,
    label: str,
    param: Parameter,
    item: str,
    sch: Schema,
    items_schema: Schema | None,
    complaint: str,
) -> ValidationError:
    return _param_error(
        sub_type,
        _items_type_location(sch),
        message=f"{label.capitalize()} array parameter '{param.name}' is not a valid boolean",
        reason=(
            f"The {label} parameter (which is an array) '{param.name}' is defined as being a "
            f"boolean, however the value '{item}' is not a valid {complaint}"
        ),
        context=items_schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format(item),
    )


def _array_number(
    sub_type: str,
    label: str,
    param: Parameter,
    item: str,
    sch: Schema,
    items_schema: Schema | None,
) -> ValidationError:
    return _param_error(
        sub_type,
        _items_type_location(sch),
        message=f"{label.capitalize()} array parameter '{param.name}' is not a valid number",
        reason=(
            f"The {label} parameter (which is an array) '{param.name}' is defined as being a "
            f"number, however the value '{item}' is not a valid number"
        ),
        context=items_schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_NUMBER.format(item),
    )


def header_parameter_missing(param: Parameter) -> ValidationError:
    """A required header parameter is absent."""
    return _missing(PARAMETER_VALIDATION_HEADER, "header", param)


def header_parameter_cannot_be_decoded(param: Parameter, val: str) -> ValidationError:
    """A header value cannot be decoded into an object."""
    line = _schema_location(param, "type").line
    return ValidationError(
        validation_type=PARAMETER_VALIDATION,
        validation_sub_type=PARAMETER_VALIDATION_HEADER,
        message=f"Header parameter '{param.name}' cannot be decoded",
        reason=(
            f"The header parameter '{param.name}' cannot be "
            f"extracted into an object, '{val}' is malformed"
        ),
        spec_line=line,
        spec_col=line,
        how_to_fix=HOW_TO_FIX_INVALID_ENCODING,
    )


def incorrect_header_param_enum(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A header value is not one of its enum values."""
    return _enum(PARAMETER_VALIDATION_HEADER, "header", param, ef, sch)


def invalid_header_param_number(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A numeric header value is not a number."""
    return _number(PARAMETER_VALIDATION_HEADER, "header", param, ef, sch)


def incorrect_header_param_bool(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A boolean header value is not true or false."""
    return _boolean(PARAMETER_VALIDATION_HEADER, "header", param, ef, sch)


def incorrect_header_param_array_boolean(
    param: Parameter, item: str, sch: Schema, items_schema: Schema | None
) -> ValidationError:
    """An item of a boolean header array is not true or false."""
    return _array_boolean(
        PARAMETER_VALIDATION_HEADER, "header", param, item, sch, items_schema, "true/false value"
    )


def incorrect_header_param_array_number(
    param: Parameter, item: str, sch: Schema, items_schema: Schema | None
) -> ValidationError:
    """An item of a numeric header array is not a number."""
    return _array_number(PARAMETER_VALIDATION_HEADER, "header", param, item, sch, items_schema)


def incorrect_cookie_param_array_boolean(
    param: Parameter, item: str, sch: Schema, items_schema: Schema | None
) -> ValidationError:
    """An item of a boolean cookie array is not true or false."""
    return _array_boolean(
        PARAMETER_VALIDATION_COOKIE, "cookie", param, item, sch, items_schema, "true/false value"
    )


def incorrect_cookie_param_array_number(
    param: Parameter, item: str, sch: Schema, items_schema: Schema | None
) -> ValidationError:
    """An item of a numeric cookie array is not a number."""
    return _array_number(PARAMETER_VALIDATION_COOKIE, "cookie", param, item, sch, items_schema)


def invalid_cookie_param_number(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A numeric cookie value is not a number."""
    return _number(PARAMETER_VALIDATION_COOKIE, "cookie", param, ef, sch)


def incorrect_cookie_param_bool(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A boolean cookie value is not true or false."""
    return _boolean(PARAMETER_VALIDATION_COOKIE, "cookie", param, ef, sch)


def incorrect_cookie_param_enum(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A cookie value is not one of its enum values."""
    return _enum(PARAMETER_VALIDATION_COOKIE, "cookie", param, ef, sch)


def incorrect_path_param_bool(param: Parameter, item: str, sch: Schema) -> ValidationError:
    """A boolean path value is not true or false."""
    return _boolean(PARAMETER_VALIDATION_PATH, "path", param, item, sch)


def incorrect_path_param_enum(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A path value is not one of its enum values."""
    return _enum(PARAMETER_VALIDATION_PATH, "path", param, ef, sch)


def incorrect_path_param_number(param: Parameter, item: str, sch: Schema) -> ValidationError:
    """A numeric path value is not a number."""
    return _number(PARAMETER_VALIDATION_PATH, "path", param, item, sch)


def incorrect_path_param_array_number(
    param: Parameter, item: str, sch: Schema, items_schema: Schema | None
) -> ValidationError:
    """An item of a numeric path array is not a number."""
    return _array_number(PARAMETER_VALIDATION_PATH, "path", param, item, sch, items_schema)


def incorrect_path_param_array_boolean(
    param: Parameter, item: str, sch: Schema, items_schema: Schema | None
) -> ValidationError:
    """An item of a boolean path array is not true or false."""
    return _array_boolean(
        PARAMETER_VALIDATION_PATH, "path", param, item, sch, items_schema, "boolean"
    )


def path_parameter_missing(param: Parameter) -> ValidationError:
    """A required path parameter is absent."""
    return _missing(PARAMETER_VALIDATION_PATH, "path", param)