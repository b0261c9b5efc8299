"""Errors for query parameters that break their definition."""

from __future__ import annotations

from typing import Any, Iterable
from urllib.parse import quote_plus

from .constants import JSON_CONTENT_TYPE, PARAMETER_VALIDATION, PARAMETER_VALIDATION_QUERY
from .model import Location, Parameter, Schema
from .param_utils import (
    QueryParam,
    collapse_csv_into_form_style,
    collapse_csv_into_pipe_delimited_style,
    collapse_csv_into_space_delimited_style,
)
from .validation_error import (
    HOW_TO_FIX_INVALID_JSON,
    HOW_TO_FIX_MISSING_VALUE,
    HOW_TO_FIX_PARAM_INVALID_BOOLEAN,
    HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES,
    HOW_TO_FIX_PARAM_INVALID_ENUM,
    HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE,
    HOW_TO_FIX_PARAM_INVALID_NUMBER,
    HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE,
    HOW_TO_FIX_RESERVED_VALUES,
    ValidationError,
)


def _query_error(location: Location, **fields: Any) -> ValidationError:
    return ValidationError(
        validation_type=PARAMETER_VALIDATION,
        validation_sub_type=PARAMETER_VALIDATION_QUERY,
        spec_line=location.line,
        spec_col=location.column,
        **fields,
    )


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return ""
    return str(value)


def _allowed_values(values: Iterable[Any] | None) -> str:
    return ", ".join(_format_value(v) for v in values or ())


def _items_type_location(sch: Schema | None) -> Location:
    items = sch.items if sch is not None else None
    return items.location("type") if isinstance(items, Schema) else Location()


def _schema_location(param: Parameter, field: str) -> Location:
    return param.schema.location(field) if param.schema is not None else Location()


def incorrect_form_encoding(param: Parameter, qp: QueryParam, i: int) -> ValidationError:
    """A form encoded value carries commas where exploded values were expected."""
    value = qp.values[i]
    return _query_error(
        param.location("explode"),
        message=f"Query parameter '{param.name}' is not exploded correctly",
        reason=(
            f"The query parameter '{param.name}' has a default or 'form' encoding defined, "
            f"however the value '{value}' is encoded as an object or an array using commas. "
            "The contract defines the explode value to set to 'true'"
        ),
        context=param,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_FORM_ENCODE.format(
            collapse_csv_into_form_style(param.name, value)
        ),
    )


def incorrect_space_delimiting(param: Parameter, qp: QueryParam) -> ValidationError:
    """A spaceDelimited, non exploded parameter was given several values."""
    return _query_error(
        param.location("style"),
        message=f"Query parameter '{param.name}' delimited incorrectly",
        reason=(
            f"The query parameter '{param.name}' has 'spaceDelimited' style defined, "
            f"and explode is defined as false. There are multiple values ({len(qp.values)}) "
            "supplied, instead of a single space delimited value"
        ),
        context=param,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_SPACE_DELIMITED_OBJECT_EXPLODE.format(
            collapse_csv_into_space_delimited_style(param.name, qp.values)
        ),
    )


def incorrect_pipe_delimiting(param: Parameter, qp: QueryParam) -> ValidationError:
    """A pipeDelimited, non exploded parameter was given several values."""
    return _query_error(
        param.location("style"),
        message=f"Query parameter '{param.name}' delimited incorrectly",
        reason=(
            f"The query parameter '{param.name}' has 'pipeDelimited' style defined, "
            f"and explode is defined as false. There are multiple values ({len(qp.values)}) "
            "supplied, instead of a single space delimited value"
        ),
        context=param,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_PIPE_DELIMITED_OBJECT_EXPLODE.format(
            collapse_csv_into_pipe_delimited_style(param.name, qp.values)
        ),
    )


def invalid_deep_object(param: Parameter, qp: QueryParam) -> ValidationError:
    """A deepObject property was given several values."""
    return _query_error(
        param.location("style"),
        message=f"Query parameter '{param.name}' is not a valid deepObject",
        reason=(
            f"The query parameter '{param.name}' has the 'deepObject' style defined, "
            f"There are multiple values ({len(qp.values)}) supplied, instead of a single value"
        ),
        context=param,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_DEEP_OBJECT_MULTIPLE_VALUES.format(
            collapse_csv_into_pipe_delimited_style(param.name, qp.values)
        ),
    )


def query_parameter_missing(param: Parameter) -> ValidationError:
    """A required query parameter is absent."""
    return _query_error(
        param.location("required"),
        message=f"Query parameter '{param.name}' is missing",
        reason=(
            f"The query parameter '{param.name}' is defined as being required, "
            "however it's missing from the requests"
        ),
        how_to_fix=HOW_TO_FIX_MISSING_VALUE,
    )


def incorrect_query_param_array_boolean(
    param: Parameter, item: str, sch: Schema, items_schema: Schema | None
) -> ValidationError:
    """An item of a boolean query array is not true or false."""
    return _query_error(
        _items_type_location(sch),
        message=f"Query array parameter '{param.name}' is not a valid boolean",
        reason=(
            f"The query parameter (which is an array) '{param.name}' is defined as being a "
            f"boolean, however the value '{item}' is not a valid true/false value"
        ),
        context=items_schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format(item),
    )


def incorrect_query_param_array_number(
    param: Parameter, item: str, sch: Schema, items_schema: Schema | None
) -> ValidationError:
    """An item of a numeric query array is not a number."""
    return _query_error(
        _items_type_location(sch),
        message=f"Query array parameter '{param.name}' is not a valid number",
        reason=(
            f"The query parameter (which is an array) '{param.name}' is defined as being a "
            f"number, however the value '{item}' is not a valid number"
        ),
        context=items_schema,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_NUMBER.format(item),
    )


def incorrect_param_encoding_json(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A query parameter with JSON content is not valid JSON."""
    media = param.content.get(JSON_CONTENT_TYPE)
    return _query_error(
        media.location if media is not None else Location(),
        message=f"Query parameter '{param.name}' is not valid JSON",
        reason=(
            f"The query parameter '{param.name}' is defined as being a JSON object, "
            f"however the value '{ef}' is not valid JSON"
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_INVALID_JSON,
    )


def incorrect_query_param_bool(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A boolean query parameter is not true or false."""
    return _query_error(
        param.location("schema"),
        message=f"Query parameter '{param.name}' is not a valid boolean",
        reason=(
            f"The query parameter '{param.name}' is defined as being a boolean, "
            f"however the value '{ef}' is not a valid boolean"
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_BOOLEAN.format(ef),
    )


def invalid_query_param_number(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A numeric query parameter is not a number."""
    return _query_error(
        param.location("schema"),
        message=f"Query parameter '{param.name}' is not a valid number",
        reason=(
            f"The query parameter '{param.name}' is defined as being a number, "
            f"however the value '{ef}' is not a valid number"
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_NUMBER.format(ef),
    )


def incorrect_query_param_enum(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A query parameter value is not one of its enum values."""
    return _query_error(
        _schema_location(param, "enum"),
        message=f"Query parameter '{param.name}' does not match allowed values",
        reason=(
            f"The query parameter '{param.name}' has pre-defined values set via an enum. "
            f"The value '{ef}' is not one of those values."
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_ENUM.format(ef, _allowed_values(sch.enum)),
    )


def incorrect_query_param_enum_array(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """An item of a query array is not one of the item enum values."""
    items = param.schema.items if param.schema is not None else None
    if isinstance(items, Schema):
        allowed = _allowed_values(items.enum)
        line = items.location("enum").line
    else:
        allowed, line = "", 0
    return ValidationError(
        validation_type=PARAMETER_VALIDATION,
        validation_sub_type=PARAMETER_VALIDATION_QUERY,
        message=f"Query array parameter '{param.name}' does not match allowed values",
        reason=(
            f"The query array parameter '{param.name}' has pre-defined values set via an enum. "
            f"The value '{ef}' is not one of those values."
        ),
        spec_line=line,
        spec_col=line,
        context=sch,
        how_to_fix=HOW_TO_FIX_PARAM_INVALID_ENUM.format(ef, allowed),
    )


def incorrect_reserved_values(param: Parameter, ef: str, sch: Schema) -> ValidationError:
    """A query value holds reserved characters while allowReserved is false."""
    return _query_error(
        param.location("schema"),
        message=f"Query parameter '{param.name}' value contains reserved values",
        reason=(
            f"The query parameter '{param.name}' has 'allowReserved' set to false, "
            f"however the value '{ef}' contains one of the following characters: "
            ":/?#[]@!$&'()*+,;="
        ),
        context=sch,
        how_to_fix=HOW_TO_FIX_RESERVED_VALUES.format(quote_plus(ef, safe="")),
    )