"""Parameter extraction and decoding of the OpenAPI parameter serialisation styles."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass, field
from typing import Any

from .constants import (
    ARRAY,
    COMMA,
    EQUALS,
    FORM,
    PERIOD,
    PIPE,
    PIPE_DELIMITED,
    SEMICOLON,
    SPACE,
    SPACE_DELIMITED,
)
from .model import Parameter, PathItem, Request, Schema
from .operations import extract_operation


@dataclass
class QueryParam:
    """A query parameter key with its values and, for deep objects, its property name."""

    key: str
    values: list[str] = field(default_factory=list)
    property: str = ""


def extract_params_for_operation(request: Request, item: PathItem) -> list[Parameter]:
    """Path level parameters followed by those of the operation for the request method."""
    params = list(item.parameters)
    operation = extract_operation(request, item)
    if operation is not None:
        params.extend(operation.parameters)
    return params


def extract_security_for_operation(request: Request, item: PathItem) -> list[dict[str, list[str]]]:
    """Security requirements of the operation for the request method."""
    operation = extract_operation(request, item)
    return list(operation.security) if operation is not None else []


_DECIMAL_FLOAT = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_SPECIAL_FLOAT = re.compile(r"[+-]?(?:inf|infinity|nan)", re.IGNORECASE)
_HEX_FLOAT = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+"
)
_DECIMAL_INT = re.compile(r"[+-]?\d+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_float(value: str) -> float | None:
    if _SPECIAL_FLOAT.fullmatch(value):
        return float(value)
    if _DECIMAL_FLOAT.fullmatch(value):
        number = float(value)
    elif _HEX_FLOAT.fullmatch(value):
        number = float.fromhex(value)
    else:
        return None
    return None if math.isinf(number) else number


def _parse_int(value: str) -> int:
    if not _DECIMAL_INT.fullmatch(value):
        return 0
    return max(_INT64_MIN, min(_INT64_MAX, int(value)))


def cast(value: str) -> Any:
    """Turn a raw value into a bool, int, float or leave it as a string."""
    if value in ("true", "false"):
        return value == "true"
    number = _parse_float(value)
    if number is None:
        return value
    if PERIOD not in value:
        return _parse_int(value)
    return number


def _holds_arrays(sch: Schema | None) -> bool:
    if sch is None:
        return False
    if ARRAY in sch.type:
        return True
    extra = sch.additional_properties
    return isinstance(extra, Schema) and ARRAY in extra.type


def construct_param_map_from_deep_object_encoding(
    values: list[QueryParam], sch: Schema | None
) -> dict[str, Any]:
    """Build objects from deepObject encoded query parameters."""
    decoded: dict[str, Any] = {}
    as_array = _holds_arrays(sch)
    for qp in values:
        value = [cast(v) for v in qp.values] if as_array else cast(qp.values[0])
        decoded.setdefault(qp.key, {})[qp.property] = value
    return decoded


def construct_param_map_from_query_param_input(
    values: dict[str, list[QueryParam]],
) -> dict[str, Any]:
    """Map every query parameter key to its first value, cast."""
    return {qp.key: cast(qp.values[0]) for params in values.values() for qp in params}


def _pairs_strict(raw: str, separator: str) -> dict[str, Any]:
    parts = raw.split(separator)
    if len(parts) % 2:
        raise ValueError(f"value {raw!r} does not hold complete key/value pairs")
    return {key: cast(value) for key, value in zip(parts[::2], parts[1::2])}


def _pairs_lenient(raw: str, separator: str) -> dict[str, Any]:
    parts = raw.split(separator)
    return {key: cast(value) for key, value in zip(parts[::2], parts[1::2])}


def construct_param_map_from_pipe_encoding(values: list[QueryParam]) -> dict[str, Any]:
    """Build objects from pipe delimited key|value query parameters."""
    return {qp.key: _pairs_strict(qp.values[0], PIPE) for qp in values}


def construct_param_map_from_space_encoding(values: list[QueryParam]) -> dict[str, Any]:
    """Build objects from space delimited key value query parameters."""
    return {qp.key: _pairs_strict(qp.values[0], SPACE) for qp in values}


def construct_map_from_csv(csv: str) -> dict[str, Any]:
    """Build a map from alternating keys and values; a trailing key is dropped."""
    return _pairs_lenient(csv, COMMA)


def _key_equals_value(values: str, separator: str) -> dict[str, Any]:
    props: dict[str, Any] = {}
    for entry in values.split(separator):
        kv = entry.split(EQUALS)
        if len(kv) == 2:
            props[kv[0]] = cast(kv[1])
    return props


def construct_kv_from_csv(values: str) -> dict[str, Any]:
    """Build a map from comma separated key=value pairs."""
    return _key_equals_value(values, COMMA)


def construct_kv_from_label_encoding(values: str) -> dict[str, Any]:
    """Build a map from period separated key=value pairs."""
    return _key_equals_value(values, PERIOD)


def construct_kv_from_matrix_csv(values: str) -> dict[str, Any]:
    """Build a map from semicolon separated key=value pairs."""
    return _key_equals_value(values, SEMICOLON)


def construct_param_map_from_form_encoding_array(values: list[QueryParam]) -> dict[str, Any]:
    """Build objects from form encoded key,value query parameters."""
    return {qp.key: _pairs_lenient(qp.values[0], COMMA) for qp in values}


def does_form_param_contain_delimiter(value: str, style: str) -> bool:
    """True when a form (or unstyled) value holds a comma."""
    return COMMA in value and style in ("", FORM)


def explode_query_value(value: str, style: str) -> list[str]:
    """Split a query value by the delimiter its style uses."""
    if style == SPACE_DELIMITED:
        return value.split(SPACE)
    if style == PIPE_DELIMITED:
        return value.split(PIPE)
    return value.split(COMMA)


def collapse_csv_into_form_style(key: str, value: str) -> str:
    """Rewrite a comma separated value as repeated form parameters."""
    return f"&{key}=" + f"&{key}=".join(value.split(COMMA))


def collapse_csv_into_space_delimited_style(key: str, values: list[str]) -> str:
    """Join values into a single space delimited parameter."""
    return f"{key}=" + "%20".join(values)


def collapse_csv_into_pipe_delimited_style(key: str, values: list[str]) -> str:
    """Join values into a single pipe delimited parameter."""
    return f"{key}=" + PIPE.join(values)