# oascheck

Building blocks for checking HTTP traffic against an OpenAPI 3 contract:
a small model of the parts of a contract that matter (paths, operations,
parameters, schemas, request bodies and responses), helpers for decoding
parameter serialisation styles, a loader for remote JSON documents, and a
set of detailed, human-readable validation errors.

The package needs nothing beyond the Python standard library, version 3.10
or later.

## Installing

```
pip install oascheck
```

## Modules

### `oascheck.constants`

String constants for validation types and sub-types (`PARAMETER_VALIDATION`,
`PARAMETER_VALIDATION_QUERY`, `REQUEST_BODY_VALIDATION`, ...), parameter
styles (`FORM`, `SPACE_DELIMITED`, `PIPE_DELIMITED`, `DEEP_OBJECT`,
`MATRIX_STYLE`, `LABEL_STYLE`), delimiters, schema type names and header
names. `IGNORE_REGEX` and `IGNORE_POLY_REGEX` match schema failure messages
such as `"anyOf failed"` that only summarise nested failures.

### `oascheck.model`

Plain dataclasses describing a contract and the traffic checked against it:

- `PathItem` with one optional `Operation` per method (`get`, `post`,
  `put`, `delete`, `options`, `head`, `patch`, `trace`), shared
  `parameters` and a `key_location`.
- `Operation` with `summary`, `parameters`, `security`, `request_body`,
  `responses` and `location(field)`.
- `Parameter` with `name`, `in_`, `style`, `explode`, `required`,
  `allow_reserved`, `schema`, `content`, `is_exploded()` (true only when
  `explode` is explicitly true) and `location(field)`.
- `Schema` with `type`, `enum`, `items`, `additional_properties`,
  `properties`, `required` and `location(field)`.
- `MediaType`, `RequestBody`, `Response` and `Responses`.
- `Location`, a line and column in the specification (zero when unknown).
  `location(field)` looks the field up in the object's `locations` mapping.
- `Request` (`method`, `url`, `headers`, `cookies`, `body`, a `path`
  property taken from the URL) and `HttpResponse` (`status_code`,
  `headers`, `body`). Both have a case-insensitive `header(name)` that
  returns an empty string when the header is absent.

### `oascheck.operations`

- `extract_operation(request, item)` returns the operation for the request
  method, or `None` for a method with no operation or an unknown method.
- `extract_content_type(content_type)` splits a `Content-Type` value into
  `(media_type, charset, boundary)`; missing parts are empty strings.

### `oascheck.param_utils`

- `QueryParam(key, values, property)`.
- `extract_params_for_operation(request, item)`: path level parameters
  followed by those of the method's operation.
- `extract_security_for_operation(request, item)`: the operation's security
  requirements.
- `cast(value)`: `"true"`/`"false"` become `bool`, numbers without a period
  become `int`, other numbers `float`; anything else stays a string.
- Decoders that return dictionaries:
  `construct_param_map_from_deep_object_encoding(values, sch)`,
  `construct_param_map_from_query_param_input(values)`,
  `construct_param_map_from_pipe_encoding(values)`,
  `construct_param_map_from_space_encoding(values)`,
  `construct_map_from_csv(csv)`, `construct_kv_from_csv(values)`,
  `construct_kv_from_label_encoding(values)`,
  `construct_kv_from_matrix_csv(values)` and
  `construct_param_map_from_form_encoding_array(values)`.
  The pipe and space decoders raise `ValueError` when a value does not hold
  complete key/value pairs; the comma based decoders drop a trailing key.
- `does_form_param_contain_delimiter(value, style)`,
  `explode_query_value(value, style)`,
  `collapse_csv_into_form_style(key, value)`,
  `collapse_csv_into_space_delimited_style(key, values)` and
  `collapse_csv_into_pipe_delimited_style(key, values)`.

### `oascheck.url_loader`

- `HTTPURLLoader(timeout, insecure)` with `load(url)`, which fetches a
  document and decodes it as JSON. It raises `OSError` when the request
  fails or the status is not 200, and `ValueError` when the body is not
  JSON. With `insecure=True`, its `ssl_context` skips certificate checks.
- `new_http_url_loader(insecure)` makes a loader with a 15 second timeout.
- `new_compiler_loader()` returns loaders keyed by scheme: `file`, `http`
  and `https`.

### `oascheck.validation_error`

- `ValidationError`: `message`, `reason`, `validation_type`,
  `validation_sub_type`, `spec_line`, `spec_col`, `how_to_fix`,
  `request_path`, `spec_path`, `request_method`,
  `schema_validation_errors` and `context`, with `is_path_missing_error()`
  and `is_operation_missing_error()`.
- `SchemaValidationFailure`: one schema violation (`reason`, `location`,
  and related detail).
- `populate_validation_errors(validation_errors, request, path)` fills in
  the spec path, request method and request path of each error.
- `HOW_TO_FIX_*` advice strings used by the error builders.

### Error builders

Each function returns a `ValidationError`:

- `oascheck.request_errors`: `request_content_type_not_found`,
  `operation_not_found`, `response_content_type_not_found` and
  `response_code_not_found`.
- `oascheck.query_errors`: errors for query parameters, such as
  `incorrect_form_encoding`, `incorrect_space_delimiting`,
  `incorrect_pipe_delimiting`, `invalid_deep_object`,
  `query_parameter_missing`, `incorrect_query_param_bool`,
  `invalid_query_param_number`, `incorrect_query_param_enum`,
  `incorrect_query_param_enum_array`, `incorrect_param_encoding_json`,
  `incorrect_reserved_values` and the array item variants.
- `oascheck.parameter_errors`: the same kinds of error for header, cookie
  and path parameters, for example `header_parameter_missing`,
  `header_parameter_cannot_be_decoded`, `incorrect_cookie_param_enum`,
  `invalid_cookie_param_number`, `incorrect_path_param_bool` and
  `path_parameter_missing`.

## Examples

```python
from oascheck.operations import extract_content_type
from oascheck.param_utils import cast, construct_kv_from_matrix_csv

extract_content_type("text/html; charset=UTF-8")
# ('text/html', 'UTF-8', '')

construct_kv_from_matrix_csv("key1=123;key2=true")
# {'key1': 123, 'key2': True}

cast("123.45")
# 123.45
```

Errors say what went wrong and how to fix it:

```python
from oascheck.validation_error import ValidationError

err = ValidationError(
    message="Invalid data type",
    reason="Expected 'string', got 'integer'",
    spec_line=10,
    spec_col=15,
)
str(err)
# "Error: Invalid data type, Reason: Expected 'string', got 'integer', Line: 10, Column: 15"
```

## What it does not do

oascheck does not read OpenAPI documents from YAML or JSON; the model is
built in code. It does not match request paths against the contract, does
not validate values against JSON schemas, and has no validator that walks a
request or response and collects errors. It provides the model, the
decoding helpers and the error builders that such a validator would use.

## Running the tests

```
pip install -e ".[test]"
pytest
```