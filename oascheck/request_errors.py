"""Errors for requests and responses that do not match their operation."""

from __future__ import annotations

from .constants import (
    CONTENT_TYPE_HEADER,
    REQUEST_BODY_CONTENT_TYPE,
    REQUEST_BODY_VALIDATION,
    REQUEST_MISSING_OPERATION,
    REQUEST_VALIDATION,
    RESPONSE_BODY_RESPONSE_CODE,
    RESPONSE_BODY_VALIDATION,
)
from .model import HttpResponse, Operation, PathItem, Request
from .operations import extract_content_type
from .validation_error import (
    HOW_TO_FIX_INVALID_CONTENT_TYPE,
    HOW_TO_FIX_INVALID_RESPONSE_CODE,
    HOW_TO_FIX_PATH_METHOD,
    ValidationError,
)


def request_content_type_not_found(
    op: Operation, request: Request, spec_path: str
) -> ValidationError:
    """The request content type is not among those the operation accepts."""
    ct = request.header(CONTENT_TYPE_HEADER)
    body = op.request_body
    ctypes = list(body.content)
    return ValidationError(
        validation_type=REQUEST_BODY_VALIDATION,
        validation_sub_type=REQUEST_BODY_CONTENT_TYPE,
        message=f"{request.method} operation request content type '{ct}' does not exist",
        reason=(
            f"The content type '{ct}' of the {request.method} request submitted has not "
            "been defined, it's an unknown type"
        ),
        spec_line=body.content_location.line,
        spec_col=body.content_location.column,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_CONTENT_TYPE.format(len(ctypes), ", ".join(ctypes)),
        request_path=request.path,
        request_method=request.method,
        spec_path=spec_path,
    )


def operation_not_found(
    path_item: PathItem, request: Request, method: str, spec_path: str
) -> ValidationError:
    """The path exists but has no operation for the request method."""
    return ValidationError(
        validation_type=REQUEST_VALIDATION,
        validation_sub_type=REQUEST_MISSING_OPERATION,
        message=f"{request.method} operation request content type '{method}' does not exist",
        reason=f"The path was found, but there was no '{request.method}' method found in the spec",
        spec_line=path_item.key_location.line,
        spec_col=path_item.key_location.column,
        context=path_item,
        how_to_fix=HOW_TO_FIX_PATH_METHOD,
        request_path=request.path,
        request_method=request.method,
        spec_path=spec_path,
    )


def response_content_type_not_found(
    op: Operation,
    request: Request,
    response: HttpResponse,
    code: str,
    is_default: bool,
) -> ValidationError:
    """The response content type is not defined for the status code (or the default).

    Raises KeyError when is_default is false and the code is not defined.
    """
    media_type, _, _ = extract_content_type(response.header(CONTENT_TYPE_HEADER))
    spec_response = op.responses.default if is_default else op.responses.codes[code]
    ctypes = list(spec_response.content)
    return ValidationError(
        validation_type=RESPONSE_BODY_VALIDATION,
        validation_sub_type=REQUEST_BODY_CONTENT_TYPE,
        message=(
            f"{request.method} / {code} operation response content type "
            f"'{media_type}' does not exist"
        ),
        reason=(
            f"The content type '{media_type}' of the {request.method} response received has not "
            "been defined, it's an unknown type"
        ),
        spec_line=spec_response.content_location.line,
        spec_col=spec_response.content_location.column,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_CONTENT_TYPE.format(len(ctypes), ", ".join(ctypes)),
    )


def response_code_not_found(op: Operation, request: Request, code: int) -> ValidationError:
    """The response status code is not defined for the operation."""
    location = op.location("responses")
    return ValidationError(
        validation_type=RESPONSE_BODY_VALIDATION,
        validation_sub_type=RESPONSE_BODY_RESPONSE_CODE,
        message=f"{request.method} operation request response code '{code}' does not exist",
        reason=(
            f"The reponse code '{code}' of the {request.method} request submitted has not "
            "been defined, it's an unknown type"
        ),
        spec_line=location.line,
        spec_col=location.column,
        context=op,
        how_to_fix=HOW_TO_FIX_INVALID_RESPONSE_CODE,
    )