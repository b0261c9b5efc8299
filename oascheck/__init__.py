"""Contract model, parameter decoding helpers and validation errors for checking HTTP traffic against OpenAPI 3."""

__version__ = "0.1.0"

__all__ = [
    "constants",
    "model",
    "operations",
    "param_utils",
    "url_loader",
    "validation_error",
    "request_errors",
    "query_errors",
    "parameter_errors",
]