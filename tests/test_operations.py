import pytest

from oascheck.model import Operation, PathItem, Request
from oascheck.operations import extract_content_type, extract_operation


@pytest.fixture
def path_item():
    return PathItem(
        get=Operation(summary="GET operation"),
        post=Operation(summary="POST operation"),
        put=Operation(summary="PUT operation"),
        delete=Operation(summary="DELETE operation"),
        options=Operation(summary="OPTIONS operation"),
        head=Operation(summary="HEAD operation"),
        patch=Operation(summary="PATCH operation"),
        trace=Operation(summary="TRACE operation"),
    )


@pytest.mark.parametrize(
    "method, want",
    [
        ("GET", "GET operation"),
        ("POST", "POST operation"),
        ("PUT", "PUT operation"),
        ("DELETE", "DELETE operation"),
        ("OPTIONS", "OPTIONS operation"),
        ("HEAD", "HEAD operation"),
        ("PATCH", "PATCH operation"),
        ("TRACE", "TRACE operation"),
    ],
)
def test_extract_operation(path_item, method, want):
    operation = extract_operation(Request(method, "/"), path_item)
    assert operation.summary == want


def test_extract_operation_unsupported_method(path_item):
    assert extract_operation(Request("INVALID", "/"), path_item) is None


def test_extract_operation_missing_operation():
    assert extract_operation(Request("GET", "/"), PathItem()) is None


@pytest.mark.parametrize(
    "header, expected",
    [
        ("application/json", ("application/json", "", "")),
        ("text/html; charset=UTF-8", ("text/html", "UTF-8", "")),
        (
            "multipart/form-data; boundary=----WebKitFormBoundary",
            ("multipart/form-data", "", "----WebKitFormBoundary"),
        ),
        (
            "multipart/form-data; charset=UTF-8; boundary=----WebKitFormBoundary",
            ("multipart/form-data", "UTF-8", "----WebKitFormBoundary"),
        ),
        (
            "  application/xml ; charset=ISO-8859-1 ; boundary=myBoundary  ",
            ("application/xml", "ISO-8859-1", "myBoundary"),
        ),
        ("application/xml; charset; boundary", ("application/xml", "", "")),
    ],
)
def test_extract_content_type(header, expected):
    assert extract_content_type(header) == expected