from oascheck.model import (
    HttpResponse,
    Location,
    Operation,
    Parameter,
    Request,
    Schema,
)


def test_schema_location_known_field():
    sch = Schema(locations={"enum": Location(10, 20)})
    assert sch.location("enum") == Location(10, 20)


def test_schema_location_unknown_field_defaults():
    sch = Schema()
    assert sch.location("type") == Location()
    assert sch.location("type").line == 0


def test_parameter_location():
    param = Parameter(name="p", locations={"explode": Location(18, 30)})
    assert param.location("explode").column == 30
    assert param.location("style") == Location()


def test_operation_location():
    op = Operation(locations={"responses": Location(22, 56)})
    assert op.location("responses") == Location(22, 56)


def test_is_exploded_defaults_to_false():
    assert Parameter(name="p").is_exploded() is False
    assert Parameter(name="p", explode=False).is_exploded() is False
    assert Parameter(name="p", explode=True).is_exploded() is True


def test_request_path_from_absolute_url():
    request = Request("GET", "https://things.com/burgers/beef")
    assert request.path == "/burgers/beef"


def test_request_path_from_relative_url():
    request = Request("GET", "/test/path")
    assert request.path == "/test/path"


def test_request_header_case_insensitive():
    request = Request("POST", "/test", headers={"Content-Type": "application/xml"})
    assert request.header("content-type") == "application/xml"
    assert request.header("Accept") == ""


def test_response_header_case_insensitive():
    response = HttpResponse(headers={"content-type": "application/json"})
    assert response.header("Content-Type") == "application/json"