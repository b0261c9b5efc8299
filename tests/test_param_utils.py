import pytest

from oascheck.model import Operation, PathItem, Request, Schema, Parameter
from oascheck.param_utils import (
    QueryParam,
    cast,
    collapse_csv_into_form_style,
    collapse_csv_into_pipe_delimited_style,
    collapse_csv_into_space_delimited_style,
    construct_kv_from_csv,
    construct_kv_from_label_encoding,
    construct_kv_from_matrix_csv,
    construct_map_from_csv,
    construct_param_map_from_deep_object_encoding,
    construct_param_map_from_form_encoding_array,
    construct_param_map_from_pipe_encoding,
    construct_param_map_from_query_param_input,
    construct_param_map_from_space_encoding,
    does_form_param_contain_delimiter,
    explode_query_value,
    extract_params_for_operation,
    extract_security_for_operation,
)

METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS", "HEAD", "PATCH", "TRACE"]


def _path_item_with_params():
    return PathItem(
        **{m.lower(): Operation(parameters=[Parameter(name=f"{m.lower()}Param")]) for m in METHODS}
    )


@pytest.mark.parametrize("method", METHODS)
def test_extract_params_for_operation(method):
    params = extract_params_for_operation(Request(method, "/"), _path_item_with_params())
    assert [p.name for p in params] == [f"{method.lower()}Param"]


def test_extract_params_includes_path_level_first():
    item = PathItem(
        parameters=[Parameter(name="shared")],
        get=Operation(parameters=[Parameter(name="getParam")]),
    )
    params = extract_params_for_operation(Request("GET", "/"), item)
    assert [p.name for p in params] == ["shared", "getParam"]
    assert [p.name for p in item.parameters] == ["shared"]


@pytest.mark.parametrize("method", METHODS)
def test_extract_security_for_operation(method):
    item = PathItem(**{m.lower(): Operation(security=[{}]) for m in METHODS})
    assert len(extract_security_for_operation(Request(method, "/"), item)) == 1


def test_extract_security_missing_operation():
    assert extract_security_for_operation(Request("GET", "/"), PathItem()) == []


def test_cast():
    assert cast("true") is True
    assert cast("123") == 123
    assert isinstance(cast("123"), int)
    assert cast("123.45") == 123.45
    assert cast("test") == "test"


def test_construct_param_map_from_deep_object_encoding():
    values = [
        QueryParam(key="key1", values=["value1"], property="prop1"),
        QueryParam(key="key2", values=["123"], property="prop2"),
        QueryParam(key="key3", values=["456", "789"], property="prop3"),
    ]

    decoded = construct_param_map_from_deep_object_encoding(values, None)
    assert decoded["key1"]["prop1"] == "value1"
    assert decoded["key2"]["prop2"] == 123
    assert decoded["key3"]["prop3"] == 456

    decoded = construct_param_map_from_deep_object_encoding(values, Schema(type=["array"]))
    assert decoded["key1"]["prop1"] == ["value1"]
    assert decoded["key2"]["prop2"] == [123]
    assert decoded["key3"]["prop3"] == [456, 789]

    schema = Schema(additional_properties=Schema(type=["array"]))
    decoded = construct_param_map_from_deep_object_encoding(values, schema)
    assert decoded["key1"]["prop1"] == ["value1"]
    assert decoded["key2"]["prop2"] == [123]
    assert decoded["key3"]["prop3"] == [456, 789]

    with_dup = [
        QueryParam(key="key1", values=["value2"], property="prop1"),
        QueryParam(key="key2", values=["456"], property="prop2"),
    ]
    decoded = construct_param_map_from_deep_object_encoding(with_dup, None)
    assert decoded["key1"]["prop1"] == "value2"
    assert decoded["key2"]["prop2"] == 456

    decoded = construct_param_map_from_deep_object_encoding(values, Schema(type=["object"]))
    assert decoded["key1"]["prop1"] == "value1"
    assert decoded["key2"]["prop2"] == 123
    assert decoded["key3"]["prop3"] == 456


def test_construct_param_map_from_deep_object_encoding_existing_key():
    array_schema = Schema(type=["array"], additional_properties=Schema(type=["array"]))
    values = [
        QueryParam(key="key1", values=["456", "789"], property="prop3"),
        QueryParam(key="key1", values=["999", "888"], property="prop3"),
    ]
    decoded = construct_param_map_from_deep_object_encoding(values, array_schema)
    assert decoded["key1"]["prop3"] == [999, 888]

    int_schema = Schema(type=["integer"], additional_properties=Schema(type=["integer"]))
    decoded = construct_param_map_from_deep_object_encoding(values, int_schema)
    assert decoded["key1"]["prop3"] == 999


def test_construct_kv_from_label_encoding():
    assert construct_kv_from_label_encoding("") == {}
    assert construct_kv_from_label_encoding("key1=value1")["key1"] == "value1"

    props = construct_kv_from_label_encoding("key1=value1.key2=value2")
    assert props["key1"] == "value1"
    assert props["key2"] == "value2"

    props = construct_kv_from_label_encoding("key1=value1.key2")
    assert props["key1"] == "value1"
    assert "key2" not in props

    props = construct_kv_from_label_encoding("key1=123.key2=true")
    assert props["key1"] == 123
    assert props["key2"] is True

    props = construct_kv_from_label_encoding("key1=value1.key2.key3=123.key4=true")
    assert props["key1"] == "value1"
    assert props["key3"] == 123
    assert props["key4"] is True
    assert "key2" not in props


def test_construct_param_map_from_query_param_input():
    assert construct_param_map_from_query_param_input({}) == {}

    decoded = construct_param_map_from_query_param_input(
        {"param1": [QueryParam(key="param1", values=["value1"])]}
    )
    assert decoded["param1"] == "value1"

    decoded = construct_param_map_from_query_param_input(
        {
            "param1": [QueryParam(key="param1", values=["value1"])],
            "param2": [QueryParam(key="param2", values=["123"])],
            "param3": [QueryParam(key="param3", values=["true"])],
        }
    )
    assert decoded["param1"] == "value1"
    assert decoded["param2"] == 123
    assert decoded["param3"] is True

    decoded = construct_param_map_from_query_param_input(
        {"param1": [QueryParam(key="param1", values=["first", "second"])]}
    )
    assert decoded["param1"] == "first"

    decoded = construct_param_map_from_query_param_input(
        {
            "intParam": [QueryParam(key="intParam", values=["42"])],
            "boolParam": [QueryParam(key="boolParam", values=["false"])],
            "stringParam": [QueryParam(key="stringParam", values=["hello"])],
        }
    )
    assert decoded["intParam"] == 42
    assert decoded["boolParam"] is False
    assert decoded["stringParam"] == "hello"


def test_construct_param_map_from_pipe_encoding():
    result = construct_param_map_from_pipe_encoding([QueryParam(key="key1", values=["name|value"])])
    assert result["key1"]["name"] == "value"


def test_construct_param_map_from_pipe_encoding_incomplete_pair():
    with pytest.raises(ValueError):
        construct_param_map_from_pipe_encoding([QueryParam(key="key1", values=["name|value|extra"])])


def test_construct_param_map_from_space_encoding():
    result = construct_param_map_from_space_encoding([QueryParam(key="key1", values=["name value"])])
    assert result["key1"]["name"] == "value"


def test_construct_map_from_csv():
    result = construct_map_from_csv("key1,value1,key2,value2")
    assert result["key1"] == "value1"
    assert result["key2"] == "value2"

    result = construct_map_from_csv("key1,value1,key2")
    assert result == {"key1": "value1"}


def test_construct_kv_from_csv():
    result = construct_kv_from_csv("key1=value1,key2=value2")
    assert result["key1"] == "value1"
    assert result["key2"] == "value2"


def test_collapse_csv_into_form_style():
    assert collapse_csv_into_form_style("key", "value1,value2") == "&key=value1&key=value2"


def test_collapse_csv_into_space_delimited_style():
    assert collapse_csv_into_space_delimited_style("key", ["value1", "value2"]) == "key=value1%20value2"


def test_collapse_csv_into_pipe_delimited_style():
    assert collapse_csv_into_pipe_delimited_style("key", ["value1", "value2"]) == "key=value1|value2"


def test_does_form_param_contain_delimiter():
    assert does_form_param_contain_delimiter("value1,value2", "") is True
    assert does_form_param_contain_delimiter("value1 value2", "") is False


def test_explode_query_value():
    assert explode_query_value("value1,value2", "") == ["value1", "value2"]
    assert explode_query_value("value1 value2", "spaceDelimited") == ["value1", "value2"]
    assert explode_query_value("value1|value2", "pipeDelimited") == ["value1", "value2"]


def test_construct_kv_from_matrix_csv():
    assert construct_kv_from_matrix_csv("") == {}
    assert construct_kv_from_matrix_csv("key1=value1")["key1"] == "value1"

    props = construct_kv_from_matrix_csv("key1=value1;key2=value2")
    assert props["key1"] == "value1"
    assert props["key2"] == "value2"

    props = construct_kv_from_matrix_csv("key1=value1;key2")
    assert props["key1"] == "value1"
    assert "key2" not in props

    props = construct_kv_from_matrix_csv("key1=123;key2=true")
    assert props["key1"] == 123
    assert props["key2"] is True

    props = construct_kv_from_matrix_csv("key1=value1;key2;key3=456;key4=false")
    assert props["key1"] == "value1"
    assert props["key3"] == 456
    assert props["key4"] is False
    assert "key2" not in props


def test_construct_param_map_from_form_encoding_array():
    assert construct_param_map_from_form_encoding_array([]) == {}

    decoded = construct_param_map_from_form_encoding_array(
        [QueryParam(key="param1", values=["key1,value1,key2,value2"])]
    )
    assert decoded["param1"]["key1"] == "value1"
    assert decoded["param1"]["key2"] == "value2"

    decoded = construct_param_map_from_form_encoding_array(
        [
            QueryParam(key="param1", values=["key1,value1"]),
            QueryParam(key="param2", values=["key3,value3,key4,value4"]),
        ]
    )
    assert decoded["param1"]["key1"] == "value1"
    assert decoded["param2"]["key3"] == "value3"
    assert decoded["param2"]["key4"] == "value4"

    decoded = construct_param_map_from_form_encoding_array(
        [QueryParam(key="param1", values=["key1,value1,key2"])]
    )
    assert decoded["param1"]["key1"] == "value1"
    assert "key2" not in decoded["param1"]

    decoded = construct_param_map_from_form_encoding_array(
        [QueryParam(key="param1", values=["key1,123,key2,true,key3,hello"])]
    )
    assert decoded["param1"]["key1"] == 123
    assert decoded["param1"]["key2"] is True
    assert decoded["param1"]["key3"] == "hello"