import pytest

from volpefw.tinyjson import JsonParser, TinyJson, Value


def test_parse_obj_tokens():
    tokens = JsonParser().parse_obj('{"name":"bob","age":30}')
    assert tokens == ["name", "bob", "age", "30"]


def test_parse_obj_empty_object_keeps_text():
    assert JsonParser().parse_obj("{}") == [""]


def test_parse_array_of_numbers():
    assert JsonParser().parse_array("[1,2,3]") == ["1", "2", "3"]


def test_parse_array_of_strings():
    assert JsonParser().parse_array('["a", "b"]') == ["a", "b"]


def test_get_typed_values():
    doc = TinyJson()
    doc.read_json('{"name":"bob","age":30,"t":-5,"pi":2.5}')
    assert doc.get("name") == "bob"
    assert doc.get("age", 0) == 30
    assert doc.get("t", kind=int) == -5
    assert doc.get("pi", 0.0) == 2.5


def test_get_missing_returns_default():
    doc = TinyJson()
    doc.read_json('{"a":"x"}')
    assert doc.get("missing", 7) == 7
    assert doc.get("missing", kind=int) == 0
    assert doc.get("missing") == ""


def test_value_get_as():
    assert Value("true").get_as(bool) is True
    assert Value("false").get_as(bool) is False
    assert Value("12abc").get_as(int) == 12
    assert Value("nope").get_as(float) == 0.0
    with pytest.raises(TypeError):
        Value("1").get_as(list)


def test_write_flat_object():
    doc = TinyJson()
    doc["name"].set("bob")
    doc["age"].set(30)
    doc["ok"].set(True)
    assert doc.write_json() == '{"name":"bob","age":30,"ok":true}'
    assert str(doc) == doc.write_json()


def test_write_float_uses_six_significant_digits():
    doc = TinyJson()
    doc["pi"].set(3.14159265)
    assert doc.write_json() == '{"pi":3.14159}'


def test_bare_values_write_as_array():
    arr = TinyJson()
    arr[""].set(5)
    arr[""].set("x")
    assert arr.nokey is True
    assert arr.write_json(2) == '[5,"x"]'
    assert arr.write_json(0) == '5,"x"'


def test_array_of_objects_round_trip():
    first = TinyJson()
    first["x"].set(1)
    second = TinyJson()
    second["x"].set(2)
    arr = TinyJson()
    arr.push(first)
    arr.push(second)
    doc = TinyJson()
    doc["data"].set(arr)
    text = doc.write_json()
    assert text == '{"data":[{"x":1},{"x":2}]}'

    reader = TinyJson()
    reader.read_json(text)
    items = reader.get_array("data")
    assert len(items) == 2
    items.enter(1)
    assert items.get("x", 0) == 2
    items.enter(0)
    assert items.get("x", 0) == 1


def test_nested_object_round_trip():
    inner = TinyJson()
    inner["a"].set(1)
    inner["b"].set("two")
    doc = TinyJson()
    doc["inner"].set(inner)
    doc["n"].set(4)

    reader = TinyJson()
    reader.read_json(doc.write_json())
    assert reader.get("n", 0) == 4
    nested = reader.get_array("inner")
    assert len(nested) == 1
    nested.enter(0)
    assert nested.get("a", 0) == 1
    assert nested.get("b") == "two"


def test_array_elements_read_with_get_value():
    reader = TinyJson()
    reader.read_json('{"nums":[10,20,30]}')
    nums = reader.get_array("nums")
    values = []
    for i in range(len(nums)):
        nums.enter(i)
        values.append(nums.get_value(int))
    assert values == [10, 20, 30]


def test_string_with_comma_kept_whole():
    reader = TinyJson()
    reader.read_json('{"s":"a,b","k":"v"}')
    assert reader.get("s") == "a,b"
    assert reader.get("k") == "v"


def test_get_value_on_empty_document_raises():
    with pytest.raises(IndexError):
        TinyJson().get_value()