import pytest

from canonhash.serialize import quote, serialize
from canonhash.util import number_text


@pytest.mark.parametrize(
    "n, text",
    [
        (1.0, "1"),
        (-0.0, "0"),
        (0, "0"),
        (-1.5, "-1.5"),
        (0.5, "0.5"),
        (123.456, "123.456"),
        (0.1 + 0.2, "0.30000000000000004"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (1.5e21, "1.5e+21"),
        (0.000001, "0.000001"),
        (1e-7, "1e-7"),
        (1.5e-7, "1.5e-7"),
        (5e-324, "5e-324"),
        (1.7976931348623157e308, "1.7976931348623157e+308"),
        (2**53, "9007199254740992"),
        (2**64, "18446744073709552000"),
        (10**21, "1e+21"),
        (10**400, "null"),
        (float("nan"), "null"),
    ],
)
def test_number_text(n, text):
    assert number_text(n) == text


def test_compact_output():
    assert serialize({"a": [1, None, True, False], "b": {}}) == '{"a":[1,null,true,false],"b":{}}'
    assert serialize([]) == "[]"


def test_members_emitted_in_given_order():
    assert serialize({"z": 1, "a": 2}) == '{"z":1,"a":2}'


def test_string_escapes():
    assert quote('say "hi"\\') == '"say \\"hi\\"\\\\"'
    assert quote("a\nb\tc") == '"a\\nb\\tc"'
    assert quote("\x01") == '"\\u0001"'
    assert quote("Київ/€") == '"Київ/€"'


def test_lone_surrogate_is_escaped():
    assert quote("a\ud800b") == '"a\\ud800b"'
    assert quote("\udc00") == '"\\udc00"'


def test_surrogate_pair_is_joined():
    assert quote("\ud83d\ude00") == '"\U0001F600"'


def test_foreign_values_render_null():
    assert serialize([object()]) == "[null]"
