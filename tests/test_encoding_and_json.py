import pytest

from signed_token.utils.encoding import b64url_decode, b64url_encode
from signed_token.utils.minijson import dump_object, load_object


def test_b64url_encode_strips_padding_and_uses_url_alphabet() -> None:
    assert b64url_encode(b"\xfb\xff") == "-_8"
    assert b64url_encode(b"a") == "YQ"
    assert b64url_encode(b"") == ""


def test_b64url_decode_accepts_unpadded_input() -> None:
    assert b64url_decode("-_8") == b"\xfb\xff"
    assert b64url_decode("YWI") == b"ab"


@pytest.mark.parametrize("value", ["YQ==", "+/8", "Y Q", "Y", "YR", "YQ\n"])
def test_b64url_decode_rejects_non_canonical_input(value: str) -> None:
    with pytest.raises(ValueError):
        b64url_decode(value)


def test_dump_object_keeps_field_order() -> None:
    assert dump_object({"alg": "HS256", "typ": "JWT"}) == '{"alg":"HS256","typ":"JWT"}'
    assert dump_object({"sub": "abc", "iat": -5}) == '{"sub":"abc","iat":-5}'


def test_dump_object_escapes_strings() -> None:
    assert dump_object({"sub": 'a"b\\c\n\x01'}) == '{"sub":"a\\"b\\\\c\\n\\u0001"}'
    assert dump_object({"sub": "café<>"}) == '{"sub":"café<>"}'


def test_dump_object_rejects_unsupported_values() -> None:
    with pytest.raises(TypeError):
        dump_object({"iat": True})
    with pytest.raises(TypeError):
        dump_object({"iat": 1.5})


def test_load_object_parses_flat_scalars() -> None:
    parsed = load_object(' { "s" : "x\\u00e9\\ud83d\\ude00\\/" , "i": -12, "f": 1.5e2, "t": true, "n": null } ')
    assert parsed == {"s": "xé\U0001F600/", "i": -12, "f": 150.0, "t": True, "n": None}
    assert isinstance(parsed["i"], int)


def test_load_object_reads_what_dump_object_writes() -> None:
    fields = {"sub": 'tab\there "quoted" ☃', "iat": 1_700_000_000_000}
    assert load_object(dump_object(fields)) == fields


@pytest.mark.parametrize(
    "text",
    [
        "",
        "[]",
        "{",
        '{"a":1,}',
        '{"a":1} x',
        '{"a":{"b":1}}',
        '{"a":01}',
        '{"a":"\\x"}',
        '{"a":"\\ud83d"}',
        '{"a":"\\ude00"}',
        '{"a":"line\nbreak"}',
        '{a:1}',
        '{"a":1,"a":2}',
        '{"a":tru}',
    ],
)
def test_load_object_rejects_invalid_input(text: str) -> None:
    with pytest.raises(ValueError):
        load_object(text)
