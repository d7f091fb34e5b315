import pytest

from ycsbkit.sds import DynamicString
from ycsbkit.sdsutil import (
    cat_fmt,
    cat_repr,
    from_long_long,
    join,
    ll_to_str,
    split_args,
    split_len,
    ull_to_str,
)


@pytest.mark.parametrize("value", [0, 7, -7, 123456789, 2**63 - 1, -(2**63)])
def test_ll_to_str_round_trip(value):
    text = ll_to_str(value)
    assert int(text) == value
    assert text == str(value)


@pytest.mark.parametrize("value", [2**63, -(2**63) - 1])
def test_ll_to_str_out_of_range(value):
    with pytest.raises(OverflowError):
        ll_to_str(value)


@pytest.mark.parametrize("value", [0, 42, 2**64 - 1])
def test_ull_to_str_round_trip(value):
    assert int(ull_to_str(value)) == value


@pytest.mark.parametrize("value", [-1, 2**64])
def test_ull_to_str_out_of_range(value):
    with pytest.raises(OverflowError):
        ull_to_str(value)


def test_from_long_long_gives_dynamic_string():
    s = from_long_long(-2**63)
    assert isinstance(s, DynamicString)
    assert bytes(s) == str(-2**63).encode()
    assert len(s) == len(str(-2**63))


def test_cat_fmt_base_case():
    s = cat_fmt(b"", "%i", 123)
    assert bytes(s) == b"123"


def test_cat_fmt_mixed_specifiers():
    s = cat_fmt(b"x:", "%s %S %I %u %U %T", "a", DynamicString(b"b"), -5, 6, 2**64 - 1, 9)
    assert bytes(s) == b"x:a b -5 6 " + str(2**64 - 1).encode() + b" 9"


def test_cat_fmt_percent_and_unknown():
    s = cat_fmt("", "100%% %q")
    assert bytes(s) == b"100% q"


def test_cat_fmt_does_not_modify_prefix():
    prefix = DynamicString(b"head")
    result = cat_fmt(prefix, "%s", "tail")
    assert bytes(prefix) == b"head"
    assert bytes(result) == b"headtail"


def test_cat_fmt_argument_errors():
    with pytest.raises(TypeError):
        cat_fmt(b"", "%s")
    with pytest.raises(TypeError):
        cat_fmt(b"", "plain", "extra")
    with pytest.raises(OverflowError):
        cat_fmt(b"", "%i", 2**31)
    with pytest.raises(ValueError):
        cat_fmt(b"", "dangling %")


def test_cat_repr_source_example():
    assert cat_repr(b"\a\n\0foo\r") == '"\\a\\n\\x00foo\\r"'


@pytest.mark.parametrize(
    "data",
    [b"", b"plain", b'quote " and \\ backslash', b"\t\r\n\a\b", bytes(range(256))],
)
def test_cat_repr_round_trips_through_split_args(data):
    assert split_args(cat_repr(data)) == [data]


def test_split_len_multichar_separator():
    assert split_len(b"foo_-_bar", b"_-_") == [b"foo", b"bar"]


def test_split_len_empty_input_and_separator():
    assert split_len(b"", b",") == []
    with pytest.raises(ValueError):
        split_len(b"a,b", b"")


@pytest.mark.parametrize("parts", [[b"a", b"", b"c"], [b"one"], [b"", b""]])
def test_join_split_round_trip(parts):
    joined = join(parts, b"::")
    assert split_len(bytes(joined), b"::") == parts


def test_join_returns_dynamic_string():
    joined = join([b"x", "y", DynamicString(b"z")], ",")
    assert isinstance(joined, DynamicString)
    assert joined == b",".join([b"x", b"y", b"z"])


def test_split_args_documented_example():
    line = 'foo bar "newline are supported\\n" and "\\xff\\x00otherstuff"'
    assert split_args(line) == [
        b"foo",
        b"bar",
        b"newline are supported\n",
        b"and",
        b"\xff\x00otherstuff",
    ]


def test_split_args_blank_input():
    assert split_args("") == []
    assert split_args("   \t\n ") == []


def test_split_args_single_quotes():
    assert split_args("'it\\'s' done") == [b"it's", b"done"]


@pytest.mark.parametrize("line", ['"foo"bar', '"foo', "'foo", "'foo'bar"])
def test_split_args_unbalanced_quotes(line):
    with pytest.raises(ValueError):
        split_args(line)


def test_split_args_accepts_bytes():
    assert split_args(b"  a  b ") == [b"a", b"b"]