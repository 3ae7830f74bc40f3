"""Tests for skylark.http.query — mutable QueryString."""

import sys
from urllib.parse import parse_qsl

import pytest

from skylark._internal.multimap import QueryStringLike
from skylark.errors import ConversionError, InvalidKeyError, ProviderNotInstalledError
from skylark.http.query import QueryString

BLANK_KEYS = [None, "", "   ", "\t\n", 42]


class TestConstruction:
    def test_empty(self) -> None:
        q = QueryString()
        assert q.count == 0
        assert q.is_empty
        assert q.keys() == []
        assert str(q) == ""

    def test_none_source_is_empty(self) -> None:
        q = QueryString(None)
        assert q.is_empty

    def test_from_mapping(self) -> None:
        q = QueryString({"a": "1", "b": "2"})
        assert q.items() == [("a", "1"), ("b", "2")]

    def test_from_mapping_with_lists(self) -> None:
        q = QueryString({"tag": ["python", "rust"], "q": "hello"})
        assert q.get_list("tag") == ["python", "rust"]
        assert q.get_string("q") == "hello"

    def test_from_mapping_formats_values(self) -> None:
        q = QueryString({"page": 2, "ratio": 0.5, "flag": True})
        assert q.items() == [("page", "2"), ("ratio", "0.5"), ("flag", "true")]

    def test_from_pairs(self) -> None:
        q = QueryString([("x", "first"), ("x", "second")])
        assert q.keys() == ["x", "x"]
        assert q.get_list("x") == ["first", "second"]

    def test_from_query_string_text(self) -> None:
        q = QueryString("?a=1&b=hello+world&flag=")
        assert q.items() == [("a", "1"), ("b", "hello world"), ("flag", "")]

    def test_from_query_string_copies(self) -> None:
        original = QueryString({"a": "1"})
        copy = QueryString(original)
        copy.add("b", "2")
        assert original.count == 1
        assert copy.count == 2

    def test_none_values_are_kept(self) -> None:
        q = QueryString({"a": None})
        assert q.items() == [("a", None)]


class TestAdoptedKeys:
    @pytest.mark.parametrize(
        "source",
        [
            [(None, "v")],
            [("  ", "v")],
            {"": "v"},
            {1: "a"},
            "=x&a=1",
        ],
    )
    def test_blank_or_non_string_keys_rejected(self, source: object) -> None:
        with pytest.raises(InvalidKeyError):
            QueryString(source)  # type: ignore[arg-type]

    def test_multi_items_keys_validated(self) -> None:
        class Params:
            def multi_items(self) -> list[tuple[str, str]]:
                return [("a", "1"), (" ", "2")]

        with pytest.raises(InvalidKeyError):
            QueryString(Params())  # type: ignore[arg-type]

    def test_pair_list_values_flattened_like_mapping(self) -> None:
        from_pairs = QueryString([("tag", ["x", "y"])])
        from_mapping = QueryString({"tag": ["x", "y"]})
        assert from_pairs.items() == [("tag", "x"), ("tag", "y")]
        assert from_pairs == from_mapping


class TestFromSource:
    def test_none_passes_through(self) -> None:
        assert QueryString.from_source(None) is None

    def test_mapping_converts(self) -> None:
        q = QueryString.from_source({"a": "1"})
        assert isinstance(q, QueryString)
        assert q.get_string("a") == "1"

    def test_empty_mapping_converts_to_empty(self) -> None:
        q = QueryString.from_source({})
        assert q is not None
        assert q.is_empty


class TestAddAndSet:
    def test_set_then_get_string(self) -> None:
        q = QueryString()
        q.set("name", "alice")
        assert q.get_string("name") == "alice"

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (42, "42"),
            (-7, "-7"),
            (1.5, "1.5"),
            (0.1, "0.1"),
            (True, "true"),
            (False, "false"),
            (None, ""),
        ],
    )
    def test_set_formats_value(self, value: object, expected: str) -> None:
        q = QueryString()
        q.set("k", value)
        assert q.get_string("k") == expected

    def test_add_appends_duplicates(self) -> None:
        q = QueryString()
        q.add("tag", "a")
        q.add("tag", "b")
        assert q.count == 2
        assert q.keys() == ["tag", "tag"]
        assert q.get_list("tag") == ["a", "b"]

    def test_getters_read_first_value(self) -> None:
        q = QueryString()
        q.add("n", 1)
        q.add("n", 2)
        assert q.get_string("n") == "1"
        assert q.get_int32("n") == 1

    def test_set_replaces_all_values(self) -> None:
        q = QueryString()
        q.add("tag", "a")
        q.add("tag", "b")
        q.set("tag", "c")
        assert q.get_list("tag") == ["c"]

    def test_set_keeps_position_of_first_entry(self) -> None:
        q = QueryString([("a", "1"), ("b", "2"), ("a", "3")])
        q.set("a", "9")
        assert q.items() == [("a", "9"), ("b", "2")]

    def test_set_appends_new_key(self) -> None:
        q = QueryString({"a": "1"})
        q.set("b", "2")
        assert q.items() == [("a", "1"), ("b", "2")]

    def test_remove(self) -> None:
        q = QueryString([("a", "1"), ("b", "2"), ("a", "3")])
        assert q.remove("a") is True
        assert q.items() == [("b", "2")]
        assert q.remove("a") is False

    def test_supports_duplicate_keys(self) -> None:
        assert QueryString().supports_duplicate_keys is True


class TestContainsKey:
    def test_present(self) -> None:
        q = QueryString({"a": "1"})
        assert q.contains_key("a")

    def test_missing(self) -> None:
        q = QueryString({"a": "1"})
        assert not q.contains_key("b")

    def test_present_with_none_value(self) -> None:
        q = QueryString({"a": None})
        assert q.contains_key("a")
        assert q.get_string("a") is None

    def test_in_operator(self) -> None:
        q = QueryString({"a": "1"})
        assert "a" in q
        assert "b" not in q

    def test_in_operator_does_not_raise_for_blank(self) -> None:
        q = QueryString({"a": "1"})
        assert "" not in q
        assert 42 not in q  # type: ignore[operator]


class TestInvalidKeys:
    @pytest.mark.parametrize("key", BLANK_KEYS)
    @pytest.mark.parametrize(
        "call",
        [
            lambda q, k: q.add(k, "v"),
            lambda q, k: q.set(k, "v"),
            lambda q, k: q.remove(k),
            lambda q, k: q.contains_key(k),
            lambda q, k: q.get_string(k),
            lambda q, k: q.get_list(k),
            lambda q, k: q.get_int32(k),
            lambda q, k: q.get_int64(k),
            lambda q, k: q.get_boolean(k),
            lambda q, k: q.get_double(k),
            lambda q, k: q.get_float(k),
        ],
    )
    def test_rejected(self, call, key) -> None:
        q = QueryString({"a": "1"})
        with pytest.raises(InvalidKeyError):
            call(q, key)

    def test_failed_add_leaves_store_untouched(self) -> None:
        q = QueryString({"a": "1"})
        with pytest.raises(InvalidKeyError):
            q.add("  ", "v")
        assert q.items() == [("a", "1")]

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            QueryString().set("", "v")


class TestTypedGetters:
    def test_missing_key_returns_zero_values(self) -> None:
        q = QueryString()
        assert q.get_int32("x") == 0
        assert q.get_int64("x") == 0
        assert q.get_double("x") == 0.0
        assert q.get_float("x") == 0.0
        assert q.get_boolean("x") is False

    def test_blank_value_returns_zero_values(self) -> None:
        q = QueryString({"x": "  "})
        assert q.get_int32("x") == 0
        assert q.get_boolean("x") is False
        assert q.get_double("x") == 0.0

    def test_none_value_returns_zero_values(self) -> None:
        q = QueryString({"x": None})
        assert q.get_int64("x") == 0

    def test_int32(self) -> None:
        q = QueryString({"page": "3", "neg": "-12", "padded": " 7 "})
        assert q.get_int32("page") == 3
        assert q.get_int32("neg") == -12
        assert q.get_int32("padded") == 7

    def test_int32_not_numeric(self) -> None:
        q = QueryString({"size": "abc"})
        with pytest.raises(ConversionError) as info:
            q.get_int32("size")
        assert info.value.key == "size"
        assert info.value.value == "abc"

    def test_int32_overflow(self) -> None:
        q = QueryString({"big": "2147483648"})
        with pytest.raises(ConversionError):
            q.get_int32("big")
        assert q.get_int64("big") == 2147483648

    def test_int64_overflow(self) -> None:
        q = QueryString({"huge": "9223372036854775808"})
        with pytest.raises(ConversionError):
            q.get_int64("huge")

    def test_int_rejects_decimal(self) -> None:
        q = QueryString({"n": "1.5"})
        with pytest.raises(ConversionError):
            q.get_int32("n")

    def test_double(self) -> None:
        q = QueryString({"a": "2.5", "b": "1e3", "c": "-0.25"})
        assert q.get_double("a") == 2.5
        assert q.get_double("b") == 1000.0
        assert q.get_double("c") == -0.25

    def test_double_rejects_comma_decimal(self) -> None:
        q = QueryString({"a": "1,5"})
        with pytest.raises(ConversionError):
            q.get_double("a")

    def test_float_overflow(self) -> None:
        q = QueryString({"a": "1e39"})
        with pytest.raises(ConversionError):
            q.get_float("a")
        assert q.get_double("a") == 1e39

    def test_float_is_single_precision(self) -> None:
        q = QueryString({"a": "0.1"})
        value = q.get_float("a")
        assert value == pytest.approx(0.1, rel=1e-7)
        assert value != 0.1

    def test_boolean(self) -> None:
        q = QueryString({"a": "true", "b": "False", "c": " TRUE "})
        assert q.get_boolean("a") is True
        assert q.get_boolean("b") is False
        assert q.get_boolean("c") is True

    def test_boolean_rejects_other_words(self) -> None:
        q = QueryString({"a": "yes"})
        with pytest.raises(ConversionError):
            q.get_boolean("a")

    def test_conversion_error_chains_cause(self) -> None:
        q = QueryString({"a": "abc"})
        with pytest.raises(ConversionError) as info:
            q.get_double("a")
        assert isinstance(info.value.__cause__, ValueError)


class TestSerialization:
    def test_pairs_joined_in_order(self) -> None:
        q = QueryString()
        q.add("b", "2")
        q.add("a", "1")
        assert str(q) == "b=2&a=1"

    def test_space_encoded_as_plus(self) -> None:
        q = QueryString({"a": "1", "b": "hello world"})
        assert q.to_string() == "a=1&b=hello+world"

    def test_round_trip_with_parse_qsl(self) -> None:
        q = QueryString({"a": "1", "b": "hello world"})
        assert parse_qsl(str(q)) == [("a", "1"), ("b", "hello world")]

    def test_reserved_characters_encoded(self) -> None:
        q = QueryString({"ids": "ga:123", "filters": "ga:city==Oslo;ga:x=~^a&b"})
        text = str(q)
        assert text.startswith("ids=ga%3A123&filters=")
        assert "&b" not in text
        assert dict(parse_qsl(text)) == {"ids": "ga:123", "filters": "ga:city==Oslo;ga:x=~^a&b"}

    def test_keys_encoded(self) -> None:
        q = QueryString()
        q.add("a b", "c")
        assert str(q) == "a+b=c"

    def test_none_value_rendered_empty(self) -> None:
        q = QueryString([("a", None), ("b", "1")])
        assert str(q) == "a=&b=1"

    def test_duplicates_rendered(self) -> None:
        q = QueryString()
        q.add("tag", "x")
        q.add("tag", "y")
        assert str(q) == "tag=x&tag=y"

    def test_unicode(self) -> None:
        q = QueryString({"q": "blåbær"})
        assert str(q) == "q=bl%C3%A5b%C3%A6r"


class TestProjections:
    def test_views_are_fresh(self) -> None:
        q = QueryString()
        keys = q.keys()
        q.add("a", "1")
        assert keys == []
        assert q.keys() == ["a"]
        assert q.count == 1
        assert not q.is_empty

    def test_items_is_a_copy(self) -> None:
        q = QueryString({"a": "1"})
        q.items().append(("b", "2"))
        assert q.count == 1

    def test_len_and_iter(self) -> None:
        q = QueryString([("a", "1"), ("a", "2"), ("b", "3")])
        assert len(q) == 3
        assert list(q) == ["a", "a", "b"]

    def test_equality(self) -> None:
        assert QueryString({"a": "1"}) == QueryString([("a", "1")])
        assert QueryString({"a": "1"}) != QueryString({"a": "2"})

    def test_copy_is_independent(self) -> None:
        q = QueryString({"a": "1"})
        c = q.copy()
        c.set("a", "2")
        assert q.get_string("a") == "1"

    def test_repr(self) -> None:
        q = QueryString({"q": "hello"})
        assert "hello" in repr(q)

    def test_adopts_any_query_string_like(self) -> None:
        class Fixed(QueryString):
            __slots__ = ()

        source = Fixed([("a", "1"), ("a", "2")])
        q = QueryString(source)
        assert type(q) is QueryString
        assert q.get_list("a") == ["1", "2"]

    def test_satisfies_protocol(self) -> None:
        assert isinstance(QueryString(), QueryStringLike)


class TestHttpx:
    def test_to_httpx(self) -> None:
        httpx = pytest.importorskip("httpx")
        q = QueryString([("tag", "x"), ("tag", "y"), ("empty", None)])
        params = q.to_httpx()
        assert isinstance(params, httpx.QueryParams)
        assert params.get_list("tag") == ["x", "y"]
        assert params["empty"] == ""

    def test_from_httpx(self) -> None:
        httpx = pytest.importorskip("httpx")
        params = httpx.QueryParams([("a", "1"), ("a", "2")])
        q = QueryString(params)
        assert q.get_list("a") == ["1", "2"]

    def test_to_httpx_without_httpx(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setitem(sys.modules, "httpx", None)
        with pytest.raises(ProviderNotInstalledError, match="pip install"):
            QueryString({"a": "1"}).to_httpx()
