import pytest

from matrixsdk._utils import merge_body, merge_query, require_options, require_str
from matrixsdk.models.errors import InvalidArgumentError


class TestMergeBody:
    def test_options_override_defaults(self) -> None:
        defaults = {"a": 1, "b": 2}
        opts = {"b": 3, "c": 4}

        assert merge_body(defaults, opts) == {"a": 1, "b": 3, "c": 4}

    def test_none_options(self) -> None:
        assert merge_body({"a": 1}, None) == {"a": 1}

    def test_inputs_are_not_mutated(self) -> None:
        defaults = {"a": 1}
        opts = {"a": 2}

        merge_body(defaults, opts)

        assert defaults == {"a": 1}
        assert opts == {"a": 2}

    def test_nested_options_are_copied(self) -> None:
        opts = {"identifier": {"user": "a"}}

        merged = merge_body({}, opts)
        opts["identifier"]["user"] = "mallory"

        assert merged == {"identifier": {"user": "a"}}

    def test_rejects_non_mapping(self) -> None:
        with pytest.raises(InvalidArgumentError, match="opts"):
            merge_body({}, [("a", 1)])  # type: ignore[arg-type]

    def test_rejects_non_string_keys(self) -> None:
        with pytest.raises(InvalidArgumentError, match="opts"):
            merge_body({}, {1: "a"})  # type: ignore[dict-item]


class TestMergeQuery:
    def test_insertion_order(self) -> None:
        assert merge_query([], {"since": "s1", "timeout": 500}) == [
            ("since", "s1"),
            ("timeout", 500),
        ]

    def test_overridden_key_keeps_default_position(self) -> None:
        defaults = [("from", "t1"), ("dir", "b")]

        assert merge_query(defaults, {"limit": 10, "from": "t2"}) == [
            ("from", "t2"),
            ("dir", "b"),
            ("limit", 10),
        ]

    def test_empty(self) -> None:
        assert merge_query([], None) == []

    def test_rejects_nested_values(self) -> None:
        with pytest.raises(InvalidArgumentError, match="filter"):
            merge_query([], {"filter": {"room": {"timeline": {"limit": 1}}}})


class TestRequire:
    def test_require_str(self) -> None:
        assert require_str("token", "t") == "t"
        assert require_str("state_key", "", allow_empty=True) == ""

    @pytest.mark.parametrize("value", ["", None, 1, b"t"])
    def test_require_str_rejects(self, value: object) -> None:
        with pytest.raises(InvalidArgumentError, match="token"):
            require_str("token", value)

    def test_require_options_copies(self) -> None:
        opts = {"a": 1}

        copy = require_options(opts)

        assert copy == opts
        assert copy is not opts
