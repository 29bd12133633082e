"""
tests/test_utils.py
Unit tests for betternaming.utils.

Tests cover:
- snake_case normalisation (camel, Pascal, acronyms, digits, idempotence)
- camelCase / TitleCase conversion used by the default strategy
- SHA-1 helper
"""

from __future__ import annotations

import hashlib

import pytest

from betternaming.utils import sha1_hex, to_camel_case, to_snake_case, to_title_case


# ===========================================================================
# to_snake_case
# ===========================================================================


class TestSnakeCase:
    @pytest.mark.parametrize(
        "name, expected",
        [
            ("createdAt", "created_at"),
            ("TestTableName", "test_table_name"),
            ("testPrefix1", "test_prefix1"),
            ("HTMLParser", "html_parser"),
            ("userID", "user_id"),
            ("version2Name", "version2_name"),
            ("already_snake", "already_snake"),
            ("A", "a"),
        ],
    )
    def test_converts_mixed_case(self, name: str, expected: str) -> None:
        assert to_snake_case(name) == expected

    def test_empty_string(self) -> None:
        assert to_snake_case("") == ""

    @pytest.mark.parametrize(
        "name",
        ["createdAt", "TestTableName", "HTMLParser", "first_propertyName", "XMLHttpRequest"],
    )
    def test_idempotent(self, name: str) -> None:
        once = to_snake_case(name)
        assert to_snake_case(once) == once

    def test_keeps_existing_separators(self) -> None:
        assert to_snake_case("relation__Id") == "relation__id"
        assert to_snake_case("schema.TableName") == "schema.table_name"
        assert to_snake_case("name IS NOT NULL") == "name is not null"

    def test_non_ascii_capitals_are_not_boundaries(self) -> None:
        assert to_snake_case("fooÄbar") == "fooäbar"

    def test_non_string_is_not_coerced(self) -> None:
        with pytest.raises(TypeError):
            to_snake_case(None)  # type: ignore[arg-type]

    def test_caches_are_bounded(self) -> None:
        for fn in (to_snake_case, to_camel_case, to_title_case):
            assert fn.cache_info().maxsize == 4096


# ===========================================================================
# to_camel_case / to_title_case
# ===========================================================================


class TestCamelAndTitleCase:
    def test_camel_from_snake(self) -> None:
        assert to_camel_case("user_id") == "userId"
        assert to_camel_case("address_homeAddress") == "addressHomeAddress"

    def test_camel_lowers_leading_capital(self) -> None:
        assert to_camel_case("Author_Id") == "authorId"

    def test_camel_handles_dash_and_space(self) -> None:
        assert to_camel_case("first-name last") == "firstNameLast"

    def test_camel_single_word_unchanged(self) -> None:
        assert to_camel_case("user") == "user"

    def test_title_case(self) -> None:
        assert to_title_case("name") == "Name"
        assert to_title_case("createdAt") == "Createdat"
        assert to_title_case("two words") == "Two Words"
        assert to_title_case("") == ""


# ===========================================================================
# sha1_hex
# ===========================================================================


class TestSha1:
    def test_matches_hashlib(self) -> None:
        assert sha1_hex("testTable_id_name") == hashlib.sha1(b"testTable_id_name").hexdigest()

    def test_known_prefix(self) -> None:
        assert sha1_hex("testTable_id_name").startswith("cd6c7d74544015746c56d5ec8d3")
