"""
tests/conftest.py
Shared fixtures for the betternaming test suite.

No external mocking libraries are used; delegation is observed through a
recording strategy that logs every call it receives.
"""

from __future__ import annotations

from typing import Any, List, Tuple

import pytest

from betternaming import DefaultNamingStrategy, NestedSetColumnNames, ReadableNamingStrategy


# ---------------------------------------------------------------------------
# Recording fallback strategy
# ---------------------------------------------------------------------------


class RecordingStrategy:
    """
    Stand-in fallback strategy: every operation records ``(name, args)`` and
    returns a sentinel string so tests can assert the result came back
    unmodified.
    """

    nested_set_column_names: NestedSetColumnNames = NestedSetColumnNames("lft", "rgt")
    materialized_path_column_name: str = "path"

    def __init__(self) -> None:
        self.calls: List[Tuple[str, Tuple[Any, ...]]] = []

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)

        def _record(*args: Any) -> str:
            self.calls.append((name, args))
            return f"<default:{name}>"

        return _record


@pytest.fixture()
def recorder() -> RecordingStrategy:
    return RecordingStrategy()


# ---------------------------------------------------------------------------
# Strategy fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def default_strategy() -> DefaultNamingStrategy:
    return DefaultNamingStrategy()


@pytest.fixture()
def readable() -> ReadableNamingStrategy:
    """Both flags on (the defaults)."""
    return ReadableNamingStrategy()


@pytest.fixture()
def case_only() -> ReadableNamingStrategy:
    """Readable case on, hashed constraint names."""
    return ReadableNamingStrategy(
        use_readable_case=True,
        use_readable_constraint_names=False,
    )


@pytest.fixture()
def constraints_only() -> ReadableNamingStrategy:
    """Readable constraint names on, library-default case."""
    return ReadableNamingStrategy(
        use_readable_case=False,
        use_readable_constraint_names=True,
    )


@pytest.fixture()
def all_off() -> ReadableNamingStrategy:
    return ReadableNamingStrategy(
        use_readable_case=False,
        use_readable_constraint_names=False,
    )
