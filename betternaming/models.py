# File: betternaming/models.py
"""
betternaming - Configuration & Reference Models
================================================
Pydantic V2 configuration for the readable naming strategy, plus the small
value types the strategies share: the table-reference union and the nested-set
column pair.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, List, Protocol, Union, runtime_checkable

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("betternaming.models")

# ---------------------------------------------------------------------------
# Shared model configuration
# ---------------------------------------------------------------------------

_SHARED_CONFIG: ConfigDict = ConfigDict(
    strict=False,
    populate_by_name=True,
    frozen=True,
    extra="forbid",
)


# ---------------------------------------------------------------------------
# Strategy options
# ---------------------------------------------------------------------------


class NamingOptions(BaseModel):
    """
    Toggles for :class:`~betternaming.strategy.ReadableNamingStrategy`.

    Both flags default to ``True``. The model is frozen: once a strategy is
    built its behaviour never changes.
    """

    model_config = _SHARED_CONFIG

    use_readable_case: bool = Field(
        default=True,
        validation_alias=AliasChoices("use_readable_case", "snake_case"),
        description="Render table/column/relation names in snake_case (createdAt -> created_at).",
    )
    use_readable_constraint_names: bool = Field(
        default=True,
        validation_alias=AliasChoices(
            "use_readable_constraint_names",
            "better_constraint_and_index_names",
        ),
        description="Render PK/UQ/IDX/FK names as <PREFIX>_<table>_<columns> instead of hashes.",
    )

    def __repr__(self) -> str:
        return (
            f"<NamingOptions readable_case={self.use_readable_case} "
            f"readable_constraints={self.use_readable_constraint_names}>"
        )


# ---------------------------------------------------------------------------
# Table references
# ---------------------------------------------------------------------------


@runtime_checkable
class HasName(Protocol):
    """Anything exposing a ``name`` attribute, e.g. ``sqlalchemy.Table``."""

    name: str


@dataclass(frozen=True, slots=True)
class TableRef:
    """Structured table reference carrying only a name."""

    name: str


TableReference = Union[str, HasName, Mapping[str, Any]]


def resolve_table_name(table_or_name: TableReference) -> str:
    """
    Return the plain table name for any accepted reference shape.

    Accepted variants:
        - ``str``: returned as-is (schema-qualified names stay qualified).
        - an object with a ``name`` attribute (``Table``, :class:`TableRef`).
        - a mapping with a ``"name"`` key.

    Raises:
        TypeError: for any other shape.
    """
    if isinstance(table_or_name, str):
        return table_or_name
    if isinstance(table_or_name, Mapping):
        if "name" in table_or_name:
            return table_or_name["name"]
    elif isinstance(table_or_name, HasName):
        return table_or_name.name
    raise TypeError(
        f"Unsupported table reference {table_or_name!r}: expected a str, "
        "an object with a 'name' attribute, or a mapping with a 'name' key."
    )


# ---------------------------------------------------------------------------
# Tree-entity column names
# ---------------------------------------------------------------------------


@dataclass(frozen=True, slots=True)
class NestedSetColumnNames:
    """Left/right boundary columns of a nested-set tree table."""

    left: str = "nsleft"
    right: str = "nsright"


# ---------------------------------------------------------------------------
# Module-level exports
# ---------------------------------------------------------------------------

__all__: List[str] = [
    "NamingOptions",
    "HasName",
    "TableRef",
    "TableReference",
    "resolve_table_name",
    "NestedSetColumnNames",
]

logger.debug("betternaming.models loaded.")
