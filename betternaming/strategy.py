# File: betternaming/strategy.py
"""
betternaming - Readable Naming Strategy
========================================
The naming convention engine: turns class and property identifiers into
snake_case tables and columns, and gives constraints and indexes names a
person can read in a migration diff::

    class User:                    table  -> user
        createdAt: datetime        column -> created_at
        organization: Org          FK     -> FK_user_organization_id
                                   (instead of FK_b75a68b1ca018c3daa0bb77731b)

Two flags on :class:`~betternaming.models.NamingOptions` switch the two rule
families independently. When a flag is off the engine forwards the call, with
identical arguments, to the wrapped default strategy and returns its answer
untouched. Operations the engine has no opinion on are always forwarded.

Usage::

    from betternaming import ReadableNamingStrategy
    strategy = ReadableNamingStrategy(use_readable_constraint_names=False)
    strategy.column_name("createdAt", "", [])      # 'created_at'
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, List, Optional, Protocol, Sequence, Union

from betternaming.default import DefaultNamingStrategy
from betternaming.models import (
    NamingOptions,
    NestedSetColumnNames,
    TableReference,
    resolve_table_name,
)
from betternaming.utils import to_snake_case

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("betternaming.strategy")


# ---------------------------------------------------------------------------
# Strategy interface
# ---------------------------------------------------------------------------


class NamingStrategy(Protocol):
    """Operations the host mapping layer asks of a naming strategy."""

    nested_set_column_names: NestedSetColumnNames
    materialized_path_column_name: str

    def table_name(self, class_name: str, custom_name: Optional[str] = None) -> str: ...

    def column_name(
        self,
        property_name: str,
        custom_name: Optional[str],
        embedded_prefixes: Sequence[str],
    ) -> str: ...

    def relation_name(self, property_name: str) -> str: ...

    def primary_key_name(
        self, table_or_name: TableReference, column_names: Sequence[str]
    ) -> str: ...

    def unique_constraint_name(
        self, table_or_name: TableReference, column_names: Sequence[str]
    ) -> str: ...

    def relation_constraint_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        where: Optional[str] = None,
    ) -> str: ...

    def default_constraint_name(
        self, table_or_name: TableReference, column_name: str
    ) -> str: ...

    def foreign_key_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        referenced_table_path: Optional[str] = None,
        referenced_column_names: Optional[Sequence[str]] = None,
    ) -> str: ...

    def index_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        where: Optional[str] = None,
    ) -> str: ...

    def check_constraint_name(
        self,
        table_or_name: TableReference,
        expression: str,
        is_enum: bool = False,
    ) -> str: ...

    def exclusion_constraint_name(
        self, table_or_name: TableReference, expression: str
    ) -> str: ...

    def join_column_name(self, relation_name: str, referenced_column_name: str) -> str: ...

    def join_table_name(
        self,
        first_table_name: str,
        second_table_name: str,
        first_property_name: str,
        second_property_name: str,
    ) -> str: ...

    def join_table_column_duplication_prefix(self, column_name: str, index: int) -> str: ...

    def join_table_column_name(
        self,
        table_name: str,
        property_name: str,
        column_name: Optional[str] = None,
    ) -> str: ...

    def join_table_inverse_column_name(
        self,
        table_name: str,
        property_name: str,
        column_name: Optional[str] = None,
    ) -> str: ...

    def closure_junction_table_name(self, original_closure_table_name: str) -> str: ...

    def prefix_table_name(self, prefix: str, table_name: str) -> str: ...


# ---------------------------------------------------------------------------
# Readable strategy
# ---------------------------------------------------------------------------


class ReadableNamingStrategy:
    """
    Naming strategy producing snake_case identifiers and
    ``<PREFIX>_<table>_<columns>`` constraint names.

    Args:
        options: a :class:`NamingOptions`, a plain mapping of option values,
            or ``None`` for all defaults.
        default: strategy used whenever a flag is off. Defaults to a fresh
            :class:`DefaultNamingStrategy`.
        **overrides: individual option values, applied on top of *options*.

    Raises:
        pydantic.ValidationError: for unknown or non-boolean options.
    """

    __slots__ = ("_options", "_default")

    def __init__(
        self,
        options: Union[NamingOptions, Mapping[str, Any], None] = None,
        *,
        default: Optional[NamingStrategy] = None,
        **overrides: Any,
    ) -> None:
        if options is None:
            options = NamingOptions(**overrides)
        elif isinstance(options, NamingOptions):
            if overrides:
                options = NamingOptions(
                    **{**options.model_dump(), **overrides}
                )
        else:
            options = NamingOptions(**{**dict(options), **overrides})

        self._options: NamingOptions = options
        self._default: NamingStrategy = (
            default if default is not None else DefaultNamingStrategy()
        )
        logger.debug(
            "ReadableNamingStrategy configured: %r (fallback=%r)",
            self._options,
            self._default,
        )

    # -- configuration ------------------------------------------------------

    @property
    def options(self) -> NamingOptions:
        return self._options

    @property
    def default(self) -> NamingStrategy:
        """The fallback strategy."""
        return self._default

    @property
    def use_readable_case(self) -> bool:
        return self._options.use_readable_case

    @property
    def use_readable_constraint_names(self) -> bool:
        return self._options.use_readable_constraint_names

    @property
    def nested_set_column_names(self) -> NestedSetColumnNames:
        return self._default.nested_set_column_names

    @property
    def materialized_path_column_name(self) -> str:
        return self._default.materialized_path_column_name

    # -- entity names -------------------------------------------------------

    def table_name(self, class_name: str, custom_name: Optional[str] = None) -> str:
        if self.use_readable_case:
            return custom_name if custom_name else to_snake_case(class_name)
        return self._default.table_name(class_name, custom_name)

    def column_name(
        self,
        property_name: str,
        custom_name: Optional[str],
        embedded_prefixes: Sequence[str],
    ) -> str:
        if self.use_readable_case:
            prefixes: str = "_".join(to_snake_case(p) for p in embedded_prefixes)
            name: str = custom_name if custom_name else to_snake_case(property_name)
            return f"{prefixes}_{name}" if prefixes else name
        return self._default.column_name(property_name, custom_name, embedded_prefixes)

    def relation_name(self, property_name: str) -> str:
        if self.use_readable_case:
            return to_snake_case(property_name)
        return self._default.relation_name(property_name)

    # -- constraint names ---------------------------------------------------

    def _constraint_name(
        self,
        prefix: str,
        table_or_name: TableReference,
        column_names: Sequence[str],
    ) -> str:
        table: str = resolve_table_name(table_or_name)
        columns: str = "_".join(self.column_name(c, "", []) for c in column_names)
        return f"{prefix}_{table}_{columns}"

    def primary_key_name(
        self, table_or_name: TableReference, column_names: Sequence[str]
    ) -> str:
        if self.use_readable_constraint_names:
            return self._constraint_name("PK", table_or_name, column_names)
        return self._default.primary_key_name(table_or_name, column_names)

    def unique_constraint_name(
        self, table_or_name: TableReference, column_names: Sequence[str]
    ) -> str:
        if self.use_readable_constraint_names:
            return self._constraint_name("UQ", table_or_name, column_names)
        return self._default.unique_constraint_name(table_or_name, column_names)

    def index_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        where: Optional[str] = None,
    ) -> str:
        if self.use_readable_constraint_names:
            base: str = self._constraint_name("IDX", table_or_name, column_names)
            # predicate text is appended as written, spaces and operators included
            return f"{base}_{where}" if where else base
        return self._default.index_name(table_or_name, column_names, where)

    def foreign_key_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        referenced_table_path: Optional[str] = None,
        referenced_column_names: Optional[Sequence[str]] = None,
    ) -> str:
        if self.use_readable_constraint_names:
            return self._constraint_name("FK", table_or_name, column_names)
        return self._default.foreign_key_name(
            table_or_name,
            column_names,
            referenced_table_path,
            referenced_column_names,
        )

    def relation_constraint_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        where: Optional[str] = None,
    ) -> str:
        return self._default.relation_constraint_name(table_or_name, column_names, where)

    def default_constraint_name(
        self, table_or_name: TableReference, column_name: str
    ) -> str:
        return self._default.default_constraint_name(table_or_name, column_name)

    def check_constraint_name(
        self,
        table_or_name: TableReference,
        expression: str,
        is_enum: bool = False,
    ) -> str:
        return self._default.check_constraint_name(table_or_name, expression, is_enum)

    def exclusion_constraint_name(
        self, table_or_name: TableReference, expression: str
    ) -> str:
        return self._default.exclusion_constraint_name(table_or_name, expression)

    # -- join names ---------------------------------------------------------

    def join_column_name(self, relation_name: str, referenced_column_name: str) -> str:
        if self.use_readable_case:
            # normalise the joined string, not each half
            return to_snake_case(f"{relation_name}_{referenced_column_name}")
        return self._default.join_column_name(relation_name, referenced_column_name)

    def join_table_name(
        self,
        first_table_name: str,
        second_table_name: str,
        first_property_name: str,
        second_property_name: str,
    ) -> str:
        if self.use_readable_case:
            processed: str = first_property_name.replace(".", "_")
            return to_snake_case(f"{first_table_name}_{processed}_{second_table_name}")
        return self._default.join_table_name(
            first_table_name,
            second_table_name,
            first_property_name,
            second_property_name,
        )

    def join_table_column_name(
        self,
        table_name: str,
        property_name: str,
        column_name: Optional[str] = None,
    ) -> str:
        if self.use_readable_case:
            joined = property_name if column_name is None else column_name
            return to_snake_case(f"{table_name}_{joined}")
        return self._default.join_table_column_name(table_name, property_name, column_name)

    def join_table_inverse_column_name(
        self,
        table_name: str,
        property_name: str,
        column_name: Optional[str] = None,
    ) -> str:
        if self.use_readable_case:
            return self.join_table_column_name(table_name, property_name, column_name)
        return self._default.join_table_inverse_column_name(
            table_name, property_name, column_name
        )

    def join_table_column_duplication_prefix(self, column_name: str, index: int) -> str:
        return self._default.join_table_column_duplication_prefix(column_name, index)

    # -- tree / prefix names ------------------------------------------------

    def closure_junction_table_name(self, original_closure_table_name: str) -> str:
        return self._default.closure_junction_table_name(original_closure_table_name)

    def prefix_table_name(self, prefix: str, table_name: str) -> str:
        return self._default.prefix_table_name(prefix, table_name)

    def __repr__(self) -> str:
        return f"<ReadableNamingStrategy {self._options!r}>"


# ---------------------------------------------------------------------------
# Module-level exports
# ---------------------------------------------------------------------------

__all__: List[str] = ["NamingStrategy", "ReadableNamingStrategy"]

logger.debug("betternaming.strategy loaded.")
