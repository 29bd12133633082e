# File: betternaming/default.py
"""
betternaming - Default Naming Strategy
=======================================
The stock naming algorithm of the host mapping layer: class names become
snake_case tables, property names are used verbatim for columns, and every
constraint or index gets a prefix followed by a truncated SHA-1 of its table
and column names.

:class:`~betternaming.strategy.ReadableNamingStrategy` falls back to an
instance of this class whenever one of its flags is switched off, so the
output here must stay byte-for-byte stable: changing it renames constraints
in every existing database.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from betternaming.models import (
    NestedSetColumnNames,
    TableReference,
    resolve_table_name,
)
from betternaming.utils import sha1_hex, to_camel_case, to_snake_case, to_title_case

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("betternaming.default")

# Hex digits kept from the SHA-1 digest, per constraint family.
_LONG_HASH: int = 27
_SHORT_HASH: int = 26


class DefaultNamingStrategy:
    """Hash-based constraint names and camelCase join columns."""

    nested_set_column_names: NestedSetColumnNames = NestedSetColumnNames()
    materialized_path_column_name: str = "mpath"

    # -- helpers ------------------------------------------------------------

    @staticmethod
    def _table_key(table_or_name: TableReference) -> str:
        """Bare table name with the first ``.`` flattened to ``_``."""
        if isinstance(table_or_name, str):
            name: str = table_or_name.split(".")[-1]
        else:
            name = resolve_table_name(table_or_name)
        return name.replace(".", "_", 1)

    def _columns_key(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
    ) -> str:
        # sorted so ["id", "name"] and ["name", "id"] hash alike
        return f"{self._table_key(table_or_name)}_{'_'.join(sorted(column_names))}"

    # -- entity names -------------------------------------------------------

    def table_name(self, class_name: str, custom_name: Optional[str] = None) -> str:
        return custom_name if custom_name else to_snake_case(class_name)

    def column_name(
        self,
        property_name: str,
        custom_name: Optional[str],
        embedded_prefixes: Sequence[str],
    ) -> str:
        name: str = custom_name if custom_name else property_name
        if embedded_prefixes:
            return to_camel_case("_".join(embedded_prefixes)) + to_title_case(name)
        return name

    def relation_name(self, property_name: str) -> str:
        return property_name

    # -- constraint names ---------------------------------------------------

    def primary_key_name(
        self, table_or_name: TableReference, column_names: Sequence[str]
    ) -> str:
        key: str = self._columns_key(table_or_name, column_names)
        return "PK_" + sha1_hex(key)[:_LONG_HASH]

    def unique_constraint_name(
        self, table_or_name: TableReference, column_names: Sequence[str]
    ) -> str:
        key: str = self._columns_key(table_or_name, column_names)
        return "UQ_" + sha1_hex(key)[:_LONG_HASH]

    def relation_constraint_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        where: Optional[str] = None,
    ) -> str:
        key: str = self._columns_key(table_or_name, column_names)
        if where:
            key += f"_{where}"
        return "REL_" + sha1_hex(key)[:_SHORT_HASH]

    def default_constraint_name(
        self, table_or_name: TableReference, column_name: str
    ) -> str:
        key: str = f"{self._table_key(table_or_name)}_{column_name}"
        return "DF_" + sha1_hex(key)[:_LONG_HASH]

    def foreign_key_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        referenced_table_path: Optional[str] = None,
        referenced_column_names: Optional[Sequence[str]] = None,
    ) -> str:
        key: str = self._columns_key(table_or_name, column_names)
        return "FK_" + sha1_hex(key)[:_LONG_HASH]

    def index_name(
        self,
        table_or_name: TableReference,
        column_names: Sequence[str],
        where: Optional[str] = None,
    ) -> str:
        key: str = self._columns_key(table_or_name, column_names)
        if where:
            key += f"_{where}"
        return "IDX_" + sha1_hex(key)[:_SHORT_HASH]

    def check_constraint_name(
        self,
        table_or_name: TableReference,
        expression: str,
        is_enum: bool = False,
    ) -> str:
        key: str = f"{self._table_key(table_or_name)}_{expression}"
        name: str = "CHK_" + sha1_hex(key)[:_SHORT_HASH]
        return f"{name}_ENUM" if is_enum else name

    def exclusion_constraint_name(
        self, table_or_name: TableReference, expression: str
    ) -> str:
        key: str = f"{self._table_key(table_or_name)}_{expression}"
        return "XCL_" + sha1_hex(key)[:_SHORT_HASH]

    # -- join names ---------------------------------------------------------

    def join_column_name(self, relation_name: str, referenced_column_name: str) -> str:
        return to_camel_case(f"{relation_name}_{referenced_column_name}")

    def join_table_name(
        self,
        first_table_name: str,
        second_table_name: str,
        first_property_name: str,
        second_property_name: str,
    ) -> str:
        processed: str = first_property_name.replace(".", "_")
        return to_snake_case(f"{first_table_name}_{processed}_{second_table_name}")

    def join_table_column_duplication_prefix(self, column_name: str, index: int) -> str:
        return f"{column_name}_{index}"

    def join_table_column_name(
        self,
        table_name: str,
        property_name: str,
        column_name: Optional[str] = None,
    ) -> str:
        return to_camel_case(f"{table_name}_{column_name if column_name else property_name}")

    def join_table_inverse_column_name(
        self,
        table_name: str,
        property_name: str,
        column_name: Optional[str] = None,
    ) -> str:
        return self.join_table_column_name(table_name, property_name, column_name)

    # -- tree / prefix names ------------------------------------------------

    def closure_junction_table_name(self, original_closure_table_name: str) -> str:
        return f"{original_closure_table_name}_closure"

    def prefix_table_name(self, prefix: str, table_name: str) -> str:
        return prefix + table_name

    def __repr__(self) -> str:
        return f"<{type(self).__name__}>"


__all__: List[str] = ["DefaultNamingStrategy"]

logger.debug("betternaming.default loaded.")
