# File: betternaming/integration.py
"""
betternaming - SQLAlchemy Binding
==================================
Plugs a naming strategy into SQLAlchemy 2.0 so the names it computes are the
names emitted in DDL.

- :func:`naming_convention` builds a ``MetaData.naming_convention`` mapping
  whose ``pk``/``uq``/``ix``/``fk``/``ck`` templates call the strategy through
  callable tokens.
- :func:`declarative_base` returns a ``DeclarativeBase`` subclass that also
  derives ``__tablename__`` and unnamed column names from the strategy.
- :func:`join_column` and :func:`association_table` name foreign-key columns
  and many-to-many junction tables.

Usage::

    from betternaming import ReadableNamingStrategy
    from betternaming.integration import declarative_base

    Base = declarative_base(ReadableNamingStrategy())

    class UserProfile(Base):                               # user_profile
        id: Mapped[int] = mapped_column(primary_key=True)  # PK_user_profile_id
        createdAt: Mapped[datetime] = mapped_column()      # created_at
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional, Type

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    ForeignKeyConstraint,
    Index,
    MetaData,
    Table,
)
from sqlalchemy.orm import DeclarativeBase, MappedColumn, declared_attr, mapped_column

from betternaming.strategy import NamingStrategy, ReadableNamingStrategy

# ---------------------------------------------------------------------------
# Logger
# ---------------------------------------------------------------------------
logger: logging.Logger = logging.getLogger("betternaming.integration")

# Dialect options that carry a partial-index predicate.
_WHERE_OPTIONS: tuple[str, ...] = ("postgresql_where", "sqlite_where")


# ---------------------------------------------------------------------------
# Constraint introspection
# ---------------------------------------------------------------------------


def _constraint_column_names(constraint: Any) -> List[str]:
    """Local column names of a constraint or index, in declaration order."""
    if isinstance(constraint, ForeignKeyConstraint):
        return [fk.parent.name for fk in constraint.elements]
    return [col.name for col in constraint.columns]


def _index_predicate(index: Index) -> Optional[str]:
    for option in _WHERE_OPTIONS:
        clause = index.dialect_kwargs.get(option)
        if clause is not None:
            return str(clause)
    return None


# ---------------------------------------------------------------------------
# MetaData naming convention
# ---------------------------------------------------------------------------


def naming_convention(strategy: NamingStrategy) -> Dict[str, Any]:
    """
    Build a ``naming_convention`` mapping backed by *strategy*.

    Each constraint family gets a callable token (``readable_pk_name`` and so
    on) and a template that consists of that token alone, so SQLAlchemy uses
    the strategy's answer verbatim.
    """

    def _pk(constraint: Any, table: Table) -> str:
        return strategy.primary_key_name(table, _constraint_column_names(constraint))

    def _uq(constraint: Any, table: Table) -> str:
        return strategy.unique_constraint_name(table, _constraint_column_names(constraint))

    def _ix(index: Index, table: Table) -> str:
        return strategy.index_name(
            table, _constraint_column_names(index), _index_predicate(index)
        )

    def _fk(constraint: ForeignKeyConstraint, table: Table) -> str:
        targets: List[str] = [fk.target_fullname for fk in constraint.elements]
        referenced_path: Optional[str] = (
            targets[0].rsplit(".", 1)[0] if targets else None
        )
        return strategy.foreign_key_name(
            table,
            _constraint_column_names(constraint),
            referenced_path,
            [target.rsplit(".", 1)[-1] for target in targets],
        )

    def _ck(constraint: CheckConstraint, table: Table) -> str:
        return strategy.check_constraint_name(table, str(constraint.sqltext))

    tokens: Dict[str, Callable[..., str]] = {
        "readable_pk_name": _pk,
        "readable_uq_name": _uq,
        "readable_ix_name": _ix,
        "readable_fk_name": _fk,
        "readable_ck_name": _ck,
    }
    return {
        **tokens,
        "pk": "%(readable_pk_name)s",
        "uq": "%(readable_uq_name)s",
        "ix": "%(readable_ix_name)s",
        "fk": "%(readable_fk_name)s",
        "ck": "%(readable_ck_name)s",
    }


def readable_metadata(
    strategy: Optional[NamingStrategy] = None, **kwargs: Any
) -> MetaData:
    """Return a ``MetaData`` whose constraints are named by *strategy*."""
    if strategy is None:
        strategy = ReadableNamingStrategy()
    logger.debug("Creating MetaData with naming strategy %r", strategy)
    return MetaData(naming_convention=naming_convention(strategy), **kwargs)


# ---------------------------------------------------------------------------
# Declarative base
# ---------------------------------------------------------------------------


def _apply_column_names(cls: type, strategy: NamingStrategy) -> None:
    """
    Give every unnamed ``Column``/``mapped_column()`` declared directly on
    *cls* its strategy column name. The attribute key is left alone.

    Annotation-only attributes (``x: Mapped[int]`` with no assignment) and
    columns inherited from mixins keep SQLAlchemy's default naming.
    """
    for key, value in list(vars(cls).items()):
        column = value.column if isinstance(value, MappedColumn) else value
        if isinstance(column, Column) and column.name is None:
            column.name = strategy.column_name(key, "", [])


def declarative_base(strategy: Optional[NamingStrategy] = None) -> Type[DeclarativeBase]:
    """
    Create a declarative base class wired to *strategy*.

    Mapped subclasses get ``__tablename__ = strategy.table_name(ClassName, "")``
    unless they set one themselves, and share a ``MetaData`` built by
    :func:`readable_metadata`.
    """
    if strategy is None:
        strategy = ReadableNamingStrategy()
    _metadata: MetaData = readable_metadata(strategy)

    class ReadableBase(DeclarativeBase):
        __naming_strategy__ = strategy
        metadata = _metadata

        @declared_attr.directive
        def __tablename__(cls) -> str:
            return cls.__naming_strategy__.table_name(cls.__name__, "")

        def __init_subclass__(cls, **kw: Any) -> None:
            _apply_column_names(cls, cls.__naming_strategy__)
            super().__init_subclass__(**kw)

    logger.debug("Created declarative base for %r", strategy)
    return ReadableBase


# ---------------------------------------------------------------------------
# Relation helpers
# ---------------------------------------------------------------------------


def join_column(
    relation_name: str,
    target: str,
    strategy: Optional[NamingStrategy] = None,
    **kwargs: Any,
) -> MappedColumn[Any]:
    """
    ``mapped_column()`` for the owning side of a many-to-one relation.

    *target* is the referenced ``"table.column"``; the column is named
    ``strategy.join_column_name(relation_name, column)``.
    """
    if strategy is None:
        strategy = ReadableNamingStrategy()
    referenced_column: str = target.rsplit(".", 1)[-1]
    name: str = strategy.join_column_name(relation_name, referenced_column)
    return mapped_column(name, ForeignKey(target), **kwargs)


def association_table(
    metadata: MetaData,
    first: Table,
    second: Table,
    first_property_name: str,
    second_property_name: str = "",
    strategy: Optional[NamingStrategy] = None,
) -> Table:
    """
    Build the junction table of a many-to-many relation from *first* to *second*.

    One column per primary-key column of each side, all of them part of the
    junction's primary key. When both sides produce the same column name
    (self-referential relations) the owning side's columns are suffixed
    ``_1`` and the inverse side's ``_2``.
    """
    if strategy is None:
        strategy = ReadableNamingStrategy()

    name: str = strategy.join_table_name(
        first.name, second.name, first_property_name, second_property_name
    )
    owning: List[List[Any]] = [
        [strategy.join_table_column_name(first.name, pk.key, pk.name), pk]
        for pk in first.primary_key.columns
    ]
    inverse: List[List[Any]] = [
        [strategy.join_table_inverse_column_name(second.name, pk.key, pk.name), pk]
        for pk in second.primary_key.columns
    ]

    for own in owning:
        for inv in inverse:
            if own[0] == inv[0]:
                clash: str = own[0]
                own[0] = strategy.join_table_column_duplication_prefix(clash, 1)
                inv[0] = strategy.join_table_column_duplication_prefix(clash, 2)

    columns: List[Column[Any]] = [
        Column(col_name, pk.type, ForeignKey(pk), primary_key=True)
        for col_name, pk in owning + inverse
    ]
    logger.debug(
        "Association table %s: %s",
        name,
        ", ".join(col.name for col in columns),
    )
    return Table(name, metadata, *columns)


# ---------------------------------------------------------------------------
# Module-level exports
# ---------------------------------------------------------------------------

__all__: List[str] = [
    "naming_convention",
    "readable_metadata",
    "declarative_base",
    "join_column",
    "association_table",
]

logger.debug("betternaming.integration loaded.")
