# File: betternaming/__init__.py
"""
betternaming - Readable Naming Strategy for SQLAlchemy
=======================================================

Turns class and attribute identifiers into readable database names::

    UserProfile.createdAt      ->  user_profile.created_at
    primary key (id)           ->  PK_user_profile_id
    FK on organization_id      ->  FK_user_organization_id

Architecture overview::

    ┌────────────────────────┐  flag off  ┌───────────────────────┐
    │ ReadableNamingStrategy │───────────▶│ DefaultNamingStrategy │
    │     (strategy.py)      │            │      (default.py)     │
    └───────────┬────────────┘            └───────────┬───────────┘
                │                                     │
                ▼                                     ▼
    ┌────────────────────────┐            ┌───────────────────────┐
    │  NamingOptions, refs   │            │   case / hash utils   │
    │      (models.py)       │            │       (utils.py)      │
    └────────────────────────┘            └───────────────────────┘
                ▲
                │
    ┌────────────────────────┐
    │   SQLAlchemy binding   │
    │    (integration.py)    │
    └────────────────────────┘

Usage::

    from betternaming import ReadableNamingStrategy
    from betternaming.integration import declarative_base

    Base = declarative_base(ReadableNamingStrategy())

Public API:
    - ReadableNamingStrategy - the naming convention engine
    - DefaultNamingStrategy  - hash-based fallback
    - NamingOptions          - the two feature flags
    - resolve_table_name     - table-reference helper
"""

from __future__ import annotations

__version__: str = "1.0.0"
__license__: str = "MIT"

from betternaming.models import (
    HasName,
    NamingOptions,
    NestedSetColumnNames,
    TableRef,
    TableReference,
    resolve_table_name,
)
from betternaming.utils import sha1_hex, to_camel_case, to_snake_case, to_title_case
from betternaming.default import DefaultNamingStrategy
from betternaming.strategy import NamingStrategy, ReadableNamingStrategy

# ---------------------------------------------------------------------------
# Public API surface
# ---------------------------------------------------------------------------

__all__: list[str] = [
    # Version info
    "__version__",
    "__license__",
    # Strategies
    "NamingStrategy",
    "ReadableNamingStrategy",
    "DefaultNamingStrategy",
    # Models
    "NamingOptions",
    "HasName",
    "TableRef",
    "TableReference",
    "NestedSetColumnNames",
    "resolve_table_name",
    # Utilities
    "to_snake_case",
    "to_camel_case",
    "to_title_case",
    "sha1_hex",
]
