"""
Core GM1 primitives.

- InstrumentCategory: The 16 GM1 melodic families plus the
  percussion and unknown sentinels
- classify: Program number -> category
- category_name: Category -> display name
"""

from chuk_mcp_gm1.core.category import (
    INVALID_CATEGORY_NAME,
    InstrumentCategory,
    category_name,
    classify,
)

__all__ = [
    "INVALID_CATEGORY_NAME",
    "InstrumentCategory",
    "category_name",
    "classify",
]
