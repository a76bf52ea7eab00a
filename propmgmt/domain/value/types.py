"""Domain value types."""

from enum import Enum


class RelationFilter(str, Enum):
    """Filter tokens accepted by entity listings."""

    AGREEMENT_IS_NULL = "agreement-is-null"
