"""Strongly typed identifiers for property management entities.

Identifiers are assigned by the store (BIGINT identity columns), so they are
plain integers wrapped in NewType to keep entity IDs from being mixed up.
"""

from typing import NewType

ApartmentId = NewType("ApartmentId", int)
DepositId = NewType("DepositId", int)
AgreementId = NewType("AgreementId", int)
