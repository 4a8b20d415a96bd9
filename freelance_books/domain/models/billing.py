"""Billing terms of a contract, one variant per pricing model."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Union

from freelance_books.domain.constants import (
    CONTRACT_TYPE_FIXED_PRICE,
    CONTRACT_TYPE_HOURLY,
    CONTRACT_TYPE_RETAINER,
)
from freelance_books.domain.errors import UnknownBillingType
from freelance_books.domain.models.records import ContractRow


@dataclass(frozen=True)
class HourlyTerms:
    """Rate multiplied by tracked billable hours."""

    rate: Decimal | None


@dataclass(frozen=True)
class RetainerTerms:
    """Fixed recurring monthly fee."""

    monthly_fee: Decimal | None


@dataclass(frozen=True)
class FixedPriceTerms:
    """One-time fee spread over the contract duration."""

    total: Decimal | None
    start_date: date
    end_date: date | None


BillingTerms = Union[HourlyTerms, RetainerTerms, FixedPriceTerms]


def billing_terms_for(contract: ContractRow) -> BillingTerms:
    """Build the billing terms variant matching a contract row.

    Args:
        contract: Contract row from the repository.

    Returns:
        BillingTerms: Variant carrying only the fields its model uses.

    Raises:
        UnknownBillingType: If the contract type is not recognized.
    """
    contract_type = (contract.contract_type or "").strip().lower()
    if contract_type == CONTRACT_TYPE_HOURLY:
        return HourlyTerms(rate=contract.hourly_rate)
    if contract_type == CONTRACT_TYPE_RETAINER:
        return RetainerTerms(monthly_fee=contract.fixed_price)
    if contract_type == CONTRACT_TYPE_FIXED_PRICE:
        return FixedPriceTerms(
            total=contract.fixed_price,
            start_date=contract.start_date,
            end_date=contract.end_date,
        )
    raise UnknownBillingType(contract.contract_type)


__all__ = [
    "HourlyTerms",
    "RetainerTerms",
    "FixedPriceTerms",
    "BillingTerms",
    "billing_terms_for",
]
