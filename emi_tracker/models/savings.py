"""Savings models."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from emi_tracker.models.enums import SavingsCategory


@dataclass
class SavingsAccount:
    """Flat value-holding record. Nothing is derived from it but totals."""

    account_id: str
    name: str
    category: SavingsCategory
    amount: Decimal
    date_added: date
    last_updated: date
    description: str = ""
