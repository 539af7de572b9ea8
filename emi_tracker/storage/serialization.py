"""Conversion between records and the export document's JSON shapes.

Keys are camelCase and ids are exported as ``id`` so documents written by
earlier versions of the tracker load unchanged.
"""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from dateutil.parser import isoparse

from emi_tracker.engine.money import to_decimal, to_money, to_number
from emi_tracker.exceptions import ImportFormatError
from emi_tracker.models.enums import SavingsCategory
from emi_tracker.models.loan import InterestRateChange, Loan, PartPayment
from emi_tracker.models.savings import SavingsAccount

FIELD_ALIASES = {
    "loan_id": "id",
    "payment_id": "id",
    "change_id": "id",
    "account_id": "id",
    "payment_date": "date",
}


def camel_case(name: str) -> str:
    """Convert a snake_case field name to camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part.capitalize() for part in rest)


def export_key(name: str) -> str:
    return FIELD_ALIASES.get(name, camel_case(name))


def to_dict(obj: Any) -> dict:
    """Convert a record to its export dictionary."""
    if is_dataclass(obj):
        return {export_key(f.name): serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return obj
    else:
        return {"value": str(obj)}


def serialize_value(value: Any) -> Any:
    """Serialize a value for JSON output."""
    if isinstance(value, Decimal):
        return float(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, (datetime, date)):
        return value.isoformat()
    elif is_dataclass(value):
        return to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [serialize_value(v) for v in value]
    return value


def parse_date(value: Any, field_name: str) -> date:
    """Revive an ISO date or timestamp string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return isoparse(str(value)).date()
    except (TypeError, ValueError) as exc:
        raise ImportFormatError(f"Invalid date for {field_name}: {value!r}") from exc


def parse_optional_date(value: Any, field_name: str) -> date | None:
    if value in (None, ""):
        return None
    return parse_date(value, field_name)


def part_payment_from_dict(data: dict) -> PartPayment:
    reduction = data.get("principalReduction")
    return PartPayment(
        payment_id=str(data.get("id", "")),
        amount=to_money(data.get("amount")),
        payment_date=parse_date(data.get("date"), "partPayments.date"),
        description=data.get("description") or "",
        principal_reduction=to_money(reduction) if reduction is not None else None,
    )


def rate_change_from_dict(data: dict) -> InterestRateChange:
    return InterestRateChange(
        change_id=str(data.get("id", "")),
        old_rate=to_decimal(data.get("oldRate")),
        new_rate=to_decimal(data.get("newRate")),
        effective_date=parse_date(data.get("effectiveDate"), "interestRateChanges.effectiveDate"),
        reason=data.get("reason") or "",
    )


def loan_from_dict(data: dict) -> Loan:
    """Revive a loan from an export document entry.

    Numbers that cannot be read become 0; dates must be ISO strings.
    """
    if not isinstance(data, dict):
        raise ImportFormatError(f"Loan entry must be an object, got {type(data).__name__}")

    use_custom = bool(data.get("useCustomEmi", False))
    custom = data.get("customEmi")
    return Loan(
        loan_id=str(data.get("id", "")),
        name=data.get("name") or "",
        principal_amount=to_money(data.get("principalAmount")),
        current_principal=to_money(data.get("currentPrincipal")),
        interest_rate=to_decimal(data.get("interestRate")),
        emi_amount=to_decimal(data.get("emiAmount")),
        start_date=parse_date(data.get("startDate"), "startDate"),
        tenure=int(to_number(data.get("tenure"))),
        next_emi_date=parse_optional_date(data.get("nextEmiDate"), "nextEmiDate"),
        last_emi_date=parse_optional_date(data.get("lastEmiDate"), "lastEmiDate"),
        is_active=bool(data.get("isActive", True)),
        part_payments=[part_payment_from_dict(pp) for pp in data.get("partPayments") or []],
        interest_rate_changes=[
            rate_change_from_dict(change) for change in data.get("interestRateChanges") or []
        ],
        use_custom_emi=use_custom,
        custom_emi=to_decimal(custom) if custom is not None else None,
    )


def savings_from_dict(data: dict) -> SavingsAccount:
    """Revive a savings account from an export document entry."""
    if not isinstance(data, dict):
        raise ImportFormatError(f"Savings entry must be an object, got {type(data).__name__}")

    try:
        category = SavingsCategory(data.get("category", SavingsCategory.OTHER.value))
    except ValueError:
        category = SavingsCategory.OTHER

    return SavingsAccount(
        account_id=str(data.get("id", "")),
        name=data.get("name") or "",
        category=category,
        amount=to_money(data.get("amount")),
        date_added=parse_date(data.get("dateAdded"), "dateAdded"),
        last_updated=parse_date(data.get("lastUpdated"), "lastUpdated"),
        description=data.get("description") or "",
    )
