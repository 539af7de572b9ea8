"""Live loan state and edit rules.

Stored loans are never amortized in place. ``resolve_loan`` walks the stored
``current_principal`` forward to a given day, and the mutating helpers here
return new ``Loan`` records instead of changing the one passed in.
"""

import logging
from dataclasses import replace
from datetime import date
from typing import Any
from uuid import uuid4

from dateutil.relativedelta import relativedelta

from emi_tracker.engine.amortization import forward_apply, size_tenure
from emi_tracker.engine.emi import calculate_emi, monthly_rate
from emi_tracker.engine.money import to_decimal, to_money, to_number
from emi_tracker.engine.schedule import as_date, next_emi_date, payments_due
from emi_tracker.models.calculation import LoanDetails
from emi_tracker.models.loan import InterestRateChange, Loan, LoanEdit, PartPayment

logger = logging.getLogger(__name__)


def selected_emi(loan: Loan) -> float:
    """EMI used for amortization.

    The custom EMI wins when enabled and positive. Otherwise the formula EMI
    of the original principal, rate and tenure, which part payments do not
    change.
    """
    custom = to_number(loan.custom_emi)
    if loan.use_custom_emi and custom > 0:
        return custom
    return calculate_emi(loan.principal_amount, loan.interest_rate, loan.tenure)


def resolve_loan(loan: Loan, today: date) -> LoanDetails:
    """Compute a loan's snapshot as of ``today``.

    Parameters
    ----------
    loan : Loan
        Stored loan record.
    today : date
        Reference day for counting paid EMIs.

    Returns
    -------
    LoanDetails
        Selected EMI, live balance, remaining EMIs and projected interest.
    """
    today = as_date(today)
    tenure = max(0, int(to_number(loan.tenure)))
    emis_paid = payments_due(loan.start_date, today, tenure)
    remaining_emis = max(0, tenure - emis_paid)

    rate = monthly_rate(loan.interest_rate)
    emi = selected_emi(loan)

    current = forward_apply(max(0.0, to_number(loan.current_principal)), emi, rate, emis_paid)
    remaining_principal = current.balance

    future = forward_apply(remaining_principal, emi, rate, remaining_emis)
    total_interest = max(0.0, future.total_interest)

    can_amortize = remaining_principal <= 0 or emi - remaining_principal * rate > 0
    if not can_amortize:
        logger.debug("Loan %s: EMI %.2f does not cover monthly interest", loan.loan_id, emi)

    return LoanDetails(
        emi_amount=max(0.0, emi),
        total_interest=total_interest,
        total_amount=max(0.0, remaining_principal + total_interest),
        remaining_emis=remaining_emis,
        remaining_principal=max(0.0, remaining_principal),
        next_emi_date=next_emi_date(today),
        emis_paid=emis_paid,
        can_amortize=can_amortize,
    )


def create_loan(
    name: str,
    principal_amount: Any,
    interest_rate: Any,
    tenure: int,
    start_date: date,
    use_custom_emi: bool = False,
    custom_emi: Any = None,
    loan_id: str | None = None,
) -> Loan:
    """Build a new loan record with its stored EMI filled in."""
    calculated = calculate_emi(principal_amount, interest_rate, tenure)
    custom = to_number(custom_emi)
    emi = custom if use_custom_emi and custom > 0 else calculated
    principal = to_money(principal_amount)

    return Loan(
        loan_id=loan_id or str(uuid4()),
        name=name,
        principal_amount=principal,
        current_principal=principal,
        interest_rate=to_decimal(interest_rate),
        emi_amount=to_decimal(emi),
        start_date=start_date,
        tenure=max(0, int(to_number(tenure))),
        next_emi_date=start_date + relativedelta(months=1),
        use_custom_emi=bool(use_custom_emi),
        custom_emi=to_decimal(custom or emi) if use_custom_emi else None,
    )


def add_part_payment(
    loan: Loan,
    amount: Any,
    payment_date: date,
    today: date,
    description: str | None = None,
    payment_id: str | None = None,
) -> Loan:
    """Apply an extra principal payment.

    After the payment the resolved balance as of ``today`` is the live
    balance minus ``amount``, floored at 0. ``current_principal`` stays
    anchored at origination, so it is lowered by the value of ``amount``
    discounted over the EMIs already due; the resolver walks those EMIs
    forward again and lands on the reduced live balance.

    Parameters
    ----------
    loan : Loan
        Loan to pay down.
    amount : Any
        Extra principal paid. Non-positive amounts are ignored.
    payment_date : date
        Date recorded on the payment.
    today : date
        Day the live balance is taken on.
    description : str | None
        Defaults to "Part payment of <amount>".
    payment_id : str | None
        Defaults to a new UUID.

    Returns
    -------
    Loan
        New record with the payment appended, or ``loan`` itself when the
        amount is ignored.
    """
    paid = to_number(amount)
    if paid <= 0:
        logger.warning("Ignoring non-positive part payment %r on loan %s", amount, loan.loan_id)
        return loan

    today = as_date(today)
    tenure = max(0, int(to_number(loan.tenure)))
    rate = monthly_rate(loan.interest_rate)
    baseline = max(0.0, to_number(loan.current_principal))
    live = forward_apply(baseline, selected_emi(loan), rate, payments_due(loan.start_date, today, tenure))

    if paid >= live.balance:
        reduction = baseline
    elif live.stuck:
        # A stuck walk never moves off the baseline
        reduction = paid
    else:
        reduction = paid / (1 + rate) ** live.months_applied

    reduction = min(to_money(reduction), to_money(baseline))
    payment = PartPayment(
        payment_id=payment_id or str(uuid4()),
        amount=to_money(paid),
        payment_date=payment_date,
        description=description or f"Part payment of {paid:,.0f}",
        principal_reduction=reduction,
    )
    return replace(
        loan,
        current_principal=to_money(to_money(baseline) - reduction),
        part_payments=[*loan.part_payments, payment],
    )


def remove_last_part_payment(loan: Loan) -> Loan:
    """Undo the most recently added part payment.

    Adds the payment's ``principal_reduction`` (its ``amount`` for records
    without one) back to ``current_principal``, capped at the principal.
    """
    if not loan.part_payments:
        logger.debug("Loan %s has no part payments to undo", loan.loan_id)
        return loan

    last = loan.part_payments[-1]
    reduction = last.amount if last.principal_reduction is None else last.principal_reduction
    restored = min(
        to_money(loan.current_principal) + to_money(reduction),
        to_money(loan.principal_amount),
    )
    return replace(
        loan,
        current_principal=to_money(restored),
        part_payments=loan.part_payments[:-1],
    )


def _changed(edited: Any, stored: Any) -> bool:
    return edited is not None and to_number(edited) != to_number(stored)


def reconcile(old: Loan, edits: LoanEdit, today: date) -> Loan:
    """Merge an edit into a loan and re-derive EMI and tenure.

    Rules, in order of precedence:

    1. A changed principal without an explicit outstanding resets the
       outstanding to the new principal.
    2. In custom-EMI mode the custom value is used, falling back to the
       EMI field when the custom value is missing.
    3. Outside custom mode an edited EMI is used as is; otherwise a rate or
       tenure change (or no stored EMI with a positive tenure) recomputes
       the formula EMI on the outstanding.
    4. With nothing resolved the previously stored EMI is kept, so an
       edit that touches no term leaves the EMI alone.
    5. An explicit EMI edit overrides everything above.
    6. The tenure is re-sized from outstanding, EMI and rate; when it
       cannot be sized the previous tenure is kept.

    Parameters
    ----------
    old : Loan
        Loan before the edit.
    edits : LoanEdit
        Fields the user changed.
    today : date
        Effective date recorded for a rate change.

    Returns
    -------
    Loan
        New record; ``old`` is not modified.
    """
    principal = old.principal_amount if edits.principal_amount is None else edits.principal_amount
    rate = old.interest_rate if edits.interest_rate is None else edits.interest_rate
    tenure = old.tenure if edits.tenure is None else max(0, int(to_number(edits.tenure)))
    use_custom = old.use_custom_emi if edits.use_custom_emi is None else edits.use_custom_emi
    custom = to_number(old.custom_emi if edits.custom_emi is None else edits.custom_emi)

    principal_edited = _changed(edits.principal_amount, old.principal_amount)
    rate_edited = _changed(edits.interest_rate, old.interest_rate)
    tenure_edited = _changed(edits.tenure, old.tenure)
    emi_edited = _changed(edits.emi_amount, old.emi_amount)

    if edits.current_principal is not None:
        outstanding = to_number(edits.current_principal)
    elif principal_edited:
        outstanding = to_number(principal)
    else:
        outstanding = to_number(old.current_principal)
    outstanding = max(0.0, min(outstanding, to_number(principal)))

    emi_field = to_number(edits.emi_amount if emi_edited else old.emi_amount)

    selected = 0.0
    if use_custom:
        if custom > 0:
            selected = custom
        elif emi_field > 0:
            selected = emi_field
    elif emi_edited:
        selected = to_number(edits.emi_amount)
    elif rate_edited or tenure_edited or (emi_field <= 0 and tenure > 0):
        selected = calculate_emi(outstanding, rate, tenure)

    if selected <= 0 and to_number(old.emi_amount) > 0:
        selected = to_number(old.emi_amount)

    if emi_edited:
        override = custom if use_custom else to_number(edits.emi_amount)
        if override > 0:
            selected = override

    sizing = size_tenure(outstanding, selected, rate)
    if sizing.months > 0:
        tenure = sizing.months
    else:
        logger.debug("Loan %s: tenure kept at %d (%s)", old.loan_id, tenure, sizing.status.value)

    rate_changes = list(old.interest_rate_changes)
    if rate_edited:
        rate_changes.append(
            InterestRateChange(
                change_id=str(uuid4()),
                old_rate=old.interest_rate,
                new_rate=to_decimal(rate),
                effective_date=as_date(today),
            )
        )

    start_date = old.start_date if edits.start_date is None else edits.start_date

    return replace(
        old,
        name=old.name if edits.name is None else edits.name,
        principal_amount=to_money(principal),
        current_principal=to_money(outstanding),
        interest_rate=to_decimal(rate),
        tenure=tenure,
        emi_amount=to_decimal(selected) if selected > 0 else old.emi_amount,
        use_custom_emi=bool(use_custom),
        custom_emi=to_decimal(custom or selected) if use_custom else None,
        start_date=start_date,
        next_emi_date=start_date + relativedelta(months=1),
        is_active=old.is_active if edits.is_active is None else edits.is_active,
        interest_rate_changes=rate_changes,
    )
