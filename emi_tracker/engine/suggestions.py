"""Rule-based repayment suggestions."""

from datetime import date

from emi_tracker.config import AdvisorConfig
from emi_tracker.engine.money import to_number
from emi_tracker.engine.resolver import resolve_loan
from emi_tracker.engine.what_if import part_payment_savings
from emi_tracker.models.calculation import LoanAnalysis, Suggestion
from emi_tracker.models.enums import Priority, RateEfficiency, SuggestionType
from emi_tracker.models.loan import Loan


def _by_rate_desc(loans: list[Loan]) -> list[Loan]:
    # Stable: ties keep portfolio order
    return sorted(loans, key=lambda loan: to_number(loan.interest_rate), reverse=True)


def generate_suggestions(
    loans: list[Loan],
    today: date,
    config: AdvisorConfig | None = None,
) -> list[Suggestion]:
    """Build the suggestion list for a portfolio.

    Rules are evaluated in a fixed order and each has a fixed priority:

    1. Part payment on the highest-rate loan when it has more than a year
       of EMIs left, with the savings of a reference payment.
    2. A single "focus on short-term high-rate loans" hint when any loan is
       close to the end and above the rate threshold.
    3. An emergency-fund reminder.

    Returns an empty list when no loan is active.
    """
    config = config or AdvisorConfig()
    active = [loan for loan in loans if loan.is_active]
    if not active:
        return []

    suggestions: list[Suggestion] = []

    highest = _by_rate_desc(active)[0]
    details = resolve_loan(highest, today)
    if details.remaining_emis > config.part_payment_min_remaining_emis:
        rate = to_number(highest.interest_rate)
        suggestions.append(
            Suggestion(
                suggestion_id=f"part-payment-{highest.loan_id}",
                suggestion_type=SuggestionType.PART_PAYMENT,
                title=f"Consider Part Payment for {highest.name}",
                description=(
                    f"Making a part payment on your highest interest loan ({rate:g}% p.a.) "
                    "can save significant interest."
                ),
                priority=Priority.HIGH,
                potential_savings=part_payment_savings(highest, config.reference_part_payment, today),
                loan_id=highest.loan_id,
            )
        )

    threshold = to_number(config.high_rate_threshold)
    short_term_high_rate = any(
        resolve_loan(loan, today).remaining_emis <= config.short_term_emis
        and to_number(loan.interest_rate) > threshold
        for loan in active
    )
    if short_term_high_rate:
        suggestions.append(
            Suggestion(
                suggestion_id="focus-short-term",
                suggestion_type=SuggestionType.GENERAL,
                title="Focus on Short-term High-rate Loans",
                description=(
                    "Consider paying off loans with less than 2 years remaining "
                    "and high interest rates first."
                ),
                priority=Priority.MEDIUM,
            )
        )

    suggestions.append(
        Suggestion(
            suggestion_id="emergency-fund",
            suggestion_type=SuggestionType.SAVINGS,
            title="Maintain Emergency Fund",
            description="Ensure you have 6-12 months of expenses saved before aggressive debt repayment.",
            priority=Priority.HIGH,
        )
    )

    return suggestions


def rate_efficiency(annual_rate: float) -> RateEfficiency:
    if annual_rate > 10:
        return RateEfficiency.POOR
    elif annual_rate > 7:
        return RateEfficiency.AVERAGE
    else:
        return RateEfficiency.GOOD


def rate_recommendation(annual_rate: float) -> str:
    if annual_rate > 12:
        return "Consider prepayment or refinancing"
    elif annual_rate > 8:
        return "Monitor for rate reduction opportunities"
    else:
        return "Maintain current strategy"


def analyze_loans(
    loans: list[Loan],
    today: date,
    config: AdvisorConfig | None = None,
) -> list[LoanAnalysis]:
    """Per-loan breakdown of active loans, highest rate first."""
    config = config or AdvisorConfig()
    analyses = []
    for loan in _by_rate_desc([loan for loan in loans if loan.is_active]):
        rate = to_number(loan.interest_rate)
        analyses.append(
            LoanAnalysis(
                loan=loan,
                details=resolve_loan(loan, today),
                part_payment_savings=part_payment_savings(loan, config.analysis_part_payment, today),
                efficiency=rate_efficiency(rate),
                recommendation=rate_recommendation(rate),
            )
        )
    return analyses
