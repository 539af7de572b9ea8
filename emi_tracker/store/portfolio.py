"""In-memory loan and savings portfolio.

Loans keep the order the user gave them. Every loan mutation goes through
the engine so stored records stay consistent with the amortization rules.
"""

import logging
from dataclasses import dataclass, field, replace
from datetime import date
from typing import Any

from emi_tracker.clock import Clock, SystemClock
from emi_tracker.config import AdvisorConfig
from emi_tracker.engine.portfolio import build_summary
from emi_tracker.engine.resolver import add_part_payment, reconcile, remove_last_part_payment
from emi_tracker.engine.schedule import should_auto_refresh
from emi_tracker.exceptions import LoanNotFoundError, SavingsAccountNotFoundError
from emi_tracker.models.calculation import PortfolioSummary
from emi_tracker.models.loan import Loan, LoanEdit
from emi_tracker.models.savings import SavingsAccount

logger = logging.getLogger(__name__)


@dataclass
class PortfolioStore:
    """Single-user collection of loans and savings accounts."""

    loans: dict[str, Loan] = field(default_factory=dict)
    savings: dict[str, SavingsAccount] = field(default_factory=dict)
    last_refresh: date | None = None
    clock: Clock = field(default_factory=SystemClock)

    # Loan operations
    def add_loan(self, loan: Loan) -> None:
        """Add a loan at the end of the portfolio."""
        self.loans[loan.loan_id] = loan
        logger.info("Added loan %s (%s)", loan.loan_id, loan.name, extra={"loan_id": loan.loan_id})

    def get_loan(self, loan_id: str) -> Loan:
        """Get a loan by id."""
        if loan_id not in self.loans:
            raise LoanNotFoundError(f"Loan {loan_id} not found")
        return self.loans[loan_id]

    def update_loan(self, loan_id: str, edits: LoanEdit) -> Loan:
        """Apply a partial edit and re-derive EMI and tenure."""
        loan = reconcile(self.get_loan(loan_id), edits, self.clock.today())
        self.loans[loan_id] = loan
        logger.info(
            "Updated loan %s: EMI %s, tenure %d",
            loan_id,
            loan.emi_amount,
            loan.tenure,
            extra={"loan_id": loan_id},
        )
        return loan

    def delete_loan(self, loan_id: str) -> None:
        """Remove a loan."""
        self.get_loan(loan_id)
        del self.loans[loan_id]
        logger.info("Deleted loan %s", loan_id, extra={"loan_id": loan_id})

    def reorder_loans(self, from_id: str, to_id: str) -> None:
        """Move ``from_id`` to the position currently held by ``to_id``."""
        self.get_loan(from_id)
        self.get_loan(to_id)
        order = list(self.loans)
        order.remove(from_id)
        order.insert(list(self.loans).index(to_id), from_id)
        self.loans = {loan_id: self.loans[loan_id] for loan_id in order}

    def add_part_payment(
        self,
        loan_id: str,
        amount: Any,
        payment_date: date | None = None,
        description: str | None = None,
    ) -> Loan:
        """Record a part payment against the loan's live balance."""
        today = self.clock.today()
        loan = add_part_payment(
            self.get_loan(loan_id),
            amount,
            payment_date or today,
            today,
            description=description,
        )
        self.loans[loan_id] = loan
        logger.info(
            "Loan %s: outstanding now %s", loan_id, loan.current_principal, extra={"loan_id": loan_id}
        )
        return loan

    def remove_last_part_payment(self, loan_id: str) -> Loan:
        """Undo the most recent part payment of a loan."""
        loan = remove_last_part_payment(self.get_loan(loan_id))
        self.loans[loan_id] = loan
        return loan

    def get_loans(self) -> list[Loan]:
        return list(self.loans.values())

    # Savings operations
    def add_savings_account(self, account: SavingsAccount) -> None:
        """Add a savings account."""
        self.savings[account.account_id] = account
        logger.info(
            "Added savings account %s (%s)",
            account.account_id,
            account.name,
            extra={"account_id": account.account_id},
        )

    def get_savings_account(self, account_id: str) -> SavingsAccount:
        """Get a savings account by id."""
        if account_id not in self.savings:
            raise SavingsAccountNotFoundError(f"Savings account {account_id} not found")
        return self.savings[account_id]

    def update_savings_account(self, account_id: str, **changes: Any) -> SavingsAccount:
        """Replace fields of a savings account and stamp ``last_updated``."""
        changes.setdefault("last_updated", self.clock.today())
        account = replace(self.get_savings_account(account_id), **changes)
        self.savings[account_id] = account
        return account

    def delete_savings_account(self, account_id: str) -> None:
        """Remove a savings account."""
        self.get_savings_account(account_id)
        del self.savings[account_id]

    def get_savings(self) -> list[SavingsAccount]:
        return list(self.savings.values())

    # Dashboard
    def refresh_if_due(self) -> bool:
        """Stamp ``last_refresh`` when a new billing month has started."""
        today = self.clock.today()
        if should_auto_refresh(self.last_refresh, today):
            self.last_refresh = today
            logger.info("Dashboard refreshed for %s", today.isoformat())
            return True
        return False

    def dashboard(self, config: AdvisorConfig | None = None) -> PortfolioSummary:
        """Current dashboard figures."""
        return build_summary(self.get_loans(), self.get_savings(), self.clock.today(), config)

    def clear(self) -> None:
        """Drop all loans, savings and the refresh stamp."""
        self.loans.clear()
        self.savings.clear()
        self.last_refresh = None

    def summary(self) -> dict[str, int]:
        """Return summary counts of all entities."""
        return {
            "loans": len(self.loans),
            "active_loans": sum(1 for loan in self.loans.values() if loan.is_active),
            "part_payments": sum(len(loan.part_payments) for loan in self.loans.values()),
            "savings_accounts": len(self.savings),
        }
