"""Sample loans and savings for demos and manual testing."""

from datetime import date, timedelta
from decimal import Decimal
from typing import Iterator

from dateutil.relativedelta import relativedelta

from emi_tracker.clock import Clock
from emi_tracker.engine.resolver import add_part_payment, create_loan
from emi_tracker.generators.base import BaseGenerator
from emi_tracker.models.enums import SavingsCategory
from emi_tracker.models.loan import Loan
from emi_tracker.models.savings import SavingsAccount
from emi_tracker.store.portfolio import PortfolioStore


class LoanGenerator(BaseGenerator):
    """Generate loans with plausible terms and part-payment history."""

    # Principal range (thousands), annual rate range (%), tenure choices (months)
    LOAN_PROFILES = {
        "Home Loan": ((1500, 8000), (7.5, 9.5), [180, 240, 300]),
        "Car Loan": ((300, 1500), (8.5, 11.0), [36, 48, 60, 84]),
        "Personal Loan": ((50, 1000), (10.5, 16.0), [12, 24, 36, 60]),
        "Education Loan": ((200, 2000), (8.0, 12.0), [60, 84, 120]),
    }

    CUSTOM_EMI_RATE = 0.15
    PART_PAYMENT_RATE = 0.35

    def generate(self, today: date, loan_type: str | None = None) -> Loan:
        """Generate a loan started some time before ``today``.

        Parameters
        ----------
        today : date
            Reference day; the loan starts up to five years earlier.
        loan_type : str | None
            One of ``LOAN_PROFILES``; random when omitted.

        Returns
        -------
        Loan
            New loan, possibly with a custom EMI and part payments.
        """
        loan_type = loan_type or self.random.choice(list(self.LOAN_PROFILES))
        (low, high), (min_rate, max_rate), tenures = self.LOAN_PROFILES[loan_type]

        principal = Decimal(self.random.randint(low, high) * 1000)
        rate = Decimal(str(round(self.random.uniform(min_rate, max_rate), 2)))
        tenure = self.random.choice(tenures)
        start_date = today - timedelta(days=self.random.randint(0, 365 * 5))

        loan = create_loan(
            name=f"{loan_type} - {self.fake.company()}",
            principal_amount=principal,
            interest_rate=rate,
            tenure=tenure,
            start_date=start_date,
            loan_id=self.fake.uuid4(),
        )

        if self.random.random() < self.CUSTOM_EMI_RATE:
            # Round the EMI up to the next thousand, as borrowers often do
            custom = (int(loan.emi_amount) // 1000 + 1) * 1000
            loan = create_loan(
                name=loan.name,
                principal_amount=principal,
                interest_rate=rate,
                tenure=tenure,
                start_date=start_date,
                use_custom_emi=True,
                custom_emi=custom,
                loan_id=loan.loan_id,
            )

        if self.random.random() < self.PART_PAYMENT_RATE:
            loan = self._add_part_payments(loan, today)

        return loan

    def generate_batch(self, count: int, today: date) -> Iterator[Loan]:
        for _ in range(count):
            yield self.generate(today)

    def _add_part_payments(self, loan: Loan, today: date) -> Loan:
        """Apply one to three part payments between start and ``today``."""
        months_elapsed = max(1, (today - loan.start_date).days // 30)
        offsets = sorted(self.random.sample(range(months_elapsed), k=min(months_elapsed, self.random.randint(1, 3))))
        for offset in offsets:
            paid_on = min(today, loan.start_date + relativedelta(months=offset + 1))
            amount = Decimal(self.random.randint(1, 10) * 10000)
            loan = add_part_payment(
                loan,
                amount,
                paid_on,
                paid_on,
                description=self.fake.sentence(nb_words=4),
                payment_id=self.fake.uuid4(),
            )
        return loan


class SavingsGenerator(BaseGenerator):
    """Generate savings accounts across categories."""

    AMOUNT_RANGES = {
        SavingsCategory.EMERGENCY_FUND: (50, 600),
        SavingsCategory.FIXED_DEPOSIT: (100, 2000),
        SavingsCategory.MUTUAL_FUNDS: (25, 1500),
        SavingsCategory.SAVINGS_ACCOUNT: (10, 500),
        SavingsCategory.PPF: (50, 1500),
        SavingsCategory.OTHER: (5, 200),
    }

    def generate(self, today: date, category: SavingsCategory | None = None) -> SavingsAccount:
        """Generate a savings account added within the last three years."""
        category = category or self.random.choice(list(SavingsCategory))
        low, high = self.AMOUNT_RANGES[category]
        date_added = today - timedelta(days=self.random.randint(30, 365 * 3))

        return SavingsAccount(
            account_id=self.fake.uuid4(),
            name=f"{self.fake.company()} {category.value}",
            category=category,
            amount=Decimal(self.random.randint(low, high) * 1000),
            date_added=date_added,
            last_updated=date_added + timedelta(days=self.random.randint(0, (today - date_added).days)),
            description=self.fake.sentence(nb_words=6),
        )


def generate_portfolio(
    clock: Clock,
    num_loans: int = 4,
    num_savings: int = 3,
    seed: int | None = None,
) -> PortfolioStore:
    """Build a store filled with sample loans and savings."""
    today = clock.today()
    store = PortfolioStore(clock=clock)
    for loan in LoanGenerator(seed=seed).generate_batch(num_loans, today):
        store.add_loan(loan)
    savings_gen = SavingsGenerator(seed=seed)
    for _ in range(num_savings):
        store.add_savings_account(savings_gen.generate(today))
    return store
