"""Faker-backed sample data generators."""

from emi_tracker.generators.portfolio import LoanGenerator, SavingsGenerator, generate_portfolio

__all__ = ["LoanGenerator", "SavingsGenerator", "generate_portfolio"]
