"""In-memory store for a user's portfolio."""

from emi_tracker.store.portfolio import PortfolioStore

__all__ = ["PortfolioStore"]
