"""Personal loan and savings tracker with an EMI amortization engine."""

__version__ = "0.1.0"
