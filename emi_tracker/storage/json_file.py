"""JSON export document for a portfolio.

Document shape::

    {"loans": [...], "savings": [...], "lastRefresh": ..., "exportDate": ..., "version": "1.0"}
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any

from emi_tracker.clock import Clock, SystemClock
from emi_tracker.exceptions import ImportFormatError
from emi_tracker.storage.serialization import (
    loan_from_dict,
    parse_optional_date,
    savings_from_dict,
    serialize_value,
    to_dict,
)
from emi_tracker.store.portfolio import PortfolioStore

logger = logging.getLogger(__name__)

EXPORT_VERSION = "1.0"


def export_document(store: PortfolioStore, exported_at: datetime) -> dict[str, Any]:
    """Build the export document for a store."""
    return {
        "loans": [to_dict(loan) for loan in store.get_loans()],
        "savings": [to_dict(account) for account in store.get_savings()],
        "lastRefresh": serialize_value(store.last_refresh),
        "exportDate": exported_at.isoformat(),
        "version": EXPORT_VERSION,
    }


def dumps(store: PortfolioStore, exported_at: datetime, pretty: bool = True) -> str:
    """Serialize a store to export JSON text."""
    document = export_document(store, exported_at)
    if pretty:
        return json.dumps(document, indent=2, ensure_ascii=False)
    return json.dumps(document, ensure_ascii=False)


def loads(text: str, clock: Clock | None = None) -> PortfolioStore:
    """Build a store from export JSON text.

    Raises
    ------
    ImportFormatError
        If the text is not JSON, or ``loans`` or ``savings`` is missing.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as exc:
        raise ImportFormatError("Failed to import data. Please check the file format.") from exc

    if not isinstance(data, dict) or not isinstance(data.get("loans"), list) or not isinstance(data.get("savings"), list):
        raise ImportFormatError("Invalid data format")

    store = PortfolioStore(clock=clock or SystemClock())
    for entry in data["loans"]:
        store.add_loan(loan_from_dict(entry))
    for entry in data["savings"]:
        store.add_savings_account(savings_from_dict(entry))
    store.last_refresh = parse_optional_date(data.get("lastRefresh"), "lastRefresh")

    logger.info(
        "Imported %d loans and %d savings accounts (version %s)",
        len(store.loans),
        len(store.savings),
        data.get("version", "unknown"),
    )
    return store


class JsonFileStore:
    """Persist a portfolio as an export document on disk."""

    def __init__(self, path: str | Path, pretty: bool = True) -> None:
        """Initialize JSON file store.

        Parameters
        ----------
        path : str | Path
            Document location. Parent directories are created on save.
        pretty : bool
            Pretty-print JSON output.
        """
        self.path = Path(path)
        self.pretty = pretty

    def save(self, store: PortfolioStore) -> Path:
        """Write the store and return the file path."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        text = dumps(store, store.clock.now(), pretty=self.pretty)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(text)
        logger.info("Saved portfolio to %s", self.path)
        return self.path

    def load(self, clock: Clock | None = None) -> PortfolioStore:
        """Read the document back, or an empty store when it does not exist."""
        if not self.path.exists():
            logger.info("No portfolio at %s, starting empty", self.path)
            return PortfolioStore(clock=clock or SystemClock())
        with open(self.path, encoding="utf-8") as f:
            return loads(f.read(), clock=clock)
