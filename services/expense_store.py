"""In-memory expense store: an insertion-ordered list plus a monotonic id counter."""
import logging
import threading
from typing import Any, Dict, List, Optional, Sequence

from models.expense import Expense

logger = logging.getLogger(__name__)

# Records every new store starts with.
SEED_EXPENSES: Sequence[Dict[str, Any]] = (
    {"amount": "50.00", "description": "Groceries from local store", "category": "Food", "date": "2023-11-29"},
    {"amount": "15.50", "description": "Coffee and sandwich", "category": "Food", "date": "2023-11-29"},
    {"amount": "300.00", "description": "Monthly rent payment", "category": "Housing", "date": "2023-12-01"},
)


class ExpenseStore:
    """
    Holds the expense collection for the lifetime of the process.

    Ids are handed out from a counter that only moves forward, so an id is never
    reused even if the list were ever rebuilt. Reading the counter and appending
    happen under one lock.
    """

    def __init__(self, seed: Optional[Sequence[Dict[str, Any]]] = SEED_EXPENSES):
        self._lock = threading.Lock()
        self._expenses: List[Expense] = []
        self._next_id = 1
        for fields in seed or ():
            self.add(**fields)
        logger.debug(f"Expense store initialised with {len(self._expenses)} record(s), next id {self._next_id}.")

    @property
    def next_id(self) -> int:
        return self._next_id

    def list_all(self) -> List[Expense]:
        """Returns a snapshot of all expenses in insertion order."""
        with self._lock:
            return list(self._expenses)

    def add(self, amount: str, description: Any, category: Any, date: Any) -> Expense:
        """Assigns the next id, appends the record and returns it."""
        with self._lock:
            expense = Expense(
                id=self._next_id,
                amount=amount,
                description=description,
                category=category,
                date=date,
            )
            self._expenses.append(expense)
            self._next_id += 1
        return expense

    def __len__(self) -> int:
        return len(self._expenses)
