"""Service layer for handling expense-related logic."""
import logging
import math
import re
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Any, Dict, List, Optional

from models.expense import Expense
from services.expense_store import ExpenseStore

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("amount", "description", "category", "date")
AMOUNT_ERROR = "Amount must be a positive number"
TWO_PLACES = Decimal("0.01")

# Leading decimal literal of a string, e.g. "12.5" out of "  12.5 EUR"
_NUMERIC_PREFIX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


class ExpenseValidationError(ValueError):
    """A create request was rejected; the message is safe to return to the caller."""

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


def is_blank(value: Any) -> bool:
    """True for values that count as not provided: null, empty string, zero, NaN and false."""
    if value is None or isinstance(value, bool):
        return not value
    if isinstance(value, (int, float)):
        return value == 0 or math.isnan(value)
    if isinstance(value, str):
        return value == ""
    return False


def parse_amount(value: Any) -> Optional[Decimal]:
    """
    Reads an amount as a decimal number.

    Numbers are taken as they are; strings contribute their leading numeric literal,
    so "12.50abc" reads as 12.50. Returns None when no finite number can be read.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        parsed = Decimal(value)
    elif isinstance(value, float):
        if not math.isfinite(value):
            return None
        parsed = Decimal(repr(value))
    elif isinstance(value, str):
        match = _NUMERIC_PREFIX.match(value)
        if not match:
            return None
        parsed = Decimal(match.group(1))
    else:
        return None

    # Anything a double cannot hold is treated as not a number
    if not math.isfinite(float(parsed)):
        return None
    return parsed


def format_amount(amount: Decimal) -> str:
    """Formats an amount with exactly two fraction digits, rounding half up."""
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, amount.adjusted() + 3)
        return str(amount.quantize(TWO_PLACES, rounding=ROUND_HALF_UP))


def validate_expense_payload(payload: Dict[str, Any]) -> Dict[str, Any]:
    """
    Checks a decoded create request and returns the fields for a new record.

    Required fields are checked in a fixed order and only the first missing one is
    reported. Raises ExpenseValidationError on the first problem found.
    """
    for field in REQUIRED_FIELDS:
        if is_blank(payload.get(field)):
            raise ExpenseValidationError(f"Missing required field: {field}", field=field)

    amount = parse_amount(payload["amount"])
    if amount is None or amount <= 0:
        raise ExpenseValidationError(AMOUNT_ERROR, field="amount")

    try:
        formatted = format_amount(amount)
    except InvalidOperation as e:
        logger.warning(f"Could not format amount {payload['amount']!r}: {e}")
        raise ExpenseValidationError(AMOUNT_ERROR, field="amount") from e

    return {
        "amount": formatted,
        "description": payload["description"],
        "category": payload["category"],
        "date": payload["date"],
    }


def get_all_expenses(store: ExpenseStore) -> List[Expense]:
    """Returns every stored expense in insertion order."""
    expenses = store.list_all()
    logger.info(f"Fetched {len(expenses)} expenses.")
    return expenses


def create_expense(store: ExpenseStore, payload: Dict[str, Any]) -> Expense:
    """Validates the payload and appends a new expense to the store."""
    fields = validate_expense_payload(payload)
    expense = store.add(**fields)
    logger.info(f"Added expense #{expense.id}: {expense.amount} ({expense.category!r})")
    return expense
