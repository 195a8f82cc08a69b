"""Pydantic model for Expense data"""
from pydantic import BaseModel, ConfigDict, JsonValue

class Expense(BaseModel):
    """
    Represents a single expense record held by the in-memory store.

    `amount` is kept as text with exactly two fraction digits. The remaining
    caller-supplied fields are stored exactly as they arrived in the request body.
    """
    model_config = ConfigDict(frozen=True, from_attributes=True)

    id: int
    amount: str
    description: JsonValue
    category: JsonValue
    date: JsonValue
