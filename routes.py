"""API Routes for expenses"""
from fastapi import APIRouter, HTTPException, Depends, Request, Response, status
from fastapi.responses import JSONResponse
from typing import Annotated, Any, List
from models.expense import Expense
from services import expenses_service
from services.expense_store import ExpenseStore
from services.expenses_service import ExpenseValidationError
from error_handlers import method_not_allowed
from utils.json_codec import decode_object, encode_body
import logging

GENERIC_ERROR = "Failed to parse request body or internal error"
EXPENSES_PATH = "/expenses"
ALLOWED_METHODS = "GET, POST"
UNSUPPORTED_METHODS = ["PUT", "PATCH", "DELETE", "HEAD"]


class ExpenseJSONResponse(JSONResponse):
    """JSONResponse rendered through the shared body codec."""

    def render(self, content: Any) -> bytes:
        return encode_body(content)


router = APIRouter(default_response_class=ExpenseJSONResponse)
logger = logging.getLogger(__name__)

# --- Dependency Function ---
def get_expense_store(request: Request) -> ExpenseStore:
    """Dependency to get the expense store attached to the application."""
    store = getattr(request.app.state, "expense_store", None)
    if store is None:
        logger.error("Expense store not found in application state.")
        raise HTTPException(status_code=503, detail="Expense store not available.")
    return store

# Type hint for the dependency
ExpenseStoreDep = Annotated[ExpenseStore, Depends(get_expense_store)]

# --- API Routes ---

@router.get(EXPENSES_PATH, response_model=List[Expense], summary="Get All Expenses", description="Returns every expense record in the order it was added.")
async def get_expenses(store: ExpenseStoreDep) -> List[Expense]:
    logger.info("GET /expenses endpoint called.")
    return expenses_service.get_all_expenses(store)

@router.post(
    EXPENSES_PATH,
    response_model=Expense,
    status_code=status.HTTP_201_CREATED,
    summary="Add Expense",
    description="Validates a JSON expense and appends it to the collection.",
    responses={400: {"description": "Missing field or invalid amount"}, 500: {"description": "Unreadable body or internal error"}},
)
async def add_expense(request: Request, store: ExpenseStoreDep):
    """
    Reads the raw body, validates it and stores the new expense.
    Validation problems come back as 400 with a specific message; anything else,
    including a body that is not a JSON object, collapses into a generic 500.
    """
    logger.info("POST /expenses endpoint called.")
    try:
        payload = decode_object(await request.body())
        expense = expenses_service.create_expense(store, payload)
    except ExpenseValidationError as ve:
        logger.warning(f"Rejected expense: {ve.message}")
        return ExpenseJSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": ve.message})
    except Exception as e:
        logger.exception(f"Error processing POST request: {e}")
        return ExpenseJSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content={"error": GENERIC_ERROR})
    return expense

@router.options(EXPENSES_PATH, include_in_schema=False)
async def expenses_preflight() -> Response:
    """CORS preflight: the middleware adds the headers, the body stays empty."""
    return Response(status_code=status.HTTP_200_OK)

@router.api_route(EXPENSES_PATH, methods=UNSUPPORTED_METHODS, include_in_schema=False)
async def expenses_method_not_allowed(request: Request) -> JSONResponse:
    logger.warning(f"{request.method} /expenses rejected: method not allowed")
    return method_not_allowed(request.method, ALLOWED_METHODS)
