"""Login route."""
from fastapi import APIRouter

from stock_quote_api.deps import AuthServiceDep
from stock_quote_api.schemas import ApiResponse, LoginData, LoginRequest

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/login", response_model=ApiResponse[LoginData])
def login(payload: LoginRequest, service: AuthServiceDep) -> ApiResponse[LoginData]:
    """Exchange email and password for a bearer token.

    Returns 401 "Invalid credentials" for an unknown email or a wrong password.
    """
    data = service.login(payload.email, payload.password)
    return ApiResponse(message="Login successful", data=data)
