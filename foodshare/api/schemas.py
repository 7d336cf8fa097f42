"""
API Schemas for FoodShare

Pydantic models for request validation and response serialization:
- Auth models
- Recipient and food models
- Payment models
- Matching models
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, NonNegativeFloat, NonNegativeInt


# =============================================================================
# Common
# =============================================================================

class MessageResponse(BaseModel):
    """Plain confirmation message."""

    message: str


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    code: Optional[str] = None
    detail: Optional[str] = None
    timestamp: Optional[str] = None


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    version: str
    components: dict[str, str] = Field(default_factory=dict)


# =============================================================================
# Auth Schemas
# =============================================================================

class SignupRequest(BaseModel):
    """User registration request."""

    username: str
    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "username": "amina",
                "email": "amina@example.com",
                "password": "s3cret-pass",
            }
        }
    )


class LoginRequest(BaseModel):
    """Login request. Email is the login key."""

    email: str
    password: str


# =============================================================================
# Recipient Schemas
# =============================================================================

class RecipientCreate(BaseModel):
    """
    Recipient registration request.

    Fields are optional at the schema level so a missing field is reported
    with the service's own 400 message instead of a schema error.
    """

    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    capacity: Optional[Union[NonNegativeInt, NonNegativeFloat]] = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Kibera Community Kitchen",
                "email": "kitchen@example.org",
                "phone": "254712345678",
                "address": "Kibera, Nairobi",
            }
        }
    )


class RecipientResponse(BaseModel):
    """Recipient row."""

    id: int
    name: str
    email: str
    phone: str
    address: str
    capacity: Optional[Union[int, float]] = None

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# Food Schemas
# =============================================================================

class FoodResponse(BaseModel):
    """Food row."""

    id: int
    name: str
    quantity: Optional[Union[int, float]] = None
    urgency: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


# =============================================================================
# Payment Schemas
# =============================================================================

class PaymentRequest(BaseModel):
    """M-Pesa STK push request."""

    amount: Union[int, float, str]
    phone: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"amount": 100, "phone": "254712345678"}
        }
    )


class PaymentResponse(BaseModel):
    """Successful payment initiation."""

    success: bool = True
    response: Any = None


# =============================================================================
# Matching Schemas
# =============================================================================

class MatchedFoodResponse(BaseModel):
    """Food summary inside a match."""

    name: str
    quantity: Optional[Union[int, float]] = None
    urgency: Optional[str] = None

    model_config = ConfigDict(from_attributes=True)


class MatchResponse(BaseModel):
    """Best recipient for one food item."""

    recipient: str
    score: int
    food: MatchedFoodResponse

    model_config = ConfigDict(from_attributes=True)
