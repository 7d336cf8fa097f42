"""
API Routes for FoodShare

Route modules:
- auth: Signup and login
- recipients: Recipient registration and listing
- foods: Food listing
- payments: M-Pesa collection
- matching: AI food-to-recipient matching
"""

from foodshare.api.routes.auth import router as auth_router
from foodshare.api.routes.recipients import router as recipients_router
from foodshare.api.routes.foods import router as foods_router
from foodshare.api.routes.payments import router as payments_router
from foodshare.api.routes.matching import router as matching_router

__all__ = [
    "auth_router",
    "recipients_router",
    "foods_router",
    "payments_router",
    "matching_router",
]
