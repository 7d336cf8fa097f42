"""
Payment API Routes

Initiates M-Pesa STK push collections.
"""

from fastapi import APIRouter, Depends

from foodshare.api.dependencies import get_payment_client
from foodshare.api.schemas import ErrorResponse, PaymentRequest, PaymentResponse
from foodshare.payments.intasend import IntaSendClient

router = APIRouter(tags=["payments"])


@router.post(
    "/pay",
    response_model=PaymentResponse,
    responses={500: {"model": ErrorResponse, "description": "Gateway error"}},
)
async def pay(
    payment: PaymentRequest,
    client: IntaSendClient = Depends(get_payment_client),
):
    """
    Ask the payment gateway to push a charge to ``phone``.

    Gateway errors surface as 500 with ``success: false`` and the
    gateway's message.
    """
    response = await client.charge(payment.amount, payment.phone)
    return PaymentResponse(success=True, response=response)
