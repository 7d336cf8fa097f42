"""
Payments Module for FoodShare

Mobile-money collection through the IntaSend M-Pesa STK push API.
"""

from foodshare.payments.intasend import IntaSendClient

__all__ = ["IntaSendClient"]
