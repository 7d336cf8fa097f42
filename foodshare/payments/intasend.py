"""
IntaSend Payment Client

Requests an M-Pesa STK push (a payment prompt on the payer's phone)
through the IntaSend collection API.

Rate limits: none documented for STK push; each call creates a new
charge request, so callers must not retry blindly.
"""

from typing import Any, Optional, Union

import httpx
from loguru import logger

from foodshare.exceptions import PaymentError


class IntaSendClient:
    """
    Client for the IntaSend collection API.

    Authenticates with the secret (private) key as a bearer token and
    sends the publishable (public) key in the payload.
    """

    LIVE_URL = "https://payment.intasend.com/api/v1"
    SANDBOX_URL = "https://sandbox.intasend.com/api/v1"
    STK_PUSH_PATH = "/payment/mpesa-stk-push/"

    def __init__(
        self,
        public_key: Optional[str],
        private_key: Optional[str],
        test_mode: bool = False,
        currency: str = "KES",
        timeout: float = 30.0,
    ):
        """
        Initialize client.

        Args:
            public_key: IntaSend publishable key.
            private_key: IntaSend secret key.
            test_mode: Use the sandbox instead of the live API.
            currency: Currency for every charge.
            timeout: HTTP timeout in seconds.
        """
        self.public_key = public_key
        self.private_key = private_key
        self.test_mode = test_mode
        self.currency = currency
        self.timeout = timeout
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def base_url(self) -> str:
        return self.SANDBOX_URL if self.test_mode else self.LIVE_URL

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                timeout=self.timeout,
            )
        return self._client

    def _headers(self) -> dict:
        return {
            "Authorization": f"Bearer {self.private_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        """Pull the most useful message out of an error response."""
        try:
            data = response.json()
        except ValueError:
            return response.text or f"HTTP {response.status_code}"

        if isinstance(data, dict):
            for key in ("detail", "message", "error", "errors"):
                if data.get(key):
                    return str(data[key])
        return str(data)

    async def charge(
        self,
        amount: Union[int, float, str],
        phone: str,
    ) -> Any:
        """
        Request an M-Pesa STK push for ``amount`` to ``phone``.

        No idempotency key is sent and nothing is recorded locally.

        Returns:
            Provider response body.

        Raises:
            PaymentError: If the request fails or the gateway rejects it.
        """
        client = await self._get_client()

        payload = {
            "public_key": self.public_key,
            "amount": amount,
            "phone_number": phone,
            "currency": self.currency,
        }

        try:
            response = await client.post(
                self.STK_PUSH_PATH,
                json=payload,
                headers=self._headers(),
            )
        except httpx.HTTPError as e:
            logger.error(f"Payment request failed: {e}")
            raise PaymentError(str(e) or type(e).__name__) from e

        if response.status_code >= 400:
            message = self._error_message(response)
            logger.error(f"Payment rejected ({response.status_code}): {message}")
            raise PaymentError(message)

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Payment gateway returned non-JSON body: {response.text[:200]}")
            raise PaymentError("Invalid response from payment gateway") from e

        logger.info(f"Payment response: {data}")
        return data

    async def aclose(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
