# inventory_sdk/client.py
import asyncio
import json
import logging
from decimal import Decimal
from typing import List, Optional

import httpx
from pydantic import BaseModel, ValidationError

from inventory_api.models import Product, ProductListResponse

from . import config

logger = logging.getLogger(__name__)


class RequestCancelled(Exception):
    """The caller's cancel signal fired before the response arrived."""


class FetchResult(BaseModel):
    """Outcome of one catalog fetch: products on success, a message otherwise."""

    success: bool
    products: Optional[List[Product]] = None
    error_message: Optional[str] = None

    @classmethod
    def ok(cls, products: List[Product]) -> "FetchResult":
        return cls(success=True, products=list(products))

    @classmethod
    def error(cls, message: str) -> "FetchResult":
        return cls(success=False, error_message=message)


def _describe(exc: Exception) -> str:
    if isinstance(exc, ValidationError):
        return "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}" for err in exc.errors()
        )
    return str(exc) or type(exc).__name__


class CatalogClient:
    def __init__(
        self,
        base_url: str = config.BASE_URL,
        timeout: float = config.REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    @property
    def product_list_url(self) -> str:
        return config.product_list_url(self.base_url)

    async def fetch_products(self, cancel: Optional[asyncio.Event] = None) -> FetchResult:
        """GET the product list and classify every failure into a user-facing message.

        ``cancel`` is an optional event; setting it aborts the in-flight request
        and reports it the same way as a timeout. Never raises.
        """
        try:
            response = await asyncio.wait_for(self._get(cancel), timeout=self.timeout)

            if not response.is_success:
                return self._fail(config.SERVER_ERROR_TEMPLATE.format(response.status_code, response.reason_phrase))

            body = response.text
            if not body or not body.strip():
                return self._fail(config.EMPTY_RESPONSE_ERROR)

            envelope = self._decode(body)
            if envelope is None or envelope.data is None:
                return self._fail(config.PARSE_ERROR)

            return FetchResult.ok(envelope.data)
        except (asyncio.TimeoutError, httpx.TimeoutException, RequestCancelled):
            return self._fail(config.TIMEOUT_ERROR_TEMPLATE.format(f"{self.timeout:g}"))
        except httpx.TransportError as e:
            return self._fail(f"{config.NETWORK_ERROR_PREFIX}{_describe(e)}{config.NETWORK_ERROR_SUFFIX}")
        except (json.JSONDecodeError, ValidationError) as e:
            return self._fail(f"{config.JSON_ERROR_PREFIX}{_describe(e)}")
        except Exception as e:
            return self._fail(f"{config.UNEXPECTED_ERROR_PREFIX}{_describe(e)}")

    async def _get(self, cancel: Optional[asyncio.Event]) -> httpx.Response:
        if cancel is not None and cancel.is_set():
            raise RequestCancelled()

        headers = {"Accept": "application/json"}
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            if cancel is None:
                return await client.get(self.product_list_url, headers=headers)

            request = asyncio.ensure_future(client.get(self.product_list_url, headers=headers))
            cancelled = asyncio.ensure_future(cancel.wait())
            try:
                done, _ = await asyncio.wait({request, cancelled}, return_when=asyncio.FIRST_COMPLETED)
            finally:
                cancelled.cancel()
                if not request.done():
                    request.cancel()
                    await asyncio.wait({request})

            if request in done:
                return request.result()
            raise RequestCancelled()

    @staticmethod
    def _decode(body: str) -> Optional[ProductListResponse]:
        # Decimal keeps prices exact
        payload = json.loads(body, parse_float=Decimal)
        if payload is None:
            return None
        return ProductListResponse.model_validate(payload)

    @staticmethod
    def _fail(message: str) -> FetchResult:
        logger.warning("product fetch failed: %s", message)
        return FetchResult.error(message)
