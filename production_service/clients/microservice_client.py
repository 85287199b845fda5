"""
Microservice Communication Client

Async client for the two sibling services the production service talks to.

Connection Details:
    - Order-domain service: ORDER_SERVICE_URL (default http://localhost:3333)
    - Payment service: PAYMENT_SERVICE_URL (default http://localhost:3334)

Endpoints:
    - GET   {order}/order/{id}                     - Order snapshot
    - GET   {order}/customers/{cpf}                - Customer snapshot
    - GET   {order}/products/{id}                  - Product snapshot
    - PATCH {order}/orders/{id}/status             - Update order status
    - POST  {payment}/orders/{id}/production-status - Notify payment service

Every call is made once. Failures surface as one of three error kinds:
the resource was missing (404), the service answered with a failure, or
the call never completed (DNS, refused connection, timeout).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, TypeVar

import httpx

from production_service.config.settings import get_settings
from production_service.domains.production.application.dto import (
    CustomerSnapshot,
    OrderSnapshot,
    ProductSnapshot,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

ORDER_SERVICE = "orders"
PAYMENT_SERVICE = "payment"

ORDER_SERVICE_COMMUNICATION_ERROR = "Erro de comunicação com microserviço de pedidos"
PAYMENT_SERVICE_COMMUNICATION_ERROR = "Erro de comunicação com microserviço de pagamento"


class MicroserviceError(Exception):
    """
    Base exception for sibling service errors.

    Attributes:
        message: Human-readable error description
        status_code: HTTP status to report to our own caller
        service: Which sibling service failed
    """

    status_code: int = 500

    def __init__(self, message: str, service: str, status_code: int | None = None):
        self.message = message
        self.service = service
        if status_code is not None:
            self.status_code = status_code
        super().__init__(message)


class MicroserviceNotFoundError(MicroserviceError):
    """The sibling service answered 404."""

    status_code = 404


class MicroserviceUpstreamError(MicroserviceError):
    """The sibling service was reached but reported a failure."""

    def __init__(self, message: str, service: str, upstream_status: int | None = None):
        super().__init__(message, service)
        self.upstream_status = upstream_status


class MicroserviceCommunicationError(MicroserviceError):
    """The call did not complete (network error, timeout, unreadable body)."""


class MicroserviceClient:
    """
    Async HTTP client for the order-domain and payment services.

    Owns a single httpx.AsyncClient, created lazily or on ``__aenter__``
    and released by ``aclose``.

    Example:
        async with MicroserviceClient() as client:
            order = await client.get_order_by_id("order-1")
            await client.update_order_status(order.id, "ready")
            await client.notify_payment_service(order.id, "ready")
    """

    def __init__(
        self,
        order_service_url: str | None = None,
        payment_service_url: str | None = None,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize client with settings.

        Args:
            order_service_url: Overrides ORDER_SERVICE_URL
            payment_service_url: Overrides PAYMENT_SERVICE_URL
            timeout: Overrides MICROSERVICE_TIMEOUT (seconds)
            http_client: Pre-built httpx client (tests inject a MockTransport here)
        """
        settings = get_settings()

        self.order_service_url = (order_service_url or settings.ORDER_SERVICE_URL).rstrip("/")
        self.payment_service_url = (payment_service_url or settings.PAYMENT_SERVICE_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else settings.MICROSERVICE_TIMEOUT
        self._client: httpx.AsyncClient | None = http_client

    async def __aenter__(self) -> MicroserviceClient:
        """Enter async context and create HTTP client."""
        self._ensure_client()
        return self

    async def __aexit__(self, *args) -> None:
        """Exit async context and close HTTP client."""
        await self.aclose()

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(
                timeout=self._timeout,
                headers={"Content-Type": "application/json"},
            )
        return self._client

    async def aclose(self) -> None:
        """Close the underlying HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    # Reads

    async def get_order_by_id(self, order_id: str) -> OrderSnapshot:
        """
        Get order from the order-domain service.

        Raises:
            MicroserviceNotFoundError: "Pedido não encontrado"
            MicroserviceUpstreamError: "Erro ao buscar pedido"
            MicroserviceCommunicationError: order service unreachable
        """
        return await self._get_resource(
            url=f"{self.order_service_url}/order/{order_id}",
            resource_key="order",
            not_found_message="Pedido não encontrado",
            error_message="Erro ao buscar pedido",
            parse=OrderSnapshot.from_payload,
        )

    async def get_customer_by_cpf(self, cpf: str) -> CustomerSnapshot:
        """
        Get customer from the order-domain service.

        Raises:
            MicroserviceNotFoundError: "Cliente não encontrado"
            MicroserviceUpstreamError: "Erro ao buscar cliente"
            MicroserviceCommunicationError: order service unreachable
        """
        return await self._get_resource(
            url=f"{self.order_service_url}/customers/{cpf}",
            resource_key="customer",
            not_found_message="Cliente não encontrado",
            error_message="Erro ao buscar cliente",
            parse=CustomerSnapshot.from_payload,
        )

    async def get_product_by_id(self, product_id: str) -> ProductSnapshot:
        """
        Get product from the order-domain service.

        Raises:
            MicroserviceNotFoundError: "Produto não encontrado"
            MicroserviceUpstreamError: "Erro ao buscar produto"
            MicroserviceCommunicationError: order service unreachable
        """
        return await self._get_resource(
            url=f"{self.order_service_url}/products/{product_id}",
            resource_key="product",
            not_found_message="Produto não encontrado",
            error_message="Erro ao buscar produto",
            parse=ProductSnapshot.from_payload,
        )

    # Writes

    async def update_order_status(self, order_id: str, status: str) -> None:
        """
        Record a new status on the order-domain service.

        Raises:
            MicroserviceUpstreamError: "Erro ao atualizar status do pedido"
            MicroserviceCommunicationError: order service unreachable
        """
        url = f"{self.order_service_url}/orders/{order_id}/status"
        logger.info(f"Updating order {order_id} status to '{status}'")

        response = await self._send(
            "PATCH",
            url,
            payload={"status": status},
            service=ORDER_SERVICE,
            communication_message=ORDER_SERVICE_COMMUNICATION_ERROR,
        )

        if not response.is_success:
            logger.error(f"Order service rejected status update for {order_id}: HTTP {response.status_code}")
            raise MicroserviceUpstreamError(
                "Erro ao atualizar status do pedido",
                service=ORDER_SERVICE,
                upstream_status=response.status_code,
            )

    async def notify_payment_service(self, order_id: str, status: str) -> None:
        """
        Tell the payment service about a production status change.

        Raises:
            MicroserviceUpstreamError: "Erro ao notificar microserviço de pagamento"
            MicroserviceCommunicationError: payment service unreachable
        """
        url = f"{self.payment_service_url}/orders/{order_id}/production-status"
        logger.info(f"Notifying payment service: order {order_id} is '{status}'")

        response = await self._send(
            "POST",
            url,
            payload={"orderId": order_id, "status": status},
            service=PAYMENT_SERVICE,
            communication_message=PAYMENT_SERVICE_COMMUNICATION_ERROR,
        )

        if not response.is_success:
            logger.error(f"Payment service rejected notification for {order_id}: HTTP {response.status_code}")
            raise MicroserviceUpstreamError(
                "Erro ao notificar microserviço de pagamento",
                service=PAYMENT_SERVICE,
                upstream_status=response.status_code,
            )

    # Internals

    async def _send(
        self,
        method: str,
        url: str,
        service: str,
        communication_message: str,
        payload: dict[str, Any] | None = None,
    ) -> httpx.Response:
        client = self._ensure_client()
        try:
            return await client.request(method, url, json=payload)
        except httpx.TimeoutException as e:
            logger.error(f"{service} service timeout on {method} {url}: {e}")
            raise MicroserviceCommunicationError(communication_message, service=service) from e
        except httpx.RequestError as e:
            logger.error(f"{service} service connection error on {method} {url}: {e}")
            raise MicroserviceCommunicationError(communication_message, service=service) from e

    async def _get_resource(
        self,
        url: str,
        resource_key: str,
        not_found_message: str,
        error_message: str,
        parse: Callable[[dict[str, Any]], T],
    ) -> T:
        logger.info(f"Fetching {resource_key}: GET {url}")

        response = await self._send(
            "GET",
            url,
            service=ORDER_SERVICE,
            communication_message=ORDER_SERVICE_COMMUNICATION_ERROR,
        )

        if response.status_code == 404:
            raise MicroserviceNotFoundError(not_found_message, service=ORDER_SERVICE)

        if not response.is_success:
            logger.error(f"Order service error fetching {resource_key}: HTTP {response.status_code}")
            raise MicroserviceUpstreamError(
                error_message,
                service=ORDER_SERVICE,
                upstream_status=response.status_code,
            )

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Unreadable {resource_key} payload from {url}: {e}")
            raise MicroserviceCommunicationError(ORDER_SERVICE_COMMUNICATION_ERROR, service=ORDER_SERVICE) from e

        if not isinstance(data, dict):
            raise MicroserviceCommunicationError(ORDER_SERVICE_COMMUNICATION_ERROR, service=ORDER_SERVICE)

        resource = data.get(resource_key, data)
        if not isinstance(resource, dict):
            raise MicroserviceCommunicationError(ORDER_SERVICE_COMMUNICATION_ERROR, service=ORDER_SERVICE)

        try:
            return parse(resource)
        except (TypeError, ValueError) as e:
            logger.error(f"Malformed {resource_key} payload from {url}: {e}")
            raise MicroserviceCommunicationError(ORDER_SERVICE_COMMUNICATION_ERROR, service=ORDER_SERVICE) from e


__all__ = [
    "MicroserviceClient",
    "MicroserviceError",
    "MicroserviceNotFoundError",
    "MicroserviceUpstreamError",
    "MicroserviceCommunicationError",
]
