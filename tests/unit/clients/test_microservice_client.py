"""
Unit tests for MicroserviceClient.

HTTP is served by httpx.MockTransport handlers; nothing leaves the process.
"""

import json

import httpx
import pytest

from production_service.clients.microservice_client import (
    MicroserviceClient,
    MicroserviceCommunicationError,
    MicroserviceNotFoundError,
    MicroserviceUpstreamError,
)

ORDER_URL = "http://orders.test"
PAYMENT_URL = "http://payment.test"


def make_client(handler) -> MicroserviceClient:
    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return MicroserviceClient(
        order_service_url=ORDER_URL + "/",
        payment_service_url=PAYMENT_URL,
        http_client=http_client,
    )


class TestReads:
    """Test cases for the GET endpoints"""

    @pytest.mark.asyncio
    async def test_get_order_unwraps_envelope(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.method == "GET"
            assert str(request.url) == f"{ORDER_URL}/order/order-1"
            return httpx.Response(
                200,
                json={"order": {"id": "order-1", "customerId": "123", "status": "Recebido"}},
            )

        async with make_client(handler) as client:
            order = await client.get_order_by_id("order-1")

        assert order.id == "order-1"
        assert order.customer_id == "123"
        assert order.status == "Recebido"

    @pytest.mark.asyncio
    async def test_get_customer_without_envelope(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/customers/123.456.789-09"
            return httpx.Response(
                200,
                json={"id": "c1", "name": "Maria", "email": "maria@example.com", "cpf": "123.456.789-09"},
            )

        async with make_client(handler) as client:
            customer = await client.get_customer_by_cpf("123.456.789-09")

        assert customer.name == "Maria"
        assert customer.cpf == "123.456.789-09"

    @pytest.mark.asyncio
    async def test_get_product_with_category_object(self):
        def handler(request: httpx.Request) -> httpx.Response:
            assert request.url.path == "/products/p1"
            return httpx.Response(
                200,
                json={
                    "product": {
                        "id": "p1",
                        "name": "Suco",
                        "description": "Laranja",
                        "price": "7.50",
                        "category": {"value": "Bebidas"},
                    }
                },
            )

        async with make_client(handler) as client:
            product = await client.get_product_by_id("p1")

        assert product.category == "Bebidas"
        assert product.price == 7.5

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,arg,message",
        [
            ("get_order_by_id", "o1", "Pedido não encontrado"),
            ("get_customer_by_cpf", "c1", "Cliente não encontrado"),
            ("get_product_by_id", "p1", "Produto não encontrado"),
        ],
    )
    async def test_404_maps_to_not_found(self, method, arg, message):
        async with make_client(lambda request: httpx.Response(404)) as client:
            with pytest.raises(MicroserviceNotFoundError) as exc_info:
                await getattr(client, method)(arg)

        assert exc_info.value.message == message
        assert exc_info.value.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "method,message",
        [
            ("get_order_by_id", "Erro ao buscar pedido"),
            ("get_customer_by_cpf", "Erro ao buscar cliente"),
            ("get_product_by_id", "Erro ao buscar produto"),
        ],
    )
    async def test_other_failures_map_to_upstream_error(self, method, message):
        async with make_client(lambda request: httpx.Response(502)) as client:
            with pytest.raises(MicroserviceUpstreamError) as exc_info:
                await getattr(client, method)("x")

        assert exc_info.value.message == message
        assert exc_info.value.upstream_status == 502
        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_unreadable_body(self):
        async with make_client(lambda request: httpx.Response(200, content=b"not json")) as client:
            with pytest.raises(MicroserviceCommunicationError):
                await client.get_order_by_id("o1")

    @pytest.mark.asyncio
    async def test_non_numeric_price_is_communication_error(self):
        payload = {"product": {"id": "p1", "name": "Suco", "price": "abc", "category": "Bebidas"}}

        async with make_client(lambda request: httpx.Response(200, json=payload)) as client:
            with pytest.raises(MicroserviceCommunicationError) as exc_info:
                await client.get_product_by_id("p1")

        assert exc_info.value.message == "Erro de comunicação com microserviço de pedidos"
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestWrites:
    """Test cases for the status update and payment notification"""

    @pytest.mark.asyncio
    async def test_update_order_status(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, str(request.url), json.loads(request.content)))
            return httpx.Response(200, json={"ok": True})

        async with make_client(handler) as client:
            await client.update_order_status("o1", "ready")

        assert seen == [("PATCH", f"{ORDER_URL}/orders/o1/status", {"status": "ready"})]

    @pytest.mark.asyncio
    async def test_notify_payment_service(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append((request.method, str(request.url), json.loads(request.content)))
            return httpx.Response(204)

        async with make_client(handler) as client:
            await client.notify_payment_service("o1", "preparing")

        assert seen == [
            ("POST", f"{PAYMENT_URL}/orders/o1/production-status", {"orderId": "o1", "status": "preparing"})
        ]

    @pytest.mark.asyncio
    async def test_update_rejected(self):
        async with make_client(lambda request: httpx.Response(404)) as client:
            with pytest.raises(MicroserviceUpstreamError, match="Erro ao atualizar status do pedido"):
                await client.update_order_status("o1", "ready")

    @pytest.mark.asyncio
    async def test_notification_rejected(self):
        async with make_client(lambda request: httpx.Response(500)) as client:
            with pytest.raises(MicroserviceUpstreamError, match="Erro ao notificar microserviço de pagamento"):
                await client.notify_payment_service("o1", "ready")


class TestCommunicationFailures:
    """Network errors never reach the caller as httpx exceptions"""

    @pytest.mark.asyncio
    async def test_connection_refused_on_order_service(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        async with make_client(handler) as client:
            with pytest.raises(MicroserviceCommunicationError) as exc_info:
                await client.get_order_by_id("o1")

        assert exc_info.value.message == "Erro de comunicação com microserviço de pedidos"
        assert exc_info.value.service == "orders"

    @pytest.mark.asyncio
    async def test_timeout_on_payment_service(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        async with make_client(handler) as client:
            with pytest.raises(MicroserviceCommunicationError) as exc_info:
                await client.notify_payment_service("o1", "ready")

        assert exc_info.value.message == "Erro de comunicação com microserviço de pagamento"
        assert exc_info.value.service == "payment"

    @pytest.mark.asyncio
    async def test_base_urls_come_from_settings(self, monkeypatch):
        monkeypatch.setenv("ORDER_SERVICE_URL", "http://orders.internal:3333/")
        monkeypatch.setenv("PAYMENT_SERVICE_URL", "http://payment.internal:3334")

        client = MicroserviceClient()

        assert client.order_service_url == "http://orders.internal:3333"
        assert client.payment_service_url == "http://payment.internal:3334"
        await client.aclose()
