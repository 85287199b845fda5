"""
Unit tests for the Order aggregate and its order lines.
"""

import pytest

from production_service.core.domain import (
    InvalidOperationException,
    PaymentNotApprovedException,
    ValidationException,
)
from production_service.domains.production.domain.entities import Order, OrderProduct, OrderProductList
from production_service.domains.production.domain.value_objects import PaymentStatus, Status


class TestOrderCreation:
    """Test cases for Order.create"""

    def test_new_order_has_unset_statuses(self):
        order = Order.create(customer_id="123", product_ids=["p1", "p2"])

        assert order.status is None
        assert order.payment_status is None
        assert order.status_value == ""
        assert order.payment_status_value == ""
        assert [line.product_id for line in order.product_lines()] == ["p1", "p2"]
        assert all(line.order_id == order.id for line in order.product_lines())

    def test_create_keeps_given_id(self):
        order = Order.create(customer_id="123", id="order-42")
        assert order.id == "order-42"
        assert len(order.products) == 0

    def test_orders_are_equal_by_id(self):
        assert Order.create(customer_id="a", id="x") == Order.create(customer_id="b", id="x")


class TestAdvanceStatus:
    """Test cases for the guarded forward transition"""

    def test_advance_requires_approved_payment(self, make_order):
        order = make_order(status=Status.RECEIVED, payment_status=PaymentStatus.PENDING)

        with pytest.raises(PaymentNotApprovedException):
            order.advance_status()

        assert order.status is Status.RECEIVED

    def test_advance_without_any_payment_status(self, make_order):
        order = make_order(status=Status.RECEIVED)

        with pytest.raises(PaymentNotApprovedException):
            order.advance_status()

    def test_full_forward_path(self, make_order):
        order = make_order(status=Status.RECEIVED, payment_status=PaymentStatus.APPROVED)

        assert order.advance_status() is Status.IN_PREPARATION
        assert order.advance_status() is Status.READY
        assert order.advance_status() is Status.FINALIZED
        assert order.updated_at is not None

    def test_unset_status_advances_to_preparation(self, make_order):
        order = make_order(payment_status=PaymentStatus.APPROVED)

        order.advance_status()

        assert order.status is Status.IN_PREPARATION

    def test_finalized_order_cannot_advance(self, make_order):
        order = make_order(status=Status.FINALIZED, payment_status=PaymentStatus.APPROVED)

        with pytest.raises(InvalidOperationException):
            order.advance_status()

        assert order.status is Status.FINALIZED


class TestDirectSetters:
    """Test cases for the unchecked setters"""

    def test_set_status_skips_forward_path_check(self, make_order):
        order = make_order(status=Status.RECEIVED)

        order.set_status("Pronto")

        assert order.status is Status.READY

    def test_set_status_rejects_unknown_literal(self, make_order):
        order = make_order()

        with pytest.raises(ValidationException):
            order.set_status("Cancelado")

    def test_set_payment_status_accepts_alias(self, make_order):
        order = make_order()

        order.set_payment_status("approved")

        assert order.payment_status is PaymentStatus.APPROVED
        assert order.is_paid()

    def test_finalize_from_any_stage(self, make_order):
        order = make_order()

        order.finalize()

        assert order.status is Status.FINALIZED


class TestOrderProductList:
    """Test cases for the watched list of order lines"""

    def test_order_product_requires_ids(self):
        with pytest.raises(ValidationException):
            OrderProduct.create(order_id="", product_id="p1")

    def test_tracks_new_and_removed_items(self):
        kept = OrderProduct.create(order_id="o1", product_id="p1")
        dropped = OrderProduct.create(order_id="o1", product_id="p2")
        products = OrderProductList([kept, dropped])

        added = OrderProduct.create(order_id="o1", product_id="p3")
        products.update([added, kept])

        assert products.get_items() == [added, kept]
        assert products.get_new_items() == [added]
        assert products.get_removed_items() == [dropped]

    def test_removing_a_new_item_is_not_reported(self):
        products = OrderProductList()
        line = OrderProduct.create(order_id="o1", product_id="p1")

        products.add(line)
        products.remove(line)

        assert products.get_new_items() == []
        assert products.get_removed_items() == []
        assert len(products) == 0

    def test_replace_products_on_order(self, make_order):
        order = make_order(product_ids=["p1"])

        order.replace_products(["p2", "p3"])

        assert [line.product_id for line in order.product_lines()] == ["p2", "p3"]

    def test_to_dict_shape(self, make_order):
        order = make_order(status=Status.READY, payment_status=PaymentStatus.APPROVED)

        data = order.to_dict()

        assert data["customerId"] == order.customer_id
        assert data["status"] == "Pronto"
        assert data["paymentStatus"] == "Aprovado"
        assert data["products"][0]["productId"] == "prod-1"
