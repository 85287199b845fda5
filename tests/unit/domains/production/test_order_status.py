"""
Unit tests for the Status and PaymentStatus value objects.
"""

import pytest

from production_service.core.domain import ValidationException
from production_service.domains.production.domain.value_objects import (
    VALID_PAYMENT_STATUS,
    VALID_STATUS,
    PaymentStatus,
    Status,
)


class TestStatus:
    """Test cases for Status"""

    @pytest.mark.parametrize("literal", ["Recebido", "Preparação", "Pronto", "Finalizado"])
    def test_create_accepts_canonical_literals(self, literal):
        status = Status.create(literal)
        assert status.get_value() == literal
        assert str(status) == literal

    @pytest.mark.parametrize(
        "alias,expected",
        [
            ("Received", Status.RECEIVED),
            ("InPreparation", Status.IN_PREPARATION),
            ("in_preparation", Status.IN_PREPARATION),
            ("preparing", Status.IN_PREPARATION),
            ("Preparacao", Status.IN_PREPARATION),
            ("READY", Status.READY),
            ("  pronto ", Status.READY),
            ("finished", Status.FINALIZED),
        ],
    )
    def test_create_normalizes_aliases(self, alias, expected):
        assert Status.create(alias) is expected

    def test_create_rejects_unknown_literal(self):
        with pytest.raises(ValidationException) as exc_info:
            Status.create("Cancelado")

        assert exc_info.value.message == "Invalid status: Cancelado"
        assert exc_info.value.details["valid_values"] == list(VALID_STATUS)

    def test_create_returns_member_unchanged(self):
        assert Status.create(Status.READY) is Status.READY

    def test_forward_path(self):
        assert Status.RECEIVED.next_stage() is Status.IN_PREPARATION
        assert Status.IN_PREPARATION.next_stage() is Status.READY
        assert Status.READY.next_stage() is Status.FINALIZED
        assert Status.FINALIZED.next_stage() is None
        assert Status.FINALIZED.is_terminal()

    def test_equals_compares_by_value(self):
        assert Status.create("Pronto").equals(Status.READY)
        assert not Status.READY.equals(Status.FINALIZED)
        assert not Status.READY.equals("Pronto")


class TestPaymentStatus:
    """Test cases for PaymentStatus"""

    def test_valid_vocabulary(self):
        assert VALID_PAYMENT_STATUS == ("Aprovado", "Recusado", "Pendente")

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Aprovado", PaymentStatus.APPROVED),
            ("approved", PaymentStatus.APPROVED),
            ("Rejected", PaymentStatus.REJECTED),
            ("Rejeitado", PaymentStatus.REJECTED),
            ("pending", PaymentStatus.PENDING),
        ],
    )
    def test_create(self, raw, expected):
        assert PaymentStatus.create(raw) is expected

    def test_create_rejects_unknown_literal(self):
        with pytest.raises(ValidationException, match="Invalid payment status: Estornado"):
            PaymentStatus.create("Estornado")

    def test_is_approved(self):
        assert PaymentStatus.APPROVED.is_approved()
        assert not PaymentStatus.PENDING.is_approved()
