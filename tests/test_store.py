"""Partial updates and isolation of the transaction store."""

import pytest

from paydesk.services.transaction_form.models import TransactionRecord
from paydesk.services.transaction_form.store import TransactionStore, apply_update


def test_new_store_starts_empty():
    store = TransactionStore()

    assert store.record == TransactionRecord()
    assert store.record.to_payload() == {
        "selectedPaymentType": "",
        "amount": "",
        "receiver": "",
        "transactionId": "",
        "upiId": "",
    }


def test_apply_update_returns_new_record_and_keeps_other_fields():
    before = TransactionRecord(receiver="Alice", amount="10")

    after = apply_update(before, {"amount": "20"})

    assert before.amount == "10"
    assert after.amount == "20"
    assert after.receiver == "Alice"


def test_update_accepts_wire_and_python_names():
    store = TransactionStore()

    store.update({"selectedPaymentType": "upi", "upi_id": "a@b.com"})

    assert store.record.selected_payment_type == "upi"
    assert store.record.upi_id == "a@b.com"


def test_update_does_not_validate_values():
    store = TransactionStore()

    record = store.update({"amount": "-3", "selectedPaymentType": "cheque"})

    assert record.amount == "-3"
    assert record.selected_payment_type == "cheque"


def test_numeric_amount_is_stored_as_text():
    assert TransactionStore().update({"amount": 250}).amount == "250"


def test_unknown_field_is_rejected():
    with pytest.raises(ValueError):
        TransactionStore().update({"iban": "DE00"})


def test_record_cannot_be_mutated_in_place():
    store = TransactionStore()

    with pytest.raises(ValueError):
        store.record.receiver = "Mallory"


def test_stores_are_isolated():
    first, second = TransactionStore(), TransactionStore()

    first.update({"receiver": "Alice"})

    assert second.record.receiver == ""


def test_reset_restores_empty_record():
    store = TransactionStore(TransactionRecord(receiver="Bob"))

    assert store.reset() == TransactionRecord()
