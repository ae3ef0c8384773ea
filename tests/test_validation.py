"""Field rules applied per payment type before submission."""

import pytest

from paydesk.services.transaction_form.models import ErrorCode, ErrorField, TransactionRecord
from paydesk.services.transaction_form.validation import is_valid_upi_id, parse_amount, validate_record


def make_record(**overrides) -> TransactionRecord:
    base = {"receiver": "Alice", "amount": "100"}
    base.update(overrides)
    return TransactionRecord(**base)


def test_missing_receiver_is_reported():
    errors = validate_record(make_record(receiver=""))

    assert ErrorField.RECEIVER in errors
    assert errors.get(ErrorField.RECEIVER).code is ErrorCode.REQUIRED
    assert errors.as_dict()["receiver"] == "Receiver name is required."


@pytest.mark.parametrize(
    "amount",
    ["", "0", "-5", "0.00", "abc", "NaN", "Infinity", "12abc", " ", "1_000", "\u0661\u0660\u0660", "0x10"],
)
def test_non_positive_or_non_numeric_amount_is_reported(amount):
    errors = validate_record(make_record(amount=amount))

    assert errors.get(ErrorField.AMOUNT).message == "Amount must be a positive number."


@pytest.mark.parametrize("amount", ["100", "0.01", "1e3", " 42 "])
def test_positive_amount_passes(amount):
    assert ErrorField.AMOUNT not in validate_record(make_record(amount=amount))


def test_parse_amount_rejects_nan():
    assert parse_amount("nan") is None
    assert parse_amount("2.50") is not None


def test_upi_requires_upi_id():
    errors = validate_record(make_record(selected_payment_type="upi", upi_id=""))

    assert errors.get(ErrorField.UPI_ID).code is ErrorCode.REQUIRED
    assert errors.as_dict() == {"upiId": "UPI ID is required."}


def test_upi_rejects_malformed_upi_id():
    errors = validate_record(make_record(selected_payment_type="upi", upi_id="bad-format"))

    assert errors.get(ErrorField.UPI_ID).code is ErrorCode.INVALID_FORMAT
    assert errors.as_dict() == {"upiId": "Invalid UPI ID format."}


def test_upi_accepts_well_formed_upi_id():
    assert not validate_record(make_record(selected_payment_type="upi", upi_id="user@bank.com"))


@pytest.mark.parametrize(
    "upi_id, valid",
    [
        ("first.last+tag@mail.example.in", True),
        ("user@bank", False),
        ("user@bank.c", False),
        ("user@bank.co1", False),
        ("user@bank.company", False),
        ("@bank.com", False),
        ("user@bank.com\n", False),
    ],
)
def test_upi_id_syntax(upi_id, valid):
    assert is_valid_upi_id(upi_id) is valid


@pytest.mark.parametrize("payment_type", ["neft", "imps", "rtgs"])
def test_bank_transfers_require_transaction_id(payment_type):
    missing = validate_record(make_record(selected_payment_type=payment_type, transaction_id=""))
    present = validate_record(make_record(selected_payment_type=payment_type, transaction_id="TXN123"))

    assert missing.as_dict() == {"transactionId": "Transaction ID is required."}
    assert not present


def test_irrelevant_fields_are_ignored():
    """UPI ID is not checked for NEFT, and transaction ID is not checked for UPI."""

    neft = make_record(selected_payment_type="neft", transaction_id="T-1", upi_id="not an address")
    upi = make_record(selected_payment_type="upi", upi_id="a@b.com", transaction_id="")

    assert not validate_record(neft)
    assert not validate_record(upi)


def test_unset_payment_type_still_passes_on_receiver_and_amount():
    assert not validate_record(make_record(selected_payment_type=""))


def test_validation_is_idempotent():
    record = make_record(receiver="", amount="0", selected_payment_type="upi", upi_id="nope")

    assert validate_record(record) == validate_record(record)


def test_invalid_neft_record_reports_every_field():
    record = TransactionRecord(selected_payment_type="neft", receiver="", amount="0")

    errors = validate_record(record)

    assert errors.fields == [ErrorField.RECEIVER, ErrorField.AMOUNT, ErrorField.TRANSACTION_ID]
