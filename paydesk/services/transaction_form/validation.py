"""Payment-method specific rules applied to a record before submission."""

import re
from decimal import Decimal, InvalidOperation

from paydesk.services.transaction_form.models import (
    TRANSACTION_ID_TYPES,
    ErrorCode,
    ErrorField,
    FieldError,
    PaymentType,
    TransactionRecord,
    ValidationErrorSet,
)


UPI_ID_PATTERN = re.compile(r"[a-zA-Z0-9._%+-]+@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,4}")
# ASCII digits with optional sign, fraction and exponent.
AMOUNT_PATTERN = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")

RECEIVER_REQUIRED = FieldError(
    field=ErrorField.RECEIVER, code=ErrorCode.REQUIRED, message="Receiver name is required."
)
AMOUNT_NOT_POSITIVE = FieldError(
    field=ErrorField.AMOUNT, code=ErrorCode.NOT_POSITIVE, message="Amount must be a positive number."
)
UPI_ID_REQUIRED = FieldError(field=ErrorField.UPI_ID, code=ErrorCode.REQUIRED, message="UPI ID is required.")
UPI_ID_INVALID = FieldError(
    field=ErrorField.UPI_ID, code=ErrorCode.INVALID_FORMAT, message="Invalid UPI ID format."
)
TRANSACTION_ID_REQUIRED = FieldError(
    field=ErrorField.TRANSACTION_ID, code=ErrorCode.REQUIRED, message="Transaction ID is required."
)


def parse_amount(raw: str) -> Decimal | None:
    """Parse a user-entered amount, returning None when it is not a finite decimal."""

    if not raw or AMOUNT_PATTERN.fullmatch(raw) is None:
        return None
    try:
        value = Decimal(raw)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


def is_valid_upi_id(upi_id: str) -> bool:
    return UPI_ID_PATTERN.fullmatch(upi_id) is not None


def validate_record(record: TransactionRecord) -> ValidationErrorSet:
    """Compute every field error for `record`.

    Only the fields required by the selected payment type are checked. A record
    with no payment type selected is validated on receiver and amount alone.
    """

    errors = ValidationErrorSet()

    if not record.receiver:
        errors.add(RECEIVER_REQUIRED)

    amount = parse_amount(record.amount)
    if amount is None or amount <= 0:
        errors.add(AMOUNT_NOT_POSITIVE)

    if record.selected_payment_type == PaymentType.UPI.value:
        if not record.upi_id:
            errors.add(UPI_ID_REQUIRED)
        elif not is_valid_upi_id(record.upi_id):
            errors.add(UPI_ID_INVALID)

    if record.selected_payment_type in TRANSACTION_ID_TYPES and not record.transaction_id:
        errors.add(TRANSACTION_ID_REQUIRED)

    return errors
