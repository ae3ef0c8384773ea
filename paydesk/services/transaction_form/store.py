"""In-memory owner of the transaction record being edited."""

from collections.abc import Mapping
from typing import Any

from paydesk.services.transaction_form.models import TransactionRecord


def _attribute_name(key: str) -> str:
    """Map a wire (camelCase) or python field name to the model attribute."""

    if key in TransactionRecord.model_fields:
        return key
    for name, field in TransactionRecord.model_fields.items():
        if field.alias == key:
            return name
    raise ValueError(f"unknown transaction field: {key}")


def apply_update(record: TransactionRecord, partial: Mapping[str, Any]) -> TransactionRecord:
    """Return a new record with `partial` merged over `record`.

    Fields missing from `partial` keep their current value. Values are not
    checked against payment rules; numbers are stored as their string form.
    """

    merged = record.model_dump()
    for key, value in partial.items():
        merged[_attribute_name(key)] = value
    return TransactionRecord.model_validate(merged)


class TransactionStore:
    """Single source of truth for one form session.

    Each form session owns its own store; there is no shared module instance.
    """

    def __init__(self, record: TransactionRecord | None = None) -> None:
        self._record = record or TransactionRecord()

    @property
    def record(self) -> TransactionRecord:
        return self._record

    def update(self, partial: Mapping[str, Any]) -> TransactionRecord:
        self._record = apply_update(self._record, partial)
        return self._record

    def reset(self) -> TransactionRecord:
        self._record = TransactionRecord()
        return self._record
