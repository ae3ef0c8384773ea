"""Transaction record, typed validation errors and submission outcome models."""

from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class PaymentType(str, Enum):
    """Payment methods offered by the form selector."""

    UPI = "upi"
    NEFT = "neft"
    IMPS = "imps"
    RTGS = "rtgs"

    @property
    def display_name(self) -> str:
        return self.value.upper()


# Bank transfer methods identified by a transaction reference instead of a UPI address.
TRANSACTION_ID_TYPES = frozenset({PaymentType.NEFT.value, PaymentType.IMPS.value, PaymentType.RTGS.value})


class TransactionRecord(BaseModel):
    """The in-progress payment intent being edited.

    Instances are frozen; edits produce a new record (see `store.apply_update`).
    Any string is accepted for any field, rule checks live in `validation`.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    selected_payment_type: str = ""
    amount: str = ""
    receiver: str = ""
    transaction_id: str = ""
    upi_id: str = ""

    def to_payload(self) -> dict[str, str]:
        """JSON body sent to the submission endpoint."""

        return self.model_dump(by_alias=True)


class ErrorField(str, Enum):
    """Keys an error can be reported under."""

    RECEIVER = "receiver"
    AMOUNT = "amount"
    UPI_ID = "upiId"
    TRANSACTION_ID = "transactionId"
    API_ERROR = "apiError"


class ErrorCode(str, Enum):
    REQUIRED = "required"
    NOT_POSITIVE = "not_positive"
    INVALID_FORMAT = "invalid_format"
    SUBMISSION_FAILED = "submission_failed"


class FieldError(BaseModel):
    """One user-facing diagnostic attached to a field."""

    model_config = ConfigDict(frozen=True)

    field: ErrorField
    code: ErrorCode
    message: str


class ValidationErrorSet:
    """Ordered set of field errors with at most one error per field.

    Adding an error for a field that already has one replaces it, so rules that
    run later win.
    """

    def __init__(self, errors=()) -> None:
        self._errors: dict[ErrorField, FieldError] = {}
        for error in errors:
            self.add(error)

    def add(self, error: FieldError) -> None:
        self._errors[error.field] = error

    def get(self, field: ErrorField) -> FieldError | None:
        return self._errors.get(field)

    @property
    def fields(self) -> list[ErrorField]:
        return list(self._errors)

    def as_dict(self) -> dict[str, str]:
        """Legacy `{field: message}` view rendered next to form inputs."""

        return {field.value: error.message for field, error in self._errors.items()}

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __iter__(self):
        return iter(self._errors.values())

    def __len__(self) -> int:
        return len(self._errors)

    def __bool__(self) -> bool:
        return bool(self._errors)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationErrorSet):
            return NotImplemented
        return self._errors == other._errors

    def __repr__(self) -> str:
        return f"ValidationErrorSet({list(self._errors.values())!r})"


class SubmissionState(str, Enum):
    IDLE = "idle"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class FailureReason(str, Enum):
    """Internal classification of a failed submission, never shown to users."""

    TIMEOUT = "timeout"
    NETWORK = "network"
    HTTP_STATUS = "http_status"


class FormState(BaseModel):
    """Snapshot of the controller-local form outcome."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    state: SubmissionState
    errors: dict[str, str]
    success_message: str = ""
