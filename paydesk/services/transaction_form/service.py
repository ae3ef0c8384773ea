"""Validation and submission controller for the transaction form.

Gatekeeps each submit trigger: re-reads the record from the store, validates it
and, when it passes, runs exactly one outbound submission. The outcome lives on
the controller (state, errors, success message), never on the shared record.
"""

from time import perf_counter
from uuid import uuid4

from paydesk.common.config import settings
from paydesk.common.logging import logger, submission_id_ctx
from paydesk.common.metrics import (
    submission_attempts_total,
    submission_failure_total,
    submission_latency_seconds,
    submission_success_total,
    validation_failures_total,
)
from paydesk.common.state_machine import validate_transition
from paydesk.services.transaction_form.gateway import SubmissionFailure, TransactionGateway
from paydesk.services.transaction_form.models import (
    ErrorCode,
    ErrorField,
    FailureReason,
    FieldError,
    FormState,
    SubmissionState,
    ValidationErrorSet,
)
from paydesk.services.transaction_form.store import TransactionStore
from paydesk.services.transaction_form.validation import validate_record


SUCCESS_MESSAGE = "Transaction successfully submitted!"
API_ERROR = FieldError(
    field=ErrorField.API_ERROR,
    code=ErrorCode.SUBMISSION_FAILED,
    message="Something went wrong. Please try again.",
)


class SubmissionInProgressError(RuntimeError):
    """Raised when submit is triggered while a submission is still in flight."""


class SubmissionController:
    """Owns the submission state machine for one form session."""

    def __init__(
        self,
        store: TransactionStore,
        gateway: TransactionGateway,
        service_name: str | None = None,
    ) -> None:
        self.store = store
        self.gateway = gateway
        self.service_name = service_name or settings.service_name
        self.state = SubmissionState.IDLE
        self.errors = ValidationErrorSet()
        self.success_message = ""
        self.last_failure: SubmissionFailure | None = None

    @property
    def is_submitting(self) -> bool:
        return self.state is SubmissionState.SUBMITTING

    def form_state(self) -> FormState:
        return FormState(
            state=self.state,
            errors=self.errors.as_dict(),
            success_message=self.success_message,
        )

    def reset(self) -> None:
        """Return to a fresh idle form; refused while a submission is in flight."""

        if self.is_submitting:
            raise SubmissionInProgressError("cannot reset while a submission is in flight")
        self.state = SubmissionState.IDLE
        self.errors = ValidationErrorSet()
        self.success_message = ""
        self.last_failure = None

    def _transition(self, new_state: SubmissionState) -> None:
        validate_transition(self.state.value, new_state.value)
        self.state = new_state

    async def submit(self) -> FormState:
        """Run one submit attempt and return the resulting form state."""

        if self.is_submitting:
            raise SubmissionInProgressError("a submission is already in flight")

        record = self.store.record
        errors = validate_record(record)
        if errors:
            self._transition(SubmissionState.IDLE)
            self.errors = errors
            self.success_message = ""
            for field in errors.fields:
                validation_failures_total.labels(service=self.service_name, field=field.value).inc()
            logger.info("validation_failed fields=%s", [field.value for field in errors.fields])
            return self.form_state()

        self._transition(SubmissionState.SUBMITTING)
        self.errors = ValidationErrorSet()
        self.success_message = ""
        self.last_failure = None
        token = submission_id_ctx.set(str(uuid4()))
        payload = record.to_payload()
        logger.info("submission_started payment_type=%s", record.selected_payment_type or "<unset>")
        submission_attempts_total.labels(service=self.service_name).inc()
        start = perf_counter()
        try:
            resp = await self.gateway.submit(payload)
        except SubmissionFailure as exc:
            self._fail(exc)
        except BaseException as exc:
            # Unexpected errors (including cancellation) still leave `submitting`.
            self._fail(SubmissionFailure(FailureReason.NETWORK, repr(exc)))
            raise
        else:
            self._transition(SubmissionState.SUCCEEDED)
            self.success_message = SUCCESS_MESSAGE
            submission_success_total.labels(service=self.service_name).inc()
            logger.info("submission_succeeded status_code=%s", resp.status_code)
        finally:
            submission_latency_seconds.labels(service=self.service_name).observe(max(0.0, perf_counter() - start))
            submission_id_ctx.reset(token)
        return self.form_state()

    def _fail(self, failure: SubmissionFailure) -> None:
        self._transition(SubmissionState.FAILED)
        self.errors = ValidationErrorSet([API_ERROR])
        self.last_failure = failure
        submission_failure_total.labels(service=self.service_name, reason=failure.reason.value).inc()
        logger.warning(
            "submission_failed reason=%s status_code=%s detail=%s",
            failure.reason.value,
            failure.status_code,
            failure.detail,
        )
