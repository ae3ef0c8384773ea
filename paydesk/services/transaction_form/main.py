"""HTTP surface for the transaction form.

Exposes the record edit/submit workflow that a browser form drives: partial
field updates, one submit per request, and the resulting form state.
"""

from time import perf_counter
from uuid import uuid4

from fastapi import Depends, FastAPI, Header, HTTPException, Request
from fastapi.responses import JSONResponse

from paydesk.common.config import settings
from paydesk.common.logging import configure_logging, trace_id_ctx
from paydesk.common.metrics import http_request_duration_seconds, http_requests_total, metrics_response
from paydesk.common.startup import log_startup_config
from paydesk.common.tracing import instrument_app, setup_tracing
from paydesk.services.transaction_form.gateway import TransactionGateway
from paydesk.services.transaction_form.models import FormState, PaymentType, SubmissionState
from paydesk.services.transaction_form.schemas import PaymentTypeOption, TransactionPatch
from paydesk.services.transaction_form.service import SubmissionController, SubmissionInProgressError
from paydesk.services.transaction_form.store import TransactionStore

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(settings)
store = TransactionStore()
controller = SubmissionController(store, TransactionGateway())

app = FastAPI(title="PayDesk Transaction Form")
instrument_app(app)

SUBMIT_STATUS_CODES = {
    SubmissionState.SUCCEEDED: 200,
    SubmissionState.IDLE: 422,
    SubmissionState.FAILED: 502,
}


@app.middleware("http")
async def metrics_middleware(request: Request, call_next):
    """Record request count and latency for every HTTP call."""

    start = perf_counter()
    route = request.url.path
    method = request.method
    status_code = 500
    try:
        response = await call_next(request)
        status_code = response.status_code
        route_obj = request.scope.get("route")
        if route_obj is not None and getattr(route_obj, "path", None):
            route = route_obj.path
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


def get_controller() -> SubmissionController:
    return controller


def get_store(controller: SubmissionController = Depends(get_controller)) -> TransactionStore:
    return controller.store


def _form_state_body(form_state: FormState) -> dict:
    return form_state.model_dump(mode="json", by_alias=True)


@app.get("/payment-types", response_model=list[PaymentTypeOption])
def payment_types():
    """Options for the payment type selector."""

    return [PaymentTypeOption(id=option.value, name=option.display_name) for option in PaymentType]


@app.get("/transaction")
def get_transaction(store: TransactionStore = Depends(get_store)):
    return store.record.to_payload()


@app.patch("/transaction")
def update_transaction(patch: TransactionPatch, store: TransactionStore = Depends(get_store)):
    """Merge the given fields into the record; values are checked only on submit."""

    return store.update(patch.changes()).to_payload()


@app.post("/transaction/submit")
async def submit_transaction(
    controller: SubmissionController = Depends(get_controller),
    x_correlation_id: str | None = Header(default=None),
):
    """Validate the current record and, when valid, submit it once.

    Responds 200 on success, 422 when validation blocks the submit and 502 when
    the remote endpoint call fails. The body is always the form state.
    """

    trace_id_ctx.set(x_correlation_id or str(uuid4()))
    try:
        form_state = await controller.submit()
    except SubmissionInProgressError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    return JSONResponse(status_code=SUBMIT_STATUS_CODES[form_state.state], content=_form_state_body(form_state))


@app.get("/transaction/status")
def transaction_status(controller: SubmissionController = Depends(get_controller)):
    return _form_state_body(controller.form_state())


@app.post("/transaction/reset")
def reset_transaction(controller: SubmissionController = Depends(get_controller)):
    """Start a new form: empty record and idle state."""

    try:
        controller.reset()
    except SubmissionInProgressError as exc:
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    controller.store.reset()
    return _form_state_body(controller.form_state())


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}
