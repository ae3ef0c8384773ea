"""Outbound HTTP client for the remote transaction endpoint."""

import httpx

from paydesk.common.config import settings
from paydesk.services.transaction_form.models import FailureReason


class SubmissionFailure(Exception):
    """Structured cause of a failed submission, kept for logs and metrics."""

    def __init__(self, reason: FailureReason, detail: str, status_code: int | None = None) -> None:
        super().__init__(detail)
        self.reason = reason
        self.detail = detail
        self.status_code = status_code

    def __repr__(self) -> str:
        return f"SubmissionFailure(reason={self.reason.value!r}, status_code={self.status_code!r}, detail={self.detail!r})"


class TransactionGateway:
    """Posts one transaction payload per call; no retries, no idempotency key."""

    def __init__(
        self,
        url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.url = url or settings.submit_url
        self.timeout = timeout if timeout is not None else settings.submit_timeout_seconds
        self._transport = transport

    async def submit(self, payload: dict[str, str]) -> httpx.Response:
        """Send `payload` and return the 2xx response, raising `SubmissionFailure` otherwise."""

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                resp = await client.post(self.url, json=payload)
        except httpx.TimeoutException as exc:
            raise SubmissionFailure(FailureReason.TIMEOUT, str(exc) or "request timed out") from exc
        except httpx.HTTPError as exc:
            raise SubmissionFailure(FailureReason.NETWORK, str(exc) or type(exc).__name__) from exc
        if not resp.is_success:
            raise SubmissionFailure(
                FailureReason.HTTP_STATUS,
                f"endpoint responded with status={resp.status_code}",
                status_code=resp.status_code,
            )
        return resp
