"""Outbound submission client and its structured failures."""

import httpx
import pytest

from paydesk.common.config import settings
from paydesk.services.transaction_form.gateway import SubmissionFailure, TransactionGateway
from paydesk.services.transaction_form.models import FailureReason


def test_defaults_come_from_settings():
    gateway = TransactionGateway()

    assert gateway.url == settings.submit_url
    assert gateway.timeout == settings.submit_timeout_seconds


@pytest.mark.asyncio
async def test_sends_json_without_custom_headers():
    seen = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200)

    gateway = TransactionGateway(url="https://payments.test/tx", transport=httpx.MockTransport(handler))

    resp = await gateway.submit({"receiver": "Alice"})

    assert resp.status_code == 200
    assert seen[0].headers["content-type"] == "application/json"
    assert "authorization" not in seen[0].headers
    assert "idempotency-key" not in seen[0].headers


@pytest.mark.asyncio
async def test_redirect_status_is_a_failure():
    gateway = TransactionGateway(
        url="https://payments.test/tx",
        transport=httpx.MockTransport(lambda request: httpx.Response(302)),
    )

    with pytest.raises(SubmissionFailure) as excinfo:
        await gateway.submit({})

    assert excinfo.value.reason is FailureReason.HTTP_STATUS
    assert excinfo.value.status_code == 302