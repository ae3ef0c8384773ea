"""Fill a transaction form from flags and submit it once.

Useful for manually checking the validation rules and the remote endpoint.
"""

import argparse
import asyncio
import json

from paydesk.common.logging import configure_logging
from paydesk.services.transaction_form.gateway import TransactionGateway
from paydesk.services.transaction_form.models import PaymentType
from paydesk.services.transaction_form.service import SubmissionController
from paydesk.services.transaction_form.store import TransactionStore


async def submit(fields: dict, url: str | None, timeout: float | None) -> int:
    """Submit one record and print the resulting form state; return an exit code."""

    store = TransactionStore()
    store.update(fields)
    controller = SubmissionController(store, TransactionGateway(url=url, timeout=timeout))
    form_state = await controller.submit()
    print(json.dumps(form_state.model_dump(mode="json", by_alias=True), indent=2))
    if controller.last_failure is not None:
        print(f"failure_reason={controller.last_failure.reason.value}")
    return 0 if form_state.success_message else 1


def main() -> None:
    """Parse CLI args and run one submit attempt."""

    parser = argparse.ArgumentParser(description="Validate and submit one payment transaction.")
    parser.add_argument("--type", dest="payment_type", default="", choices=["", *(t.value for t in PaymentType)])
    parser.add_argument("--receiver", default="")
    parser.add_argument("--amount", default="")
    parser.add_argument("--upi-id", default="")
    parser.add_argument("--transaction-id", default="")
    parser.add_argument("--url", default=None, help="Override SUBMIT_URL")
    parser.add_argument("--timeout", type=float, default=None, help="Override SUBMIT_TIMEOUT_SECONDS")
    args = parser.parse_args()

    configure_logging()
    fields = {
        "selectedPaymentType": args.payment_type,
        "receiver": args.receiver,
        "amount": args.amount,
        "upiId": args.upi_id,
        "transactionId": args.transaction_id,
    }
    raise SystemExit(asyncio.run(submit(fields, args.url, args.timeout)))


if __name__ == "__main__":
    main()
