"""API request/response schemas for the transaction form endpoints."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel

from paydesk.services.transaction_form.models import PaymentType


class TransactionPatch(BaseModel):
    """Partial record edit; only the fields present in the body are applied."""

    model_config = ConfigDict(
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
    )

    selected_payment_type: PaymentType | Literal[""] | None = None
    amount: str | None = None
    receiver: str | None = None
    transaction_id: str | None = None
    upi_id: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def reject_null(cls, value):
        """Omitted fields stay unchanged; an explicit null is not a value."""

        if value is None:
            raise ValueError("field may be omitted but not null")
        return value

    def changes(self) -> dict[str, str]:
        return self.model_dump(mode="json", exclude_unset=True)


class PaymentTypeOption(BaseModel):
    """One entry of the payment type selector."""

    id: str
    name: str
