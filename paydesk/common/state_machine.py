"""Submission state machine transitions enforced by the form controller."""

ALLOWED_TRANSITIONS: dict[str, set[str]] = {
    "idle": {"submitting", "idle"},
    "submitting": {"succeeded", "failed"},
    "succeeded": {"submitting", "idle"},
    "failed": {"submitting", "idle"},
}


class InvalidTransitionError(ValueError):
    """Raised when a submission state change is not allowed."""


def validate_transition(current: str, new: str) -> None:
    """Raise when a transition is not allowed by the state machine."""

    if new not in ALLOWED_TRANSITIONS.get(current, set()):
        raise InvalidTransitionError(f"Invalid transition: {current} -> {new}")
