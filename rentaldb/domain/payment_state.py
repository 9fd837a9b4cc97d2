"""Booking payment status state machine."""

from rentaldb.core.exceptions import InvalidPaymentStatus
from rentaldb.models.enums import PaymentStatus

PAYMENT_STATUS_TRANSITIONS = {
    PaymentStatus.PENDING: {PaymentStatus.SUCCESSFUL, PaymentStatus.DECLINED},
    PaymentStatus.DECLINED: {PaymentStatus.PENDING},
    PaymentStatus.SUCCESSFUL: set(),
}


def assert_payment_status_transition(current: PaymentStatus | None, target: PaymentStatus) -> None:
    """Validate a booking payment status change.

    A booking without a status is treated as pending.

    Raises:
        InvalidPaymentStatus: If transition is not allowed
    """
    current = current or PaymentStatus.PENDING
    allowed = PAYMENT_STATUS_TRANSITIONS.get(current, set())
    if target not in allowed:
        raise InvalidPaymentStatus(
            f"Invalid payment status transition: {current.value} → {target.value}"
        )
