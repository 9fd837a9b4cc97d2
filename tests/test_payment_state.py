import pytest

from rentaldb.core.exceptions import InvalidPaymentStatus
from rentaldb.domain.payment_state import assert_payment_status_transition
from rentaldb.models.enums import PaymentStatus


@pytest.mark.parametrize(
    "current,target",
    [
        (PaymentStatus.PENDING, PaymentStatus.SUCCESSFUL),
        (PaymentStatus.PENDING, PaymentStatus.DECLINED),
        (PaymentStatus.DECLINED, PaymentStatus.PENDING),
        (None, PaymentStatus.SUCCESSFUL),
    ],
)
def test_allowed_transitions(current, target):
    assert_payment_status_transition(current, target)


@pytest.mark.parametrize(
    "current,target",
    [
        (PaymentStatus.SUCCESSFUL, PaymentStatus.PENDING),
        (PaymentStatus.SUCCESSFUL, PaymentStatus.DECLINED),
        (PaymentStatus.DECLINED, PaymentStatus.SUCCESSFUL),
        (PaymentStatus.PENDING, PaymentStatus.PENDING),
    ],
)
def test_rejected_transitions(current, target):
    with pytest.raises(InvalidPaymentStatus, match=f"{current.value} → {target.value}"):
        assert_payment_status_transition(current, target)
