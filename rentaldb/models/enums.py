"""Fixed value sets for ENUM columns."""

from enum import Enum

from sqlalchemy import Enum as SAEnum


class Gender(str, Enum):
    FEMALE = "Female"
    MALE = "Male"


class ReferralInfo(str, Enum):
    REFERRED = "Referred"
    NOT_REFERRED = "Not-Referred"


class PaymentStatus(str, Enum):
    SUCCESSFUL = "Successful"
    PENDING = "Pending"
    DECLINED = "Declined"


class PaymentMethod(str, Enum):
    BANK_TRANSFER = "Bank Transfer"
    CREDIT_CARD = "Credit Card"
    DEBIT_CARD = "Debit Card"
    PAYPAL = "PayPal"


class Role(str, Enum):
    HOST = "Host"
    GUEST = "Guest"


ENUM_DOMAINS: dict[str, type[Enum]] = {
    "Gender": Gender,
    "ReferralInfo": ReferralInfo,
    "PaymentStatus": PaymentStatus,
    "PaymentMethod": PaymentMethod,
    "Role": Role,
}


def enum_type(enum_cls: type[Enum], name: str) -> SAEnum:
    """Column type storing the enum values (not member names).

    Backends without a native ENUM get a CHECK constraint instead.
    """
    return SAEnum(
        enum_cls,
        name=name,
        values_callable=lambda members: [m.value for m in members],
        create_constraint=True,
        validate_strings=True,
    )
