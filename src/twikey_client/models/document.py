"""
Mandate (document) request records.

Every record declares its wire table in WIRE_FIELDS. Optional attributes
default to None and are left out of the request when not set.

Example:
    ```python
    customer = Customer(customer_number="C-1", email="jane@example.com")
    invite = InviteRequest(
        ct=1988,
        customer=customer,
        fields=MandateFields(check=True, reminder_days=5),
    )
    invite.to_dict()
    # {"ct": "1988", "check": "true", "reminderDays": "5",
    #  "customerNumber": "C-1", "email": "jane@example.com"}
    ```
"""

from __future__ import annotations
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from pydantic import Field, field_validator, model_validator

from .base import WireRecord
from ..codec.fields import (
    BooleanField,
    DecimalField,
    IntegerField,
    NestedField,
    StringField,
)


ACCEPTED_LANGUAGES = frozenset({"nl", "fr", "en", "pt", "es", "it"})


def _check_language(value: Optional[str]) -> Optional[str]:
    if value is not None and value not in ACCEPTED_LANGUAGES:
        raise ValueError(f"Unsupported language {value!r}, expected one of {sorted(ACCEPTED_LANGUAGES)}")
    return value


class SignMethod(str, Enum):
    """Methods to sign a mandate."""

    SMS = "sms"
    DIGISIGN = "digisign"
    IMPORT = "import"
    ITSME = "itsme"
    EMACHTIGING = "emachtiging"
    PAPER = "paper"
    IDEAL = "ideal"
    IDIN = "idin"


class MandateActionType(str, Enum):
    """Actions that can be triggered on an existing mandate."""

    INVITE = "invite"
    REMINDER = "reminder"
    ACCESS = "access"
    AUTOMATIC_CHECK = "automaticCheck"
    MANUAL_CHECK = "manualCheck"


# =============================================================================
# Shared parts
# =============================================================================

class Account(WireRecord):
    """Debtor account of the mandate."""
    iban: Optional[str] = None
    bic: Optional[str] = None

    WIRE_FIELDS = (
        StringField("iban"),
        StringField("bic"),
    )


class Customer(WireRecord):
    """
    Person or company for whom a mandate or invoice is created.

    ``coc`` is the company registration (VAT) number and goes out as
    ``vatno``.
    """
    customer_number: Optional[str] = None
    email: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    lang: Optional[str] = None
    mobile: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    zip_code: Optional[str] = None
    country: Optional[str] = None
    company_name: Optional[str] = None
    coc: Optional[str] = None

    WIRE_FIELDS = (
        StringField("customer_number", "customerNumber"),
        StringField("email"),
        StringField("firstname"),
        StringField("lastname"),
        StringField("lang", "l"),
        StringField("mobile"),
        StringField("street", "address"),
        StringField("city"),
        StringField("zip_code", "zip"),
        StringField("country"),
        StringField("company_name", "companyName"),
        StringField("coc", "vatno"),
    )

    @field_validator("lang")
    @classmethod
    def validate_lang(cls, v: Optional[str]) -> Optional[str]:
        return _check_language(v)


class Subscription(WireRecord):
    """Recurring payment set up together with the mandate."""
    start: str
    recurrence: Optional[str] = None
    stop_after: Optional[int] = Field(default=None, ge=1)
    amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    message: Optional[str] = None
    ref: Optional[str] = None

    WIRE_FIELDS = (
        StringField("start", "subscriptionStart"),
        StringField("recurrence", "subscriptionRecurrence"),
        StringField("message", "subscriptionMessage"),
        StringField("ref", "subscriptionRef"),
        DecimalField("amount", "subscriptionAmount"),
        IntegerField("stop_after", "subscriptionStopAfter"),
    )


class MandateFields(WireRecord):
    """
    Fields shared by invite and sign requests.

    Embedded by value in InviteRequest and SignRequest.
    """
    lang: Optional[str] = None
    mandate_number: Optional[str] = None
    contract_number: Optional[str] = None
    campaign: Optional[str] = None
    prefix: Optional[str] = None
    expiry: Optional[int] = Field(default=None, ge=0)
    token: Optional[str] = Field(default=None, max_length=100)
    document: Optional[str] = None
    transaction_amount: Optional[float] = Field(default=None, allow_inf_nan=False)
    transaction_message: Optional[str] = None
    transaction_ref: Optional[str] = None
    plan: Optional[str] = None
    subscription: Optional[Subscription] = None
    check: Optional[bool] = None
    send_invite: Optional[bool] = None
    require_validation: Optional[bool] = None
    reminder_days: Optional[int] = Field(default=None, ge=0)

    WIRE_FIELDS = (
        StringField("lang", "l"),
        StringField("mandate_number", "mandateNumber"),
        StringField("contract_number", "contractNumber"),
        StringField("campaign"),
        StringField("prefix"),
        IntegerField("expiry", "ed"),
        StringField("token"),
        StringField("document"),
        StringField("transaction_message", "transactionMessage"),
        StringField("transaction_ref", "transactionRef"),
        StringField("plan"),
        NestedField("subscription", flatten=True),
        BooleanField("check"),
        BooleanField("send_invite", "sendInvite"),
        BooleanField("require_validation", "requireValidation"),
        IntegerField("reminder_days", "reminderDays"),
        DecimalField("transaction_amount", "transactionAmount"),
    )

    @field_validator("lang")
    @classmethod
    def validate_lang(cls, v: Optional[str]) -> Optional[str]:
        return _check_language(v)


# =============================================================================
# Requests
# =============================================================================

class InviteRequest(WireRecord):
    """
    Prepare a mandate and get an invitation url for the customer.

    Args:
        ct: Contract template id
        customer: Optional customer details
        account: Optional debtor account
        fields: Optional shared mandate fields
    """
    ct: int
    customer: Optional[Customer] = None
    account: Optional[Account] = None
    fields: Optional[MandateFields] = None

    WIRE_FIELDS = (
        IntegerField("ct"),
        NestedField("fields", flatten=True),
        NestedField("account", flatten=True),
        NestedField("customer", flatten=True),
    )


class SignRequest(WireRecord):
    """
    Create a mandate and sign it in one call.

    ``bank_signature`` defaults to true, matching the service's own default.
    """
    ct: int
    method: SignMethod
    customer: Optional[Customer] = None
    account: Optional[Account] = None
    fields: Optional[MandateFields] = None
    digsig: Optional[str] = None
    key: Optional[str] = None
    sign_date: Optional[str] = None
    place: Optional[str] = None
    bank_signature: Optional[bool] = True

    WIRE_FIELDS = (
        IntegerField("ct"),
        StringField("method"),
        StringField("digsig"),
        StringField("key"),
        StringField("sign_date", "signDate"),
        StringField("place"),
        BooleanField("bank_signature", "bankSignature"),
        NestedField("fields", flatten=True),
        NestedField("account", flatten=True),
        NestedField("customer", flatten=True),
    )


class MandateActionRequest(WireRecord):
    """Trigger an action (invite, reminder, ...) on an existing mandate."""
    type: MandateActionType
    mandate_number: str
    reminder: Optional[int] = Field(default=None, ge=1, le=4)

    WIRE_FIELDS = (
        StringField("type"),
        StringField("mandate_number", "mndtId"),
        IntegerField("reminder"),
    )


class MandateQuery(WireRecord):
    """
    Search mandates by iban, customer number or email.

    At least one of the three identifiers is required. ``state`` filters on
    SIGNED, PREPARED or CANCELLED; ``page`` is 0-based.
    """
    iban: Optional[str] = None
    customer_number: Optional[str] = None
    email: Optional[str] = None
    state: Optional[str] = None
    page: Optional[int] = Field(default=None, ge=0)

    WIRE_FIELDS = (
        StringField("iban"),
        StringField("customer_number", "customerNumber"),
        StringField("email"),
        StringField("state"),
        IntegerField("page"),
    )

    @model_validator(mode="after")
    def _has_identifier(self) -> MandateQuery:
        if self.iban is None and self.customer_number is None and self.email is None:
            raise ValueError("One of iban, customer_number or email is required")
        return self

    @classmethod
    def from_iban(cls, iban: str, **kwargs) -> MandateQuery:
        return cls(iban=iban, **kwargs)

    @classmethod
    def from_customer_number(cls, customer_number: str, **kwargs) -> MandateQuery:
        return cls(customer_number=customer_number, **kwargs)

    @classmethod
    def from_email(cls, email: str, **kwargs) -> MandateQuery:
        return cls(email=email, **kwargs)


class MandateDetailRequest(WireRecord):
    """Fetch one mandate; ``force`` also returns mandates that are not yet signed."""
    mandate_number: str
    force: Optional[bool] = None

    WIRE_FIELDS = (
        StringField("mandate_number", "mndtId"),
        BooleanField("force"),
    )


class UpdateMandateRequest(WireRecord):
    """
    Update details of an existing mandate.

    Only the attributes that are set are changed on the mandate.
    """
    mandate_number: str
    ct: Optional[int] = None
    state: Optional[str] = None
    customer: Optional[Customer] = None
    account: Optional[Account] = None

    WIRE_FIELDS = (
        StringField("mandate_number", "mndtId"),
        IntegerField("ct"),
        StringField("state"),
        NestedField("account", flatten=True),
        NestedField("customer", flatten=True),
    )


class UploadPdfRequest(WireRecord):
    """Upload a signed mandate pdf; the file itself is streamed as the request body."""
    mandate_number: str
    pdf_path: Union[str, Path]
    bank_signature: Optional[bool] = None

    WIRE_FIELDS = (
        StringField("mandate_number", "mndtId"),
        BooleanField("bank_signature", "bankSignature"),
    )


__all__ = [
    "ACCEPTED_LANGUAGES",
    "SignMethod",
    "MandateActionType",
    "Account",
    "Customer",
    "Subscription",
    "MandateFields",
    "InviteRequest",
    "SignRequest",
    "MandateActionRequest",
    "MandateQuery",
    "MandateDetailRequest",
    "UpdateMandateRequest",
    "UploadPdfRequest",
]
