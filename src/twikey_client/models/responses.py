"""
Decoded response objects.

Built only by the ``from_*`` constructors from parsed JSON. Attributes the
server left out stay None.
"""

from __future__ import annotations
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict

from ..codec.decoder import (
    key_value_entries,
    optional,
    optional_float,
    optional_int,
    optional_str,
    require,
)
from ..runtime.errors import DecodeError


STATE_HEADER = "X-STATE"
DEFAULT_PDF_NAME = "mandate.pdf"
DEFAULT_PDF_TYPE = "application/pdf"


class ResponseModel(BaseModel):
    model_config = ConfigDict(frozen=True)


def _prune(obj: Dict[str, Any]) -> Dict[str, Any]:
    """Drop None leaves and the objects left empty by that."""
    result = {}
    for key, value in obj.items():
        if isinstance(value, dict):
            value = _prune(value)
            if not value:
                continue
        if value is None:
            continue
        result[key] = value
    return result


class Document(ResponseModel):
    """
    A mandate as returned by the detail endpoint, the query endpoint or the
    mandate feed.

    ``state`` is not part of the mandate body. It comes from the ``X-STATE``
    response header on detail calls and from the contract entry on queries.
    """
    mandate_number: Optional[str] = None
    state: Optional[str] = None
    type: Optional[str] = None
    sequence_type: Optional[str] = None
    sign_date: Optional[str] = None
    debtor_name: Optional[str] = None
    debtor_street: Optional[str] = None
    debtor_city: Optional[str] = None
    debtor_zip: Optional[str] = None
    debtor_country: Optional[str] = None
    vat_number: Optional[str] = None
    country_of_residence: Optional[str] = None
    debtor_email: Optional[str] = None
    customer_number: Optional[str] = None
    iban: Optional[str] = None
    bic: Optional[str] = None
    debtor_bank: Optional[str] = None
    contract_number: Optional[str] = None
    supplementary_data: Optional[Dict[str, str]] = None

    @classmethod
    def from_json(cls, obj: Any, state: Optional[str] = None) -> Document:
        """
        Decode a mandate object.

        Args:
            obj: Parsed JSON holding the ``Mndt`` element
            state: Mandate state from the response side channel, if any

        Raises:
            DecodeError: If ``Mndt`` is missing or not an object
        """
        mndt = require(obj, "Mndt")
        dbtr = optional(mndt, "Dbtr")
        agent = optional(mndt, "DbtrAgt", "FinInstnId")
        splmtry = optional(mndt, "SplmtryData")
        return cls(
            mandate_number=optional_str(mndt, "MndtId"),
            state=state,
            type=optional_str(mndt, "LclInstrm"),
            sequence_type=optional_str(mndt, "Ocrncs", "SeqTp"),
            sign_date=optional_str(mndt, "Ocrncs", "Drtn", "FrDt"),
            debtor_name=optional_str(dbtr, "Nm"),
            debtor_street=optional_str(dbtr, "PstlAdr", "AdrLine"),
            debtor_city=optional_str(dbtr, "PstlAdr", "TwnNm"),
            debtor_zip=optional_str(dbtr, "PstlAdr", "PstCd"),
            debtor_country=optional_str(dbtr, "PstlAdr", "Ctry"),
            vat_number=optional_str(dbtr, "Id"),
            country_of_residence=optional_str(dbtr, "CtryOfRes"),
            debtor_email=optional_str(dbtr, "CtctDtls", "EmailAdr"),
            customer_number=optional_str(dbtr, "CtctDtls", "Othr"),
            iban=optional_str(mndt, "DbtrAcct"),
            bic=optional_str(agent, "BICFI"),
            debtor_bank=optional_str(agent, "Nm"),
            contract_number=optional_str(mndt, "RfrdDoc"),
            supplementary_data=None if splmtry is None else key_value_entries(splmtry),
        )

    @classmethod
    def from_contract(cls, contract: Any) -> Document:
        """Decode one entry of a mandate query result."""
        if not isinstance(contract, dict):
            raise DecodeError(f"Expected a contract object, got {type(contract).__name__}")
        return cls(
            type=optional_str(contract, "type"),
            state=optional_str(contract, "state"),
            mandate_number=optional_str(contract, "mandateNumber"),
            contract_number=optional_str(contract, "contractNumber"),
            sign_date=optional_str(contract, "signDate"),
            iban=optional_str(contract, "iban"),
            bic=optional_str(contract, "bic"),
        )

    @classmethod
    def from_query(cls, obj: Any) -> List[Document]:
        """
        Decode a mandate query result.

        Raises:
            DecodeError: If the ``Contracts`` array is missing
        """
        return [cls.from_contract(entry) for entry in require(obj, "Contracts", list)]

    def to_wire(self) -> Dict[str, Any]:
        """Wire form of the mandate (without the side-channel state)."""
        mndt = _prune({
            "MndtId": self.mandate_number,
            "LclInstrm": self.type,
            "Ocrncs": {
                "SeqTp": self.sequence_type,
                "Drtn": {"FrDt": self.sign_date},
            },
            "Dbtr": {
                "Nm": self.debtor_name,
                "PstlAdr": {
                    "AdrLine": self.debtor_street,
                    "TwnNm": self.debtor_city,
                    "PstCd": self.debtor_zip,
                    "Ctry": self.debtor_country,
                },
                "Id": self.vat_number,
                "CtryOfRes": self.country_of_residence,
                "CtctDtls": {
                    "EmailAdr": self.debtor_email,
                    "Othr": self.customer_number,
                },
            },
            "DbtrAcct": self.iban,
            "DbtrAgt": {"FinInstnId": {"BICFI": self.bic, "Nm": self.debtor_bank}},
            "RfrdDoc": self.contract_number,
        })
        if self.supplementary_data is not None:
            mndt["SplmtryData"] = [{"Key": k, "Value": v} for k, v in self.supplementary_data.items()]
        return {"Mndt": mndt}


class MandateCreationResponse(ResponseModel):
    """Result of an invite or sign call."""
    mandate_number: Optional[str] = None
    url: Optional[str] = None
    key: Optional[str] = None

    @classmethod
    def from_json(cls, obj: Any) -> MandateCreationResponse:
        if not isinstance(obj, dict):
            raise DecodeError(f"Expected a JSON object, got {type(obj).__name__}")
        mandate_number = optional_str(obj, "mndtId")
        if mandate_number is None:
            mandate_number = optional_str(obj, "MndtId")
        return cls(
            mandate_number=mandate_number,
            url=optional_str(obj, "url"),
            key=optional_str(obj, "key"),
        )


class CustomerAccessResponse(ResponseModel):
    """Short-lived link giving the customer access to their mandate."""
    token: Optional[str] = None
    url: Optional[str] = None

    @classmethod
    def from_json(cls, obj: Any) -> CustomerAccessResponse:
        if not isinstance(obj, dict):
            raise DecodeError(f"Expected a JSON object, got {type(obj).__name__}")
        return cls(token=optional_str(obj, "token"), url=optional_str(obj, "url"))


def _filename(disposition: Optional[str]) -> Optional[str]:
    if not disposition:
        return None
    for part in disposition.split(";"):
        name, sep, value = part.strip().partition("=")
        if sep and name.strip().lower() == "filename":
            value = value.strip().strip('"')
            return value or None
    return None


class PdfResponse(ResponseModel):
    """Raw mandate pdf. Never written to disk by the client."""
    content: bytes
    filename: str = DEFAULT_PDF_NAME
    content_type: str = DEFAULT_PDF_TYPE

    @classmethod
    def from_response(cls, response: Any) -> PdfResponse:
        """Build from a transport response, reading the Content-Disposition filename."""
        return cls(
            content=response.content,
            filename=_filename(response.header("Content-Disposition")) or DEFAULT_PDF_NAME,
            content_type=response.header("Content-Type") or DEFAULT_PDF_TYPE,
        )


class Invoice(ResponseModel):
    """An invoice as returned by the invoice endpoints and the invoice feed."""
    id: Optional[str] = None
    number: Optional[str] = None
    title: Optional[str] = None
    remittance: Optional[str] = None
    ref: Optional[str] = None
    ct: Optional[int] = None
    amount: Optional[float] = None
    date: Optional[str] = None
    duedate: Optional[str] = None
    state: Optional[str] = None
    url: Optional[str] = None
    lastpayment: Optional[Any] = None
    meta: Optional[Dict[str, Any]] = None
    customer: Optional[Dict[str, Any]] = None

    @classmethod
    def from_json(cls, obj: Any) -> Invoice:
        """
        Decode an invoice object.

        Raises:
            DecodeError: If ``obj`` is not an object or a numeric leaf is malformed
        """
        if not isinstance(obj, dict):
            raise DecodeError(f"Expected an invoice object, got {type(obj).__name__}")
        meta = obj.get("meta")
        customer = obj.get("customer")
        return cls(
            id=optional_str(obj, "id"),
            number=optional_str(obj, "number"),
            title=optional_str(obj, "title"),
            remittance=optional_str(obj, "remittance"),
            ref=optional_str(obj, "ref"),
            ct=optional_int(obj, "ct"),
            amount=optional_float(obj, "amount"),
            date=optional_str(obj, "date"),
            duedate=optional_str(obj, "duedate"),
            state=optional_str(obj, "state"),
            url=optional_str(obj, "url"),
            lastpayment=obj.get("lastpayment"),
            meta=meta if isinstance(meta, dict) else None,
            customer=customer if isinstance(customer, dict) else None,
        )

    def to_wire(self) -> Dict[str, Any]:
        """Wire form of the invoice, leaving out unset attributes."""
        return {key: value for key, value in self.model_dump().items() if value is not None}


class BatchStatus(ResponseModel):
    """
    Status of a bulk invoice batch.

    The batch payload is loosely defined, so the parsed body is kept in
    ``raw``.
    """
    batch_id: Optional[str] = None
    raw: Dict[str, Any]

    @classmethod
    def from_json(cls, obj: Any) -> BatchStatus:
        if not isinstance(obj, dict):
            raise DecodeError(f"Expected a batch object, got {type(obj).__name__}")
        batch_id = optional_str(obj, "batchId")
        if batch_id is None:
            batch_id = optional_str(obj, "id")
        return cls(batch_id=batch_id, raw=obj)


__all__ = [
    "STATE_HEADER",
    "Document",
    "MandateCreationResponse",
    "CustomerAccessResponse",
    "PdfResponse",
    "Invoice",
    "BatchStatus",
]
