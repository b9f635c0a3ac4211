"""Typed records for the SparkPost objects this sample sends and receives.

All records are frozen Pydantic models. Their canonical JSON form is produced
by :func:`to_payload`, which uses the wire names (``from`` instead of
``from_``) and omits every optional field that holds no value.

Contents:
    * :class:`Address`, :class:`TemplateContent`, :class:`Template` - template create body.
    * :class:`Recipient`, :class:`StoredTemplateRef`, :class:`Transmission` - transmission create body.
    * :class:`TemplateCreateResult`, :class:`TransmissionCreateResult` - success payloads.
    * :class:`Envelope` - the ``{"results": ...}`` wrapper shared by both endpoints.
    * :data:`ServerTimestamp` - ``YYYY-MM-DDTHH:MM:SS`` timestamps in UTC.
    * :data:`EmailAddress` - syntax-checked address kept exactly as given.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any, Generic, TypeVar

from email_validator import validate_email
from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
    model_validator,
)

#: Wire format of timestamps returned by the server (UTC, no offset).
SERVER_TIMESTAMP_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _parse_server_timestamp(value: Any) -> Any:
    """Parse ``YYYY-MM-DDTHH:MM:SS`` strings as UTC datetimes.

    Non-string values are passed through for Pydantic to validate.

    Example:
        >>> _parse_server_timestamp("2014-06-10T17:23:45")
        datetime.datetime(2014, 6, 10, 17, 23, 45, tzinfo=datetime.timezone.utc)
    """
    if isinstance(value, str):
        return datetime.strptime(value, SERVER_TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _format_server_timestamp(value: datetime) -> str:
    return value.astimezone(timezone.utc).strftime(SERVER_TIMESTAMP_FORMAT)


ServerTimestamp = Annotated[
    datetime,
    BeforeValidator(_parse_server_timestamp),
    PlainSerializer(_format_server_timestamp, return_type=str, when_used="json"),
]



def _check_email_syntax(value: str) -> str:
    """Reject strings that are not ``local-part@domain``; return ``value`` unchanged.

    The address is sent exactly as configured, so the normalised form
    computed by the validator is discarded. Deliverability is not checked
    and ``.test`` domains are accepted.

    Example:
        >>> _check_email_syntax("Demo@EXAMPLE.com")
        'Demo@EXAMPLE.com'
    """
    validate_email(value, check_deliverability=False, test_environment=True)
    return value


EmailAddress = Annotated[str, AfterValidator(_check_email_syntax)]


class Address(BaseModel):
    """An email address with an optional display name.

    Example:
        >>> Address(email="demo@example.com", name="Testing").name
        'Testing'
    """

    model_config = ConfigDict(frozen=True)

    email: EmailAddress
    name: str | None = None
    header_to: str | None = None


class TemplateContent(BaseModel):
    """Subject, sender, and body of a stored template.

    At least one of ``html`` and ``text`` must be set.

    Example:
        >>> content = TemplateContent(
        ...     from_=Address(email="demo@example.com"),
        ...     subject="Hi",
        ...     html="<p>Hi</p>",
        ... )
        >>> to_payload(content)["from"]
        {'email': 'demo@example.com'}
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    from_: Address = Field(alias="from")
    subject: str = Field(min_length=1)
    html: str | None = None
    text: str | None = None
    reply_to: str | None = None

    @model_validator(mode="after")
    def _require_body(self) -> TemplateContent:
        if not self.html and not self.text:
            raise ValueError("template content needs an html or a text body")
        return self


class Template(BaseModel):
    """A named template; ``id`` is assigned by the server on create."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None
    name: str = Field(min_length=1)
    description: str | None = None
    published: bool | None = None
    last_update_time: ServerTimestamp | None = None
    content: TemplateContent


class Recipient(BaseModel):
    model_config = ConfigDict(frozen=True)

    address: Address
    return_path: str | None = None


class StoredTemplateRef(BaseModel):
    """Reference to a template stored on the server.

    ``use_draft_template`` selects the unpublished draft revision, which is the
    only revision a freshly created template has.
    """

    model_config = ConfigDict(frozen=True)

    template_id: str = Field(min_length=1)
    use_draft_template: bool = False


class Transmission(BaseModel):
    """A send job addressed to an explicit recipient list."""

    model_config = ConfigDict(frozen=True)

    campaign_id: str | None = None
    return_path: str | None = None
    recipients: list[Recipient] = Field(min_length=1)
    content: StoredTemplateRef


class TemplateCreateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)


class TransmissionCreateResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str = Field(min_length=1)
    total_accepted_recipients: int = Field(ge=0)
    total_rejected_recipients: int = Field(ge=0)


ResultT = TypeVar("ResultT", bound=BaseModel)


class Envelope(BaseModel, Generic[ResultT]):
    """The ``{"results": ...}`` wrapper around every success payload.

    Example:
        >>> Envelope[TemplateCreateResult].model_validate({"results": {"id": "tmpl_1"}}).results.id
        'tmpl_1'
    """

    model_config = ConfigDict(frozen=True)

    results: ResultT


def to_payload(model: BaseModel) -> dict[str, Any]:
    """Return the canonical JSON-ready form of ``model``.

    Wire names are used and unset optional fields are omitted rather than
    emitted as ``null``; the server treats an explicit null differently from
    an absent field.

    Example:
        >>> to_payload(Recipient(address=Address(email="demo@example.com")))
        {'address': {'email': 'demo@example.com'}}
    """
    return model.model_dump(mode="json", by_alias=True, exclude_none=True)


__all__ = [
    "SERVER_TIMESTAMP_FORMAT",
    "Address",
    "EmailAddress",
    "Envelope",
    "Recipient",
    "ServerTimestamp",
    "StoredTemplateRef",
    "Template",
    "TemplateContent",
    "TemplateCreateResult",
    "Transmission",
    "TransmissionCreateResult",
    "to_payload",
]
