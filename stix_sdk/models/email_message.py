"""EmailMessage."""

from typing import Literal

from pydantic import Field, StrictBool, StrictStr
from stix_sdk.core.pydantic import (
    Identifier,
    IdentifierList,
    StringList,
    StringOrStringList,
    Timestamp,
)
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_object import BaseObject
from stix_sdk.models.base_observable import BaseObservable


class EmailMimeComponent(BaseObject):
    """One component of a multi-part email body."""

    body: StrictStr | None = Field(
        default=None,
        description="Contents of the component, when text.",
    )
    body_raw_ref: Identifier | None = Field(
        default=None,
        description="The artifact or file holding the non-textual contents.",
    )
    content_type: StrictStr | None = Field(
        default=None,
        description="Value of the Content-Type header of the component.",
    )
    content_disposition: StrictStr | None = Field(
        default=None,
        description="Value of the Content-Disposition header of the component.",
    )


@OBSERVABLES.register
class EmailMessage(BaseObservable):
    """Represent an email message.

    Notes:
        - `additional_header_fields` values are either a string or a list of
          strings, for headers repeated in the message.
    """

    type: Literal["email-message"] = Field(description="The type of the object.")
    is_multipart: StrictBool = Field(
        description="Whether the email body contains multiple MIME parts.",
    )
    date: Timestamp | None = Field(
        default=None,
        description="The date/time the message was sent.",
    )
    content_type: StrictStr | None = Field(
        default=None,
        description="Value of the Content-Type header of the message.",
    )
    from_ref: Identifier | None = Field(
        default=None,
        description="The email address of the From header.",
    )
    sender_ref: Identifier | None = Field(
        default=None,
        description="The email address of the Sender header.",
    )
    to_refs: IdentifierList | None = Field(
        default=None,
        description="The email addresses of the To header.",
    )
    cc_refs: IdentifierList | None = Field(
        default=None,
        description="The email addresses of the CC header.",
    )
    bcc_refs: IdentifierList | None = Field(
        default=None,
        description="The email addresses of the BCC header.",
    )
    message_id: StrictStr | None = Field(
        default=None,
        description="Value of the Message-ID header.",
    )
    subject: StrictStr | None = Field(
        default=None,
        description="Subject of the message.",
    )
    received_lines: StringList | None = Field(
        default=None,
        description="Received header fields, in the order they appear.",
    )
    additional_header_fields: dict[StrictStr, StringOrStringList] | None = Field(
        default=None,
        description="Other header fields of the message.",
    )
    body: StrictStr | None = Field(
        default=None,
        description="Body of the message, when not multipart.",
    )
    body_multipart: list[EmailMimeComponent] | None = Field(
        default=None,
        description="The MIME parts of the message, when multipart.",
    )
    raw_email_ref: Identifier | None = Field(
        default=None,
        description="The artifact holding the raw message.",
    )
