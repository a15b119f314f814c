"""UserAccount."""

from typing import Literal

from pydantic import Field, StrictBool, StrictStr
from stix_sdk.core.pydantic import Timestamp
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class UserAccount(BaseObservable):
    """Represent an instance of any type of user account.

    UNIX specific properties ride in the `unix-account-ext` extension.
    """

    type: Literal["user-account"] = Field(description="The type of the object.")
    user_id: StrictStr | None = Field(
        default=None,
        description="Identifier of the account (UID, SID, ...).",
    )
    credential: StrictStr | None = Field(
        default=None,
        description="Cleartext credential of the account.",
    )
    account_login: StrictStr | None = Field(
        default=None,
        description="Login of the account.",
    )
    account_type: StrictStr | None = Field(
        default=None,
        description="Type of the account (unix, windows-local, ...).",
    )
    display_name: StrictStr | None = None
    is_service_account: StrictBool | None = None
    is_privileged: StrictBool | None = None
    can_escalate_privs: StrictBool | None = None
    is_disabled: StrictBool | None = None
    account_created: Timestamp | None = None
    account_expires: Timestamp | None = None
    credential_last_changed: Timestamp | None = None
    account_first_login: Timestamp | None = None
    account_last_login: Timestamp | None = None
