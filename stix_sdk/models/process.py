"""Process."""

from typing import Literal

from pydantic import Field, StrictBool, StrictInt, StrictStr
from stix_sdk.core.pydantic import Identifier, IdentifierList, Timestamp
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class Process(BaseObservable):
    """Represent a computer program instance executed on an operating system."""

    type: Literal["process"] = Field(description="The type of the object.")
    is_hidden: StrictBool | None = None
    pid: StrictInt | None = Field(
        default=None,
        description="Process ID.",
    )
    created_time: Timestamp | None = None
    cwd: StrictStr | None = Field(
        default=None,
        description="Current working directory of the process.",
    )
    command_line: StrictStr | None = Field(
        default=None,
        description="Full command line used to execute the process.",
    )
    environment_variables: dict[StrictStr, StrictStr] | None = None
    opened_connection_refs: IdentifierList | None = None
    creator_user_ref: Identifier | None = None
    image_ref: Identifier | None = Field(
        default=None,
        description="The executable file of the process.",
    )
    parent_ref: Identifier | None = None
    child_refs: IdentifierList | None = None
