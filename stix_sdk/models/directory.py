"""Directory."""

from typing import Literal

from pydantic import Field, StrictStr
from stix_sdk.core.pydantic import IdentifierList, Timestamp
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class Directory(BaseObservable):
    """Represent a file system directory."""

    type: Literal["directory"] = Field(description="The type of the object.")
    path: StrictStr = Field(description="The path of the directory.")
    path_enc: StrictStr | None = Field(
        default=None,
        description="Character encoding of the path, when not Unicode.",
    )
    ctime: Timestamp | None = Field(
        default=None,
        description="Creation time of the directory.",
    )
    mtime: Timestamp | None = Field(
        default=None,
        description="Last modification time of the directory.",
    )
    atime: Timestamp | None = Field(
        default=None,
        description="Last access time of the directory.",
    )
    contains_refs: IdentifierList | None = Field(
        default=None,
        description="Files and directories contained in the directory.",
    )
