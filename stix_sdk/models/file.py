"""File."""

from typing import Literal

from pydantic import Field, StrictInt, StrictStr
from stix_sdk.core.pydantic import Hashes, Identifier, IdentifierList, Timestamp
from stix_sdk.models._model_registry import OBSERVABLES
from stix_sdk.models.base_observable import BaseObservable


@OBSERVABLES.register
class File(BaseObservable):
    """Represent a file.

    Examples:
        >>> file = File.new(name="example.exe", hashes={"SHA-256": "..."}, size=1024)

    Notes:
        - One of `hashes` or `name` should be set.
        - Type specific properties ride in `extensions` (archive-ext, ntfs-ext,
          pdf-ext, raster-image-ext, windows-pebinary-ext).

    """

    type: Literal["file"] = Field(description="The type of the object.")
    hashes: Hashes | None = Field(
        default=None,
        description="A dictionary of hashes for the file.",
    )
    size: StrictInt | None = Field(
        default=None,
        description="The size of the file in bytes.",
        ge=0,
    )
    name: StrictStr | None = Field(
        default=None,
        description="The name of the file.",
    )
    name_enc: StrictStr | None = Field(
        default=None,
        description="Character encoding of the name, when not Unicode.",
    )
    magic_number_hex: StrictStr | None = Field(
        default=None,
        description="Hexadecimal constant associated with the file format.",
    )
    mime_type: StrictStr | None = Field(
        default=None,
        description="MIME type of the file.",
    )
    ctime: Timestamp | None = Field(
        default=None,
        description="Date/time the file was created.",
    )
    mtime: Timestamp | None = Field(
        default=None,
        description="Date/time the file was last written to.",
    )
    atime: Timestamp | None = Field(
        default=None,
        description="Date/time the file was last accessed.",
    )
    parent_directory_ref: Identifier | None = Field(
        default=None,
        description="The directory holding the file.",
    )
    contains_refs: IdentifierList | None = Field(
        default=None,
        description="Other objects contained within the file.",
    )
    content_ref: Identifier | None = Field(
        default=None,
        description="The artifact holding the content of the file.",
    )
