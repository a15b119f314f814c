"""Offer the predefined cyber-observable extensions.

An extension is selected by its key in the `extensions` map of an observable:
the key is the discriminator, the value the extension body.
"""

from abc import ABC
from typing import ClassVar

from pydantic import Field, StrictBool, StrictFloat, StrictInt, StrictStr
from stix_sdk.core.pydantic import (
    Hashes,
    Identifier,
    IdentifierList,
    LongOrString,
    StringList,
    Timestamp,
)
from stix_sdk.models._model_registry import EXTENSIONS
from stix_sdk.models.base_object import BaseObject


class BaseExtension(BaseObject, ABC):
    """Base class of the observable extensions."""

    extension_name: ClassVar[str | None] = None

    @classmethod
    def discriminator(cls) -> str | None:
        """Return the key under which the extension is stored."""
        return cls.extension_name


@EXTENSIONS.register
class ArchiveExt(BaseExtension):
    """Properties specific to archive files."""

    extension_name: ClassVar[str | None] = "archive-ext"

    contains_refs: IdentifierList = Field(
        description="The files and directories contained in the archive.",
    )
    comment: StrictStr | None = Field(
        default=None,
        description="Comment included as part of the archive file.",
    )


class AlternateDataStream(BaseObject):
    """An NTFS alternate data stream."""

    name: StrictStr = Field(description="Name of the alternate data stream.")
    hashes: Hashes | None = Field(
        default=None,
        description="Hashes of the data contained in the stream.",
    )
    size: StrictInt | None = Field(
        default=None,
        description="Size of the stream, in bytes.",
        ge=0,
    )


@EXTENSIONS.register
class NTFSExt(BaseExtension):
    """Properties specific to the storage of the file on the NTFS file system."""

    extension_name: ClassVar[str | None] = "ntfs-ext"

    sid: StrictStr | None = Field(
        default=None,
        description="Security ID (SID) value assigned to the file.",
    )
    alternate_data_streams: list[AlternateDataStream] | None = Field(
        default=None,
        description="Alternate data streams of the file.",
    )


@EXTENSIONS.register
class PDFExt(BaseExtension):
    """Properties specific to PDF files."""

    extension_name: ClassVar[str | None] = "pdf-ext"

    version: StrictStr | None = Field(
        default=None,
        description="Decimal version number of the PDF specification used.",
    )
    is_optimized: StrictBool | None = Field(
        default=None,
        description="Whether the PDF file has been optimized.",
    )
    document_info_dict: dict[StrictStr, StrictStr] | None = Field(
        default=None,
        description="Information dictionary of the PDF document.",
    )
    pdfid0: StrictStr | None = Field(
        default=None,
        description="First file identifier found for the PDF file.",
    )
    pdfid1: StrictStr | None = Field(
        default=None,
        description="Second file identifier found for the PDF file.",
    )


@EXTENSIONS.register
class RasterImageExt(BaseExtension):
    """Properties specific to raster image files.

    Examples:
        >>> ext = RasterImageExt(exif_tags={"Make": "Nikon", "XResolution": 4928})
        >>> ext.encode()
        {'exif_tags': {'Make': 'Nikon', 'XResolution': 4928}}
    """

    extension_name: ClassVar[str | None] = "raster-image-ext"

    image_height: StrictInt | None = Field(
        default=None,
        description="Height of the image, in pixels.",
    )
    image_width: StrictInt | None = Field(
        default=None,
        description="Width of the image, in pixels.",
    )
    bits_per_pixel: StrictInt | None = Field(
        default=None,
        description="Sum of bits used for each color channel of the image.",
    )
    exif_tags: dict[StrictStr, LongOrString] | None = Field(
        default=None,
        description="EXIF tags of the image, integer or string valued.",
    )


class WindowsPEOptionalHeader(BaseObject):
    """Properties of the optional header of a PE binary."""

    magic_hex: StrictStr | None = None
    major_linker_version: StrictInt | None = None
    minor_linker_version: StrictInt | None = None
    size_of_code: StrictInt | None = None
    size_of_initialized_data: StrictInt | None = None
    size_of_uninitialized_data: StrictInt | None = None
    address_of_entry_point: StrictInt | None = None
    base_of_code: StrictInt | None = None
    base_of_data: StrictInt | None = None
    image_base: StrictInt | None = None
    section_alignment: StrictInt | None = None
    file_alignment: StrictInt | None = None
    major_os_version: StrictInt | None = None
    minor_os_version: StrictInt | None = None
    major_image_version: StrictInt | None = None
    minor_image_version: StrictInt | None = None
    major_subsystem_version: StrictInt | None = None
    minor_subsystem_version: StrictInt | None = None
    win32_version_value_hex: StrictStr | None = None
    size_of_image: StrictInt | None = None
    size_of_headers: StrictInt | None = None
    checksum_hex: StrictStr | None = None
    subsystem_hex: StrictStr | None = None
    dll_characteristics_hex: StrictStr | None = None
    size_of_stack_reserve: StrictInt | None = None
    size_of_stack_commit: StrictInt | None = None
    size_of_heap_reserve: StrictInt | None = None
    size_of_heap_commit: StrictInt | None = None
    loader_flags_hex: StrictStr | None = None
    number_of_rva_and_sizes: StrictInt | None = None
    hashes: Hashes | None = None


class WindowsPESection(BaseObject):
    """Metadata about a section of a PE binary."""

    name: StrictStr = Field(description="Name of the section.")
    size: StrictInt | None = Field(
        default=None,
        description="Size of the section, in bytes.",
        ge=0,
    )
    entropy: StrictFloat | StrictInt | None = Field(
        default=None,
        description="Calculated entropy of the section.",
    )
    hashes: Hashes | None = Field(
        default=None,
        description="Hashes of the section.",
    )


@EXTENSIONS.register
class WindowsPEBinaryExt(BaseExtension):
    """Properties specific to Windows portable executable (PE) files."""

    extension_name: ClassVar[str | None] = "windows-pebinary-ext"

    pe_type: StrictStr = Field(description="Type of the PE binary (exe, dll, sys).")
    imphash: StrictStr | None = Field(
        default=None,
        description="Special import hash of the PE binary.",
    )
    machine_hex: StrictStr | None = Field(
        default=None,
        description="Type of target machine.",
    )
    number_of_sections: StrictInt | None = Field(
        default=None,
        description="Number of sections of the PE binary.",
        ge=0,
    )
    time_date_stamp: Timestamp | None = Field(
        default=None,
        description="Time at which the PE binary was created.",
    )
    pointer_to_symbol_table_hex: StrictStr | None = Field(
        default=None,
        description="File offset of the COFF symbol table.",
    )
    number_of_symbols: StrictInt | None = Field(
        default=None,
        description="Number of entries in the symbol table.",
        ge=0,
    )
    size_of_optional_header: StrictInt | None = Field(
        default=None,
        description="Size of the optional header of the PE binary.",
        ge=0,
    )
    characteristics_hex: StrictStr | None = Field(
        default=None,
        description="Flags indicating the attributes of the file.",
    )
    file_header_hashes: Hashes | None = Field(
        default=None,
        description="Hashes of the file header of the PE binary.",
    )
    optional_header: WindowsPEOptionalHeader | None = Field(
        default=None,
        description="The PE optional header.",
    )
    sections: list[WindowsPESection] | None = Field(
        default=None,
        description="Metadata about the sections of the PE binary.",
    )


@EXTENSIONS.register
class HTTPRequestExt(BaseExtension):
    """Network traffic properties specific to HTTP requests."""

    extension_name: ClassVar[str | None] = "http-request-ext"

    request_method: StrictStr = Field(description="HTTP method of the request.")
    request_value: StrictStr = Field(description="Value (typically a resource path) of the request.")
    request_version: StrictStr | None = Field(
        default=None,
        description="HTTP version of the request.",
    )
    request_header: dict[StrictStr, StrictStr] | None = Field(
        default=None,
        description="Header fields of the request.",
    )
    message_body_length: StrictInt | None = Field(
        default=None,
        description="Length of the message body, in bytes.",
    )
    message_body_data_ref: Identifier | None = Field(
        default=None,
        description="The artifact holding the message body.",
    )


@EXTENSIONS.register
class ICMPExt(BaseExtension):
    """Network traffic properties specific to ICMP."""

    extension_name: ClassVar[str | None] = "icmp-ext"

    icmp_type_hex: StrictStr = Field(description="ICMP type byte.")
    icmp_code_hex: StrictStr = Field(description="ICMP code byte.")


@EXTENSIONS.register
class TCPExt(BaseExtension):
    """Network traffic properties specific to TCP."""

    extension_name: ClassVar[str | None] = "tcp-ext"

    src_flags_hex: StrictStr | None = Field(
        default=None,
        description="Flags of the source, as the union of all TCP flags observed.",
    )
    dst_flags_hex: StrictStr | None = Field(
        default=None,
        description="Flags of the destination, as the union of all TCP flags observed.",
    )


@EXTENSIONS.register
class SocketExt(BaseExtension):
    """Network traffic properties associated with network sockets."""

    extension_name: ClassVar[str | None] = "socket-ext"

    address_family: StrictStr = Field(description="Address family of the socket (AF_INET, ...).")
    is_blocking: StrictBool | None = Field(
        default=None,
        description="Whether the socket is in blocking mode.",
    )
    is_listening: StrictBool | None = Field(
        default=None,
        description="Whether the socket is in listening mode.",
    )
    options: dict[StrictStr, LongOrString] | None = Field(
        default=None,
        description="Socket options (SO_*), integer or string valued.",
    )
    socket_type: StrictStr | None = Field(
        default=None,
        description="Type of the socket (SOCK_STREAM, ...).",
    )
    socket_descriptor: StrictInt | None = Field(
        default=None,
        description="Socket file descriptor value.",
        ge=0,
    )
    socket_handle: StrictInt | None = Field(
        default=None,
        description="Handle or inode value of the socket.",
    )


@EXTENSIONS.register
class WindowsProcessExt(BaseExtension):
    """Properties specific to Windows processes."""

    extension_name: ClassVar[str | None] = "windows-process-ext"

    aslr_enabled: StrictBool | None = None
    dep_enabled: StrictBool | None = None
    priority: StrictStr | None = None
    owner_sid: StrictStr | None = None
    window_title: StrictStr | None = None
    startup_info: dict[StrictStr, StrictStr] | None = None
    integrity_level: StrictStr | None = None


@EXTENSIONS.register
class WindowsServiceExt(BaseExtension):
    """Properties specific to Windows services."""

    extension_name: ClassVar[str | None] = "windows-service-ext"

    service_name: StrictStr = Field(description="Name of the service.")
    descriptions: StringList | None = None
    display_name: StrictStr | None = None
    group_name: StrictStr | None = None
    start_type: StrictStr | None = None
    service_dll_refs: IdentifierList | None = None
    service_type: StrictStr | None = None
    service_status: StrictStr | None = None


@EXTENSIONS.register
class UnixAccountExt(BaseExtension):
    """Additional information for an account on a UNIX system."""

    extension_name: ClassVar[str | None] = "unix-account-ext"

    gid: StrictInt | None = Field(
        default=None,
        description="Primary group ID of the account.",
    )
    groups: StringList | None = Field(
        default=None,
        description="Names of the groups the account is a member of.",
    )
    home_dir: StrictStr | None = Field(
        default=None,
        description="Home directory of the account.",
    )
    shell: StrictStr | None = Field(
        default=None,
        description="Shell of the account.",
    )


@EXTENSIONS.register
class X509V3Extensions(BaseExtension):
    """Properties associated with X.509 v3 extensions, e.g. alternative subject names."""

    extension_name: ClassVar[str | None] = "x509-v3-extensions-type"

    basic_constraints: StrictStr | None = None
    name_constraints: StrictStr | None = None
    policy_constraints: StrictStr | None = None
    key_usage: StrictStr | None = None
    extended_key_usage: StrictStr | None = None
    subject_key_identifier: StrictStr | None = None
    authority_key_identifier: StrictStr | None = None
    subject_alternative_name: StrictStr | None = None
    issuer_alternative_name: StrictStr | None = None
    subject_directory_attributes: StrictStr | None = None
    crl_distribution_points: StrictStr | None = None
    inhibit_any_policy: StrictStr | None = None
    private_key_usage_period_not_before: Timestamp | None = None
    private_key_usage_period_not_after: Timestamp | None = None
    certificate_policies: StrictStr | None = None
    policy_mappings: StrictStr | None = None


@EXTENSIONS.register_catch_all
class CustomExtension(BaseExtension):
    """An extension named `x-...` or `extension-definition--...`.

    Its whole body is kept as custom properties.
    """
