"""Decode and encode STIX 2.1 JSON documents.

A `StixCodec` carries one registry per closed family and routes every decoded
JSON object to the model selected by its discriminator. Nested dispatch
(observable extensions, marking definitions) reaches the same codec through
the pydantic validation context.

Examples:
    >>> report = decode_sdo(
    ...     {
    ...         "type": "report",
    ...         "spec_version": "2.1",
    ...         "id": "report--1358da6f-719c-42b2-aff3-df8df37af59a",
    ...         "created": "2016-01-20T12:31:12.123Z",
    ...         "modified": "2016-01-20T12:31:12.123Z",
    ...         "name": "analysis id 1",
    ...         "published": "2016-01-20T12:31:12Z",
    ...         "object_refs": [],
    ...     }
    ... )
    >>> type(report).__name__
    'Report'
"""

import json
import logging
from collections.abc import Mapping
from typing import Any

from stix_sdk.exceptions import FieldTypeMismatchError, MissingRequiredFieldError
from stix_sdk.exceptions.error import Loc
from stix_sdk.models import (
    URL,
    ArchiveExt,
    Artifact,
    AttackPattern,
    AutonomousSystem,
    BaseIdentifiedObject,
    BaseObject,
    Bundle,
    Campaign,
    CourseOfAction,
    CustomExtension,
    CustomObservable,
    CustomStix,
    Directory,
    DomainName,
    EmailAddress,
    EmailMessage,
    File,
    HTTPRequestExt,
    ICMPExt,
    Identity,
    Indicator,
    IntrusionSet,
    IPV4Address,
    IPV6Address,
    MACAddress,
    Malware,
    MarkingDefinition,
    Mutex,
    NetworkTraffic,
    NTFSExt,
    ObservedData,
    PDFExt,
    Process,
    RasterImageExt,
    Relationship,
    Report,
    Sighting,
    SocketExt,
    Software,
    StatementMarking,
    TCPExt,
    ThreatActor,
    TLPMarking,
    Tool,
    UnixAccountExt,
    UserAccount,
    Vulnerability,
    WindowsPEBinaryExt,
    WindowsProcessExt,
    WindowsRegistryKey,
    WindowsServiceExt,
    X509Certificate,
    X509V3Extensions,
)
from stix_sdk.models._model_registry import (
    CODEC_CONTEXT_KEY,
    DOMAIN_OBJECTS,
    EXTENSIONS,
    MARKINGS,
    OBSERVABLES,
    RELATIONSHIP_OBJECTS,
    FamilyRegistry,
    validate_model,
)
from stix_sdk.settings import StixSdkSettings

logger = logging.getLogger(__name__)

StixDomainObject = (
    AttackPattern
    | Campaign
    | CourseOfAction
    | Identity
    | Indicator
    | IntrusionSet
    | Malware
    | ObservedData
    | Report
    | ThreatActor
    | Tool
    | Vulnerability
    | CustomStix
)
StixRelationshipObject = Relationship | Sighting
Observable = (
    Artifact
    | AutonomousSystem
    | Directory
    | DomainName
    | EmailAddress
    | EmailMessage
    | File
    | IPV4Address
    | IPV6Address
    | MACAddress
    | Mutex
    | NetworkTraffic
    | Process
    | Software
    | URL
    | UserAccount
    | WindowsRegistryKey
    | X509Certificate
    | CustomObservable
)
MarkingObject = TLPMarking | StatementMarking
Extension = (
    ArchiveExt
    | NTFSExt
    | PDFExt
    | RasterImageExt
    | WindowsPEBinaryExt
    | HTTPRequestExt
    | ICMPExt
    | TCPExt
    | SocketExt
    | WindowsProcessExt
    | WindowsServiceExt
    | UnixAccountExt
    | X509V3Extensions
    | CustomExtension
)


class StixCodec:
    """Route STIX JSON objects to their models and back.

    Each codec owns copies of the family registries: registering a model on one
    codec leaves the others untouched.

    Examples:
        >>> from typing import Literal
        >>> from stix_sdk.models import BaseDomainObject
        >>> codec = StixCodec()
        >>> @codec.domain_objects.register
        ... class Widget(BaseDomainObject):
        ...     type: Literal["x-acme-widget"]

    """

    def __init__(self, settings: StixSdkSettings | None = None) -> None:
        """Initialize the codec with the registries filled at import."""
        self.domain_objects: FamilyRegistry = DOMAIN_OBJECTS.copy()
        self.relationship_objects: FamilyRegistry = RELATIONSHIP_OBJECTS.copy()
        self.observables: FamilyRegistry = OBSERVABLES.copy()
        self.markings: FamilyRegistry = MARKINGS.copy()
        self.extensions: FamilyRegistry = EXTENSIONS.copy()
        self._settings = settings

    @property
    def settings(self) -> StixSdkSettings:
        """Return the settings, read from the environment on first use."""
        if self._settings is None:
            self._settings = StixSdkSettings()
        return self._settings

    @property
    def _context(self) -> dict[str, Any]:
        return {CODEC_CONTEXT_KEY: self}

    def decode_sdo(self, data: Any) -> StixDomainObject:
        """Decode a STIX Domain Object, unknown kinds as `CustomStix`.

        Raises:
            StixDecodeError: On any structural error.
        """
        kind = _read_discriminator(data, "type")
        return self.domain_objects.decode(kind, data, context=self._context)  # type: ignore[return-value]

    def decode_sro(self, data: Any) -> StixRelationshipObject:
        """Decode a STIX Relationship Object.

        Raises:
            UnknownDiscriminatorError: If `type` is neither relationship nor sighting.
        """
        kind = _read_discriminator(data, "type")
        return self.relationship_objects.decode(kind, data, context=self._context)  # type: ignore[return-value]

    def decode_observable(self, data: Any) -> Observable:
        """Decode a cyber observable, unknown kinds as `CustomObservable`."""
        kind = _read_discriminator(data, "type")
        return self.observables.decode(kind, data, context=self._context)  # type: ignore[return-value]

    def decode_marking_definition(self, data: Any) -> MarkingDefinition:
        """Decode a marking definition, its `definition` selected by `definition_type`."""
        return validate_model(MarkingDefinition, data, context=self._context)

    def decode_marking_object(self, definition_type: str, data: Any) -> MarkingObject:
        """Decode the `definition` of a marking definition of the given type."""
        return self.markings.decode(definition_type, data, context=self._context)  # type: ignore[return-value]

    def decode_extension(self, name: str, data: Any) -> Extension:
        """Decode the body of the extension stored under `name`.

        Raises:
            UnknownDiscriminatorError: If `name` is unknown and not a custom extension name.
        """
        return self.extensions.decode(name, data, context=self._context)  # type: ignore[return-value]

    def decode_bundle(self, data: Any) -> Bundle:
        """Decode the envelope of a bundle, its objects left as raw JSON."""
        return validate_model(Bundle, data, context=self._context)

    def decode_bundle_objects(self, bundle: Bundle) -> list[BaseIdentifiedObject]:
        """Decode every object of `bundle`, in order.

        Raises:
            StixDecodeError: Located under `objects.<index>` for the first failing object.
        """
        return [
            self.parse(obj, loc=("objects", index))
            for index, obj in enumerate(bundle.objects)
        ]

    def parse(self, data: Any, loc: Loc = ()) -> BaseIdentifiedObject:
        """Decode any top-level STIX object, routed on its `type`.

        Bundles, marking definitions, relationship objects and observables are
        recognized; anything else decodes as a domain object. Unknown kinds
        become `CustomStix`, or `CustomObservable` when they carry no `created`
        (observables have no creation time).
        """
        kind = _read_discriminator(data, "type", loc)
        if kind == "bundle":
            return validate_model(Bundle, data, context=self._context, loc=loc)
        if kind == "marking-definition":
            return validate_model(MarkingDefinition, data, context=self._context, loc=loc)
        for registry in (self.relationship_objects, self.observables):
            if kind in registry:
                return registry.decode(kind, data, context=self._context, loc=loc)  # type: ignore[return-value]
        if kind not in self.domain_objects and "created" not in data:
            return self.observables.decode(kind, data, context=self._context, loc=loc)  # type: ignore[return-value]
        return self.domain_objects.decode(kind, data, context=self._context, loc=loc)  # type: ignore[return-value]

    def encode(self, obj: BaseObject) -> dict[str, Any]:
        """Return the JSON value of `obj`, encoded by its own model."""
        return obj.encode()

    def loads(self, text: str | bytes) -> BaseIdentifiedObject:
        """Parse a JSON text and decode the top-level object it holds.

        Raises:
            json.JSONDecodeError: If `text` is not JSON.
            StixDecodeError: If the JSON value is not a valid STIX object.
        """
        return self.parse(json.loads(text))

    def dumps(self, obj: BaseObject | Mapping[str, Any]) -> str:
        """Print `obj` as JSON text, following the printer settings."""
        value = obj.encode() if isinstance(obj, BaseObject) else obj
        settings = self.settings
        return json.dumps(
            value,
            sort_keys=settings.sort_keys,
            indent=settings.indent,
            ensure_ascii=settings.ensure_ascii,
        )


def _read_discriminator(data: Any, key: str, loc: Loc = ()) -> str:
    if not isinstance(data, Mapping):
        raise FieldTypeMismatchError(loc, "Input should be a JSON object")
    if key not in data:
        raise MissingRequiredFieldError((*loc, key))
    value = data[key]
    if not isinstance(value, str):
        raise FieldTypeMismatchError((*loc, key), "Input should be a valid string")
    return value


DEFAULT_CODEC = StixCodec()


def decode_sdo(data: Any) -> StixDomainObject:
    """Decode a STIX Domain Object with the default codec."""
    return DEFAULT_CODEC.decode_sdo(data)


def decode_sro(data: Any) -> StixRelationshipObject:
    """Decode a STIX Relationship Object with the default codec."""
    return DEFAULT_CODEC.decode_sro(data)


def decode_observable(data: Any) -> Observable:
    """Decode a cyber observable with the default codec."""
    return DEFAULT_CODEC.decode_observable(data)


def decode_marking_definition(data: Any) -> MarkingDefinition:
    """Decode a marking definition with the default codec."""
    return DEFAULT_CODEC.decode_marking_definition(data)


def decode_extension(name: str, data: Any) -> Extension:
    """Decode an observable extension with the default codec."""
    return DEFAULT_CODEC.decode_extension(name, data)


def decode_bundle(data: Any) -> Bundle:
    """Decode a bundle envelope with the default codec."""
    return DEFAULT_CODEC.decode_bundle(data)


def decode_bundle_objects(bundle: Bundle) -> list[BaseIdentifiedObject]:
    """Decode the objects of a bundle with the default codec."""
    return DEFAULT_CODEC.decode_bundle_objects(bundle)


def parse(data: Any) -> BaseIdentifiedObject:
    """Decode any top-level STIX object with the default codec."""
    return DEFAULT_CODEC.parse(data)


def encode(obj: BaseObject) -> dict[str, Any]:
    """Return the JSON value of `obj`."""
    return DEFAULT_CODEC.encode(obj)


def loads(text: str | bytes) -> BaseIdentifiedObject:
    """Decode a JSON text with the default codec."""
    return DEFAULT_CODEC.loads(text)


def dumps(obj: BaseObject | Mapping[str, Any]) -> str:
    """Print `obj` as JSON text with the default codec."""
    return DEFAULT_CODEC.dumps(obj)
