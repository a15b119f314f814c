"""STIX scalar types with custom validation and serialization logic."""

from datetime import datetime, timezone
from typing import Annotated, Any, Generic, TypeVar
from uuid import uuid4

from pydantic import (
    Field,
    GetCoreSchemaHandler,
    GetJsonSchemaHandler,
    StrictInt,
    StrictStr,
    TypeAdapter,
)
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import PydanticCustomError, core_schema
from stix_sdk.core.pydantic.parsers import ID_SEPARATOR, parse_either, split_identifier
from stix_sdk.exceptions import MalformedIdentifierError

A = TypeVar("A")
B = TypeVar("B")


class Identifier:
    """Identify a STIX object: the pair of its kind and an RFC 4122 UUID.

    The wire form is the single string `<kind>--<uuid>`. The uuid is generated
    (version 4) when omitted.

    Examples:
        >>> identifier = Identifier("report", "1358da6f-719c-42b2-aff3-df8df37af59a")
        >>> identifier.encode()
        'report--1358da6f-719c-42b2-aff3-df8df37af59a'
        >>> Identifier.decode("report--1358da6f-719c-42b2-aff3-df8df37af59a") == identifier
        True
        >>> Identifier("indicator").kind
        'indicator'

    """

    __slots__ = ("kind", "uuid")

    kind: str
    uuid: str

    def __init__(self, kind: str, uuid: str | None = None) -> None:
        """Initialize the identifier, generating a random uuid when omitted."""
        uuid = uuid if uuid is not None else str(uuid4())
        for segment in (kind, uuid):
            if not segment or ID_SEPARATOR in segment:
                raise MalformedIdentifierError(f"{kind}{ID_SEPARATOR}{uuid}")
        object.__setattr__(self, "kind", kind)
        object.__setattr__(self, "uuid", uuid)

    def __setattr__(self, name: str, value: Any) -> None:
        """Forbid mutation."""
        raise AttributeError(f"{type(self).__name__} is immutable")

    def encode(self) -> str:
        """Return the wire form."""
        return f"{self.kind}{ID_SEPARATOR}{self.uuid}"

    @classmethod
    def decode(cls, value: str) -> "Identifier":
        """Build an identifier from its wire form.

        Raises:
            MalformedIdentifierError: If `value` is not `<kind>--<uuid>`.

        """
        kind, uuid = split_identifier(value)
        return cls(kind, uuid)

    def __str__(self) -> str:
        """Return the wire form."""
        return self.encode()

    def __repr__(self) -> str:
        """Return the representation of the identifier."""
        return f"{type(self).__name__}({self.kind!r}, {self.uuid!r})"

    def __eq__(self, other: Any) -> bool:
        """Compare kind and uuid."""
        if not isinstance(other, Identifier):
            return NotImplemented
        return (self.kind, self.uuid) == (other.kind, other.uuid)

    def __hash__(self) -> int:
        """Hash the wire form."""
        return hash(self.encode())

    @classmethod
    def _validate(cls, value: Any) -> "Identifier":
        if isinstance(value, Identifier):
            return value
        if not isinstance(value, str):
            raise PydanticCustomError(
                "identifier_type", "Input should be a string identifier"
            )
        try:
            return cls.decode(value)
        except MalformedIdentifierError:
            raise PydanticCustomError(
                "malformed_identifier",
                "Invalid STIX identifier '{value}'",
                {"value": value},
            ) from None

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Return the Pydantic core schema for the Identifier class. Called by Pydantic."""
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda identifier: identifier.encode()
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe the wire form in JSON schema."""
        return {"type": "string", "pattern": "^[^-]+(-[^-]+)*--[^-]+(-[^-]+)*$"}


class Timestamp(str):
    """An RFC 3339 timestamp, kept as its canonical string.

    Decoding passes the string through verbatim: no reformatting and no
    conformance check. Ordering is lexical, which follows time order for the
    fixed-width, zero-offset form produced by `now` and `from_datetime`.

    Examples:
        >>> Timestamp("2016-01-20T12:31:12Z") < Timestamp("2016-01-20T12:31:12.5Z")
        True

    """

    __slots__ = ()

    @classmethod
    def now(cls) -> "Timestamp":
        """Return the current instant, e.g. `2016-01-20T12:31:12.123Z`."""
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def from_datetime(cls, value: datetime) -> "Timestamp":
        """Render an aware datetime in the canonical zero-offset form, millisecond precision."""
        if value.tzinfo is None:
            raise ValueError("Cannot build a Timestamp from a naive datetime.")
        value = value.astimezone(timezone.utc)
        return cls(
            f"{value.strftime('%Y-%m-%dT%H:%M:%S')}.{value.microsecond // 1000:03d}Z"
        )

    def to_datetime(self) -> datetime:
        """Parse the timestamp.

        Raises:
            ValueError: If the string is not a valid ISO 8601 / RFC 3339 date-time.

        """
        return datetime.fromisoformat(str(self))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Return the Pydantic core schema for the Timestamp class. Called by Pydantic."""
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(strict=True),
            serialization=core_schema.to_string_ser_schema(),
        )


class Either(Generic[A, B]):
    """A field shape accepting two alternatives, e.g. a number or a string.

    Decoding tries the first alternative, then the second; the held Python type
    records which one matched, so the value re-encodes to its original JSON shape.

    Examples:
        >>> from pydantic import BaseModel
        >>> class Tags(BaseModel):
        ...     exif: dict[str, Either[int, str]]
        >>> Tags.model_validate({"exif": {"Make": "Nikon", "XResolution": 4928}}).exif
        {'Make': 'Nikon', 'XResolution': 4928}

    """

    alternatives: tuple[Any, Any]

    @classmethod
    def __class_getitem__(cls, alternatives: tuple[Any, Any]) -> type["Either[A, B]"]:  # type: ignore[override]
        """Allow subscripting like Either[int, str]."""
        first, second = alternatives

        # A dedicated subclass keeps each subscription's alternatives apart.
        class NewEither(Either):  # type: ignore[type-arg]
            """An Either class with its own alternatives."""

        NewEither.alternatives = (first, second)
        NewEither.__name__ = f"Either[{_type_name(first)}, {_type_name(second)}]"
        return NewEither

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """Return the Pydantic core schema for the Either class. Called by Pydantic."""
        first, second = (TypeAdapter(alternative) for alternative in cls.alternatives)

        def validate(value: Any) -> Any:
            return parse_either(value, first, second)

        return core_schema.no_info_plain_validator_function(validate)

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        """Describe both alternatives in JSON schema."""
        return {
            "anyOf": [
                TypeAdapter(alternative).json_schema()
                for alternative in cls.alternatives
            ]
        }


def _type_name(annotation: Any) -> str:
    return getattr(annotation, "__name__", None) or str(annotation)


LongOrString = Either[int, str]
StringOrStringList = Either[str, list[str]]

StringList = list[StrictStr]
IdentifierList = list[Identifier]
Hashes = dict[StrictStr, StrictStr]
Confidence = Annotated[StrictInt, Field(ge=0, le=100)]
