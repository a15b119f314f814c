"""Offers a collection of custom exceptions raised while handling STIX documents."""

from typing import Any

Loc = tuple[str | int, ...]


class StixError(Exception):
    """Base class for every error raised by the package."""


class ConfigError(StixError):
    """Base class for configuration-related errors.

    This exception is raised when the settings of the package cannot be loaded,
    e.g. an environment variable holds a value of the wrong type.
    It signals an actionable problem in configuration.
    """


class StixDecodeError(StixError):
    """Base class for structural errors met while decoding a STIX JSON value.

    A decode error is local and recoverable by the caller: the offending value is
    rejected as a whole and no partial object is ever returned.

    Attributes:
        loc (tuple): Path of the offending field, from the decoded object root.
        errors (list): Every error reported for the value, pydantic-style dicts.
    """

    def __init__(
        self,
        message: str,
        loc: Loc = (),
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize the decode error."""
        super().__init__(message)
        self.message = message
        self.loc = tuple(loc)
        self.errors = errors or []

    @property
    def field(self) -> str:
        """Return the offending field path in dotted notation."""
        return ".".join(str(part) for part in self.loc)

    def with_prefix(self, *prefix: str | int) -> "StixDecodeError":
        """Return the same error located under `prefix`."""
        self.loc = (*prefix, *self.loc)
        return self

    def __str__(self) -> str:
        """Return the string representation of the decode error."""
        if self.loc:
            return f"{self.field}: {self.message}"
        return self.message


class MissingRequiredFieldError(StixDecodeError):
    """Raised when a required field is absent from the decoded object."""

    def __init__(
        self, loc: Loc, errors: list[dict[str, Any]] | None = None
    ) -> None:
        """Initialize the error for the missing field at `loc`."""
        super().__init__("Required field is missing.", loc, errors)


class FieldTypeMismatchError(StixDecodeError):
    """Raised when a present field holds a JSON value of an incompatible shape.

    Attributes:
        expected (str): Description of the declared shape of the field.
    """

    def __init__(
        self,
        loc: Loc,
        expected: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize the error for the field at `loc`."""
        super().__init__(expected, loc, errors)
        self.expected = expected


class UnknownDiscriminatorError(StixDecodeError):
    """Raised when a closed family without catch-all meets an unknown discriminator.

    Attributes:
        family (str): Name of the family the lookup was made in.
        value (str): The raw discriminator value.
    """

    def __init__(self, family: str, value: Any, loc: Loc = ()) -> None:
        """Initialize the error for the discriminator `value`."""
        super().__init__(f"Unknown {family} discriminator {value!r}.", loc)
        self.family = family
        self.value = value


class MalformedIdentifierError(StixDecodeError):
    """Raised when a string is not a valid `<kind>--<uuid>` identifier.

    Attributes:
        value (str): The rejected string.
    """

    def __init__(self, value: Any, loc: Loc = ()) -> None:
        """Initialize the error for the identifier `value`."""
        super().__init__(f"Invalid STIX identifier {value!r}.", loc)
        self.value = value


class MalformedFlexibleValueError(StixDecodeError):
    """Raised when none of the alternatives of a multi-shape field accepts the value."""
