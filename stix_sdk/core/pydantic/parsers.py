"""Common parsers for the STIX wire representations."""

from typing import Any

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticCustomError
from stix_sdk.exceptions import MalformedIdentifierError

ID_SEPARATOR = "--"


def split_identifier(value: str) -> tuple[str, str]:
    """Split a `<kind>--<uuid>` string into its two segments.

    Parameters
    - value: The wire form of a STIX identifier.

    Returns:
    - A `(kind, uuid)` tuple.

    Raises:
    - MalformedIdentifierError: If the string does not split into exactly two
      non-empty segments on `--`.

    Examples:
    - "report--1358da6f-719c-42b2-aff3-df8df37af59a" -> ("report", "1358da6f-...")
    - "bad-id-no-separator" -> MalformedIdentifierError
    """
    segments = value.split(ID_SEPARATOR)
    if len(segments) != 2 or not all(segments):
        raise MalformedIdentifierError(value)
    return segments[0], segments[1]


def parse_either(value: Any, first: TypeAdapter[Any], second: TypeAdapter[Any]) -> Any:
    """Validate `value` against `first`, falling back to `second`.

    Both attempts are strict so that the JSON shape decides the alternative:
    `42` is kept as an int and `"42"` as a string.

    Raises:
    - PydanticCustomError: `malformed_flexible_value`, carrying the error
      message of the second alternative.
    """
    try:
        return first.validate_python(value, strict=True)
    except ValidationError:
        pass  # second alternative decides
    try:
        return second.validate_python(value, strict=True)
    except ValidationError as err:
        reason = err.errors(include_url=False)[0]["msg"]
        raise PydanticCustomError(
            "malformed_flexible_value",
            "No alternative accepts the value: {reason}",
            {"reason": reason},
        ) from err
