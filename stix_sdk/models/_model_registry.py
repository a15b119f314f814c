from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any, Callable, TypeVar

from pydantic import BaseModel, ValidationError
from stix_sdk.exceptions import (
    FieldTypeMismatchError,
    MalformedFlexibleValueError,
    MalformedIdentifierError,
    MissingRequiredFieldError,
    StixDecodeError,
    UnknownDiscriminatorError,
)
from stix_sdk.exceptions.error import Loc

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)  # Preserve metadata when using register decorator

CODEC_CONTEXT_KEY = "stix_codec"


def decode_error_from_validation_error(error: ValidationError) -> StixDecodeError:
    """Translate the first pydantic error into the matching typed decode error."""
    errors = error.errors(include_url=False)
    first = errors[0]
    loc: Loc = tuple(first["loc"])
    match first["type"]:
        case "missing":
            return MissingRequiredFieldError(loc, errors)
        case "malformed_identifier":
            decode_error: StixDecodeError = MalformedIdentifierError(first["input"], loc)
            decode_error.errors = errors
            return decode_error
        case "malformed_flexible_value":
            return MalformedFlexibleValueError(first["msg"], loc, errors)
        case _:
            return FieldTypeMismatchError(loc, first["msg"], errors)


class FamilyRegistry:
    """Registry of the variants of one closed STIX family, keyed by discriminator.

    A family may own a catch-all variant, selected for any discriminator the
    table does not hold (and that `accepts_catch_all` allows). Without one,
    unknown discriminators are rejected.

    Examples:
        >>> registry = FamilyRegistry("relationship object")
        >>> registry.resolve("sighting")
        Traceback (most recent call last):
        ...
        stix_sdk.exceptions.error.UnknownDiscriminatorError: Unknown relationship object discriminator 'sighting'.

    """

    def __init__(
        self,
        family: str,
        accepts_catch_all: Callable[[str], bool] | None = None,
    ) -> None:
        """Initialize an empty registry for `family`."""
        self.family = family
        self.models: dict[str, type[BaseModel]] = {}
        self.catch_all: type[BaseModel] | None = None
        self.accepts_catch_all = accepts_catch_all or (lambda _: True)

    def register(self, model_class: type[T]) -> type[T]:
        """Register a model class under its discriminator.

        Args:
            model_class (BaseModel-like): The model class to register, exposing `discriminator()`.

        Returns:
            BaseModel-like: The registered model class.
        """
        discriminator = model_class.discriminator()  # type: ignore[attr-defined]
        if discriminator is None:
            raise TypeError(f"{model_class.__name__} has no fixed discriminator.")
        self.models[discriminator] = model_class
        return model_class

    def register_catch_all(self, model_class: type[T]) -> type[T]:
        """Register the variant selected for unknown discriminators."""
        self.catch_all = model_class
        return model_class

    def copy(self) -> FamilyRegistry:
        """Return an independent registry holding the same variants."""
        registry = FamilyRegistry(self.family, self.accepts_catch_all)
        registry.models = dict(self.models)
        registry.catch_all = self.catch_all
        return registry

    def __contains__(self, discriminator: object) -> bool:
        return discriminator in self.models

    def resolve(self, discriminator: str, loc: Loc = ()) -> type[BaseModel]:
        """Return the model registered for `discriminator` (case-sensitive, exact match).

        Raises:
            UnknownDiscriminatorError: If nothing matches and no catch-all applies.
        """
        model = self.models.get(discriminator)
        if model is not None:
            return model
        if self.catch_all is not None and self.accepts_catch_all(discriminator):
            logger.debug(
                "Unknown %s discriminator %r, decoded as %s.",
                self.family,
                discriminator,
                self.catch_all.__name__,
            )
            return self.catch_all
        raise UnknownDiscriminatorError(self.family, discriminator, loc)

    def decode(
        self,
        discriminator: str,
        data: Any,
        *,
        context: Mapping[str, Any] | None = None,
        loc: Loc = (),
    ) -> BaseModel:
        """Validate `data` with the model registered for `discriminator`.

        Model instances are re-validated from their encoded form, so a value of
        another variant is rejected like its JSON would be.

        Raises:
            StixDecodeError: Any typed decode error, located under `loc`.
        """
        model = self.resolve(discriminator, loc)
        if isinstance(data, BaseModel):
            if type(data) is model:
                return data
            data = data.model_dump(mode="json")
        return validate_model(model, data, context=context, loc=loc)


def validate_model(
    model: type[T],
    data: Any,
    *,
    context: Mapping[str, Any] | None = None,
    loc: Loc = (),
) -> T:
    """Validate `data` as `model`, raising typed decode errors located under `loc`."""
    if not isinstance(data, Mapping):
        raise FieldTypeMismatchError(loc, "Input should be a JSON object")
    try:
        return model.model_validate(data, context=dict(context or {}))
    except ValidationError as err:
        raise decode_error_from_validation_error(err).with_prefix(*loc) from err
    except StixDecodeError as err:
        raise err.with_prefix(*loc)


def registry_from_context(
    context: Mapping[str, Any] | None, family: str, default: FamilyRegistry
) -> FamilyRegistry:
    """Return the registry of `family` carried by the codec in the validation context."""
    codec = (context or {}).get(CODEC_CONTEXT_KEY)
    if codec is None:
        return default
    registry: FamilyRegistry = getattr(codec, family)
    return registry


def _is_custom_extension(name: str) -> bool:
    return name.startswith("x-") or name.startswith("extension-definition--")


DOMAIN_OBJECTS = FamilyRegistry("domain object")
RELATIONSHIP_OBJECTS = FamilyRegistry("relationship object")
OBSERVABLES = FamilyRegistry("observable")
MARKINGS = FamilyRegistry("marking")
EXTENSIONS = FamilyRegistry("extension", accepts_catch_all=_is_custom_extension)
