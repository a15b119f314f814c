"""Offer Exception handling tools for STIX documents."""

from .error import (
    ConfigError,
    FieldTypeMismatchError,
    MalformedFlexibleValueError,
    MalformedIdentifierError,
    MissingRequiredFieldError,
    StixDecodeError,
    StixError,
    UnknownDiscriminatorError,
)
from .warning import VocabularyWarning

__all__ = [
    "ConfigError",
    "FieldTypeMismatchError",
    "MalformedFlexibleValueError",
    "MalformedIdentifierError",
    "MissingRequiredFieldError",
    "StixDecodeError",
    "StixError",
    "UnknownDiscriminatorError",
    "VocabularyWarning",
]
