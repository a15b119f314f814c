"""Offer python warnings emitted while decoding STIX documents."""

import os
from typing import Any


class VocabularyWarning(UserWarning):
    """Warning for a value outside of a STIX open vocabulary.

    Open vocabularies only suggest values: producers are free to use others, so
    decoding goes on and the value is kept verbatim.
    """

    def __init__(self, vocabulary: str, value: Any) -> None:
        """Initialize the vocabulary warning."""
        super().__init__(vocabulary, value)
        self.vocabulary = vocabulary
        self.value = value

    def __str__(self) -> str:
        """Return the string representation of the vocabulary warning."""
        return (
            f"Value '{self.value}' is out of {self.vocabulary} suggested values."
            f"{os.linesep}  It is kept as is ['type':'open_vocabulary_warn']"
        )
