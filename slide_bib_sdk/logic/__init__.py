"""Logic layer for the slide bibliography SDK."""

from slide_bib_sdk.logic.literals import TCitationStyle
from slide_bib_sdk.logic.models import (
    AuthorName,
    BibRecord,
    BibRecordValidationError,
    EquationEntry,
    ReferenceEntry,
    TAuthorField,
)

__all__ = [
    # Core models
    "AuthorName",
    "BibRecord",
    "BibRecordValidationError",
    "EquationEntry",
    "ReferenceEntry",
    "TAuthorField",
    "TCitationStyle",
]
