from __future__ import annotations
from types import MappingProxyType
from typing import Literal, Mapping, Tuple
import attrs


############
# Author
############


@attrs.define(frozen=True, slots=True)
class AuthorName:
    """
    A structured author entry, as found in CSL-JSON 'author' arrays.

    Args:
        given: str = ""
        family: str = ""
        literal: pre-formatted full name, takes precedence over the other two
    """

    given: str = ""
    family: str = ""
    literal: str = ""


type TAuthorField = str | Tuple[AuthorName, ...]

type TDatePart = int | str


############
# BibRecord
############


def _read_only(fields: Mapping[str, object]) -> Mapping[str, object]:
    return MappingProxyType(dict(fields))


class BibRecordValidationError(Exception):
    pass


@attrs.define(frozen=True, slots=True)
class BibRecord:
    """
    A single bibliography entry, keyed by its citation key. Everything but the key is optional.

    Example:
        BibRecord(key="einstein1905", author="Einstein, Albert", year=1905)
        BibRecord(key="doe2020", author=(AuthorName(given="Jane", family="Doe"),), date_parts=((2020, 3),))

    Args:
        key: citation key, matched exactly
        entry_type: free-form entry type, e.g. 'article' or 'book'
        title: str = ""
        author: either an ' and '-separated string, or a tuple of AuthorName. Empty means absent
        year: direct year value, "" if absent
        date_parts: 'issued' date ranges, each a tuple of (year, month, day) parts
        container_title, journal, booktitle, publisher, publisher_place: venue fields
        url: str = ""
        doi: str = ""
        extra: any other field of the source entry, kept as a read-only mapping
    """

    key: str
    entry_type: str = ""
    title: str = ""
    author: TAuthorField = ""
    year: int | str | Literal[""] = ""
    date_parts: Tuple[Tuple[TDatePart, ...], ...] = ()

    # Venue
    container_title: str = ""
    journal: str = ""
    booktitle: str = ""
    publisher: str = ""
    publisher_place: str = ""

    # Identifiers
    url: str = ""
    doi: str = ""

    extra: Mapping[str, object] = attrs.field(factory=dict, converter=_read_only)

    def __attrs_post_init__(self) -> None:
        if not self.key:
            raise BibRecordValidationError("'key' must not be empty.")


@attrs.define(frozen=True, slots=True)
class ReferenceEntry:
    """
    A citation key paired with its resolved record, as listed in reference views.
    """

    key: str
    record: BibRecord


############
# Equations
############


@attrs.define(frozen=True, slots=True)
class EquationEntry:
    """
    A labelled display equation.

    Args:
        label: str
        number: int
        slide_number: int | None = None
    """

    label: str
    number: int
    slide_number: int | None = None
