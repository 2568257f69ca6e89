"""Parsers from decoded JSON bibliographies to BibRecord objects.

Accepts CSL-JSON style entries as well as the output of bib-to-JSON converters,
which spell the key field 'ID' instead of 'id'.
"""

import traceback
from collections.abc import Mapping
from typing import Dict, FrozenSet, List, Tuple

from aletk.ResultMonad import Err, Ok
from aletk.utils import get_logger

from slide_bib_sdk.logic.models import (
    AuthorName,
    BibRecord,
    BibRecordValidationError,
    TAuthorField,
    TDatePart,
)

lgr = get_logger(__name__)

__all__: list[str] = [
    "parse_bib_record",
    "parse_bibliography",
    "resolve_record_key",
]

_KNOWN_FIELDS: FrozenSet[str] = frozenset(
    {
        "id",
        "ID",
        "type",
        "title",
        "author",
        "year",
        "issued",
        "container-title",
        "journal",
        "booktitle",
        "publisher",
        "publisher-place",
        "URL",
        "url",
        "DOI",
        "doi",
    }
)


def _as_str(value: object) -> str:
    if value is None:
        return ""
    return f"{value}"


def _first_of(body: Mapping[str, object], *fields: str) -> str:
    """
    Return the first non-empty value among the given field spellings.
    """
    for field in fields:
        value = _as_str(body.get(field))
        if value:
            return value
    return ""


def resolve_record_key(body: Mapping[str, object]) -> str:
    """
    Resolve the citation key of an entry. 'ID' is checked after 'id' and wins when both are set.
    """
    key = body.get("id")
    upper_key = body.get("ID")
    if upper_key:
        key = upper_key

    return _as_str(key) if key else ""


def _parse_author_name(item: object) -> AuthorName:
    match item:
        case str():
            return AuthorName(literal=item)

        case Mapping():
            return AuthorName(
                given=_as_str(item.get("given")),
                family=_as_str(item.get("family")),
                literal=_as_str(item.get("literal")),
            )

        case _:
            return AuthorName()


def _parse_author(value: object, key: str) -> TAuthorField:
    match value:
        case None:
            return ""

        case str():
            return value

        case list() | tuple():
            return tuple(_parse_author_name(item) for item in value)

        case _:
            lgr.warning(f"Ignoring 'author' field of '{key}' with unsupported type {type(value).__name__}.")
            return ""


def _parse_year(value: object) -> int | str:
    match value:
        case None | bool():
            return ""

        case int() | str():
            return value

        case float() if value.is_integer():
            return int(value)

        case _:
            return f"{value}"


def _parse_date_part(value: object) -> TDatePart:
    match value:
        case bool():
            return ""

        case int() | str():
            return value

        case float() if value.is_integer():
            return int(value)

        case _:
            return ""


def _parse_date_parts(issued: object) -> Tuple[Tuple[TDatePart, ...], ...]:
    """
    Read 'issued.date-parts'. Parts and ranges keep their position, so an unusable year is
    never replaced by the month that follows it.
    """
    if not isinstance(issued, Mapping):
        return ()

    match issued.get("date-parts"):
        case list() | tuple() as ranges:
            return tuple(
                tuple(_parse_date_part(part) for part in date_range)
                if isinstance(date_range, (list, tuple))
                else ()
                for date_range in ranges
            )

        case _:
            return ()


def parse_bib_record(body: Mapping[str, object]) -> Ok[BibRecord] | Err:
    """
    Parse a single decoded entry. Fails if the entry has no usable key.
    """
    try:
        key = resolve_record_key(body)

        record = BibRecord(
            key=key,
            entry_type=_as_str(body.get("type")),
            title=_as_str(body.get("title")),
            author=_parse_author(body.get("author"), key),
            year=_parse_year(body.get("year")),
            date_parts=_parse_date_parts(body.get("issued")),
            container_title=_as_str(body.get("container-title")),
            journal=_as_str(body.get("journal")),
            booktitle=_as_str(body.get("booktitle")),
            publisher=_as_str(body.get("publisher")),
            publisher_place=_as_str(body.get("publisher-place")),
            url=_first_of(body, "URL", "url"),
            doi=_first_of(body, "DOI", "doi"),
            extra={field: value for field, value in body.items() if field not in _KNOWN_FIELDS},
        )

        return Ok(record)

    except BibRecordValidationError as e:
        return Err(
            message=f"Could not parse entry: {e}",
            code=-1,
            error_type="BibRecordValidationError",
        )

    except Exception as e:
        return Err(
            message=f"Could not parse entry [[ {body} ]]. {e.__class__.__name__}: {e}",
            code=-1,
            error_type="ParsingError",
            error_trace=f"{traceback.format_exc()}",
        )


def _entry_bodies(document: object) -> Ok[List[object]] | Err:
    """
    Flatten the two accepted document shapes into a list of entry bodies. For keyed objects,
    the property name becomes the entry's 'id', unless the body sets its own.
    """
    match document:

        case list() | tuple():
            return Ok(list(document))

        case Mapping():
            return Ok(
                [{"id": key, **body} if isinstance(body, Mapping) else body for key, body in document.items()]
            )

        case _:
            return Err(
                message=(
                    "Unsupported bibliography document: expected a list or an object, "
                    f"got {type(document).__name__}."
                ),
                code=-1,
                error_type="UnsupportedShapeError",
            )


def parse_bibliography(document: object) -> Ok[Tuple[BibRecord, ...]] | Err:
    """
    Parse a decoded bibliography document into records, in document order. Entries that are
    not objects, or that have no key, are skipped.
    """
    bodies_result = _entry_bodies(document)
    if isinstance(bodies_result, Err):
        return bodies_result

    records: Dict[str, BibRecord] = {}
    skipped = 0

    for position, body in enumerate(bodies_result.out):
        if not isinstance(body, Mapping):
            skipped += 1
            continue

        result = parse_bib_record(body)
        if isinstance(result, Err):
            skipped += 1
            lgr.debug(f"Skipping entry {position}: {result.message}")
            continue

        record = result.out
        if record.key in records:
            # Later entries win, keeping the position of the first one
            lgr.debug(f"Entry {position} redefines key '{record.key}'")

        records[record.key] = record

    if skipped:
        lgr.debug(f"Skipped {skipped} entries without a usable key")

    return Ok(tuple(records.values()))
