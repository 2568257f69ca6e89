from slide_bib_sdk.converters.plaintext.author.formatter import format_authors
from slide_bib_sdk.converters.plaintext.bibitem.date_formatter import resolve_year
from slide_bib_sdk.converters.plaintext.bibitem.venue_formatter import format_venue
from slide_bib_sdk.logic.literals import UNTITLED
from slide_bib_sdk.logic.models import BibRecord


def format_reference(record: BibRecord) -> str:
    """
    Format a full reference list entry: '<Authors> (<Year>). <Title>. <Venue>'.
    """
    authors = format_authors(record.author)
    year = resolve_year(record)
    title = record.title or UNTITLED
    venue = format_venue(record)

    return f"{authors} ({year}). {title}. {venue}".strip()
