from slide_bib_sdk.logic.literals import NO_DATE
from slide_bib_sdk.logic.models import BibRecord


def resolve_year(record: BibRecord) -> str:

    if record.year:
        return str(record.year)

    match record.date_parts:
        case ((year, *_), *_) if year:
            return str(year)

        case _:
            return NO_DATE
