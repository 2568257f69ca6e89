from typing import Sequence
from aletk.utils import get_logger
from slide_bib_sdk.logic.literals import AUTHOR_SEPARATOR, UNKNOWN_AUTHOR, UNKNOWN_AUTHORS
from slide_bib_sdk.logic.models import AuthorName, TAuthorField

lgr = get_logger(__name__)


def _full_name_generic(given: str, family: str) -> str:
    if not family:
        return ""

    if not given:
        return family

    return f"{family}, {given}"


def _full_name(author: AuthorName) -> str:
    if author.literal:
        return author.literal

    return _full_name_generic(author.given, author.family) or UNKNOWN_AUTHOR


def _join_names(names: Sequence[str]) -> str:
    """
    One name is returned as-is, two are joined with 'and', three or more collapse to the first name plus 'et al.'.
    """
    match len(names):
        case 0:
            return UNKNOWN_AUTHORS
        case 1:
            return names[0]
        case 2:
            return f"{names[0]} and {names[1]}"
        case _:
            return f"{names[0]} et al."


def format_authors(authors: TAuthorField | None) -> str:
    if not authors:
        return UNKNOWN_AUTHORS

    if isinstance(authors, str):
        return _join_names([part.strip() for part in authors.split(AUTHOR_SEPARATOR)])

    return _join_names([_full_name(author) for author in authors])


def short_author_label(authors: TAuthorField | None) -> str:
    """
    Label used by author-year citation markers. For string authors, this is the text before the
    first comma of the first author, which is the family name for 'Family, Given' entries. For
    structured authors, the family name of the first author, or its literal name.
    """
    if not authors:
        return UNKNOWN_AUTHOR

    if isinstance(authors, str):
        first_author = authors.split(AUTHOR_SEPARATOR)[0].strip()
        return first_author.split(",")[0].strip()

    first = authors[0]
    return first.family or first.literal or UNKNOWN_AUTHOR
