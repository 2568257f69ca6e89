from typing import Sequence
from slide_bib_sdk.converters.plaintext.author.formatter import short_author_label
from slide_bib_sdk.converters.plaintext.bibitem.date_formatter import resolve_year
from slide_bib_sdk.logic.literals import CITATION_STYLES, TCitationStyle
from slide_bib_sdk.logic.models import BibRecord


def format_citation_marker(
    key: str,
    record: BibRecord | None,
    cited_keys: Sequence[str],
    style: TCitationStyle,
) -> str:
    """
    Format the in-text marker for a citation key.

    Args:
        key: the cited key
        record: the record the key resolves to, if any. Unresolved keys are rendered verbatim
        cited_keys: cited keys in first-occurrence order, used for numbering
        style: 'numeric' gives the 1-based citation position, 'author-year' gives 'Family, Year'
    """
    if style not in CITATION_STYLES:
        raise ValueError(f"Unsupported citation style '{style}'. Expected one of {", ".join(CITATION_STYLES)}.")

    if record is None:
        return key

    if style == "author-year":
        return f"{short_author_label(record.author)}, {resolve_year(record)}"

    # 0 for keys that resolve but were never cited
    position = cited_keys.index(key) + 1 if key in cited_keys else 0
    return f"{position}"
