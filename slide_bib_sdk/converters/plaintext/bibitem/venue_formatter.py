from slide_bib_sdk.logic.models import BibRecord


def format_venue(record: BibRecord) -> str:
    """
    Format where a record was published. The first non-empty field wins, in order: container
    title, journal, book title (as 'In <booktitle>'), publisher. Returns "" if none is set.
    """
    if record.container_title:
        return record.container_title

    if record.journal:
        return record.journal

    if record.booktitle:
        return f"In {record.booktitle}"

    if record.publisher:
        return record.publisher

    return ""
