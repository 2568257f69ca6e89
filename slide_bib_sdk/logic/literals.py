from typing import Literal, Tuple

type TCitationStyle = Literal[
    "numeric",
    "author-year",
]

CITATION_STYLES: Tuple[TCitationStyle, ...] = ("numeric", "author-year")

# Separator between authors in a single-string author field
AUTHOR_SEPARATOR = " and "

UNKNOWN_AUTHORS = "Unknown Author"
UNKNOWN_AUTHOR = "Unknown"
UNTITLED = "Untitled"
NO_DATE = "n.d."
