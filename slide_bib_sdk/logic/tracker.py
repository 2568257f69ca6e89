"""Citation tracking and rendering.

The tracker remembers which citation keys were used, in order of first
occurrence, and renders markers and references from the records held by a
`BibliographyStore`. Keys can be cited before the bibliography is loaded.
"""

from typing import Dict, Tuple

import attrs
from aletk.utils import get_logger

from slide_bib_sdk.config import BibConfig
from slide_bib_sdk.converters.plaintext.author.formatter import format_authors
from slide_bib_sdk.converters.plaintext.bibitem.reference_formatter import format_reference
from slide_bib_sdk.converters.plaintext.citation.marker_formatter import format_citation_marker
from slide_bib_sdk.logic.literals import TCitationStyle
from slide_bib_sdk.logic.models import BibRecord, ReferenceEntry, TAuthorField
from slide_bib_sdk.logic.store import BibliographyStore

lgr = get_logger(__name__)

__all__: list[str] = [
    "CitationTracker",
]


@attrs.define
class CitationTracker:
    """Ordered record of the citations made during a presentation.

    The set of cited keys only grows; a key keeps the position of its first
    citation, which is its number in the numeric style.
    """

    store: BibliographyStore
    config: BibConfig = attrs.field(factory=BibConfig)
    # Insertion-ordered set of cited keys
    _citations: Dict[str, None] = attrs.field(init=False, factory=dict)
    _version: int = attrs.field(init=False, default=0)

    @property
    def version(self) -> int:
        """Incremented every time a new key is cited."""
        return self._version

    def register_citation(self, key: str) -> None:
        if key not in self._citations:
            self._citations[key] = None
            self._version += 1

        if self.config.warn_on_unknown_citation and self.store.loaded and key not in self.store:
            lgr.warning(f"Citation key '{key}' not found in bibliography")

    def cited_keys(self) -> Tuple[str, ...]:
        return tuple(self._citations)

    def get_citation(self, key: str) -> BibRecord | None:
        return self.store.lookup(key)

    # =========================================================================
    # Rendering
    # =========================================================================

    def format_citation_marker(self, key: str, style: TCitationStyle | None = None) -> str:
        """Render the in-text marker for `key`.

        Unknown keys render as the key itself. Numeric markers reflect the
        citations registered so far, so they are only final once the whole
        presentation has been traversed.
        """
        return format_citation_marker(
            key,
            self.store.lookup(key),
            self.cited_keys(),
            style or self.config.default_style,
        )

    def format_reference(self, record: BibRecord) -> str:
        return format_reference(record)

    def format_authors(self, authors: TAuthorField | None) -> str:
        return format_authors(authors)

    # =========================================================================
    # Derived views
    # =========================================================================

    def cited_references(self) -> Tuple[ReferenceEntry, ...]:
        """Cited keys that resolve to a record, in citation order."""
        references = []
        for key in self._citations:
            record = self.store.lookup(key)
            if record is not None:
                references.append(ReferenceEntry(key=key, record=record))

        return tuple(references)

    def all_references(self) -> Tuple[ReferenceEntry, ...]:
        """Every loaded record, cited or not, in bibliography order."""
        return self.store.records()

    def unresolved_citations(self) -> Tuple[str, ...]:
        """Cited keys the loaded bibliography has no record for."""
        return tuple(key for key in self._citations if key not in self.store)
