"""Per-presentation wiring of the bibliography components.

A host creates one context when a presentation starts and hands it to every
slide renderer, so all of them share the same store, citation order and
equation numbering.
"""

import attrs

from slide_bib_sdk.config import BibConfig
from slide_bib_sdk.logic.equations import EquationRegistry
from slide_bib_sdk.logic.store import BibliographyStore
from slide_bib_sdk.logic.tracker import CitationTracker


@attrs.define(frozen=True, slots=True)
class PresentationContext:
    """
    Components owned by one presentation.

    Args:
        config: BibConfig
        store: BibliographyStore
        tracker: CitationTracker, reading from `store`
        equations: EquationRegistry
    """

    config: BibConfig
    store: BibliographyStore
    tracker: CitationTracker
    equations: EquationRegistry


def new_presentation_context(config: BibConfig | None = None) -> PresentationContext:
    config = config if config is not None else BibConfig()
    store = BibliographyStore(config=config)

    return PresentationContext(
        config=config,
        store=store,
        tracker=CitationTracker(store=store, config=config),
        equations=EquationRegistry(),
    )
