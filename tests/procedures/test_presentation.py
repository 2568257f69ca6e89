from slide_bib_sdk.config import BibConfig
from slide_bib_sdk.procedures.presentation import new_presentation_context


def test_context_shares_one_store() -> None:
    ctx = new_presentation_context()

    assert ctx.tracker.store is ctx.store
    assert ctx.store.config is ctx.config
    assert ctx.tracker.config is ctx.config


def test_contexts_are_independent() -> None:
    first = new_presentation_context()
    second = new_presentation_context()

    first.store.load([{"id": "a"}])
    first.tracker.register_citation("a")
    first.equations.register_equation("e")

    assert second.store.lookup("a") is None
    assert second.tracker.cited_keys() == ()
    assert second.equations.get_equation_number("e") is None


def test_presentation_flow() -> None:
    ctx = new_presentation_context(BibConfig(default_style="author-year"))

    # Slides may cite before the bibliography arrives
    ctx.tracker.register_citation("bell1964")
    ctx.store.load(
        {
            "bell1964": {
                "author": "Bell, J. S.",
                "year": 1964,
                "title": "On the EPR paradox",
                "container-title": "Physics",
            },
            "epr1935": {"author": "Einstein, A. and Podolsky, B. and Rosen, N.", "year": 1935},
        }
    )
    ctx.tracker.register_citation("epr1935")

    assert ctx.tracker.format_citation_marker("bell1964") == "Bell, 1964"
    assert ctx.tracker.format_citation_marker("epr1935", "numeric") == "2"
    assert [ctx.tracker.format_reference(entry.record) for entry in ctx.tracker.cited_references()] == [
        "Bell, J. S. (1964). On the EPR paradox. Physics",
        "Einstein, A. et al. (1935). Untitled.",
    ]
