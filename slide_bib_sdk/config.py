import attrs

from slide_bib_sdk.logic.literals import CITATION_STYLES, TCitationStyle


class BibConfigValidationError(Exception):
    pass


@attrs.define(frozen=True, slots=True)
class BibConfig:
    """
    Settings shared by the bibliography components of one presentation.

    Args:
        default_style: citation style used when a marker is requested without one
        http_timeout: seconds, for HTTP clients created by the store itself
        warn_on_unknown_citation: log a warning when a key is cited that the loaded bibliography lacks
    """

    default_style: TCitationStyle = "numeric"
    http_timeout: float = 30.0
    warn_on_unknown_citation: bool = True

    def __attrs_post_init__(self) -> None:
        if self.default_style not in CITATION_STYLES:
            raise BibConfigValidationError(
                f"Unsupported default style '{self.default_style}'. Expected one of {", ".join(CITATION_STYLES)}."
            )

        if self.http_timeout <= 0:
            raise BibConfigValidationError("'http_timeout' must be positive.")
