"""Bibliography store.

Holds the records of the currently loaded bibliography, keyed by citation key.
Every load builds a complete new record map and swaps it in with a single
assignment, so readers see either the old bibliography or the new one.
"""

import traceback
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

import attrs
import httpx
from aletk.ResultMonad import Err, Ok
from aletk.utils import get_logger

from slide_bib_sdk.adapters.http import fetch_json_document, fetch_json_document_async
from slide_bib_sdk.adapters.io.json import decode_json_document, read_json_document
from slide_bib_sdk.config import BibConfig
from slide_bib_sdk.converters.json.parser import parse_bibliography
from slide_bib_sdk.logic.models import BibRecord, ReferenceEntry

lgr = get_logger(__name__)

__all__: list[str] = [
    "BibliographyStore",
]


@attrs.define
class BibliographyStore:
    """Loaded bibliography of a presentation.

    The only ways to change its contents are the `load*` methods, each of which
    replaces the whole bibliography on success and leaves it untouched on
    failure.
    """

    config: BibConfig = attrs.field(factory=BibConfig)
    _records: Mapping[str, BibRecord] = attrs.field(init=False, factory=lambda: MappingProxyType({}))
    _loaded: bool = attrs.field(init=False, default=False)
    _version: int = attrs.field(init=False, default=0)

    @property
    def loaded(self) -> bool:
        """Whether a bibliography has been loaded successfully at least once."""
        return self._loaded

    @property
    def version(self) -> int:
        """Incremented on every successful load."""
        return self._version

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, key: object) -> bool:
        return key in self._records

    def _replace(self, records: Iterable[BibRecord]) -> int:
        new_records = MappingProxyType({record.key: record for record in records})

        self._records = new_records
        self._loaded = True
        self._version += 1

        return len(new_records)

    # =========================================================================
    # Loading
    # =========================================================================

    def load(self, source: str | bytes | object) -> Ok[int] | Err:
        """Replace the bibliography with the given document.

        Args:
            source: JSON text or bytes, or an already decoded document. The
                document is either a list of entries, or an object mapping
                citation keys to entry bodies.

        Returns:
            Ok with the number of loaded records, or Err if the document could
            not be decoded or has an unsupported shape
        """
        try:
            if isinstance(source, (str, bytes, bytearray)):
                decoded = decode_json_document(source)
                if isinstance(decoded, Err):
                    lgr.error(f"Error parsing bibliography: {decoded.message}")
                    return decoded
                document = decoded.out
            else:
                document = source

            parsed = parse_bibliography(document)
            if isinstance(parsed, Err):
                lgr.error(f"Error loading bibliography: {parsed.message}")
                return parsed

            count = self._replace(parsed.out)
            lgr.info(f"Loaded {count} bibliography records")

            return Ok(count)

        except Exception as e:
            lgr.error(f"Error loading bibliography: {e.__class__.__name__}: {e}")
            return Err(
                message=f"Failed to load bibliography: {e.__class__.__name__}: {e}",
                code=-1,
                error_type=e.__class__.__name__,
                error_trace=traceback.format_exc(),
            )

    def load_file(self, filename: str | Path) -> Ok[int] | Err:
        """Replace the bibliography with the contents of a JSON file."""
        result = read_json_document(filename)
        if isinstance(result, Err):
            lgr.error(f"Error reading bibliography file: {result.message}")
            return result

        return self.load(result.out)

    def load_from_remote(self, url: str, client: httpx.Client | None = None) -> Ok[int] | Err:
        """Fetch a JSON bibliography and load it. Makes a single attempt.

        Args:
            url: where to fetch from
            client: optional httpx client to reuse

        Returns:
            Same as `load`, plus Err on transport or HTTP status failures
        """
        result = fetch_json_document(url, client=client, timeout=self.config.http_timeout)
        if isinstance(result, Err):
            lgr.error(f"Error loading bibliography from {url}: {result.message}")
            return result

        return self.load(result.out)

    async def load_from_remote_async(self, url: str, client: httpx.AsyncClient | None = None) -> Ok[int] | Err:
        """Async variant of `load_from_remote`.

        The store is replaced as soon as the response arrives, whether or not
        the caller is still waiting for the result.
        """
        result = await fetch_json_document_async(url, client=client, timeout=self.config.http_timeout)
        if isinstance(result, Err):
            lgr.error(f"Error loading bibliography from {url}: {result.message}")
            return result

        return self.load(result.out)

    # =========================================================================
    # Queries
    # =========================================================================

    def lookup(self, key: str) -> BibRecord | None:
        return self._records.get(key)

    def records(self) -> Tuple[ReferenceEntry, ...]:
        """All records, in the order of the last loaded document."""
        return tuple(ReferenceEntry(key=key, record=record) for key, record in self._records.items())
