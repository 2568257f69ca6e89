"""JSON adapters for reading bibliographic documents.

This module decodes JSON text and files into plain Python structures. Turning
those structures into records is left to the converters.
"""

import json
import traceback
from pathlib import Path

from aletk.ResultMonad import Err, Ok
from aletk.utils import get_logger

logger = get_logger(__name__)

__all__: list[str] = [
    "decode_json_document",
    "read_json_document",
]


def decode_json_document(content: str | bytes) -> Ok[object] | Err:
    """Decode JSON text into a Python structure.

    Args:
        content: JSON text, or UTF-8 encoded bytes

    Returns:
        Ok with the decoded document, or Err if the text is not valid JSON
    """
    try:
        return Ok(json.loads(content))

    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        return Err(
            message=f"Malformed bibliography document: {e.__class__.__name__}: {e}",
            code=-1,
            error_type="MalformedInputError",
        )


def read_json_document(filename: str | Path) -> Ok[object] | Err:
    """Read and decode a JSON bibliography file.

    Args:
        filename: Path to a UTF-8 JSON file

    Returns:
        Ok with the decoded document, or Err on failure
    """
    try:
        file_path = Path(filename)
        if not file_path.exists():
            return Err(
                message=f"File not found: {filename}",
                code=-1,
                error_type="FileNotFoundError",
            )

        with open(file_path, "r", encoding="utf-8") as f:
            content = f.read()

        result = decode_json_document(content)
        if isinstance(result, Ok):
            logger.info(f"Read bibliography document from {filename}")

        return result

    except Exception as e:
        return Err(
            message=f"Failed to read bibliography from {filename}: {e.__class__.__name__}: {e}",
            code=-1,
            error_type=e.__class__.__name__,
            error_trace=traceback.format_exc(),
        )
