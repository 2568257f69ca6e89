from pathlib import Path

from aletk.ResultMonad import Err, Ok

from slide_bib_sdk.adapters.io.json import decode_json_document, read_json_document


def test_decode_json_document() -> None:
    result = decode_json_document('[{"id": "a"}]')

    assert isinstance(result, Ok)
    assert result.out == [{"id": "a"}]


def test_decode_json_document_bytes() -> None:
    result = decode_json_document('{"a": {"title": "Ä"}}'.encode("utf-8"))

    assert isinstance(result, Ok)
    assert result.out == {"a": {"title": "Ä"}}


def test_decode_malformed_document() -> None:
    result = decode_json_document('{"a": ')

    assert isinstance(result, Err)
    assert result.error_type == "MalformedInputError"


def test_read_json_document(tmp_path: Path) -> None:
    path = tmp_path / "refs.json"
    path.write_text('[{"id": "a"}]', encoding="utf-8")

    result = read_json_document(str(path))

    assert isinstance(result, Ok)
    assert result.out == [{"id": "a"}]


def test_read_missing_json_document(tmp_path: Path) -> None:
    result = read_json_document(tmp_path / "missing.json")

    assert isinstance(result, Err)
    assert result.error_type == "FileNotFoundError"


def test_read_malformed_json_document(tmp_path: Path) -> None:
    path = tmp_path / "refs.json"
    path.write_text("[", encoding="utf-8")

    result = read_json_document(path)

    assert isinstance(result, Err)
    assert result.error_type == "MalformedInputError"
