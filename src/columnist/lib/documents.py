"""Document discovery, encoding-aware reading and output writing."""

from __future__ import annotations

import codecs
from collections.abc import Iterable, Sequence
from pathlib import Path

import structlog

logger = structlog.get_logger(__name__)


class DocumentError(Exception):
    """Base class for input/output failures around the layout core."""

    kind = "document_error"

    def detail(self) -> dict[str, object]:
        return {}


class PathEmptyOrNotFound(DocumentError, FileNotFoundError):
    kind = "path_empty_or_not_found"

    def __init__(self, path: str) -> None:
        super().__init__(
            f"The path '{path}' was empty or not found. "
            "Please check that the path exists and try again."
        )
        self.path = path

    def detail(self) -> dict[str, object]:
        return {"path": self.path}


class DocumentNotFound(DocumentError, FileNotFoundError):
    kind = "document_not_found"

    def __init__(self, path: str) -> None:
        super().__init__(
            f"The file '{path}' was not found. "
            "Please check that the file exists and try again."
        )
        self.path = path

    def detail(self) -> dict[str, object]:
        return {"path": self.path}


class UnsupportedEncoding(DocumentError, LookupError):
    kind = "unsupported_encoding"

    def __init__(self, encoding: str) -> None:
        super().__init__(
            f"The encoding '{encoding}' is not supported. For a list of supported "
            "encodings see https://docs.python.org/3/library/codecs.html#standard-encodings."
        )
        self.encoding = encoding

    def detail(self) -> dict[str, object]:
        return {"encoding": self.encoding}


def list_documents(input_path: str | Path) -> list[Path]:
    """Return every regular file under ``input_path``, sorted by path."""

    clean = str(input_path).rstrip("/")
    if not clean.strip():
        raise PathEmptyOrNotFound(clean)

    root = Path(clean).expanduser()
    if root.is_file():
        return [root]
    if not root.is_dir():
        raise PathEmptyOrNotFound(clean)

    files = sorted(candidate for candidate in root.rglob("*") if candidate.is_file())
    if not files:
        raise PathEmptyOrNotFound(clean)
    return files


def _check_encoding(encoding: str) -> None:
    try:
        codecs.lookup(encoding)
    except LookupError as error:
        raise UnsupportedEncoding(encoding) from error


def read_document(path: str | Path, encoding: str = "utf-8") -> list[str]:
    """Read one document as a list of lines without line terminators."""

    _check_encoding(encoding)
    document_path = Path(path)
    try:
        text = document_path.read_text(encoding=encoding)
    except FileNotFoundError as error:
        raise DocumentNotFound(str(path)) from error
    # Universal newlines already folded "\r\n" and "\r" into "\n"; form feeds
    # and Unicode line separators stay inside their line.
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    logger.debug("Read document.", path=str(document_path), lines=len(lines))
    return lines


def read_documents(paths: Sequence[str | Path], encoding: str = "utf-8") -> list[list[str]]:
    _check_encoding(encoding)
    return [read_document(path, encoding) for path in paths]


def write_lines(lines: Iterable[str], output_path: str | Path) -> Path:
    """Overwrite ``output_path`` with ``lines``, one per newline-terminated row."""

    destination = Path(output_path).expanduser()
    destination.parent.mkdir(parents=True, exist_ok=True)
    with destination.open("w", encoding="utf-8", newline="\n") as handle:
        for line in lines:
            handle.write(f"{line}\n")
    return destination
