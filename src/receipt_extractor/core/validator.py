"""Input document validation.

The text/binary decision is a heuristic: it looks for NUL bytes near the start
of the file and for control characters on the first line. It can be fooled in
both directions and is only meant to keep obviously wrong input away from the
provider.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path

from receipt_extractor.core.config import ExtractionConfig
from receipt_extractor.core.exceptions import (
    BinaryContentError,
    DocumentNotFoundError,
    DocumentTooLargeError,
)
from receipt_extractor.core.observer import ExtractionObserver, LoggingObserver

logger = logging.getLogger(__name__)

_ALLOWED_CONTROL_CHARS = frozenset({"\t", "\n", "\r"})


@dataclass(frozen=True)
class ValidatedDocument:
    """A document that passed validation, together with its decoded text."""

    path: Path
    size: int
    text: str = field(repr=False)
    warnings: tuple[str, ...] = ()

    @property
    def extension(self) -> str:
        return self.path.suffix.lower()


def looks_binary(
    data: bytes,
    sample_size: int = 512,
    max_null_bytes: int = 3,
    max_control_chars: int = 5,
) -> bool:
    """Guess whether ``data`` is binary.

    Args:
        data: Leading bytes of the file (at least the whole first line).
        sample_size: How many leading bytes are scanned for NUL bytes.
        max_null_bytes: NUL bytes tolerated in the sample.
        max_control_chars: Control characters (other than tab, LF and CR)
            tolerated on the first line.

    Returns:
        True if either limit is exceeded.
    """
    if data[:sample_size].count(0) > max_null_bytes:
        return True

    first_line = data.split(b"\n", 1)[0].decode("utf-8", errors="replace")
    control_chars = sum(
        1 for char in first_line if ord(char) < 32 and char not in _ALLOWED_CONTROL_CHARS
    )
    return control_chars > max_control_chars


class InputValidator:
    """Checks that a file exists, is small enough and looks like text."""

    def __init__(
        self,
        config: ExtractionConfig | None = None,
        observer: ExtractionObserver | None = None,
    ) -> None:
        self.config = config or ExtractionConfig()
        self.observer = observer or LoggingObserver(logger)

    def validate(self, path: str | Path) -> ValidatedDocument:
        """Validate ``path`` and return the accepted document.

        Raises:
            DocumentNotFoundError: If the path does not point to a file.
            DocumentTooLargeError: If the file exceeds ``max_file_size``.
            BinaryContentError: If the content looks binary.
        """
        path = Path(path)
        if not path.is_file():
            raise DocumentNotFoundError(path)

        size = path.stat().st_size
        if size > self.config.max_file_size:
            raise DocumentTooLargeError(path, size, self.config.max_file_size)

        data = path.read_bytes()
        if looks_binary(
            data,
            sample_size=self.config.binary_sample_size,
            max_null_bytes=self.config.max_null_bytes,
            max_control_chars=self.config.max_control_chars,
        ):
            raise BinaryContentError(path)

        warnings: list[str] = []
        if path.suffix.lower() not in self.config.allowed_extensions:
            message = (
                f"File extension '{path.suffix}' is not one of "
                f"{', '.join(self.config.allowed_extensions)}, proceeding anyway"
            )
            warnings.append(message)
            self.observer.on_warning(message)

        return ValidatedDocument(
            path=path,
            size=size,
            text=data.decode("utf-8", errors="replace"),
            warnings=tuple(warnings),
        )


def validate_document(
    path: str | Path,
    config: ExtractionConfig | None = None,
    observer: ExtractionObserver | None = None,
) -> ValidatedDocument:
    """Shortcut for ``InputValidator(config, observer).validate(path)``."""
    return InputValidator(config, observer).validate(path)
