"""Errors raised while preparing or running a conversion.

Every error here is terminal: ``cli.main`` logs the message and exits with 1.
"""

from __future__ import annotations


class ConversionError(Exception):
    """Base class for all user-facing conversion failures."""


class InputNotFoundError(ConversionError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"File '{path}' not found")


class EncoderUnavailableError(ConversionError):
    def __init__(self, encoder: str) -> None:
        self.encoder = encoder
        super().__init__(f"{encoder} is not installed or not in PATH")


class OutputExistsError(ConversionError):
    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Output file '{path}' already exists. Use -y to overwrite.",
        )


class LaunchError(ConversionError):
    """The encoder process could not be started at all."""

    def __init__(self, encoder: str, cause: OSError) -> None:
        self.encoder = encoder
        self.cause = cause
        super().__init__(f"Failed to execute {encoder}: {cause}")


class EncodingError(ConversionError):
    """The encoder started but exited with a non-zero status."""

    def __init__(self, returncode: int) -> None:
        self.returncode = returncode
        super().__init__(f"Conversion failed with exit code: {returncode}")
