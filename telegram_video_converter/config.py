"""RU: Параметры одной конвертации, собранные из аргументов CLI.

EN: Settings for a single conversion, built from CLI arguments.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Final

DEFAULT_VIDEO_BITRATE_KBPS: Final = 2000
DEFAULT_AUDIO_BITRATE_KBPS: Final = 128
DEFAULT_FPS: Final = 25
DEFAULT_CRF: Final = 23


@dataclass(frozen=True)
class ConversionConfig:
    """Container for conversion options."""

    input: str
    output: str | None = None
    bitrate: int = DEFAULT_VIDEO_BITRATE_KBPS
    audio_bitrate: int = DEFAULT_AUDIO_BITRATE_KBPS
    fps: int = DEFAULT_FPS
    crf: int = DEFAULT_CRF
    overwrite: bool = False
    verbose: bool = False
    quiet: bool = False

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> ConversionConfig:
        return cls(
            input=args.input,
            output=args.output,
            bitrate=int(args.bitrate),
            audio_bitrate=int(args.audio_bitrate),
            fps=int(args.fps),
            crf=int(args.crf),
            overwrite=bool(args.overwrite),
            verbose=bool(args.verbose),
            quiet=bool(args.quiet),
        )


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of a successful encoder run."""

    output_path: str
    elapsed_s: float
