"""Human-readable banner and summary for a conversion."""

from __future__ import annotations

import math
from pathlib import Path
from typing import Final

from telegram_video_converter.config import ConversionConfig, ConversionResult

SIZE_UNITS: Final = ("B", "KB", "MB", "GB")


def format_bytes(size_bytes: int) -> str:
    """Format a byte count with 1024-based units, e.g. ``1.5 MB``."""

    size = float(size_bytes)
    unit_index = 0
    while size >= 1024.0 and unit_index < len(SIZE_UNITS) - 1:
        size /= 1024.0
        unit_index += 1
    return f"{size:.1f} {SIZE_UNITS[unit_index]}"


def size_ratio(input_size: int, output_size: int) -> float:
    """Output size as a percentage of input size.

    An empty input gives ``inf`` (or ``nan`` when both are empty) rather than
    raising, so the report still prints.
    """
    if input_size == 0:
        return math.inf if output_size else math.nan
    return output_size / input_size * 100.0


def format_banner(config: ConversionConfig, output_path: str) -> list[str]:
    return [
        f"Converting '{config.input}' for Telegram compatibility...",
        f"Output: '{output_path}'",
        (
            f"Settings: {config.bitrate}kbps video, {config.audio_bitrate}kbps audio, "
            f"{config.fps}fps, CRF {config.crf}"
        ),
    ]


def _file_sizes(input_path: str, output_path: str) -> tuple[int, int] | None:
    try:
        return Path(input_path).stat().st_size, Path(output_path).stat().st_size
    except OSError:
        return None


def format_report(result: ConversionResult, input_path: str) -> list[str]:
    """Summary lines for a successful run.

    The size block is best-effort and left out when either file cannot be
    stat'ed.
    """
    lines = [
        f"✓ Conversion successful: {result.output_path}",
        f"  Time taken: {result.elapsed_s:.2f}s",
    ]

    sizes = _file_sizes(input_path, result.output_path)
    if sizes is not None:
        input_size, output_size = sizes
        lines += [
            f"  Input size: {format_bytes(input_size)}",
            f"  Output size: {format_bytes(output_size)}",
            f"  Size ratio: {size_ratio(input_size, output_size):.1f}%",
        ]
    return lines
