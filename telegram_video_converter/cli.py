"""RU: Точка входа CLI: разбор аргументов, проверки, конвертация и отчёт.

EN: CLI entrypoint: parse arguments, run checks, convert and report.
"""

from __future__ import annotations

import argparse
import logging

from telegram_video_converter import __version__
from telegram_video_converter.config import (
    DEFAULT_AUDIO_BITRATE_KBPS,
    DEFAULT_CRF,
    DEFAULT_FPS,
    DEFAULT_VIDEO_BITRATE_KBPS,
    ConversionConfig,
)
from telegram_video_converter.converter import convert, prepare
from telegram_video_converter.errors import ConversionError
from telegram_video_converter.report import format_banner, format_report
from telegram_video_converter.utils.logging_utils import setup_logging

LOG = logging.getLogger(__name__)


def _non_negative_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        message = f"invalid integer value: {value!r}"
        raise argparse.ArgumentTypeError(message) from None
    if number < 0:
        message = f"must be a non-negative integer: {value!r}"
        raise argparse.ArgumentTypeError(message)
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""

    ap = argparse.ArgumentParser(
        prog="telegram-video-converter",
        description="Convert videos to Telegram Mobile compatible format",
    )
    ap.add_argument("input", help="Input video file to convert")
    ap.add_argument(
        "-o",
        "--output",
        default=None,
        help="Output file path (default: <input>_telegram.mp4 next to the input)",
    )
    ap.add_argument(
        "-b",
        "--bitrate",
        type=_non_negative_int,
        default=DEFAULT_VIDEO_BITRATE_KBPS,
        help="Video bitrate in kbps",
    )
    ap.add_argument(
        "-a",
        "--audio-bitrate",
        type=_non_negative_int,
        default=DEFAULT_AUDIO_BITRATE_KBPS,
        help="Audio bitrate in kbps",
    )
    ap.add_argument(
        "-f", "--fps", type=_non_negative_int, default=DEFAULT_FPS, help="Frame rate",
    )
    ap.add_argument(
        "-c",
        "--crf",
        type=_non_negative_int,
        default=DEFAULT_CRF,
        help="CRF quality (lower = better quality, 18-28 recommended)",
    )
    ap.add_argument(
        "-y", "--overwrite", action="store_true", help="Overwrite output file if it exists",
    )
    noise = ap.add_mutually_exclusive_group()
    noise.add_argument(
        "-v", "--verbose", action="store_true", help="Show ffmpeg output (verbose mode)",
    )
    noise.add_argument(
        "-q", "--quiet", action="store_true", help="Only print errors",
    )
    ap.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return ap.parse_args(argv)


def _print_lines(lines: list[str], *, quiet: bool) -> None:
    if quiet:
        return
    for line in lines:
        print(line)


def main(argv: list[str] | None = None) -> int:
    """Main entry point; returns the process exit code."""

    args = parse_args(argv)
    config = ConversionConfig.from_args(args)
    setup_logging(verbose=config.verbose, quiet=config.quiet)

    try:
        output_path = prepare(config)
        _print_lines(format_banner(config, output_path), quiet=config.quiet)
        result = convert(config, output_path)
    except ConversionError as exc:
        LOG.error("%s", exc)
        return 1

    _print_lines(format_report(result, config.input), quiet=config.quiet)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
