"""RU: Проверки, сборка команды FFmpeg и запуск конвертации.

EN: Preflight checks, FFmpeg command assembly and the conversion run.
"""

from __future__ import annotations

import logging
import shlex
import subprocess
import time
from pathlib import Path
from typing import Final

from telegram_video_converter.config import ConversionConfig, ConversionResult
from telegram_video_converter.errors import (
    EncoderUnavailableError,
    EncodingError,
    InputNotFoundError,
    LaunchError,
    OutputExistsError,
)

LOG = logging.getLogger(__name__)

ENCODER: Final = "ffmpeg"
OUTPUT_SUFFIX: Final = "_telegram.mp4"

# Baseline H.264 + stereo AAC in a faststart MP4 plays on every Telegram client.
VIDEO_CODEC: Final = "libx264"
VIDEO_PROFILE: Final = "baseline"
VIDEO_LEVEL: Final = "3.0"
PIXEL_FORMAT: Final = "yuv420p"
AUDIO_CODEC: Final = "aac"
AUDIO_SAMPLE_RATE: Final = 44100
AUDIO_CHANNELS: Final = 2
CONTAINER: Final = "mp4"


def _run_subprocess(cmd: list[str]) -> subprocess.CompletedProcess[bytes]:
    """Run a subprocess command with captured output."""

    normalized_cmd = [str(part) for part in cmd]
    return subprocess.run(normalized_cmd, capture_output=True, check=False)


def _path_exists(path: str) -> bool:
    # Path("") is ".", which always exists.
    return bool(path) and Path(path).exists()


def check_input(path: str) -> None:
    if not _path_exists(path):
        raise InputNotFoundError(path)


def ensure_encoder_available(encoder: str = ENCODER) -> None:
    """Probe ``<encoder> -version``; only a failure to start counts as missing."""

    try:
        _run_subprocess([encoder, "-version"])
    except OSError as exc:
        LOG.debug("version probe failed: %s", exc)
        raise EncoderUnavailableError(encoder) from exc


def check_output(path: str, *, overwrite: bool) -> None:
    if _path_exists(path) and not overwrite:
        raise OutputExistsError(path)


def derive_output_path(input_path: str) -> str:
    """Return ``<parent>/<stem>_telegram.mp4`` for the given input path.

    Only the final extension is dropped, so ``a.b.mp4`` becomes
    ``a.b_telegram.mp4``. A bare filename stays in the current directory.
    """

    path = Path(input_path)
    return str(path.parent / f"{path.stem}{OUTPUT_SUFFIX}")


def resolve_output_path(config: ConversionConfig) -> str:
    if config.output is not None:
        return config.output
    return derive_output_path(config.input)


def build_ffmpeg_command(
    config: ConversionConfig, output_path: str, encoder: str = ENCODER,
) -> list[str]:
    """Assemble the encoder argument list for ``config``."""

    cmd = [encoder, "-i", config.input]
    if config.overwrite:
        cmd.append("-y")

    cmd += [
        "-c:v",
        VIDEO_CODEC,
        "-profile:v",
        VIDEO_PROFILE,
        "-level",
        VIDEO_LEVEL,
        "-pix_fmt",
        PIXEL_FORMAT,
        "-crf",
        str(config.crf),
        "-maxrate",
        f"{config.bitrate}k",
        "-bufsize",
        f"{config.bitrate * 2}k",
        "-r",
        str(config.fps),
    ]

    cmd += [
        "-c:a",
        AUDIO_CODEC,
        "-ar",
        str(AUDIO_SAMPLE_RATE),
        "-ac",
        str(AUDIO_CHANNELS),
        "-b:a",
        f"{config.audio_bitrate}k",
    ]

    cmd += ["-movflags", "+faststart", "-f", CONTAINER, output_path]

    if not config.verbose:
        cmd += ["-loglevel", "error"]

    return cmd


def run_encoder(cmd: list[str], *, verbose: bool) -> float:
    """Run the encoder to completion and return the wall-clock seconds taken.

    Raises:
        LaunchError: the process could not be started.
        EncodingError: the process exited with a non-zero status.

    """
    stdout = None if verbose else subprocess.DEVNULL
    start = time.perf_counter()
    try:
        res = subprocess.run(cmd, stdout=stdout, check=False)
    except OSError as exc:
        raise LaunchError(cmd[0], exc) from exc
    elapsed = time.perf_counter() - start

    if res.returncode != 0:
        raise EncodingError(res.returncode)
    return elapsed


def prepare(config: ConversionConfig) -> str:
    """Run every preflight check and return the resolved output path."""

    check_input(config.input)
    ensure_encoder_available()
    output_path = resolve_output_path(config)
    check_output(output_path, overwrite=config.overwrite)
    return output_path


def convert(config: ConversionConfig, output_path: str) -> ConversionResult:
    """Encode ``config.input`` into ``output_path`` (already checked by ``prepare``)."""

    cmd = build_ffmpeg_command(config, output_path)
    LOG.debug("running: %s", shlex.join(cmd))
    elapsed = run_encoder(cmd, verbose=config.verbose)
    return ConversionResult(output_path=output_path, elapsed_s=elapsed)
