"""RU: Конвертер видео в формат, совместимый с мобильным Telegram.

EN: Convert videos to a Telegram mobile compatible format via ffmpeg.
"""

__version__ = "0.1.0"
