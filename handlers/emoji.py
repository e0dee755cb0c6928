"""Emoji removal ahead of script classification.

The emoji module keeps its unicode data in separate JSON files since version 2.14.1. Frozen builds
must bundle them, for example with collect_data_files('emoji.unicode_codes', includes=['*.json'])
in the PyInstaller build file.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import emoji
from packaging.version import Version

from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging


__all__: list[str] = ["EmojiHandler"]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

if Version(emoji.__version__) < Version("2.14.1"):
    logger.warning(
        "The version of the emoji module currently in use is %s. Version 2.14.1 or later is required.",
        emoji.__version__,
    )


class EmojiHandler:
    """Removes emojis so that they do not skew script classification.

    Chat input is full of emojis, which are neither Latin nor native script. The detector strips
    them before measuring the share of Latin letters.
    """

    @staticmethod
    def strip_emoji(text: str) -> str:
        """Remove every emoji from the text.

        Args:
            text (str): The text to clean.

        Returns:
            str: The text without emojis.
        """
        return emoji.replace_emoji(text, replace="")
