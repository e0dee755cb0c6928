"""Command-line front end for the scriptbridge engine.

Runs one operation of the translation and transliteration engine on the given text and prints the
result. All operations go through the queued API, so the same cache, coalescing and remote
fallback apply as in an embedding application.

Examples:
    python scriptbridge.py transliterate namaste --target hindi
    python scriptbridge.py translate "thank you" --source english --target hindi
    python scriptbridge.py chat "namaste" --sender hindi --receiver english
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Final, NoReturn, cast

from config.loader import Config, ConfigLoader, ConfigLoaderError
from core.shared_data import SharedData
from utils.file_utils import FileUtils, FileUtilsError
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans.manager import TransManager
    from models.language_models import DetectionResult
    from models.translation_models import ChatMessageViews, TranslationResult
    from utils.logger_utils import LevelType

CFG_FILE: Final[str] = "scriptbridge.ini"

logger: logging.Logger = LoggerUtils.get_logger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Args:
        argv (Sequence[str] | None): Arguments to parse. Defaults to sys.argv[1:].

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        description="Transliterate, translate and detect the script of short chat messages",
        epilog="Example: python scriptbridge.py translate 'thank you' --source english --target hindi",
    )
    parser.add_argument("--config", dest="config", metavar="FILE", help=f"Configuration file (default: {CFG_FILE})")
    parser.add_argument("--debug", dest="debug", action="store_true", help="Enable debug logging")

    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    transliterate = commands.add_parser("transliterate", help="Render romanized text in a native script")
    transliterate.add_argument("text")
    transliterate.add_argument("--target", required=True, metavar="LANGUAGE")

    translate = commands.add_parser("translate", help="Translate a short phrase")
    translate.add_argument("text")
    translate.add_argument("--source", required=True, metavar="LANGUAGE")
    translate.add_argument("--target", required=True, metavar="LANGUAGE")

    detect = commands.add_parser("detect", help="Detect the script of a text")
    detect.add_argument("text")

    chat = commands.add_parser("chat", help="Show the sender and receiver views of a chat message")
    chat.add_argument("text")
    chat.add_argument("--sender", required=True, metavar="LANGUAGE")
    chat.add_argument("--receiver", required=True, metavar="LANGUAGE")

    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file and apply CLI overrides.

    Without --config the default file is optional and missing settings fall back to defaults.

    Raises:
        ConfigLoaderError: If the configuration file cannot be loaded.
    """
    script_name: str = Path(sys.argv[0]).name
    config_filename: str = args.config or CFG_FILE
    return ConfigLoader(
        config_filename=config_filename,
        script_name=script_name,
        required=args.config is not None,
        debug=args.debug,
    ).config


def configure_logging(config: Config) -> None:
    level: LevelType = "DEBUG" if config.GENERAL.DEBUG else cast("LevelType", config.GENERAL.LOG_LEVEL)
    log_file: str = str(FileUtils.resolve_path(config.GENERAL.LOG_FILE)) if config.GENERAL.LOG_FILE else ""
    LoggerUtils.configure(log_file, level=level)


def format_result(result: TranslationResult) -> str:
    lines: list[str] = [result.text]
    details: str = f"[{result.method}, confidence {result.confidence:.2f}]"
    if result.error:
        details += f" error: {result.error}"
    lines.append(details)
    return "\n".join(lines)


def format_detection(detection: DetectionResult) -> str:
    suffix: str = " (ambiguous)" if detection.ambiguous else ""
    return f"{detection.language} [{detection.script}, confidence {detection.confidence:.2f}]{suffix}"


def format_chat(views: ChatMessageViews) -> str:
    return "\n".join(
        (
            f"sender:   {views.sender_view}",
            f"receiver: {views.receiver_view}",
            f"transliterated: {views.was_transliterated}, translated: {views.was_translated}",
        )
    )


async def run_command(manager: TransManager, args: argparse.Namespace) -> str:
    """Execute the selected subcommand and return its printable output.

    Raises:
        TypeError: If an argument has the wrong type.
        ValueError: If a language identifier is empty.
    """
    match args.command:
        case "transliterate":
            return format_result(await manager.enqueue_transliteration(args.text, args.target, "high"))
        case "translate":
            return format_result(await manager.translate_async(args.text, args.source, args.target, "high"))
        case "detect":
            return format_detection(manager.detect(args.text))
        case "chat":
            return format_chat(await manager.process_message_for_chat(args.text, args.sender, args.receiver))
        case _:
            msg = f"Unknown command: {args.command}"
            raise ValueError(msg)


async def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Process exit code.
    """
    args: argparse.Namespace = parse_arguments(argv)
    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print("\nError: Failed to load configuration file.", file=sys.stderr)
        print(f"Details: {err}", file=sys.stderr)
        return 1

    configure_logging(config)
    shared_data = SharedData(config)
    try:
        await shared_data.async_init()
    except (FileUtilsError, OSError, RuntimeError) as err:
        print(f"\nError: Failed to initialize the engine: {err}", file=sys.stderr)
        return 1

    try:
        print(await run_command(shared_data.trans_manager, args))
    except (TypeError, ValueError) as err:
        print(f"\nError: {err}", file=sys.stderr)
        return 1
    finally:
        await shared_data.component_teardown()
        logger.debug("Engine shut down")
    return 0


if __name__ == "__main__":
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\n\nCancelled by user.", file=sys.stderr)
        sys.exit(130)
