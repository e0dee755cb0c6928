from __future__ import annotations

import logging
import sys
import warnings
from logging import Formatter, NullHandler, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, NamedTuple, TextIO

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LogLevel", "LoggerUtils"]

type LevelType = Literal[
    "NOTSET",
    "DEBUG",
    "INFO",
    "WARNING",
    "ERROR",
    "CRITICAL",
]

_LOG_FILE_SIZE: Final[int] = 2 * 1024 * 1024  # 2MB
_LOG_BACKUP_COUNT: Final[int] = 2

DEFAULT_LOG_LEVEL: Final[int] = logging.INFO
DEFAULT_NAMESPACE: Final[str] = "ScriptBridge"

_CONSOLE_FORMAT: Final[str] = "%(levelname)s: %(message)s"
_FILE_FORMAT: Final[str] = (
    "%(asctime)s %(levelname)-8s %(process)5d %(thread)5d %(lineno)4d %(name)-40s\t%(funcName)s\t%(message)s"
)


class LogLevel(NamedTuple):
    """Logging level as both name and numeric value.

    Attributes:
        name (str): Level name such as 'INFO'.
        value (int): Numeric level.
    """

    name: str
    value: int


class LoggerUtils:
    """Process-wide logging set-up for the engine.

    Every module obtains its logger through ``get_logger(__name__)``; loggers live under a single
    namespace so that one call to ``configure()`` attaches handlers for the whole package.
    Configuration happens at most once per process, later calls are ignored with a warning.

    Attributes:
        _namespace (ClassVar[str]): Namespace prefix for all package loggers.
        _configured (ClassVar[bool]): Whether handlers have been attached.
    """

    _namespace: ClassVar[str] = DEFAULT_NAMESPACE
    _configured: ClassVar[bool] = False

    @classmethod
    def configure(
        cls,
        filename: str | Path = "",
        *,
        level: LevelType = "INFO",
        use_null_console: bool = False,
    ) -> logging.Logger:
        """Attach console and file handlers to the namespace root logger.

        The console only shows WARNING and above. The rotating file handler records everything from DEBUG.

        Args:
            filename (str | Path): Absolute path of the log file. Empty disables file logging.
            level (LevelType): Level of the namespace root logger.
            use_null_console (bool): Discard console output (for embedded or windowless use).

        Returns:
            logging.Logger: The namespace root logger.
        """
        root_logger: logging.Logger = logging.getLogger(cls._namespace)
        if cls._configured:
            root_logger.warning("LoggerUtils is already configured; ignoring reconfiguration.")
            return root_logger

        cls._set_level(root_logger, level)
        cls._attach_console(root_logger, use_null_console=use_null_console or sys.stderr is None)

        filename = str(filename)
        if filename.strip():
            cls._attach_file(root_logger, filename)
        else:
            root_logger.debug("No log file specified; file logging disabled.")

        warnings.showwarning = cls._warning_to_log
        cls._configured = True
        return root_logger

    @classmethod
    def initialize(cls, namespace: str) -> None:
        """Change the logger namespace before configuration.

        Args:
            namespace (str): New namespace prefix.

        Raises:
            RuntimeError: If logging has already been configured.
        """
        if cls._configured:
            msg = "LoggerUtils is already configured. Reinitialization is not allowed."
            raise RuntimeError(msg)
        cls._namespace = namespace

    @classmethod
    def reset(cls) -> None:
        """Detach all handlers and allow reconfiguration. Intended for tests and shutdown."""
        root_logger: logging.Logger = logging.getLogger(cls._namespace)
        for handler in list(root_logger.handlers):
            root_logger.removeHandler(handler)
            handler.close()
        cls._configured = False

    @classmethod
    def is_configured(cls) -> bool:
        return cls._configured

    @classmethod
    def set_level(cls, level: LevelType) -> None:
        """Change the level of the namespace root logger.

        Unknown level names fall back to INFO with a warning.
        """
        cls._set_level(logging.getLogger(cls._namespace), level)

    @classmethod
    def get_level(cls) -> LogLevel:
        root_logger: logging.Logger = logging.getLogger(cls._namespace)
        value: int = root_logger.getEffectiveLevel()
        return LogLevel(name=logging.getLevelName(value), value=value)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Get a logger inside the package namespace.

        Args:
            name (str | None): Module name, usually ``__name__``. None returns the namespace root.

        Returns:
            logging.Logger: The namespaced logger.
        """
        namespace: str = LoggerUtils._namespace
        if not namespace:
            return logging.getLogger(name or None)
        return logging.getLogger(f"{namespace}.{name}" if name else namespace)

    @staticmethod
    def _set_level(root_logger: logging.Logger, level: str) -> None:
        level_map: dict[str, int] = logging.getLevelNamesMapping()
        try:
            root_logger.setLevel(level_map[level.upper()])
        except KeyError:
            root_logger.setLevel(DEFAULT_LOG_LEVEL)
            root_logger.warning("Unknown logging level '%s' specified. Logging level set to 'INFO'.", level)

    @staticmethod
    def _attach_console(root_logger: logging.Logger, *, use_null_console: bool) -> None:
        if use_null_console:
            root_logger.addHandler(NullHandler())
            return

        console_handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(Formatter(_CONSOLE_FORMAT))
        root_logger.addHandler(console_handler)

    @staticmethod
    def _attach_file(root_logger: logging.Logger, filename: str) -> None:
        try:
            file_handler = RotatingFileHandler(
                filename=filename,
                maxBytes=_LOG_FILE_SIZE,
                backupCount=_LOG_BACKUP_COUNT,
                encoding="utf-8",
            )
        except (FileNotFoundError, PermissionError):
            root_logger.error("Incorrect log file name: %s. Logging to the file is not performed.", filename)
            return

        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(Formatter(_FILE_FORMAT))
        root_logger.addHandler(file_handler)

    @classmethod
    def _warning_to_log(
        cls,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        # Signature mandated by warnings.showwarning
        _ = file, line
        logging.getLogger(cls._namespace).warning("%s:%d: %s: %s", filename, lineno, category.__name__, message)
