"""Configuration file loader and validator.

Handles reading, formatting, and validating settings from the INI configuration file.
Raises exceptions for any issues encountered during loading.
"""

from __future__ import annotations

import ast
import configparser
from configparser import ConfigParser
from dataclasses import fields
from pathlib import Path
from typing import TYPE_CHECKING, Any, Final

from models.config_models import Config
from models.translation_models import PRIORITIES
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Callable
    from dataclasses import Field as DataclassField
else:
    from dataclasses import Field as DataclassField

__all__: list[str] = [
    "Config",
    "ConfigFileNotFoundError",
    "ConfigFormatError",
    "ConfigLoader",
    "ConfigLoaderError",
    "ConfigTypeError",
    "ConfigValueError",
]

logger: logging.Logger = LoggerUtils.get_logger(__name__)

ALLOWED_REMOTE_ENGINES: Final[list[str]] = ["remote"]
ALLOWED_LOG_LEVELS: Final[list[str]] = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ConfigLoaderError(Exception):
    """An error occurred while processing the configuration file."""


class ConfigFileNotFoundError(ConfigLoaderError):
    """The specified configuration file does not exist."""


class ConfigFormatError(ConfigLoaderError):
    """The configuration file is not formatted correctly."""


class ConfigValueError(ConfigFormatError):
    """The configuration file contains an invalid value."""


class ConfigTypeError(ConfigFormatError):
    """The configuration file contains an invalid type."""


class ConfigLoader:
    """Handles loading and validation of configuration settings.

    Args:
        config_filename (str): INI file name to load.
        script_name (str): Executing script name, used in error messaging.
        required (bool): If False, a missing file yields the default configuration.
        debug (bool): Command-line override for GENERAL.DEBUG.

    Raises:
        ConfigFileNotFoundError: If the configuration file does not exist and is required.
        ConfigFormatError: If the file cannot be parsed or contains invalid values/types.
    """

    def __init__(
        self,
        *,
        config_filename: str,
        script_name: str,
        required: bool = True,
        **args,
    ) -> None:
        config_path = Path(config_filename)
        msg: str
        parser: ConfigParser = ConfigParser()

        if config_path.exists():
            try:
                parser.read(config_filename, encoding="utf-8")
            except configparser.Error as err:
                msg = f"Failed to parse configuration file '{config_filename}': {err}"
                raise ConfigFormatError(msg) from None
        elif required:
            msg = (
                f"Configuration file '{config_filename}' not found. "
                f"Please create '{config_filename}' in the same directory as '{script_name}'."
            )
            raise ConfigFileNotFoundError(msg)
        else:
            logger.info("Configuration file '%s' not found, using defaults", config_filename)

        self.config = Config()
        self._convert_settings(parser)
        self.config.GENERAL.SCRIPT_NAME = script_name
        # Apply command-line argument overrides
        if args.get("debug", False):
            self.config.GENERAL.DEBUG = True
        self._validate_settings()

    def _convert_settings(self, parser: ConfigParser) -> None:
        """Convert configuration settings from the parser to the Config object.

        Args:
            parser (ConfigParser): Parsed INI data.

        Raises:
            ConfigFormatError: If a value cannot be parsed or coerced to the expected type.
        """
        formatter = _ConfigFormatter(self.config, parser)
        for section in fields(self.config):
            if not parser.has_section(section.name):
                logger.debug("Skipping undefined section: '%s'", section.name)
                continue
            for key in fields(getattr(self.config, section.name)):
                if not parser.has_option(section.name, key.name):
                    logger.debug("Skipping undefined setting: '%s.%s'", section.name, key.name)
                    continue
                formatted_value = formatter.apply_format(section, key)
                setattr(getattr(self.config, section.name), key.name, formatted_value)

    def _validate_settings(self) -> None:
        """Validate value ranges and cross-field requirements.

        Raises:
            ConfigFormatError: If validation fails for any setting.
        """
        try:
            for section_name, key_name in (
                ("CACHE", "TTL_SEC"),
                ("CACHE", "MAX_ENTRIES"),
                ("CACHE", "KEY_TEXT_LENGTH"),
                ("QUEUE", "CONCURRENCY_LIMIT"),
                ("REMOTE", "TIMEOUT"),
            ):
                self._validate_positive(section_name, key_name)
            self._validate_non_negative("PREVIEW", "DEBOUNCE_MS")
            self._validate_unit_interval("TRANSLATION", "FALLBACK_CONFIDENCE")
            self._validate_unit_interval("REMOTE", "MIN_CONFIDENCE")
            self._validate_choice("TRANSLATION", "PREVIEW_PRIORITY", list(PRIORITIES))
            self._validate_choice("TRANSLATION", "BATCH_PRIORITY", list(PRIORITIES))
            self._validate_choice("GENERAL", "LOG_LEVEL", ALLOWED_LOG_LEVELS)
            self._inspect_defined_item("REMOTE", "ENGINE", ALLOWED_REMOTE_ENGINES)
            self._validate_remote()
            self._validate_phrase_dictionaries()
        except (AttributeError, TypeError) as err:
            msg: str = f"Invalid configuration value: {err}"
            raise ConfigTypeError(msg) from None

    def _value(self, section_name: str, key_name: str) -> Any:
        return getattr(getattr(self.config, section_name), key_name)

    def _validate_positive(self, section_name: str, key_name: str) -> None:
        if self._value(section_name, key_name) <= 0:
            msg: str = f"'{section_name}.{key_name}' must be positive"
            raise ConfigValueError(msg)

    def _validate_non_negative(self, section_name: str, key_name: str) -> None:
        if self._value(section_name, key_name) < 0:
            msg: str = f"'{section_name}.{key_name}' must not be negative"
            raise ConfigValueError(msg)

    def _validate_unit_interval(self, section_name: str, key_name: str) -> None:
        if not 0.0 <= self._value(section_name, key_name) <= 1.0:
            msg: str = f"'{section_name}.{key_name}' must be between 0.0 and 1.0"
            raise ConfigValueError(msg)

    def _validate_choice(self, section_name: str, key_name: str, defined_list: list[str]) -> None:
        value: Any = self._value(section_name, key_name)
        if value not in defined_list:
            msg: str = (
                f"Unsupported value used for '{section_name}.{key_name}': {value!r}, expected one of {defined_list}"
            )
            raise ConfigValueError(msg)

    def _inspect_defined_item(self, section_name: str, key_name: str, defined_list: list[str]) -> None:
        """Verify that configuration values match allowed options.

        Logs warnings for unrecognized values but does not raise exceptions.

        Raises:
            ConfigTypeError: If the configured value is neither list nor str.
        """
        value: str | list[str] = self._value(section_name, key_name)
        field_name: str = f"{section_name}.{key_name}"

        if isinstance(value, (list, str)):
            values: list[str] = value if isinstance(value, list) else [value]
            for val in values:
                if val not in defined_list:
                    logger.warning("Unknown value '%s' is set for '%s'", val, field_name)
        else:
            msg: str = f"Unsupported type used for '{field_name}': {type(value)}"
            raise ConfigTypeError(msg)

    def _validate_remote(self) -> None:
        if self.config.REMOTE.ENABLED and not self.config.REMOTE.URL:
            msg = "'REMOTE.URL' is required when 'REMOTE.ENABLED' is True"
            raise ConfigValueError(msg)

    def _validate_phrase_dictionaries(self) -> None:
        files: Any = self.config.DICTIONARY.PHRASE_DIC
        if not isinstance(files, list) or not all(isinstance(name, str) for name in files):
            msg = "'DICTIONARY.PHRASE_DIC' must be a list of file names"
            raise ConfigTypeError(msg)


class _ConfigFormatter:
    """Converts INI string values to typed Python objects (bool, int, float, str, list, dict)."""

    def __init__(self, config: Config, parser: ConfigParser) -> None:
        self.config: Config = config
        self.parser: ConfigParser = parser

    def apply_format(self, section: DataclassField[Any], key: DataclassField[Any]) -> Any:
        """Convert INI value to the expected Python type based on the Config field type.

        Args:
            section (DataclassField[Any]): Configuration section field containing the key.
            key (DataclassField[Any]): Target field within the section.

        Returns:
            Any: Parsed value coerced to the type declared in the config dataclass.

        Raises:
            ConfigValueError: If a value cannot be coerced to the expected type.
            ConfigFormatError: If literal evaluation fails due to invalid syntax.
            ConfigTypeError: If the literal does not have the declared type.
        """
        formatters: dict[
            type[bool | int | float], Callable[[DataclassField[Any], DataclassField[Any]], bool | int | float]
        ] = {
            bool: self.parse_as_boolean,
            int: self.parse_as_integer,
            float: self.parse_as_float,
        }

        default: Any = getattr(getattr(self.config, section.name), key.name)
        formatter: Callable[[DataclassField[Any], DataclassField[Any]], bool | int | float] | None = formatters.get(
            type(default)
        )
        msg: str
        if formatter:
            try:
                return formatter(section, key)
            except ValueError as err:
                msg = f"Invalid value for {section.name}.{key.name}: {err}"
                raise ConfigValueError(msg) from err

        value_str: str = self.parser[section.name][key.name]
        try:
            value: Any = ast.literal_eval(value_str)
        except ValueError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigValueError(msg) from err
        except SyntaxError as err:
            msg = f"Invalid literal for {section.name}.{key.name}: {value_str}"
            raise ConfigFormatError(msg) from err
        if not isinstance(value, type(default)):
            msg = f"Invalid type for {section.name}.{key.name}: expected {type(default).__name__}, got {value_str}"
            raise ConfigTypeError(msg)
        return value

    def parse_as_float(self, section: DataclassField[Any], key: DataclassField[Any]) -> float:
        """Convert INI string to float."""
        value: str = self.parser.get(section.name, key.name)
        for char in ("'", '"'):
            value = value.removeprefix(char).removesuffix(char)
        return float(value)

    def parse_as_integer(self, section: DataclassField[Any], key: DataclassField[Any]) -> int:
        """Convert INI string to integer."""
        value: str = self.parser.get(section.name, key.name)
        for char in ("'", '"'):
            value = value.removeprefix(char).removesuffix(char)
        return int(float(value))

    def parse_as_boolean(self, section: DataclassField[Any], key: DataclassField[Any]) -> bool:
        """Convert INI string to boolean."""
        return self.parser.getboolean(section.name, key.name)
