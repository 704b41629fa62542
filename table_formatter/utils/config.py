#!/usr/bin/env python3
"""
Shared configuration utility for the random table formatter.

Provides flexible .env file discovery and typed access to formatter
settings: input length limit, undo window, snapshot file location and
the default FormatConfig.
"""

import logging
import os
from pathlib import Path
from dotenv import load_dotenv
from typing import Optional

from ..formatting.data_models import FormatConfig

logger = logging.getLogger(__name__)

ENV_FILENAME = ".env.tableformat"

DEFAULT_MAX_INPUT_LENGTH = 50000
DEFAULT_UNDO_WINDOW_SECONDS = 5.0
DEFAULT_SNAPSHOT_FILE = "data/saved_tables.json"


class ConfigManager:
    """
    Centralized configuration management for the table formatter.

    Features:
    - Flexible .env file discovery (current dir + up to 2 parent dirs)
    - Typed environment helpers with fallbacks on invalid values
    - Default extraction/rendering settings
    """

    def __init__(self):
        self._env_loaded = False
        self._env_path: Optional[Path] = None
        self.load_environment()

    def load_environment(self) -> bool:
        """
        Search for and load the .env file.

        Search order:
        1. Current working directory
        2. One level up (parent directory)
        3. Two levels up (grandparent directory)

        Returns:
            bool: True if .env file was found and loaded, False otherwise
        """
        if self._env_loaded:
            return True

        search_paths = [
            Path.cwd(),
            Path.cwd().parent,
            Path.cwd().parent.parent
        ]

        for search_path in search_paths:
            env_file = search_path / ENV_FILENAME
            if env_file.exists() and env_file.is_file():
                logger.info(f"Loading {ENV_FILENAME} from: {env_file}")
                load_dotenv(env_file, override=True)
                self._env_path = env_file
                self._env_loaded = True
                return True

        logger.debug(f"No {ENV_FILENAME} found in current directory or up to 2 parent directories")
        return False

    def get_max_input_length(self) -> int:
        """
        Get the maximum accepted input length in characters.

        Returns:
            int: Positive character limit (default 50000)
        """
        value = self.get_env_int("TABLE_FORMAT_MAX_INPUT_LENGTH", DEFAULT_MAX_INPUT_LENGTH)
        if value < 1:
            logger.warning(
                f"TABLE_FORMAT_MAX_INPUT_LENGTH must be positive, using default {DEFAULT_MAX_INPUT_LENGTH}"
            )
            return DEFAULT_MAX_INPUT_LENGTH
        return value

    def get_undo_window_seconds(self) -> float:
        """How long a cleared input or deleted table can be restored."""
        return self.get_env_float("TABLE_FORMAT_UNDO_WINDOW_SECONDS", DEFAULT_UNDO_WINDOW_SECONDS)

    def get_snapshot_file(self) -> str:
        """Path of the JSON file holding saved tables."""
        return self.get_env_string("TABLE_FORMAT_SNAPSHOT_FILE", DEFAULT_SNAPSHOT_FILE)

    def get_default_format_config(self) -> FormatConfig:
        """
        Build the default FormatConfig from the environment.

        Invalid values fall back to the FormatConfig defaults.

        Returns:
            FormatConfig: Default extraction/rendering settings
        """
        defaults = FormatConfig()
        try:
            return FormatConfig(
                detect_columns=self.get_env_bool("TABLE_FORMAT_DETECT_COLUMNS", defaults.detect_columns),
                column_count=self.get_env_int("TABLE_FORMAT_COLUMN_COUNT", defaults.column_count),
                column_delimiter=self.get_env_string("TABLE_FORMAT_DELIMITER", defaults.column_delimiter.label),
                output_format=self.get_env_string("TABLE_FORMAT_OUTPUT_FORMAT", defaults.output_format.value),
                show_line_numbers=self.get_env_bool("TABLE_FORMAT_SHOW_LINE_NUMBERS", defaults.show_line_numbers),
            )
        except ValueError as e:
            logger.warning(f"Invalid format settings in environment ({e}), using defaults")
            return defaults

    def print_config_summary(self) -> None:
        """Print a summary of current configuration for debugging."""
        print("\n=== Configuration Summary ===")
        print(f"Environment file: {self._env_path or 'Not found'}")
        print(f"Environment loaded: {self._env_loaded}")
        print(f"Max input length: {self.get_max_input_length()}")
        print(f"Undo window: {self.get_undo_window_seconds()}s")
        print(f"Snapshot file: {self.get_snapshot_file()}")
        print(f"Default format: {self.get_default_format_config().to_dict()}")
        print("==============================\n")

    def get_env_string(self, key: str, default: str = None) -> str:
        """
        Get string environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            str: Environment variable value or default
        """
        return os.getenv(key, default)

    def get_env_int(self, key: str, default: int) -> int:
        """
        Get integer environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found or invalid

        Returns:
            int: Environment variable value or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return int(value)
        except ValueError:
            logger.warning(f"Invalid integer value for {key}, using default {default}")
            return default

    def get_env_float(self, key: str, default: float) -> float:
        """
        Get float environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found or invalid

        Returns:
            float: Environment variable value or default
        """
        value = os.getenv(key)
        if value is None:
            return default
        try:
            return float(value)
        except ValueError:
            logger.warning(f"Invalid float value for {key}, using default {default}")
            return default

    def get_env_bool(self, key: str, default: bool) -> bool:
        """
        Get boolean environment variable.

        Args:
            key: Environment variable name
            default: Default value if not found

        Returns:
            bool: True if value is 'true', '1', 'yes', 'on' (case-insensitive)
        """
        value = os.getenv(key)
        if value is None:
            return default
        return value.lower() in ('true', '1', 'yes', 'on')


# Global singleton instance for easy import
config = ConfigManager()


def get_max_input_length() -> int:
    """Convenience function for the input length limit."""
    return config.get_max_input_length()


def get_undo_window_seconds() -> float:
    """Convenience function for the undo window."""
    return config.get_undo_window_seconds()


def get_snapshot_file() -> str:
    """Convenience function for the snapshot file path."""
    return config.get_snapshot_file()


def get_default_format_config() -> FormatConfig:
    """Convenience function for the default FormatConfig."""
    return config.get_default_format_config()


def get_env_string(key: str, default: str = None) -> str:
    """Convenience function for getting string environment variable."""
    return config.get_env_string(key, default)


def get_env_int(key: str, default: int) -> int:
    """Convenience function for getting integer environment variable."""
    return config.get_env_int(key, default)


def get_env_float(key: str, default: float) -> float:
    """Convenience function for getting float environment variable."""
    return config.get_env_float(key, default)


def get_env_bool(key: str, default: bool) -> bool:
    """Convenience function for getting boolean environment variable."""
    return config.get_env_bool(key, default)


if __name__ == "__main__":
    config.print_config_summary()
