"""
Configuration Manager
Configuration loading, schema validation, environment overrides and caching
"""

import copy
import json
import logging
import os
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union

import jsonschema
from jsonschema import ValidationError

DEFAULT_OPEN_EXTENSIONS = [
    ".txt", ".csv", ".tex", ".log", ".md", ".pdf",
    ".docx", ".xlsx", ".pptx", ".zip", ".rar", ".7z"
]

DEFAULT_CONFIG: Dict[str, Any] = {
    "start_dir": None,
    "log_dir": ".",
    "log_file": "cursor_explorer.log",
    "log_level": "INFO",
    "json_logs": False,
    "page_size": 10,
    "open_extensions": DEFAULT_OPEN_EXTENSIONS,
    "copy_chunk_size": 64 * 1024,
    "show_progress": True,
    "title": "Cursor Explorer"
}


class ConfigManager:
    """
    Configuration management with caching and validation

    Features:
    - Defaults for every key, so a config file is optional
    - Schema validation
    - Environment variable overrides (CURSOR_EXPLORER_*)
    - Caching keyed by resolved path and modification time
    """

    ENV_PREFIX = "CURSOR_EXPLORER_"

    DEFAULT_SCHEMA = {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "start_dir": {"type": ["string", "null"]},
            "log_dir": {"type": "string", "minLength": 1},
            "log_file": {"type": "string", "minLength": 1},
            "log_level": {"enum": ["DEBUG", "INFO", "WARNING", "ERROR"]},
            "json_logs": {"type": "boolean"},
            "page_size": {"type": "integer", "minimum": 1},
            "open_extensions": {
                "type": "array",
                "items": {"type": "string", "pattern": "^\\."}
            },
            "copy_chunk_size": {"type": "integer", "minimum": 1},
            "show_progress": {"type": "boolean"},
            "title": {"type": "string"}
        }
    }

    def __init__(self):
        self._cache: Dict[str, Dict[str, Any]] = {}
        self.logger = logging.getLogger(__name__)

    def load_config(
        self,
        config_path: Optional[Union[str, Path]] = None,
        validate: bool = True,
        use_cache: bool = True
    ) -> Dict[str, Any]:
        """
        Load configuration, falling back to defaults

        Args:
            config_path: Path to a JSON configuration file (optional)
            validate: Whether to validate against schema
            use_cache: Whether to use cached version if available

        Returns:
            Configuration dictionary with every key present

        Raises:
            FileNotFoundError: If config_path does not exist
            json.JSONDecodeError: If the file is not valid JSON
            ValidationError: If the configuration does not match the schema
        """
        if config_path is None:
            config = self._apply_env_overrides(copy.deepcopy(DEFAULT_CONFIG))
            if validate:
                self.validate_config(config)
            return config

        config_path = Path(config_path).resolve()
        cache_key = str(config_path)

        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        # Check cache
        if use_cache and cache_key in self._cache:
            cached_time = self._cache[cache_key]['_cached_at']
            if config_path.stat().st_mtime <= cached_time:
                self.logger.debug(f"Using cached config for {config_path}")
                return copy.deepcopy(self._cache[cache_key]['config'])

        self.logger.info(f"Loading configuration from {config_path}")
        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                loaded = json.load(f)
        except json.JSONDecodeError as e:
            self.logger.error(f"Invalid JSON in config file {config_path}: {e}")
            raise

        if not isinstance(loaded, dict):
            raise ValidationError("Configuration validation failed: top level must be an object")

        config = copy.deepcopy(DEFAULT_CONFIG)
        config.update(loaded)
        config = self._apply_env_overrides(config)

        if validate:
            self.validate_config(config)

        self._cache[cache_key] = {
            'config': config,
            '_cached_at': datetime.now().timestamp()
        }

        return copy.deepcopy(config)

    def _apply_env_overrides(self, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Apply environment variable overrides to configuration

        Example: CURSOR_EXPLORER_LOG_LEVEL=DEBUG

        Args:
            config: Original configuration

        Returns:
            Configuration with overrides applied
        """
        overrides = {
            'LOG_DIR': ('log_dir', str),
            'LOG_LEVEL': ('log_level', lambda v: v.upper()),
            'START_DIR': ('start_dir', str),
            'PAGE_SIZE': ('page_size', int),
        }

        for env_suffix, (config_key, convert) in overrides.items():
            env_var = f"{self.ENV_PREFIX}{env_suffix}"
            if env_var in os.environ:
                try:
                    config[config_key] = convert(os.environ[env_var])
                except ValueError:
                    raise ValidationError(
                        f"Configuration validation failed: {env_var} has invalid value "
                        f"{os.environ[env_var]!r}"
                    )
                self.logger.debug(f"Applied override {env_var}")

        return config

    def validate_config(
        self,
        config: Dict[str, Any],
        schema: Optional[Dict[str, Any]] = None
    ) -> bool:
        """
        Validate configuration against schema

        Args:
            config: Configuration to validate
            schema: JSON schema (uses default if not provided)

        Returns:
            True if valid

        Raises:
            ValidationError: If configuration is invalid
        """
        schema = schema or self.DEFAULT_SCHEMA

        try:
            jsonschema.validate(config, schema)
            return True
        except ValidationError as e:
            raise ValidationError(f"Configuration validation failed: {e.message}")

    def clear_cache(self) -> None:
        """Clear the configuration cache."""
        self._cache.clear()
        self.logger.debug("Configuration cache cleared")
