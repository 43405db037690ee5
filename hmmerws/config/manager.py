#!/usr/bin/env python3
"""
Configuration manager for hmmerws
Handles loading and accessing configuration from various sources.
"""
import copy
import os
import json
import logging
from typing import Dict, Any, Optional, List

import yaml

from hmmerws.exceptions import ConfigurationError
from .schema import ConfigSchema
from .defaults import DEFAULT_CONFIG


class ConfigManager:
    """Configuration manager for hmmerws"""

    ENV_PREFIX = "HMMERWS_"

    def __init__(self, config_path: Optional[str] = None):
        """Initialize configuration manager

        Args:
            config_path: Path to configuration file (optional)

        Raises:
            ConfigurationError: If the configuration file cannot be read
        """
        self.logger = logging.getLogger("hmmerws.config")
        self.config_path = config_path
        self.config: Dict[str, Any] = {}

        self._load_defaults()

        if config_path:
            if not os.path.exists(config_path):
                raise ConfigurationError(f"Configuration file not found: {config_path}",
                                         {'config_path': config_path})
            self._load_from_file(config_path)

            local_config_path = self._get_local_config_path(config_path)
            if os.path.exists(local_config_path):
                self._load_from_file(local_config_path)
                self.logger.info(f"Merged local configuration from {local_config_path}")

        self._load_from_env()

        self.errors = self._validate_config()

    def _get_local_config_path(self, config_path: str) -> str:
        """Get path to local configuration file based on main config path"""
        config_dir = os.path.dirname(config_path)
        name, ext = os.path.splitext(os.path.basename(config_path))

        # Format: <filename>.local.<extension>
        local_path = os.path.join(config_dir, f"{name}.local{ext}")
        self.logger.debug(f"Looking for local config at: {local_path}")
        return local_path

    def _load_defaults(self) -> None:
        """Load default configuration values"""
        self.config = copy.deepcopy(DEFAULT_CONFIG)
        self.logger.debug("Loaded default configuration")

    def _load_from_file(self, config_path: str) -> None:
        """Load configuration from YAML or JSON file

        Args:
            config_path: Path to configuration file
        """
        try:
            with open(config_path, 'r') as f:
                if config_path.endswith('.json'):
                    file_config = json.load(f)
                else:  # Assume YAML otherwise
                    file_config = yaml.safe_load(f) or {}
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Error loading config file {config_path}: {str(e)}",
                                     {'config_path': config_path}) from e

        if not isinstance(file_config, dict):
            raise ConfigurationError(f"Config file {config_path} does not contain a mapping",
                                     {'config_path': config_path})

        self._deep_update(self.config, file_config)
        self.logger.info(f"Loaded configuration from {config_path}")

    def _load_from_env(self) -> None:
        """Override config with environment variables

        Environment variables should be prefixed with HMMERWS_
        and use double underscore __ for nesting.
        Example: HMMERWS_SERVICE__HMMSCAN_URL for service.hmmscan_url
        """
        for key, value in os.environ.items():
            if not key.startswith(self.ENV_PREFIX):
                continue

            config_key = key[len(self.ENV_PREFIX):].lower()
            if "__" in config_key:
                self._set_nested_value(self.config, config_key.split("__"), value)
            else:
                self.config[config_key] = self._convert_value(value)

        self.logger.debug("Applied environment variable overrides")

    def _set_nested_value(self, config: Dict[str, Any],
                          key_parts: List[str], value: str) -> None:
        """Set a nested value in the configuration dictionary

        Args:
            config: Configuration dictionary
            key_parts: List of nested key parts
            value: Value to set
        """
        current = config
        for part in key_parts[:-1]:
            if not isinstance(current.get(part), dict):
                current[part] = {}
            current = current[part]

        current[key_parts[-1]] = self._convert_value(value)

    @staticmethod
    def _convert_value(value: str) -> Any:
        """Convert string environment variable to appropriate type

        Args:
            value: String value to convert

        Returns:
            Converted value with appropriate type
        """
        if value.lower() in ('true', 'yes'):
            return True
        elif value.lower() in ('false', 'no'):
            return False
        try:
            return int(value)
        except ValueError:
            try:
                return float(value)
            except ValueError:
                return value

    def _deep_update(self, target: Dict[str, Any], source: Dict[str, Any]) -> None:
        """Recursively update target dictionary with values from source"""
        for key, value in source.items():
            if key in target and isinstance(target[key], dict) and isinstance(value, dict):
                self._deep_update(target[key], value)
            else:
                target[key] = value

    def _validate_config(self) -> List[str]:
        """Validate the configuration against the schema"""
        errors = ConfigSchema.validate(self.config)

        if errors:
            for error in errors:
                self.logger.error(f"Configuration error: {error}")
            self.logger.warning("Using configuration with validation errors")
        else:
            self.logger.debug("Configuration validated successfully")

        return errors

    def get(self, key: str, default: Any = None) -> Any:
        """Get a configuration value using dot notation

        Args:
            key: Configuration key (can use dot notation for nested values)
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        current = self.config
        for part in key.split('.'):
            if not isinstance(current, dict) or part not in current:
                return default
            current = current[part]
        return current

    def get_service_config(self) -> Dict[str, Any]:
        """Get remote service configuration as a dictionary"""
        return self.config.get('service', {})
