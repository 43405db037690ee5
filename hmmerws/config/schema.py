#!/usr/bin/env python3
"""
Configuration schema definition for validation
"""
from typing import Dict, Any, List


class ConfigSchema:
    """Configuration schema for validation"""

    SCHEMA = {
        'service': {
            'hmmscan_url': {'type': str, 'required': True},
            'database': {'type': str, 'required': True},
            'cut_ga': {'type': bool, 'required': False},
            'connect_timeout': {'type': (int, float), 'required': False},
        },
        'logging': {
            'level': {'type': str, 'required': False},
            'format': {'type': str, 'required': False},
            'log_dir': {'type': str, 'required': False},
        },
    }

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> List[str]:
        """Validate configuration against schema

        Args:
            config: Configuration to validate

        Returns:
            List of validation errors (empty if valid)
        """
        errors = []

        for section, fields in cls.SCHEMA.items():
            if any(props.get('required', False) for props in fields.values()):
                if section not in config:
                    errors.append(f"Missing required configuration section: {section}")
                    continue

            if section not in config:
                continue

            section_config = config[section]
            if not isinstance(section_config, dict):
                errors.append(f"Configuration section {section} must be a mapping")
                continue

            for field, props in fields.items():
                if field not in section_config:
                    if props.get('required', False):
                        errors.append(f"Missing required configuration field: {section}.{field}")
                    continue

                expected_type = props.get('type')
                value = section_config[field]
                # bool is an int subclass; don't accept it as a number
                if expected_type is not bool and isinstance(value, bool):
                    type_ok = False
                else:
                    type_ok = isinstance(value, expected_type)

                if not type_ok:
                    errors.append(
                        f"Invalid type for {section}.{field}: expected {_type_name(expected_type)}, "
                        f"got {type(value).__name__}"
                    )

        return errors


def _type_name(expected_type) -> str:
    if isinstance(expected_type, tuple):
        return " or ".join(t.__name__ for t in expected_type)
    return expected_type.__name__
