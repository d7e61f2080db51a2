"""
Configuration management for HTTP signature generation
"""

from .policy_config import (
    GenerateSignatureConfig,
    DEFAULT_VALIDITY_DURATION,
    load_config_from_dict,
    load_config_from_json,
    load_config_from_file,
)

__all__ = [
    'GenerateSignatureConfig',
    'DEFAULT_VALIDITY_DURATION',
    'load_config_from_dict',
    'load_config_from_json',
    'load_config_from_file',
]
