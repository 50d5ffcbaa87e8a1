"""
Base configuration for contract-metadata.

Settings are read from the environment (prefix CONTRACT_METADATA_). A .env
file is only read when LOAD_ENV_FILE or the env_file argument names one;
the working directory of the importing application is never searched.
"""

from __future__ import annotations

import os
import pathlib
from typing import TypeVar

import lazy_object_proxy
import pydantic_settings

T = TypeVar('T', bound='MetadataSettings')


class MetadataSettings(pydantic_settings.BaseSettings):
    """Package-wide configuration."""

    model_config = pydantic_settings.SettingsConfigDict(
        env_prefix='CONTRACT_METADATA_',
        env_file_encoding='utf-8',
        case_sensitive=True,  # Fail fast on misconfiguration
        extra='forbid',  # Reject unknown settings
    )

    # Application metadata
    APP_NAME: str = 'contract-metadata'
    VERSION: str = '0.1.0'

    # Feature switch: when False the from_native adapters are never defined.
    # Read once, when contract_metadata.descriptors is first imported.
    NATIVE_MODEL_AVAILABLE: bool = True

    # Show debug/info output from ConsoleLogger
    VERBOSE: bool = False


def get_settings(settings_class: type[T], env_file: str | None = None) -> T:
    """
    Factory for creating settings with dynamic .env file loading.

    LOAD_ENV_FILE environment variable specifies custom .env file path.
    When neither it nor env_file is given, loads from environment variables
    only; no .env in the working directory is consulted.

    Args:
        settings_class: Settings class to instantiate
        env_file: Optional path to .env file (overrides LOAD_ENV_FILE)

    Returns:
        Settings instance

    Raises:
        FileNotFoundError: If specified .env file doesn't exist
    """
    env_file_path = env_file or os.getenv('LOAD_ENV_FILE')

    if not env_file_path:
        return settings_class()

    resolved_path = pathlib.Path(env_file_path).resolve()
    if not resolved_path.exists():
        raise FileNotFoundError(f'Environment file not found: {resolved_path}')

    return settings_class(_env_file=resolved_path)


def lazy_settings(settings_class: type[T]) -> T:
    """
    Lazy settings - defers instantiation until first access.

    Args:
        settings_class: Settings class to instantiate

    Returns:
        Proxy that instantiates settings on first access
    """
    return lazy_object_proxy.Proxy(lambda: get_settings(settings_class))
