"""
Configuration for contract-metadata.

Re-exports the settings class, factories, and the lazy module singleton.
"""

from __future__ import annotations

from contract_metadata.config.base import MetadataSettings, get_settings, lazy_settings

# Module-level singleton (lazy-loaded)
settings = lazy_settings(MetadataSettings)

__all__ = [
    'MetadataSettings',
    'get_settings',
    'lazy_settings',
    'settings',
]
