"""Offer the settings of the package."""

from stix_sdk.settings.base_settings import StixSdkSettings, configure_logging

__all__ = [
    "StixSdkSettings",
    "configure_logging",
]
