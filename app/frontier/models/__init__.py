"""Data models for frontier.

This module exports the configuration document models.
"""

from frontier.models.config import FrontierConfig, PackageManagerSection, PackagesSection

__all__ = ["FrontierConfig", "PackageManagerSection", "PackagesSection"]
