"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import pytest


@pytest.fixture
def pacman_config_text() -> str:
    """Minimal pacman configuration."""
    return """[packageManager]
name = "pacman"
args = ["--noconfirm"]

[pkgs]
install = ["vim", "git"]
"""


@pytest.fixture
def mock_pacman_output() -> str:
    """Sample pacman -Qeq output for testing."""
    return """base
base-devel
git
linux
neovim
"""


@pytest.fixture
def mock_apt_mark_output() -> str:
    """Sample apt-mark showmanual output for testing."""
    return """curl
firefox
htop
"""
