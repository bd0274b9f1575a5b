"""Configuration for git service detection.

Example:
    >>> from detect_git_service.config import load_settings
    >>> settings = load_settings()
    >>> settings.git_command
    'git'
"""

from detect_git_service.config.settings import DetectorSettings, load_settings

__all__ = ["DetectorSettings", "load_settings"]
