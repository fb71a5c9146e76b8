"""Factory for creating GitManager instances from settings."""

import logging

from ..config.settings import Settings
from ..protocols import GitManagerProtocol
from .auth import CloneAuthenticator
from .git_manager import GitManager


def create_git_manager_from_settings(
    settings: Settings, logger: logging.Logger
) -> GitManagerProtocol:
    """
    Create a GitManager wired with credentials from application settings.

    Args:
        settings: Application settings
        logger: Logger shared by the manager and its authenticator

    Returns:
        GitManagerProtocol implementation
    """
    authenticator = CloneAuthenticator.from_settings(settings, logger=logger)
    return GitManager(authenticator=authenticator, logger=logger)
