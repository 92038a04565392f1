"""Configuration module using Pydantic Settings.

Provides a typed draft policy with environment variable support.

Usage:
    from draftstate.config import DraftSettings

    draft = draft_for(profile, policy=DraftSettings().policy())
"""

from draftstate.config.settings import DraftSettings

__all__ = [
    "DraftSettings",
]
