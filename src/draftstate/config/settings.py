"""Configuration settings using Pydantic Settings.

Usage:
    from draftstate.config import DraftSettings

    # Load from environment variables (DRAFTSTATE_*)
    settings = DraftSettings()

    # Or override with explicit values
    settings = DraftSettings(strict=False, fork_scope="private")
    draft = draft_for(original, policy=settings.policy())
"""

from __future__ import annotations

from typing import Literal

from draftstate.core.policy import DraftPolicy, ForkScope

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install draftstate[config]"
    ) from e


class DraftSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for draft construction.

    Attributes:
        strict: Raise on attributes the original lacks instead of warning.
        fork_scope: "shared" (one overlay per original) or "private" (per draft).
        warn_on_collision: Warn when the original defines its own finalize.
        warn_on_unknown_set: Warn when a permissive draft writes an unknown attribute.

    Environment Variables:
        DRAFTSTATE_STRICT
        DRAFTSTATE_FORK_SCOPE
        DRAFTSTATE_WARN_ON_COLLISION
        DRAFTSTATE_WARN_ON_UNKNOWN_SET
    """

    model_config = SettingsConfigDict(
        env_prefix="DRAFTSTATE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    strict: bool = True
    fork_scope: Literal["shared", "private"] = "shared"
    warn_on_collision: bool = True
    warn_on_unknown_set: bool = True

    def policy(self) -> DraftPolicy:
        """Build the DraftPolicy these settings describe."""
        return DraftPolicy(
            strict=self.strict,
            fork_scope=ForkScope[self.fork_scope.upper()],
            warn_on_collision=self.warn_on_collision,
            warn_on_unknown_set=self.warn_on_unknown_set,
        )
