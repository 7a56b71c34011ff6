import functools

from pydantic import BaseModel, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Policies for triggering a race hook that has no handlers
VALID_RACE_EMPTY_POLICIES: tuple[str, ...] = ("raise", "none")


class DispatchConfig(BaseModel):
    """Dispatch behavior shared by every hook strategy."""

    slow_handler_warning_ms: float = 0.0
    race_empty_policy: str = "raise"

    @field_validator("slow_handler_warning_ms")
    @classmethod
    def validate_non_negative(cls, v: float, info) -> float:
        """Ensure the slow handler threshold is not negative."""
        if v < 0:
            raise ValueError(f"{info.field_name} must be >= 0, got {v}")
        return v

    @field_validator("race_empty_policy")
    @classmethod
    def validate_race_policy(cls, v: str, info) -> str:
        """Ensure the empty race policy is one we know how to apply."""
        if v not in VALID_RACE_EMPTY_POLICIES:
            raise ValueError(
                f"{info.field_name} must be one of {VALID_RACE_EMPTY_POLICIES}, got {v!r}"
            )
        return v


class Config(BaseSettings):
    """
    Library configuration loaded from multiple sources.

    Priority (highest to lowest):
    1. Keyword arguments
    2. Environment variables (HOOKLINE_ prefix)
    3. .env file
    4. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="HOOKLINE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Library logging is silent unless the host application opts in
    LOG_ENABLED: bool = False

    # Warn when a single handler runs longer than this (0 disables)
    SLOW_HANDLER_WARNING_MS: float = 0.0

    # What RaceHook.trigger() does when nothing is registered
    RACE_EMPTY_POLICY: str = "raise"

    @functools.cached_property
    def dispatch(self) -> DispatchConfig:
        """Build DispatchConfig from environment variables."""
        return DispatchConfig(
            slow_handler_warning_ms=self.SLOW_HANDLER_WARNING_MS,
            race_empty_policy=self.RACE_EMPTY_POLICY,
        )


config = Config()
