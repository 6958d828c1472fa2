"""Shared base class for feature settings modules."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class FeatureSettings(BaseSettings):
    """Base class for feature settings sections such as ``extraction``.

    Sections read their own aliased environment variables (``I18N_*``) and
    share the ``.env`` file, case sensitivity and unknown-key handling of the
    main ``Settings`` aggregator.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )
