"""Translation-call extraction feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class ExtractionFeatureSettings(FeatureSettings):
    """Built-in defaults for the key-inference options.

    These values seed every ``ExtractionOptions`` instance. Project
    configuration (``package.json`` / ``.i18nrc``) and scoped overrides are
    layered on top of them at runtime.

    Environment Variables:
        I18N_INFERRED_KEY_FORMAT: literal, underscored or underscored_crc32
        I18N_MAX_KEY_LENGTH: Maximum length of an inferred key (default: 50)
        I18N_PLURALIZATION_KEYS: JSON list of plural variants, in emit order
        I18N_INTERPOLATION_SYNTAX: Regex with one capture group for placeholders

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        key_format = settings.extraction.inferred_key_format
        ```
    """

    inferred_key_format: str = Field(
        default="underscored_crc32",
        alias="I18N_INFERRED_KEY_FORMAT",
        description="Strategy used to turn default text into a key",
    )
    max_key_length: int = Field(
        default=50,
        alias="I18N_MAX_KEY_LENGTH",
        description="Hard cap on the length of inferred keys",
    )
    pluralization_keys: list[str] = Field(
        default_factory=lambda: ["zero", "one", "two", "few", "many", "other"],
        alias="I18N_PLURALIZATION_KEYS",
        description="Allowed variant names in a pluralization map, in emit order",
    )
    interpolation_syntax: str = Field(
        default=r"%\{([^}]+)\}",
        alias="I18N_INTERPOLATION_SYNTAX",
        description="Regex recognizing interpolation placeholders",
    )
