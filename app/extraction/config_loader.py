"""Project configuration loading.

Reads the ``i18n`` section of ``package.json`` and the ``.i18nrc`` file (JSON or
YAML) of a project and feeds the recognized extraction options into a resolver. Later
sources override earlier ones.
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from extraction.options import ExtractionOptions, get_options
from infrastructure.logging import bind_scan_context, get_module_logger

logger = get_module_logger()

PACKAGE_FILE = "package.json"
PACKAGE_SECTION = "i18n"
RC_FILE = ".i18nrc"


def _read_json(path: Path) -> Any:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("config_parse_error", error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e


def _read_rc(path: Path) -> Any:
    # JSON is valid YAML, so both spellings of the rc file are accepted
    try:
        with open(path, "r", encoding="utf-8") as f:
            return yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("config_parse_error", error=str(e))
        raise ValueError(f"Failed to parse {path}: {e}") from e


def load_project_config(base_path: Union[str, Path] = ".") -> Dict[str, Any]:
    """Load and merge project-level i18n configuration.

    A file that exists but cannot be read or parsed aborts loading; it is
    never skipped in favour of the configuration merged so far.

    Args:
        base_path: Project root containing ``package.json`` / ``.i18nrc``.

    Returns:
        Merged configuration dict (may contain non-extraction keys such as
        ``basePath`` or ``outputFile``).

    Raises:
        ValueError: If one of the files exists but cannot be parsed.
    """
    base = Path(base_path)
    config: Dict[str, Any] = {}

    package_file = base / PACKAGE_FILE
    if package_file.exists():
        with bind_scan_context(file=str(package_file)):
            package = _read_json(package_file)
        section = package.get(PACKAGE_SECTION) if isinstance(package, dict) else None
        if isinstance(section, dict):
            config.update(section)
            logger.debug("loaded_package_config", file=str(package_file), keys=list(section))

    rc_file = base / RC_FILE
    if rc_file.exists():
        with bind_scan_context(file=str(rc_file)):
            rc = _read_rc(rc_file)
        if not isinstance(rc, dict):
            logger.warning("invalid_rc_format", file=str(rc_file), expected="object")
        else:
            config.update(rc)
            logger.debug("loaded_rc_config", file=str(rc_file), keys=list(rc))

    if config.get("plugins"):
        # Plugin loading is handled by the host tooling
        logger.warning("plugins_not_loaded", plugins=config["plugins"])

    return config


def apply_project_config(
    config: Dict[str, Any],
    options: Optional[ExtractionOptions] = None,
) -> ExtractionOptions:
    """Apply the extraction options found in ``config``.

    Entries that are not extraction options are skipped and logged.

    Args:
        config: Configuration dict, e.g. from ``load_project_config``.
        options: Resolver to update; defaults to the process-wide one.

    Returns:
        The updated resolver.

    Raises:
        InvalidOptionValueError: If a recognized option has an invalid value.
    """
    options = options or get_options()
    recognized = {name: value for name, value in config.items() if options.is_option(name)}
    skipped = [name for name in config if name not in recognized]
    if skipped:
        logger.debug("skipped_config_entries", keys=skipped)

    options.update(recognized)
    logger.info("applied_project_config", options=list(recognized))
    return options
