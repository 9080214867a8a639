"""Configuration loading for the resolver CLI.

Precedence (highest first): CLI flags, environment variables, YAML config
file, built-in defaults. Loading never raises for a bad file; problems are
logged and the file is ignored.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml

from .constants import Constants
from .models import ResolverOptions

logger = logging.getLogger(__name__)

_KNOWN_KEYS = ("cdn_host", "default_github_ref")


def find_config_file() -> Optional[str]:
    """Return the first existing default config location, if any."""
    for location in Constants.DEFAULT_CONFIG_LOCATIONS:
        path = os.path.expanduser(location)
        if os.path.isfile(path):
            return path
    return None


def load_config_file(config_path: Optional[str]) -> Dict[str, Any]:
    """Load resolver settings from a YAML file.

    Args:
        config_path: Path to the YAML file. Keys may be top-level or nested
            under a ``resolver:`` section.

    Returns:
        Dict with the recognized keys only; {} when the file is missing or invalid.
    """
    if not config_path:
        return {}

    if not os.path.isfile(config_path):
        logger.warning("Config file not found: %s", config_path)
        return {}

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        logger.error("Failed to load config %s: %s", config_path, e)
        return {}

    if not isinstance(data, dict):
        return {}
    section = data.get(Constants.CONFIG_SECTION, data)
    if not isinstance(section, dict):
        return {}

    settings = {}
    for key in _KNOWN_KEYS:
        value = section.get(key)
        if value is not None:
            settings[key] = str(value)
    unknown = sorted(set(section) - set(_KNOWN_KEYS))
    if unknown and section is not data:
        logger.warning("Ignoring unknown config keys: %s", ", ".join(map(str, unknown)))
    return settings


def load_env(environ: Optional[Mapping[str, str]] = None) -> Dict[str, str]:
    """Read overrides from CDN_RESOLVER_CDN_HOST and CDN_RESOLVER_DEFAULT_REF."""
    environ = os.environ if environ is None else environ
    settings = {}
    host = environ.get(Constants.ENV_CDN_HOST, "").strip()
    if host:
        settings["cdn_host"] = host
    ref = environ.get(Constants.ENV_DEFAULT_REF, "").strip()
    if ref:
        settings["default_github_ref"] = ref
    return settings


def build_options(
    config_path: Optional[str] = None,
    cdn_host: Optional[str] = None,
    default_github_ref: Optional[str] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ResolverOptions:
    """Merge defaults, config file, environment and CLI values into options.

    Args:
        config_path: Explicit config file; falls back to the default locations.
        cdn_host: CLI override for the CDN host.
        default_github_ref: CLI override for the default jsDelivr GitHub ref.
        environ: Environment mapping (defaults to os.environ).

    Raises:
        ValueError: If the merged values are not valid ResolverOptions.
    """
    settings: Dict[str, str] = {}
    settings.update(load_config_file(config_path or find_config_file()))
    settings.update(load_env(environ))
    if cdn_host:
        settings["cdn_host"] = cdn_host
    if default_github_ref:
        settings["default_github_ref"] = default_github_ref
    logger.debug("Resolver settings: %s", settings)
    return ResolverOptions(**settings)
