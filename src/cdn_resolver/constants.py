"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    RESOLUTION_ERROR = 2
    EXIT_WARNINGS = 3


class Hosts:  # pylint: disable=too-few-public-methods
    """Upstream hostnames recognized by the detectors (lower-case)."""

    GITHUB = "github.com"
    GITHUB_RAW = "raw.githubusercontent.com"
    JSDELIVR = "cdn.jsdelivr.net"
    UNPKG = "unpkg.com"
    NPMJS = "npmjs.com"
    NPM_REGISTRY = "registry.npmjs.org"
    GOOGLE_FONTS = "fonts.googleapis.com"

    ALL = (
        GITHUB,
        GITHUB_RAW,
        JSDELIVR,
        UNPKG,
        NPMJS,
        NPM_REGISTRY,
        GOOGLE_FONTS,
    )


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    DEFAULT_CDN_HOST = "cdn.staticdelivr.com"
    DEFAULT_GITHUB_REF = "main"
    DEFAULT_NPM_VERSION = "latest"

    # Path prefixes on the target CDN
    CDN_GITHUB_PREFIX = "gh"
    CDN_NPM_PREFIX = "npm"
    CDN_FONTS_PREFIX = "gfonts"

    LOG_FORMAT = "[%(levelname)s] %(message)s"
    FILE_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "CDN_RESOLVER_LOG_LEVEL"
    ENV_CDN_HOST = "CDN_RESOLVER_CDN_HOST"
    ENV_DEFAULT_REF = "CDN_RESOLVER_DEFAULT_REF"

    CONFIG_SECTION = "resolver"
    DEFAULT_CONFIG_LOCATIONS = [
        "cdn-resolver.yml",
        "cdn-resolver.yaml",
        "~/.config/cdn-resolver/config.yml",
    ]

    EMIT_STYLES = ["url", "script", "link", "import", "auto"]
    EXPORT_FORMATS = ["json", "csv"]
    HINTS = ["github", "npm", "fonts"]
