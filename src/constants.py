"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    QUERY_ERROR = 2


class OutputFormats(Enum):
    """Output formats supported by the command line.

    Args:
        Enum (string): Output formats supported by the command line.
    """

    TEXT = "text"
    JSON = "json"
    CSV = "csv"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    # First Android version that ships an evergreen (Chrome-tracking) WebView.
    ANDROID_EVERGREEN_FIRST = 37

    DEFAULT_QUERIES = ["> 0.5%", "last 2 versions", "Firefox ESR", "not dead"]
    # Used when no config is found
    DEFAULT_QUERIES_SHORTCUT = ["defaults"]
    DEAD_QUERIES = [
        "Baidu >= 0",
        "ie <= 11",
        "ie_mob <= 11",
        "bb <= 10",
        "op_mob <= 12.1",
        "samsung 4",
    ]
    FIREFOX_ESR_VERSIONS = ["140", "128", "115"]
    PHANTOM_VERSIONS = {"1.9": "5", "2.1": "6"}

    SUPPORTED_FORMATS = [
        OutputFormats.TEXT.value,
        OutputFormats.JSON.value,
        OutputFormats.CSV.value,
    ]
    LOG_FORMAT = "[%(levelname)s] %(message)s"

    # Configuration discovery
    RC_FILE = ".browserslistrc"
    PLAIN_CONFIG_FILE = "browserslist"
    PACKAGE_JSON_FILE = "package.json"
    PACKAGE_JSON_KEY = "browserslist"
    DEFAULT_ENV = "production"
    ENV_QUERIES = "BROWSERSLIST"
    ENV_CONFIG = "BROWSERSLIST_CONFIG"
    ENV_ENV = "BROWSERSLIST_ENV"
    ENV_NODE_ENV = "NODE_ENV"
    ENV_MOBILE_TO_DESKTOP = "BROWSERSLIST_MOBILE_TO_DESKTOP"
    ENV_IGNORE_UNKNOWN_VERSIONS = "BROWSERSLIST_IGNORE_UNKNOWN_VERSIONS"
    ENV_LOG_LEVEL = "BROWSERSLIST_LOG_LEVEL"

    # Timeout in seconds for probing the local Node.js binary
    NODE_PROBE_TIMEOUT = 5
