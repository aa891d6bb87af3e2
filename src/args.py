"""Argument parsing for the browserslist command line."""

import argparse
from constants import Constants

def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="browserslist",
        description=(
            "Resolve browserslist queries to the browser and runtime versions they name"
        ),
        add_help=True,
    )

    parser.add_argument("queries",
                        metavar="QUERY",
                        nargs="*",
                        help="Browserslist queries, e.g. \"last 2 versions\". "
                             "When omitted, queries are read from the configuration.")

    parser.add_argument("--mobile-to-desktop",
                        dest="MOBILE_TO_DESKTOP",
                        help="Use desktop release history for mobile browsers that have a desktop counterpart",
                        action="store_true")
    parser.add_argument("--ignore-unknown-versions",
                        dest="IGNORE_UNKNOWN_VERSIONS",
                        help="Resolve unknown browser and Node.js versions to nothing instead of failing",
                        action="store_true")

    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to a browserslist config (.browserslistrc, package.json, YAML or JSON)",
                        action="store",
                        type=str)
    parser.add_argument("--env",
                        dest="ENV",
                        help="Config section to use (default: BROWSERSLIST_ENV, NODE_ENV or production)",
                        action="store",
                        type=str)
    parser.add_argument("--path",
                        dest="PATH",
                        help="Directory to start searching for a config from (default: current directory)",
                        action="store",
                        type=str)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help="Output format (text, json or csv). If not specified, inferred from --output extension; defaults to text.",
                        action="store",
                        type=str.lower,
                        choices=Constants.SUPPORTED_FORMATS)

    parser.add_argument("--loglevel",
                        dest="LOG_LEVEL",
                        help="Set the logging level",
                        action="store",
                        type=str,
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
                        default='INFO')
    parser.add_argument("--logfile",
                        dest="LOG_FILE",
                        help="Log output file",
                        action="store",
                        type=str)
    parser.add_argument("-q", "--quiet",
                        dest="QUIET",
                        help="Do not output to console.",
                        action="store_true")

    return parser.parse_args(argv)
