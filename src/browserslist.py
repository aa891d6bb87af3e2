"""browserslist - resolve browser queries to concrete browser versions.

    Returns:
        int: Exit code
"""
import csv
import io
import json
import logging
import os
import sys

from constants import Constants, ExitCodes, OutputFormats
from common.logging_utils import configure_logging, extra_context, is_debug_enabled
from args import parse_args
from versioning.errors import BrowserslistError, ConfigError
from versioning.models import Opts
from versioning.service import execute, resolve

logger = logging.getLogger(__name__)

_FALSE_VALUES = ("", "0", "false", "no", "off")


def _env_flag(name):
    """Return True when the environment variable ``name`` is set to a true value."""
    return os.environ.get(name, "").strip().lower() not in _FALSE_VALUES


def build_opts(args):
    """Translate parsed CLI arguments into resolution options.

    Args:
        args (argparse.Namespace): Parsed arguments.

    Returns:
        Opts: Options for ``resolve``/``execute``.
    """
    return Opts(
        mobile_to_desktop=args.MOBILE_TO_DESKTOP or _env_flag(Constants.ENV_MOBILE_TO_DESKTOP),
        ignore_unknown_versions=(
            args.IGNORE_UNKNOWN_VERSIONS or _env_flag(Constants.ENV_IGNORE_UNKNOWN_VERSIONS)
        ),
        path=args.PATH,
        env=args.ENV,
        config=args.CONFIG,
    )


def output_format(args):
    """Pick the output format from ``--format`` or the ``--output`` extension."""
    if args.OUTPUT_FORMAT:
        return args.OUTPUT_FORMAT
    if args.OUTPUT:
        extension = os.path.splitext(args.OUTPUT)[1].lstrip(".").lower()
        if extension in (OutputFormats.JSON.value, OutputFormats.CSV.value):
            return extension
    return OutputFormats.TEXT.value


def render(distribs, fmt):
    """Render resolved distributions.

    Args:
        distribs (list): Resolved ``Distrib`` entries.
        fmt (str): One of ``Constants.SUPPORTED_FORMATS``.

    Returns:
        str: The rendered document, newline terminated.
    """
    if fmt == OutputFormats.JSON.value:
        data = [{"name": d.name, "version": d.version} for d in distribs]
        return json.dumps(data, ensure_ascii=False, indent=4) + "\n"
    if fmt == OutputFormats.CSV.value:
        buffer = io.StringIO()
        export = csv.writer(buffer, lineterminator="\n")
        export.writerow(["name", "version"])
        export.writerows([d.name, d.version] for d in distribs)
        return buffer.getvalue()
    return "".join(f"{d}\n" for d in distribs)


def write_output(text, path):
    """Write rendered output to ``path``.

    Raises:
        OSError: The file cannot be written.
    """
    with open(path, "w", encoding="utf-8", newline="") as file:
        file.write(text)
    logging.info("Output has been successfully exported at: %s", path)


def run(args):
    """Resolve queries for parsed arguments and emit the result.

    Returns:
        int: Exit code
    """
    opts = build_opts(args)
    try:
        if args.queries:
            distribs = resolve(args.queries, opts)
        else:
            distribs = execute(opts)
    except ConfigError as e:
        logger.error("Browserslist config error: %s", e)
        return ExitCodes.FILE_ERROR.value
    except BrowserslistError as e:
        logger.error("%s", e)
        return ExitCodes.QUERY_ERROR.value

    if is_debug_enabled(logger):
        logger.debug(
            "Queries resolved",
            extra=extra_context(
                event="decision",
                component="cli",
                action="resolve",
                outcome="success",
                target=len(distribs),
            ),
        )

    text = render(distribs, output_format(args))
    if args.OUTPUT:
        try:
            write_output(text, args.OUTPUT)
        except OSError as e:
            logger.error("Output file couldn't be written to disk: %s", e)
            return ExitCodes.FILE_ERROR.value
    if not args.QUIET:
        sys.stdout.write(text)
    return ExitCodes.SUCCESS.value


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    configure_logging(args.LOG_LEVEL, args.LOG_FILE)

    if is_debug_enabled(logger):
        logger.debug(
            "CLI start",
            extra=extra_context(event="function_entry", component="cli", action="main")
        )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
