"""Argument parsing functionality for cdn-resolve."""

import argparse

from .constants import Constants


def parse_args(argv=None):
    """Parses the arguments passed to the program."""
    parser = argparse.ArgumentParser(
        prog="cdn-resolve",
        description=(
            "Convert GitHub, npm, unpkg, jsDelivr and Google Fonts URLs "
            "to CDN URLs"
        ),
        add_help=True,
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("-i", "--input",
                            dest="SINGLE",
                            help="URL or shorthand to resolve (repeatable)",
                            action="append", type=str)
    input_group.add_argument("-l", "--load_list",
                            dest="LIST_FROM_FILE",
                            help="Load inputs from a file, one per line",
                            action="append", type=str)

    parser.add_argument("--cdn-host",
                        dest="CDN_HOST",
                        help=f"Target CDN host (default: {Constants.DEFAULT_CDN_HOST})",
                        action="store", type=str)
    parser.add_argument("--default-ref",
                        dest="DEFAULT_REF",
                        help=("Ref used for jsDelivr GitHub URLs without @ref "
                              f"(default: {Constants.DEFAULT_GITHUB_REF})"),
                        action="store", type=str)
    parser.add_argument("-c", "--config",
                        dest="CONFIG",
                        help="Path to YAML config file",
                        action="store", type=str)
    parser.add_argument("--hint",
                        dest="HINT",
                        help="Only consider one source family",
                        action="store", type=str.lower,
                        choices=Constants.HINTS)
    parser.add_argument("-e", "--emit",
                        dest="EMIT",
                        help="Print the bare URL or wrap it as a script/link/@import snippet",
                        action="store", type=str.lower,
                        default="url",
                        choices=Constants.EMIT_STYLES)

    parser.add_argument("-o", "--output",
                        dest="OUTPUT",
                        help="Path to output file (JSON or CSV)",
                        action="store",
                        type=str)
    parser.add_argument("-f", "--format",
                        dest="OUTPUT_FORMAT",
                        help=("Output format (json or csv). If not specified, inferred "
                              "from --output extension; defaults to json."),
                        action="store",
                        type=str.lower,
                        choices=Constants.EXPORT_FORMATS)

    parser.add_argument("--require-pinned",
                        dest="REQUIRE_PINNED",
                        help="Warn about references that are not pinned to an exact version or commit.",
                        action="store_true")
    parser.add_argument("--error-on-warnings",
                        dest="ERROR_ON_WARNINGS",
                        help="Exit with a non-zero status code if warnings are present.",
                        action="store_true")
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
