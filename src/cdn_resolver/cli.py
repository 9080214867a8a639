"""cdn-resolve - convert upstream asset URLs to CDN URLs

    Returns:
        int: Exit code
"""
import csv
import json
import logging
import os
import sys

from .args import parse_args
from .config import build_options
from .constants import Constants, ExitCodes
from .logging_utils import add_file_handler, configure_logging, extra_context, is_debug_enabled
from .models import SourceFamily
from .resolver import SourceResolver
from .snippets import render

logger = logging.getLogger(__name__)

CSV_HEADERS = [
    "input",
    "ok",
    "kind",
    "canonical_url",
    "owner",
    "repo",
    "ref",
    "file_path",
    "package_name",
    "package_version",
    "version_mode",
    "pinned",
    "error_kind",
    "error_message",
]


def load_inputs_file(file_name):
    """Loads the inputs from a file.

    Blank lines and lines starting with ``#`` are skipped.

    Args:
        file_name (str): File path containing one input per line.

    Returns:
        list: List of inputs
    """
    try:
        with open(file_name, encoding='utf-8') as file:
            lines = [line.strip() for line in file]
    except FileNotFoundError as e:
        logging.error("File not found: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    except IOError as e:
        logging.error("IO error: %s, aborting", e)
        sys.exit(ExitCodes.FILE_ERROR.value)
    return [line for line in lines if line and not line.startswith("#")]


def build_input_list(args):
    """Collect inputs from -i values or -l files, preserving order."""
    if args.LIST_FROM_FILE:
        inputs = []
        for file_name in args.LIST_FROM_FILE:
            inputs.extend(load_inputs_file(file_name))
        return inputs
    return list(args.SINGLE or [])


def result_to_dict(result):
    """Flatten a resolution (success or error) into a JSON-friendly dict."""
    if not result.ok:
        return {
            "input": result.input,
            "ok": False,
            "kind": result.source_kind.value if result.source_kind else None,
            "error": {"kind": result.kind.value, "message": result.message},
        }
    ref = result.reference
    mode = ref.version_mode
    return {
        "input": result.input,
        "ok": True,
        "kind": result.kind.value,
        "canonicalUrl": result.canonical_url,
        "reference": {
            "owner": ref.owner,
            "repo": ref.repo,
            "ref": ref.ref,
            "filePath": ref.file_path,
            "packageName": ref.package_name,
            "packageVersion": ref.package_version,
            "querystring": ref.querystring,
        },
        "versionMode": mode.value if mode else None,
        "pinned": ref.is_pinned,
    }


def export_csv(results, path):
    """Exports the resolutions to a CSV file.

    Args:
        results (list): Resolution results and errors.
        path (str): File path to export the CSV.
    """
    rows = [CSV_HEADERS]

    def _nv(v):
        return "" if v is None else v

    for x in results:
        if x.ok:
            ref = x.reference
            mode = ref.version_mode
            rows.append([
                x.input, True, x.kind.value, x.canonical_url,
                _nv(ref.owner), _nv(ref.repo), _nv(ref.ref), _nv(ref.file_path),
                _nv(ref.package_name), _nv(ref.package_version),
                mode.value if mode else "", ref.is_pinned, "", "",
            ])
        else:
            rows.append([
                x.input, False, x.source_kind.value if x.source_kind else "", "",
                "", "", "", "", "", "", "", "", x.kind.value, x.message,
            ])
    try:
        with open(path, 'w', newline='', encoding='utf-8') as file:
            export = csv.writer(file)
            export.writerows(rows)
        logging.info("CSV file has been successfully exported at: %s", path)
    except (OSError, csv.Error) as e:
        logging.error("CSV file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def export_json(results, path):
    """Exports the resolutions to a JSON file.

    Args:
        results (list): Resolution results and errors.
        path (str): File path to export the JSON.
    """
    data = [result_to_dict(x) for x in results]
    try:
        with open(path, 'w', encoding='utf-8') as file:
            json.dump(data, file, indent=2)
        logging.info("JSON file has been successfully exported at: %s", path)
    except OSError as e:
        logging.error("JSON file couldn't be written to disk: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)


def _export_format(args):
    if args.OUTPUT_FORMAT:
        return args.OUTPUT_FORMAT
    _, ext = os.path.splitext(args.OUTPUT)
    if ext.lower() == ".csv":
        return "csv"
    return "json"


def _setup_logging(args):
    # Honor CLI --loglevel by passing it to centralized logger via env
    if getattr(args, "LOG_LEVEL", None):
        os.environ[Constants.ENV_LOG_LEVEL] = str(args.LOG_LEVEL).upper()
    configure_logging()
    if getattr(args, "LOG_FILE", None):
        add_file_handler(args.LOG_FILE)
        logger.info("Logging to file: %s", args.LOG_FILE)


def main(argv=None):
    """Main function of the program."""
    args = parse_args(argv)
    _setup_logging(args)

    try:
        options = build_options(
            config_path=args.CONFIG,
            cdn_host=args.CDN_HOST,
            default_github_ref=args.DEFAULT_REF,
        )
    except ValueError as e:
        logging.error("Invalid configuration: %s", e)
        sys.exit(ExitCodes.FILE_ERROR.value)

    inputs = build_input_list(args)
    if is_debug_enabled(logger):
        logger.debug(
            "Built input list",
            extra=extra_context(component="cli", action="build_input_list", count=len(inputs)),
        )

    hint = SourceFamily(args.HINT) if args.HINT else None
    resolver = SourceResolver(options)
    results = resolver.resolve_many(inputs, hint)

    failures = 0
    warnings = 0
    for result in results:
        if not result.ok:
            failures += 1
            logging.error("%s: %s (%s)", result.input, result.message, result.kind.value)
            continue
        if args.REQUIRE_PINNED and not result.reference.is_pinned:
            warnings += 1
            logging.warning("Not pinned to an exact version or commit: %s", result.input)
        if not args.QUIET:
            print(render(result, args.EMIT))

    if args.OUTPUT:
        if _export_format(args) == "csv":
            export_csv(results, args.OUTPUT)
        else:
            export_json(results, args.OUTPUT)

    logging.info("Resolved %d of %d input(s).", len(results) - failures, len(results))

    if failures:
        sys.exit(ExitCodes.RESOLUTION_ERROR.value)
    if warnings and args.ERROR_ON_WARNINGS:
        sys.exit(ExitCodes.EXIT_WARNINGS.value)
    sys.exit(ExitCodes.SUCCESS.value)


if __name__ == "__main__":
    main()
