from . import modules, report
from .constants import DEFAULT_IFD_COUNT, MAX_DEPTH
from .errors import Cr2Error
import argparse
import logging
import sys
import json
import tempfile
import os
import re

import tqdm

logger = logging.getLogger("cr2info")


def walk_helper(path, filename_regex):
    for root, _, files in os.walk(path):
        for file in sorted(files):
            file = os.path.join(root, file)

            if filename_regex.match(file) is None:
                continue

            yield file


def render(meta, fmt):
    if fmt == "text":
        return report.format_report(meta)

    return json.dumps(meta, indent=2, ensure_ascii=False)


def process(file, args, raise_errors=True):
    return modules.chew(file,
                        ifd_count=args.ifds,
                        max_depth=args.max_depth,
                        strict=args.strict,
                        values=args.values,
                        raise_errors=raise_errors)


def process_directory(args):
    filename_regex = re.compile(args.filename_regex)

    paths = walk_helper(args.file, filename_regex)
    if args.progress:
        paths = tqdm.tqdm(list(paths), file=sys.stderr)

    entries = []
    for path in paths:
        if args.progress:
            paths.set_postfix_str(os.path.basename(path))

        with open(path, "rb") as fd:
            entries.append({
                "path": path,
                "data": process(fd, args, raise_errors=False)
            })

    if args.format == "text":
        return "\n".join(f"{entry['path']}\n{render(entry['data'], 'text')}"
                         for entry in entries)

    return json.dumps({
        "type": "directory",
        "files": entries
    },
                      indent=2,
                      ensure_ascii=False)


def positive_int(value):
    i = int(value)
    if i < 1:
        raise argparse.ArgumentTypeError(f"{value} is not a positive number")

    return i


def build_parser():
    parser = argparse.ArgumentParser(
        prog="cr2info", description="Canon CR2 metadata extractor")

    parser.add_argument("file",
                        default="-",
                        nargs="?",
                        help="File or directory to parse (default: -)")

    parser.add_argument("--format",
                        "-f",
                        choices=("json", "text"),
                        default="json",
                        help="Output format (default: json)")

    parser.add_argument(
        "--ifds",
        type=positive_int,
        default=DEFAULT_IFD_COUNT,
        help=f"Top-level IFDs to read at most (default: {DEFAULT_IFD_COUNT})")

    parser.add_argument(
        "--max-depth",
        type=int,
        default=MAX_DEPTH,
        help=f"Deepest sub-IFD nesting to follow (default: {MAX_DEPTH})")

    parser.add_argument("--strict",
                        action="store_true",
                        help="Reject files without TIFF magic and CR marker")

    parser.add_argument("--values",
                        action="store_true",
                        help="Decode the values of every IFD entry")

    parser.add_argument("--filename-regex",
                        default=".*",
                        help="Filename regex for directory mode")

    parser.add_argument("--progress",
                        "-p",
                        action="store_true",
                        help="Print progress in directory mode")

    parser.add_argument("--verbose",
                        "-v",
                        action="store_true",
                        help="Log decoding steps to stderr")

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s")

    try:
        if args.file == "-":
            with tempfile.TemporaryFile() as file:
                fd = open(sys.stdin.fileno(), "rb", closefd=False)

                with fd:
                    while True:
                        blob = fd.read(1 << 24)
                        if len(blob) == 0:
                            break

                        file.write(blob)

                file.seek(0)
                print(render(process(file, args), args.format))
        elif os.path.isdir(args.file):
            print(process_directory(args))
        else:
            with open(args.file, "rb") as file:
                print(render(process(file, args), args.format))
    except (Cr2Error, OSError) as e:
        logger.debug("decoding %s failed", args.file, exc_info=True)
        print(f"cr2info: {args.file}: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
