# File: housekeeping/cli.py

import argparse
import logging
import sys
from typing import List, Optional

from housekeeping.core.log_config import configure_logging
from housekeeping.features.file_ops.domain.errors import FileOpError
from housekeeping.features.file_ops.service.api import (
    clean_directory,
    force_delete,
    is_filename_valid,
    list_files,
)

logger = logging.getLogger(__name__)


def _cmd_rm(ns: argparse.Namespace) -> int:
    failed = 0
    for target in ns.paths:
        try:
            force_delete(target)
            logger.info(f"Removed {target}")
        except FileOpError as e:
            logger.error(f"{e.kind.value}: {e}")
            failed += 1
    return 1 if failed else 0


def _cmd_clean(ns: argparse.Namespace) -> int:
    try:
        clean_directory(ns.directory)
    except FileOpError as e:
        logger.error(f"{e.kind.value}: {e}")
        return 1
    logger.info(f"Cleaned {ns.directory}")
    return 0


def _cmd_ls(ns: argparse.Namespace) -> int:
    for path in list_files(ns.directory):
        print(path)
    return 0


def _cmd_check(ns: argparse.Namespace) -> int:
    all_valid = True
    for name in ns.names:
        valid = is_filename_valid(name)
        all_valid = all_valid and valid
        print(f"{'valid' if valid else 'invalid'}\t{name}")
    return 0 if all_valid else 1


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="housekeeping",
        description="Filesystem housekeeping: delete trees, clean and list directories."
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    sub = parser.add_subparsers(dest="command", required=True)

    p_rm = sub.add_parser("rm", help="Delete files or directories recursively")
    p_rm.add_argument("paths", nargs="+")
    p_rm.set_defaults(func=_cmd_rm)

    p_clean = sub.add_parser("clean", help="Delete the contents of a directory, keep the directory")
    p_clean.add_argument("directory")
    p_clean.set_defaults(func=_cmd_clean)

    p_ls = sub.add_parser("ls", help="List the regular files directly inside a directory")
    p_ls.add_argument("directory")
    p_ls.set_defaults(func=_cmd_ls)

    p_check = sub.add_parser("check", help="Check whether names are acceptable paths for this OS")
    p_check.add_argument("names", nargs="+")
    p_check.set_defaults(func=_cmd_check)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    ns = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if ns.verbose else None)
    return ns.func(ns)


if __name__ == "__main__":
    sys.exit(main())
