"""Command-line front end for a file store."""

import argparse
import sys

from pydantic import ValidationError

from filestore.config import FileStoreConfig
from filestore.logger import get_logger, setup_logging
from filestore.store import FileStore


logger = get_logger(__name__)

EXIT_OK = 0
EXIT_FALSE = 1
EXIT_ERROR = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="filestore",
        description="Manage files under a base directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  FILESTORE_BASE_PATH     Base directory (default: ./data)
  FILESTORE_LOG_LEVEL     Log level (default: INFO)
  FILESTORE_BACKEND       Filesystem backend; only local is accepted here

Examples:
  %(prog)s write logs x.log --data hello
  %(prog)s ls logs .log
  %(prog)s cp logs/x.log /tmp/backup x.bak
        """,
    )
    parser.add_argument(
        "--base-path",
        default=None,
        help="Base directory for the store (overrides FILESTORE_BASE_PATH)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (overrides FILESTORE_LOG_LEVEL)",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("write", help="Write a file, replacing its content")
    p.add_argument("sub_dir")
    p.add_argument("file_name")
    p.add_argument("--data", default=None, help="Content to write (default: stdin)")

    p = sub.add_parser("read", help="Print a file's content")
    p.add_argument("sub_dir")
    p.add_argument("file_name")

    p = sub.add_parser("touch", help="Create an empty file if it does not exist")
    p.add_argument("sub_dir")
    p.add_argument("file_name")

    p = sub.add_parser("rm", help="Delete a file, or a whole sub directory with -r")
    p.add_argument("sub_dir")
    p.add_argument("file_name", nargs="?")
    p.add_argument("-r", "--recursive", action="store_true")

    p = sub.add_parser("exists", help="Check whether a file exists")
    p.add_argument("sub_dir")
    p.add_argument("file_name")

    p = sub.add_parser("ls", help="List entries in a sub directory")
    p.add_argument("sub_dir")
    p.add_argument("partial_name", nargs="?", default="")

    p = sub.add_parser("cp", help="Copy a file to a directory outside the store")
    p.add_argument("src_file", help="Source path relative to the base path")
    p.add_argument("dest_dir", help="Destination directory, used as given")
    p.add_argument("new_file_name")

    return parser


def run(store: FileStore, args: argparse.Namespace) -> int:
    """Execute one parsed command against ``store`` and return an exit code."""
    if args.command == "write":
        if args.data is not None:
            data = args.data.encode("utf-8")
        else:
            data = sys.stdin.buffer.read()
        store.write(args.sub_dir, args.file_name, data)
    elif args.command == "read":
        sys.stdout.buffer.write(store.read(args.sub_dir, args.file_name))
        sys.stdout.flush()
    elif args.command == "touch":
        store.create_file(args.sub_dir, args.file_name)
    elif args.command == "rm":
        if args.recursive:
            store.delete_all(args.sub_dir)
        elif args.file_name is None:
            print("Error: rm needs FILE_NAME or -r", file=sys.stderr)
            return EXIT_ERROR
        else:
            store.delete(args.sub_dir, args.file_name)
    elif args.command == "exists":
        found = store.exists(args.sub_dir, args.file_name)
        print("true" if found else "false")
        return EXIT_OK if found else EXIT_FALSE
    elif args.command == "ls":
        for name in store.list_files(args.sub_dir, args.partial_name):
            print(name)
    elif args.command == "cp":
        store.copy_file(args.src_file, args.dest_dir, args.new_file_name)
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    overrides = {}
    if args.base_path is not None:
        overrides["base_path"] = args.base_path
    if args.log_level is not None:
        overrides["log_level"] = args.log_level
    try:
        config = FileStoreConfig.from_env()
        if overrides:
            config = FileStoreConfig(**{**config.model_dump(), **overrides})
    except ValidationError as e:
        print(f"Error: invalid configuration: {e}", file=sys.stderr)
        return EXIT_ERROR
    if config.backend != "local":
        # Each invocation is a new process, so an in-memory tree never persists.
        print(
            f"Error: backend '{config.backend}' is for library use only; "
            "the command line needs FILESTORE_BACKEND=local",
            file=sys.stderr,
        )
        return EXIT_ERROR
    setup_logging(config.log_level)

    try:
        store = FileStore.from_config(config)
        return run(store, args)
    except OSError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
