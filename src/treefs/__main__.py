"""Entry point: python -m treefs"""

from __future__ import annotations

import argparse
import asyncio
import signal
import sys

from treefs import api
from treefs.infrastructure.logger import install_exception_hooks, logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="treefs", description="Asynchronous directory-tree operations")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("ls", help="List immediate children").add_argument("path")
    sub.add_parser("walk", help="List every descendant").add_argument("path")
    sub.add_parser("cat", help="Print a file").add_argument("path")

    cp = sub.add_parser("cp", help="Copy a file or directory tree")
    cp.add_argument("src")
    cp.add_argument("dest")
    cp.add_argument("--overwrite", action="store_true", help="Remove dest before copying a directory")

    rm = sub.add_parser("rm", help="Remove a file or directory tree")
    rm.add_argument("path")
    rm.add_argument("-f", "--force", action="store_true", help="Ignore a missing path")

    mv = sub.add_parser("mv", help="Rename a path")
    mv.add_argument("src")
    mv.add_argument("dest")

    mkdir = sub.add_parser("mkdir", help="Create a directory and its parents")
    mkdir.add_argument("path")
    mkdir.add_argument("--lenient", action="store_true", help="Ignore creation failures")

    sub.add_parser("watch", help="Print changes under a path until interrupted").add_argument("path")
    return parser


async def _watch(path: str) -> None:
    watcher = api.PathWatcher(path)
    shutdown_event = asyncio.Event()

    def print_changes(changes: list[tuple[str, str]]) -> None:
        for change, changed_path in changes:
            print(f"{change}\t{changed_path}", flush=True)

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, shutdown_event.set)

    watcher.start(print_changes)
    try:
        await shutdown_event.wait()
    finally:
        watcher.stop()


async def main(args: argparse.Namespace) -> None:
    if args.command in ("ls", "walk"):
        entries = await (api.list_dir(args.path) if args.command == "ls" else api.walk(args.path))
        for entry in entries:
            print(entry.model_dump_json())
    elif args.command == "cat":
        sys.stdout.write(await api.read_file(args.path))
    elif args.command == "cp":
        await api.copy(args.src, args.dest, overwrite=args.overwrite)
    elif args.command == "rm":
        await api.remove(args.path, ignore_not_exist=args.force)
    elif args.command == "mv":
        await api.rename(args.src, args.dest)
    elif args.command == "mkdir":
        await api.ensure_dir(args.path, lenient=args.lenient or None)
    elif args.command == "watch":
        await _watch(args.path)


def run(argv: list[str] | None = None) -> int:
    install_exception_hooks()
    args = build_parser().parse_args(argv)
    try:
        asyncio.run(main(args))
    except KeyboardInterrupt:
        pass
    except (api.TreeFsError, OSError) as err:
        logger.debug("Command failed", command=args.command, error=str(err))
        print(f"treefs {args.command}: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(run())
