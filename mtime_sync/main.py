import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from . import config
from .host import ConsoleHost
from .models import FileRef
from .plugin import MtimeSyncPlugin
from .storage.adapters import FileSystemAdapter
from .timestamps.setter import CommandRunner


def setup_logging(log_file: Optional[Path], verbose: bool):
    """Sets up logging to the console and, optionally, a file."""
    log_level = logging.DEBUG if verbose else logging.INFO

    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=handlers,
    )


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Set each file's modification time to its creation time (macOS SetFile)")

    p.add_argument("files", nargs="+", help="File paths relative to --root")
    p.add_argument("--root", type=Path, default=Path("."), help="Vault root directory (default: current directory)")

    p.add_argument("--lang", choices=config.SUPPORTED_LANGUAGES, default=None,
                   help="Display language (default: detected from the locale)")
    p.add_argument("--workers", type=int, default=config.DEFAULT_MAX_WORKERS,
                   help=f"Max concurrent {config.SETFILE_UTILITY} processes (default: {config.DEFAULT_MAX_WORKERS})")
    p.add_argument("--utility", default=config.SETFILE_UTILITY, help="Timestamp utility to invoke")
    p.add_argument("--timeout", type=float, default=config.DEFAULT_TIMEOUT,
                   help="Seconds to wait for each utility call (default: no limit)")
    p.add_argument("--detailed", action="store_true", help="Show the applied timestamp in the success notice")

    p.add_argument("--log-file", type=Path, default=None, help="Also write the log to this file")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    return p.parse_args(argv)


def main(argv=None) -> int:
    args = parse_args(argv)
    setup_logging(args.log_file, args.verbose)

    if args.workers < 1:
        logging.error("--workers must be at least 1")
        return 2

    root = args.root.resolve()
    refs = [FileRef(Path(f).as_posix()) for f in args.files]

    host = ConsoleHost(FileSystemAdapter(root), active_file=refs[0], locale=args.lang)
    plugin = MtimeSyncPlugin(
        host,
        runner=CommandRunner(timeout=args.timeout),
        notice_verbosity="detailed" if args.detailed else "generic",
        max_workers=args.workers,
        utility=args.utility,
        show_progress=len(refs) > 1,
    )
    plugin.start()

    try:
        if len(refs) == 1:
            outcome = plugin.sync_mtime_to_created(refs[0])
            return 0 if outcome is not None else 1

        result = plugin.sync_batch(refs)
        return 0 if result.failure == 0 else 1
    except KeyboardInterrupt:
        logging.warning("Operation cancelled by user.")
        return 1
    finally:
        plugin.stop()


if __name__ == "__main__":
    sys.exit(main())
