import logging
import os
from datetime import datetime
from pathlib import Path

from ..exceptions import StatError
from ..models import FileStats


def read_file_stats(path: Path) -> FileStats:
    """
    Reads creation and modification times for `path` as local datetimes.

    Birth time comes from st_birthtime (macOS, BSD, Windows on 3.12+).
    Where the platform does not report it, st_ctime stands in.

    Raises:
        StatError: path is missing or cannot be stat'ed.
    """
    try:
        st = os.stat(path)
    except (OSError, ValueError) as e:
        # ValueError: embedded NUL in the path
        raise StatError(f"Cannot stat {path}: {getattr(e, 'strerror', None) or e}") from e

    birth_ts = getattr(st, "st_birthtime", None)
    if birth_ts is None:
        logging.debug(f"No birth time reported for {path}; using st_ctime")
        birth_ts = st.st_ctime

    return FileStats(
        birthtime=datetime.fromtimestamp(birth_ts),
        mtime=datetime.fromtimestamp(st.st_mtime),
    )
