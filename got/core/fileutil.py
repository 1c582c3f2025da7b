"""Atomic file replacement.

Readers of a file written here observe either the old content or the
new content, never a partial write: data goes to a temporary file in
the destination directory, is flushed and fsynced, then renamed over
the destination.
"""

import os
import tempfile
from pathlib import Path
from typing import Union

TEMP_PREFIX = '.tmp-'


def atomic_write(path: Union[str, Path], data: Union[bytes, str], mode: int = 0o644) -> None:
    """
    Atomically write data to path.

    The parent directory must already exist. On failure the temporary
    file is removed and the original exception propagates; the
    destination is left untouched.

    Args:
        path: Destination file
        data: Content (str is encoded as UTF-8)
        mode: Permission bits of the new file
    """
    path = Path(path)
    if isinstance(data, str):
        data = data.encode('utf-8')

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=TEMP_PREFIX)
    try:
        with os.fdopen(fd, 'wb') as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
