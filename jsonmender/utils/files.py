"""
Reading documents and writing repaired copies.

The backup is fully written and synced before the original is replaced, and
every write goes through a temporary sibling file followed by an atomic
rename, so an interrupted run never leaves a truncated file behind.
"""

import logging
import os
import stat
import tempfile
from typing import Optional, Union

from ..core.constants import BACKUP_SUFFIX
from ..security.exceptions import DocumentDecodeError, DocumentNotFoundError

PathLike = Union[str, "os.PathLike[str]"]

logger = logging.getLogger(__name__)


def read_document(path: PathLike, encoding: str = "utf-8") -> str:
    """
    Read a whole document.

    Raises:
        DocumentNotFoundError: If path is not a file
        DocumentDecodeError: If the bytes are not valid in the given encoding
    """
    path = os.fspath(path)
    if not os.path.isfile(path):
        raise DocumentNotFoundError(path)

    # Keep line endings byte-for-byte so the backup matches the original
    try:
        with open(path, encoding=encoding, newline="") as handle:
            return handle.read()
    except UnicodeDecodeError as e:
        raise DocumentDecodeError(path, encoding, str(e)) from e


def backup_path_for(path: PathLike) -> str:
    """Return the path of the backup written next to a document."""
    return os.fspath(path) + BACKUP_SUFFIX


def atomic_write(
    path: PathLike,
    text: str,
    encoding: str = "utf-8",
    mode_from: Optional[PathLike] = None,
) -> None:
    """Write text to path through a synced temporary file and a rename."""
    path = os.fspath(path)
    mode_source = os.fspath(mode_from) if mode_from is not None else path
    directory = os.path.dirname(os.path.abspath(path))
    fd, tmp_path = tempfile.mkstemp(
        prefix=f".{os.path.basename(path)}.", suffix=".tmp", dir=directory
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding, newline="") as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        if os.path.exists(mode_source):
            os.chmod(tmp_path, stat.S_IMODE(os.stat(mode_source).st_mode))
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise


def write_with_backup(
    path: PathLike, original: str, repaired: str, encoding: str = "utf-8"
) -> str:
    """
    Save the original as ``<path>.backup`` and then overwrite path.

    Args:
        path: Document to overwrite
        original: Text read from path before repair
        repaired: Text to store in path
        encoding: Encoding used for both files

    Returns:
        The path of the backup file
    """
    backup = backup_path_for(path)
    atomic_write(backup, original, encoding, mode_from=path)
    logger.info("Created backup: %s", backup)

    atomic_write(path, repaired, encoding)
    logger.info("Wrote repaired document: %s", os.fspath(path))
    return backup
