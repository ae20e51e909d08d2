import logging
from pathlib import Path
from typing import Protocol, Union

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class Filesystem(Protocol):
    def read(self, path: PathLike) -> str: ...

    def write(self, path: PathLike, text: str) -> None: ...


class LocalFilesystem:
    """Reads and writes UTF-8 text files on the local disk.

    Directories are never created; writing into a missing directory fails the
    same way reading a missing file does, with an ``OSError``.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def read(self, path: PathLike) -> str:
        """Return the full contents of the file at ``path``."""
        try:
            logger.debug(f"Reading text from {path}")
            return Path(path).read_text(encoding=self.encoding)
        except OSError:
            logger.exception(f"Failed to read {path}")
            raise

    def write(self, path: PathLike, text: str) -> None:
        """Replace the contents of the file at ``path`` with ``text``."""
        try:
            logger.info(f"Writing text data to {path}")
            Path(path).write_text(text, encoding=self.encoding)
            logger.debug(f"Successfully wrote {len(text)} characters to {path}")
        except OSError:
            logger.exception(f"Failed to write {path}")
            raise
