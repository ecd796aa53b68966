"""File-backed I/O provider."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from savebuilder.io.base import BaseStreamIO

if TYPE_CHECKING:
    import os
    from typing import BinaryIO

logger = logging.getLogger(__name__)


class FileStreamIO(BaseStreamIO):
    """Provides read and write streams for a file on disk.

    Attributes:
        path: Location of the file.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        """Initialize the file provider.

        Args:
            path: Location of the file. Parent directories need not exist yet.
        """
        self.path = Path(path)

    def read(self) -> BinaryIO:
        return self.path.open("rb")

    def write(self) -> BinaryIO:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        logger.debug("Opening %s for writing", self.path)
        return self.path.open("wb")

    def exists(self) -> bool:
        return self.path.is_file()

    def delete(self) -> None:
        self.path.unlink(missing_ok=True)
        logger.debug("Deleted %s", self.path)

    def __repr__(self) -> str:
        return f"FileStreamIO({str(self.path)!r})"
