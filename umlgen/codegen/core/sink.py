"""
Output sinks for generated files.

The emitter never touches the file system directly; it asks a sink to
create directories and to store (path, content) pairs.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, List, Set, Union

from umlgen.logging_config import get_logger
from .errors import DirectoryCreateError, FileWriteError

logger = get_logger(__name__)

PathLike = Union[str, Path]


class FileSink(ABC):
    """Destination for generated directories and files."""

    @abstractmethod
    def make_directory(self, path: PathLike):
        """
        Create a new directory.

        Raises:
            DirectoryCreateError: If the path exists or cannot be created
        """
        pass

    @abstractmethod
    def write_file(self, path: PathLike, content: str):
        """
        Store a file, replacing any previous content.

        Raises:
            FileWriteError: If the file cannot be written
        """
        pass


class LocalFileSink(FileSink):
    """Writes to the local file system."""

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def make_directory(self, path: PathLike):
        path = Path(path)
        try:
            path.mkdir()
        except FileExistsError as e:
            raise DirectoryCreateError(path, "path already exists") from e
        except OSError as e:
            raise DirectoryCreateError(path, e.strerror or str(e)) from e
        logger.debug("Created directory %s", path)

    def write_file(self, path: PathLike, content: str):
        path = Path(path)
        try:
            # newline="" keeps the generated line endings untouched
            with open(path, "w", encoding=self.encoding, newline="") as f:
                f.write(content)
        except OSError as e:
            raise FileWriteError(path, e.strerror or str(e)) from e
        logger.debug("Wrote %s (%d bytes)", path, len(content))


class MemoryFileSink(FileSink):
    """Keeps generated output in memory, used for previews and tests."""

    def __init__(self):
        self.directories: List[Path] = []
        self.files: Dict[Path, str] = {}
        self._known_directories: Set[Path] = set()

    def make_directory(self, path: PathLike):
        path = Path(path)
        if path in self._known_directories or path in self.files:
            raise DirectoryCreateError(path, "path already exists")
        self._known_directories.add(path)
        self.directories.append(path)

    def write_file(self, path: PathLike, content: str):
        path = Path(path)
        if path in self._known_directories:
            raise FileWriteError(path, "path is a directory")
        self.files[path] = content

    def read(self, path: PathLike) -> str:
        """Return the content stored for a path."""
        return self.files[Path(path)]
