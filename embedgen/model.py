import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from .errors import InputFileUnreadable


@dataclass(frozen=True)
class EmbedOptions:
    """Everything one invocation needs, as parsed from the command line."""
    source: str
    function: str
    inputs: tuple[str, ...]
    header: str | None = None
    preserve_paths: bool = False
    verbose: bool = False


def lookup_key(path: str, preserve_paths: bool, sep: str = os.sep) -> str:
    """Returns the name a file is retrieved by at runtime."""
    if preserve_paths:
        return path
    return path.rpartition(sep)[2]


@dataclass(frozen=True)
class InputFile:
    path: str
    key: str
    data: bytes

    @property
    def name_bytes(self) -> bytes:
        return os.fsencode(self.key)

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class EmbeddedFileSet:
    """Input files in command line order; the position is the row in every generated table."""
    files: tuple[InputFile, ...]

    def __iter__(self) -> Iterator[InputFile]:
        return iter(self.files)

    def __len__(self) -> int:
        return len(self.files)

    def lookup(self, name: str | bytes) -> bytes | None:
        """Same answer the generated accessor gives: first row whose key matches exactly."""
        wanted = os.fsencode(name)
        for input_file in self.files:
            if input_file.name_bytes == wanted:
                return input_file.data
        return None


def read_input(path: str, preserve_paths: bool) -> InputFile:
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise InputFileUnreadable(path, e.strerror or str(e)) from e
    return InputFile(path=path, key=lookup_key(path, preserve_paths), data=data)


def load_file_set(paths: Iterable[str], preserve_paths: bool = False) -> EmbeddedFileSet:
    return EmbeddedFileSet(tuple(read_input(path, preserve_paths) for path in paths))
