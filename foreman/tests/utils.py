"""Test utilities."""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Tuple, Union


class RecordingReporter:
    """Reporter that keeps every comment in the order received.

    An optional hook is called with each comment, which lets tests inspect
    state at the moment a message is reported.
    """

    def __init__(self, hook: Optional[Callable[[str, str], None]] = None) -> None:
        self.comments: List[Tuple[str, str]] = []
        self.hook = hook

    def comment(self, category: str, message: str) -> None:
        self.comments.append((category, message))
        if self.hook is not None:
            self.hook(category, message)

    @property
    def messages(self) -> List[str]:
        return [message for _, message in self.comments]


class InMemoryFilesystem:
    """Filesystem keeping files in a dict keyed by path string."""

    def __init__(self, files: Optional[Dict[str, str]] = None) -> None:
        self.files: Dict[str, str] = dict(files or {})
        self.reads: List[str] = []
        self.writes: List[Tuple[str, str]] = []
        self.fail_writes = False

    def read(self, path: Union[str, Path]) -> str:
        self.reads.append(str(path))
        if str(path) not in self.files:
            raise FileNotFoundError(f"No such file: {path}")
        return self.files[str(path)]

    def write(self, path: Union[str, Path], text: str) -> None:
        if self.fail_writes:
            raise PermissionError(f"Permission denied: {path}")
        self.writes.append((str(path), text))
        self.files[str(path)] = text
