"""Filesystem probes used when evaluating rules."""

import os
from abc import ABC, abstractmethod
from pathlib import Path


class IFilesystemProbe(ABC):
    @abstractmethod
    def exists(self, name: str) -> bool:
        raise NotImplementedError


class LocalFilesystemProbe(IFilesystemProbe):
    """Stats names relative to a fixed root directory."""

    def __init__(self, root: Path) -> None:
        self._root = root

    @property
    def root(self) -> Path:
        return self._root

    def exists(self, name: str) -> bool:
        # a dangling symlink still counts as present
        return os.path.lexists(self._root / name)
