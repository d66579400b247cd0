"""An in-memory tree of text files and directories with shell-like operations."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field


class FileSystemError(Exception):
    """Raised when an operation cannot be carried out; str() is the message."""


@dataclass(eq=False)
class Entry:
    """A named node in the tree."""

    name: str
    parent: Directory | None = field(default=None, repr=False)


@dataclass(eq=False)
class File(Entry):
    """A text file."""

    contents: str = ""


@dataclass(eq=False)
class Directory(Entry):
    """A directory whose entries are kept sorted by name."""

    entries: list[Entry] = field(default_factory=list, repr=False)

    @property
    def is_root(self) -> bool:
        return self.parent is None or self.parent is self

    def find(self, name: str) -> Entry | None:
        """Return the entry called ``name``, or None."""
        return next((entry for entry in self.entries if entry.name == name), None)

    def add(self, entry: Entry) -> None:
        """Insert ``entry`` in name order and make this directory its parent."""
        if self.find(entry.name) is not None:
            raise FileSystemError(f"{entry.name}: File exists")
        index = bisect.bisect_left(self.names(), entry.name)
        self.entries.insert(index, entry)
        entry.parent = self

    def remove(self, name: str) -> Entry:
        """Detach and return the entry called ``name``."""
        entry = self.find(name)
        if entry is None:
            raise KeyError(name)
        self.entries.remove(entry)
        entry.parent = None
        return entry

    def names(self) -> list[str]:
        """Names of the entries, in sorted order."""
        return [entry.name for entry in self.entries]

    def path(self) -> str:
        """Absolute path of this directory."""
        parts: list[str] = []
        node: Directory = self
        while not node.is_root:
            parts.append(node.name)
            assert node.parent is not None
            node = node.parent
        return "/" + "/".join(reversed(parts))


def _clone(entry: Entry, name: str) -> Entry:
    if isinstance(entry, File):
        return File(name, contents=entry.contents)
    assert isinstance(entry, Directory)
    copy = Directory(name)
    for child in entry.entries:
        copy.add(_clone(child, child.name))
    return copy


class FileSystem:
    """A file system with a root directory and a current working directory."""

    def __init__(self) -> None:
        self.root = Directory("/")
        self.root.parent = self.root
        self.cwd = self.root

    def create_file(self, name: str, contents: str = "") -> File:
        """Create a text file in the working directory."""
        if self.cwd.find(name) is not None:
            raise FileSystemError(f"create: {name}: File exists")
        new_file = File(name, contents=contents)
        self.cwd.add(new_file)
        return new_file

    def make_dir(self, name: str) -> Directory:
        """Create an empty directory in the working directory."""
        if self.cwd.find(name) is not None:
            raise FileSystemError(f"mkdir: {name}: File exists")
        directory = Directory(name)
        self.cwd.add(directory)
        return directory

    def remove_file(self, name: str) -> None:
        """Delete a text file from the working directory."""
        entry = self.cwd.find(name)
        if entry is None:
            raise FileSystemError(f"rm: {name}: No such file or directory.")
        if isinstance(entry, Directory):
            raise FileSystemError(f"rm: {name}: is a directory.")
        self.cwd.remove(name)

    def remove_dir(self, name: str) -> None:
        """Delete an empty directory from the working directory."""
        entry = self.cwd.find(name)
        if entry is None:
            raise FileSystemError(f"rmdir: {name}: No such file or directory.")
        if not isinstance(entry, Directory):
            raise FileSystemError(f"rmdir: {name}: Not a directory.")
        if entry.entries:
            raise FileSystemError(f"rmdir: {name}: Directory not empty")
        self.cwd.remove(name)

    def copy(self, source: str, target: str) -> Entry:
        """Copy ``source`` (deeply, for a directory) to a new entry ``target``."""
        entry = self.cwd.find(source)
        if entry is None:
            raise FileSystemError(f"cp: {source}: No such file or directory.")
        if self.cwd.find(target) is not None:
            raise FileSystemError(f"cp: {target}: File exists")
        duplicate = _clone(entry, target)
        self.cwd.add(duplicate)
        return duplicate

    def move(self, source: str, target: str) -> None:
        """Rename ``source``, or move it into the existing directory ``target``."""
        entry = self.cwd.find(source)
        if entry is None:
            raise FileSystemError(f"mv: {source}: No such file or directory.")
        destination = self.cwd.find(target)
        if destination is None:
            self.cwd.remove(source)
            entry.name = target
            self.cwd.add(entry)
        elif not isinstance(destination, Directory):
            raise FileSystemError(f"mv: {target}: File exists.")
        elif destination is entry:
            raise FileSystemError(f"mv: {target}: Invalid argument.")
        elif destination.find(source) is not None:
            raise FileSystemError(f"mv: {source}: File exists in directory.")
        else:
            self.cwd.remove(source)
            destination.add(entry)

    def change_dir(self, name: str) -> Directory:
        """Change the working directory; accepts "/" and ".." as well as names."""
        if name == "/":
            self.cwd = self.root
        elif name == "..":
            assert self.cwd.parent is not None
            self.cwd = self.cwd.parent  # type: ignore[assignment]
        else:
            entry = self.cwd.find(name)
            if entry is None:
                raise FileSystemError(f"cd: {name}: No such file or directory.")
            if not isinstance(entry, Directory):
                raise FileSystemError(f"cd: {name}: Not a directory.")
            self.cwd = entry
        return self.cwd

    def pwd(self) -> str:
        """Path of the working directory."""
        return self.cwd.path()

    def list(self, name: str | None = None) -> list[str]:
        """Names in the working directory, in ``name`` if it is a directory,
        or just ``name`` if it is a file."""
        if name is None:
            return self.cwd.names()
        entry = self.cwd.find(name)
        if entry is None:
            raise FileSystemError(f"ls: {name}: No such file or directory")
        if isinstance(entry, Directory):
            return entry.names()
        return [name]

    def cat(self, name: str) -> str:
        """Contents of the text file ``name``."""
        entry = self.cwd.find(name)
        if entry is None:
            raise FileSystemError(f"cat: {name}: No such file or directory")
        if isinstance(entry, Directory):
            raise FileSystemError(f"cat: {name}: Operation not permitted")
        assert isinstance(entry, File)
        return entry.contents