"""Interactive command interpreter for the in-memory file system."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Callable, Iterator
from typing import TextIO

from memfs.filesystem import FileSystem, FileSystemError

MAX_COMMAND = 6
MAX_ARG = 50
PROMPT = "> "


def _tokens(text: str) -> Iterator[str]:
    """Whitespace-separated words, long words split into MAX_ARG-sized pieces."""
    for word in text.split():
        for start in range(0, len(word), MAX_ARG):
            yield word[start:start + MAX_ARG]


class Shell:
    """Reads commands and runs them against a file system."""

    def __init__(
        self,
        filesystem: FileSystem | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
    ) -> None:
        self.filesystem = filesystem if filesystem is not None else FileSystem()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._handlers: dict[str, Callable[[str], None]] = {
            "create": self._create,
            "mkdir": self._mkdir,
            "rm": self._rm,
            "rmdir": self._rmdir,
            "cp": self._cp,
            "mv": self._mv,
            "cd": self._cd,
            "pwd": self._pwd,
            "ls": self._ls,
            "cat": self._cat,
        }

    def _emit(self, text: str) -> None:
        self._out.write(text)

    def execute(self, line: str) -> None:
        """Run one command line, writing its output and any error message."""
        parts = line.split(maxsplit=1)
        if not parts:
            return
        command = parts[0][:MAX_COMMAND]
        args = line.lstrip()[len(command):]
        handler = self._handlers.get(command)
        if handler is None:
            self._emit(f"{command}: Command not found.\n")
            return
        try:
            handler(args)
        except FileSystemError as error:
            self._emit(f"{error}\n")

    def run(self) -> None:
        """Prompt for and execute commands until input ends."""
        self._emit(PROMPT)
        while line := self._in.readline():
            self.execute(line)
            self._emit(PROMPT)

    @staticmethod
    def _one_arg(command: str, args: str, usage: str) -> str:
        tokens = list(_tokens(args))
        if len(tokens) > 1:
            raise FileSystemError(f"{command}: too many arguments")
        if not tokens:
            raise FileSystemError(usage)
        return tokens[0]

    @staticmethod
    def _two_args(command: str, args: str, usage: str) -> tuple[str, str]:
        tokens = list(_tokens(args))
        if len(tokens) > 2:
            raise FileSystemError(f"{command}: too many arguments")
        if len(tokens) < 2:
            raise FileSystemError(usage)
        return tokens[0], tokens[1]

    def _read_contents(self) -> str:
        self._emit("enter file contents: \n")
        lines = []
        while (line := self._in.readline()) and line != "\n":
            lines.append(line)
        return "".join(lines)

    def _create(self, args: str) -> None:
        name = self._one_arg("create", args, "usage: create fileName")
        contents = "" if self.filesystem.cwd.find(name) else self._read_contents()
        self.filesystem.create_file(name, contents)

    def _mkdir(self, args: str) -> None:
        self.filesystem.make_dir(
            self._one_arg("mkdir", args, "usage: mkdir directoryName"))

    def _rm(self, args: str) -> None:
        self.filesystem.remove_file(self._one_arg("rm", args, "usage: rm fileName"))

    def _rmdir(self, args: str) -> None:
        self.filesystem.remove_dir(
            self._one_arg("rmdir", args, "usage: rmdir directoryName"))

    def _cp(self, args: str) -> None:
        self.filesystem.copy(*self._two_args("cp", args, "usage: cp file1 file2"))

    def _mv(self, args: str) -> None:
        self.filesystem.move(*self._two_args("mv", args, "usage: mv file1 file2"))

    def _cd(self, args: str) -> None:
        self.filesystem.change_dir(
            self._one_arg("cd", args, "usage: cd directoryName"))

    def _pwd(self, args: str) -> None:
        if args.split():
            raise FileSystemError("usage: pwd")
        self._emit(self.filesystem.pwd() + "\n")

    def _ls(self, args: str) -> None:
        tokens = list(_tokens(args))
        if len(tokens) > 1:
            raise FileSystemError("ls: too many arguments")
        names = self.filesystem.list(tokens[0] if tokens else None)
        self._emit("".join(f"{name}\n" for name in names))

    def _cat(self, args: str) -> None:
        names = list(_tokens(args))
        if not names:
            raise FileSystemError("usage: cat fileName ...")
        for name in names:
            try:
                self._emit(self.filesystem.cat(name))
            except FileSystemError as error:
                self._emit(f"{error}\n")


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="memfs", description="Interactive in-memory file system shell.")
    parser.parse_args(argv)
    Shell(FileSystem(), sys.stdin, sys.stdout).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())