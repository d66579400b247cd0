# memfs

memfs is a small file system that lives entirely in memory. It holds a tree of
directories and text files. You can work with it from Python, or through an
interactive shell that takes a handful of UNIX-like commands.

## Installation

```
pip install .
```

## The shell

Start it with:

```
memfs
```

or, equivalently, `python -m memfs.shell`. The command takes no options
besides `-h`/`--help`.

The shell shows a `> ` prompt and reads one command per line until end of input.
It understands these commands:

| Command              | Effect                                                          |
|----------------------|-----------------------------------------------------------------|
| `create NAME`        | create a text file; its contents are read up to a blank line    |
| `mkdir NAME`         | create a directory                                              |
| `rm NAME`            | remove a text file                                              |
| `rmdir NAME`         | remove an empty directory                                       |
| `cp FROM TO`         | copy an entry; a directory is copied with everything inside it  |
| `mv FROM TO`         | rename an entry, or move it into the existing directory `TO`    |
| `cd NAME`            | change directory; `..` goes to the parent and `/` to the root   |
| `pwd`                | print the path of the working directory                         |
| `ls [NAME]`          | list the working directory, or the directory or file `NAME`     |
| `cat NAME ...`       | print the contents of one or more text files                    |

All names refer to entries of the working directory; a name is a single word,
not a path. Entries in a directory are always listed in sorted order. `cd ..`
at the root stays at the root.

Only the first six characters of a command word are looked at, and a word
longer than 50 characters is split into 50-character pieces, so it may count
as several arguments. A wrong number of arguments gives a usage line or a
"too many arguments" message, and an unknown command gives
`NAME: Command not found.`

Errors are reported in the familiar style, for example
`rm: notes: No such file or directory.` With `cat`, an error for one name is
reported and the remaining names are still printed.

An example session:

```
> mkdir docs
> cd docs
> create todo
enter file contents: 
buy milk

> ls
todo
> cat todo
buy milk
> pwd
/docs
```

## Using it from Python

```python
from memfs.filesystem import FileSystem, FileSystemError

fs = FileSystem()
fs.make_dir("docs")
fs.change_dir("docs")
fs.create_file("todo", "buy milk\n")
print(fs.list())          # ['todo']
print(fs.cat("todo"))     # 'buy milk\n'
print(fs.pwd())           # '/docs'

try:
    fs.remove_dir("missing")
except FileSystemError as error:
    print(error)          # rmdir: missing: No such file or directory.
```

`FileSystem` holds the tree in `root` and the working directory in `cwd`. It
offers `create_file`, `make_dir`, `remove_file`, `remove_dir`, `copy`, `move`,
`change_dir`, `pwd`, `list` and `cat`, one for each shell command. Every
failure of these raises `FileSystemError`, and its message is the one the
shell prints.

The tree is made of `Entry` objects: a `File` has `contents`, and a
`Directory` keeps its `entries` sorted by name and offers `find`, `add`,
`remove`, `names` and `path`. `Directory.add` raises `FileSystemError` when
the name is taken, and `Directory.remove` raises `KeyError` when it is not
there.

The shell can also be driven from code: `Shell(filesystem, stdin, stdout)`
takes any text streams, `Shell.execute(line)` runs a single command line, and
`Shell.run()` runs the whole read–evaluate loop.

## What it does not do

The tree exists only while the program runs: nothing is saved to or loaded
from disk, and the shell starts with an empty root directory every time.
Names cannot be paths, so there is no way to reach an entry outside the
working directory without changing to it first.

## Running the tests

```
pip install ".[test]"
pytest
```