import io

from memfs.filesystem import FileSystem
from memfs.shell import Shell


def make_shell(script=""):
    out = io.StringIO()
    shell = Shell(FileSystem(), io.StringIO(script), out)
    return shell, out


def test_mkdir_and_ls_sorted():
    shell, out = make_shell()
    shell.execute("mkdir b\n")
    shell.execute("mkdir a\n")
    shell.execute("ls\n")
    assert out.getvalue().splitlines() == ["a", "b"]


def test_unknown_command_is_truncated():
    shell, out = make_shell()
    shell.execute("frobnicate x\n")
    assert out.getvalue() == "frobni: Command not found.\n"


def test_blank_line_does_nothing():
    shell, out = make_shell()
    shell.execute("   \n")
    assert out.getvalue() == ""


def test_usage_and_too_many_arguments():
    shell, out = make_shell()
    shell.execute("mkdir\n")
    shell.execute("mkdir a b\n")
    shell.execute("cp a\n")
    shell.execute("mv a b c\n")
    shell.execute("pwd x\n")
    shell.execute("cat\n")
    assert out.getvalue().splitlines() == [
        "usage: mkdir directoryName",
        "mkdir: too many arguments",
        "usage: cp file1 file2",
        "mv: too many arguments",
        "usage: pwd",
        "usage: cat fileName ...",
    ]


def test_long_argument_counts_as_two():
    shell, out = make_shell()
    shell.execute("mkdir " + "a" * 60 + "\n")
    assert out.getvalue() == "mkdir: too many arguments\n"


def test_create_reads_contents_until_blank_line():
    shell, out = make_shell("line one\nline two\n\nls\n")
    shell.execute("create f\n")
    assert "enter file contents: \n" in out.getvalue()
    assert shell.filesystem.cat("f") == "line one\nline two\n"


def test_create_existing_does_not_prompt():
    shell, out = make_shell("x\n\n")
    shell.execute("create f\n")
    out.truncate(0)
    out.seek(0)
    shell.execute("create f\n")
    assert out.getvalue() == "create: f: File exists\n"


def test_cat_continues_after_error():
    shell, out = make_shell("abc\n\n")
    shell.execute("create f\n")
    out.truncate(0)
    out.seek(0)
    shell.execute("cat missing f\n")
    assert out.getvalue() == "cat: missing: No such file or directory\nabc\n"


def test_cd_pwd_and_errors():
    shell, out = make_shell()
    shell.execute("mkdir d\n")
    shell.execute("cd d\n")
    shell.execute("pwd\n")
    shell.execute("cd nowhere\n")
    shell.execute("cd /\n")
    shell.execute("pwd\n")
    assert out.getvalue().splitlines() == [
        "/d",
        "cd: nowhere: No such file or directory.",
        "/",
    ]


def test_run_prompts_and_executes_script():
    script = "mkdir d\nmv d e\nls\n"
    shell, out = make_shell(script)
    shell.run()
    text = out.getvalue()
    assert text.count("> ") == 4
    assert text.endswith("> ")
    assert shell.filesystem.list() == ["e"]


def test_ls_named_file_echoes_name():
    shell, out = make_shell("\n")
    shell.execute("create f\n")
    out.truncate(0)
    out.seek(0)
    shell.execute("ls f\n")
    shell.execute("ls g\n")
    assert out.getvalue().splitlines() == [
        "f",
        "ls: g: No such file or directory",
    ]