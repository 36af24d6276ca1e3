import os

import pytest

from flybinds.stest import (
    StestOptions,
    UsageError,
    main,
    parse_args,
    run,
    test_path as check_path,
)


@pytest.fixture
def tree(tmp_path):
    data = tmp_path / "file.txt"
    data.write_text("data")
    empty = tmp_path / "empty"
    empty.touch()
    hidden = tmp_path / ".hidden"
    hidden.write_text("x")
    sub = tmp_path / "sub"
    sub.mkdir()
    return tmp_path


def opts(flags):
    return StestOptions(flags=set(flags))


def test_parse_separate_flags():
    options, paths = parse_args(["-f", "-d", "a"])
    assert options.flags == {"f", "d"}
    assert paths == ["a"]


def test_parse_grouped_flags_and_double_dash():
    options, paths = parse_args(["-fd", "--", "-x"])
    assert options.flags == {"f", "d"}
    assert paths == ["-x"]


def test_parse_lone_dash_is_a_path():
    options, paths = parse_args(["-", "x"])
    assert options.flags == set()
    assert paths == ["-", "x"]


def test_parse_unknown_flag():
    with pytest.raises(UsageError):
        parse_args(["-z"])


def test_parse_missing_reference_file():
    with pytest.raises(UsageError):
        parse_args(["-n"])


def test_parse_attached_reference(tree):
    data = tree / "file.txt"
    options, paths = parse_args([f"-n{data}", "p"])
    assert "n" in options.flags
    assert options.newer_mtime == int(data.stat().st_mtime)
    assert paths == ["p"]


def test_parse_separate_reference(tree):
    data = tree / "file.txt"
    options, paths = parse_args(["-o", str(data), "p"])
    assert "o" in options.flags
    assert options.older_mtime == int(data.stat().st_mtime)
    assert paths == ["p"]


def test_parse_unreadable_reference(tree, capsys):
    missing = tree / "missing"
    options, _ = parse_args(["-n", str(missing)])
    assert "n" not in options.flags
    assert str(missing) in capsys.readouterr().err


def test_regular_file_and_directory(tree):
    data = str(tree / "file.txt")
    sub = str(tree / "sub")
    assert check_path(data, data, opts("f")) is True
    assert check_path(sub, sub, opts("f")) is False
    assert check_path(sub, sub, opts("d")) is True


def test_invert(tree):
    sub = str(tree / "sub")
    assert check_path(sub, sub, opts("fv")) is True


def test_hidden_names(tree):
    hidden = str(tree / ".hidden")
    assert check_path(hidden, ".hidden", opts("")) is False
    assert check_path(hidden, ".hidden", opts("a")) is True


def test_non_empty(tree):
    assert check_path(str(tree / "empty"), "empty", opts("s")) is False
    assert check_path(str(tree / "file.txt"), "file.txt", opts("s")) is True


def test_missing_path(tree):
    missing = str(tree / "missing")
    assert check_path(missing, missing, opts("")) is False
    assert check_path(missing, missing, opts("v")) is True


def test_symlink(tree):
    link = tree / "link"
    os.symlink(tree / "file.txt", link)
    assert check_path(str(link), "link", opts("h")) is True
    assert check_path(str(tree / "file.txt"), "file.txt", opts("h")) is False


def test_executable(tree):
    data = tree / "file.txt"
    data.chmod(0o755)
    empty = tree / "empty"
    empty.chmod(0o644)
    assert check_path(str(data), "file.txt", opts("x")) is True
    assert check_path(str(empty), "empty", opts("fx")) is False


def test_newer_and_older(tree):
    old = tree / "file.txt"
    young = tree / "empty"
    os.utime(old, (1000, 1000))
    os.utime(young, (2000, 2000))
    newer = StestOptions(flags={"n"}, newer_mtime=int(old.stat().st_mtime))
    assert check_path(str(young), "empty", newer) is True
    assert check_path(str(old), "file.txt", newer) is False
    older = StestOptions(flags={"o"}, older_mtime=int(young.stat().st_mtime))
    assert check_path(str(old), "file.txt", older) is True
    assert check_path(str(young), "empty", older) is False


def test_run_lists_directory(tree):
    names = set(run(opts("l"), [str(tree)], []))
    assert names == {"file.txt", "empty", "sub"}


def test_run_lists_directory_with_hidden(tree):
    names = set(run(opts("al"), [str(tree)], []))
    assert {".", "..", ".hidden", "file.txt"} <= names


def test_run_reads_lines(tree):
    data = str(tree / "file.txt")
    sub = str(tree / "sub")
    assert list(run(opts("f"), [], [data + "\n", sub + "\n"])) == [data]


def test_main_prints_matches(tree, capsys):
    data = str(tree / "file.txt")
    sub = str(tree / "sub")
    assert main(["-d", data, sub]) == 0
    assert capsys.readouterr().out == sub + "\n"


def test_main_quiet(tree, capsys):
    data = str(tree / "file.txt")
    assert main(["-q", data]) == 0
    assert capsys.readouterr().out == ""


def test_main_no_match(tree, capsys):
    sub = str(tree / "sub")
    assert main(["-f", sub]) == 1
    assert capsys.readouterr().out == ""


def test_main_usage(capsys):
    assert main(["-z"]) == 2
    assert capsys.readouterr().err.startswith("usage:")