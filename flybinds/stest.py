"""Filter file names by file properties."""

import os
import stat
import sys
from dataclasses import dataclass, field

FLAGS = "abcdefghlpqrsuvwx"
PATH_MAX = 4096
USAGE = "usage: stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]"


class UsageError(Exception):
    """The command line could not be understood."""

    def __init__(self, message=USAGE):
        super().__init__(message)


@dataclass
class StestOptions:
    """Selected tests; ``n``/``o`` are present only with a reference time."""

    flags: set = field(default_factory=set)
    newer_mtime: int | None = None
    older_mtime: int | None = None

    def set_reference(self, flag, path):
        try:
            mtime = int(os.stat(path).st_mtime)
        except OSError as error:
            print(f"{path}: {error.strerror}", file=sys.stderr)
            self.flags.discard(flag)
            return
        self.flags.add(flag)
        if flag == "n":
            self.newer_mtime = mtime
        else:
            self.older_mtime = mtime


def parse_args(argv):
    """Parse options; return ``(options, remaining paths)``."""
    args = list(argv)
    options = StestOptions()
    index = 0
    while index < len(args):
        arg = args[index]
        if len(arg) < 2 or not arg.startswith("-"):
            break
        index += 1
        if arg == "--":
            break
        position = 1
        while position < len(arg):
            flag = arg[position]
            if flag in "no":
                if position + 1 < len(arg):
                    target = arg[position + 1:]
                elif index < len(args):
                    target = args[index]
                    index += 1
                else:
                    raise UsageError()
                options.set_reference(flag, target)
                break
            if flag not in FLAGS:
                raise UsageError()
            options.flags.add(flag)
            position += 1
    return options, args[index:]


def _is_symlink(path):
    try:
        return stat.S_ISLNK(os.lstat(path).st_mode)
    except OSError:
        return False


def _passes(path, name, st, options):
    flags = options.flags
    mode = st.st_mode
    mtime = int(st.st_mtime)
    checks = {
        "b": lambda: stat.S_ISBLK(mode),
        "c": lambda: stat.S_ISCHR(mode),
        "d": lambda: stat.S_ISDIR(mode),
        "e": lambda: os.access(path, os.F_OK),
        "f": lambda: stat.S_ISREG(mode),
        "g": lambda: bool(mode & stat.S_ISGID),
        "h": lambda: _is_symlink(path),
        "n": lambda: mtime > options.newer_mtime,
        "o": lambda: mtime < options.older_mtime,
        "p": lambda: stat.S_ISFIFO(mode),
        "r": lambda: os.access(path, os.R_OK),
        "s": lambda: st.st_size > 0,
        "u": lambda: bool(mode & stat.S_ISUID),
        "w": lambda: os.access(path, os.W_OK),
        "x": lambda: os.access(path, os.X_OK),
    }
    if "a" not in flags and name.startswith("."):
        return False
    return all(check() for flag, check in checks.items() if flag in flags)


def test_path(path, name, options):
    """Return whether ``path`` passes the selected tests (inverted by -v)."""
    try:
        st = os.stat(path)
    except OSError:
        passed = False
    else:
        passed = _passes(path, name, st, options)
    return passed != ("v" in options.flags)


def _candidates(paths, lines, options):
    if not paths:
        for line in lines:
            name = line[:-1] if line.endswith("\n") else line
            yield name, name
        return
    for path in paths:
        if "l" in options.flags:
            try:
                entries = os.listdir(path)
            except OSError:
                pass
            else:
                for entry in [".", "..", *entries]:
                    full = f"{path}/{entry}"
                    if len(os.fsencode(full)) < PATH_MAX:
                        yield full, entry
                continue
        yield path, path


def run(options, paths, lines):
    """Yield the names that pass; names come from ``lines`` when no paths."""
    for path, name in _candidates(paths, lines, options):
        if test_path(path, name, options):
            yield name


def main(argv=None):
    """Run the command; return its exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        options, paths = parse_args(args)
    except UsageError as error:
        print(error, file=sys.stderr)
        return 2
    matches = run(options, paths, () if paths else sys.stdin)
    if "q" in options.flags:
        missing = object()
        return 0 if next(matches, missing) is not missing else 1
    matched = False
    for name in matches:
        print(name)
        matched = True
    return 0 if matched else 1


if __name__ == "__main__":
    sys.exit(main())