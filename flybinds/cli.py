"""Command line and terminal front end of the key-driven menu."""

import contextlib
import dataclasses
import itertools
import os
import re
import shutil
import subprocess
import sys
import termios
import tty
from dataclasses import dataclass, field
from pathlib import Path

from flybinds.config import Scheme, Settings, apply_resources, default_items, parse_resources
from flybinds.errors import FatalError, die
from flybinds.keys import SHIFT_MASK, XK_ESCAPE, XK_LEFT, XK_RETURN, XK_SPACE, lookup_key
from flybinds.layout import compute_geometry
from flybinds.menu import Menu, NavigationResult
from flybinds.text import truncate_text

VERSION = "1.0"
USAGE = (
    "usage: flybinds [-bvh] [-c columns] [-fn font] [-m monitor]\n"
    "                [-bg color] [-kf color] [-sf color] [-df color] [-bc color]\n"
    "                [-cs separation] [-ph paddingH] [-pv paddingV] [-bw border width]\n"
    "                [-w windowid] key1 key2 ..."
)

# Size of one terminal cell in the pixel units the settings are given in.
_CELL_WIDTH = 10
_CELL_HEIGHT = 20

_INT_OPTIONS = {
    "-c": "columns",
    "-cs": "colpadding",
    "-ph": "outpaddinghor",
    "-pv": "outpaddingvert",
    "-bw": "borderpx",
    "-m": "monitor",
}
_STR_OPTIONS = {
    "-fn": "font",
    "-bg": "background",
    "-kf": "keyfg",
    "-sf": "sepfg",
    "-df": "descfg",
    "-bc": "bordercol",
    "-w": "embed",
}


@dataclass
class Options:
    """Command-line choices; None means the setting was not given."""

    bottom: bool = False
    columns: int | None = None
    colpadding: int | None = None
    outpaddinghor: int | None = None
    outpaddingvert: int | None = None
    borderpx: int | None = None
    monitor: int | None = None
    font: str | None = None
    background: str | None = None
    keyfg: str | None = None
    sepfg: str | None = None
    descfg: str | None = None
    bordercol: str | None = None
    embed: str | None = None
    keys: list = field(default_factory=list)
    show_version: bool = False
    show_help: bool = False


def _atoi(text):
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def parse_args(argv):
    """Parse the command line; keys to press follow the first non-option."""
    args = list(argv)
    options = Options()
    index = 0
    while index < len(args):
        arg = args[index]
        if arg == "-v":
            options.show_version = True
            return options
        if arg == "-h":
            options.show_help = True
            return options
        if arg == "-b":
            options.bottom = True
            index += 1
            continue
        if arg in _INT_OPTIONS or arg in _STR_OPTIONS:
            if index + 1 >= len(args):
                die("option %s requires an argument", arg)
            value = args[index + 1]
            if arg in _INT_OPTIONS:
                setattr(options, _INT_OPTIONS[arg], _atoi(value))
            else:
                setattr(options, _STR_OPTIONS[arg], value)
            index += 2
            continue
        options.keys = args[index:]
        break
    return options


def spawn(command):
    """Start ``command`` with the shell in its own session."""
    try:
        return subprocess.Popen(
            ["/bin/sh", "-c", command],
            start_new_session=True,
            stdin=subprocess.DEVNULL,
        )
    except OSError as error:
        print(f"flybinds: execvp /bin/sh failed: {error.strerror}", file=sys.stderr)
        return None


def _apply_options(settings, options):
    changes = {}
    if options.bottom:
        changes["topbar"] = False
    for name in ("columns", "colpadding", "outpaddinghor", "outpaddingvert", "borderpx"):
        value = getattr(options, name)
        if value is not None:
            changes[name] = value
    if "columns" in changes:
        changes["columns"] = max(changes["columns"], 0)
    if options.font is not None:
        changes["fonts"] = (options.font, *settings.fonts[1:])

    colors = dict(settings.colors)
    if options.background is not None:
        for scheme in (Scheme.KEY, Scheme.SEP, Scheme.DESC):
            colors[scheme] = (colors[scheme][0], options.background)
    for scheme, value in ((Scheme.KEY, options.keyfg), (Scheme.SEP, options.sepfg),
                          (Scheme.DESC, options.descfg)):
        if value is not None:
            colors[scheme] = (value, colors[scheme][1])
    if options.bordercol is not None:
        colors[Scheme.BORDER] = (colors[Scheme.BORDER][0], options.bordercol)
    changes["colors"] = colors
    changes["lrpad"] = _CELL_HEIGHT // 2
    return dataclasses.replace(settings, **changes)


def _parse_color(name):
    match = re.fullmatch(r"#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})", name or "")
    if not match:
        die("error, cannot allocate color '%s'", name)
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(digit * 2 for digit in digits)
    return tuple(int(digits[start:start + 2], 16) for start in (0, 2, 4))


def _sgr(fg, bg):
    return "\x1b[38;2;{};{};{};48;2;{};{};{}m".format(*fg, *bg)


def _measure(text):
    return len(text) * _CELL_WIDTH


def _keys_from_input(data):
    """Yield (keysym, state) pairs for a chunk read from the terminal."""
    if data == "\x1b":
        yield XK_ESCAPE, 0
        return
    if data.startswith("\x1b"):
        if data in ("\x1b[D", "\x1bOD"):
            yield XK_LEFT, 0
        return
    for char in data:
        if char in "\r\n":
            yield XK_RETURN, 0
        elif char == " ":
            yield XK_SPACE, 0
        elif char.isascii() and char.isupper():
            yield ord(char.lower()), SHIFT_MASK
        else:
            yield ord(char), 0


@contextlib.contextmanager
def _cbreak(fd, stream):
    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    stream.write("\x1b[?25l")
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        stream.write("\x1b[0m\x1b[2J\x1b[H\x1b[?25h")
        stream.flush()


class App:
    """The menu shown in a terminal, driven by single key presses."""

    def __init__(self, menu, settings, options):
        self.menu = menu
        self.options = options
        self.settings = _apply_options(settings, options)
        self.schemes = {
            scheme: (_parse_color(fg), _parse_color(bg))
            for scheme, (fg, bg) in self.settings.colors.items()
        }
        self.width = shutil.get_terminal_size().columns * _CELL_WIDTH
        self.geometry = None
        self._relayout()

    def _relayout(self):
        try:
            self.geometry = compute_geometry(
                self.menu.items, self.menu.displayline, self.settings,
                _measure, self.width, _CELL_HEIGHT,
            )
        except ValueError:
            die("terminal is too narrow to show the menu")

    def _navigate(self, keyname):
        result = self.menu.navigate(keyname)
        if result.descended:
            self._relayout()
        return result

    def handle_key(self, keysym, state):
        """Act on one key press and return what it asked for."""
        if keysym == XK_ESCAPE:
            return NavigationResult(exit_code=1)
        if keysym == self.settings.backkey:
            self.menu.pop()
            self._relayout()
            return NavigationResult()
        return self._navigate(lookup_key(keysym, state))

    @staticmethod
    def _execute(result):
        for request in result.spawns:
            spawn(request.command)
        return result.exit_code

    def _segments(self, item, x):
        settings = self.settings
        pad = settings.lrpad // 2
        available = self.width - x - pad

        def fit(text):
            return truncate_text(text, available, _measure)

        if item.is_title:
            yield x + pad, fit(item.text), Scheme.TITLE
            return
        yield x + pad, fit(item.keyname), Scheme.KEY
        x += _measure(settings.maxkey) + settings.lrpad
        yield x + pad, fit(settings.sep), Scheme.SEP
        x += _measure(settings.sep) + settings.lrpad
        yield x + pad, fit(item.text), Scheme.DESC

    def _line(self, cells):
        parts = []
        for scheme, group in itertools.groupby(cells, key=lambda cell: cell[1]):
            parts.append(_sgr(*self.schemes[scheme]) + "".join(char for char, _ in group))
        return "".join(parts) + "\x1b[0m"

    def _render(self):
        columns = self.width // _CELL_WIDTH
        settings = self.settings
        blank = [(" ", Scheme.KEY)] * columns
        grid = [list(blank) for _ in range(self.geometry.rows)]
        items = self.menu.items
        positions = self.geometry.positions(len(items), settings.outpaddinghor, 0)
        for item, (x, y) in zip(items, positions):
            row = grid[y // _CELL_HEIGHT]
            for start, text, scheme in self._segments(item, x):
                column = start // _CELL_WIDTH
                for offset, char in enumerate(text):
                    if 0 <= column + offset < columns:
                        row[column + offset] = (char, scheme)
        padding = [list(blank)] * -(-settings.outpaddingvert // _CELL_HEIGHT)
        lines = [self._line(cells) for cells in (*padding, *grid, *padding)]
        if settings.borderpx > 0:
            border_bg = self.schemes[Scheme.BORDER][1]
            border = _sgr(border_bg, border_bg) + " " * columns + "\x1b[0m"
            if settings.topbar:
                lines.append(border)
            else:
                lines.insert(0, border)
        return lines

    def _draw(self, stream):
        lines = self._render()
        height = shutil.get_terminal_size().lines
        start = 1 if self.settings.topbar else max(1, height - len(lines) + 1)
        stream.write("\x1b[2J")
        for offset, line in enumerate(lines):
            stream.write(f"\x1b[{start + offset};1H{line}")
        stream.flush()

    def run(self):
        """Press the keys given on the command line, then read the keyboard.

        Returns the exit status the menu finished with.
        """
        for keyname in self.options.keys:
            code = self._execute(self._navigate(keyname))
            if code is not None:
                return code
        if not sys.stdin.isatty():
            die("cannot grab keyboard")
        fd = sys.stdin.fileno()
        stream = sys.stdout
        with _cbreak(fd, stream):
            while True:
                self._draw(stream)
                data = os.read(fd, 32)
                if not data:
                    return 1
                for keysym, state in _keys_from_input(data.decode("utf-8", "replace")):
                    code = self._execute(self.handle_key(keysym, state))
                    if code is not None:
                        return code


def _load_settings():
    settings = Settings()
    path = Path.home() / ".Xresources"
    try:
        text = path.read_text(encoding="utf-8")
    except OSError:
        return settings
    return apply_resources(settings, parse_resources(text))


def main(argv=None):
    """Run the menu; return its exit status."""
    args = sys.argv[1:] if argv is None else argv
    try:
        options = parse_args(args)
        if options.show_version:
            print(f"flybinds-{VERSION}")
            return 0
        if options.show_help:
            print(USAGE, file=sys.stderr)
            return 1
        app = App(Menu(default_items()), _load_settings(), options)
        return app.run()
    except FatalError as error:
        print(error.message, file=sys.stderr)
        return error.exit_code


if __name__ == "__main__":
    sys.exit(main())