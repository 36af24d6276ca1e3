"""Menu entries, appearance settings and X resource overrides."""

import dataclasses
import enum
import re
from dataclasses import dataclass, field

from flybinds.keys import XK_H


class Scheme(enum.IntEnum):
    """Colour schemes used when drawing the menu."""

    KEY = 0
    TITLE = 1
    DESC = 2
    SEP = 3
    BORDER = 4


@dataclass(frozen=True)
class Item:
    """A menu entry: a key, its description and what selecting it does.

    Entries with children open a submenu. ``displayline`` 0 or 1 sets the
    layout of that submenu (1 puts one entry per line); other values keep
    the current layout. A key name starting with ``#`` marks a title.
    """

    keyname: str
    text: str
    script: str | None = None
    keep: bool = False
    children: tuple = ()
    displayline: int = 0

    @property
    def is_title(self):
        return self.keyname.startswith("#")


@dataclass
class Settings:
    """Appearance and layout settings.

    ``lrpad`` is the sum of left and right text padding; it depends on the
    loaded font and is filled in once fonts are known.
    """

    topbar: bool = True
    fonts: tuple = ("monospace:size=12", "monospace:size=12")
    sep: str = "->"
    maxkey: str = "p"
    background: str = "#000000"
    keyfg: str = "#00ff00"
    titlefg: str = "#ff0000"
    sepfg: str = "#00ffff"
    descfg: str = "#ffffff"
    bordercol: str = "#ff0000"
    backkey: int = XK_H
    columns: int = 6
    colpadding: int = 100
    outpaddinghor: int = 25
    outpaddingvert: int = 15
    titlepadding: int = 5
    borderpx: int = 2
    lrpad: int = 0
    colors: dict | None = None

    def __post_init__(self):
        if self.colors is None:
            self.colors = {
                Scheme.KEY: (self.keyfg, self.background),
                Scheme.TITLE: (self.keyfg, self.background),
                Scheme.SEP: (self.sepfg, self.background),
                Scheme.DESC: (self.descfg, self.background),
                Scheme.BORDER: (self.background, self.bordercol),
            }
        else:
            self.colors = dict(self.colors)


# resource name -> (settings field, is integer)
RESOURCES = {
    "font": ("fonts", False),
    "separator": ("sep", False),
    "background": ("background", False),
    "keyfg": ("keyfg", False),
    "titlefg": ("titlefg", False),
    "sepfg": ("sepfg", False),
    "descfg": ("descfg", False),
    "bordercol": ("bordercol", False),
    "maxcolumns": ("columns", True),
    "colpadding": ("colpadding", True),
    "outpaddinghor": ("outpaddinghor", True),
    "outpaddingvert": ("outpaddingvert", True),
    "titlepadding": ("titlepadding", True),
    "borderpx": ("borderpx", True),
}

RESOURCE_CLASS = "flybinds"

_NAME = r"([A-Za-z0-9_-]+)"
_SPECS = (
    re.compile(rf"{RESOURCE_CLASS}\.{_NAME}"),
    re.compile(rf"{RESOURCE_CLASS}\*{_NAME}"),
    re.compile(rf"\*{_NAME}"),
)


def parse_resources(text):
    """Return the resource values that apply to this program.

    ``text`` is a resource-manager string of ``spec: value`` lines. A
    ``flybinds.name`` entry beats ``flybinds*name``, which beats ``*name``;
    among equal entries the last one wins.
    """
    found = {}
    for raw in text.splitlines():
        line = raw.strip()
        if not line or line.startswith(("!", "#")) or ":" not in line:
            continue
        spec, value = line.split(":", 1)
        spec = spec.strip()
        value = value.lstrip(" \t")
        for rank, pattern in enumerate(_SPECS):
            match = pattern.fullmatch(spec)
            if match:
                name = match.group(1)
                current = found.get(name)
                if current is None or rank <= current[0]:
                    found[name] = (rank, value)
                break
    return {name: value for name, (_, value) in found.items()}


def _strtoul(text):
    match = re.match(r"\s*([+-]?)(\d+)", text)
    if not match:
        return 0
    number = int(match.group(2))
    if match.group(1) == "-":
        number = -number & 0xFFFFFFFF
    return number


def apply_resources(settings, resources):
    """Return a copy of ``settings`` with known resources applied."""
    changes = {}
    for name, (attribute, is_integer) in RESOURCES.items():
        if name not in resources:
            continue
        value = resources[name]
        if attribute == "fonts":
            changes["fonts"] = (value, *settings.fonts[1:])
        elif is_integer:
            changes[attribute] = _strtoul(value)
        else:
            changes[attribute] = value
    if not changes:
        return dataclasses.replace(settings)
    return dataclasses.replace(settings, colors=None, **changes)


def _sc(path):
    return f"$HOME/sc/flybinds/{path}"


def _entries(*rows):
    return tuple(Item(*row) for row in rows)


def default_items():
    """Return the top-level menu entries."""
    ratoli = _entries(("d", "Dreta"), ("e", "Esquerra"))
    monitors = _entries(
        ("p", "Portàtil"),
        ("m", "HDMI"),
        ("d", "Doble (eDP-HDMI)"),
        ("D", "Doble (HDMI-eDP)"),
        ("a", "Altres (arandr)"),
    )
    audio = _entries(
        ("m", "Mixer"),
        ("1", "I/O: Analog"),
        ("2", "O: HDMI 2, I: Analog"),
    )
    record = _entries(
        ("s", "screencast", "dm-ffrecord screencast"),
        ("v", "video", "dm-ffrecord video"),
        ("a", "audio", "dm-ffrecord audio"),
        ("k", "kill", "dm-ffrecord kill"),
    )
    music = _entries(
        ("␣", ""), ("n", ""), ("p", ""), ("b", ""), ("o", "O"), ("x", "X"),
    )
    power = _entries(
        ("a", "Atura"),
        ("r", "Reinicia"),
        ("b", "Bloqueja"),
        ("q", "Hiberna"),
        ("s", "Suspèn"),
        ("x", "Surt"),
    )
    emacs = _entries(
        ("e", "Emacs"), ("f", "Elfeed"), ("m", "mu4e"), ("n", "Org Roam"),
    )
    dwm_gaps = _entries(
        ("0", "Toggle"),
        ("s", "Smart toogle"),
        ("d", "Predeterminat"),
        ("u", "Incrementa"),
        ("U", "Decrementa"),
        ("i", "Inc interiors"),
        ("I", "Dec interiors"),
        ("o", "Inc exteriors"),
        ("O", "Dec exteriors"),
        ("1", "Inc int hor"),
        ("2", "Dec int hor"),
        ("3", "Inc int vert"),
        ("4", "Dec int vert"),
        ("5", "Inc ext hor"),
        ("6", "Dec ext hor"),
        ("7", "Inc ext vert"),
        ("8", "Dec ext vert"),
    )
    dwm_borders = _entries(
        ("s", "Smart toogle"), ("-", "Decrementa"), ("+", "Incrementa"),
    )
    dwm = _entries(
        ("b", "Borders", None, True, dwm_borders),
        ("g", "Gaps", None, True, dwm_gaps),
    )
    launch = _entries(("d", "Fitxers (dbrowse)"), ("t", "Telegram"))
    cron = _entries(
        ("m", "Email", "$HOME/sc/cron/mail.sh &"),
        ("d", "Drive", "$HOME/sc/cron/drive.sh &"),
    )
    config = _entries(
        ("r", "Ratolí", _sc("config/mouse"), False, ratoli),
        ("m", "Monitors", _sc("config/monitors"), False, monitors),
        ("a", "Audio", _sc("config/audio"), False, audio),
        ("w", "Wallpaper", "setwallpaper"),
        ("W", "Tria wallpaper", "nsxiv /usr/share/wallpapers"),
        ("t", "Tema", "dm-color"),
    )
    toggle = _entries(
        ("a", "xautolock"),
        ("k", "screenkey"),
        ("b", "bluetooth"),
        ("c", "cups"),
        ("s", "ssh"),
        ("t", "xcompmgr"),
        ("w", "wallpaper"),
        ("i", "internet"),
    )
    tabbed = _entries(
        ("#", "XDOTOOL"),
        ("c", "Crea"),
        ("a", "Afegeix"),
        ("d", "Elimina principal"),
        ("#", "DMENU"),
        ("C", "Crea"),
        ("A", "Afegeix"),
        ("D", "Elimina principal"),
        ("x", "Elimina totes"),
    )
    return _entries(
        ("l", "Llançador", _sc("launcher"), False, launch, 0),
        ("c", "Configuració", None, False, config, 0),
        ("e", "Emacs", _sc("emacs"), False, emacs, 0),
        ("g", "Gravadora", None, False, record, 0),
        ("d", "DWM", _sc("dwm"), False, dwm, 0),
        ("s", "Música", _sc("music"), False, music, 0),
        ("y", "Sync", None, False, cron, 0),
        ("t", "Toggle", _sc("toggle"), False, toggle, 0),
        ("T", "Tabbed", _sc("tabbed"), False, tabbed, 1),
        ("x", "Tanca", _sc("power"), False, power, 0),
    )