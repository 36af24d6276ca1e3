"""Menu navigation: moving between submenus and choosing commands."""

from dataclasses import dataclass

ARG_COUNT = 8


def build_command(script, args):
    """Return the shell command line for ``script`` and up to eight args."""
    padded = list(args)[:ARG_COUNT]
    padded += [""] * (ARG_COUNT - len(padded))
    return " ".join([script, *padded])


@dataclass(frozen=True)
class SpawnRequest:
    """A script to start with its arguments."""

    script: str
    args: tuple = ()

    @property
    def command(self):
        return build_command(self.script, self.args)


@dataclass(frozen=True)
class NavigationResult:
    """What a key press asked for.

    ``exit_code`` is None while the menu should stay open.
    """

    spawns: tuple = ()
    exit_code: int | None = None
    descended: bool = False


class Menu:
    """Tracks the current menu level and the entries chosen to reach it.

    The bottom of the stack is the first top-level entry; its script is the
    last fallback when no chosen entry has one.
    """

    def __init__(self, items):
        self.top = tuple(items)
        if not self.top:
            raise ValueError("a menu needs at least one entry")
        self.items = self.top
        self.displayline = 0
        self._stack = [self.top[0]]

    @property
    def path(self):
        """The entries chosen to reach the current level."""
        return tuple(self._stack[1:])

    def navigate(self, keyname):
        """Select the entry named ``keyname`` at the current level."""
        if keyname is None:
            return NavigationResult()
        item = next((entry for entry in self.items if entry.keyname == keyname), None)
        if item is None:
            return NavigationResult()
        if item.children:
            self._stack.append(item)
            self.items = item.children
            if item.displayline in (0, 1):
                self.displayline = item.displayline
            return NavigationResult(descended=True)
        return self._choose(item)

    def _choose(self, item):
        spawns = []
        if item.script is not None:
            spawns.append(SpawnRequest(item.script, ("",) * ARG_COUNT))
            if not item.keep:
                return NavigationResult(tuple(spawns), 0)

        owner = None
        args = [""] * ARG_COUNT
        position = -2
        keep = False
        for node in self._stack:
            keep = node.keep
            if node.script:
                owner = node
                args = [""] * ARG_COUNT
                position = -2
            position += 1
            if 0 <= position < ARG_COUNT and node.keyname:
                args[position] = node.keyname

        if owner is None:
            return NavigationResult(tuple(spawns), 1)
        position += 1
        if position < ARG_COUNT:
            args[position] = item.keyname
        spawns.append(SpawnRequest(owner.script, tuple(args)))
        exit_code = None if item.keep or keep else 0
        return NavigationResult(tuple(spawns), exit_code)

    def pop(self):
        """Go back one level; does nothing at the top level."""
        if len(self._stack) < 2:
            return
        previous = self._stack[-2]
        if len(self._stack) > 2:
            self.items = previous.children
            before = self._stack[-3]
            if before.displayline in (0, 1):
                self.displayline = before.displayline
        else:
            self.items = self.top
            self.displayline = 0
        self._stack.pop()