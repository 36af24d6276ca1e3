"""Terminal menu chosen one key at a time, with nested submenus, and a path filter."""

__version__ = "1.0"