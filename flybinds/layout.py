"""Menu geometry: column widths, column count and window height."""

from dataclasses import dataclass


def _cdiv(numerator, denominator):
    quotient = abs(numerator) // abs(denominator)
    return -quotient if (numerator < 0) != (denominator < 0) else quotient


@dataclass(frozen=True)
class Geometry:
    """Computed layout of one menu level."""

    column_width: int
    columns: int
    rows: int
    height: int
    bar_height: int

    def positions(self, count, left, top):
        """Yield the top-left corner of each of ``count`` entries."""
        x, y = left, top
        for index in range(count):
            yield x, y
            if (index + 1) % self.columns == 0:
                y += self.bar_height
                x = left
            else:
                x += self.column_width


def _item_width(item, settings, measure):
    return measure(item.keyname) + measure(settings.sep) + measure(item.text) + settings.lrpad


def column_width(items, displayline, settings, measure, menu_width):
    """Return the width of one column."""
    if displayline == 1:
        return menu_width - 2 * settings.outpaddinghor
    widest = max((_item_width(item, settings, measure) for item in items), default=0)
    return widest + settings.colpadding


def column_count(items, displayline, settings, measure, menu_width):
    """Return how many columns fit, capped by ``settings.columns`` if set."""
    width = column_width(items, displayline, settings, measure, menu_width)
    fitting = _cdiv(menu_width - 2 * settings.outpaddingvert, width)
    if settings.columns == 0 or fitting < settings.columns:
        return fitting
    return settings.columns


def compute_geometry(items, displayline, settings, measure, menu_width, bar_height):
    """Return the geometry for laying out ``items``."""
    items = tuple(items)
    width = column_width(items, displayline, settings, measure, menu_width)
    columns = column_count(items, displayline, settings, measure, menu_width)
    if columns <= 0:
        raise ValueError("menu is too narrow for a single column")
    rows = -(-len(items) // columns)
    height = rows * bar_height + 2 * settings.outpaddingvert
    return Geometry(width, columns, rows, height, bar_height)