# flybinds

A menu shown in the terminal in which every entry is chosen with a single
key. Entries either open a nested submenu or run a shell script; when an
entry has no script of its own, the keys pressed below the nearest entry up
the tree that has one are passed to that script as arguments.

The package also ships `stest`, a small filter that prints the paths passing
a set of file tests.

## Installing

    pip install .

## The menu

    flybinds [-bvh] [-c columns] [-fn font] [-m monitor]
             [-bg color] [-kf color] [-sf color] [-df color] [-bc color]
             [-cs separation] [-ph paddingH] [-pv paddingV] [-bw border width]
             [-w windowid] key1 key2 ...

- `-v` prints `flybinds-1.0` and exits; `-h` prints the usage text and exits
  with status 1.
- `-b` draws the menu at the bottom of the terminal instead of the top.
- `-c` caps the number of columns (0 means as many as fit).
- `-cs`, `-ph`, `-pv` and `-bw` set column separation, outer padding and
  border width, in units where one terminal cell is 10 wide and 20 high.
- `-bg`, `-kf`, `-sf`, `-df` and `-bc` set the background, key, separator,
  description and border colours, written `#rgb` or `#rrggbb`; any other
  colour name is an error.
- Remaining arguments are key names pressed at start-up, so `flybinds d g`
  opens straight into the "Gaps" submenu under "DWM".

Standard input must be a terminal. Each key press selects the entry with that
key name (letters, shifted letters, digits, space `␣`, Enter `\n`, `.`, `,`,
`+`, `-`). Escape closes the menu with status 1; `h` goes back to the parent
menu. An entry whose key name starts with `#` is drawn as a title.

Selecting an entry with a script starts it with `/bin/sh -c` in a new session
and closes the menu with status 0, unless the entry is marked to stay open.
Selecting an entry without a script starts the nearest script up the path
with the chosen keys as arguments; if there is none, the menu closes with
status 1.

### Settings from `~/.Xresources`

At start-up `~/.Xresources` is read, if present. Lines of the form
`flybinds.name: value` (or `flybinds*name`, or `*name`, in falling order of
precedence) set `font`, `separator`, `background`, `keyfg`, `titlefg`,
`sepfg`, `descfg`, `bordercol`, `maxcolumns`, `colpadding`, `outpaddinghor`,
`outpaddingvert`, `titlepadding` and `borderpx`. Command-line options take
precedence.

### What it does not do

The menu is drawn with terminal escape codes; it opens no X11 window, grabs
no keyboard outside the terminal and queries no X resource database. The
`-fn`, `-m` and `-w` options are accepted but have no effect on the drawing.
The menu entries are those built into `flybinds.config.default_items()`;
there is no file from which to load others.

## stest

    stest [-abcdefghlpqrsuvwx] [-n file] [-o file] [file...]

`stest` prints each given path (or each line of standard input, when no
paths are given) that passes every requested test: `-b` block device, `-c`
character device, `-d` directory, `-e` exists, `-f` regular file, `-g`
set-group-id, `-h` symbolic link, `-p` named pipe, `-r` readable, `-s` not
empty, `-u` set-user-id, `-w` writable, `-x` executable, `-n file` newer than
file, `-o file` older than file. Names starting with `.` are skipped unless
`-a` is given; `-l` tests the contents of directories; `-v` inverts the
result; `-q` prints nothing and stops at the first match. The exit status is
0 when something matched, 1 when nothing did and 2 on a usage error.

To list the executables on `$PATH`:

    echo "$PATH" | tr ':' '\n' | xargs stest -flx

## From Python

    from flybinds.config import default_items
    from flybinds.menu import Menu

    menu = Menu(default_items())
    result = menu.navigate("d")   # NavigationResult(descended=True)
    result = menu.navigate("g")
    result = menu.navigate("0")
    for request in result.spawns:
        print(request.command)    # $HOME/sc/flybinds/dwm g 0 ...
    menu.pop()                    # back one level

`flybinds.layout.compute_geometry` works out columns and rows for a menu
level from a width-measuring function, and `flybinds.stest.run` yields the
names that pass a set of `StestOptions`.

## Running the tests

    pip install .[test]
    pytest