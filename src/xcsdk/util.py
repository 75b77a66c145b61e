#
#  xcsdk | xcsdk
#  util.py
#
#  Switches, version info and terminal output helpers
#
#  This file is part of xcsdk. xcsdk is free software that
#  is made available under the MIT license. Consult the
#  file "LICENSE" that is distributed together with this file
#  for the exact licensing terms.
#
#  Copyright (c) 0cyn 2022.
#
import re
import sys
from importlib.metadata import version, PackageNotFoundError
from typing import List

from pygments import highlight
from pygments.formatters.terminal import TerminalFormatter
from pygments.lexers.data import JsonLexer

try:
    XCSDK_VERSION = version('xcsdk')
except PackageNotFoundError:
    XCSDK_VERSION = '1.0.0'


class ignore:
    UNRECOGNIZED_SDKS = False


class opts:
    DISABLE_COLOR = False


def highlight_json(input):
    if opts.DISABLE_COLOR:
        return input
    return highlight(input, JsonLexer(), TerminalFormatter())


class Table:
    """
    ASCII Table Renderer
    .titles = a list of titles for each column
    .rows is a list of lists, each sublist holding one string per column, e.g. self.rows.append(['col1thing', 'col2thing'])

    Columns are sized to their widest cell; nothing is wrapped.
    """

    def __init__(self, dividers=False):
        self.titles: List[str] = []
        self.rows: List[List[str]] = []

        self.dividers = dividers
        self.column_pad = 3 if dividers else 2

    def column_maxes(self) -> List[int]:
        maxes = [len(title) for title in self.titles]
        for row in self.rows:
            for index, col in enumerate(row):
                maxes[index] = max(maxes[index], len(strip_ansi(col)))
        return maxes

    def render(self) -> str:
        cgrey = '\33[0m\33[38;5;242m'
        reset = '\33[0m'
        cwhitebold = '\33[0m\33[1m'
        if opts.DISABLE_COLOR:
            cgrey = ''
            reset = ''
            cwhitebold = ''

        maxes = self.column_maxes()

        def render_row(cols):
            cells = [col + ' ' * (maxes[i] - len(strip_ansi(col))) for i, col in enumerate(cols)]
            if self.dividers:
                sep = f' {cgrey}┃{reset} '
                return f'{cgrey}┃{reset} ' + sep.join(cells) + f' {cgrey}┃{reset}'
            return (' ' * self.column_pad).join(cells).rstrip()

        def border(left, mid, right):
            return cgrey + left + mid.join('━' * (size + 2) for size in maxes) + right + reset

        lines = []
        if self.dividers:
            lines.append(border('┏', '┳', '┓'))
        lines.append(cwhitebold + render_row(self.titles) + reset)
        if self.dividers:
            lines.append(border('┣', '╋', '┫'))
        for row in self.rows:
            lines.append(render_row(row))
        if self.dividers:
            lines.append(border('┗', '┻', '┛'))
        return '\n'.join(lines) + '\n'


ansi_escape = re.compile(r'(?:\x1B[@-_]|[\x80-\x9F])[0-?]*[ -/]*[@-~]')


def strip_ansi(msg):
    return ansi_escape.sub('', msg)


def xcsdk_print(msg, file=sys.stdout):
    if file.isatty():
        print(msg, file=file)
    else:
        print(strip_ansi(msg), file=file)
