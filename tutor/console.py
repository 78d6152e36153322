"""
Styled console output.

Everything the tutorial prints goes through a Console. On a terminal the
fragments are rendered in colour by prompt_toolkit; anywhere else (a pipe, a
file, a test capture) the same fragments are flattened to plain text with
ordinary newlines.
"""
import sys
from typing import Optional, TextIO

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText, to_plain_text
from prompt_toolkit.styles import Style

from tutor.config import DISPLAY_WIDTH

STYLE = Style.from_dict({
    'rule':    '#888888',
    'title':   'bold',
    'lesson':  'bold ansiblue',
    'step':    'bold ansicyan',
    'box':     'ansiyellow',
    'ok':      'ansigreen',
    'error':   'bold ansired',
    'note':    'italic',
})

class Console:
    def __init__(self, file: Optional[TextIO] = None, style: Style = STYLE) -> None:
        self.file = file
        self.style = style

    def say(self, text: str = '', style: str = '') -> None:
        cls = f'class:{style}' if style else ''
        fragments = FormattedText([(cls, text)])
        out = self.file or sys.stdout
        if out.isatty():
            print_formatted_text(fragments, style=self.style, file=out)
        else:
            out.write(to_plain_text(fragments) + '\n')

    def blank(self) -> None:
        self.say()

    def rule(self, ch: str = '-') -> None:
        self.say(ch*DISPLAY_WIDTH, 'rule')

    def banner(self, title: str, ch: str = '-') -> None:
        """
        Blank line, then the title between two rules.
        """
        self.blank()
        self.rule(ch)
        self.say(title, 'lesson')
        self.rule(ch)

    def lines(self, rows: list[str], style: str = '') -> None:
        for r in rows:
            self.say(r, style)
