"""
ASCII display of a stack, drawn top to bottom:

       +-----+
       |  15 | <- TOP (last added, first to remove)
       |   9 |
       +-----+
       Bottom

Only the top of a stack is reachable, so the elements are collected by
popping a snapshot until it is empty; the stack being shown is never touched.
"""
from tutor.config import CELL_WIDTH
from tutor.stack import Stack

INDENT = '   '
TOP_MARKER = ' <- TOP (last added, first to remove)'
EMPTY_MARKER = '  <- Empty stack'

def drain(stack: Stack) -> list:
    """
    Pop everything off a copy of stack, returning the elements top first.
    """
    copy = stack.snapshot()
    elements = []
    while not copy.empty():
        elements.append(copy.pop())
    return elements

def encase(elements: list, width: int = CELL_WIDTH) -> list[str]:
    """
    Surround a top-first list of elements with a frame.
    """
    cols = max([width] + [len(str(e)) for e in elements])
    border = f"{INDENT}+{'-'*(cols+2)}+"

    if not elements:
        return [f"{INDENT}|{' '*(cols+2)}|{EMPTY_MARKER}", border]

    encased = [border]
    for i, e in enumerate(elements):
        row = f"{INDENT}| {str(e):>{cols}} |"
        if i == 0:
            row += TOP_MARKER
        encased.append(row)
    encased.append(border)
    encased.append(f"{INDENT}Bottom")

    return encased

def box(stack: Stack) -> list[str]:
    """
    Convert a stack to rows suitable for display.
    """
    return encase(drain(stack))
