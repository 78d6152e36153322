import logging
from functools import partial
from typing import Callable

from tutor import lessons
from tutor.console import Console
from tutor.logging_config import setup_logging
from tutor.stack import Stack
from tutor.tutorial import Tutorial

logger = logging.getLogger(__name__)

def lesson_plan(console: Console, stack: Stack) -> list[tuple[str, Callable[[], None]]]:
    """
    The tutorial in the order it is taught, as (label, action) pairs.
    """
    tutorial = Tutorial(console)
    return [
        ("header",     partial(lessons.header, console)),
        ("concepts",   partial(lessons.concepts, console)),
        ("operations", partial(tutorial.operations, stack)),
        ("scenarios",  tutorial.scenarios),
        ("summary",    partial(lessons.summary, console)),
    ]

def main() -> None:
    setup_logging()
    console = Console()
    stack = Stack()

    for (label, action) in lesson_plan(console, stack):
        logger.debug(f"lesson step: {label}")
        action()

if __name__=="__main__":
    main()
