import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional, Sequence

from tutor import lessons
from tutor.box import box
from tutor.config import (BRACKET_EXPRESSION, CHECKPOINT_EVERY, DEMONSTRATION_VALUES,
                          POP_STEPS, SHOW_EVERY, UNBALANCED_EXPRESSION)
from tutor.console import Console
from tutor.errors import StackUnderflow
from tutor.stack import Stack
from tutor.tokeniser import Tokeniser, TokenType, spaced

logger = logging.getLogger(__name__)

class INSTR(Enum):
    push=0        # push (value, step)
    pop=1         # pop stack, narrated as step n
    show=2        # visualise the stack
    query=3       # report empty/top/size
    checkpoint=4  # show + query under a heading
    say=5         # a line of narration

@dataclass(frozen=True)
class BracketReport:
    expression: str
    matched: bool
    unclosed: int                 # opening brackets still on the stack

def compile_operations(values: Sequence[int], pops: int, checkpoint_every: int, show_every: int) -> list[tuple]:
    """
    Build the push/pop walkthrough: one push per value with a checkpoint after
    every checkpoint_every-th push, then pops, showing the stack after every
    show_every-th pop.
    """
    code: list[tuple] = []
    for (step, value) in enumerate(values, start=1):
        code.append((INSTR.push, (value, step)))
        if step % checkpoint_every == 0:
            code.append((INSTR.checkpoint, None))

    code.append((INSTR.say, "Now let's demonstrate POP operations:"))
    for step in range(1, pops+1):
        code.append((INSTR.pop, step))
        if step % show_every == 0:
            code.append((INSTR.show, None))

    return code

def run(code: list[tuple], stack: Stack, tutorial: 'Tutorial') -> None:
    for (instr, arg) in code:
        logger.debug(f"{instr} {arg}")
        if instr == INSTR.push:
            (value, step) = arg
            tutorial.push(stack, value, step)

        elif instr == INSTR.pop:
            tutorial.pop(stack, arg)

        elif instr == INSTR.show:
            tutorial.visualize(stack)

        elif instr == INSTR.query:
            tutorial.query(stack)

        elif instr == INSTR.checkpoint:
            tutorial.checkpoint(stack)

        elif instr == INSTR.say:
            tutorial.console.blank()
            tutorial.console.say(arg)

        else:
            raise ValueError(f'unknown instruction: {instr}')

class Tutorial:
    """
    Narrates stack operations on a console. The stack being taught is always
    passed in; the tutorial itself holds no stack state.
    """
    def __init__(self, console: Console) -> None:
        self.console = console

    def push(self, stack: Stack, value: Any, step: int) -> None:
        say = self.console.say
        self.console.blank()
        say(f"Step {step}: PUSH({value})", 'step')
        say(f"  Before: Stack size = {stack.size()}")

        stack.push(value)

        say(f"  Action: Adding {value} to the TOP of the stack")
        say(f"  After:  Stack size = {stack.size()}")
        say(f"  Result: {stack.top()} is now the topmost element")

    def pop(self, stack: Stack, step: int) -> Optional[Any]:
        """
        Narrated pop. An empty stack prints the underflow lesson and is left
        as it was; returns the removed value, or None on underflow.
        """
        say = self.console.say
        self.console.blank()
        size = stack.size()
        try:
            removed = stack.pop()
        except StackUnderflow as inst:
            logger.info(str(inst))
            say(f"Step {step}: POP() - CANNOT EXECUTE", 'error')
            say("  Error: Stack is empty (Stack Underflow)", 'error')
            say("  Lesson: Always check if stack is empty before popping!", 'note')
            return None

        say(f"Step {step}: POP()", 'step')
        say(f"  Before: Top element = {removed}, Size = {size}")
        say(f"  Action: Removing {removed} from the TOP")
        say(f"  After:  Size = {stack.size()}")

        if stack.empty():
            say("  Result: Stack is now EMPTY")
        else:
            say(f"  Result: {stack.top()} is now the new top element")
        return removed

    def query(self, stack: Stack) -> None:
        say = self.console.say
        self.console.blank()
        say(">> Stack Query Information:", 'title')

        if stack.empty():
            say("   Status: EMPTY stack (no elements)")
        else:
            say("   Status: ACTIVE stack (contains elements)")
            say(f"   Top Element: {stack.top()}")

        say(f"   Total Elements: {stack.size()}")
        say("   Note: We can only access the TOP element directly!", 'note')

    def visualize(self, stack: Stack) -> None:
        self.console.blank()
        self.console.say(">> Visual Stack Representation:", 'title')
        self.console.lines(box(stack), 'box')

    def checkpoint(self, stack: Stack) -> None:
        self.console.blank()
        self.console.say("--- Learning Checkpoint ---", 'lesson')
        self.visualize(stack)
        self.query(stack)

    def bracket_match(self, expression: str) -> BracketReport:
        """
        Trace expression left to right with a stack of open brackets.

        A ')' with nothing to pop is passed over without comment: only
        brackets left open at the end make the expression unmatched.
        """
        say = self.console.say
        brackets = Stack()

        self.console.blank()
        say("Tracing through the expression:")
        for t in Tokeniser(expression).lex():
            if t.kind == TokenType.LPAREN:
                brackets.push(t.tok)
                say(f"Found '(' - PUSH to stack. Stack size: {brackets.size()}")
            elif t.kind == TokenType.RPAREN and not brackets.empty():
                brackets.pop()
                say(f"Found ')' - POP from stack. Stack size: {brackets.size()}")

        report = BracketReport(expression, brackets.empty(), brackets.size())
        logger.debug(f"bracket scan of {expression!r}: {report}")
        if report.matched:
            say("Result: All parentheses are properly matched!", 'ok')
        else:
            say("Result: Unmatched parentheses detected!", 'error')
        return report

    def operations(self, stack: Stack) -> None:
        self.console.banner("LESSON 2: Stack Operations in Action")
        self.console.blank()
        self.console.say("Let's build a stack with numbers and observe the behavior:")
        code = compile_operations(DEMONSTRATION_VALUES, POP_STEPS, CHECKPOINT_EVERY, SHOW_EVERY)
        run(code, stack, self)

    def scenarios(self) -> None:
        say = self.console.say
        self.console.banner("LESSON 3: Stack Applications and Scenarios")
        lessons.applications(self.console)

        self.console.blank()
        say("Practical Example: Parentheses Matching", 'title')
        say(f"Expression: {spaced(BRACKET_EXPRESSION)}")
        self.bracket_match(BRACKET_EXPRESSION)

        self.console.blank()
        say("Counter Example: an opening bracket that is never closed", 'title')
        say(f"Expression: {spaced(UNBALANCED_EXPRESSION)}")
        self.bracket_match(UNBALANCED_EXPRESSION)

        self.console.blank()
        say("Edge Case: popping an empty stack", 'title')
        self.pop(Stack(), 1)
