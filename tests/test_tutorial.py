import logging

import pytest

from tutor.config import DEMONSTRATION_VALUES
from tutor.console import Console
from tutor.stack import Stack
from tutor.tutorial import INSTR, BracketReport, Tutorial, compile_operations, run

class Recorder(Console):
    """
    Console that keeps what would have been printed.
    """
    def __init__(self):
        super().__init__()
        self.transcript = []

    def say(self, text='', style=''):
        self.transcript.append(text)

def tutorial():
    return Tutorial(Recorder())

def instrs(code):
    return [line[0] for line in code]

class TestPush:
    def test_push_sets_top_and_grows(self):
        t = tutorial()
        s = Stack([1, 2])
        t.push(s, 99, 1)
        assert s.top() == 99
        assert s.size() == 3

    def test_narration(self):
        t = tutorial()
        s = Stack()
        t.push(s, 10, 1)
        assert t.console.transcript == [
            "",
            "Step 1: PUSH(10)",
            "  Before: Stack size = 0",
            "  Action: Adding 10 to the TOP of the stack",
            "  After:  Stack size = 1",
            "  Result: 10 is now the topmost element",
        ]

class TestPop:
    def test_push_then_pop(self):
        t = tutorial()
        s = Stack([3, 4])
        for v in [10, 25, 7]:
            t.push(s, v, 1)
            assert t.pop(s, 1) == v
        assert s.dump() == [3, 4]

    def test_pop_shrinks_and_reveals_second(self):
        t = tutorial()
        s = Stack([10, 25, 7])
        assert t.pop(s, 1) == 7
        assert s.size() == 2
        assert s.top() == 25
        assert "  Result: 25 is now the new top element" in t.console.transcript

    def test_pop_to_empty(self):
        t = tutorial()
        s = Stack([10])
        assert t.pop(s, 3) == 10
        assert s.empty()
        assert t.console.transcript[-1] == "  Result: Stack is now EMPTY"

    def test_pop_narration(self):
        t = tutorial()
        s = Stack([10, 25])
        t.pop(s, 2)
        assert t.console.transcript == [
            "",
            "Step 2: POP()",
            "  Before: Top element = 25, Size = 2",
            "  Action: Removing 25 from the TOP",
            "  After:  Size = 1",
            "  Result: 10 is now the new top element",
        ]

    def test_underflow(self):
        t = tutorial()
        s = Stack()
        assert t.pop(s, 1) is None
        assert s.size() == 0
        assert t.console.transcript == [
            "",
            "Step 1: POP() - CANNOT EXECUTE",
            "  Error: Stack is empty (Stack Underflow)",
            "  Lesson: Always check if stack is empty before popping!",
        ]

    def test_underflow_is_logged(self, caplog):
        t = tutorial()
        with caplog.at_level(logging.INFO, logger="tutor"):
            t.pop(Stack(), 1)
        assert "STACK UNDERFLOW" in caplog.text

class TestQuery:
    def test_active(self):
        t = tutorial()
        s = Stack([10, 25, 7])
        t.query(s)
        assert t.console.transcript[1:] == [
            ">> Stack Query Information:",
            "   Status: ACTIVE stack (contains elements)",
            "   Top Element: 7",
            "   Total Elements: 3",
            "   Note: We can only access the TOP element directly!",
        ]
        assert s.dump() == [10, 25, 7]

    def test_empty(self):
        t = tutorial()
        t.query(Stack())
        assert "   Status: EMPTY stack (no elements)" in t.console.transcript
        assert "   Total Elements: 0" in t.console.transcript
        assert not any("Top Element" in line for line in t.console.transcript)

class TestVisualize:
    def test_does_not_mutate(self):
        t = tutorial()
        s = Stack([10, 25, 7, 33])
        t.visualize(s)
        assert s.size() == 4
        assert s.top() == 33

    def test_marks_top(self):
        t = tutorial()
        t.visualize(Stack([10, 25]))
        assert "   |  25 | <- TOP (last added, first to remove)" in t.console.transcript

    def test_empty(self):
        t = tutorial()
        t.visualize(Stack())
        assert "   |     |  <- Empty stack" in t.console.transcript

class TestCompile:
    def test_checkpoints_and_shows(self):
        code = compile_operations([1, 2, 3, 4, 5, 6, 7], 4, 3, 2)
        assert instrs(code) == [
            INSTR.push, INSTR.push, INSTR.push, INSTR.checkpoint,
            INSTR.push, INSTR.push, INSTR.push, INSTR.checkpoint,
            INSTR.push,
            INSTR.say,
            INSTR.pop, INSTR.pop, INSTR.show, INSTR.pop, INSTR.pop, INSTR.show,
        ]

    def test_steps_are_numbered_from_one(self):
        code = compile_operations([10, 25], 2, 3, 2)
        assert code[0] == (INSTR.push, (10, 1))
        assert code[1] == (INSTR.push, (25, 2))
        assert code[3] == (INSTR.pop, 1)
        assert code[4] == (INSTR.pop, 2)

    def test_no_pops(self):
        code = compile_operations([10], 0, 3, 2)
        assert instrs(code) == [INSTR.push, INSTR.say]

class TestRun:
    def test_lesson_scenario(self):
        t = tutorial()
        s = Stack()
        run(compile_operations(DEMONSTRATION_VALUES, 4, 3, 2), s, t)
        assert s.size() == 4
        assert s.top() == 33
        assert s.dump() == [10, 25, 7, 33]

    def test_popped_sequence(self):
        t = tutorial()
        s = Stack()
        for (step, v) in enumerate([10, 25, 7, 33, 18, 42, 9, 15], start=1):
            t.push(s, v, step)
        popped = [t.pop(s, step) for step in range(1, 5)]
        assert popped == [15, 9, 42, 18]
        assert s.size() == 4
        assert s.top() == 33

    def test_checkpoint_output(self):
        t = tutorial()
        run(compile_operations([10, 25, 7], 0, 3, 2), Stack(), t)
        transcript = t.console.transcript
        assert "--- Learning Checkpoint ---" in transcript
        assert "   |   7 | <- TOP (last added, first to remove)" in transcript
        assert "   Total Elements: 3" in transcript

    def test_pops_past_empty(self):
        t = tutorial()
        s = Stack()
        run(compile_operations([1], 3, 5, 5), s, t)
        assert s.empty()
        assert t.console.transcript.count("  Error: Stack is empty (Stack Underflow)") == 2

    def test_say(self):
        t = tutorial()
        run([(INSTR.say, "hello")], Stack(), t)
        assert t.console.transcript == ["", "hello"]

    def test_query_instruction(self):
        t = tutorial()
        run([(INSTR.query, None)], Stack([5]), t)
        assert "   Top Element: 5" in t.console.transcript

    def test_unknown_instruction(self):
        with pytest.raises(ValueError):
            run([("jump", 3)], Stack(), tutorial())

class TestBracketMatch:
    def test_matched(self):
        t = tutorial()
        report = t.bracket_match("((5+3)*(7-2))")
        assert report == BracketReport("((5+3)*(7-2))", True, 0)
        assert t.console.transcript[-1] == "Result: All parentheses are properly matched!"

    def test_trace(self):
        t = tutorial()
        t.bracket_match("((5+3)*(7-2))")
        assert t.console.transcript[1:-1] == [
            "Tracing through the expression:",
            "Found '(' - PUSH to stack. Stack size: 1",
            "Found '(' - PUSH to stack. Stack size: 2",
            "Found ')' - POP from stack. Stack size: 1",
            "Found '(' - PUSH to stack. Stack size: 2",
            "Found ')' - POP from stack. Stack size: 1",
            "Found ')' - POP from stack. Stack size: 0",
        ]

    def test_unclosed(self):
        t = tutorial()
        report = t.bracket_match("(()")
        assert not report.matched
        assert report.unclosed == 1
        assert t.console.transcript[-1] == "Result: Unmatched parentheses detected!"

    def test_stray_closing_is_ignored(self):
        t = tutorial()
        report = t.bracket_match("())")
        assert report.matched
        assert not any("Underflow" in line for line in t.console.transcript)
        assert sum("POP from stack" in line for line in t.console.transcript) == 1

    def test_closing_first(self):
        report = tutorial().bracket_match(")(")
        assert not report.matched
        assert report.unclosed == 1

    def test_no_brackets(self):
        assert tutorial().bracket_match("5+3").matched

    def test_non_decimal_digits(self):
        report = tutorial().bracket_match("(²+①)")
        assert report.matched
        assert report.unclosed == 0

class TestLessons:
    def test_operations_leaves_four(self):
        t = tutorial()
        s = Stack()
        t.operations(s)
        assert s.dump() == [10, 25, 7, 33]
        assert "LESSON 2: Stack Operations in Action" in t.console.transcript
        assert t.console.transcript.count("--- Learning Checkpoint ---") == 2

    def test_scenarios(self):
        t = tutorial()
        t.scenarios()
        transcript = t.console.transcript
        assert "Expression: ((5 + 3) * (7 - 2))" in transcript
        assert "Result: All parentheses are properly matched!" in transcript
        assert "Result: Unmatched parentheses detected!" in transcript
        assert "Step 1: POP() - CANNOT EXECUTE" in transcript
