"""
Static teaching text. Each block is a list of (text, style) lines; the
functions at the bottom print them in tutorial order.
"""
from tutor.console import Console

Block = list[tuple[str, str]]

WELCOME: Block = [
    ("", ""),
    ("Welcome to the Stack Learning Experience!", ""),
    ("This demonstration teaches stack fundamentals through", ""),
    ("hands-on examples and interactive visualizations.", ""),
]

CONCEPTS: Block = [
    ("", ""),
    ("A STACK is a linear data structure that follows the", ""),
    ("LIFO principle: Last In, First Out", "title"),
    ("", ""),
    ("Think of a stack like a pile of plates:", ""),
    ("- The last plate placed goes on TOP", ""),
    ("- The first plate removed comes from the TOP", ""),
    ("- The bottom plates remain until upper ones are removed", ""),
    ("", ""),
    ("Primary Stack Operations:", "title"),
    ("1. PUSH: Add element to the top", ""),
    ("2. POP:  Remove element from the top", ""),
    ("3. TOP:  View the top element (without removing)", ""),
    ("4. EMPTY: Check if stack contains elements", ""),
    ("5. SIZE: Count total elements in stack", ""),
]

APPLICATIONS: list[tuple[str, list[str]]] = [
    ("Function Call Management", [
        "Program tracks function calls in execution stack",
        "When function finishes, program returns to caller",
    ]),
    ("Undo Operations", [
        "Text editors store previous states",
        "Ctrl+Z removes the most recent change",
    ]),
    ("Browser History", [
        "Back button returns to previous page",
        "Most recent page is first to be revisited",
    ]),
    ("Expression Evaluation", [
        "Mathematical expressions use stacks",
        "Parentheses matching and operator precedence",
    ]),
    ("Memory Management", [
        "Program variables stored in call stack",
        "Local variables created and destroyed automatically",
    ]),
]

SUMMARY: list[tuple[str, list[str]]] = [
    ("Stack Definition", [
        "LIFO data structure - Last In, First Out",
    ]),
    ("Core Operations", [
        "PUSH: Add element to top",
        "POP:  Remove element from top",
        "TOP:  Access top element without removal",
    ]),
    ("Important Properties", [
        "- Only top element is directly accessible",
        "- Stack can be empty (underflow risk)",
        "- Elements are processed in reverse order",
    ]),
    ("Practical Applications", [
        "- Function call management",
        "- Undo operations in software",
        "- Expression evaluation and parsing",
    ]),
    ("Programming Best Practices", [
        "- Always check for empty stack before popping",
        "- Use appropriate data types for stack elements",
        "- Consider stack size limitations in applications",
    ]),
]

def say_block(console: Console, block: Block) -> None:
    for (text, style) in block:
        console.say(text, style)

def header(console: Console) -> None:
    console.rule('=')
    console.say(f"{'STACK DATA STRUCTURE TUTORIAL':>35}", 'title')
    console.say(f"{'Interactive Learning Demo':>30}", 'title')
    console.rule('=')
    say_block(console, WELCOME)

def concepts(console: Console) -> None:
    console.banner("LESSON 1: Understanding Stack Fundamentals")
    say_block(console, CONCEPTS)

def applications(console: Console) -> None:
    console.blank()
    console.say("Real-World Stack Applications:", 'title')
    for (i, (title, points)) in enumerate(APPLICATIONS, start=1):
        console.blank()
        console.say(f"{i}. {title}:", 'step')
        for p in points:
            console.say(f"   - {p}")

def summary(console: Console) -> None:
    console.banner("EDUCATIONAL SUMMARY: Key Learning Points", '=')
    console.blank()
    console.say("What the student has learned about stacks:")
    for (title, points) in SUMMARY:
        console.blank()
        console.say(f"✓ {title}:", 'ok')
        for p in points:
            console.say(f"  {p}")

    console.blank()
    console.rule('=')
    console.say("Educational demonstration completed successfully!", 'ok')
    console.say("The student now understands fundamental stack concepts.")
    console.rule('=')
