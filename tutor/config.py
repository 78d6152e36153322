"""
Fixed constants for the tutorial run.

Nothing here is read from the command line or the environment: every run of
the tutorial prints the same lessons with the same data.
"""

DISPLAY_WIDTH: int = 55             # width of the = and - rules

DEMONSTRATION_VALUES: tuple[int, ...] = (10, 25, 7, 33, 18, 42, 9, 15)
POP_STEPS: int = 4
CHECKPOINT_EVERY: int = 3           # checkpoint after every n-th push
SHOW_EVERY: int = 2                 # visualise after every n-th pop

CELL_WIDTH: int = 3                 # minimum width of a value in the stack box

BRACKET_EXPRESSION: str = "((5+3)*(7-2))"
UNBALANCED_EXPRESSION: str = "(()"
