from typing import Any, Iterable, Optional

from tutor.errors import StackUnderflow

class Stack:
    """
    Last-in, first-out container. The top of the stack is the end of the list.
    """
    def __init__(self, items: Optional[Iterable] = None) -> None:
        self.stack: list = list(items) if items is not None else []

    def push(self, v: Any) -> None:
        self.stack.append(v)

    def pop(self) -> Any:
        if not self.stack:
            raise StackUnderflow('STACK UNDERFLOW: pop from empty stack')
        return self.stack.pop()

    def top(self) -> Any:
        if not self.stack:
            raise StackUnderflow('STACK UNDERFLOW: empty stack has no top')
        return self.stack[-1]

    def empty(self) -> bool:
        return not self.stack

    def size(self) -> int:
        return len(self.stack)

    def __len__(self) -> int:
        return len(self.stack)

    def snapshot(self) -> 'Stack':
        """
        Independent copy; draining it leaves self untouched.
        """
        return Stack(self.stack)

    def dump(self) -> list:
        return self.stack[:] # bottom -> top
