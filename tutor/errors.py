class TutorError(Exception):
    pass

class StackUnderflow(TutorError):
    """
    Attempted removal from (or inspection of) an empty stack.
    """
    pass
