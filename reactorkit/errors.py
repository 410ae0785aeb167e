"""Exception type that records the stack where it was created."""

import traceback


class ReactorError(Exception):
    """An error carrying a message and the stack at construction."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self._stack = "".join(traceback.format_stack()[:-1])

    def stack_trace(self) -> str:
        """The call stack captured when the error was created."""
        return self._stack