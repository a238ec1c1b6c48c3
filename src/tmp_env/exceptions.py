class TmpEnvError(Exception):
    pass


class GuardAlreadyReleased(TmpEnvError, RuntimeError):
    def __init__(self, guard):
        self.guard = guard
        super().__init__(f'{guard!r} has already been released')


class RestoreError(TmpEnvError):
    """Raised when a guard cannot undo its mutation.

    This is not meant to be handled: the process-global state the guard was
    protecting is no longer what the caller believes it is.
    """
    def __init__(self, guard, msg):
        self.guard = guard
        super().__init__(f'{msg} ({guard!r})')
