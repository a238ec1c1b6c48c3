import logging
import warnings
from types import TracebackType
from typing import Optional, Type

from tmp_env.exceptions import GuardAlreadyReleased, RestoreError


logger = logging.getLogger(__name__)


class Guard:
    """Holds what is needed to undo one mutation of process-global state.

    The mutation has already happened by the time a guard exists; the factory
    functions (``set_current_dir``, ``set_var``, ...) perform it and hand back
    the guard. Use the guard in a ``with`` block so the mutation is undone on
    every way out of the block:

        with tmp_env.set_var('LANG', 'C'):
            ...

    Nothing here locks anything. Guards on the working directory or on the same
    environment variable must not be interleaved across threads.
    """

    restore_failure_msg = 'cannot restore the previous state'

    def __init__(self) -> None:
        self._released = False

    @property
    def released(self) -> bool:
        return self._released

    def _restore(self) -> None:
        raise NotImplementedError

    def release(self) -> None:
        if self._released:
            raise GuardAlreadyReleased(self)
        # Marked before restoring so a failed restore is never attempted twice.
        self._released = True
        try:
            self._restore()
        except OSError as e:
            logger.error('%s: %r: %s', self.restore_failure_msg, self, e)
            raise RestoreError(self, self.restore_failure_msg) from e
        logger.debug(f'released {self!r}')

    def __enter__(self):
        return self

    def __exit__(
            self,
            exc_type: Optional[Type[BaseException]],
            exc_value: Optional[BaseException],
            traceback: Optional[TracebackType],
    ) -> bool:
        if self._released:
            return False
        try:
            self.release()
        except RestoreError:
            if exc_value is not None:
                logger.error('%r failed to release while handling %r', self, exc_value)
            raise
        return False

    def __del__(self):
        if not getattr(self, '_released', True):
            warnings.warn(f'{self!r} was never released', ResourceWarning, source=self)

    def _repr_state(self) -> str:
        raise NotImplementedError

    def __repr__(self) -> str:
        state = self._repr_state()
        if self._released:
            state += ', released'
        return f'{type(self).__name__}({state})'
