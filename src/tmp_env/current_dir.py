import logging
import os
from pathlib import Path
from typing import Union

from tmp_env.guard import Guard


logger = logging.getLogger(__name__)


class CurrentDir(Guard):
    restore_failure_msg = 'cannot go back to the previous directory'

    def __init__(self, previous: Path) -> None:
        super().__init__()
        self._previous = previous

    @property
    def previous(self) -> Path:
        return self._previous

    def _restore(self) -> None:
        os.chdir(self._previous)

    def _repr_state(self) -> str:
        return repr(str(self._previous))


def set_current_dir(path: Union[str, bytes, os.PathLike]) -> CurrentDir:
    """Switch the working directory to ``path``, returning a guard that switches back.

    Raises ``OSError`` if the current directory cannot be read or ``path`` cannot
    be entered; the working directory is unchanged in that case.
    """
    previous = Path(os.getcwd())
    os.chdir(path)
    logger.debug(f'entering {os.fsdecode(path)} from {previous}')
    return CurrentDir(previous)
