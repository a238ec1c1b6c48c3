import logging
import os
from typing import Optional

from tmp_env.guard import Guard


logger = logging.getLogger(__name__)


class CurrentEnv(Guard):
    """Restores one environment variable to what it was before the guard.

    ``previous`` is ``None`` when the variable was not set at all, which is not
    the same as being set to ``''``: an unset variable is removed on release.
    """
    restore_failure_msg = 'cannot restore the environment variable'

    def __init__(self, key: str, previous: Optional[str]) -> None:
        super().__init__()
        self._key = key
        self._previous = previous

    @property
    def key(self) -> str:
        return self._key

    @property
    def previous(self) -> Optional[str]:
        return self._previous

    def _restore(self) -> None:
        if self._previous is None:
            os.environ.pop(self._key, None)
        else:
            os.environ[self._key] = self._previous

    def _repr_state(self) -> str:
        return repr(self._key)


def _check_key(key: str) -> None:
    # putenv reports these as OSError on some platforms and ValueError on others.
    if not key or '=' in key:
        raise ValueError(f'illegal environment variable name: {key!r}')


def set_var(key: str, value: str) -> CurrentEnv:
    _check_key(key)
    previous = os.environ.get(key)
    os.environ[key] = value
    logger.debug(f'set {key} (previously {"unset" if previous is None else "set"})')
    return CurrentEnv(key, previous)


def remove_var(key: str) -> CurrentEnv:
    previous = os.environ.get(key)
    os.environ.pop(key, None)
    logger.debug(f'removed {key} (previously {"unset" if previous is None else "set"})')
    return CurrentEnv(key, previous)
