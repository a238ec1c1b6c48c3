import logging
import os
import random
import shutil
import string
import tempfile
from pathlib import Path

from tmp_env.guard import Guard


logger = logging.getLogger(__name__)

_alphabet = string.ascii_letters + string.digits


def random_name(length: int = 10) -> str:
    # Collision resistance only, not a secret.
    return ''.join(random.choices(_alphabet, k=length))


class TmpDir(Guard):
    """A freshly created directory that is deleted, with its contents, on release.

    Stands in for its path: it can be passed to ``open``, ``os.listdir`` and
    friends, joined with ``/``, and any ``Path`` attribute is looked up on the
    underlying path.
    """
    restore_failure_msg = 'cannot delete the tmp dir'

    def __init__(self, path: Path) -> None:
        super().__init__()
        self._path = path

    @property
    def path(self) -> Path:
        return self._path

    def _restore(self) -> None:
        shutil.rmtree(self._path)

    def _repr_state(self) -> str:
        return repr(str(self._path))

    def __fspath__(self) -> str:
        return os.fspath(self._path)

    def __str__(self) -> str:
        return str(self._path)

    def __truediv__(self, other) -> Path:
        return self._path / other

    def __eq__(self, other) -> bool:
        if isinstance(other, TmpDir):
            return self._path == other._path
        if isinstance(other, (str, os.PathLike)):
            other = os.fspath(other)
            if isinstance(other, bytes):
                return NotImplemented
            return self._path == Path(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._path)

    def __getattr__(self, name):
        if name.startswith('_'):
            raise AttributeError(name)
        return getattr(self._path, name)


def create_temp_dir() -> TmpDir:
    """Create an empty, randomly named directory under the OS temp root.

    Raises ``OSError`` if the directory cannot be created. Calling again draws a
    new name.
    """
    tmp_path = Path(tempfile.gettempdir()) / random_name()
    tmp_path.mkdir()
    logger.debug(f'created {tmp_path}')
    return TmpDir(tmp_path)
