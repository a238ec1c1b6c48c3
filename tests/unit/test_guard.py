import os
import shutil

import pytest

from tmp_env import GuardAlreadyReleased, RestoreError, create_temp_dir, set_var


def _exception_chain(exc):
    seen = []
    pending = [exc]
    while pending:
        current = pending.pop()
        if current is None or current in seen:
            continue
        seen.append(current)
        pending.extend([current.__cause__, current.__context__])
    return seen


def test_enter_returns_guard(env_key):
    guard = set_var(env_key, 'myvalue')
    with guard as entered:
        assert entered is guard
    assert guard.released


def test_explicit_release(env_key):
    guard = set_var(env_key, 'myvalue')
    assert not guard.released
    guard.release()
    assert guard.released
    assert env_key not in os.environ


def test_double_release(env_key):
    guard = set_var(env_key, 'myvalue')
    guard.release()
    with pytest.raises(GuardAlreadyReleased) as exc_info:
        guard.release()
    assert exc_info.value.guard is guard
    assert isinstance(exc_info.value, RuntimeError)


def test_release_inside_block(env_key):
    with set_var(env_key, 'myvalue') as guard:
        guard.release()
        assert env_key not in os.environ
        os.environ[env_key] = 'set afterwards'
    # Leaving the block must not release a second time.
    assert os.environ[env_key] == 'set afterwards'


def test_exception_not_suppressed(env_key):
    with pytest.raises(ZeroDivisionError):
        with set_var(env_key, 'myvalue'):
            1 / 0


def test_restore_failure_while_handling_exception():
    with pytest.raises(RestoreError) as exc_info:
        with create_temp_dir() as tmp_dir:
            shutil.rmtree(tmp_dir)
            raise KeyError('in flight')
    chain = _exception_chain(exc_info.value)
    assert any(isinstance(exc, FileNotFoundError) for exc in chain)
    assert any(isinstance(exc, KeyError) for exc in chain)


def test_unreleased_guard_warns(env_key):
    guard = set_var(env_key, 'myvalue')
    with pytest.warns(ResourceWarning):
        del guard
    # Collection does not restore anything.
    assert os.environ[env_key] == 'myvalue'


def test_released_guard_does_not_warn(env_key, recwarn):
    guard = set_var(env_key, 'myvalue')
    guard.release()
    del guard
    assert not [w for w in recwarn if issubclass(w.category, ResourceWarning)]
