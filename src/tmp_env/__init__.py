from tmp_env._version import __version__

from tmp_env.current_dir import CurrentDir, set_current_dir
from tmp_env.env_var import CurrentEnv, remove_var, set_var
from tmp_env.exceptions import GuardAlreadyReleased, RestoreError, TmpEnvError
from tmp_env.guard import Guard
from tmp_env.tempdir import TmpDir, create_temp_dir, random_name

__all__ = [
    '__version__',
    'CurrentDir',
    'CurrentEnv',
    'Guard',
    'GuardAlreadyReleased',
    'RestoreError',
    'TmpDir',
    'TmpEnvError',
    'create_temp_dir',
    'random_name',
    'remove_var',
    'set_current_dir',
    'set_var',
]
