import os

import pytest

from tmp_env import create_temp_dir, random_name, set_current_dir


@pytest.fixture(name='tempdir')
def tempdir_fixture():
    with create_temp_dir() as tmp_dir, set_current_dir(tmp_dir):
        yield tmp_dir


@pytest.fixture(name='env_key')
def env_key_fixture():
    key = f'TEST_TMP_ENV_{random_name()}'
    yield key
    os.environ.pop(key, None)
