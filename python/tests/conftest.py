import os
import shutil
import tempfile

import pytest


@pytest.fixture
def tmp_dir():
    d = tempfile.mkdtemp(prefix="credstore-test-")
    yield d
    shutil.rmtree(d, ignore_errors=True)


@pytest.fixture
def store_path(tmp_dir):
    return os.path.join(tmp_dir, "passwords.json")
