import os
import shutil
import tempfile

import pytest

from fsutil.config import Config


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch):
    """Keep host overrides from leaking into tests."""
    monkeypatch.delenv(Config.HOMEDIR_ENV_VAR, raising=False)
    monkeypatch.delenv(Config.UMASK_ENV_VAR, raising=False)


@pytest.fixture
def tempdir():
    """Create temporary directory for a test."""
    tmpdir = tempfile.mkdtemp(prefix="cypher_fsutil_")
    yield tmpdir
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def make_file(tempdir):
    """Factory writing a file of random content into the temp directory."""

    def _make(name="file", size=10 * 1024, mode=0o644):
        path = os.path.join(tempdir, name)
        with open(path, "wb") as f:
            f.write(os.urandom(size))
        os.chmod(path, mode)
        return path

    return _make


def running_as_root():
    return hasattr(os, "geteuid") and os.geteuid() == 0
