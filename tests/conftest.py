import os

import pytest

from scummer.core.backup_manager import ScummBackupCore
from scummer.core.paths import FixedAppDataLocator


def make_profile(app_dir, user_id, files=None):
    """Lay out SaveFiles/<user_id>/profiles under app_dir and fill it."""
    profiles_dir = os.path.join(app_dir, "SaveFiles", user_id, "profiles")
    os.makedirs(profiles_dir)
    for rel_path, content in (files or {}).items():
        path = os.path.join(profiles_dir, rel_path)
        os.makedirs(os.path.dirname(path), exist_ok=True)
        with open(path, "wb") as f:
            f.write(content)
    return profiles_dir


@pytest.fixture
def app_dir(tmp_path):
    path = tmp_path / "RedHook" / "Darkest Dungeon II"
    path.mkdir(parents=True)
    return str(path)


@pytest.fixture
def core(app_dir):
    return ScummBackupCore(locator=FixedAppDataLocator(app_dir))
