import getpass
import os
import platform
from dataclasses import dataclass

from scummer.core.errors import NotFoundError, ScummError

VENDOR_DIR_NAME = "RedHook"
GAME_DIR_NAME = "Darkest Dungeon II"
STEAM_APP_ID = "1940340"

WINDOWS_APP_DATA_TEMPLATE = "C:/Users/{username}/AppData/LocalLow/" + VENDOR_DIR_NAME + "/" + GAME_DIR_NAME
PROTON_COMPATDATA_ROOT = os.path.join("~", ".local", "share", "Steam", "steamapps", "compatdata")
PROTON_USER_LOCAL_LOW = os.path.join("pfx", "drive_c", "users", "steamuser", "AppData", "LocalLow")


@dataclass(frozen=True)
class SaveLayout:
    """Fixed directory names below the game's app-data dir."""
    save_dir_name: str = "SaveFiles"
    profiles_dir_name: str = "profiles"
    scumm_dir_name: str = "scummed"


DEFAULT_LAYOUT = SaveLayout()


def current_username():
    try:
        return getpass.getuser()
    except (OSError, KeyError) as e:
        raise ScummError("Failed to look up the current username") from e


class AppDataLocator:
    """Finds the per-user app-data directory of the game.

    Subclasses only say where the directory should be; the existence
    check is shared so every platform fails the same way.
    """

    def candidate_path(self):
        raise NotImplementedError

    def find_app_data_dir(self):
        expected_path = self.candidate_path()
        if not os.path.exists(expected_path):
            raise NotFoundError(f"Darkest Dungeon 2 app dir not found at {expected_path}")
        return expected_path


class WindowsAppDataLocator(AppDataLocator):
    def candidate_path(self):
        return os.path.normpath(WINDOWS_APP_DATA_TEMPLATE.format(username=current_username()))


class ProtonAppDataLocator(AppDataLocator):
    """Steam on Linux runs the game in a Proton prefix with a fixed 'steamuser'."""

    def __init__(self, compatdata_root=PROTON_COMPATDATA_ROOT):
        self.compatdata_root = compatdata_root

    def candidate_path(self):
        return os.path.join(
            os.path.expanduser(self.compatdata_root),
            STEAM_APP_ID,
            PROTON_USER_LOCAL_LOW,
            VENDOR_DIR_NAME,
            GAME_DIR_NAME,
        )


class FixedAppDataLocator(AppDataLocator):
    def __init__(self, path):
        self.path = path

    def candidate_path(self):
        return self.path


def default_locator():
    """Pick the locator for the platform we're running on."""
    if platform.system() == "Linux":
        return ProtonAppDataLocator()
    return WindowsAppDataLocator()
