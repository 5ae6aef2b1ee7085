import os
from dataclasses import dataclass
from datetime import datetime, timezone

from scummer.core.copier import copy_dir_recursively
from scummer.core.errors import NotFoundError, ScummError, UnsupportedError
from scummer.core.paths import DEFAULT_LAYOUT, default_locator

TIMESTAMP_FORMAT = "%Y-%m-%dT%H-%M-%S.%f"


@dataclass(frozen=True)
class ScummedProfile:
    source_path: str
    dest_path: str
    time_scummed: datetime


class ScummBackupCore:
    def __init__(self, locator=None, layout=DEFAULT_LAYOUT):
        self.locator = locator or default_locator()
        self.layout = layout

    # ========== BACKUP STORE ==========

    def ensure_scumm_dir(self):
        """Return the scumm dir, creating it the first time round"""
        try:
            app_dir = self.locator.find_app_data_dir()
        except ScummError as e:
            raise ScummError("Failed to create scumm dir") from e

        scumm_dir = os.path.join(app_dir, self.layout.scumm_dir_name)
        if os.path.exists(scumm_dir):
            return scumm_dir

        # Parent is known to exist, so no makedirs
        try:
            os.mkdir(scumm_dir)
        except OSError as e:
            raise ScummError("Failed to create scumm dir") from e
        return scumm_dir

    # ========== SAVE PROFILE DISCOVERY ==========

    def find_save_dir(self):
        try:
            app_dir = self.locator.find_app_data_dir()
        except ScummError as e:
            raise ScummError("Failed to find save dir") from e

        save_dir = os.path.join(app_dir, self.layout.save_dir_name)
        if not os.path.exists(save_dir):
            raise NotFoundError(f"Darkest Dungeon 2 save dir not found in app dir: {save_dir}")
        return save_dir

    def find_user_id_dirs(self):
        """List every entry of the save dir, one per platform account.

        Usually there is a single Steam or Epic id here. Owning the game on
        both stores leaves two.
        """
        try:
            save_dir = self.find_save_dir()
        except ScummError as e:
            raise ScummError("Failed to find user id dirs") from e

        try:
            with os.scandir(save_dir) as entries:
                return [entry.path for entry in entries]
        except OSError as e:
            raise ScummError("Failed to read_dir while looking for user id dirs") from e

    def find_profile_dirs(self):
        """Get the profiles dir of every user id dir, or fail on the first missing one"""
        try:
            user_id_dirs = self.find_user_id_dirs()
        except ScummError as e:
            raise ScummError("Failed to find user id dirs while looking for profile dirs") from e

        profile_dirs = []
        for user_id_dir in user_id_dirs:
            profiles_dir = os.path.join(user_id_dir, self.layout.profiles_dir_name)
            if not os.path.exists(profiles_dir):
                raise NotFoundError(f"Profiles dir not found at {profiles_dir}")
            profile_dirs.append(profiles_dir)
        return profile_dirs

    def select_profile_dir(self):
        """Resolve the single profile dir we know how to scumm"""
        profile_dirs = self.find_profile_dirs()
        assert profile_dirs, "if find_profile_dirs didn't raise it should have found at least 1 dir"
        if len(profile_dirs) > 1:
            raise UnsupportedError(
                f"Found {len(profile_dirs)} profile dirs, but currently only support 1 dir"
            )
        return profile_dirs[0]

    # ========== SCUMMING ==========

    def scumm_profile(self, profile_dir, scumm_dir):
        """Copy profile_dir into a fresh timestamped dir under scumm_dir"""
        if not os.path.exists(profile_dir):
            raise NotFoundError(f"Profiles dir not found at {profile_dir}")

        now = datetime.now(timezone.utc)
        dest_path = os.path.join(scumm_dir, now.strftime(TIMESTAMP_FORMAT))

        copy_dir_recursively(profile_dir, dest_path)

        return ScummedProfile(
            source_path=profile_dir,
            dest_path=dest_path,
            time_scummed=datetime.now(timezone.utc),
        )

    def scumm_current_profile(self):
        """Resolve, ensure the store, copy. Raises on the first failure."""
        profile_dir = self.select_profile_dir()
        scumm_dir = self.ensure_scumm_dir()
        return self.scumm_profile(profile_dir, scumm_dir)

    # ========== LISTING ==========

    def get_backups(self):
        """Get scummed snapshots, newest first"""
        app_dir = self.locator.find_app_data_dir()
        scumm_dir = os.path.join(app_dir, self.layout.scumm_dir_name)
        if not os.path.isdir(scumm_dir):
            return []

        backups = []
        for entry in os.listdir(scumm_dir):
            backup_path = os.path.join(scumm_dir, entry)
            if not os.path.isdir(backup_path):
                continue
            try:
                taken = datetime.strptime(entry, TIMESTAMP_FORMAT).replace(tzinfo=timezone.utc)
            except ValueError:
                continue
            backups.append({
                'path': backup_path,
                'name': entry,
                'timestamp': taken.timestamp(),
                'formatted_date': taken.astimezone().strftime("%Y-%m-%d %H:%M:%S"),
            })

        return sorted(backups, key=lambda x: x['timestamp'], reverse=True)
