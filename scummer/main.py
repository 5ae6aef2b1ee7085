import sys

from scummer.core.backup_manager import ScummBackupCore
from scummer.core.errors import ScummError, UnsupportedError, format_error_chain


def main(core=None):
    """Scumm the current profile once and report. Returns the exit status."""
    core = core or ScummBackupCore()

    try:
        profile_dir = core.select_profile_dir()
    except UnsupportedError as e:
        print(e)
        return 1
    except ScummError as e:
        print(f"Failed to find profile dirs: {format_error_chain(e)}")
        return 1

    try:
        scumm_dir = core.ensure_scumm_dir()
    except ScummError as e:
        print(f"failed to ensure scumm dir: {format_error_chain(e)}")
        return 1

    try:
        scummed = core.scumm_profile(profile_dir, scumm_dir)
    except ScummError as e:
        print(f"failed to scumm profile: {format_error_chain(e)}")
        return 1

    print(
        f"successfully scummed current profile from {scummed.source_path!r} "
        f"to {scummed.dest_path!r}"
    )
    return 0


def run():
    sys.exit(main())


if __name__ == "__main__":
    run()
