import os
import shutil

from scummer.core.errors import ScummError


def copy_dir_recursively(src, dst):
    """Copy directory contents recursively from src to dst."""
    try:
        os.makedirs(dst, exist_ok=True)
    except OSError as e:
        raise ScummError(f"failed to create dst dir: {dst!r}") from e

    try:
        with os.scandir(src) as it:
            entries = list(it)
    except OSError as e:
        raise ScummError(f"failed to read src dir: {src!r}") from e

    for entry in entries:
        s = entry.path
        d = os.path.join(dst, entry.name)
        try:
            # Links are never walked as directories
            if entry.is_dir(follow_symlinks=False):
                copy_dir_recursively(s, d)
            else:
                # Content only, no metadata
                shutil.copyfile(s, d)
        except (OSError, ScummError) as e:
            raise ScummError(f"Failed trying to copy from {s!r} to {d!r}") from e
