from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides output-root resolution and the two idempotent creation helpers used
by the materializer. Neither helper ever overwrites existing content; both
raise OSError only for failures other than "already exists".
"""

import os
from typing import Optional, Sequence

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def resolve_output_root(output_folder: str, root: Optional[str] = None) -> str:
    """
    Resolve the output folder into an absolute path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Relative folders are anchored at 'root', which defaults
    to the current working directory.

    Args:
        output_folder: Raw output folder, possibly '/'-delimited.
        root: Anchor directory for relative folders.

    Returns:
        str: Normalized absolute path.
    """
    p = os.path.expandvars(os.path.expanduser((output_folder or "").strip()))
    if not os.path.isabs(p):
        anchor = os.path.abspath(root) if root else os.getcwd()
        p = os.path.join(anchor, p)
    return os.path.normpath(p)


def join_segments(base: str, segments: Sequence[str]) -> str:
    """Join path segments under the base directory."""
    return os.path.join(base, *segments) if segments else base


# -----------------------------------------------------------------------------
# CREATION API
# -----------------------------------------------------------------------------

def ensure_directory(base: str, segments: Sequence[str] = ()) -> str:
    """
    Create the directory for the given segments if it does not exist.

    Args:
        base: Absolute output root.
        segments: Path segments below the root.

    Returns:
        str: The directory path, whether pre-existing or newly created.

    Raises:
        OSError: On failures other than "already exists" (permissions,
            a file occupying the path, disk errors).
    """
    folder = join_segments(base, segments)
    os.makedirs(folder, exist_ok=True)
    return folder


def ensure_file(path: str, content: str) -> bool:
    """
    Write content to a new file, never touching an existing one.

    Uses exclusive-create mode so two writers racing on the same path cannot
    overwrite each other. Content is encoded before the file is opened, and a
    partially written file is removed, so a failed write leaves nothing behind.

    Args:
        path: Target file path.
        content: Text written verbatim as UTF-8.

    Returns:
        bool: True if the file was created, False if it already existed.

    Raises:
        OSError: On failures other than "already exists".
        UnicodeEncodeError: If the content cannot be encoded as UTF-8.
    """
    data = content.encode("utf-8")
    try:
        f = open(path, "xb")
    except FileExistsError:
        return False

    try:
        with f:
            f.write(data)
    except OSError:
        os.remove(path)
        raise
    return True
