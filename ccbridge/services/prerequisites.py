"""Checks that must pass before the Claude CLI is invoked."""

import os
from pathlib import Path

from ccbridge.core.logging import get_logger


logger = get_logger(__name__)


def is_tool_installed(marker_path: Path) -> bool:
    """Check whether the Claude CLI is installed.

    Only the existence of ``marker_path`` is checked. There is no PATH lookup,
    so installs that are reachable only through a shell alias are reported
    as missing. Access errors count as not installed.
    """
    try:
        installed = Path(marker_path).exists()
    except OSError:
        # raised by Path.exists() under an untraversable directory
        installed = False
    logger.debug("tool_marker_checked", path=str(marker_path), installed=installed)
    return installed


def does_source_credentials_exist(credentials_path: Path) -> bool:
    """Check whether the Claude credentials file exists and is readable.

    Missing files and permission problems both count as "does not exist".
    """
    path = Path(credentials_path)
    if os.access(path, os.R_OK):
        return True

    try:
        reason = "permission_denied" if path.exists() else "not_found"
    except OSError:
        reason = "permission_denied"
    logger.debug("source_credentials_inaccessible", path=str(path), reason=reason)
    return False
