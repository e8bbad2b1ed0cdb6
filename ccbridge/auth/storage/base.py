"""Base class for JSON file credential storage."""

import json
from pathlib import Path
from typing import Any

from ccbridge.auth.exceptions import (
    CredentialsInvalidError,
    CredentialsNotFoundError,
    CredentialsStorageError,
)
from ccbridge.core.logging import get_logger


logger = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"Invalid JSON constant: {name}")


class BaseJsonStorage:
    """Common JSON read/write operations with error handling.

    Helpers raise :class:`CredentialsError` subclasses; subclasses convert
    them into the ``None``/``False`` results their callers expect.
    """

    def __init__(self, file_path: Path):
        """Initialize JSON storage.

        Args:
            file_path: Path to JSON file for storage
        """
        self.file_path = Path(file_path)

    def _read_json(self) -> Any:
        """Read and parse JSON data from the file.

        Returns:
            Parsed JSON value

        Raises:
            CredentialsNotFoundError: If the file does not exist
            CredentialsInvalidError: If the content is not valid UTF-8 JSON
            CredentialsStorageError: If the file cannot be read
        """
        try:
            text = self.file_path.read_text(encoding="utf-8")
            # NaN and Infinity are not JSON
            return json.loads(text, parse_constant=_reject_constant)

        except json.JSONDecodeError as e:
            logger.debug(
                "json_decode_error",
                path=str(self.file_path),
                error=str(e),
                line=e.lineno,
            )
            raise CredentialsInvalidError(
                f"Invalid JSON in {self.file_path}: {e}"
            ) from e

        except UnicodeDecodeError as e:
            logger.debug(
                "unicode_decode_error", path=str(self.file_path), error=str(e)
            )
            raise CredentialsInvalidError(
                f"Invalid file encoding in {self.file_path}: {e}"
            ) from e

        except ValueError as e:
            logger.debug("json_constant_error", path=str(self.file_path), error=str(e))
            raise CredentialsInvalidError(
                f"Invalid JSON in {self.file_path}: {e}"
            ) from e

        except FileNotFoundError as e:
            logger.debug("file_not_found", path=str(self.file_path))
            raise CredentialsNotFoundError(
                f"Credentials file not found: {self.file_path}"
            ) from e

        except PermissionError as e:
            logger.debug("permission_denied", path=str(self.file_path), error=str(e))
            raise CredentialsStorageError(f"Permission denied: {self.file_path}") from e

        except OSError as e:
            logger.debug("file_read_error", path=str(self.file_path), error=str(e))
            raise CredentialsStorageError(f"Error reading {self.file_path}: {e}") from e

    def _write_json(self, data: dict[str, Any]) -> None:
        """Serialize ``data`` and write it to the file in a single call.

        There is no temp-file-then-rename step, so an interrupted write can
        leave a truncated file behind.

        Args:
            data: Data to write as JSON

        Raises:
            CredentialsStorageError: If the data cannot be encoded or written
        """
        try:
            text = json.dumps(data, indent=2, allow_nan=False)
        except (TypeError, ValueError) as e:
            raise CredentialsStorageError(str(e)) from e

        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.file_path.write_text(text, encoding="utf-8")
        except (OSError, UnicodeEncodeError) as e:
            raise CredentialsStorageError(str(e)) from e

        logger.debug("json_write_success", path=str(self.file_path), size=len(text))

    def get_location(self) -> str:
        """Get the storage location description.

        Returns:
            Path to the JSON file
        """
        return str(self.file_path)
