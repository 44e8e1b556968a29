from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path, PurePath
from typing import Union

from xmlcompare_web.domain.errors import ReadError
from xmlcompare_web.domain.models import FileInput


@dataclass
class FileRepository:
    """
    Repository pattern: encapsulates reading the two inputs of a comparison.
    Read-only; every OS-level failure surfaces as ReadError.
    """

    def load(self, path: Union[str, Path]) -> FileInput:
        raw = str(path or "").strip()
        if not raw:
            raise ReadError("No file path given.")

        name = PurePath(raw).name or raw

        try:
            p = Path(raw).expanduser()
            exists = p.exists()
            is_file = exists and p.is_file()
            content = p.read_bytes() if is_file else None
        except PermissionError as e:
            raise ReadError(f"Permission denied: {name}") from e
        except OSError as e:
            raise ReadError(f"Failed to read {name}: {e.strerror or e}") from e
        except (RuntimeError, ValueError) as e:
            # unknown ~user, embedded NUL
            raise ReadError(f"Failed to read {name}: {e}") from e

        if not exists:
            raise ReadError(f"No such file: {name}")
        if not is_file:
            raise ReadError(f"Not a regular file: {name}")

        return FileInput.from_bytes(str(p), content)

    def from_upload(self, filename: str, content: bytes) -> FileInput:
        name = (filename or "").strip()
        if not name:
            raise ReadError("Uploaded file has no name.")
        return FileInput.from_bytes(name, content)
