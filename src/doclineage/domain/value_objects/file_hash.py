"""File content hash for integrity verification."""

import re
from dataclasses import dataclass

from doclineage.domain.exceptions import ValidationError

_SHA256_HEX = re.compile(r"[0-9a-f]{64}")


@dataclass(frozen=True)
class FileHash:
    """SHA-256 digest of the stored file (lowercase hex)."""

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().lower()
        if not _SHA256_HEX.fullmatch(normalized):
            raise ValidationError("File hash must be a 64-character SHA-256 hex digest")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
