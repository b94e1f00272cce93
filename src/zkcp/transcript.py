"""
Ordered-Field Hash Transcript

Deterministic nonces, challenges and cipher nonces are SHA-256 digests of
raw byte concatenations. The field order and widths are part of the
protocol: reordering or resizing a field is a protocol break.

HashTranscript makes each derivation explicit:

    digest = (HashTranscript('challenge')
              .append('public_nonce', nonce_bytes, 33)
              .append('public_key', key_bytes, 33)
              .append('program_id', program_id, 32)
              .digest())

Labels are only used for error messages and the field listing; they are
never hashed.
"""

import hashlib
from typing import List, Optional, Tuple

from .tags import DerivationTag


class HashTranscript:
    """SHA-256 over an ordered sequence of fixed-width fields."""

    def __init__(self, name: str):
        self.name = name
        self._hasher = hashlib.sha256()
        self._fields: List[Tuple[str, int]] = []

    def append(self, label: str, data: bytes, width: Optional[int] = None) -> 'HashTranscript':
        """
        Absorb one field.

        Args:
            label: Field name (for diagnostics)
            data: Field bytes
            width: Required length of data, if the field is fixed-width

        Raises:
            ValueError: If data does not have the required width
        """
        data = bytes(data)
        if width is not None and len(data) != width:
            raise ValueError(
                f"{self.name}: field '{label}' must be {width} bytes, got {len(data)}"
            )
        self._hasher.update(data)
        self._fields.append((label, len(data)))
        return self

    def append_tag(self, tag: DerivationTag) -> 'HashTranscript':
        """Absorb a trailing domain tag."""
        return self.append(tag.name.lower(), tag.value, len(tag.value))

    @property
    def fields(self) -> List[Tuple[str, int]]:
        """(label, length) of every absorbed field, in order."""
        return list(self._fields)

    def digest(self) -> bytes:
        """32-byte SHA-256 digest of everything absorbed so far."""
        return self._hasher.copy().digest()
