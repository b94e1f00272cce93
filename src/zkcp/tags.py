"""
Domain Tags

Suffix tags appended to deterministic derivations, and the tags used by
the local oracle's receipts. These tags are PINNED - changing them breaks
compatibility with every proof made before the change.
"""

from enum import Enum, IntEnum


class DerivationTag(Enum):
    """Trailing domain tags for host-side hash derivations."""

    SECP256K1_NONCE = b'secp256k1_nonce'  # Schnorr secret nonce
    CHACHA_NONCE = b'chacha_nonce'        # Contingent-encryption nonce


class ReceiptTag(IntEnum):
    """Domain separation tags for local oracle receipts."""

    JOURNAL = 0x64     # Journal digest
    SEAL = 0x70        # Keyed receipt over (program, journal, salt)


def tag_bytes(tag: ReceiptTag) -> bytes:
    """Convert tag to canonical bytes (2 bytes, big-endian)."""
    return tag.to_bytes(2, 'big')
