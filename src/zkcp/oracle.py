"""
Computational-Integrity Oracle

The oracle runs an attested program over private inputs and returns the
program's journal together with a seal that certifies the journal came
from a correct execution of that program. The protocol layer never looks
inside a seal.

Oracle is the interface a real zkVM adapter implements. LocalOracle is an
in-process implementation: it runs the guest directly and seals the
journal with a keyed receipt,

    seal = salt ‖ H("SEAL" ‖ key ‖ program_id ‖ H("JOURNAL" ‖ journal) ‖ salt)

so anyone holding the same key can verify. It is not zero-knowledge
against the key holder and is meant for tests, examples and trusted
deployments.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional, Tuple
import hashlib
import hmac
import logging
import secrets
import struct
import time

from .config import ORACLE_KEY_SIZE, Settings
from .errors import AttestationInvalid, MalformedProof, OracleError
from .guest import execute
from .program import Program
from .tags import ReceiptTag, tag_bytes

logger = logging.getLogger(__name__)

RECEIPT_SIZE = 32

_LEN = struct.Struct('>I')


def _hash(tag: ReceiptTag, *parts: bytes) -> bytes:
    """Domain-separated hash."""
    h = hashlib.shake_256()
    h.update(tag_bytes(tag))
    for part in parts:
        h.update(len(part).to_bytes(8, 'big'))
        h.update(part)
    return h.digest(32)


def _read_prefixed(data: bytes, offset: int, what: str) -> Tuple[bytes, int]:
    if offset + _LEN.size > len(data):
        raise MalformedProof(f"Truncated {what} length")
    (length,) = _LEN.unpack_from(data, offset)
    offset += _LEN.size
    if offset + length > len(data):
        raise MalformedProof(f"Truncated {what}")
    return data[offset:offset + length], offset + length


@dataclass(frozen=True)
class Attestation:
    """
    A journal and the seal certifying it.

    The journal is deterministic for deterministic inputs; the seal need
    not be.
    """
    journal: bytes
    seal: bytes

    def serialize(self) -> bytes:
        """Length-prefixed journal, then length-prefixed seal."""
        return b''.join([
            _LEN.pack(len(self.journal)),
            self.journal,
            _LEN.pack(len(self.seal)),
            self.seal,
        ])

    @classmethod
    def deserialize(cls, data: bytes) -> 'Attestation':
        """Parse an attestation, rejecting truncated input and trailing bytes."""
        data = bytes(data)
        journal, offset = _read_prefixed(data, 0, 'journal')
        seal, offset = _read_prefixed(data, offset, 'seal')
        if offset != len(data):
            raise MalformedProof(f"Trailing bytes after attestation: {len(data) - offset}")
        return cls(journal=journal, seal=seal)


class Oracle(ABC):
    """Proves and verifies correct execution of attested programs."""

    @abstractmethod
    def prove(self, program_id: bytes, code: bytes, private_inputs: bytes) -> Attestation:
        """
        Execute code over private_inputs and attest to the journal.

        Blocks until the proof is complete.
        """
        pass

    @abstractmethod
    def verify(self, program_id: bytes, attestation: Attestation) -> None:
        """
        Accept iff the seal proves program_id produced attestation.journal.

        Raises:
            AttestationInvalid: If the attestation is rejected
        """
        pass


class LocalOracle(Oracle):
    """
    In-process oracle: runs the guest itself and seals with a keyed receipt.
    """

    def __init__(self, key: Optional[bytes] = None, salt_len: int = 16):
        if key is None:
            key = secrets.token_bytes(ORACLE_KEY_SIZE)
        if len(key) != ORACLE_KEY_SIZE:
            raise ValueError(f"Oracle key must be {ORACLE_KEY_SIZE} bytes, got {len(key)}")
        self._key = bytes(key)
        self.salt_len = salt_len

    @classmethod
    def from_settings(cls, settings: Settings) -> 'LocalOracle':
        return cls(key=settings.oracle_key, salt_len=settings.seal_salt_len)

    def _receipt(self, program_id: bytes, journal: bytes, salt: bytes) -> bytes:
        return _hash(
            ReceiptTag.SEAL,
            self._key,
            program_id,
            _hash(ReceiptTag.JOURNAL, journal),
            salt,
        )

    def prove(self, program_id: bytes, code: bytes, private_inputs: bytes) -> Attestation:
        if hashlib.sha256(code).digest() != program_id:
            raise OracleError("Program mismatch: code does not hash to program id")
        try:
            program = Program.from_id(program_id)
        except KeyError as e:
            raise OracleError(str(e)) from e

        start = time.perf_counter()
        journal = execute(program.guest, private_inputs)
        logger.debug(
            "executed %s in %.3fs, journal %d bytes",
            program.descriptor.name, time.perf_counter() - start, len(journal),
        )

        salt = secrets.token_bytes(self.salt_len)
        seal = salt + self._receipt(program_id, journal, salt)
        return Attestation(journal=journal, seal=seal)

    def verify(self, program_id: bytes, attestation: Attestation) -> None:
        if len(attestation.seal) != self.salt_len + RECEIPT_SIZE:
            raise AttestationInvalid(
                f"Seal length mismatch: expected {self.salt_len + RECEIPT_SIZE}, "
                f"got {len(attestation.seal)}"
            )
        salt = attestation.seal[:self.salt_len]
        receipt = attestation.seal[self.salt_len:]
        expected = self._receipt(program_id, attestation.journal, salt)
        if not hmac.compare_digest(receipt, expected):
            raise AttestationInvalid("Receipt does not match program and journal")
