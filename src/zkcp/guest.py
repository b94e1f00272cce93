"""
Attested Computation Contract

The fixed programs the oracle executes. Prover and verifier both depend on
these reading their private inputs and committing their journal in exactly
the order declared here; any reordering breaks soundness.

Defines:
- GuestEnv: private-input reader and journal writer
- GuestProgram: a program with a canonical, content-addressable encoding
- The three protocol programs
- execute(): run a program to completion and return its journal
"""

from abc import ABC, abstractmethod
from typing import Tuple
import hashlib

from . import sudoku
from .cipher import chacha20_apply
from .errors import GuestAbort, InvalidMask
from .secp256k1 import schnorr_signature

Layout = Tuple[Tuple[str, int], ...]


class GuestEnv:
    """I/O available to a guest: sequential private reads, append-only journal."""

    def __init__(self, private_inputs: bytes):
        self._input = bytes(private_inputs)
        self._offset = 0
        self._journal = bytearray()

    def read_slice(self, n: int) -> bytes:
        """Consume exactly n bytes of private input."""
        if self._offset + n > len(self._input):
            raise GuestAbort(
                f"read of {n} bytes past end of private input "
                f"({len(self._input) - self._offset} remaining)"
            )
        data = self._input[self._offset:self._offset + n]
        self._offset += n
        return data

    def commit_slice(self, data: bytes) -> None:
        """Append public output to the journal."""
        self._journal += data

    @property
    def remaining(self) -> int:
        return len(self._input) - self._offset

    @property
    def journal(self) -> bytes:
        return bytes(self._journal)


def guest_assert(condition: bool, message: str) -> None:
    """Abort the attested computation unless condition holds."""
    if not condition:
        raise GuestAbort(message)


class GuestProgram(ABC):
    """
    A program the oracle can attest to.

    INPUTS and OUTPUTS list (field, width) in read/commit order. They are
    part of serialize(), so the program identifier changes whenever the
    contract does.
    """

    MAGIC = b'ZKCPGST'

    name: str = ''
    version: int = 1
    INPUTS: Layout = ()
    OUTPUTS: Layout = ()

    def serialize(self) -> bytes:
        """Canonical code bytes."""
        parts = [
            self.MAGIC,
            self.version.to_bytes(2, 'big'),
            len(self.name).to_bytes(2, 'big'),
            self.name.encode('ascii'),
        ]
        for layout in (self.INPUTS, self.OUTPUTS):
            parts.append(len(layout).to_bytes(2, 'big'))
            for field_name, width in layout:
                parts.append(len(field_name).to_bytes(2, 'big'))
                parts.append(field_name.encode('ascii'))
                parts.append(width.to_bytes(4, 'big'))
        return b''.join(parts)

    def hash(self) -> bytes:
        """Content address of this program."""
        return hashlib.sha256(self.serialize()).digest()

    @property
    def input_len(self) -> int:
        return sum(width for _, width in self.INPUTS)

    @property
    def output_len(self) -> int:
        return sum(width for _, width in self.OUTPUTS)

    @abstractmethod
    def run(self, env: GuestEnv) -> None:
        """Read private inputs from env and commit the journal."""
        pass


def _commit_encrypted_solution(env: GuestEnv, key: bytes) -> None:
    # Shared tail of both sudoku programs: nonce, mask, solution in; nonce, puzzle, ciphertext out.
    chacha_nonce = env.read_slice(12)
    puzzle_mask = env.read_slice(81)
    solution = env.read_slice(81)

    guest_assert(sudoku.is_valid_sudoku_solution(solution), "invalid sudoku solution")
    try:
        puzzle = sudoku.mask_sudoku_solution(solution, puzzle_mask)
    except InvalidMask as e:
        raise GuestAbort(str(e)) from e

    encrypted = chacha20_apply(key, chacha_nonce, sudoku.compress_board(solution))

    env.commit_slice(chacha_nonce)
    env.commit_slice(puzzle)
    env.commit_slice(encrypted)


class DlogSecp256k1Sha256Guest(GuestProgram):
    """Schnorr signature by the secret key, plus SHA-256 of the secret key."""

    name = 'dlog_secp256k1_sha256'
    INPUTS = (('secret_key', 32), ('secret_nonce', 32), ('challenge', 32))
    OUTPUTS = (('challenge', 32), ('signature', 32), ('secret_key_hash', 32))

    def run(self, env: GuestEnv) -> None:
        secret_key = env.read_slice(32)
        secret_nonce = env.read_slice(32)
        challenge = env.read_slice(32)

        sig = schnorr_signature(secret_key, secret_nonce, challenge)

        env.commit_slice(challenge)
        env.commit_slice(sig)
        env.commit_slice(hashlib.sha256(secret_key).digest())


class DlogSecp256k1SudokuGuest(GuestProgram):
    """Schnorr signature by the secret key, which also encrypts a valid sudoku solution."""

    name = 'dlog_secp256k1_sudoku'
    INPUTS = (
        ('secret_key', 32), ('secret_nonce', 32), ('challenge', 32),
        ('chacha_nonce', 12), ('puzzle_mask', 81), ('solution', 81),
    )
    OUTPUTS = (
        ('challenge', 32), ('signature', 32),
        ('chacha_nonce', 12), ('puzzle', 81), ('encrypted_solution', 36),
    )

    def run(self, env: GuestEnv) -> None:
        secret_key = env.read_slice(32)
        secret_nonce = env.read_slice(32)
        challenge = env.read_slice(32)

        sig = schnorr_signature(secret_key, secret_nonce, challenge)

        env.commit_slice(challenge)
        env.commit_slice(sig)
        _commit_encrypted_solution(env, secret_key)


class Sha256SudokuGuest(GuestProgram):
    """SHA-256 of a preimage, which also encrypts a valid sudoku solution."""

    name = 'sha256_sudoku'
    INPUTS = (
        ('preimage', 32),
        ('chacha_nonce', 12), ('puzzle_mask', 81), ('solution', 81),
    )
    OUTPUTS = (
        ('hash', 32),
        ('chacha_nonce', 12), ('puzzle', 81), ('encrypted_solution', 36),
    )

    def run(self, env: GuestEnv) -> None:
        preimage = env.read_slice(32)

        env.commit_slice(hashlib.sha256(preimage).digest())
        _commit_encrypted_solution(env, preimage)


def execute(guest: GuestProgram, private_inputs: bytes) -> bytes:
    """
    Run a guest over its private inputs.

    Returns:
        The journal

    Raises:
        GuestAbort: If the guest aborts, or leaves private input unread
    """
    env = GuestEnv(private_inputs)
    guest.run(env)
    if env.remaining:
        raise GuestAbort(f"{env.remaining} bytes of private input left unread")
    return env.journal
