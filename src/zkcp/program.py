"""
Program Descriptors

Each protocol variant is one member of the Program enum. A member carries
the guest that the oracle runs, its content-addressed identifier, and the
byte lengths the host side checks before and after proving.
"""

from dataclasses import dataclass
from enum import Enum

from .guest import (
    GuestProgram,
    DlogSecp256k1Sha256Guest,
    DlogSecp256k1SudokuGuest,
    Sha256SudokuGuest,
)


@dataclass(frozen=True)
class ProgramDescriptor:
    """
    Constant data for one protocol variant.

    - aux_input_len: private input bytes after the fixed prefix
      (secret key, nonce, challenge for discrete-log programs; preimage
      for preimage programs)
    - appendix_len: journal bytes after the fixed prefix
      (challenge and signature, or the hash)
    """
    name: str
    guest: GuestProgram
    aux_input_len: int
    appendix_len: int

    @property
    def code(self) -> bytes:
        return self.guest.serialize()

    @property
    def program_id(self) -> bytes:
        return self.guest.hash()


class Program(Enum):
    """The closed set of attested programs."""

    DLOG_SECP256K1_SHA256 = ProgramDescriptor(
        name='dlog_secp256k1_sha256',
        guest=DlogSecp256k1Sha256Guest(),
        aux_input_len=0,
        appendix_len=32,  # sha256 hash of secret key
    )

    DLOG_SECP256K1_SUDOKU = ProgramDescriptor(
        name='dlog_secp256k1_sudoku',
        guest=DlogSecp256k1SudokuGuest(),
        aux_input_len=12 + 81 + 81,  # chacha nonce, mask, solution
        appendix_len=12 + 81 + 36,   # chacha nonce, puzzle, encrypted compact solution
    )

    SHA256_SUDOKU = ProgramDescriptor(
        name='sha256_sudoku',
        guest=Sha256SudokuGuest(),
        aux_input_len=12 + 81 + 81,
        appendix_len=12 + 81 + 36,
    )

    @property
    def descriptor(self) -> ProgramDescriptor:
        return self.value

    @property
    def program_id(self) -> bytes:
        return self.value.program_id

    @property
    def code(self) -> bytes:
        return self.value.code

    @property
    def guest(self) -> GuestProgram:
        return self.value.guest

    @property
    def aux_input_len(self) -> int:
        return self.value.aux_input_len

    @property
    def appendix_len(self) -> int:
        return self.value.appendix_len

    @classmethod
    def from_id(cls, program_id: bytes) -> 'Program':
        """Look up a program by identifier."""
        for program in cls:
            if program.program_id == program_id:
                return program
        raise KeyError(f"unknown program id {bytes(program_id).hex()}")
