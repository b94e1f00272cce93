"""
Preimage Proof Engine

A generic proof that a SHA-256 preimage exhibits custom properties
determined by an attested program. The hash relation is computed inside
the attested program, so verification is entirely the oracle's.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Type, TypeVar
import logging
import time

from ..errors import InputLengthMismatch, JournalLengthMismatch, ProofInvalid
from ..oracle import Attestation, Oracle
from ..program import Program

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='Sha256Proof')

PREIMAGE_SIZE = 32
HASH_SIZE = 32


@dataclass(frozen=True)
class Sha256Proof:
    """Proof record: the oracle attestation for program."""
    program: Program
    attestation: Attestation

    PROGRAM: ClassVar[Optional[Program]] = None

    @classmethod
    def prove_custom(
        cls: Type[T],
        preimage: bytes,
        aux_input: bytes,
        oracle: Oracle,
        program: Optional[Program] = None,
    ) -> T:
        """
        Prove that preimage exhibits the properties checked by program.

        Raises:
            InputLengthMismatch: If preimage or aux_input has the wrong length
            JournalLengthMismatch: If the oracle returns a journal of the wrong size
        """
        program = cls._resolve_program(program)
        preimage = bytes(preimage)
        aux_input = bytes(aux_input)
        if len(preimage) != PREIMAGE_SIZE:
            raise InputLengthMismatch(f"expected preimage of len {PREIMAGE_SIZE}; got {len(preimage)}")
        if len(aux_input) != program.aux_input_len:
            raise InputLengthMismatch(
                f"expected aux_input to prover of len {program.aux_input_len}; "
                f"got {len(aux_input)}"
            )

        logger.info("proving %s", program.descriptor.name)
        start = time.perf_counter()
        attestation = oracle.prove(program.program_id, program.code, preimage + aux_input)
        logger.info("proof generated in %.2f seconds", time.perf_counter() - start)

        proof = cls(program=program, attestation=attestation)
        proof.check_journal_length()
        return proof

    @classmethod
    def _resolve_program(cls, program: Optional[Program]) -> Program:
        if program is None:
            program = cls.PROGRAM
        if program is None:
            raise TypeError(f"{cls.__name__} requires an explicit program")
        if cls.PROGRAM is not None and program is not cls.PROGRAM:
            raise TypeError(f"{cls.__name__} only supports {cls.PROGRAM.name}")
        return program

    def journal(self) -> bytes:
        return self.attestation.journal

    def check_journal_length(self) -> None:
        """
        Journal:
        - hash:     32 bytes
        - Appendix: program.appendix_len bytes
        """
        expected = HASH_SIZE + self.program.appendix_len
        if len(self.journal()) != expected:
            raise JournalLengthMismatch(
                f"journal is incorrect length {len(self.journal())}; expected {expected}"
            )

    def hash(self) -> bytes:
        """The SHA-256 hash whose preimage this proof is about."""
        return self.journal()[:HASH_SIZE]

    def appendix(self) -> bytes:
        return self.journal()[HASH_SIZE:]

    def verify(self, oracle: Oracle) -> None:
        """
        Verify the attestation.

        Raises:
            AttestationInvalid: If the oracle rejects the attestation
        """
        oracle.verify(self.program.program_id, self.attestation)

    def is_valid(self, oracle: Oracle) -> bool:
        try:
            self.verify(oracle)
        except ProofInvalid as e:
            logger.debug("proof rejected: %s", e)
            return False
        return True

    def to_bytes(self) -> bytes:
        return self.attestation.serialize()

    @classmethod
    def from_bytes(cls: Type[T], data: bytes, program: Optional[Program] = None) -> T:
        program = cls._resolve_program(program)
        proof = cls(program=program, attestation=Attestation.deserialize(data))
        proof.check_journal_length()
        return proof
