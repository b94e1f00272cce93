"""
Discrete-Log Schnorr Proof Engine

A generic proof that a secp256k1 secret key exhibits custom properties
determined by an attested program.

Proving:
    r = H(program_id ‖ d ‖ aux ‖ "secp256k1_nonce") mod n
    P = d*G, R = r*G
    e = H(R ‖ P ‖ program_id) mod n
    journal = oracle.prove(d ‖ r ‖ e ‖ aux) = e ‖ s ‖ appendix

Verifying:
    e' = H(R ‖ P ‖ program_id), require journal e == e'
    require s*G == R + e*P
    require oracle.verify(program_id, attestation)

The challenge depends only on public values and the program identity, so
a prover cannot pick it after committing to R. Since s is computed inside
the attested program from the same d it encrypts or hashes, the Schnorr
equation ties the public key P to every other fact in the journal.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional, Type, TypeVar
import logging
import time

from .. import secp256k1
from ..errors import (
    ChallengeMismatch,
    DegenerateNonce,
    InputLengthMismatch,
    JournalLengthMismatch,
    MalformedProof,
    ProofInvalid,
    SignatureInvalid,
)
from ..oracle import Attestation, Oracle
from ..program import Program
from ..tags import DerivationTag
from ..transcript import HashTranscript

logger = logging.getLogger(__name__)

T = TypeVar('T', bound='Secp256k1DlogProof')

PREFIX_LEN = 64  # challenge (32) + signature (32)


def derive_secret_nonce(program: Program, secret_key: bytes, aux_input: bytes) -> int:
    """Deterministic Schnorr nonce, bound to the program and all private inputs."""
    digest = (
        HashTranscript('secret_nonce')
        .append('program_id', program.program_id, 32)
        .append('secret_key', secret_key, 32)
        .append('aux_input', aux_input, program.aux_input_len)
        .append_tag(DerivationTag.SECP256K1_NONCE)
        .digest()
    )
    nonce = secp256k1.reduce_scalar(digest)
    if nonce == 0:
        raise DegenerateNonce("derived secret nonce is zero")
    return nonce


def compute_challenge(program: Program, public_nonce: bytes, public_key: bytes) -> int:
    """Fiat-Shamir challenge e = H(R ‖ P ‖ program_id) mod n. May be zero."""
    digest = (
        HashTranscript('challenge')
        .append('public_nonce', public_nonce, secp256k1.POINT_SIZE)
        .append('public_key', public_key, secp256k1.POINT_SIZE)
        .append('program_id', program.program_id, 32)
        .digest()
    )
    return secp256k1.reduce_scalar(digest)


@dataclass(frozen=True)
class Secp256k1DlogProof:
    """
    Proof record: public key P, public nonce R (both compressed points) and
    the oracle attestation.

    Immutable once constructed. Application-specific proofs subclass this
    and set PROGRAM.
    """
    program: Program
    public_key: bytes
    public_nonce: bytes
    attestation: Attestation

    PROGRAM: ClassVar[Optional[Program]] = None

    @classmethod
    def prove_custom(
        cls: Type[T],
        secret_key: bytes,
        aux_input: bytes,
        oracle: Oracle,
        program: Optional[Program] = None,
    ) -> T:
        """
        Prove that secret_key exhibits the properties checked by program.

        This call blocks for as long as the oracle takes to prove.

        Raises:
            InputLengthMismatch: If aux_input has the wrong length
            JournalLengthMismatch: If the oracle returns a journal of the wrong size
        """
        program = cls._resolve_program(program)
        aux_input = bytes(aux_input)
        if len(aux_input) != program.aux_input_len:
            raise InputLengthMismatch(
                f"expected aux_input to prover of len {program.aux_input_len}; "
                f"got {len(aux_input)}"
            )

        secret_key = bytes(secret_key)
        d = secp256k1.parse_secret_key(secret_key)
        r = derive_secret_nonce(program, secret_key, aux_input)

        public_key = secp256k1.base_mul(d)
        public_nonce = secp256k1.base_mul(r)
        challenge = compute_challenge(program, public_nonce, public_key)

        private_inputs = b''.join([
            secret_key,
            secp256k1.scalar_to_bytes(r),
            secp256k1.scalar_to_bytes(challenge),
            aux_input,
        ])

        logger.info("proving %s", program.descriptor.name)
        start = time.perf_counter()
        attestation = oracle.prove(program.program_id, program.code, private_inputs)
        logger.info("proof generated in %.2f seconds", time.perf_counter() - start)

        proof = cls(
            program=program,
            public_key=public_key,
            public_nonce=public_nonce,
            attestation=attestation,
        )
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
        """The attested program's public output."""
        return self.attestation.journal

    def check_journal_length(self) -> None:
        """
        Journal:
        - Schnorr challenge: 32 bytes
        - Schnorr sig:       32 bytes
        - Appendix:          program.appendix_len bytes
        """
        expected = PREFIX_LEN + self.program.appendix_len
        if len(self.journal()) != expected:
            raise JournalLengthMismatch(
                f"journal is incorrect length {len(self.journal())}; expected {expected}"
            )

    def challenge(self) -> int:
        """Challenge scalar the signature was made with, parsed from the journal."""
        try:
            return secp256k1.parse_scalar(self.journal()[0:32])
        except ValueError as e:
            raise MalformedProof(f"journal challenge: {e}") from e

    def signature(self) -> int:
        """Schnorr signature scalar s, parsed from the journal."""
        try:
            return secp256k1.parse_scalar(self.journal()[32:64])
        except ValueError as e:
            raise MalformedProof(f"journal signature: {e}") from e

    def appendix(self) -> bytes:
        """Program-specific journal output after the signature."""
        return self.journal()[PREFIX_LEN:]

    def verify(self, oracle: Oracle) -> None:
        """
        Verify the Schnorr signature, then the attestation.

        Raises:
            ChallengeMismatch: If the journal challenge is not H(R ‖ P ‖ program_id)
            SignatureInvalid: If s*G != R + e*P
            AttestationInvalid: If the oracle rejects the attestation
        """
        challenge = compute_challenge(self.program, self.public_nonce, self.public_key)
        try:
            journal_challenge = self.challenge()
        except MalformedProof as e:
            raise ChallengeMismatch(str(e)) from e
        if challenge != journal_challenge:
            raise ChallengeMismatch("journal challenge does not match computed challenge")

        try:
            valid = secp256k1.verify_schnorr_equation(
                self.signature(), self.public_nonce, self.public_key, challenge
            )
        except ValueError as e:
            raise SignatureInvalid(f"cannot check schnorr signature: {e}") from e
        if not valid:
            raise SignatureInvalid("schnorr signature is invalid")

        oracle.verify(self.program.program_id, self.attestation)

    def is_valid(self, oracle: Oracle) -> bool:
        """verify() as a boolean. Errors other than rejection still propagate."""
        try:
            self.verify(oracle)
        except ProofInvalid as e:
            logger.debug("proof rejected: %s", e)
            return False
        return True

    def to_bytes(self) -> bytes:
        """public_key (33) ‖ public_nonce (33) ‖ attestation."""
        return self.public_key + self.public_nonce + self.attestation.serialize()

    @classmethod
    def from_bytes(cls: Type[T], data: bytes, program: Optional[Program] = None) -> T:
        """
        Parse a serialized proof, validating both points.

        Raises:
            MalformedProof: On bad point encodings or a malformed attestation
            JournalLengthMismatch: If the journal does not fit the program
        """
        program = cls._resolve_program(program)
        data = bytes(data)
        size = secp256k1.POINT_SIZE
        if len(data) < 2 * size:
            raise MalformedProof(f"proof too short: {len(data)} bytes")

        public_key = data[:size]
        public_nonce = data[size:2 * size]
        for label, point in (('public key', public_key), ('public nonce', public_nonce)):
            try:
                secp256k1.parse_point(point)
            except ValueError as e:
                raise MalformedProof(f"invalid {label}: {e}") from e

        proof = cls(
            program=program,
            public_key=public_key,
            public_nonce=public_nonce,
            attestation=Attestation.deserialize(data[2 * size:]),
        )
        proof.check_journal_length()
        return proof
