"""
Error Taxonomy

Every failure raised by this package derives from ZkcpError. Errors caused
by malformed caller input also derive from ValueError.

All errors are terminal for the operation that raised them; nothing in
this package retries.
"""


class ZkcpError(Exception):
    """Base class for all zkcp errors."""


class InputLengthMismatch(ZkcpError, ValueError):
    """Auxiliary input does not match the program's declared length."""


class JournalLengthMismatch(ZkcpError):
    """The oracle produced a journal of unexpected size (program/version mismatch)."""


class DegenerateNonce(ZkcpError):
    """A derived secret nonce reduced to zero modulo the curve order."""


class ProofInvalid(ZkcpError):
    """A proof was rejected during verification."""


class ChallengeMismatch(ProofInvalid):
    """The journal challenge does not match the recomputed Fiat-Shamir challenge."""


class SignatureInvalid(ProofInvalid):
    """The Schnorr equation s*G == R + e*P does not hold."""


class AttestationInvalid(ProofInvalid):
    """The oracle rejected the attestation for the given program."""


class DecompressionMalleable(ZkcpError, ValueError):
    """Compact sudoku board representation is non-standard."""

    def __init__(self, message: str = "compact sudoku board representation is non-standard"):
        super().__init__(message)


class InvalidMask(ZkcpError, ValueError):
    """A puzzle mask contains a byte other than 0 or 1."""


class SecretMismatch(ZkcpError, ValueError):
    """The supplied secret does not match the relation committed in the journal."""


class InvalidSolutionOrWrongPuzzle(ZkcpError):
    """
    A decrypted solution failed its post-decryption checks.

    This cannot happen for a proof that passed verify(); seeing it means
    the caller decrypted without verifying first.
    """


class GuestAbort(ZkcpError):
    """The attested computation aborted; no journal was produced."""


class OracleError(ZkcpError):
    """The oracle could not execute the requested program."""


class MalformedProof(ZkcpError, ValueError):
    """Serialized proof material could not be parsed."""
