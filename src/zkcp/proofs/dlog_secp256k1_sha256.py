"""
Discrete Log + SHA-256 Proof

Proves that the discrete log of a secp256k1 public key is also the
preimage of a SHA-256 hash, without revealing either.
"""

from ..oracle import Oracle
from ..program import Program
from .dlog_secp256k1_generic import Secp256k1DlogProof


class Secp256k1DlogSha256Proof(Secp256k1DlogProof):
    """
    Journal appendix:
    - sha256(secret_key): 32 bytes
    """

    PROGRAM = Program.DLOG_SECP256K1_SHA256

    @classmethod
    def new(cls, secret_key: bytes, oracle: Oracle) -> 'Secp256k1DlogSha256Proof':
        return cls.prove_custom(secret_key, b'', oracle)

    def hash(self) -> bytes:
        """SHA-256 hash of the secret key."""
        return self.appendix()[:32]
