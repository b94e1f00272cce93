"""
Discrete Log + Sudoku Contingent Payment Proof

Proves that the discrete log of a secp256k1 public key is the ChaCha20
key that decrypts a valid solution to a published sudoku puzzle. Learning
the secret key (for example, from an adaptor signature completing a
payment) is exactly what it takes to read the solution.
"""

from .. import secp256k1
from ..errors import SecretMismatch
from ..oracle import Oracle
from ..program import Program
from . import contingent
from .dlog_secp256k1_generic import Secp256k1DlogProof


class Secp256k1DlogSudokuProof(Secp256k1DlogProof):
    """
    Journal appendix:
    - chacha nonce:               12 bytes
    - puzzle:                     81 bytes
    - encrypted compact solution: 36 bytes
    """

    PROGRAM = Program.DLOG_SECP256K1_SUDOKU

    @classmethod
    def new(
        cls,
        secret_key: bytes,
        solution: bytes,
        puzzle_mask: bytes,
        oracle: Oracle,
    ) -> 'Secp256k1DlogSudokuProof':
        aux_input = contingent.build_aux_input(cls.PROGRAM, secret_key, solution, puzzle_mask)
        return cls.prove_custom(secret_key, aux_input, oracle)

    def cipher_nonce(self) -> bytes:
        return contingent.split_appendix(self.appendix())[0]

    def puzzle(self) -> bytes:
        return contingent.split_appendix(self.appendix())[1]

    def encrypted_solution(self) -> bytes:
        return contingent.split_appendix(self.appendix())[2]

    def decrypt_solution(self, secret_key: bytes) -> bytes:
        """
        Recover the solution with the discrete log of public_key.

        Raises:
            SecretMismatch: If secret_key*G != public_key
            DecompressionMalleable: If the plaintext is non-canonical
            InvalidSolutionOrWrongPuzzle: If the proof was never verified and is bad
        """
        secret_key = bytes(secret_key)
        try:
            d = secp256k1.parse_secret_key(secret_key)
        except ValueError as e:
            raise SecretMismatch(f"secret key is not a valid scalar: {e}") from e
        if secp256k1.base_mul(d) != self.public_key:
            raise SecretMismatch("secret key does not match public key in proof")
        return contingent.decrypt_solution(secret_key, self.appendix())
