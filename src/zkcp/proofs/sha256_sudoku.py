"""
SHA-256 Preimage + Sudoku Contingent Payment Proof

Proves that the preimage of a SHA-256 hash is the ChaCha20 key that
decrypts a valid solution to a published sudoku puzzle. A hash-locked
payment that reveals the preimage therefore also reveals the solution.
"""

import hashlib
import hmac

from ..errors import SecretMismatch
from ..oracle import Oracle
from ..program import Program
from . import contingent
from .sha256_generic import Sha256Proof


class Sha256SudokuProof(Sha256Proof):
    """
    Journal:
    - hash:                       32 bytes
    - chacha nonce:               12 bytes
    - puzzle:                     81 bytes
    - encrypted compact solution: 36 bytes
    """

    PROGRAM = Program.SHA256_SUDOKU

    @classmethod
    def new(
        cls,
        preimage: bytes,
        solution: bytes,
        puzzle_mask: bytes,
        oracle: Oracle,
    ) -> 'Sha256SudokuProof':
        aux_input = contingent.build_aux_input(cls.PROGRAM, preimage, solution, puzzle_mask)
        return cls.prove_custom(preimage, aux_input, oracle)

    def cipher_nonce(self) -> bytes:
        return contingent.split_appendix(self.appendix())[0]

    def puzzle(self) -> bytes:
        return contingent.split_appendix(self.appendix())[1]

    def encrypted_solution(self) -> bytes:
        return contingent.split_appendix(self.appendix())[2]

    def decrypt_solution(self, preimage: bytes) -> bytes:
        """
        Recover the solution with the preimage of hash().

        Raises:
            SecretMismatch: If sha256(preimage) != hash()
            DecompressionMalleable: If the plaintext is non-canonical
            InvalidSolutionOrWrongPuzzle: If the proof was never verified and is bad
        """
        preimage = bytes(preimage)
        if not hmac.compare_digest(hashlib.sha256(preimage).digest(), self.hash()):
            raise SecretMismatch("preimage does not match hash in proof journal")
        return contingent.decrypt_solution(preimage, self.appendix())
