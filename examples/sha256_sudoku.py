#!/usr/bin/env python3
"""
Prove that the preimage of a SHA-256 hash decrypts a valid solution to a
published sudoku puzzle, then decrypt it.

Usage:
    python examples/sha256_sudoku.py
"""

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))
sys.path.insert(0, str(Path(__file__).parent))

from zkcp import LocalOracle, Sha256SudokuProof, Settings, configure_logging

from boards import SOLUTION, MASK, format_board


def main():
    settings = Settings.from_env()
    configure_logging(settings)
    oracle = LocalOracle.from_settings(settings)

    preimage = bytes([3] * 32)

    print("proving execution...")
    start = time.perf_counter()
    proof = Sha256SudokuProof.new(preimage, SOLUTION, MASK, oracle)
    print(f"proof generated in {time.perf_counter() - start:.2f} seconds")

    print("journal output:")
    print(f"  hash:               {proof.hash().hex()}")
    print(f"  encrypted solution: {proof.encrypted_solution().hex()}")

    print("verifying sha256-sudoku proof...")
    proof.verify(oracle)
    print("ok!")

    print(f"proof is valid; preimage of {proof.hash().hex()}")
    print("...is also the decryption key to a solution for the sudoku puzzle:")
    print(format_board(proof.puzzle()))
    print(f"proof is {len(proof.to_bytes())} bytes long")

    solution = proof.decrypt_solution(preimage)
    print("decrypted solution:")
    print(format_board(solution))


if __name__ == '__main__':
    main()
