#!/usr/bin/env python3
"""
Prove that the discrete log of a secp256k1 public key is also the
preimage of a SHA-256 hash.

Usage:
    python examples/dlog_secp256k1_sha256.py
"""

import sys
import time
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from zkcp import LocalOracle, Secp256k1DlogSha256Proof, Settings, configure_logging
from zkcp.secp256k1 import reduce_scalar, scalar_to_bytes


def main():
    settings = Settings.from_env()
    configure_logging(settings)
    oracle = LocalOracle.from_settings(settings)

    secret_key = scalar_to_bytes(reduce_scalar(bytes([3] * 32)))

    print("proving execution...")
    start = time.perf_counter()
    proof = Secp256k1DlogSha256Proof.new(secret_key, oracle)
    print(f"proof generated in {time.perf_counter() - start:.2f} seconds")

    print("journal output:")
    print(f"  hash:      {proof.hash().hex()}")
    print(f"  challenge: {proof.challenge():064x}")
    print(f"  signature: {proof.signature():064x}")

    print("verifying dlog-secp256k1-sha256 proof...")
    proof.verify(oracle)
    print("ok!")

    print(f"proof is valid; discrete log of {proof.public_key.hex()}")
    print(f"...is also the preimage of {proof.hash().hex()}")
    print(f"proof is {len(proof.to_bytes())} bytes long")


if __name__ == '__main__':
    main()
