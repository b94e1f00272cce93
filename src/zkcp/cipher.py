"""
ChaCha20 Keystream

The contingent encryption uses IETF ChaCha20 (32-byte key, 12-byte nonce,
block counter starting at 0) with no authentication tag. Integrity of the
ciphertext comes from the surrounding proof.
"""

from cryptography.hazmat.primitives.ciphers import Cipher, algorithms

KEY_SIZE = 32
NONCE_SIZE = 12

# cryptography takes a 16-byte IV: little-endian 32-bit block counter, then the nonce
_INITIAL_COUNTER = (0).to_bytes(4, 'little')


def chacha20_apply(key: bytes, nonce: bytes, data: bytes) -> bytes:
    """XOR data with the ChaCha20 keystream. Encryption and decryption are the same call."""
    if len(key) != KEY_SIZE:
        raise ValueError(f"ChaCha20 key must be {KEY_SIZE} bytes, got {len(key)}")
    if len(nonce) != NONCE_SIZE:
        raise ValueError(f"ChaCha20 nonce must be {NONCE_SIZE} bytes, got {len(nonce)}")

    algorithm = algorithms.ChaCha20(bytes(key), _INITIAL_COUNTER + bytes(nonce))
    encryptor = Cipher(algorithm, mode=None).encryptor()
    return encryptor.update(bytes(data)) + encryptor.finalize()
