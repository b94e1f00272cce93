"""
secp256k1 Scalars and Points

Thin layer over coincurve. Scalars are Python ints in [0, n) and travel as
32-byte big-endian strings. Points travel as 33-byte compressed SEC1
encodings and are parsed (and therefore validated) on use.
"""

from coincurve import PrivateKey, PublicKey

CURVE_ORDER = int(
    'FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141', 16
)

SCALAR_SIZE = 32
POINT_SIZE = 33


def scalar_to_bytes(k: int) -> bytes:
    """Serialize a scalar as 32 bytes, big-endian."""
    return k.to_bytes(SCALAR_SIZE, 'big')


def reduce_scalar(data: bytes) -> int:
    """Interpret 32 bytes as a big-endian integer and reduce it mod n."""
    if len(data) != SCALAR_SIZE:
        raise ValueError(f"scalar must be {SCALAR_SIZE} bytes, got {len(data)}")
    return int.from_bytes(data, 'big') % CURVE_ORDER


def parse_scalar(data: bytes) -> int:
    """
    Parse a canonical 32-byte scalar, which may be zero.

    Raises:
        ValueError: If the value is not below the curve order
    """
    if len(data) != SCALAR_SIZE:
        raise ValueError(f"scalar must be {SCALAR_SIZE} bytes, got {len(data)}")
    k = int.from_bytes(data, 'big')
    if k >= CURVE_ORDER:
        raise ValueError("scalar is not reduced modulo the curve order")
    return k


def parse_secret_key(secret_key: bytes) -> int:
    """
    Validate a 32-byte secret key: a nonzero scalar below n.

    Raises:
        ValueError: If the key is the wrong length, zero, or out of range
    """
    k = parse_scalar(bytes(secret_key))
    if k == 0:
        raise ValueError("secret key must be nonzero")
    return k


def base_mul(k: int) -> bytes:
    """k*G as a compressed point. k must be nonzero."""
    return PrivateKey(scalar_to_bytes(k)).public_key.format(compressed=True)


def parse_point(data: bytes) -> PublicKey:
    """
    Parse a compressed point.

    Raises:
        ValueError: If data is not 33 bytes or not a point on the curve
    """
    data = bytes(data)
    if len(data) != POINT_SIZE:
        raise ValueError(f"point must be {POINT_SIZE} bytes, got {len(data)}")
    return PublicKey(data)


def schnorr_signature(secret_key: bytes, secret_nonce: bytes, challenge: bytes) -> bytes:
    """
    s = r + e*d (mod n), returned as 32 bytes.

    All inputs are 32-byte big-endian scalars. This is the arithmetic the
    attested programs run; it does not touch any curve points.
    """
    d = int.from_bytes(secret_key, 'big')
    r = int.from_bytes(secret_nonce, 'big')
    e = int.from_bytes(challenge, 'big')
    return scalar_to_bytes((r + e * d) % CURVE_ORDER)


def verify_schnorr_equation(s: int, public_nonce: bytes, public_key: bytes, challenge: int) -> bool:
    """Check s*G == R + e*P for compressed points R and P."""
    nonce_point = parse_point(public_nonce)
    key_point = parse_point(public_key)

    try:
        if challenge == 0:
            rhs = nonce_point
        else:
            rhs = PublicKey.combine_keys([
                nonce_point,
                key_point.multiply(scalar_to_bytes(challenge)),
            ])
    except ValueError:
        # R + e*P is the point at infinity
        return s == 0

    if s == 0:
        return False
    return base_mul(s) == rhs.format(compressed=True)
