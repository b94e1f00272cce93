"""
Tests for the primitives the attested programs rely on:

- secp256k1 scalar handling and the Schnorr equation
- ChaCha20 keystream
- Ordered-field transcript
"""

import hashlib

import pytest

from zkcp import secp256k1
from zkcp.cipher import chacha20_apply
from zkcp.secp256k1 import CURVE_ORDER
from zkcp.tags import DerivationTag
from zkcp.transcript import HashTranscript


G_COMPRESSED = bytes.fromhex(
    '0279be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798'
)


class TestScalars:
    """Tests for scalar parsing and reduction."""

    def test_reduce_wraps(self):
        assert secp256k1.reduce_scalar(CURVE_ORDER.to_bytes(32, 'big')) == 0
        assert secp256k1.reduce_scalar((CURVE_ORDER + 5).to_bytes(32, 'big')) == 5

    def test_parse_rejects_unreduced(self):
        with pytest.raises(ValueError):
            secp256k1.parse_scalar(CURVE_ORDER.to_bytes(32, 'big'))

    def test_parse_allows_zero(self):
        assert secp256k1.parse_scalar(bytes(32)) == 0

    def test_secret_key_must_be_nonzero(self):
        with pytest.raises(ValueError):
            secp256k1.parse_secret_key(bytes(32))

    def test_secret_key_length(self):
        with pytest.raises(ValueError):
            secp256k1.parse_secret_key(bytes([1] * 31))


class TestPoints:
    """Tests for point encoding."""

    def test_generator(self):
        assert secp256k1.base_mul(1) == G_COMPRESSED

    def test_parse_rejects_wrong_length(self):
        with pytest.raises(ValueError):
            secp256k1.parse_point(G_COMPRESSED[:32])

    def test_parse_rejects_bad_prefix(self):
        """0x05 is not a compressed-point prefix."""
        with pytest.raises(ValueError):
            secp256k1.parse_point(b'\x05' + G_COMPRESSED[1:])


class TestSchnorr:
    """Tests for s = r + e*d and its verification equation."""

    def test_modmul_vector(self):
        """With a zero nonce the signature is e*d mod n."""
        a = bytes.fromhex('1986eb08577d1e4543b7ce1c5bd73ed77b608508dcc1810560b7eba5ae3c6779')
        b = bytes.fromhex('1512250aa7c1eb284a5b8829f5aee3f8c14414bdac7736513860881aab0b58ce')
        c = bytes.fromhex('3f221863017d87ecdea67c04cb68c58c105be050c8ec43e3b69e1bf2e0b96f5b')
        assert secp256k1.schnorr_signature(b, bytes(32), a) == c

    def test_nonce_is_added(self):
        d = (7).to_bytes(32, 'big')
        r = (11).to_bytes(32, 'big')
        e = (13).to_bytes(32, 'big')
        assert secp256k1.schnorr_signature(d, r, e) == (11 + 13 * 7).to_bytes(32, 'big')

    def test_wraps_modulo_order(self):
        d = (CURVE_ORDER - 1).to_bytes(32, 'big')
        r = (5).to_bytes(32, 'big')
        e = (1).to_bytes(32, 'big')
        assert secp256k1.schnorr_signature(d, r, e) == (4).to_bytes(32, 'big')

    def test_equation_holds(self):
        d, r, e = 12345, 67890, 424242
        s = int.from_bytes(secp256k1.schnorr_signature(
            d.to_bytes(32, 'big'), r.to_bytes(32, 'big'), e.to_bytes(32, 'big')
        ), 'big')
        assert secp256k1.verify_schnorr_equation(s, secp256k1.base_mul(r), secp256k1.base_mul(d), e)
        assert not secp256k1.verify_schnorr_equation(s + 1, secp256k1.base_mul(r), secp256k1.base_mul(d), e)

    def test_zero_challenge(self):
        """e = 0 reduces the check to s*G == R."""
        r = 99
        assert secp256k1.verify_schnorr_equation(r, secp256k1.base_mul(r), secp256k1.base_mul(3), 0)

    def test_sum_at_infinity(self):
        """R = -e*P makes the right side the point at infinity, matched only by s = 0."""
        d, e = 5, 7
        r = (-e * d) % CURVE_ORDER
        nonce, key = secp256k1.base_mul(r), secp256k1.base_mul(d)
        assert secp256k1.verify_schnorr_equation(0, nonce, key, e)
        assert not secp256k1.verify_schnorr_equation(1, nonce, key, e)


class TestChaCha20:
    """Tests for the keystream."""

    def test_zero_key_vector(self):
        """RFC 7539 A.1 test vector #1: zero key, zero nonce, counter 0."""
        keystream = chacha20_apply(bytes(32), bytes(12), bytes(32))
        assert keystream.hex() == (
            '76b8e0ada0f13d90405d6ae55386bd28'
            'bdd219b8a08ded1aa836efcc8b770dc7'
        )

    def test_involution(self):
        key, nonce = bytes([9] * 32), bytes([4] * 12)
        data = bytes(range(36))
        assert chacha20_apply(key, nonce, chacha20_apply(key, nonce, data)) == data

    def test_rejects_bad_sizes(self):
        with pytest.raises(ValueError):
            chacha20_apply(bytes(31), bytes(12), b'')
        with pytest.raises(ValueError):
            chacha20_apply(bytes(32), bytes(16), b'')


class TestTranscript:
    """Tests for HashTranscript."""

    def test_matches_plain_concatenation(self):
        digest = (
            HashTranscript('t')
            .append('a', b'\x01' * 4, 4)
            .append('b', b'xyz')
            .append_tag(DerivationTag.CHACHA_NONCE)
            .digest()
        )
        assert digest == hashlib.sha256(b'\x01' * 4 + b'xyz' + b'chacha_nonce').digest()

    def test_width_enforced(self):
        with pytest.raises(ValueError, match="field 'a' must be 4 bytes"):
            HashTranscript('t').append('a', b'\x01' * 5, 4)

    def test_fields_recorded_in_order(self):
        t = HashTranscript('t').append('a', b'12', 2).append('b', b'345')
        assert t.fields == [('a', 2), ('b', 3)]
