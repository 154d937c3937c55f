"""
Testing the Point and EllipticCurve classes and the secp256k1 engine
"""
import random
from secrets import token_bytes

import pytest

from hdnode.core import ECCError
from hdnode.cryptography import Point, EllipticCurve, SECP256K1, SECP256K1_ENGINE

# Known key pair (BIP32 test vector 1 master)
KNOWN_PRIVKEY = bytes.fromhex("e8f32e723decf4051aefac8e2c93c9c5b214313817cdb01a1494b917c8436b35")
KNOWN_PUBKEY = bytes.fromhex("0339a36013301597daef41fbe593a02cc513d0b55527ec2df1050e2e8ff49c85c2")
ORDER = SECP256K1.order


def test_point_at_infinity():
    """
    Point() = (None, None) is the point at infinity. A point with a single None coordinate is invalid.
    """
    assert Point() == Point(x=None, y=None), "Point at infinity construction mismatch."
    assert not Point(), "Point at infinity should be falsy"
    assert SECP256K1.is_point_on_curve(Point()), "Point at infinity not on curve error"

    with pytest.raises(ValueError):
        Point(x=random.randint(0, 0xffff), y=None)
    with pytest.raises(ValueError):
        Point(x=None, y=random.randint(0, 0xffff))


def test_small_curve_group_law():
    """
    y^2 = x^3 + 7 (mod 11) has 12 points. (2,2) + (2,9) is the point at infinity and (2,2) + (3,1) = (7,3).
    """
    curve = EllipticCurve(a=0, b=7, p=11, order=12, generator=(2, 2))
    assert curve.is_point_on_curve(Point(2, 2))
    assert not curve.is_point_on_curve(Point(2, 3))
    assert not curve.add_points(Point(2, 2), Point(2, 9)), "P + (-P) should be the point at infinity"
    assert curve.add_points(Point(2, 2), Point(3, 1)) == Point(7, 3)
    assert curve.add_points(Point(), Point(3, 1)) == Point(3, 1)


def test_singular_curve_rejected():
    with pytest.raises(ValueError):
        EllipticCurve(a=0, b=0, p=11, order=1, generator=(0, 0))


def test_generator_multiples():
    """
    1*G is G, n*G is the point at infinity and (a+b)*G = a*G + b*G
    """
    assert SECP256K1.multiply_generator(1) == SECP256K1.generator
    assert not SECP256K1.multiply_generator(ORDER)

    a = random.randrange(1, ORDER)
    b = random.randrange(1, ORDER)
    lhs = SECP256K1.multiply_generator(a + b)
    rhs = SECP256K1.add_points(SECP256K1.multiply_generator(a), SECP256K1.multiply_generator(b))
    assert lhs == rhs, "Generator multiplication is not additive"
    assert SECP256K1.is_point_on_curve(lhs)


def test_compress_decompress():
    point = SECP256K1.multiply_generator(random.randrange(1, ORDER))
    compressed = SECP256K1.compress(point)
    assert len(compressed) == 33
    assert compressed[0] in (2, 3)
    assert SECP256K1.decompress(compressed) == point, "Failed to recover point from compressed bytes"


def test_decompress_rejects_bad_data():
    with pytest.raises(ECCError):
        SECP256K1.decompress(b'\x04' + KNOWN_PUBKEY[1:])
    with pytest.raises(ECCError):
        SECP256K1.decompress(KNOWN_PUBKEY[:-1])
    with pytest.raises(ECCError):
        SECP256K1.compress(Point())


def test_derive_public_key():
    assert SECP256K1_ENGINE.derive_public_key(KNOWN_PRIVKEY) == KNOWN_PUBKEY


@pytest.mark.parametrize("private_key, expected", [
    (KNOWN_PRIVKEY, True),
    ((1).to_bytes(32, "big"), True),
    ((ORDER - 1).to_bytes(32, "big"), True),
    (bytes(32), False),
    (ORDER.to_bytes(32, "big"), False),
    (b'\xff' * 32, False),
    (KNOWN_PRIVKEY[:31], False),
])
def test_validate_private_key(private_key, expected):
    assert SECP256K1_ENGINE.validate_private_key(private_key) is expected


def test_validate_public_key():
    assert SECP256K1_ENGINE.validate_public_key(KNOWN_PUBKEY)
    assert not SECP256K1_ENGINE.validate_public_key(b'\x04' + KNOWN_PUBKEY[1:])
    assert not SECP256K1_ENGINE.validate_public_key(KNOWN_PUBKEY[:32])
    # x = p is outside the field
    assert not SECP256K1_ENGINE.validate_public_key(b'\x02' + SECP256K1.p.to_bytes(32, "big"))


def test_tweaks_agree():
    """
    Tweaking a private key and its public key by the same scalar gives a matching key pair
    """
    private_key = token_bytes(32)
    while not SECP256K1_ENGINE.validate_private_key(private_key):
        private_key = token_bytes(32)
    tweak = random.randrange(1, ORDER).to_bytes(32, "big")

    tweaked_private = SECP256K1_ENGINE.tweak_add_private(private_key, tweak)
    tweaked_public = SECP256K1_ENGINE.tweak_add_public(SECP256K1_ENGINE.derive_public_key(private_key), tweak)
    assert SECP256K1_ENGINE.derive_public_key(tweaked_private) == tweaked_public


def test_tweak_failures():
    too_big = ORDER.to_bytes(32, "big")
    with pytest.raises(ECCError):
        SECP256K1_ENGINE.tweak_add_private(KNOWN_PRIVKEY, too_big)
    with pytest.raises(ECCError):
        SECP256K1_ENGINE.tweak_add_public(KNOWN_PUBKEY, too_big)

    # k + (n - k) = 0 mod n
    negation = (ORDER - int.from_bytes(KNOWN_PRIVKEY, "big")).to_bytes(32, "big")
    with pytest.raises(ECCError):
        SECP256K1_ENGINE.tweak_add_private(KNOWN_PRIVKEY, negation)
    with pytest.raises(ECCError):
        SECP256K1_ENGINE.tweak_add_public(KNOWN_PUBKEY, negation)
