"""
The secp256k1 curve in affine coordinates, with a precomputed table for generator multiplication
"""
from dataclasses import dataclass
from typing import Optional, Tuple

from hdnode.core import ECC, ECCError
from .ecc_math import is_quadratic_residue, modular_sqrt

__all__ = ["EllipticCurve", "Point", "SECP256K1"]


@dataclass(frozen=True)
class Point:
    """Immutable point. The point at infinity is Point() = (None, None)"""
    x: Optional[int] = None
    y: Optional[int] = None

    def __post_init__(self):
        if (self.x is None) != (self.y is None):
            raise ValueError("Point at infinity must have both coordinates as None")

    def __bool__(self) -> bool:
        """Point at infinity is falsy"""
        return self.x is not None and self.y is not None

    def __iter__(self):
        return iter((self.x, self.y))


class EllipticCurve:
    """
    We instantiate an elliptic curve E of the form

        y^2 = x^3 + ax + b (mod p)

    over a prime field, with a generator of the given order. Points are compressed to 33 bytes as
    (0x02 | 0x03) || x, where the prefix encodes the parity of y.
    """

    def __init__(self, a: int, b: int, p: int, order: int, generator: Tuple[int, int], name: Optional[str] = None):
        if (4 * pow(a, 3) + 27 * pow(b, 2)) % p == 0:
            raise ValueError("Cannot use Singular curve in ECC")

        self.a = a
        self.b = b
        self.p = p
        self.order = order
        self.generator = Point(*generator)
        self.name = name

        # G, 2G, 4G, ... 2^255 G
        self._generator_doublings = self._precompute_generator_doublings()

    def __repr__(self):
        return f"EllipticCurve(name={self.name!r}, p={hex(self.p)}, order={hex(self.order)})"

    def _precompute_generator_doublings(self) -> list[Point]:
        doublings = []
        current = self.generator
        for _ in range(self.order.bit_length()):
            doublings.append(current)
            current = self.double_point(current)
        return doublings

    # --- CURVE MEMBERSHIP --- #
    def x_terms(self, x: int) -> int:
        """x^3 + ax + b mod p"""
        return (pow(x, 3, self.p) + self.a * x + self.b) % self.p

    def is_point_on_curve(self, point: Point) -> bool:
        if not point:
            return True
        x, y = point
        if not (0 <= x < self.p and 0 <= y < self.p):
            return False
        return (y * y) % self.p == self.x_terms(x)

    def find_y_from_x(self, x: int, odd: bool) -> int:
        """Returns the y coordinate for x with the requested parity"""
        rhs = self.x_terms(x)
        if not is_quadratic_residue(rhs, self.p):
            raise ECCError(f"x coordinate {hex(x)} is not on the curve")
        y = modular_sqrt(rhs, self.p)
        if (y & 1) != odd:
            y = self.p - y
        return y

    # --- GROUP LAW --- #
    def double_point(self, point: Point) -> Point:
        if not point or point.y == 0:
            return Point()

        x, y = point
        m = ((3 * x * x + self.a) * pow(2 * y, -1, self.p)) % self.p
        x3 = (m * m - 2 * x) % self.p
        y3 = (m * (x - x3) - y) % self.p
        return Point(x3, y3)

    def add_points(self, point1: Point, point2: Point) -> Point:
        if not point1:
            return point2
        if not point2:
            return point1

        x1, y1 = point1
        x2, y2 = point2
        if x1 == x2:
            if y1 == y2:
                return self.double_point(point1)
            return Point()  # P + (-P)

        m = ((y2 - y1) * pow(x2 - x1, -1, self.p)) % self.p
        x3 = (m * m - x1 - x2) % self.p
        y3 = (m * (x1 - x3) - y1) % self.p
        return Point(x3, y3)

    def multiply_generator(self, n: int) -> Point:
        """n * G using the precomputed doublings"""
        n = n % self.order
        result = Point()
        for bit, doubling in enumerate(self._generator_doublings):
            if n >> bit == 0:
                break
            if (n >> bit) & 1:
                result = self.add_points(result, doubling)
        return result

    # --- ENCODING --- #
    def compress(self, point: Point) -> bytes:
        if not point:
            raise ECCError("Cannot serialize the point at infinity")
        prefix = ECC.ODD_PREFIX if point.y & 1 else ECC.EVEN_PREFIX
        return prefix + point.x.to_bytes(ECC.COORD_BYTES, "big")

    def decompress(self, data: bytes) -> Point:
        if len(data) != ECC.COMPRESSED_BYTES:
            raise ECCError(f"Compressed public key must be {ECC.COMPRESSED_BYTES} bytes")
        prefix, x_bytes = data[:1], data[1:]
        if prefix not in (ECC.EVEN_PREFIX, ECC.ODD_PREFIX):
            raise ECCError("Unidentified type byte for compressed public key")
        x = int.from_bytes(x_bytes, "big")
        if x >= self.p:
            raise ECCError("x coordinate exceeds the field prime")
        return Point(x, self.find_y_from_x(x, odd=prefix == ECC.ODD_PREFIX))


SECP256K1 = EllipticCurve(
    a=0,
    b=7,
    p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
    order=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
    generator=(0x79be667ef9dcbbac55a06295ce870b07029bfcdb2dce28d959f2815b16f81798,
               0x483ada7726a3c4655da4fbfc0e1108a8fd17b448a68554199c47d08ffb10d4b8),
    name="secp256k1",
)
