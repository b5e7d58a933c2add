from __future__ import annotations

from dataclasses import dataclass, field
from functools import cached_property
from typing import Optional

from .scalar import is_square, mod_inverse, mod_sqrt

# Short Weierstrass curve: y2 = x3 + a x + b  (mod p)

# Points are represented in Jacobian coordinates (X, Y, Z) with
# x = X/Z2, y = Y/Z3. The point at infinity has Z = 0.


@dataclass(frozen=True, repr=False)
class Curve:
  """Domain parameters of a prime order (or cofactor h) curve group."""
  name: str
  p: int
  a: int
  b: int
  gx: int
  gy: int
  n: int
  h: int = 1
  # Canonical signatures have s <= n/2 (BIP-62/146 on Bitcoin curves)
  low_s: bool = field(default=False, compare=False)

  def __post_init__(self):
    if not self.contains(self.gx, self.gy):
      raise ValueError(f"Generator is not a point on {self.name}")

  def __repr__(self): return f"Curve({self.name})"

  @cached_property
  def G(self) -> Point:
    """Base point (prime group generator)"""
    return Point(self, self.gx, self.gy)

  @cached_property
  def infinity(self) -> Point:
    """Neutral element"""
    return Point(self, 1, 1, 0)

  def contains(self, x: int, y: int) -> bool:
    """Check that affine (x, y) satisfies the curve equation."""
    if not (0 <= x < self.p and 0 <= y < self.p): return False
    return (y * y - self.rhs(x)) % self.p == 0

  def rhs(self, x: int) -> int:
    return (x * x * x + self.a * x + self.b) % self.p

  def lift_x(self, x: int, odd: bool) -> Point:
    """Restore a point from its x coordinate and the parity of y"""
    if not 0 <= x < self.p: raise ValueError(f"x coordinate out of range for {self.name}")
    y2 = self.rhs(x)
    if not is_square(y2, self.p): raise ValueError(f"Not a curve point on {self.name}")
    y = mod_sqrt(y2, self.p)
    return Point(self, x, y if (y & 1) == odd else -y % self.p)

  def addition(self, P: Point, Q: Point) -> Optional[Point]:
    """P + Q, or None where the sum is the point at infinity."""
    R = P + Q
    return None if R.is_infinity else R.norm

  def mod_n(self, v: int) -> int: return v % self.n
  def inv_n(self, v: int) -> int: return mod_inverse(v, self.n)


class Point:
  def __init__(self, curve: Curve, x: int, y: int, z: int = 1):
    self.curve = curve
    p = curve.p
    # Coordinates outside [0, p) are a non-canonical encoding, never on the curve
    self.canonical = all(0 <= v < p for v in (x, y, z))
    self.X = x % p
    self.Y = y % p
    self.Z = z % p

  def __repr__(self): return point_name(self)
  def __hash__(self): return hash((self.curve.name, None if self.is_infinity else (self.x, self.y)))

  @property
  def is_infinity(self) -> bool: return self.Z == 0

  @cached_property
  def x(self) -> int:
    if self.is_infinity: raise ValueError("Point at infinity does not have coordinates")
    return self.X * mod_inverse(self.Z * self.Z, self.curve.p) % self.curve.p

  @cached_property
  def y(self) -> int:
    if self.is_infinity: raise ValueError("Point at infinity does not have coordinates")
    return self.Y * mod_inverse(self.Z**3, self.curve.p) % self.curve.p

  @cached_property
  def norm(self) -> Point:
    """Return a normalized point, with Z=1."""
    if self.is_infinity or self.Z == 1: return self
    return Point(self.curve, self.x, self.y)

  @cached_property
  def is_on_curve(self) -> bool:
    """Finite point satisfying the curve equation"""
    return self.canonical and not self.is_infinity and self.curve.contains(self.x, self.y)

  def double(self) -> Point:
    p, a = self.curve.p, self.curve.a
    X, Y, Z = self.X, self.Y, self.Z
    if Z == 0 or Y == 0: return self.curve.infinity
    YY = Y * Y % p
    S = 4 * X * YY % p
    ZZ = Z * Z % p
    M = (3 * X * X + a * ZZ * ZZ) % p
    X3 = (M * M - 2 * S) % p
    Y3 = (M * (S - X3) - 8 * YY * YY) % p
    Z3 = 2 * Y * Z % p
    return Point(self.curve, X3, Y3, Z3)

  def __add__(self, othr: Point) -> Point:
    if not isinstance(othr, Point): return NotImplemented
    if othr.curve != self.curve: raise ValueError("Cannot add points of different curves")
    if self.is_infinity: return othr
    if othr.is_infinity: return self
    p = self.curve.p
    Z1Z1, Z2Z2 = self.Z * self.Z % p, othr.Z * othr.Z % p
    U1, U2 = self.X * Z2Z2 % p, othr.X * Z1Z1 % p
    S1, S2 = self.Y * othr.Z * Z2Z2 % p, othr.Y * self.Z * Z1Z1 % p
    if U1 == U2:
      # Same x: either doubling or P + (-P)
      return self.double() if S1 == S2 else self.curve.infinity
    H, R = (U2 - U1) % p, (S2 - S1) % p
    HH = H * H % p
    HHH = H * HH % p
    V = U1 * HH % p
    X3 = (R * R - HHH - 2 * V) % p
    Y3 = (R * (V - X3) - S1 * HHH) % p
    Z3 = H * self.Z * othr.Z % p
    return Point(self.curve, X3, Y3, Z3)

  def __sub__(self, othr: Point) -> Point:
    return self + -othr

  def __neg__(self) -> Point:
    return Point(self.curve, self.X, -self.Y % self.curve.p, self.Z)

  def __mul__(self, s: int) -> Point:
    """Multiply the point by scalar."""
    if not isinstance(s, int): return NotImplemented
    # Group order of the whole curve is n * h
    s %= self.curve.n * self.curve.h
    Q = self.curve.infinity
    for bit in bin(s)[2:]:
      Q = Q.double()
      if bit == "1": Q += self
    return Q.norm

  def __rmul__(self, s: int) -> Point:
    return self * s

  def __eq__(self, othr):
    if not isinstance(othr, Point): raise TypeError(f"Points cannot be compared with {type(othr)}")
    if self.curve != othr.curve: return False
    if self.is_infinity or othr.is_infinity: return self.is_infinity and othr.is_infinity
    # X1 / Z1^2 == X2 / Z2^2  and  Y1 / Z1^3 == Y2 / Z2^3
    p = self.curve.p
    Z1Z1, Z2Z2 = self.Z * self.Z % p, othr.Z * othr.Z % p
    return (
      (self.X * Z2Z2 - othr.X * Z1Z1) % p == 0 and
      (self.Y * Z2Z2 * othr.Z - othr.Y * Z1Z1 * self.Z) % p == 0
    )


def point_name(P: Point) -> str:
  """Return G and INF rather than xy coordinates for the well known points"""
  if P.is_infinity: return f"{P.curve.name}.INF"
  if P == P.curve.G: return f"{P.curve.name}.G"
  return f"Point({P.curve.name}, {P.x:#x}, {P.y:#x})"
