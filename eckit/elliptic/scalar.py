# Modular arithmetic on plain Python ints, used both for the prime field (mod p)
# and for the scalar group (mod n).


def mod_inverse(a: int, m: int) -> int:
  """Inverse of a modulo m. Raises ZeroDivisionError if a is zero mod m."""
  a %= m
  if a == 0: raise ZeroDivisionError(f"Zero has no inverse modulo {m}")
  return pow(a, -1, m)


def is_square(a: int, p: int) -> bool:
  """Euler's criterion (zero counts as a square)"""
  a %= p
  return a == 0 or pow(a, (p - 1) // 2, p) == 1


def mod_sqrt(a: int, p: int) -> int:
  """A square root of a modulo prime p. Raises ValueError otherwise."""
  a %= p
  if not is_square(a, p): raise ValueError("Not a square!")
  if a == 0: return 0
  # Both secp256k1 and secp256r1 have p = 3 mod 4
  if p % 4 == 3:
    return pow(a, (p + 1) // 4, p)
  # Tonelli-Shanks for the remaining primes: p - 1 = q * 2^e with q odd
  q, e = p - 1, 0
  while q % 2 == 0:
    q //= 2
    e += 1
  z = 2
  while is_square(z, p): z += 1
  m, c, t, root = e, pow(z, q, p), pow(a, q, p), pow(a, (q + 1) // 2, p)
  while t != 1:
    i, t2 = 0, t
    while t2 != 1:
      t2 = t2 * t2 % p
      i += 1
    b = pow(c, 1 << (m - i - 1), p)
    m, c = i, b * b % p
    t, root = t * c % p, root * b % p
  assert root * root % p == a
  return root
