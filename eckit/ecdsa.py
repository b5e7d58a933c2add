"""ECDSA over any short Weierstrass curve.

Signing is deterministic (RFC 6979) and follows the curve's policy on low s
canonicalization. Verification and recovery id computation never raise on
bad keys or signatures but answer False / 0 instead.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import islice
from typing import Optional

from .elliptic import Curve, Point, secp256k1
from .exceptions import SigningError
from .keys import PrivateKey, PublicKey, to_message

logger = logging.getLogger(__name__)

# Hitting r = 0 or s = 0 even once is astronomically unlikely
MAX_SIGN_ATTEMPTS = 64

# Bitcoin message signing adds 27 to the two recovery bits
RECOVERY_ID_OFFSET = 27


@dataclass(frozen=True)
class Signature:
  r: int
  s: int
  curve: Curve = secp256k1

  @property
  def is_low_s(self) -> bool: return self.s <= self.curve.n // 2

  @property
  def low_s(self) -> Signature:
    """The canonical form with s in the lower half of [1, n-1]"""
    return self if self.is_low_s else Signature(self.r, self.curve.n - self.s, self.curve)


def sign(message, private_key: PrivateKey, public_key: Optional[PublicKey] = None, hasher=None, personalization: Optional[bytes] = None) -> Signature:
  """Deterministic ECDSA signature of message (bytes or Message)."""
  msg = to_message(message, hasher)
  curve = private_key.curve
  if public_key is not None and public_key.curve != curve:
    raise ValueError(f"Public key is not on {curve.name}")
  d, n = private_key.d, curve.n
  z = msg.z(curve)
  for attempt, k in enumerate(islice(private_key.nonces(msg, personalization), MAX_SIGN_ATTEMPTS)):
    k = curve.mod_n(k)  # [0, n-1]
    P = k * curve.G
    if P.is_infinity or (r := curve.mod_n(P.x)) == 0:
      logger.debug("Nonce attempt %d on %s gave r = 0, retrying", attempt, curve.name)
      continue
    s = curve.mod_n(curve.inv_n(k) * (z + r * d))
    if s == 0:
      logger.debug("Nonce attempt %d on %s gave s = 0, retrying", attempt, curve.name)
      continue
    if curve.low_s and s > n // 2:
      s = n - s
    return Signature(r, s, curve)
  logger.warning("No usable nonce in %d attempts on %s", MAX_SIGN_ATTEMPTS, curve.name)
  raise SigningError(f"Failed to sign: no usable nonce in {MAX_SIGN_ATTEMPTS} attempts")


def _verification_point(z: int, r, s, public_key: PublicKey) -> Optional[Point]:
  """The point R = u1 G + u2 H whose x coordinate must match r, or None."""
  H = public_key.point
  if not H.is_on_curve: return None
  curve = H.curve
  if not (isinstance(r, int) and isinstance(s, int)): return None
  # s = 0 has no inverse, r = 0 would ignore the key
  if not (0 < r < curve.n and 0 < s < curve.n): return None
  w = curve.inv_n(s)
  u1 = curve.mod_n(z * w)
  u2 = curve.mod_n(r * w)
  R = curve.addition(u1 * curve.G, u2 * H)
  if R is None or curve.mod_n(R.x) != r: return None
  return R


def verify(message, signature: Signature, public_key: PublicKey, hasher=None) -> bool:
  """Check an ECDSA signature. Both s and n - s are accepted."""
  if signature.curve != public_key.curve: return False
  try:
    msg = to_message(message, hasher)
  except TypeError:
    return False
  return _verification_point(msg.z(public_key.curve), signature.r, signature.s, public_key) is not None


def recovery_id(message, r: Optional[int], s: Optional[int], public_key: PublicKey, hasher=None) -> int:
  """
  The Bitcoin style recovery id 27..30 of a valid signature (r, s) by public_key.

  Returns 0 if r or s is missing or the signature does not verify.
  """
  if r is None or s is None: return 0
  try:
    msg = to_message(message, hasher)
  except TypeError:
    return 0
  curve = public_key.curve
  R = _verification_point(msg.z(curve), r, s, public_key)
  if R is None: return 0
  odd_y = R.y & 1
  # r was reduced from an x coordinate beyond the group order
  overflow = 2 if R.x >= curve.n else 0
  return RECOVERY_ID_OFFSET + (odd_y | overflow)


def recover_public_key(message, signature: Signature, recid: int, hasher=None) -> PublicKey:
  """Restore the signer's public key from a signature and its recovery id (SEC 1 section 4.1.6)."""
  curve = signature.curve
  r, s, n = signature.r, signature.s, curve.n
  bits = recid - RECOVERY_ID_OFFSET
  if not 0 <= bits <= 3:
    raise ValueError(f"Invalid recovery id {recid}")
  if not (0 < r < n and 0 < s < n):
    raise ValueError("Invalid signature")
  R = curve.lift_x(r + n if bits & 2 else r, bool(bits & 1))
  z = to_message(message, hasher).z(curve)
  # Q = r^-1 (s R - z G)
  r_inv = curve.inv_n(r)
  Q = curve.addition(curve.mod_n(s * r_inv) * R, curve.mod_n(-z * r_inv) * curve.G)
  if Q is None:
    raise ValueError("Recovered public key is the point at infinity")
  return PublicKey(Q)
