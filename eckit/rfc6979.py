"""Deterministic ECDSA nonces per RFC 6979 section 3.2.

https://datatracker.ietf.org/doc/html/rfc6979

The HMAC-DRBG is exposed as a generator: the first value is the standard
RFC 6979 nonce and each following value is what step h.3 produces when the
previous candidate was unusable. Signing retries thus never reuse a nonce
while staying fully deterministic.
"""

import logging
from itertools import islice
from typing import Iterator, Optional

from .elliptic import Curve
from .hashing import Hasher
from .util import bits2int, bits2octets, int2octets

logger = logging.getLogger(__name__)


def nonces(d: int, digest: bytes, curve: Curve, hasher: Hasher, personalization: Optional[bytes] = None) -> Iterator[int]:
  """Yield an endless deterministic stream of nonces in [1, n-1] for key d and message digest."""
  q = curve.n
  qlen = q.bit_length()
  rlen = (qlen + 7) // 8
  if not 0 < d < q: raise ValueError("Private scalar out of range")
  # Additional data k' of section 3.6 goes after the key and message
  seed = int2octets(d, rlen) + bits2octets(digest, q) + (personalization or b"")
  mac = hasher.hmac
  V = b"\x01" * hasher.digest_size  # b
  K = b"\x00" * hasher.digest_size  # c
  K = mac(K, V + b"\x00" + seed)  # d
  V = mac(K, V)  # e
  K = mac(K, V + b"\x01" + seed)  # f
  V = mac(K, V)  # g
  while True:  # h
    T = b""
    while 8 * len(T) < qlen:
      V = mac(K, V)
      T += V
    k = bits2int(T, qlen)
    if 0 < k < q:
      yield k
    else:
      logger.debug("RFC 6979 candidate out of range on %s, drawing another", curve.name)
    K = mac(K, V + b"\x00")
    V = mac(K, V)


def deterministic_nonce(d: int, digest: bytes, curve: Curve, hasher: Hasher, personalization: Optional[bytes] = None, attempt: int = 0) -> int:
  """The nonce for a given retry counter (0 is the plain RFC 6979 nonce)."""
  if attempt < 0: raise ValueError("Retry counter cannot be negative")
  return next(islice(nonces(d, digest, curve, hasher, personalization), attempt, None))
