from __future__ import annotations

import secrets
from functools import cached_property
from typing import Iterator, Optional, Union

from . import rfc6979
from .elliptic import Curve, Point, secp256k1
from .exceptions import InvalidKeyError
from .hashing import Hasher, to_hasher
from .util import bits2int


class Message:
  """Raw message bytes and the hash function used to digest them."""
  def __init__(self, data: Union[bytes, str], hasher: Union[str, Hasher, None] = None):
    self.data = data.encode() if isinstance(data, str) else bytes(data)
    self.hasher = to_hasher(hasher)

  def __repr__(self): return f"<Message {len(self.data)} bytes {self.hasher.name}>"

  @cached_property
  def digest(self) -> bytes:
    return self.hasher.digest(self.data)

  def z(self, curve: Curve) -> int:
    """The digest as an integer, truncated to the bit length of the curve order (SEC 1 section 4.1.3)"""
    return bits2int(self.digest, curve.n.bit_length())


def to_message(msg: Union[Message, bytes, str], hasher: Union[str, Hasher, None] = None) -> Message:
  if isinstance(msg, Message):
    if hasher is None or to_hasher(hasher) == msg.hasher: return msg
    return Message(msg.data, hasher)
  if isinstance(msg, (bytes, bytearray, memoryview, str)):
    return Message(msg, hasher)
  raise TypeError(f"Cannot sign or verify {type(msg).__name__}, bytes or Message needed")


class PublicKey:
  def __init__(self, point: Point):
    self.point = point

  def __repr__(self): return f"PublicKey({self.point!r})"
  def __hash__(self): return hash(self.point)

  def __eq__(self, othr):
    return isinstance(othr, PublicKey) and self.point == othr.point

  @property
  def curve(self) -> Curve: return self.point.curve

  @property
  def is_valid(self) -> bool: return self.point.is_on_curve


class PrivateKey:
  def __init__(self, d: int, curve: Curve = secp256k1):
    if not isinstance(d, int) or not 0 < d < curve.n:
      raise InvalidKeyError(f"Private scalar must be in [1, n-1] of {curve.name}")
    self.d = d
    self.curve = curve

  @classmethod
  def generate(cls, curve: Curve = secp256k1) -> PrivateKey:
    return cls(1 + secrets.randbelow(curve.n - 1), curve)

  # Never show the scalar
  def __repr__(self): return f"PrivateKey({self.curve.name})"

  def __eq__(self, othr):
    return isinstance(othr, PrivateKey) and self.curve == othr.curve and self.d == othr.d

  def __hash__(self): return hash((self.curve.name, self.d))

  @cached_property
  def public_key(self) -> PublicKey:
    return PublicKey(self.d * self.curve.G)

  def nonces(self, message: Message, personalization: Optional[bytes] = None) -> Iterator[int]:
    """Deterministic RFC 6979 nonce candidates for signing message."""
    return rfc6979.nonces(self.d, message.digest, self.curve, message.hasher, personalization)


class KeyPair:
  def __init__(self, private_key: PrivateKey, public_key: Optional[PublicKey] = None):
    if public_key is None:
      public_key = private_key.public_key
    elif public_key != private_key.public_key:
      raise InvalidKeyError("Public key does not match the private key")
    self.private_key = private_key
    self.public_key = public_key

  @classmethod
  def generate(cls, curve: Curve = secp256k1) -> KeyPair:
    return cls(PrivateKey.generate(curve))

  def __repr__(self): return f"KeyPair({self.public_key!r})"

  @property
  def curve(self) -> Curve: return self.private_key.curve

  def sign(self, message, hasher=None, personalization=None):
    from .ecdsa import sign
    return sign(message, self.private_key, self.public_key, hasher, personalization)

  def verify(self, message, signature, hasher=None) -> bool:
    from .ecdsa import verify
    return verify(message, signature, self.public_key, hasher)
