from typing import Dict, Type, Union

from cryptography.hazmat.primitives import hashes, hmac

DEFAULT_HASH = "sha256"

ALGORITHMS: Dict[str, Type[hashes.HashAlgorithm]] = {
  "sha1": hashes.SHA1,  # Only for the RFC 6979 test vectors
  "sha224": hashes.SHA224,
  "sha256": hashes.SHA256,
  "sha384": hashes.SHA384,
  "sha512": hashes.SHA512,
  "sha3_256": hashes.SHA3_256,
  "sha3_512": hashes.SHA3_512,
}


class Hasher:
  """A named hash function, also providing the HMAC needed by RFC 6979."""
  def __init__(self, name: str = DEFAULT_HASH):
    name = name.lower().replace("-", "")
    if name not in ALGORITHMS:
      raise ValueError(f"Unsupported hash function {name!r}")
    self.name = name
    self.algorithm = ALGORITHMS[name]()

  def __repr__(self): return f"Hasher({self.name!r})"
  def __hash__(self): return hash(self.name)
  def __eq__(self, othr): return isinstance(othr, Hasher) and othr.name == self.name

  @property
  def digest_size(self) -> int: return self.algorithm.digest_size

  def digest(self, data: bytes) -> bytes:
    h = hashes.Hash(self.algorithm)
    h.update(bytes(data))
    return h.finalize()

  def hmac(self, key: bytes, data: bytes) -> bytes:
    h = hmac.HMAC(key, self.algorithm)
    h.update(data)
    return h.finalize()

  __call__ = digest


def to_hasher(h: Union[str, Hasher, None]) -> Hasher:
  if h is None: return Hasher()
  return h if isinstance(h, Hasher) else Hasher(h)
