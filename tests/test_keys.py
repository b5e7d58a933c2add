import hashlib
import hmac

import pytest

from eckit import *
from eckit.hashing import to_hasher
from eckit.util import bits2int, bits2octets, int2octets


def test_hasher():
  h = Hasher()
  assert h.name == "sha256"
  assert h.digest_size == 32
  assert h(b"abc") == hashlib.sha256(b"abc").digest()
  assert Hasher("SHA-512").digest(b"abc") == hashlib.sha512(b"abc").digest()
  assert Hasher("sha3_256").digest(b"") == hashlib.sha3_256(b"").digest()
  assert h.hmac(b"key", b"data") == hmac.new(b"key", b"data", hashlib.sha256).digest()
  assert Hasher("sha256") == h
  assert to_hasher(None) == h
  assert to_hasher("sha512") == Hasher("sha512")
  assert to_hasher(h) is h
  assert repr(h) == "Hasher('sha256')"
  with pytest.raises(ValueError):
    Hasher("md5")


def test_octets():
  assert bits2int(b"\xff" * 64, 256) == (1 << 256) - 1
  assert bits2int(b"\x80", 4) == 8
  assert bits2int(b"\x01\x02", 32) == 0x0102
  assert int2octets(1, 4) == b"\x00\x00\x00\x01"
  # Reduction after truncation
  assert bits2octets(b"\xff", 5) == b"\x02"


def test_message():
  msg = Message(b"hello")
  assert msg.digest == hashlib.sha256(b"hello").digest()
  assert msg.z(secp256k1) == int.from_bytes(msg.digest, "big")
  # Longer digests are truncated to the bit length of the order
  msg = Message("hello", "sha512")
  assert msg.data == b"hello"
  assert msg.z(secp256r1) == int.from_bytes(hashlib.sha512(b"hello").digest()[:32], "big")
  assert "sha512" in repr(msg)


def test_private_key():
  n = secp256k1.n
  for d in (0, n, -1, n + 1):
    with pytest.raises(InvalidKeyError):
      PrivateKey(d)
  with pytest.raises(InvalidKeyError):
    PrivateKey("1")
  sk = PrivateKey(n - 1)
  assert sk.public_key.point == -secp256k1.G
  assert sk == PrivateKey(n - 1)
  assert PrivateKey(2) != PrivateKey(2, secp256r1)
  with pytest.raises(InvalidKeyError):
    PrivateKey(n - 1, secp256r1)
  assert len({sk, PrivateKey(n - 1), PrivateKey(2)}) == 2
  # Secrets never show up in repr
  assert repr(sk) == "PrivateKey(secp256k1)"
  assert f"{n - 1:x}" not in repr(sk).lower()

  sk = PrivateKey.generate(secp256r1)
  assert 0 < sk.d < secp256r1.n
  assert sk.public_key.is_valid


def test_keypair():
  kp = KeyPair.generate()
  assert kp.curve is secp256k1
  assert kp.public_key == kp.private_key.public_key
  assert KeyPair(kp.private_key, kp.public_key).public_key == kp.public_key
  assert repr(kp).startswith("KeyPair(PublicKey(Point(secp256k1")
  with pytest.raises(InvalidKeyError):
    KeyPair(kp.private_key, PrivateKey(1).public_key)
  pk = PrivateKey(1).public_key
  assert pk == PublicKey(secp256k1.G)
  assert pk != PublicKey(secp256r1.G)
  assert pk.curve is secp256k1
