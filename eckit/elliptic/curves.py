from typing import Dict

from ..exceptions import UnknownCurveError
from .curve import Curve

# Domain parameters from SEC 2 v2, http://www.secg.org/sec2-v2.pdf

# Section 2.4.1, the Bitcoin curve. Signatures are canonicalized to low s.
secp256k1 = Curve(
  name="secp256k1",
  p=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEFFFFFC2F,
  a=0,
  b=7,
  gx=0x79BE667EF9DCBBAC55A06295CE870B07029BFCDB2DCE28D959F2815B16F81798,
  gy=0x483ADA7726A3C4655DA4FBFC0E1108A8FD17B448A68554199C47D08FFB10D4B8,
  n=0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141,
  low_s=True,
)

# Section 2.4.2, aka NIST P-256
secp256r1 = Curve(
  name="secp256r1",
  p=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFF,
  a=0xFFFFFFFF00000001000000000000000000000000FFFFFFFFFFFFFFFFFFFFFFFC,
  b=0x5AC635D8AA3A93E7B3EBBD55769886BC651D06B0CC53B0F63BCE3C3E27D2604B,
  gx=0x6B17D1F2E12C4247F8BCE6E563A440F277037D812DEB33A0F4A13945D898C296,
  gy=0x4FE342E2FE1A7F9B8EE7EB4A7C0F9E162BCE33576B315ECECBB6406837BF51F5,
  n=0xFFFFFFFF00000000FFFFFFFFFFFFFFFFBCE6FAADA7179E84F3B9CAC2FC632551,
)

CURVES: Dict[str, Curve] = {
  "secp256k1": secp256k1,
  "secp256r1": secp256r1,
  "p256": secp256r1,
  "prime256v1": secp256r1,
}


def get_curve(name: str) -> Curve:
  """Look up a named curve (case insensitive, NIST and OpenSSL aliases accepted)"""
  try:
    return CURVES[name.lower().replace("-", "")]
  except KeyError:
    raise UnknownCurveError(f"Unsupported curve {name!r}") from None
