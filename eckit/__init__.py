# Deterministic ECDSA (RFC 6979) over short Weierstrass curves

from .ecdsa import MAX_SIGN_ATTEMPTS, Signature, recover_public_key, recovery_id, sign, verify
from .elliptic import Curve, Point, get_curve, secp256k1, secp256r1
from .exceptions import InvalidKeyError, SigningError, UnknownCurveError
from .hashing import Hasher
from .keys import KeyPair, Message, PrivateKey, PublicKey
