# A plain Python submodule for short Weierstrass curve math.

# Not constant time and not zeroing secrets after use, so a native library
# should be preferred wherever timing side channels matter.

# Public symbols are imported here. These are very low level primitives.
# Lower case names are scalars (int), upper case are Points.

from .curve import Curve, Point
from .curves import CURVES, get_curve, secp256k1, secp256r1
from .scalar import is_square, mod_inverse, mod_sqrt
