class InvalidKeyError(ValueError):
  """Private scalar or public point is not usable on the curve"""

class UnknownCurveError(ValueError):
  """No curve by that name"""

class SigningError(RuntimeError):
  """Nonce generation never produced a usable nonce (a defect, not bad input)"""
