# Octet string conversions of SEC 1 and RFC 6979 (all big endian)


def toint(b: bytes) -> int:
  return int.from_bytes(b, "big")

def tobytes(x: int, length: int) -> bytes:
  return x.to_bytes(length, "big")

def bits2int(b: bytes, qlen: int) -> int:
  """Integer from the leftmost qlen bits of b (RFC 6979 section 2.3.2)"""
  x = toint(b)
  blen = 8 * len(b)
  return x >> (blen - qlen) if blen > qlen else x

def int2octets(x: int, rlen: int) -> bytes:
  """Fixed length encoding of x, rlen being the byte length of the group order"""
  return tobytes(x, rlen)

def bits2octets(b: bytes, q: int) -> bytes:
  """bits2int reduced modulo q, as octets (RFC 6979 section 2.3.4)"""
  qlen = q.bit_length()
  return int2octets(bits2int(b, qlen) % q, (qlen + 7) // 8)
