import io
from .errors import SerializationError
from .keys import PublicKey, PrivateKey
from .utils import int_to_hex, hex_to_int, dec_to_int

# Field order is the interoperability contract for key files.
PRIVATE_FIELDS = ("lam", "mu", "p2", "q2", "p2invq2", "ninv", "n")

# -----------------------------
# Line Helpers
# -----------------------------
def _next_line(fp, what: str) -> str:
    for line in fp:
        if line.strip():
            return line
    raise SerializationError(f"Unexpected end of input while reading {what}")

def write_value(fp, x: int):
    fp.write(int_to_hex(x) + "\n")

def read_value(fp, what: str = "value") -> int:
    return hex_to_int(_next_line(fp, what))

# -----------------------------
# Key Serialization
# -----------------------------
def write_public_key(fp, pub: PublicKey):
    fp.write(f"{int(pub.bits)}\n")
    write_value(fp, pub.n)

def read_public_key(fp) -> PublicKey:
    bits = dec_to_int(_next_line(fp, "bit length"))
    n = read_value(fp, "modulus n")
    return PublicKey(bits=bits, n=n)

def write_private_key(fp, priv: PrivateKey):
    fp.write(f"{int(priv.bits)}\n")
    for name in PRIVATE_FIELDS:
        write_value(fp, getattr(priv, name))

def read_private_key(fp) -> PrivateKey:
    bits = dec_to_int(_next_line(fp, "bit length"))
    fields = {name: read_value(fp, name) for name in PRIVATE_FIELDS}
    return PrivateKey(bits=bits, **fields)

def dumps_public_key(pub: PublicKey) -> str:
    buf = io.StringIO()
    write_public_key(buf, pub)
    return buf.getvalue()

def loads_public_key(text: str) -> PublicKey:
    return read_public_key(io.StringIO(text))

def dumps_private_key(priv: PrivateKey) -> str:
    buf = io.StringIO()
    write_private_key(buf, priv)
    return buf.getvalue()

def loads_private_key(text: str) -> PrivateKey:
    return read_private_key(io.StringIO(text))
