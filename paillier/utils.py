# paillier/utils.py
import secrets
from .errors import EntropyError, SerializationError
from .params import RANDOM_DEVICE

def bit_mask(bits: int) -> int:
    return (1 << bits) - 1

def byte_count(bits: int) -> int:
    return (bits + 7) >> 3

def int_to_hex(x: int) -> str:
    """Lowercase hex without a base prefix."""
    return format(int(x), "x")

def hex_to_int(text: str) -> int:
    s = text.strip()
    if s[:2].lower() == "0x":
        s = s[2:]
    if not s:
        raise SerializationError("Empty hex value")
    try:
        return int(s, 16)
    except ValueError:
        raise SerializationError(f"Invalid hex value: {text.strip()!r}") from None

def dec_to_int(text: str) -> int:
    try:
        return int(text.strip(), 10)
    except ValueError:
        raise SerializationError(f"Invalid decimal value: {text.strip()!r}") from None

def bytes_be_to_int(b: bytes) -> int:
    return int.from_bytes(b, "big")

# -----------------------------
# Entropy sources
# -----------------------------
def urandom_bits(bits: int) -> int:
    """Non-blocking source, used for per-encryption blinding."""
    return secrets.randbits(bits)

class DeviceRandom:
    """Blocking source reading raw bytes from a random device.

    Reads from /dev/random by default, so key generation may stall on a
    system short of entropy.
    """

    def __init__(self, path: str = RANDOM_DEVICE):
        self.path = path

    def __call__(self, bits: int) -> int:
        count = byte_count(bits)
        chunks = []
        read = 0
        try:
            with open(self.path, "rb", buffering=0) as dev:
                while read < count:
                    chunk = dev.read(count - read)
                    if not chunk:
                        raise EntropyError(f"Random device {self.path} returned EOF")
                    chunks.append(chunk)
                    read += len(chunk)
        except OSError as e:
            raise EntropyError(f"Cannot open random device {self.path}: {e}") from e
        return bytes_be_to_int(b"".join(chunks)) & bit_mask(bits)

    def __repr__(self):
        return f"DeviceRandom({self.path!r})"
