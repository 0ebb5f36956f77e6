class PaillierError(Exception):
    """Base class for every error raised by the paillier package."""

class InverseError(PaillierError, ArithmeticError):
    """A required modular inverse does not exist."""

class EntropyError(PaillierError):
    """The random source failed or produced an unusable value."""

class RangeError(PaillierError, ValueError):
    """A plaintext, ciphertext or constant is outside its range (strict policy)."""

class SerializationError(PaillierError, ValueError):
    """A serialized key or value is truncated or malformed."""
