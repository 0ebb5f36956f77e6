# paillier/scheme.py
import logging
from gmpy2 import mpz, powmod
from .arith import crt_exponentiation
from .errors import EntropyError, RangeError
from .keys import PublicKey, PrivateKey, ell
from .params import check_policy
from .utils import urandom_bits

logger = logging.getLogger(__name__)

def check_range(value: int, bound: int, what: str, modulus_name: str, policy: str = "warn") -> int:
    """Apply the range policy to 0 <= value < bound.

    "warn" logs and lets the value through unchanged, "strict" raises RangeError.
    """
    check_policy(policy)
    if 0 <= value < bound:
        return value
    msg = f"{what} is {'negative' if value < 0 else 'larger than modulus ' + modulus_name}"
    if policy == "strict":
        raise RangeError(msg)
    logger.warning(msg)
    return value

def encrypt(plaintext: int, pub: PublicKey, random_source=None, policy: str = "warn") -> int:
    """Compute c = r^n * (1 + m*n) mod n^2 with a fresh blinding factor r.

    g = 1+n gives g^m = 1 + m*n mod n^2, so only r^n needs a real
    exponentiation. A plaintext >= n is encrypted as m mod n under "warn".
    """
    check_range(plaintext, pub.n, "plaintext", "n", policy)
    random_source = random_source or urandom_bits
    n = mpz(pub.n)
    n2 = n * n

    logger.debug("generating random number")
    r = mpz(random_source(pub.bits)) % n
    if r == 0:
        raise EntropyError("random number is zero")

    logger.debug("computing ciphertext")
    c = powmod(r, n, n2)
    c = (c * (mpz(plaintext) * n + 1)) % n2
    return int(c)

def decrypt(ciphertext: int, priv: PrivateKey, policy: str = "warn", parallel: bool = False) -> int:
    """Compute m = L(c^lam mod n^2) * mu mod n, the exponentiation split over p^2 and q^2."""
    check_range(ciphertext, priv.n_squared, "ciphertext", "n^2", policy)
    logger.debug("computing plaintext")
    t = crt_exponentiation(ciphertext, priv.lam, priv.lam, priv.p2invq2, priv.p2, priv.q2, parallel=parallel)
    u = ell(t, priv.ninv, priv.bits)
    return (u * priv.mu) % priv.n
