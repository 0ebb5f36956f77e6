# paillier/keys.py
import logging
from dataclasses import dataclass
from .arith import crt_exponentiation, gen_prime, lcm, modinv
from .params import check_bits
from .utils import DeviceRandom, bit_mask

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class PublicKey:
    """Public key. The generator is fixed to g = 1+n."""
    bits: int  # bit length requested at generation, not recomputed from n
    n: int

    @property
    def n_squared(self) -> int:
        return self.n * self.n

@dataclass(frozen=True)
class PrivateKey:
    """Private key with the CRT and L-function acceleration parameters.

    Every field derives from the same (p, q) pair:
    lam = lcm(p-1, q-1), mu = L(g^lam mod n^2)^-1 mod n,
    p2 = p^2, q2 = q^2, p2invq2 = p^-2 mod q^2, ninv = n^-1 mod 2^bits.
    """
    bits: int
    lam: int
    mu: int
    p2: int
    q2: int
    p2invq2: int
    ninv: int
    n: int

    @property
    def n_squared(self) -> int:
        return self.n * self.n

    def public_key(self) -> PublicKey:
        return PublicKey(bits=self.bits, n=self.n)

def ell(u: int, ninv: int, bits: int) -> int:
    """L(u) = (u-1)/n, computed as (u-1) * n^-1 mod 2^bits.

    Exact only when u-1 is a multiple of n, which holds for u = c^lam mod n^2.
    """
    return ((u - 1) * ninv) & bit_mask(bits)

def keygen(bits: int, prime_source=None, parallel: bool = False):
    """Generate a (PublicKey, PrivateKey) pair with a modulus of `bits` bits.

    Primes are drawn from `prime_source` (a callable bits -> int), which
    defaults to the blocking /dev/random device. Raises InverseError if a
    required inverse is missing, which means the primes are broken.
    """
    check_bits(bits)
    prime_source = prime_source or DeviceRandom()

    logger.debug("generating prime p")
    p = gen_prime(bits // 2, prime_source)
    logger.debug("generating prime q")
    q = gen_prime(bits // 2, prime_source)

    logger.debug("calculating modulus n=p*q")
    n = p * q
    g = n + 1

    logger.debug("computing modular inverse n^-1 mod 2^%d", bits)
    ninv = modinv(n, 1 << bits)

    p2 = p * p
    q2 = q * q
    logger.debug("calculating CRT parameter p^-2 mod q^2")
    p2invq2 = modinv(p2, q2)

    logger.debug("calculating lambda=lcm(p-1,q-1)")
    lam = lcm(p - 1, q - 1)

    logger.debug("calculating mu")
    t = crt_exponentiation(g, lam, lam, p2invq2, p2, q2, parallel=parallel)
    mu = modinv(ell(t, ninv, bits), n)

    pub = PublicKey(bits=bits, n=n)
    priv = PrivateKey(bits=bits, lam=lam, mu=mu, p2=p2, q2=q2, p2invq2=p2invq2, ninv=ninv, n=n)
    return pub, priv
