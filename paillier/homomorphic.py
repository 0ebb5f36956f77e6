# paillier/homomorphic.py
import logging
from gmpy2 import mpz, powmod
from .keys import PublicKey
from .scheme import check_range
from .serialization import read_public_key, read_value, write_value

logger = logging.getLogger(__name__)

def homomorphic_add(c1: int, c2: int, pub: PublicKey, policy: str = "warn") -> int:
    """c1 * c2 mod n^2, which decrypts to m1 + m2 mod n."""
    n2 = pub.n_squared
    check_range(c1, n2, "ciphertext", "n^2", policy)
    check_range(c2, n2, "ciphertext", "n^2", policy)
    logger.debug("homomorphic add plaintexts")
    return (c1 * c2) % n2

def homomorphic_multiply_constant(c: int, k: int, pub: PublicKey, policy: str = "warn") -> int:
    """c^k mod n^2, which decrypts to k * m mod n."""
    n2 = pub.n_squared
    check_range(c, n2, "ciphertext", "n^2", policy)
    check_range(k, pub.n, "constant", "n", policy)
    logger.debug("homomorphic multiply plaintext with constant")
    return int(powmod(mpz(c), mpz(k), mpz(n2)))

def homomorphic_add_files(pubfile: str, f1: str, f2: str, out_file: str, policy: str = "warn"):
    with open(pubfile, "r") as f:
        pub = read_public_key(f)
    with open(f1, "r") as f:
        c1 = read_value(f, "ciphertext")
    with open(f2, "r") as f:
        c2 = read_value(f, "ciphertext")
    c3 = homomorphic_add(c1, c2, pub, policy)
    with open(out_file, "w") as f:
        write_value(f, c3)
    return out_file

def homomorphic_mul_files(pubfile: str, f1: str, constant_file: str, out_file: str, policy: str = "warn"):
    with open(pubfile, "r") as f:
        pub = read_public_key(f)
    with open(f1, "r") as f:
        c = read_value(f, "ciphertext")
    with open(constant_file, "r") as f:
        k = read_value(f, "constant")
    c2 = homomorphic_multiply_constant(c, k, pub, policy)
    with open(out_file, "w") as f:
        write_value(f, c2)
    return out_file
