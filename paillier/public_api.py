# paillier/public_api.py
"""Stream level operations: keys and values are read from and written to open text files."""
import logging
from .homomorphic import homomorphic_add, homomorphic_multiply_constant
from .keys import keygen
from .scheme import encrypt, decrypt
from .serialization import (
    read_public_key, read_private_key, read_value,
    write_public_key, write_private_key, write_value,
)

logger = logging.getLogger(__name__)

def keygen_str(public_fp, private_fp, bits: int, prime_source=None, parallel: bool = False):
    pub, priv = keygen(bits, prime_source=prime_source, parallel=parallel)
    logger.debug("export public key")
    write_public_key(public_fp, pub)
    logger.debug("export private key")
    write_private_key(private_fp, priv)
    return pub, priv

def encrypt_str(ciphertext_fp, plaintext_fp, public_fp, random_source=None, policy: str = "warn") -> int:
    logger.debug("importing public key")
    pub = read_public_key(public_fp)
    logger.debug("importing plaintext")
    m = read_value(plaintext_fp, "plaintext")
    c = encrypt(m, pub, random_source=random_source, policy=policy)
    logger.debug("exporting ciphertext")
    write_value(ciphertext_fp, c)
    return c

def decrypt_str(plaintext_fp, ciphertext_fp, private_fp, policy: str = "warn", parallel: bool = False) -> int:
    logger.debug("importing private key")
    priv = read_private_key(private_fp)
    logger.debug("importing ciphertext")
    c = read_value(ciphertext_fp, "ciphertext")
    m = decrypt(c, priv, policy=policy, parallel=parallel)
    logger.debug("exporting plaintext")
    write_value(plaintext_fp, m)
    return m

def homomorphic_add_str(out_fp, c1_fp, c2_fp, public_fp, policy: str = "warn") -> int:
    pub = read_public_key(public_fp)
    c1 = read_value(c1_fp, "ciphertext")
    c2 = read_value(c2_fp, "ciphertext")
    c3 = homomorphic_add(c1, c2, pub, policy)
    write_value(out_fp, c3)
    return c3

def homomorphic_multc_str(out_fp, c_fp, constant_fp, public_fp, policy: str = "warn") -> int:
    pub = read_public_key(public_fp)
    c = read_value(c_fp, "ciphertext")
    k = read_value(constant_fp, "constant")
    c2 = homomorphic_multiply_constant(c, k, pub, policy)
    write_value(out_fp, c2)
    return c2
