# paillier/batch.py
import numpy as np
from .homomorphic import homomorphic_add, homomorphic_multiply_constant
from .keys import PublicKey, PrivateKey
from .scheme import encrypt, decrypt

def _as_object_array(values) -> np.ndarray:
    # object dtype keeps arbitrary-precision Python ints intact
    arr = np.asarray(values, dtype=object)
    return np.vectorize(int, otypes=[object])(arr) if arr.size else arr

def encrypt_array(values, pub: PublicKey, random_source=None, policy: str = "warn") -> np.ndarray:
    arr = _as_object_array(values)
    enc = np.frompyfunc(lambda m: encrypt(m, pub, random_source, policy), 1, 1)
    return np.asarray(enc(arr), dtype=object) if arr.size else arr

def decrypt_array(ciphertexts, priv: PrivateKey, policy: str = "warn", parallel: bool = False) -> np.ndarray:
    arr = _as_object_array(ciphertexts)
    dec = np.frompyfunc(lambda c: decrypt(c, priv, policy, parallel), 1, 1)
    return np.asarray(dec(arr), dtype=object) if arr.size else arr

def add_arrays(a, b, pub: PublicKey, policy: str = "warn") -> np.ndarray:
    a, b = _as_object_array(a), _as_object_array(b)
    if a.shape != b.shape:
        raise ValueError(f"Ciphertext arrays must have the same shape, got {a.shape} and {b.shape}")
    add = np.frompyfunc(lambda x, y: homomorphic_add(x, y, pub, policy), 2, 1)
    return np.asarray(add(a, b), dtype=object) if a.size else a

def multiply_array_constant(a, k: int, pub: PublicKey, policy: str = "warn") -> np.ndarray:
    a = _as_object_array(a)
    mul = np.frompyfunc(lambda x: homomorphic_multiply_constant(x, int(k), pub, policy), 1, 1)
    return np.asarray(mul(a), dtype=object) if a.size else a

def encrypted_sum(a, pub: PublicKey) -> int:
    """Homomorphic sum of every element; 1 is the ciphertext identity."""
    n2 = pub.n_squared
    total = 1
    for c in _as_object_array(a).ravel():
        total = (total * c) % n2
    return total
