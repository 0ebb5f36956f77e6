# paillier/arith.py
from concurrent.futures import ThreadPoolExecutor
import gmpy2
from gmpy2 import mpz, powmod, invert, next_prime
from .errors import InverseError
from .utils import bit_mask

def modinv(a: int, m: int) -> int:
    try:
        return int(invert(mpz(a), mpz(m)))
    except ZeroDivisionError:
        raise InverseError("Modular inverse does not exist") from None

def lcm(a: int, b: int) -> int:
    return int(gmpy2.lcm(mpz(a), mpz(b)))

def gen_prime(bits: int, source) -> int:
    """Draw `bits` random bits, force the top bit and advance to the next probable prime."""
    rnd = mpz(source(bits)) & bit_mask(bits)
    rnd = rnd.bit_set(bits - 1)
    return int(next_prime(rnd))

# -----------------------------
# CRT exponentiation
# -----------------------------
def _branch(base, exp, modulus):
    # the context is per thread; without it powmod holds the GIL and the branches serialize
    with gmpy2.context(allow_release_gil=True):
        return powmod(mpz(base) % modulus, mpz(exp), modulus)

def crt_exponentiation(base: int, exp_p: int, exp_q: int, pinvq: int, p: int, q: int, parallel: bool = False) -> int:
    """Compute base^e mod p*q from the exponentiations mod p and mod q.

    Recombination follows Garner: y_p + p * pinvq * (y_q - y_p) mod p*q.
    p and q must be coprime and pinvq must be p^-1 mod q; nothing here
    checks it. With `parallel` the two branches run in separate threads.
    """
    p, q = mpz(p), mpz(q)
    if parallel:
        with ThreadPoolExecutor(max_workers=2) as pool:
            fut_p = pool.submit(_branch, base, exp_p, p)
            fut_q = pool.submit(_branch, base, exp_q, q)
            res_p, res_q = fut_p.result(), fut_q.result()
    else:
        res_p = _branch(base, exp_p, p)
        res_q = _branch(base, exp_q, q)
    result = (res_q - res_p) * p * mpz(pinvq) + res_p
    return int(result % (p * q))
