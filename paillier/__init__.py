# paillier/__init__.py
from .params import PaillierParams, DEFAULT_BITS, RANGE_POLICIES, bcolors
from .errors import PaillierError, InverseError, EntropyError, RangeError, SerializationError
from .utils import urandom_bits, DeviceRandom, int_to_hex, hex_to_int
from .arith import modinv, lcm, gen_prime, crt_exponentiation
from .keys import PublicKey, PrivateKey, ell, keygen
from .scheme import check_range, encrypt, decrypt
from .homomorphic import (
    homomorphic_add, homomorphic_multiply_constant,
    homomorphic_add_files, homomorphic_mul_files,
)
from .serialization import (
    write_value, read_value,
    write_public_key, read_public_key, write_private_key, read_private_key,
    dumps_public_key, loads_public_key, dumps_private_key, loads_private_key,
)
from .batch import encrypt_array, decrypt_array, add_arrays, multiply_array_constant, encrypted_sum
from .public_api import (
    keygen_str, encrypt_str, decrypt_str,
    homomorphic_add_str, homomorphic_multc_str,
)

__version__ = "0.1.0"
