import numpy as np
import pytest
from paillier import (
    encrypt_array, decrypt_array, add_arrays, multiply_array_constant, encrypted_sum, decrypt,
)

def test_array_round_trip(small_keypair):
    pub, priv = small_keypair
    values = [1, 2, 3, 2 ** 100, 0]
    enc = encrypt_array(values, pub)
    assert enc.dtype == object
    assert enc.shape == (5,)
    assert list(decrypt_array(enc, priv)) == values

def test_numpy_integer_input(small_keypair):
    pub, priv = small_keypair
    values = np.arange(6, dtype=np.int64).reshape(2, 3)
    dec = decrypt_array(encrypt_array(values, pub), priv)
    assert dec.shape == (2, 3)
    assert dec.tolist() == values.tolist()

def test_elementwise_operations(small_keypair):
    pub, priv = small_keypair
    a = encrypt_array([1, 2, 3, 4], pub)
    b = encrypt_array([7, 11, 13, 17], pub)
    assert list(decrypt_array(add_arrays(a, b, pub), priv)) == [8, 13, 16, 21]
    assert list(decrypt_array(multiply_array_constant(a, 5, pub), priv)) == [5, 10, 15, 20]

def test_encrypted_sum(small_keypair):
    pub, priv = small_keypair
    enc = encrypt_array([10, 20, 30, 40], pub)
    assert decrypt(encrypted_sum(enc, pub), priv) == 100
    assert decrypt(encrypted_sum([], pub), priv) == 0

def test_shape_mismatch(small_keypair):
    pub, _ = small_keypair
    with pytest.raises(ValueError):
        add_arrays(encrypt_array([1, 2], pub), encrypt_array([1, 2, 3], pub), pub)

def test_empty_arrays(small_keypair):
    pub, priv = small_keypair
    assert encrypt_array([], pub).size == 0
    assert decrypt_array([], priv).size == 0
