import math
import pytest
from paillier import keygen, ell, urandom_bits, InverseError, PublicKey

def test_public_and_private_share_modulus(keypair):
    pub, priv = keypair
    assert pub.n == priv.n
    assert pub.bits == priv.bits == 1024
    assert priv.public_key() == pub

def test_modulus_shape(pub):
    assert pub.n % 2 == 1
    assert 1022 <= pub.n.bit_length() <= 1024
    assert pub.n_squared == pub.n ** 2

def test_private_key_relations(priv):
    n = priv.n
    assert priv.p2 * priv.q2 == n * n
    assert (priv.p2 * priv.p2invq2) % priv.q2 == 1
    assert (n * priv.ninv) % (1 << priv.bits) == 1
    p, q = math.isqrt(priv.p2), math.isqrt(priv.q2)
    assert p * q == n
    assert priv.lam == math.lcm(p - 1, q - 1)

def test_mu_inverts_ell_of_generator(priv):
    n = priv.n
    t = pow(n + 1, priv.lam, n * n)
    assert (ell(t, priv.ninv, priv.bits) * priv.mu) % n == 1

def test_ell_is_exact_division():
    n = 3233  # 61 * 53
    bits = 12
    ninv = pow(n, -1, 1 << bits)
    for k in (0, 1, 7, 3232):
        assert ell(1 + k * n, ninv, bits) == k

def test_keygen_parallel():
    pub, priv = keygen(128, prime_source=urandom_bits, parallel=True)
    assert isinstance(pub, PublicKey)
    assert (pub.n * priv.ninv) % (1 << 128) == 1

@pytest.mark.parametrize("bits", [0, 15, 17, 1023, -2])
def test_keygen_rejects_bad_bit_length(bits):
    with pytest.raises(ValueError):
        keygen(bits, prime_source=urandom_bits)

def test_keygen_equal_primes_is_fatal():
    # a constant source makes p == q, so p^2 has no inverse mod q^2
    with pytest.raises(InverseError):
        keygen(64, prime_source=lambda bits: 12345)

def test_keys_are_immutable(pub):
    with pytest.raises(AttributeError):
        pub.n = 5
