import pytest
from paillier import keygen, urandom_bits

@pytest.fixture(scope="session")
def keypair():
    return keygen(1024, prime_source=urandom_bits)

@pytest.fixture(scope="session")
def pub(keypair):
    return keypair[0]

@pytest.fixture(scope="session")
def priv(keypair):
    return keypair[1]

@pytest.fixture(scope="session")
def small_keypair():
    return keygen(128, prime_source=urandom_bits)
