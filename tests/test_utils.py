import pytest
from paillier import DeviceRandom, EntropyError, urandom_bits, int_to_hex, hex_to_int, PaillierParams

def test_device_random_reads_big_endian(tmp_path):
    dev = tmp_path / "random"
    dev.write_bytes(bytes([0x12, 0x34, 0x56, 0x78]))
    assert DeviceRandom(str(dev))(16) == 0x1234
    assert DeviceRandom(str(dev))(32) == 0x12345678

def test_device_random_masks_to_bit_count(tmp_path):
    dev = tmp_path / "random"
    dev.write_bytes(b"\xff\xff")
    assert DeviceRandom(str(dev))(12) == 0xfff

def test_device_random_short_read(tmp_path):
    dev = tmp_path / "random"
    dev.write_bytes(b"\x01")
    with pytest.raises(EntropyError):
        DeviceRandom(str(dev))(64)

def test_device_random_missing_device(tmp_path):
    with pytest.raises(EntropyError):
        DeviceRandom(str(tmp_path / "nope"))(8)

def test_urandom_bits_range():
    for bits in (1, 8, 1024):
        assert 0 <= urandom_bits(bits) < 2 ** bits

def test_hex_helpers():
    assert int_to_hex(0) == "0"
    assert int_to_hex(0xDEADBEEF) == "deadbeef"
    assert hex_to_int(" DEADbeef\n") == 0xdeadbeef
    assert hex_to_int("0x10") == 16

def test_params_validation():
    assert PaillierParams().validate().bits == 2048
    with pytest.raises(ValueError):
        PaillierParams(bits=1025).validate()
    with pytest.raises(ValueError):
        PaillierParams(range_policy="ignore").validate()
