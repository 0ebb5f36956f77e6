from dataclasses import dataclass

# -----------------------------
# CLI Colors
# -----------------------------
class bcolors:
    GREY = '\033[90m'
    WARNING = '\033[93m'
    FAIL = '\033[91m'
    ENDC = '\033[0m'

DEFAULT_BITS = 2048
MIN_BITS = 16
RANDOM_DEVICE = "/dev/random"
RANGE_POLICIES = ("warn", "strict")

@dataclass
class PaillierParams:
    bits: int = DEFAULT_BITS  # bit length of the modulus n
    random_device: str = RANDOM_DEVICE  # blocking source for prime generation
    range_policy: str = "warn"
    parallel_crt: bool = False

    def validate(self) -> "PaillierParams":
        check_bits(self.bits)
        check_policy(self.range_policy)
        return self

def check_bits(bits: int) -> int:
    if not isinstance(bits, int) or bits < MIN_BITS or bits % 2:
        raise ValueError(f"Bit length must be an even integer >= {MIN_BITS}, got {bits!r}")
    return bits

def check_policy(policy: str) -> str:
    if policy not in RANGE_POLICIES:
        raise ValueError(f"Unknown range policy {policy!r}, expected one of {RANGE_POLICIES}")
    return policy
