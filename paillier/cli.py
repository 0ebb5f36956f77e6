import io
import sys
import logging
import argparse
from contextlib import contextmanager
from .errors import PaillierError
from .params import PaillierParams, DEFAULT_BITS, RANDOM_DEVICE, bcolors
from .utils import DeviceRandom, int_to_hex
from .public_api import (
    keygen_str, encrypt_str, decrypt_str,
    homomorphic_add_str, homomorphic_multc_str,
)

logger = logging.getLogger("paillier")

# -----------------------------
# Logging
# -----------------------------
class ColorFormatter(logging.Formatter):
    COLORS = {
        logging.DEBUG: bcolors.GREY,
        logging.WARNING: bcolors.WARNING,
        logging.ERROR: bcolors.FAIL,
        logging.CRITICAL: bcolors.FAIL,
    }

    def format(self, record):
        msg = super().format(record)
        color = self.COLORS.get(record.levelno)
        return f"{color}{msg}{bcolors.ENDC}" if color else msg

def configure_logging(verbose: bool = False):
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(ColorFormatter("%(levelname)s: %(message)s"))
    logger.handlers[:] = [handler]
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

# -----------------------------
# File Helpers
# -----------------------------
@contextmanager
def open_stream(path: str, mode: str):
    """Open `path`, with "-" standing for stdin or stdout."""
    if path == "-":
        yield sys.stdout if "w" in mode else sys.stdin
        return
    with open(path, mode) as f:
        yield f

def write_output(path: str, text: str):
    """Write `text` to `path` (or stdout for "-") once the command has succeeded."""
    with open_stream(path, "w") as f:
        f.write(text)

# -----------------------------
# Commands
# -----------------------------
def cmd_keygen(args, params: PaillierParams):
    source = DeviceRandom(params.random_device)
    pub_buf, priv_buf = io.StringIO(), io.StringIO()
    keygen_str(pub_buf, priv_buf, params.bits, prime_source=source, parallel=params.parallel_crt)
    write_output(args.pubfile, pub_buf.getvalue())
    write_output(args.privfile, priv_buf.getvalue())

def cmd_encrypt(args, params: PaillierParams):
    out = io.StringIO()
    with open_stream(args.in_file, "r") as in_fp, open_stream(args.pubfile, "r") as pub_fp:
        encrypt_str(out, in_fp, pub_fp, policy=params.range_policy)
    write_output(args.out_file, out.getvalue())

def cmd_decrypt(args, params: PaillierParams):
    out = io.StringIO()
    with open_stream(args.in_file, "r") as in_fp, open_stream(args.privfile, "r") as priv_fp:
        decrypt_str(out, in_fp, priv_fp, policy=params.range_policy, parallel=params.parallel_crt)
    write_output(args.out_file, out.getvalue())

def cmd_hom_add(args, params: PaillierParams):
    out = io.StringIO()
    with open_stream(args.file1, "r") as c1_fp, open_stream(args.file2, "r") as c2_fp, \
            open_stream(args.pubfile, "r") as pub_fp:
        homomorphic_add_str(out, c1_fp, c2_fp, pub_fp, policy=params.range_policy)
    write_output(args.out_file, out.getvalue())

def cmd_hom_mul(args, params: PaillierParams):
    out = io.StringIO()
    with open_stream(args.file1, "r") as c_fp, open_stream(args.pubfile, "r") as pub_fp:
        if args.constant is not None:
            k_fp = io.StringIO(int_to_hex(args.constant) + "\n")
            homomorphic_multc_str(out, c_fp, k_fp, pub_fp, policy=params.range_policy)
        else:
            with open_stream(args.constant_file, "r") as k_fp:
                homomorphic_multc_str(out, c_fp, k_fp, pub_fp, policy=params.range_policy)
    write_output(args.out_file, out.getvalue())

COMMANDS = {
    "keygen": cmd_keygen,
    "encrypt": cmd_encrypt,
    "decrypt": cmd_decrypt,
    "hom_add": cmd_hom_add,
    "hom_mul": cmd_hom_mul,
}

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="paillier", description="Paillier cryptosystem with CRT acceleration")
    parser.add_argument("--strict", action="store_true", help="Reject out-of-range values instead of warning")
    parser.add_argument("--parallel", action="store_true", help="Run the CRT branches in two threads")
    parser.add_argument("--verbose", action="store_true", help="Print debug messages to stderr")
    subparsers = parser.add_subparsers(dest="command")

    # Subparser for key generation
    keygen_parser = subparsers.add_parser("keygen", help="Generate a key pair")
    keygen_parser.add_argument("--bits", type=int, default=DEFAULT_BITS, help="Bit length of the modulus n")
    keygen_parser.add_argument("--pubfile", default="paillier_pub.key", help="Public key file")
    keygen_parser.add_argument("--privfile", default="paillier_priv.key", help="Private key file")
    keygen_parser.add_argument("--random_device", default=RANDOM_DEVICE, help="Entropy device for prime generation")

    # Subparser for encryption
    encrypt_parser = subparsers.add_parser("encrypt", help="Encrypt a plaintext with a public key")
    encrypt_parser.add_argument("--pubfile", default="paillier_pub.key", help="Public key file")
    encrypt_parser.add_argument("--in_file", default="-", help="Plaintext file (hex)")
    encrypt_parser.add_argument("--out_file", default="-", help="Ciphertext file (hex)")

    # Subparser for decryption
    decrypt_parser = subparsers.add_parser("decrypt", help="Decrypt a ciphertext with a private key")
    decrypt_parser.add_argument("--privfile", default="paillier_priv.key", help="Private key file")
    decrypt_parser.add_argument("--in_file", default="-", help="Ciphertext file (hex)")
    decrypt_parser.add_argument("--out_file", default="-", help="Plaintext file (hex)")

    # Subparser for homomorphic addition
    hom_add_parser = subparsers.add_parser("hom_add", help="Homomorphic addition of two ciphertexts")
    hom_add_parser.add_argument("--pubfile", default="paillier_pub.key", help="Public key file")
    hom_add_parser.add_argument("--file1", required=True, help="First ciphertext file")
    hom_add_parser.add_argument("--file2", required=True, help="Second ciphertext file")
    hom_add_parser.add_argument("--out_file", default="-", help="Output ciphertext file")

    # Subparser for homomorphic multiplication by a constant
    hom_mul_parser = subparsers.add_parser("hom_mul", help="Homomorphic multiplication by a plaintext constant")
    hom_mul_parser.add_argument("--pubfile", default="paillier_pub.key", help="Public key file")
    hom_mul_parser.add_argument("--file1", required=True, help="Ciphertext file")
    constant_group = hom_mul_parser.add_mutually_exclusive_group(required=True)
    constant_group.add_argument("--constant_file", help="Constant file (hex)")
    constant_group.add_argument("--constant", type=int, help="Constant (decimal)")
    hom_mul_parser.add_argument("--out_file", default="-", help="Output ciphertext file")

    return parser

def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    if args.command is None:
        parser.print_help(sys.stderr)
        return 2

    params = PaillierParams(
        bits=getattr(args, "bits", DEFAULT_BITS),
        random_device=getattr(args, "random_device", RANDOM_DEVICE),
        range_policy="strict" if args.strict else "warn",
        parallel_crt=args.parallel,
    )
    try:
        params.validate()
        COMMANDS[args.command](args, params)
    except OSError as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC} cannot open file: {e}", file=sys.stderr)
        return 1
    except (PaillierError, ValueError) as e:
        print(f"{bcolors.FAIL}ERROR:{bcolors.ENDC} {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
