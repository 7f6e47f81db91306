import sys
import argparse

from . import __version__, log
from .engine import available_algorithms, decrypt, encrypt, get_strategy
from .errors import CipherError, DecryptionError
from .log import log_info
from .registry import LEGACY_NAMES, Algorithm

# ==========================================
#  CLI LOGIC
# ==========================================


def list_ciphers():
    """Print all available ciphers and exit."""
    print("\nAvailable Ciphers:")
    print("=" * 72)
    for strategy in available_algorithms():
        key_flag = "key" if strategy.requires_key else "---"
        print(f"  {strategy.name:<20} [{key_flag}]  {strategy.description}")
    print("=" * 72)
    aliases = ", ".join(f"{alias}={algo.value}" for alias, algo in LEGACY_NAMES.items())
    print(f"\nLegacy names: {aliases}")
    print(f"Total: {len(available_algorithms())} cipher(s) registered.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cipher-engine",
        description=f"Classical Cipher Engine v{__version__} (shift, substitution, Vigenere, Hill, Playfair, AES/DES)",
        formatter_class=argparse.RawTextHelpFormatter
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    method_help = "\n".join(f"  {s.name:<20}: {s.description}" for s in available_algorithms())

    # Legacy names are accepted as well, so no argparse choices here
    parser.add_argument("-a", "--algorithm", default=Algorithm.SHIFT.value, metavar="NAME",
                        help=f"Select cipher algorithm (default: shift).\n{method_help}")

    action_group = parser.add_mutually_exclusive_group(required=True)
    action_group.add_argument("-e", "--encrypt", action="store_true", help="Encrypt mode")
    action_group.add_argument("-d", "--decrypt", action="store_true", help="Decrypt mode")
    action_group.add_argument("-l", "--list", action="store_true", help="List all available ciphers")

    parser.add_argument("-k", "--key", help="Cipher key (required by shift, polyalphabetic, digraph and modern modes)")

    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")

    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-t", "--text", help="Direct text input")
    io_group.add_argument("-i", "--input", help="Input file path")

    parser.add_argument("-o", "--output", help="Output file path")
    return parser


def read_source(args) -> str:
    if args.text is not None:
        return args.text
    if args.input:
        try:
            with open(args.input, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.input}' not found.")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    print("[CIPHER] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        sys.exit(0)


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    log.set_verbose(args.verbose)

    if args.list:
        list_ciphers()
        sys.exit(0)

    try:
        strategy = get_strategy(args.algorithm)
    except CipherError as e:
        parser.error(str(e))

    # 1. READ INPUT
    source_text = read_source(args)
    if args.decrypt:
        # Trailing newline from files/stdin is not part of the ciphertext
        source_text = source_text.rstrip("\r\n")

    # 2. RUN CIPHER
    phase = "Encrypt" if args.encrypt else "Decrypt"
    try:
        if args.encrypt:
            result = encrypt(source_text, args.key, strategy.algorithm)
        else:
            result = decrypt(source_text, args.key, strategy.algorithm)
    except DecryptionError as e:
        log_info(f"'{strategy.name}' rejected the key or ciphertext.")
        sys.exit(f"{phase} Error: {e}")
    except CipherError as e:
        sys.exit(f"{phase} Error: {e}")

    # 3. WRITE OUTPUT
    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result)
                f.write("\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
        log_info(f"Result written to {args.output}")
    else:
        print(result)


if __name__ == "__main__":
    main()
