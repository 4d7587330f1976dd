import sys
import argparse
import string
from typing import List, Optional

from . import __version__
from .engine import CipherMode, PlayfairCipher, digraphs
from .table import Table

# Verbose mode (disabled by default, enabled with --verbose)
VERBOSE = False

def log_info(msg: str):
    """Print info message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[INFO] {msg}", file=sys.stderr)

def log_warn(msg: str):
    """Print warning message only if verbose mode is enabled."""
    if VERBOSE:
        print(f"[WARN] {msg}", file=sys.stderr)

# ==========================================
#  DISPLAY
# ==========================================

def format_table(table: Table) -> str:
    """Render the key square one row per line, e.g. ['K', 'E', 'Y', 'W', 'O']."""
    return "\n".join(str(row) for row in table.rows)


def format_result(result: str, mode: CipherMode) -> str:
    label = "Encrypted Text" if mode is CipherMode.ENCRYPT else "Decrypted Text"
    return f"{label}: {result}"


def report_normalization(text: str):
    """Log letters dropped by filtering and fillers added by pairing."""
    dropped = [c for c in text if c not in string.ascii_letters and not c.isspace()]
    if dropped:
        log_warn(f"Ignoring {len(dropped)} non-letter character(s): {''.join(dropped)!r}")
    if any(c in "Jj" for c in text):
        log_info("Treating J as I.")
    letters = sum(1 for c in text if c in string.ascii_letters)
    pairs = digraphs(text)
    fillers = len(pairs) * 2 - letters
    if fillers:
        log_info(f"Inserted {fillers} filler letter(s) across {len(pairs)} digraph(s).")

# ==========================================
#  CLI LOGIC
# ==========================================

def read_input(args) -> str:
    if args.input is not None:
        return args.input
    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                return f.read()
        except FileNotFoundError:
            sys.exit(f"Error: File '{args.file}' not found.")
        except OSError as e:
            sys.exit(f"Error reading input: {e}")
    if not sys.stdin.isatty():
        return sys.stdin.read()
    print("[PLAYFAIR] Paste input below. Ctrl+D (Unix) or Ctrl+Z (Win) to end:")
    try:
        return sys.stdin.read()
    except KeyboardInterrupt:
        sys.exit(0)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playfair",
        description="Encrypts or decrypts text using the Playfair cipher",
    )

    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    parser.add_argument("-k", "--key", required=True, metavar="KEY",
                        help="Sets the encryption/decryption key")
    parser.add_argument("-d", "--decrypt", action="store_true",
                        help="Decrypt the input text instead of encrypting")

    # I/O options
    io_group = parser.add_mutually_exclusive_group()
    io_group.add_argument("-i", "--input", metavar="TEXT",
                          help="The text to encrypt or decrypt")
    io_group.add_argument("-f", "--file", metavar="PATH",
                          help="Read the text to encrypt or decrypt from a file")

    parser.add_argument("-o", "--output", metavar="PATH",
                        help="Write the result to a file instead of printing it")
    parser.add_argument("-q", "--quiet", action="store_true",
                        help="Print only the result, without the table and label")

    # Verbose output
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable verbose output (info and warning messages)")
    return parser


def main(argv: Optional[List[str]] = None):
    global VERBOSE

    if argv is None:
        argv = sys.argv[1:]

    # Preliminary scan for --verbose so parsing problems can be logged too
    VERBOSE = "--verbose" in argv or "-v" in argv

    args = build_parser().parse_args(argv)
    VERBOSE = VERBOSE or args.verbose

    if not any(c in string.ascii_letters for c in args.key):
        log_warn("Key contains no letters; using the plain alphabet table.")

    # 1. BUILD TABLE
    playfair = PlayfairCipher(args.key)
    mode = CipherMode.DECRYPT if args.decrypt else CipherMode.ENCRYPT
    log_info(f"Mode: {mode.value}")

    # 2. READ INPUT
    source_text = read_input(args)
    report_normalization(source_text)

    # 3. ENCRYPT / DECRYPT
    result = playfair.run(source_text, mode)

    # 4. WRITE OUTPUT
    if not args.quiet:
        print("Generated Playfair Table:")
        print(format_table(playfair.table))

    if args.output:
        try:
            with open(args.output, "w", encoding="utf-8") as f:
                f.write(result + "\n")
        except OSError as e:
            sys.exit(f"Error writing output: {e}")
        log_info(f"Wrote {len(result)} character(s) to {args.output}")
    elif args.quiet:
        print(result)
    else:
        print(format_result(result, mode))

if __name__ == "__main__":
    main()
