"""
Command-line front end
======================
    mpags-cipher [-i/--infile FILE] [-o/--outfile FILE] [-c/--cipher NAME]
                 [-k/--key KEY] [--encrypt/--decrypt] [--verbose]

Reads text from FILE or stdin, normalizes it to upper-case letters,
applies the chosen cipher and writes the result to FILE or stdout.
Errors are reported on stderr with a non-zero exit status.
"""

import argparse
import logging
import sys
from dataclasses import dataclass
from typing import List, Optional

from rich.console import Console
from rich.logging import RichHandler

from . import __version__
from .cipher import InvalidKey
from .dispatch import run_cipher
from .factory import cipher_factory
from .modes import CipherMode, CipherType
from .transform import transform_text

err_console = Console(stderr=True, soft_wrap=True)


class MissingArgument(ValueError):
    """A flag that takes a value was given without one."""


class UnknownArgument(ValueError):
    """An unrecognized flag, stray argument or unknown cipher name."""


@dataclass
class ProgramSettings:
    help_requested:    bool = False
    version_requested: bool = False
    verbose:           bool = False
    input_file:        str = ""
    output_file:       str = ""
    cipher_key:        str = ""
    cipher_mode:       CipherMode = CipherMode.ENCRYPT
    cipher_type:       CipherType = CipherType.CAESAR


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mpags-cipher",
        description="Encrypts/Decrypts input alphanumeric text using classical ciphers",
        add_help=False,
        allow_abbrev=False,
        exit_on_error=False,
    )
    parser.add_argument("-h", "--help", dest="help_requested", action="store_true",
                        help="Print this help message and exit")
    parser.add_argument("-v", "--version", dest="version_requested", action="store_true",
                        help="Print version information")
    parser.add_argument("-i", "--infile", dest="input_file", metavar="FILE", default="",
                        help="Read text to be processed from FILE (stdin if not supplied)")
    parser.add_argument("-o", "--outfile", dest="output_file", metavar="FILE", default="",
                        help="Write processed text to FILE (stdout if not supplied)")
    parser.add_argument("-c", "--cipher", dest="cipher_name", metavar="CIPHER",
                        default=CipherType.CAESAR.value,
                        help="caesar, playfair or vigenere - caesar is the default")
    parser.add_argument("-k", "--key", dest="cipher_key", metavar="KEY", default="",
                        help="Cipher key; a null key (no encryption) is used if not supplied")
    parser.add_argument("--encrypt", dest="cipher_mode", action="store_const",
                        const=CipherMode.ENCRYPT, default=CipherMode.ENCRYPT,
                        help="Encrypt the input text (default behaviour)")
    parser.add_argument("--decrypt", dest="cipher_mode", action="store_const",
                        const=CipherMode.DECRYPT,
                        help="Decrypt the input text")
    parser.add_argument("--verbose", action="store_true",
                        help="Log key parsing and dispatch details")
    return parser


def process_command_line(args: List[str]) -> ProgramSettings:
    """
    Parse `args` (program name excluded) into ProgramSettings.

    Raises MissingArgument or UnknownArgument; never exits the process.
    """
    parser = build_parser()
    try:
        namespace, extras = parser.parse_known_args(args)
    except argparse.ArgumentError as err:
        if "ignored explicit argument" in str(err):
            raise UnknownArgument(str(err)) from None
        raise MissingArgument(str(err)) from None
    if extras:
        raise UnknownArgument(" ".join(extras))

    try:
        cipher_type = CipherType(namespace.cipher_name.lower())
    except ValueError:
        raise UnknownArgument(f"unknown cipher '{namespace.cipher_name}'") from None

    return ProgramSettings(
        help_requested=namespace.help_requested,
        version_requested=namespace.version_requested,
        verbose=namespace.verbose,
        input_file=namespace.input_file,
        output_file=namespace.output_file,
        cipher_key=namespace.cipher_key,
        cipher_mode=namespace.cipher_mode,
        cipher_type=cipher_type,
    )


def configure_logging(verbose: bool) -> None:
    """INFO by default so the dispatcher's "waiting..." shows; DEBUG with --verbose."""
    pkg_logger = logging.getLogger("mpags_cipher")
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    if not any(isinstance(h, RichHandler) for h in pkg_logger.handlers):
        handler = RichHandler(console=err_console, show_time=False, show_path=False)
        handler.setFormatter(logging.Formatter(" %(message)s"))
        pkg_logger.addHandler(handler)


def _read_input(input_file: str) -> str:
    """Undecodable bytes are dropped, like any other non-letter."""
    if input_file:
        with open(input_file, encoding="utf-8", errors="ignore") as f:
            return f.read()
    buffer = getattr(sys.stdin, "buffer", None)
    if buffer is None:
        return sys.stdin.read()
    return buffer.read().decode("utf-8", errors="ignore")


def _error(message: str) -> int:
    err_console.print(f"[error] {message}", markup=False, highlight=False, style="red")
    return 1


def main(argv: Optional[List[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    try:
        settings = process_command_line(args)
    except MissingArgument as e:
        return _error(f"Missing argument: {e}")
    except UnknownArgument as e:
        return _error(f"Unknown argument: {e}")

    if settings.help_requested:
        print(build_parser().format_help())
        return 0
    if settings.version_requested:
        print(__version__)
        return 0

    configure_logging(settings.verbose)

    try:
        raw = _read_input(settings.input_file)
    except OSError:
        return _error(f"failed to open input file '{settings.input_file}'")
    input_text = transform_text(raw)

    try:
        cipher = cipher_factory(settings.cipher_type, settings.cipher_key)
    except InvalidKey as e:
        return _error(f"Invalid key: {e}")

    output_text = run_cipher(cipher, settings.cipher_type, input_text, settings.cipher_mode)

    if settings.output_file:
        try:
            with open(settings.output_file, "w") as f:
                f.write(output_text + "\n")
        except OSError:
            return _error(f"failed to open output file '{settings.output_file}'")
    else:
        sys.stdout.write(output_text + "\n")
    return 0
