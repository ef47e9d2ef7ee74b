"""Command-line front end for the Base64 codec.

Usage:
    b64codec [-d] [--strict] [--encoding ENC] [-o FILE] [FILE]

Examples:
    echo -n foobar | b64codec             # prints Zm9vYmFy
    echo Zm9vYmFy | b64codec -d           # prints foobar
    b64codec --strict -d payload.b64      # reject truncated input
"""

import argparse
import sys
from typing import List, Optional

from . import __version__
from .base64_codec import Base64Codec
from .errors import DecodeError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="b64codec",
        description="Encode bytes as RFC 4648 Base64 text, or decode it back.",
    )
    parser.add_argument("input_file", nargs="?", default="-",
                        help="File to read (default: stdin, also when FILE is '-')")
    parser.add_argument("-d", "--decode", action="store_true", help="Decode instead of encode")
    parser.add_argument("--strict", action="store_true",
                        help="Fail on input that ends partway through a 4-symbol group")
    parser.add_argument("--encoding", default="utf-8",
                        help="Text encoding of decoded output and of the input when decoding (default: utf-8)")
    parser.add_argument("-o", "--output", dest="output_file", help="Write to FILE instead of stdout")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _read_input(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    with open(path, "rb") as f:
        return f.read()


def _write_output(path: Optional[str], text: str, encoding: str) -> None:
    if path is None:
        # Emit bytes in the requested encoding, not the one stdout was opened with
        stream = getattr(sys.stdout, "buffer", None)
        if stream is None:
            sys.stdout.write(text)
            sys.stdout.flush()
        else:
            sys.stdout.flush()
            stream.write(text.encode(encoding))
            stream.flush()
        return
    with open(path, "w", encoding=encoding, newline="") as f:
        f.write(text)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the command line tool.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit status
    """
    args = build_parser().parse_args(argv)

    try:
        codec = Base64Codec(strict=args.strict, encoding=args.encoding)
    except LookupError:
        print(f"b64codec: unknown encoding '{args.encoding}'", file=sys.stderr)
        return 1

    try:
        data = _read_input(args.input_file)
        if args.decode:
            # Non-text input bytes turn into U+FFFD and are reported as invalid characters
            text = data.decode(args.encoding, errors="replace").strip()
            result = codec.decode(text)
        else:
            result = codec.encode(data) + "\n"
        _write_output(args.output_file, result, args.encoding)
    except DecodeError as e:
        print(f"b64codec: {e}", file=sys.stderr)
        return 1
    except UnicodeEncodeError as e:
        print(f"b64codec: output cannot be written as {args.encoding}: {e.reason}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"b64codec: cannot open '{e.filename}': {e.strerror}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
