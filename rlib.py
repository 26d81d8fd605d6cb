"""CLI entry point for rlib — Ruby-style string and path functions on byte strings."""

import argparse
import os
import sys

import pathname
import probe
from bytestring import ByteString, RStringError

# Subcommand name -> (help, argument names, function taking ByteStrings)
PATH_COMMANDS = {
    "basename": ("Final path component", ["path"], pathname.basename),
    "dirname": ("Path without its final component", ["path"], pathname.dirname),
    "extname": ("Extension of the final component", ["path"], pathname.extname),
}

STRING_COMMANDS = {
    "chomp": ("Remove one trailing line terminator", ["string"], ByteString.chomp),
    "strip": ("Remove surrounding whitespace", ["string"], ByteString.strip),
    "lstrip": ("Remove leading whitespace", ["string"], ByteString.lstrip),
    "rstrip": ("Remove trailing whitespace", ["string"], ByteString.rstrip),
    "upcase": ("ASCII upper case", ["string"], ByteString.upcase),
    "downcase": ("ASCII lower case", ["string"], ByteString.downcase),
    "reverse": ("Reverse byte order", ["string"], ByteString.reverse),
    "gsub": ("Replace every occurrence of a literal pattern",
             ["string", "pattern", "replacement"], ByteString.gsub),
}


COMMANDS = {**PATH_COMMANDS, **STRING_COMMANDS}


def _arg(value: str) -> ByteString:
    return ByteString.new(os.fsencode(value))


def _write(out, data: bytes):
    """Write raw bytes and a newline. Text-only streams get the fsdecoded form."""
    if hasattr(out, "buffer"):
        out.flush()
        out.buffer.write(data + b"\n")
        out.buffer.flush()
    else:
        out.write(os.fsdecode(data) + "\n")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rlib",
        description="rlib — Ruby-style string and path functions on byte strings",
    )
    sub = parser.add_subparsers(dest="command")

    for name, (help_text, arg_names, _) in COMMANDS.items():
        p = sub.add_parser(name, help=help_text)
        for arg_name in arg_names:
            p.add_argument(arg_name)

    p = sub.add_parser("join", help="Join segments with the path separator")
    p.add_argument("segments", nargs="+", help="Path segments")

    p = sub.add_parser("split", help="Split a string on a literal separator, one part per line")
    p.add_argument("string")
    p.add_argument("separator")

    p = sub.add_parser("probe", help="Report whether a path exists, is a directory or a file")
    p.add_argument("path")

    return parser


def run(args, out=None) -> None:
    """Execute a parsed command, writing results to out. Raises RStringError on failure."""
    out = out or sys.stdout
    if args.command in COMMANDS:
        _, arg_names, fn = COMMANDS[args.command]
        result = fn(*[_arg(getattr(args, a)) for a in arg_names])
        _write(out, result.to_bytes())
    elif args.command == "join":
        _write(out, pathname.join([_arg(s) for s in args.segments]).to_bytes())
    elif args.command == "split":
        for part in _arg(args.string).split(_arg(args.separator)):
            _write(out, part.to_bytes())
    elif args.command == "probe":
        info = probe.OsProbe().probe(_arg(args.path))
        _write(out, f"exists: {info.exists}".encode())
        _write(out, f"directory: {info.is_dir}".encode())
        _write(out, f"file: {info.is_regular}".encode())


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    try:
        run(args)
    except RStringError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
