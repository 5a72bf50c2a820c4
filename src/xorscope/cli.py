"""
Command-Line Interface (CLI) for Xorscope
Primary interface for analysts working in terminals
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from . import __version__
from .core.codecs import Scheme
from .core.config import BreakerConfig
from .core.breaker_presets import PresetLibrary
from .core.engine import XorscopeEngine
from .core.errors import XorscopeError
from .utils.report_generator import ReportGenerator


def _scheme(name: str) -> Scheme:
    try:
        return Scheme.from_name(name)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e))


def _scheme_or_raw(name: str):
    if name.strip().lower() == 'raw':
        return None
    return _scheme(name)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser with all subcommands"""
    parser = argparse.ArgumentParser(
        prog='xorscope',
        description='Xorscope - single-byte and repeating-key XOR cryptanalysis',
        epilog='For education and defensive analysis. MIT License.'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'Xorscope v{__version__}'
    )
    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Show progress messages'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Show per-key-length and per-column details, tracebacks on error'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    # convert
    p_convert = subparsers.add_parser('convert', help='Re-encode hex <-> Base64')
    p_convert.add_argument('input', type=str, help='Encoded input')
    p_convert.add_argument('--from', dest='source', type=_scheme, default=Scheme.HEX,
                           help='Input encoding (default: hex)')
    p_convert.add_argument('--to', dest='target', type=_scheme, default=Scheme.BASE64,
                           help='Output encoding (default: base64)')

    # fixed-xor
    p_fixed = subparsers.add_parser('fixed-xor', help='XOR two equal-length buffers')
    p_fixed.add_argument('lhs', type=str, help='First encoded buffer')
    p_fixed.add_argument('rhs', type=str, help='Second encoded buffer')
    p_fixed.add_argument('--scheme', type=_scheme, default=Scheme.HEX,
                         help='Encoding of both buffers and the output (default: hex)')

    # encrypt
    p_encrypt = subparsers.add_parser('encrypt', help='Repeating-key XOR plaintext')
    p_encrypt.add_argument('plaintext', type=str, nargs='?', help='Plaintext (or use --file)')
    p_encrypt.add_argument('--file', type=str, help='Read plaintext bytes from file')
    p_encrypt.add_argument('--key', type=str, required=True, help='Key text')
    p_encrypt.add_argument('--scheme', type=_scheme, default=Scheme.HEX,
                           help='Output encoding (default: hex)')

    # solve
    p_solve = subparsers.add_parser('solve', help='Brute-force a single-byte XOR key')
    p_solve.add_argument('input', type=str, help='Encoded ciphertext')
    p_solve.add_argument('--scheme', type=_scheme, default=Scheme.HEX,
                         help='Input encoding (default: hex)')
    p_solve.add_argument('--top', type=int, default=1, metavar='N',
                         help='Show the N best keys (default: 1)')

    # break
    p_break = subparsers.add_parser('break', help='Break repeating-key XOR')
    p_break.add_argument('input', type=str, nargs='?', help='Encoded ciphertext (or use --file)')
    p_break.add_argument('--file', type=str, help='Read ciphertext from file')
    p_break.add_argument('--scheme', type=_scheme_or_raw, default=Scheme.BASE64,
                         help='Input encoding: base64, hex or raw (default: base64)')
    p_break.add_argument('--preset', type=str, choices=PresetLibrary.list_presets(),
                         help='Key-length search preset')
    p_break.add_argument('--min-len', type=int, metavar='N', help='Smallest key length to try')
    p_break.add_argument('--max-len', type=int, metavar='N', help='Largest key length to try')
    p_break.add_argument('--candidates', type=int, metavar='N',
                         help='Number of key lengths to solve')
    p_break.add_argument('--key-length', type=int, action='append', metavar='N',
                         help='Skip estimation and try this key length (repeatable)')
    p_break.add_argument('--workers', type=int, metavar='N', help='Threads for column solving')
    p_break.add_argument('--name', type=str, default='ciphertext',
                         help='Base name for output files (default: ciphertext)')
    p_break.add_argument('--out', '--output', type=str,
                         help='Directory for JSON (and report) output')
    p_break.add_argument('--report', action='store_true',
                         help='Write a Markdown report (requires --out)')
    p_break.add_argument('--json', dest='json_only', action='store_true',
                         help='Output JSON only (machine-readable)')

    return parser


def configure_logging(args):
    """Route core logging to stderr at the requested level"""
    if args.debug:
        level = logging.DEBUG
    elif args.verbose:
        level = logging.INFO
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format='[%(levelname)s] %(name)s: %(message)s',
        stream=sys.stderr
    )


def build_config(args) -> BreakerConfig:
    """Build a BreakerConfig from preset and explicit flags"""
    overrides = {
        'min_key_length': args.min_len,
        'max_key_length': args.max_len,
        'key_length_candidates': args.candidates,
        'workers': args.workers,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}

    if args.preset:
        return BreakerConfig.from_preset(args.preset, **overrides)
    return BreakerConfig(**overrides)


def _read_input(args, binary: bool):
    if args.file:
        input_path = Path(args.file)
        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {args.file}")
        return input_path.read_bytes() if binary else input_path.read_text()
    if args.input is None:
        raise ValueError("No input given; pass it as an argument or use --file")
    return args.input


def cmd_convert(args, engine: XorscopeEngine):
    print(engine.convert(args.input, args.source, args.target).decode('ascii'))


def cmd_fixed_xor(args, engine: XorscopeEngine):
    print(engine.fixed_xor(args.lhs, args.rhs, args.scheme).decode('ascii'))


def cmd_encrypt(args, engine: XorscopeEngine):
    if args.file:
        plaintext = Path(args.file).read_bytes()
    elif args.plaintext is not None:
        plaintext = args.plaintext
    else:
        raise ValueError("No plaintext given; pass it as an argument or use --file")
    print(engine.encrypt(plaintext, args.key, args.scheme).decode('ascii'))


def cmd_solve(args, engine: XorscopeEngine):
    if args.top > 1:
        candidates = engine.rank_single_byte(args.input, args.scheme, top_n=args.top)
    else:
        candidates = [engine.solve_single_byte(args.input, args.scheme)]

    if not candidates or not candidates[0].found:
        print("[!] No key produced English-like text")
        return

    for rank, candidate in enumerate(candidates, 1):
        print(f"[+] #{rank} key {candidate.key} (0x{candidate.key:02x}) "
              f"score {candidate.score:.4f}: {candidate.text}")


def cmd_break(args, engine: XorscopeEngine):
    if args.report and not args.out:
        raise ValueError("--report needs --out to know where to write")

    data = _read_input(args, binary=args.scheme is None)

    if not args.json_only:
        print(f"[*] Breaking repeating-key XOR ({args.scheme.value if args.scheme else 'raw'} input)")
        print("=" * 60)

    result = engine.break_ciphertext(data, args.scheme, key_lengths=args.key_length)

    if args.json_only:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        for r in result.results:
            distance = f"{r.distance:.4f}" if r.distance is not None else "n/a"
            print(f"\n[+] Key length {r.key_length} (distance {distance})")
            print(f"    Key: {r.key!r}")
            print(f"    Plaintext: {r.plaintext[:120]!r}")
        print("=" * 60)

    if args.out:
        json_file = engine.export_results(result, args.out, args.name)
        if not args.json_only:
            print(f"[+] JSON summary: {json_file}")

        if args.report:
            report_file = Path(args.out) / f"{args.name}_report.md"
            report_file.write_text(ReportGenerator().generate_markdown(result, args.name))
            if not args.json_only:
                print(f"[+] Markdown report: {report_file}")


COMMANDS = {
    'convert': cmd_convert,
    'fixed-xor': cmd_fixed_xor,
    'encrypt': cmd_encrypt,
    'solve': cmd_solve,
    'break': cmd_break,
}


def main(argv=None):
    """
    Main CLI entry point

    Handles argument parsing and dispatches to the subcommand
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args)

    try:
        config = build_config(args) if args.command == 'break' else BreakerConfig()
        engine = XorscopeEngine(config=config)
        COMMANDS[args.command](args, engine)

    except KeyboardInterrupt:
        print(f"\n\n[!] Interrupted by user", file=sys.stderr)
        sys.exit(130)

    except (XorscopeError, ValueError, OSError) as e:
        print(f"[!] Error: {e}", file=sys.stderr)
        if args.debug:
            import traceback
            traceback.print_exc()
        sys.exit(1)


if __name__ == '__main__':
    main()
