"""
MT19937-64 command line.

Examples:
  python3 -m mt19937_64 --seed 0 --count 5
  python3 -m mt19937_64 --seed 0 --count 3 --kind real_open --json
  python3 -m mt19937_64 --verify
  python3 -m mt19937_64 --list
"""

import sys
import json
import logging
import argparse
from typing import List, Optional

from .config import load_settings, configure_logging
from .conformance import verify_conformance
from .generator import MT19937_64
from .registry import OUTPUT_REGISTRY, PRNG_INFO, get_output_info, list_output_kinds

logger = logging.getLogger(__name__)


def build_parser(default_count: int) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mt19937-64",
        description="MT19937-64: draw values from the five-term 64-bit Mersenne Twister",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )

    mode_group = parser.add_mutually_exclusive_group()
    mode_group.add_argument("--verify", action="store_true",
                            help="Check the generator against the pinned reference vectors")
    mode_group.add_argument("--list", action="store_true",
                            help="List output kinds")

    parser.add_argument("--seed", type=int, default=None,
                        help="Seed (default: lazy default seed 987654321)")
    parser.add_argument("--count", type=int, default=default_count,
                        help=f"Number of values to draw (default: {default_count})")
    parser.add_argument("--skip", type=int, default=0,
                        help="Words to discard before drawing")
    parser.add_argument("--kind", choices=list_output_kinds(), default="uint64",
                        help="Output kind (default: uint64)")
    parser.add_argument("--hex", action="store_true",
                        help="Print uint64 values in hexadecimal")
    parser.add_argument("--json", action="store_true",
                        help="Output as JSON")
    parser.add_argument("--dump-state", action="store_true",
                        help="Print the generator state after drawing")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Enable debug logging")
    return parser


def _format_value(value, as_hex: bool) -> str:
    if isinstance(value, int):
        return f"0x{value:016x}" if as_hex else str(value)
    return repr(value)


def draw(seed: Optional[int], count: int, skip: int) -> MT19937_64:
    if count < 0 or skip < 0:
        raise ValueError(f"--count and --skip must be non-negative (count={count}, skip={skip})")
    gen = MT19937_64()
    if seed is not None:
        gen.seed(seed)
    for _ in range(skip):
        gen.fetch_word()
    return gen


def run_verify(as_json: bool) -> int:
    report = verify_conformance()
    if as_json:
        print(json.dumps(report, indent=2))
    else:
        print(f"\n{'='*60}")
        print("MT19937-64 CONFORMANCE")
        print(f"{'='*60}")
        for c in report['checks']:
            mark = "✅" if c['match'] else "❌"
            print(f"  {mark} seed={c['seed']:<10} {c['check']}")
        passed = sum(c['match'] for c in report['checks'])
        print(f"\n{passed}/{len(report['checks'])} checks passed")
    return 0 if report['passed'] else 1


def run_list(as_json: bool) -> int:
    if as_json:
        kinds = {name: {k: v for k, v in info.items() if k != 'value_type'}
                 for name, info in OUTPUT_REGISTRY.items()}
        print(json.dumps({'prng': PRNG_INFO, 'kinds': kinds}, indent=2))
        return 0
    print(f"{PRNG_INFO['description']}")
    print(f"  State: {PRNG_INFO['state_size']} bytes, period 2^{PRNG_INFO['period_exponent']}-1")
    for name in list_output_kinds():
        info = get_output_info(name)
        print(f"  {name:15} {info['range']:12} {info['description']}")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    parser = build_parser(settings.default_count)
    args = parser.parse_args(argv)

    configure_logging("DEBUG" if args.verbose else settings.log_level)

    try:
        if args.verify:
            return run_verify(args.json)
        if args.list:
            return run_list(args.json)

        gen = draw(args.seed, args.count, args.skip)
        next_value = getattr(gen, get_output_info(args.kind)['method'])
        values = [next_value() for _ in range(args.count)]

        if args.json:
            payload = {
                'seed': args.seed,
                'kind': args.kind,
                'skip': args.skip,
                'values': values,
            }
            if args.dump_state:
                payload['state'] = gen.getstate().model_dump()
            print(json.dumps(payload, indent=2))
        else:
            for value in values:
                print(_format_value(value, args.hex))
            if args.dump_state:
                print(gen.getstate().to_json())
        return 0

    except ValueError as e:
        logger.error(f"{e}")
        return 2


if __name__ == "__main__":
    sys.exit(main())
