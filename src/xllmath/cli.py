import argparse
import logging
import sys

from .black_scholes import normal_cdf, bsm_put, bsm_put_strict
from .book import read_rows, price_book, write_results
from .core import DomainError
from .logging_config import setup_logging
from .special import tgamma

logger = logging.getLogger(__name__)


def add_put_args(parser: argparse.ArgumentParser):
    parser.add_argument("--r", type=float, required=True, help="cont. risk-free, annualised")
    parser.add_argument("--S", type=float, required=True, help="spot")
    parser.add_argument("--sigma", type=float, required=True, help="annualised vol")
    parser.add_argument("--K", type=float, required=True, help="strike")
    parser.add_argument("--t", type=float, required=True, help="years to expiry")
    parser.add_argument("--strict", action="store_true",
                        help="fail instead of printing nan on invalid inputs")


def cmd_tgamma(args):
    print(f"{tgamma(args.x):.10f}")
    return 0


def cmd_cdf(args):
    print(f"{normal_cdf(args.x):.10f}")
    return 0


def cmd_put(args):
    fn = bsm_put_strict if args.strict else bsm_put
    try:
        px = fn(args.r, args.S, args.sigma, args.K, args.t)
    except DomainError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    print(f"{px:.10f}")
    return 0


def cmd_book(args):
    rows = read_rows(args.input)
    logger.info("Pricing %d rows from %s", len(rows), args.input)
    results = price_book(rows, strict=args.strict)
    write_results(results, args.output)
    logger.info("Results written to %s", args.output)
    return 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="xllmath", description="Add-in math functions")
    p.add_argument("--log-level", default="WARNING", help="e.g. INFO, DEBUG")
    p.add_argument("--log-file", default=None, help="optional log file path")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_g = sub.add_parser("tgamma", help="Gamma function")
    p_g.add_argument("x", type=float)
    p_g.set_defaults(func=cmd_tgamma)

    p_c = sub.add_parser("cdf", help="standard-normal CDF")
    p_c.add_argument("x", type=float)
    p_c.set_defaults(func=cmd_cdf)

    p_put = sub.add_parser("put", help="Black-Scholes-Merton put value")
    add_put_args(p_put)
    p_put.set_defaults(func=cmd_put)

    p_b = sub.add_parser("book", help="batch-price a CSV of puts")
    p_b.add_argument("--input", required=True, help="CSV with id,r,S,sigma,K,t")
    p_b.add_argument("--output", required=True, help="output path (.csv or .json)")
    p_b.add_argument("--strict", action="store_true",
                     help="record invalid rows as errors instead of nan")
    p_b.set_defaults(func=cmd_book)

    return p


def main(argv=None) -> int:
    p = build_parser()
    args = p.parse_args(argv)
    try:
        setup_logging(args.log_level, log_file=args.log_file)
    except ValueError as e:
        p.error(str(e))
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
