"""Command line front end for the booking estimator.

Usage patterns:

1. Render the package table with catalog prices:
   travelquote packages --output packages.html

2. Estimate a booking while filling the form:
   travelquote quote --name Asha --check-in 2024-01-08 --check-out 2024-01-10 --package 1 --promo EARLYBIRD

3. Submit a booking (refused while the estimate is invalid):
   travelquote submit --name Asha --check-in 2024-01-08 --check-out 2024-01-10 --package 1
"""
import argparse
import logging
from pathlib import Path
from typing import Sequence

from travelquote.catalog import PackageCatalog
from travelquote.config import settings
from travelquote.estimator import BookingEstimator
from travelquote.logging_config import setup_logging
from travelquote.models import EstimateResult
from travelquote.presentation import (format_price, package_option_label, render_packages_table,
                                      submission_message)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID_BOOKING = 2


def load_catalog(path: Path | None = None) -> PackageCatalog:
    if path is None:
        if not settings.catalog_configured():
            return PackageCatalog.default()
        path = settings.catalog_file
    logging.info(f"Loading package catalog from {path}")
    return PackageCatalog.from_json(path)


def write_packages_page(catalog: PackageCatalog, output: Path | None = None) -> Path:
    output = output or settings.output_html
    html = render_packages_table(catalog)
    output.write_text(html, encoding="utf-8")
    logging.info(f"Packages table written to {output}")
    return output


def _format_estimate(result: EstimateResult) -> str:
    return "\n".join([
        f"Nights: {result.nights}",
        f"Total: {format_price(result.total)}",
        f"Valid: {'yes' if result.valid else 'no'}",
    ])


def _estimate_from_args(catalog: PackageCatalog, args: argparse.Namespace) -> EstimateResult:
    estimator = BookingEstimator(catalog)
    return estimator.estimate_raw(args.name, args.check_in, args.check_out, args.package, args.promo)


def _run_command(args: argparse.Namespace) -> int:
    catalog = load_catalog(args.catalog)

    if args.command == "packages":
        write_packages_page(catalog, args.output)
        return EXIT_OK

    if args.command == "options":
        for package in catalog:
            print(f"{package.id}\t{package_option_label(package)}")
        return EXIT_OK

    result = _estimate_from_args(catalog, args)
    if args.command == "quote":
        print(_format_estimate(result))
        return EXIT_OK if result.valid else EXIT_INVALID_BOOKING

    # submit
    if not result.valid:
        logging.warning("Booking not submitted: fill in name, both dates (at least one night) and a package")
        print(_format_estimate(result))
        return EXIT_INVALID_BOOKING
    print(submission_message(result))
    return EXIT_OK


def _add_booking_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--name", default="")
    p.add_argument("--check-in", default=None, help="YYYY-MM-DD")
    p.add_argument("--check-out", default=None, help="YYYY-MM-DD")
    p.add_argument("--package", default=None, help="Package id")
    p.add_argument("--promo", default=None, help="Promo code (e.g. EARLYBIRD)")


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Travel package booking estimator")
    p.add_argument("--catalog", type=Path, default=None, help="JSON package catalog (overrides CATALOG_FILE)")
    p.add_argument("--log-level", default=settings.log_level)
    sub = p.add_subparsers(dest="command", required=True)

    packages = sub.add_parser("packages", help="Render the packages table to HTML")
    packages.add_argument("--output", type=Path, default=None, help=f"Output file (default {settings.output_html})")

    sub.add_parser("options", help="List package select labels")

    quote = sub.add_parser("quote", help="Estimate a booking")
    _add_booking_arguments(quote)

    submit = sub.add_parser("submit", help="Submit a booking if the estimate is valid")
    _add_booking_arguments(submit)
    return p


def main_cli(argv: Sequence[str] | None = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    try:
        return _run_command(args)
    except Exception:  # noqa: BLE001
        logging.exception("Command failed")
        return EXIT_FAILED


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main_cli())
