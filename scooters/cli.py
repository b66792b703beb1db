"""
The entry point for the CLI tool
"""

import argparse
import json
import sys
from datetime import datetime
from typing import List, Optional

import dateparser
from marshmallow import ValidationError

from scooters import config, logger
from scooters.pricing import IncomeAggregator, PricingError, RentalPriceCalculator
from scooters.serializer import IncomeReportSchema, PriceRateSchema, RentalRecordSchema
from scooters.version import __version__, name


def parse_time(value: str) -> datetime:
    """Parses a timestamp in any format dateparser understands, such as "2023-11-10 23:58" or "10 minutes ago"."""
    parsed = dateparser.parse(value, settings={"RETURN_AS_TIMEZONE_AWARE": False})
    if parsed is None:
        raise argparse.ArgumentTypeError(f"Could not understand the time {value!r}.")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=name, description="Prices scooter rentals.")
    parser.add_argument("--version", action="version", version=f"{name} {__version__}")
    parser.add_argument("--rate", default=str(config.price_per_minute), help="The price per minute.")
    parser.add_argument("--cap", default=str(config.max_daily_price), help="The maximum price per day.")

    commands = parser.add_subparsers(dest="command", required=True)

    price = commands.add_parser("price", help="Price a single rental.")
    price.add_argument("start", type=parse_time)
    price.add_argument("end", type=parse_time)

    income = commands.add_parser("income", help="Sum the income of a file of rental records.")
    income.add_argument("records", type=argparse.FileType("r"), help="A JSON list of rental records.")
    income.add_argument("--year", type=int, default=None)
    income.add_argument("--include-open", action="store_true")
    income.add_argument("--company", default=config.company_name)

    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        calculator = RentalPriceCalculator(PriceRateSchema().load({"per_minute_rate": args.rate, "daily_cap": args.cap}))

        if args.command == "price":
            print(calculator.calculate_rental_price(args.start, args.end))
        else:
            with args.records:
                records = RentalRecordSchema(many=True).load(json.load(args.records))
            income = IncomeAggregator(calculator).calculate_income(records, args.year, args.include_open)
            print(IncomeReportSchema().dumps({
                "company": args.company,
                "year": args.year,
                "include_open": args.include_open,
                "income": income,
            }))
    except ValidationError as e:
        logger.error("Invalid input: %s", e.messages)
        return 1
    except (PricingError, json.JSONDecodeError) as e:
        logger.error(str(e))
        return 1

    return 0


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
