import argparse
import json
import logging
import sys
from datetime import datetime
from pathlib import Path

from src.adapters.clock import FrozenClock, SystemClock
from src.components.content import faq_list, get_service_by_slug, service_subject
from src.components.open_status import ClockPort, run_now
from src.components.structured_data import BuildSchemaInput, SchemaSubject, run
from src.rules.loader import load_site_config
from src.rules.models import SiteConfig

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")

CONFIG_PATH = "site.yaml"


def get_config(path: str) -> SiteConfig:
    try:
        return load_site_config(Path(path))
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)


def handle_check(config: SiteConfig, args: argparse.Namespace) -> None:
    rules = config.day_rules()
    print(f"{config.business.name}: configuration OK")
    for day, text in config.business.hours.items():
        rule = rules.get(day)
        window = f"[{rule.open_hour:g}, {rule.close_hour:g})" if rule else "closed"
        print(f"  {day:<10} {text:<20} {window}")


def handle_status(config: SiteConfig, args: argparse.Namespace) -> None:
    business = config.business
    clock: ClockPort
    if args.at:
        try:
            at = datetime.fromisoformat(args.at)
        except ValueError as e:
            logger.error(f"Invalid --at instant {args.at!r}: {e}")
            sys.exit(1)
        clock = FrozenClock(at, business.timezone)
    else:
        clock = SystemClock(business.timezone)

    status = run_now(business.hours, config.day_rules(), clock=clock, timezone=business.timezone)
    print(status.message)


def handle_jsonld(config: SiteConfig, args: argparse.Namespace) -> None:
    business = config.business
    subject: SchemaSubject | None = None

    if args.schema == "faq":
        subject = faq_list(config.faqs)
    elif args.schema == "service":
        service = get_service_by_slug(config.services, args.slug or "")
        if service is None:
            logger.error(f"No service with slug {args.slug!r}")
            sys.exit(1)
        subject = service_subject(service, business)

    print(json.dumps(run(BuildSchemaInput(business=business, subject=subject)), indent=2))


def main() -> None:
    parser = argparse.ArgumentParser(description="Practice site CLI")
    parser.add_argument("--config", default=CONFIG_PATH, help="Path to site.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # check
    subparsers.add_parser("check", help="Validate site.yaml and show derived opening windows")

    # status
    status_parser = subparsers.add_parser("status", help="Print the current open status")
    status_parser.add_argument("--at", help="ISO instant to evaluate instead of now")

    # jsonld
    jsonld_parser = subparsers.add_parser("jsonld", help="Print a JSON-LD payload")
    jsonld_parser.add_argument(
        "schema", choices=["business", "faq", "service"], help="Schema to build"
    )
    jsonld_parser.add_argument("--slug", help="Service slug (for 'service')")

    args = parser.parse_args()

    config = get_config(args.config)

    if args.command == "check":
        handle_check(config, args)
    elif args.command == "status":
        handle_status(config, args)
    elif args.command == "jsonld":
        handle_jsonld(config, args)


if __name__ == "__main__":
    main()
