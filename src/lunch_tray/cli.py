"""
Command-line interface for Lunch Tray.
"""

import argparse
import sys
from typing import Optional

from . import __version__
from .ordering.menu import ItemNotFoundError, ItemType, MenuCatalog, default_catalog
from .ordering.repository import MenuRepository
from .ordering.state import OrderState
from .utils.config import Config
from .utils.logging import setup_logging

TYPE_CHOICES = {
    "entree": ItemType.ENTREE,
    "side": ItemType.SIDE_DISH,
    "accompaniment": ItemType.ACCOMPANIMENT,
}


def create_parser() -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    parser = argparse.ArgumentParser(
        description="Lunch Tray - Order Pricing Tool",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lunch-tray menu
  lunch-tray menu --type side
  lunch-tray order --entree chili --side rice --accompaniment bread
        """,
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"Lunch Tray {__version__}",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--log-file",
        help="Log file path",
    )
    parser.add_argument(
        "--env-file",
        help="Read settings from this .env file",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        help="Available commands",
    )

    menu_parser = subparsers.add_parser(
        "menu",
        help="List the items on the menu",
    )
    menu_parser.add_argument(
        "--type",
        choices=sorted(TYPE_CHOICES),
        help="Only list items of this type",
    )
    _add_source_argument(menu_parser)

    order_parser = subparsers.add_parser(
        "order",
        help="Price an order of entree, side and accompaniment",
    )
    order_parser.add_argument("--entree", help="Name of the entree")
    order_parser.add_argument("--side", help="Name of the side dish")
    order_parser.add_argument("--accompaniment", help="Name of the accompaniment")
    _add_source_argument(order_parser)

    return parser


def _add_source_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--source",
        choices=["builtin", "mongo"],
        help="Menu source (default: MENU_SOURCE setting, else builtin)",
    )


def format_currency(amount: float) -> str:
    """Format an amount as a dollar string, e.g. $1,234.50."""
    sign = "-" if amount < 0 else ""
    return f"{sign}${abs(amount):,.2f}"


def load_menu(source: str, config: Config) -> MenuCatalog:
    if source == "mongo":
        with MenuRepository(config=config) as repo:
            return repo.load_catalog()
    if source == "builtin":
        return default_catalog()
    raise ValueError(f"Unknown menu source '{source}' (expected builtin or mongo)")


def show_menu(catalog: MenuCatalog, item_type: Optional[str] = None) -> None:
    if item_type:
        items = catalog.items_of_type(TYPE_CHOICES[item_type])
    else:
        items = list(catalog.values())

    if not items:
        print("No menu items found.")
        return

    name_width = max(len(item.name) for item in items)
    label_width = max(len(item.display_name) for item in items)
    print("MENU:")
    print("=" * 60)
    for item in items:
        kind = item.type.value if item.type is not None else "-"
        print(
            f"  {item.name:<{name_width}}  {item.display_name:<{label_width}}"
            f"  {kind:<13} {format_currency(item.price):>9}"
        )


def price_order(
    catalog: MenuCatalog,
    tax_rate: float,
    entree: Optional[str] = None,
    side: Optional[str] = None,
    accompaniment: Optional[str] = None,
) -> OrderState:
    """Build an order and apply the requested selections in slot order."""
    order = OrderState(catalog, tax_rate=tax_rate)
    if entree is not None:
        order.select_entree(entree)
    if side is not None:
        order.select_side(side)
    if accompaniment is not None:
        order.select_accompaniment(accompaniment)
    return order


def print_order(order: OrderState) -> None:
    print("ORDER SUMMARY:")
    print("=" * 60)
    for slot, item in order.selections().items():
        if item is None:
            print(f"  {slot.capitalize():<14} {'(none)':<30}")
        else:
            print(f"  {slot.capitalize():<14} {item.display_name:<30} {format_currency(item.price):>9}")
    print("-" * 60)
    print(f"  {'Subtotal':<45} {format_currency(order.subtotal):>9}")
    print(f"  {'Tax (' + format(order.tax_rate * 100, 'g') + '%)':<45} {format_currency(order.tax):>9}")
    print(f"  {'Total':<45} {format_currency(order.total):>9}")


def main(args: Optional[list] = None) -> int:
    """
    Main entry point for the CLI.

    Args:
        args: Command line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code
    """
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    config = Config(parsed_args.env_file)
    log_level = "DEBUG" if parsed_args.verbose else config.get("log_level")
    logger = setup_logging(level=log_level, log_file=parsed_args.log_file)

    if not parsed_args.command:
        parser.print_help()
        return 1

    source = parsed_args.source or config.get("menu_source")
    try:
        catalog = load_menu(source, config)

        if parsed_args.command == "menu":
            show_menu(catalog, parsed_args.type)

        elif parsed_args.command == "order":
            order = price_order(
                catalog,
                tax_rate=config.get("tax_rate"),
                entree=parsed_args.entree,
                side=parsed_args.side,
                accompaniment=parsed_args.accompaniment,
            )
            print_order(order)

    except ItemNotFoundError as e:
        logger.error(f"Error: {e}")
        print(f"Unknown menu item '{e.name}'. Run 'lunch-tray menu' to see what is available.")
        return 1
    except Exception as e:
        logger.error(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
