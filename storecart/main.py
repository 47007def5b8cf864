"""Composition root for the storecart system.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Interactive CLI loop
"""

import asyncio
import json
import logging
import sys
from dataclasses import dataclass

from storecart.adapters.catalog.fakestore import FakeStoreProductSource
from storecart.adapters.cli.commands import run_command
from storecart.adapters.stock.system_random import SystemRandomSource
from storecart.config import Settings, load_settings
from storecart.core.cart_service import CartService
from storecart.core.catalog_service import CatalogService


@dataclass
class Application:
    """Wired application components."""

    source: FakeStoreProductSource
    catalog: CatalogService
    cart: CartService

    async def close(self) -> None:
        await self.source.close()


def build_application(settings: Settings) -> Application:
    """Instantiate adapters and core services from settings.

    Args:
        settings: Validated application settings.

    Returns:
        Application with the product source, catalog and cart wired together.
    """
    logger = logging.getLogger(__name__)

    source = FakeStoreProductSource(
        api_url=settings.catalog_api_url,
        timeout=settings.catalog_timeout_seconds,
    )
    logger.info(f"Catalog adapter: FakeStore at {settings.catalog_api_url}")

    random_source = SystemRandomSource(seed=settings.stock_random_seed)
    if settings.stock_random_seed is not None:
        logger.info(f"Stock simulation seeded with {settings.stock_random_seed}")

    catalog = CatalogService(source=source, random_source=random_source)
    cart = CartService(catalog=catalog)

    return Application(source=source, catalog=catalog, cart=cart)


async def _run_cli_interactive(app: Application) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for catalog and cart commands.

    Args:
        app: Wired application components.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    loop = asyncio.get_running_loop()

    while True:
        try:
            # Read command from stdin in a thread to avoid blocking
            command_line = await loop.run_in_executor(
                None,
                input,
                "storecart> "
            )

            command_line = command_line.strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            if not isinstance(args, dict):
                logger.error("Arguments must be a JSON object. Use 'help' for command syntax.")
                continue

            try:
                result = await run_command(app.catalog, app.cart, command, args)
                if isinstance(result.get("data"), str):
                    print(result["data"])
                else:
                    print(json.dumps(result, indent=2, default=str))
            except Exception as e:
                logger.error(f"Command execution error: {e}", exc_info=True)
                print(json.dumps({
                    "status": "error",
                    "message": str(e)
                }, indent=2))

        except EOFError:
            # Ctrl+D to exit
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  product
    Look up a product with its tax tier and taxed price.
    Required: product_id

    Example: product {"product_id": 1}

  category
    List every product in a category.
    Required: category

    Example: category {"category": "electronics"}

  available
    Check whether a product is in stock.
    Required: product_id

    Example: available {"product_id": 1}

  add
    Add a product to the cart.
    Required: product_id
    Optional: quantity (default 1)

    Example: add {"product_id": 1, "quantity": 2}

  items
    List the lines in the cart.

  summary
    Show cart totals. Optional: format ("json" or "text")

    Example: summary {"format": "text"}

  validate
    Re-check availability of everything in the cart.

  clear
    Empty the cart.

  help
    Show this help message.

  exit
    Exit the CLI.

Note: All commands accept arguments as a single JSON object.
Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "name": "%(name)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


async def bootstrap() -> None:
    """Load configuration, wire adapters, and start the interactive CLI.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters and core services
    4. Run the CLI until exit, then release the HTTP client
    """
    settings = load_settings()

    configure_logging("DEBUG" if settings.debug else settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)
    logger.info("Loading storecart...")

    app = build_application(settings)

    try:
        await _run_cli_interactive(app)
    finally:
        await app.close()


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful shutdown
        1: Fatal bootstrap or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        asyncio.run(bootstrap())
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
