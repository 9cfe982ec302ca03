"""catalogsync CLI - sync a Shopify catalog into an Algolia index.

Usage:
    python -m catalogsync <country_code> <locale_code> <index_name> <batch_size>
    python -m catalogsync DE de products_de 100 --parallel

Environment Variables:
    SHOPIFY_STORE - Store domain (shop.myshopify.com)
    SHOPIFY_ACCESS_TOKEN - Admin API access token
    ALGOLIA_APP_ID - Algolia application ID
    ALGOLIA_ADMIN_API_KEY - Algolia admin API key
    PARALLEL_BATCHES - Concurrent batches per round in parallel mode (default 5)
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
import time
from typing import List, Optional

from dotenv import load_dotenv

from .config import MAX_BATCH_SIZE

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO"):
    """Setup logging configuration."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def batch_size_arg(value: str) -> int:
    """Parse a batch size: positive integer, at most MAX_BATCH_SIZE."""
    try:
        size = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError("Batch size must be a positive integer")
    if size <= 0:
        raise argparse.ArgumentTypeError("Batch size must be a positive integer")
    # Non-bulk queries are limited to 250 items per connection
    if size > MAX_BATCH_SIZE:
        raise argparse.ArgumentTypeError(
            f"Batch size cannot be greater than {MAX_BATCH_SIZE}"
        )
    return min(size, MAX_BATCH_SIZE)


def positive_int_arg(value: str) -> int:
    """Parse a strictly positive integer."""
    try:
        number = int(value, 10)
    except ValueError:
        raise argparse.ArgumentTypeError(f"{value!r} is not a positive integer")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"{value!r} is not a positive integer")
    return number


def build_parser(parallel: bool = False) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="catalogsync-parallel" if parallel else "catalogsync",
        description="Sync Shopify product variants into an Algolia index",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("country", help="Country code for contextual pricing (e.g. DE)")
    parser.add_argument("locale", help="Locale code for translated titles (e.g. de)")
    parser.add_argument("index_name", help="Algolia index name")
    parser.add_argument(
        "batch_size",
        type=batch_size_arg,
        help=f"Products per page, 1-{MAX_BATCH_SIZE}",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        default=parallel,
        help="Process batches in concurrent rounds",
    )
    parser.add_argument(
        "--parallel-batches",
        type=positive_int_arg,
        default=None,
        help="Batches per round in parallel mode (default: PARALLEL_BATCHES env or 5)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    return parser


def main(argv: Optional[List[str]] = None, parallel: bool = False) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = build_parser(parallel=parallel)
    args = parser.parse_args(argv)

    load_dotenv()

    from .config import get_config
    from .sync import run_sync

    config = get_config()
    setup_logging("DEBUG" if args.verbose else config.log_level)

    start = time.perf_counter()
    try:
        result = asyncio.run(
            run_sync(
                args.country,
                args.locale,
                args.index_name,
                args.batch_size,
                parallel=args.parallel,
                parallel_batches=args.parallel_batches,
                config=config,
            )
        )
    except KeyboardInterrupt:
        logger.info("Sync interrupted")
        return 1
    except Exception as e:
        logger.exception(f"Error during sync process: {e}")
        return 1
    finally:
        logger.info(f"Execution time: {time.perf_counter() - start:.2f} seconds")

    logger.info(f"Sync result: {result.to_dict()}")
    return 0 if result.success else 1


def main_parallel(argv: Optional[List[str]] = None) -> int:
    """Entry point for the parallel variant."""
    return main(argv, parallel=True)


def run():
    sys.exit(main())


def run_parallel():
    sys.exit(main_parallel())


if __name__ == "__main__":
    run()
