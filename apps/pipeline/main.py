"""Pipeline CLI entry point, intended for cron.

Usage:
    python -m apps.pipeline.main run
    python -m apps.pipeline.main digest daily|weekly
"""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from config.config import load_config
from internal.bootstrap import ServiceRegistry, close_dependencies, init_dependencies
from internal.model.constant import DIGEST_TYPES, DIGEST_WEEKLY


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="social-listening-pipeline",
        description="Run the social listening pipeline or generate a digest.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("run", help="Collect, analyze and alert once")

    digest = sub.add_parser("digest", help="Generate a narrative digest")
    digest.add_argument("type", choices=DIGEST_TYPES)

    return parser


async def main(argv: Optional[List[str]] = None) -> int:
    """Run one command and print its JSON result.

    Returns:
        Process exit code: 0 on success, 1 if the command failed
    """
    args = build_parser().parse_args(argv)

    config = load_config()
    deps = await init_dependencies(config)
    logger = deps.logger

    try:
        pipeline = ServiceRegistry(deps).initialize()

        if args.command == "run":
            result = await pipeline.run()
            print(json.dumps({"success": True, **result.to_dict()}))
            return 0

        if args.type == DIGEST_WEEKLY:
            digest_id = await pipeline.run_weekly_digest()
        else:
            digest_id = await pipeline.run_daily_digest()
        print(json.dumps({"success": True, "digestId": digest_id, "type": args.type}))
        return 0

    except Exception as e:
        logger.exception(f"Pipeline command '{args.command}' failed: {e}")
        print(json.dumps({"success": False, "error": str(e)}))
        return 1
    finally:
        await close_dependencies(deps)


def run():
    """Entry point for console script."""
    try:
        sys.exit(asyncio.run(main()))
    except KeyboardInterrupt:
        print("\nShutdown complete")


if __name__ == "__main__":
    run()
