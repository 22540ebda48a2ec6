"""HTTP server entry point.

Loads configuration, wires dependencies and serves the FastAPI app with
uvicorn. Dependencies are released on shutdown.
"""

import asyncio

import uvicorn

from config.config import load_config
from internal.api.main import create_app
from internal.bootstrap import ServiceRegistry, close_dependencies, init_dependencies


async def main():
    """Main entry point for the API service."""
    config = load_config()
    deps = await init_dependencies(config)
    logger = deps.logger

    try:
        pipeline = ServiceRegistry(deps).initialize()
        app = create_app(pipeline, logger=logger, api_config=config.api)

        server = uvicorn.Server(
            uvicorn.Config(
                app,
                host=config.api.host,
                port=config.api.port,
                log_level=config.logging.level.lower(),
            )
        )
        logger.info(f"Starting API on {config.api.host}:{config.api.port}")
        await server.serve()

    except Exception as e:
        logger.exception(f"API service error: {e}")
        raise
    finally:
        logger.info("Cleaning up dependencies...")
        await close_dependencies(deps)


def run():
    """Entry point for console script."""
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        print("\nShutdown complete")


if __name__ == "__main__":
    run()
