#!/usr/bin/env python3
"""
Run the Codescope HTTP API under uvicorn.

Installed as the ``codescope-server`` console script. Bind address, auto
reload and log level are read from the environment through
``codescope_api.config.Settings``; command-line flags override host and port.
"""
import argparse

import uvicorn

from codescope_api.config import settings, logger


def main(argv=None):
    """Serve ``codescope_api.main:app``."""
    parser = argparse.ArgumentParser(prog="codescope-server", description=__doc__.strip().splitlines()[0])
    parser.add_argument("--host", default=settings.HOST, help="interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.PORT, help="port to listen on (default: %(default)s)")
    args = parser.parse_args(argv)

    logger.info("Serving Codescope API on %s:%d (reload=%s)", args.host, args.port, settings.DEBUG)

    uvicorn.run(
        "codescope_api.main:app",
        host=args.host,
        port=args.port,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
