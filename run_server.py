#!/usr/bin/env python3
"""Image Service: on-demand SVG/PNG generators.

Launch: python3 run_server.py
Serves at http://0.0.0.0:8000 (or PORT env var)
"""

import logging

import uvicorn

from image_service.config import HOST, LOG_LEVEL, PORT


def main():
    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    print("=" * 60)
    print("  Image Service")
    print("=" * 60)

    url = f"http://{HOST}:{PORT}"
    print(f"\n  Preview page: {url}/")
    print(f"  API docs:     {url}/api/docs")
    print("  Press Ctrl+C to stop\n")

    from image_service.app import create_app
    app = create_app()
    uvicorn.run(app, host=HOST, port=PORT, log_level=LOG_LEVEL)


if __name__ == "__main__":
    main()
