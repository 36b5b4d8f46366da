#!/usr/bin/env python3
"""
Development server launcher.

Usage:
    python run_dev.py
    python run_dev.py --port 8080
    python run_dev.py --no-reload
"""

import argparse


def main():
    parser = argparse.ArgumentParser(description="paperhub dev server")
    parser.add_argument("--host", default="127.0.0.1", help="Host to bind (default: 127.0.0.1)")
    parser.add_argument("--port", type=int, default=3000, help="Port to bind (default: 3000)")
    parser.add_argument("--reload", action="store_true", default=True, help="Enable auto-reload (default: True)")
    parser.add_argument("--no-reload", dest="reload", action="store_false", help="Disable auto-reload")
    parser.add_argument("--log-level", default="info", choices=["debug", "info", "warning", "error"], help="Log level")

    args = parser.parse_args()

    import uvicorn

    print(f"paperhub API on http://{args.host}:{args.port}  (docs: /docs)")

    uvicorn.run(
        "paperhub.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=args.log_level,
        reload_dirs=["paperhub"] if args.reload else None,
    )


if __name__ == "__main__":
    main()
