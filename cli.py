#!/usr/bin/env python3
from __future__ import annotations

import argparse
import os
import subprocess
import sys


def run(cmd: list[str]) -> int:
    print("$", " ".join(cmd))
    return subprocess.call(cmd)


def cmd_serve(args: argparse.Namespace) -> int:
    if args.port:
        os.environ["PORT"] = str(args.port)
    if args.host:
        os.environ["HOST"] = args.host
    return run([sys.executable, "-m", "articles_api.main"])


def cmd_test(args: argparse.Namespace) -> int:
    os.environ.setdefault("PYTHONUNBUFFERED", "1")
    pytest_args = ["pytest"]
    if args.quiet:
        pytest_args.append("-q")
    if args.k:
        pytest_args += ["-k", args.k]
    return run(pytest_args)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="articles-cli", description="Articles API helper")
    sub = parser.add_subparsers(dest="command", required=True)

    p_serve = sub.add_parser("serve", help="Run the API server")
    p_serve.add_argument("--port", type=int, help="Listen port (overrides PORT)")
    p_serve.add_argument("--host", help="Listen address (overrides HOST)")
    p_serve.set_defaults(func=cmd_serve)

    p_test = sub.add_parser("test", help="Run pytest")
    p_test.add_argument("-q", "--quiet", action="store_true", help="Quiet mode (-q)")
    p_test.add_argument("-k", help="Only run tests matching expression")
    p_test.set_defaults(func=cmd_test)

    args = parser.parse_args(argv)
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
