#!/usr/bin/env python3
"""
docsui-status CLI
Developer diagnostics for the debug command router and string table
"""
import sys
from dataclasses import asdict


def route(query, debug_build=False):
    """Run one query through the default router and print the flags"""
    from .commands import DebugCommandRouter
    from .debug_flags import get_debug_flags

    router = DebugCommandRouter.default(get_debug_flags(), debug_build=debug_build)
    routed = router.route(query)
    print(f"[docsui-status] routed={routed}")
    for key, value in asdict(router.flags).items():
        print(f"{key}={value!r}")
    return routed


def strings(key=None):
    """Print built-in string table entries"""
    from .resources import Resources

    res = Resources.from_config()
    keys = [key] if key else res.string_keys()
    for k in keys:
        if not res.has_string(k):
            print(f"[docsui-status] unknown string: {k}")
            return False
        print(f"{k}: {res.get_string(k)}")
    return True


def main():
    import argparse

    from .config import configure_logging

    parser = argparse.ArgumentParser(
        description="docsui-status: status messages and debug commands",
        epilog='Example: docsui-status route "debug:qv com.example.viewer" --debug-build'
    )

    subparsers = parser.add_subparsers(dest="command")

    route_parser = subparsers.add_parser("route", help="Route a search-box query")
    route_parser.add_argument("query", help='Query text, e.g. "debug:gs false"')
    route_parser.add_argument("--debug-build", action="store_true", help="Register the built-in debug commands")

    strings_parser = subparsers.add_parser("strings", help="Show built-in strings")
    strings_parser.add_argument("key", nargs="?", default=None, help="Single string key")

    parser.add_argument("--log-level", default=None, help="Override logging.level from config")

    args = parser.parse_args()
    configure_logging(args.log_level)

    if args.command == "route":
        sys.exit(0 if route(args.query, debug_build=args.debug_build) else 1)
    elif args.command == "strings":
        sys.exit(0 if strings(args.key) else 1)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
