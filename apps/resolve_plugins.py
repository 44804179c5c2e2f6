from __future__ import annotations

import argparse
import logging
from pathlib import Path

from binary_plugins.api import build_default_resolver, describe_failure, resolve_from_yaml
from binary_plugins.configuration import ConfigError
from binary_plugins.contracts import ResolutionError


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Resolve plugin declarations to executables.")
    parser.add_argument("plugins_yaml", type=Path, help="Path to the plugins YAML")
    parser.add_argument(
        "--local-repository",
        type=Path,
        default=None,
        help="Maven-layout local repository (default: $BINARY_PLUGINS_LOCAL_REPOSITORY or ~/.m2/repository)",
    )
    parser.add_argument("--verbose", action="store_true", help="Verbose logs.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    resolver = build_default_resolver(local_repository=args.local_repository)
    try:
        plugins = resolve_from_yaml(args.plugins_yaml, resolver=resolver)
    except (ConfigError, ResolutionError) as exc:
        logging.getLogger("binary_plugins.app").error(
            "%s", describe_failure(exc), exc_info=args.verbose
        )
        return 2

    for plugin in plugins:
        print(f"{plugin.id}\t{plugin.path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
