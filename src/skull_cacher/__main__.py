import argparse
import sys

from skull_cacher.client import SkullCacherClient
from skull_cacher.config import settings
from skull_cacher.outcomes import Success
from skull_cacher.util.logging import configure_logging


def get_parser():
    parser = argparse.ArgumentParser(
        prog="skull_cacher", description="Fetch and cache player skin textures."
    )
    parser.add_argument("players", nargs="+", help="player names or UUIDs")
    parser.add_argument("--cache-dir", type=str, default=settings.CACHE_DIR)
    parser.add_argument("--timeout", type=float, default=settings.READ_TIMEOUT)
    parser.add_argument("--ignore-errors", action="store_true")
    parser.add_argument("--humanize", action="store_true")
    return parser


def main(options):
    configure_logging(
        humanize=options.humanize or settings.HUMANIZE_LOGS, level=settings.LOG_LEVEL
    )

    client = SkullCacherClient.from_settings(
        cache_dir=options.cache_dir,
        read_timeout=options.timeout,
        ignore_errors=options.ignore_errors or settings.IGNORE_ERRORS,
    )

    failed = False
    with client:
        futures = [
            (player, client.request_texture(player)) for player in options.players
        ]
        for player, future in futures:
            outcome = future.result()
            if isinstance(outcome, Success):
                texture = outcome.texture
                print(f"{texture.identifier} {texture.signature} {texture.value}")
            else:
                failed = True
                print(f"{player}: {outcome.kind.value.lower()}", file=sys.stderr)

    return 1 if failed else 0


def run():
    parser = get_parser()
    options = parser.parse_args()
    sys.exit(main(options))


if __name__ == "__main__":
    run()
