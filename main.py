# main.py
import argparse
import logging

from core.game import Game
from core.settings import FPS, PUSHES_INTERVAL


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Multi-tap input playground")
    parser.add_argument("--interval", type=float, default=PUSHES_INTERVAL,
                        help="press window in seconds (default: %(default)s)")
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    Game(pushes_interval=args.interval, fps=args.fps).run()


if __name__ == "__main__":
    main()
