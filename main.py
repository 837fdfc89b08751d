#!/usr/bin/env python3
"""
ArcBall - A single-screen aiming game

Time the sweeping arrow and shoot the ball into the goal at the top of the
field. Five goals win the round.
"""

import argparse
import logging
import sys

from arcball.constants import FPS, BALL_IMAGE
from arcball.game import Game


def parse_args(argv=None):
    """Parse command line flags."""
    p = argparse.ArgumentParser(description="ArcBall (pygame)")
    p.add_argument("--fps", type=int, default=FPS, help="Frame rate of the game loop")
    p.add_argument("--ball-image", default=BALL_IMAGE, help="Path to the ball sprite")
    p.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return p.parse_args(argv)


def main(argv=None) -> int:
    """Entry point for the game."""
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        game = Game(fps=args.fps, ball_image=args.ball_image)
        game.run()
    except KeyboardInterrupt:
        logging.info("Game interrupted by user")
    except Exception as e:
        logging.error(f"Fatal error: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
