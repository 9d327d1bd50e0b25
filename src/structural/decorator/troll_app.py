"""
troll_app.py — console walkthrough of the troll decorators.

A simple troll first attacks and then flees the battle. The same troll is
then wrapped in each decorator in turn and the encounter is repeated, so the
change in behavior shows up in the log.

Run with ``python -m structural.decorator.troll_app`` or ``troll-decorator``.
"""

from __future__ import annotations

import argparse
import logging
from typing import Dict, List, Optional, Tuple, Type

from structural.decorator.troll_decorator import (
    ClubbedTroll, PeacefulTroll, SimpleTroll, SuperTroll, Troll, TrollDecorator
)

logger = logging.getLogger(__name__)

__all__ = ["run_demo", "main"]

LOG_FORMAT = "%(asctime)s %(levelname)-5s %(name)s - %(message)s"

# (key, introduction, decorator applied to the simple troll)
ENCOUNTERS: List[Tuple[str, str, Optional[Type[TrollDecorator]]]] = [
    ("simple", "A simple looking troll approaches.", None),
    ("clubbed", "A troll with huge club surprises you.", ClubbedTroll),
    ("super", "A super troll with super huge club surprises you.", SuperTroll),
    ("peaceful", "A peaceful troll with a awkward smile surprises you.", PeacefulTroll),
]


def _encounter(name: str, troll: Troll) -> int:
    troll.attack()
    troll.flee_battle()
    power = troll.get_attack_power()
    logger.info("%s troll power: %d.", name.capitalize(), power)
    return power


def run_demo() -> Dict[str, int]:
    """
    Plays every encounter against one shared simple troll.

    :return: Observed attack power keyed by troll variant.
    """
    simple_troll = SimpleTroll()
    powers: Dict[str, int] = {}
    for key, intro, decorator in ENCOUNTERS:
        logger.info(intro)
        troll = simple_troll if decorator is None else decorator(simple_troll)
        powers[key] = _encounter(key, troll)
    return powers


def main(argv: Optional[List[str]] = None) -> int:
    """
    Command-line entry point.

    :param argv: Arguments without the program name; defaults to sys.argv.
    :return: Process exit code (always 0).
    """
    parser = argparse.ArgumentParser(description="Decorator pattern demo with trolls.")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="console log level (default: INFO)")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)
    run_demo()
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
