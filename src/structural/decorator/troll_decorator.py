"""
Decorator (Structural)

Intent:
    Attach additional responsibilities to an object dynamically. A decorator
    implements the same interface as the object it wraps and uses composition
    to "decorate" calls to it, so behavior can change at runtime without
    subclassing the original.

When to use:
    - You want to add or remove behavior per instance, not per class.
    - Subclassing would explode into one class per feature combination.

Participants:
    - Troll (abstract): the capability interface shared by every variant.
    - SimpleTroll: the concrete component with baseline behavior.
    - TrollDecorator: holds the wrapped troll and forwards to it by default.
    - ClubbedTroll / SuperTroll / PeacefulTroll: concrete decorators.

Notes:
    - ClubbedTroll delegates and extends, SuperTroll overrides fleeing only,
      PeacefulTroll discards the wrapped behavior entirely.
    - Decorators stack: SuperTroll(ClubbedTroll(SimpleTroll())) is a valid troll.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)

__all__ = [
    "MissingTrollError",
    "Troll",
    "SimpleTroll",
    "TrollDecorator",
    "ClubbedTroll",
    "SuperTroll",
    "PeacefulTroll",
]


# ---------- Errors ----------

class MissingTrollError(ValueError):
    """
    Raised when a decorator is constructed without a troll to wrap.
    """


# ---------- Component ----------

class Troll(ABC):
    """
    Capability interface every troll-like entity satisfies.
    """

    @abstractmethod
    def attack(self) -> None:
        """
        Performs an attack; observable only through log notifications.
        """

    @abstractmethod
    def flee_battle(self) -> None:
        """
        Performs a retreat; observable only through log notifications.
        """

    @abstractmethod
    def get_attack_power(self) -> int:
        """
        :return: Current non-negative attack strength. Must not log.
        """


class SimpleTroll(Troll):
    """
    Baseline troll with a fixed attack power.
    """

    ATTACK_POWER = 10

    def attack(self) -> None:
        logger.info("The troll tries to grab you!")

    def flee_battle(self) -> None:
        logger.info("The troll shrieks in horror and runs away!")

    def get_attack_power(self) -> int:
        return self.ATTACK_POWER


# ---------- Decorators ----------

class TrollDecorator(Troll):
    """
    Base decorator that forwards every operation to the wrapped troll.

    Concrete decorators override only the operations they change.

    :param decorated: Troll to wrap; owned by this decorator for its lifetime.
    :raises MissingTrollError: If ``decorated`` is None.
    """

    def __init__(self, decorated: Optional[Troll]) -> None:
        if decorated is None:
            raise MissingTrollError(f"{type(self).__name__} needs a troll to decorate.")
        self._decorated = decorated
        logger.debug("%s wraps %s", type(self).__name__, type(decorated).__name__)

    @property
    def decorated(self) -> Troll:
        """
        :return: The wrapped troll.
        """
        return self._decorated

    def attack(self) -> None:
        self._decorated.attack()

    def flee_battle(self) -> None:
        self._decorated.flee_battle()

    def get_attack_power(self) -> int:
        return self._decorated.get_attack_power()


class ClubbedTroll(TrollDecorator):
    """
    Adds a club: the wrapped attack is followed by a club strike and
    the attack power gains a flat bonus. Fleeing is unchanged.
    """

    CLUB_BONUS = 10

    def attack(self) -> None:
        super().attack()
        logger.info("The troll swings at you with a club!")

    def get_attack_power(self) -> int:
        return super().get_attack_power() + self.CLUB_BONUS


class SuperTroll(TrollDecorator):
    """
    Adds a super club and refuses to flee.

    Attack power scales cubically with the wrapped power.
    """

    def attack(self) -> None:
        super().attack()
        logger.info("The super troll swings at you with a super club!")

    def flee_battle(self) -> None:
        # never forwarded
        logger.info("The super troll won't flee from battle and swings again at you "
                    "with a super club, but misses again!")

    def get_attack_power(self) -> int:
        return super().get_attack_power() ** 3


class PeacefulTroll(TrollDecorator):
    """Ignores the wrapped troll entirely: no attacks, instant retreat, zero power."""

    def attack(self) -> None:
        logger.info("The troll waves at you with an awkward smile.")

    def flee_battle(self) -> None:
        logger.info("The troll turns around and flees immediately!")

    def get_attack_power(self) -> int:
        return 0
