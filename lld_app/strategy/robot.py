"""
Robots with swappable behaviours.

A robot does not implement walking, talking or flying itself. It holds one
behaviour object per capability and delegates to whichever object is
currently assigned, so capabilities can be changed at runtime without
subclassing the robot.
"""

from abc import ABC, abstractmethod

import structlog

logger = structlog.get_logger(__name__)


class WalkableBehavior(ABC):
    """How a robot walks."""

    @abstractmethod
    def walk(self) -> str:
        pass


class TalkableBehavior(ABC):
    """How a robot talks."""

    @abstractmethod
    def talk(self) -> str:
        pass


class FlyableBehavior(ABC):
    """How a robot flies."""

    @abstractmethod
    def fly(self) -> str:
        pass


class NormalWalk(WalkableBehavior):
    def walk(self) -> str:
        return "Walking normally..."


class NoWalk(WalkableBehavior):
    def walk(self) -> str:
        return "Cannot walk."


class NormalTalk(TalkableBehavior):
    def talk(self) -> str:
        return "Talking normally..."


class NoTalk(TalkableBehavior):
    def talk(self) -> str:
        return "Cannot talk."


class NormalFly(FlyableBehavior):
    def fly(self) -> str:
        return "Flying normally..."


class NoFly(FlyableBehavior):
    def fly(self) -> str:
        return "Cannot fly."


class Robot(ABC):
    """Base robot delegating every capability to a behaviour object."""

    def __init__(
        self,
        walk_behavior: WalkableBehavior,
        talk_behavior: TalkableBehavior,
        fly_behavior: FlyableBehavior,
    ) -> None:
        self.walk_behavior = walk_behavior
        self.talk_behavior = talk_behavior
        self.fly_behavior = fly_behavior

    def walk(self) -> str:
        return self.walk_behavior.walk()

    def talk(self) -> str:
        return self.talk_behavior.talk()

    def fly(self) -> str:
        return self.fly_behavior.fly()

    def set_walk_behavior(self, behavior: WalkableBehavior) -> None:
        logger.debug(
            "Swapping walk behaviour",
            robot=type(self).__name__,
            behavior=type(behavior).__name__
        )
        self.walk_behavior = behavior

    def set_talk_behavior(self, behavior: TalkableBehavior) -> None:
        logger.debug(
            "Swapping talk behaviour",
            robot=type(self).__name__,
            behavior=type(behavior).__name__
        )
        self.talk_behavior = behavior

    def set_fly_behavior(self, behavior: FlyableBehavior) -> None:
        logger.debug(
            "Swapping fly behaviour",
            robot=type(self).__name__,
            behavior=type(behavior).__name__
        )
        self.fly_behavior = behavior

    @abstractmethod
    def projection(self) -> str:
        """Describe what the robot looks like."""

    def describe(self) -> list[str]:
        """Projection followed by every capability, in lesson order."""
        return [self.projection(), self.walk(), self.talk(), self.fly()]


class CompanionRobot(Robot):
    def projection(self) -> str:
        return "Displaying friendly companion features..."


class WorkerRobot(Robot):
    def projection(self) -> str:
        return "Displaying worker efficiency stats..."
