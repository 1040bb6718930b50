"""
Actions produced by parsing a selected menu line
"""

from dataclasses import dataclass


class Action:
    """Base class for browser actions"""


@dataclass(frozen=True)
class GoToParent(Action):
    pass


@dataclass(frozen=True)
class OpenCdMenu(Action):
    pass


@dataclass(frozen=True)
class Quit(Action):
    pass


@dataclass(frozen=True)
class EnterDirectory(Action):
    name: str


@dataclass(frozen=True)
class ActOnFile(Action):
    name: str
