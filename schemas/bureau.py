"""Bureau selector taxonomy.

Single source of truth for which bureaus a report view can be narrowed to.
Provider codes live in config/bureaus.yaml.
"""

from enum import Enum
from typing import Union


class Bureau(str, Enum):
    EQUIFAX = "equifax"
    TRANSUNION = "transunion"
    EXPERIAN = "experian"
    ALL = "all"


class InvalidBureauError(ValueError):
    """Raised when a bureau selector is outside the known bureau set."""

    def __init__(self, selector):
        self.selector = selector
        super().__init__(f"Unknown bureau selector: {selector!r}")


BureauSelector = Union[Bureau, str, None]


def parse_bureau(selector: BureauSelector) -> Bureau:
    """Coerce a selector to a Bureau. None means all bureaus.

    Raises:
        InvalidBureauError: if the selector names no known bureau.
    """
    if selector is None:
        return Bureau.ALL
    if isinstance(selector, Bureau):
        return selector
    if isinstance(selector, str):
        try:
            return Bureau(selector.strip().lower())
        except ValueError:
            pass
    raise InvalidBureauError(selector)
