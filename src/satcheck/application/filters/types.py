"""Filter type alias.

Filter function: takes ViolationEvent, returns True to report.
"""

from collections.abc import Callable
from typing import TypeAlias

from satcheck.domain.model.violation import ViolationEvent

Filter: TypeAlias = Callable[[ViolationEvent], bool]
