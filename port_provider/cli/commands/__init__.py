from .main import cli_start
from .entity import entity
from .scorecard import scorecard
from .version import version

__all__ = [
    "cli_start",
    "entity",
    "scorecard",
    "version",
]
