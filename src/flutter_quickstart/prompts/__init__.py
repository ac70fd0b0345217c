"""Interactive question boundary."""

from flutter_quickstart.prompts.base import BasePrompter
from flutter_quickstart.prompts.interactive import InteractivePrompter, parse_selection

__all__ = ["BasePrompter", "InteractivePrompter", "parse_selection"]
