from .models import SearchModel
from .resource import EntitySearch

__all__ = ["EntitySearch", "SearchModel"]
