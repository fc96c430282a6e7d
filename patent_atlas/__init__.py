"""Patent Atlas: patents on a map, with search, details and weighted comparison."""

from .entrypoints import bind, close_comparison, show_patent_details

__version__ = "1.0.0"

__all__ = ["bind", "close_comparison", "show_patent_details", "__version__"]
