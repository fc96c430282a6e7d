"""Module-level entry points for markup-generated handlers (popup links, list items).

They delegate to whichever controller was bound last, so callers do not need
a reference to it.
"""

from typing import Optional

from .controllers.explorer import ExplorerController

_active_controller: Optional[ExplorerController] = None


def bind(controller: Optional[ExplorerController]):
    """Make ``controller`` the target of the entry points (None unbinds)."""
    global _active_controller
    _active_controller = controller


def active_controller() -> ExplorerController:
    if _active_controller is None:
        raise RuntimeError("No explorer controller is bound; call bind() first")
    return _active_controller


async def show_patent_details(patent_no: str):
    """Open the detail panel for a patent number."""
    return await active_controller().show_patent_details(patent_no)


async def close_comparison():
    """Close the comparison panel."""
    return await active_controller().close_comparison()
