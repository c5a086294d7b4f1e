"""
Categories module interface.
"""

from typing import Any, Optional, Protocol, runtime_checkable


@runtime_checkable
class ICategoryService(Protocol):
    """Interface for category operations."""

    async def create_category(self, name: Optional[str]) -> dict[str, Any]:
        """Create a category with a unique name."""
        ...

    async def update_category(self, category_id: str, name: Optional[str]) -> dict[str, Any]:
        """Rename a category and regenerate its slug."""
        ...

    async def list_categories(self) -> list[dict[str, Any]]:
        """List all categories."""
        ...

    async def get_category(self, slug: str) -> Optional[dict[str, Any]]:
        """Get a category by slug."""
        ...

    async def delete_category(self, category_id: str) -> None:
        """Delete a category."""
        ...
