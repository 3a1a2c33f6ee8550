"""User-facing messages of the add-to-index operation."""

from dataclasses import dataclass, fields, replace
from typing import Any, Dict


@dataclass(frozen=True)
class Messages:
    """Message catalog.

    Templates containing ``{name}`` are formatted with the display name of the
    selected resource.
    """

    add_to_index_folder: str = "Add content of folder {name} to index?"
    add_to_index_file: str = "Add file {name} to index?"
    add_to_index_multiple: str = "Add selected items to index?"
    nothing_add_to_index: str = "Nothing to add to index: the selected item has no changes"
    nothing_add_to_index_multi_select: str = (
        "Nothing to add to index: the selected items have no changes"
    )
    add_success: str = "Git index updated"
    add_failed: str = "Failed to update git index"
    status_failed: str = "Git status failed"

    def folder(self, name: str) -> str:
        return self.add_to_index_folder.format(name=name)

    def file(self, name: str) -> str:
        return self.add_to_index_file.format(name=name)

    def nothing_to_add(self, selection_size: int) -> str:
        if selection_size > 1:
            return self.nothing_add_to_index_multi_select
        return self.nothing_add_to_index

    @classmethod
    def keys(cls) -> set[str]:
        return {f.name for f in fields(cls)}

    def with_overrides(self, overrides: Dict[str, Any]) -> "Messages":
        """Return a copy with some templates replaced.

        Raises:
            KeyError: If an override names an unknown message
        """
        unknown = set(overrides) - self.keys()
        if unknown:
            raise KeyError(", ".join(sorted(unknown)))
        return replace(self, **{key: str(value) for key, value in overrides.items()})
