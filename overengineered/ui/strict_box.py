"""A box with absolute limits on the space its children may use."""

from __future__ import annotations

from .box import Box, Dim


class StrictBox(Box):
    """A Box whose children never get more than the given maximum dimensions."""

    def __init__(self, max_dimensions: Dim) -> None:
        super().__init__()
        self.absolute_max_width, self.absolute_max_height = max_dimensions

    def size(self, max_width: int, max_height: int) -> Dim:
        width = min(self.absolute_max_width, max_width)
        # the height limit is measured against the available width
        height = min(self.absolute_max_height, max_width)
        return super().size(width, height)