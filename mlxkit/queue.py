"""The render queue: draw calls kept in depth order."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Iterator

from .image import Image, Instance


@dataclass(eq=False)
class DrawCall:
    """A request to draw one instance of an image."""

    image: Image
    instance_id: int

    @property
    def instance(self) -> Instance:
        return self.image.instances[self.instance_id]

    @property
    def z(self) -> int:
        return self.instance.z


class RenderQueue:
    """Draw calls, newest first until sorted by depth."""

    def __init__(self) -> None:
        self._calls: deque[DrawCall] = deque()

    def push_front(self, call: DrawCall) -> None:
        """Put a draw call at the front of the queue."""
        self._calls.appendleft(call)

    def remove_image(self, image: Image) -> list[DrawCall]:
        """Remove every draw call for ``image`` and return them."""
        removed = [call for call in self._calls if call.image is image]
        if removed:
            self._calls = deque(call for call in self._calls if call.image is not image)
        return removed

    def sort(self) -> None:
        """Order the calls by ascending depth.

        Each call is placed before those already placed with an equal or
        greater depth, so calls of equal depth end up in reverse order.
        """
        self._calls = deque(sorted(reversed(self._calls), key=lambda call: call.z))

    def __iter__(self) -> Iterator[DrawCall]:
        return iter(list(self._calls))

    def __len__(self) -> int:
        return len(self._calls)