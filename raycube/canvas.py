"""Bookkeeping of images placed in a window and the order they are drawn in."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass

from raycube.image import Image, Instance


@dataclass(frozen=True, eq=False)
class DrawCall:
    """One entry of the render queue: an image and one of its instances."""

    image: Image
    instance_id: int

    @property
    def instance(self) -> Instance:
        """The placement this draw call refers to."""
        return self.image.instances[self.instance_id]

    @property
    def visible(self) -> bool:
        """Whether both the image and this instance are enabled."""
        return self.image.enabled and self.instance.enabled


class Canvas:
    """Owns images and keeps the queue of their placements sorted by depth."""

    def __init__(self) -> None:
        self.images: list[Image] = []
        self.zdepth = 0
        self._queue: list[DrawCall] = []
        self._needs_sort = False

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this canvas.

        Raises MlxError with INVDIM for a size outside 1..32767.
        """
        image = Image(width, height)
        self.images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place an image at (x, y) above everything placed so far.

        Returns the index of the new instance.
        """
        index = image.add_instance(x, y, self.zdepth)
        self.zdepth += 1
        self._queue.insert(0, DrawCall(image, index))
        self._needs_sort = True
        return index

    def delete_image(self, image: Image) -> None:
        """Remove every placement of an image and forget the image."""
        self._queue = [call for call in self._queue if call.image is not image]
        for position, owned in enumerate(self.images):
            if owned is image:
                del self.images[position]
                break

    def set_instance_depth(self, instance: Instance, depth: int) -> None:
        """Change the depth of one placement; the queue is re-sorted lazily."""
        if instance.z == depth:
            return
        instance.z = depth
        self._needs_sort = True

    def _sort(self) -> None:
        ordered: list[DrawCall] = []
        keys: list[int] = []
        for call in self._queue:
            depth = call.instance.z
            position = bisect_left(keys, depth)
            keys.insert(position, depth)
            ordered.insert(position, call)
        self._queue = ordered

    def render_queue(self) -> list[DrawCall]:
        """Return the draw calls ordered from the lowest depth to the highest."""
        if self._needs_sort:
            self._needs_sort = False
            self._sort()
        return list(self._queue)