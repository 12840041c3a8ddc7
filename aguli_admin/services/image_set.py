# Copyright (c) 2026 Mohammed Hassan. All rights reserved.
# Proprietary and confidential. Unauthorized copying, modification, distribution, or use is prohibited.

"""
Ordered, capacity-bounded image selection for the Explore compose form.

State is immutable. Every input event (drop, drag start/hover/end, remove,
reset) is a small message object, and `reduce` returns the next state without
touching the previous one. Images carry a synthetic id assigned at intake, so
an in-progress drag follows the dragged image rather than a list position.
"""
from __future__ import annotations

import uuid
from dataclasses import dataclass, field, replace
from typing import Iterable, Iterator, Union

MAX_IMAGES = 5


@dataclass(frozen=True)
class PendingImage:
    """One staged image file. Its display index is its position in the ImageSet."""
    id: str
    filename: str
    content_type: str
    data: bytes = field(repr=False)

    @classmethod
    def from_upload(cls, filename: str, content_type: str, data: bytes) -> "PendingImage":
        return cls(id=uuid.uuid4().hex, filename=filename, content_type=content_type, data=data)


@dataclass(frozen=True)
class ImageSet:
    items: tuple[PendingImage, ...] = ()
    capacity: int = MAX_IMAGES

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[PendingImage]:
        return iter(self.items)

    def __getitem__(self, index: int) -> PendingImage:
        return self.items[index]

    def ids(self) -> list[str]:
        return [img.id for img in self.items]

    def index_of(self, image_id: str) -> int | None:
        for i, img in enumerate(self.items):
            if img.id == image_id:
                return i
        return None

    def in_range(self, index: int) -> bool:
        return 0 <= index < len(self.items)

    def accept(self, new_files: Iterable[PendingImage]) -> "ImageSet":
        """Append new files, keeping only the first `capacity` entries overall."""
        new_files = tuple(new_files)
        if not new_files:
            return self
        return replace(self, items=(self.items + new_files)[:self.capacity])

    def move(self, source: int, target: int) -> "ImageSet":
        """Single-element move: items between source and target shift by one slot."""
        if source == target or not self.in_range(source) or not self.in_range(target):
            return self
        items = list(self.items)
        moved = items.pop(source)
        items.insert(target, moved)
        return replace(self, items=tuple(items))

    def remove_at(self, index: int) -> "ImageSet":
        if not self.in_range(index):
            return self
        return replace(self, items=self.items[:index] + self.items[index + 1:])

    def cleared(self) -> "ImageSet":
        return replace(self, items=())


@dataclass(frozen=True)
class DragState:
    """An active drag gesture, tracked by the dragged image's id."""
    image_id: str


@dataclass(frozen=True)
class ComposeState:
    images: ImageSet = field(default_factory=ImageSet)
    drag: DragState | None = None

    @property
    def dragging(self) -> bool:
        return self.drag is not None

    @property
    def source_index(self) -> int | None:
        if self.drag is None:
            return None
        return self.images.index_of(self.drag.image_id)


# --- Events ---

@dataclass(frozen=True)
class Drop:
    files: tuple[PendingImage, ...]

@dataclass(frozen=True)
class DragStart:
    index: int

@dataclass(frozen=True)
class DragHover:
    index: int

@dataclass(frozen=True)
class DragEnd:
    pass

@dataclass(frozen=True)
class Remove:
    index: int

@dataclass(frozen=True)
class Reset:
    pass

Event = Union[Drop, DragStart, DragHover, DragEnd, Remove, Reset]


def reduce(state: ComposeState, event: Event) -> ComposeState:
    """
    Apply one input event to the compose state and return the next state.

    Invalid input (out-of-range indexes, hover while idle, a second drag start
    while dragging) leaves the state unchanged. Excess dropped files beyond
    the capacity are silently discarded.
    """
    if isinstance(event, Drop):
        if not event.files:
            return state
        return replace(state, images=state.images.accept(event.files))

    if isinstance(event, DragStart):
        # Single pointer: a second start while dragging is ignored
        if state.drag is not None or not state.images.in_range(event.index):
            return state
        return replace(state, drag=DragState(image_id=state.images[event.index].id))

    if isinstance(event, DragHover):
        if state.drag is None:
            return state
        source = state.source_index
        if source is None:
            # dragged image no longer exists
            return replace(state, drag=None)
        if event.index == source or not state.images.in_range(event.index):
            return state
        return replace(state, images=state.images.move(source, event.index))

    if isinstance(event, DragEnd):
        if state.drag is None:
            return state
        return replace(state, drag=None)

    if isinstance(event, Remove):
        return replace(state, images=state.images.remove_at(event.index))

    if isinstance(event, Reset):
        return ComposeState(images=state.images.cleared())

    raise TypeError(f"Unsupported compose event: {type(event).__name__}")
