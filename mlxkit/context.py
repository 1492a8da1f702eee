"""A window context: settings, images on screen, hooks and the frame loop.

The context keeps everything a window needs to present images: the list of
images it owns, the render queue of their instances, the per-frame hooks and
the projection matrix used to place images on screen. It does not open a
real window; frames are produced by ``render_frame`` and ``loop``.
"""

from __future__ import annotations

import math
import struct
import time
from enum import IntEnum
from typing import Callable, Optional

from .errors import MlxErrno, MlxError
from .image import Image, Instance
from .queue import DrawCall, RenderQueue


class Setting(IntEnum):
    """Window settings, applied when a context is created."""

    STRETCH_IMAGE = 0
    FULLSCREEN = 1
    MAXIMIZED = 2
    DECORATED = 3
    HEADLESS = 4


_DEFAULTS = {
    Setting.STRETCH_IMAGE: 0,
    Setting.FULLSCREEN: 0,
    Setting.MAXIMIZED: 0,
    Setting.DECORATED: 1,
    Setting.HEADLESS: 0,
}
_settings: dict[Setting, int] = dict(_DEFAULTS)


def _setting_key(setting: int) -> Setting:
    if isinstance(setting, bool) or not isinstance(setting, int):
        raise TypeError("setting must be a Setting or an integer")
    if not 0 <= setting < len(Setting):
        raise ValueError("Invalid settings value")
    return Setting(setting)


def set_setting(setting: int, value: int) -> None:
    """Change a setting; it applies to contexts created afterwards."""
    _settings[_setting_key(setting)] = int(value)


def get_setting(setting: int) -> int:
    """The current value of a setting."""
    return _settings[_setting_key(setting)]


def _f32(value: float) -> float:
    """Round a value to single precision, keeping infinities and NaN."""
    return struct.unpack("<f", struct.pack("<f", value))[0]


def _div(a: float, b: float) -> float:
    """Floating-point division with IEEE results for a zero divisor."""
    if b == 0:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


LoopHook = Callable[[], None]
CloseHook = Callable[[], None]
ResizeHook = Callable[[int, int], None]


class Context:
    """A window's state: its images, render queue, hooks and frame loop."""

    def __init__(self, width: int, height: int, title: str, resize: bool = False) -> None:
        if title is None:
            raise TypeError("a window title is required")
        if width <= 0:
            raise ValueError("Window width must be positive")
        if height <= 0:
            raise ValueError("Window height must be positive")
        self.title = title
        self.resizable = bool(resize)
        self.width = width
        self.height = height
        self.initial_width = width
        self.initial_height = height
        self.fullscreen = bool(get_setting(Setting.FULLSCREEN))
        self.maximized = bool(get_setting(Setting.MAXIMIZED))
        self.decorated = bool(get_setting(Setting.DECORATED))
        self.visible = not get_setting(Setting.HEADLESS)
        self.zdepth = 0
        self.delta_time = 0.0
        self.last_matrix: Optional[tuple[float, ...]] = None
        self.images: list[Image] = []
        self.render_queue = RenderQueue()
        self._hooks: list[LoopHook] = []
        self._close_hook: Optional[CloseHook] = None
        self._resize_hook: Optional[ResizeHook] = None
        self._should_close = False
        self._terminated = False
        self._sort_pending = False
        self._clock_start = time.perf_counter()
        self._last_frame = 0.0

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.terminate()

    def _ensure_alive(self) -> None:
        if self._terminated:
            raise RuntimeError("the context has been terminated")

    @property
    def should_close(self) -> bool:
        """True once the window has been asked to close."""
        return self._should_close

    @property
    def terminated(self) -> bool:
        return self._terminated

    # Images

    def new_image(self, width: int, height: int) -> Image:
        """Create a blank image owned by this context."""
        self._ensure_alive()
        image = Image(width, height)
        self.images.insert(0, image)
        return image

    def image_to_window(self, image: Image, x: int, y: int) -> int:
        """Place a new instance of ``image`` at (x, y); return its index."""
        self._ensure_alive()
        if image is None:
            raise MlxError(MlxErrno.INVIMG)
        index = len(image.instances)
        image.instances.append(Instance(x, y, self.zdepth, True))
        self.zdepth += 1
        self._sort_pending = True
        self.render_queue.push_front(DrawCall(image, index))
        return index

    def delete_image(self, image: Image) -> None:
        """Remove every instance of ``image`` and release it from the context."""
        self._ensure_alive()
        if image is None:
            raise MlxError(MlxErrno.INVIMG)
        self.render_queue.remove_image(image)
        for position, owned in enumerate(self.images):
            if owned is image:
                del self.images[position]
                image.instances.clear()
                break

    def set_instance_depth(self, instance: Instance, depth: int) -> None:
        """Change an instance's depth; the queue is re-sorted before the next draw."""
        if instance is None:
            raise TypeError("an instance is required")
        if instance.z == depth:
            return
        instance.z = depth
        self._sort_pending = True

    # Hooks

    def loop_hook(self, func: LoopHook) -> bool:
        """Add a function called with no arguments once per frame."""
        self._ensure_alive()
        if func is None:
            raise TypeError("a hook function is required")
        self._hooks.append(func)
        return True

    def close_hook(self, func: CloseHook) -> None:
        """Set the function called when closing the window is requested."""
        if func is None:
            raise TypeError("a hook function is required")
        self._close_hook = func

    def resize_hook(self, func: ResizeHook) -> None:
        """Set the function called with the new size when the window is resized."""
        if func is None:
            raise TypeError("a hook function is required")
        self._resize_hook = func

    # Window

    def set_window_size(self, width: int, height: int) -> None:
        """Change the window size, calling the resize hook if it changed."""
        changed = (width, height) != (self.width, self.height)
        self.width = width
        self.height = height
        if changed and self._resize_hook is not None:
            self._resize_hook(width, height)

    def request_close(self) -> None:
        """Ask the window to close, as a user closing it would; calls the close hook."""
        self._should_close = True
        if self._close_hook is not None:
            self._close_hook()

    def close_window(self) -> None:
        """Mark the window to close; the loop ends after the current frame."""
        self._should_close = True

    def projection_matrix(self) -> tuple[float, ...]:
        """The column-major orthographic projection for the current size and depth."""
        depth = float(self.zdepth)
        stretch = get_setting(Setting.STRETCH_IMAGE)
        width = float(self.initial_width if stretch else self.width)
        height = float(self.initial_height if stretch else self.height)
        values = (
            _div(2.0, width), 0.0, 0.0, 0.0,
            0.0, _div(2.0, -height), 0.0, 0.0,
            0.0, 0.0, _div(-2.0, depth - -depth), 0.0,
            -1.0, -_div(height, -height),
            -_div(depth + -depth, depth - -depth), 1.0,
        )
        return tuple(_f32(value) for value in values)

    # Frames

    def _run_hooks(self) -> None:
        for hook in list(self._hooks):
            if self._should_close:
                break
            hook()

    def _draw(self) -> list[DrawCall]:
        if self._sort_pending:
            self._sort_pending = False
            self.render_queue.sort()
        return [
            call
            for call in self.render_queue
            if call.image.enabled and call.instance.enabled
        ]

    def render_frame(self) -> list[DrawCall]:
        """Run one frame: hooks, then drawing; return the draw calls made, in order."""
        self._ensure_alive()
        now = time.perf_counter() - self._clock_start
        self.delta_time = now - self._last_frame
        self._last_frame = now
        if self.width > 1 or self.height > 1:
            self.last_matrix = self.projection_matrix()
        self._run_hooks()
        return self._draw()

    def loop(self) -> None:
        """Render frames until the window is asked to close."""
        self._ensure_alive()
        while not self._should_close:
            self.render_frame()

    def terminate(self) -> None:
        """Release the hooks, the render queue and every image."""
        self._hooks.clear()
        self.render_queue = RenderQueue()
        for image in self.images:
            image.instances.clear()
        self.images.clear()
        self._close_hook = None
        self._resize_hook = None
        self._terminated = True