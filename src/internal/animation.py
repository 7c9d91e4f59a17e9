# file: animation.py

from typing import Final, List

import pygame as pg


class Timer:
    """Timer counts elapsed seconds towards a fixed duration.

    Example::

        timer = Timer(0.1, repeating=True)
        timer.tick(dt)
        if timer.just_finished():
            ...

    Note: a repeating timer wraps its elapsed time and finishes again every
    period, a one-shot timer stays finished.
    """

    def __init__(self, duration: float, repeating: bool = True) -> None:
        if duration <= 0:
            raise ValueError(f"want timer duration > 0. got {duration}")
        self.duration: Final = duration
        self.repeating = repeating
        self.elapsed = 0.0
        self.finished = False
        self._just_finished = False

    def tick(self, dt: float) -> None:
        self._just_finished = False
        if self.finished and not self.repeating:
            return
        self.elapsed += dt
        if self.elapsed >= self.duration:
            self._just_finished = True
            if self.repeating:
                self.elapsed %= self.duration
            else:
                self.elapsed = self.duration
                self.finished = True

    def just_finished(self) -> bool:
        """True only for the tick that crossed the duration."""
        return self._just_finished

    def reset(self) -> None:
        self.elapsed = 0.0
        self.finished = False
        self._just_finished = False


class Animation:
    """Animation is a class that holds a list of images and the time in
    seconds each image is displayed for.

    Example::

        animation = Animation([image1, image2, image3], frame_time=0.1)

    Note: if frame_time is not specified then it defaults to 0.1
    Note: if loop is not specified then it defaults to True
    """

    def __init__(self, images: List[pg.Surface], frame_time: float = 0.1, loop: bool = True) -> None:
        self.images: Final[List[pg.Surface]] = images  # this is not copied
        self.loop = loop
        self._frame_time: Final = frame_time
        self.timer = Timer(frame_time, repeating=True)

        self.done = False  # fixed: should always be False at __init__

        self.index = 0

    def copy(self) -> "Animation":
        """Return a copy of the animation."""
        return Animation(self.images, self._frame_time, self.loop)

    def reset(self) -> None:
        self.timer.reset()
        self.index = 0
        self.done = False

    def update(self, dt: float) -> None:
        """Advance one image each time the timer finishes, like a flip book."""
        self.timer.tick(dt)
        if not self.timer.just_finished():
            return
        if self.loop:
            self.index = (self.index + 1) % len(self.images)
        else:
            self.index = min(self.index + 1, len(self.images) - 1)
            if self.index >= len(self.images) - 1:
                self.done = True

    def img(self) -> pg.SurfaceType:
        """Returns current image to render in animation cycle.

        Similar to render phase in the '__init__ -> update -> render' cycle
        """
        return self.images[self.index]
