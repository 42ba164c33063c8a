"""Progress hook shared by the renderers.

A progress hook wraps an iterable and yields the same items, e.g. behind a
``click.progressbar``. Renderers call ``progress(iterable, length, label)``.
"""

from typing import Callable, Iterable

Progress = Callable[[Iterable, int, str], Iterable]


def no_progress(iterable, length, label):
    return iterable
