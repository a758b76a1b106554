"""Loops client for Django projects."""

from django.core.signals import setting_changed
from django.dispatch import receiver
from django.utils.functional import LazyObject, empty

from .handler import LoopsHandler


class DefaultLoops(LazyObject):
    """Lazy object to handle the Loops backend."""

    def _setup(self):
        """Configure the Loops backend."""
        self._wrapped = loops_handler()


loops_handler = LoopsHandler()
loops = DefaultLoops()


@receiver(setting_changed)
def reset_loops(*, setting, **kwargs):
    """Rebuild the backend when settings.LOOPS is overridden, e.g. in tests."""
    if setting == "LOOPS":
        loops_handler.reset()
        loops._wrapped = empty
