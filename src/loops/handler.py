"""Loops backend handler."""

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured
from django.utils.functional import cached_property
from django.utils.module_loading import import_string

from loops.exceptions import LoopsInvalidBackendError


class LoopsHandler:
    """Loops handler managing the backend instantiation."""

    def __init__(self, backend=None):
        """Initialize the Loops handler."""
        # backend is an optional backend definition, structured like settings.LOOPS.
        self._backend = backend
        self._loops = None

    @cached_property
    def backend(self):
        """Put in cache the backend properties from the settings."""
        if self._backend is None:
            try:
                self._backend = settings.LOOPS.copy()
            except AttributeError as e:
                raise ImproperlyConfigured("settings.LOOPS is not configured") from e
        return self._backend

    def __call__(self):
        """Create the backend on first call and return it."""
        if self._loops is None:
            self._loops = self.create_backend(self.backend)
        return self._loops

    def create_backend(self, params):
        """Instantiate and configure the Loops backend."""
        params = params.copy()
        try:
            backend = params.pop("BACKEND")
        except KeyError as e:
            raise ImproperlyConfigured("settings.LOOPS has no BACKEND") from e
        parameters = params.pop("PARAMETERS", {})
        try:
            klass = import_string(backend)
        except ImportError as e:
            raise LoopsInvalidBackendError(f"Could not find backend {backend!r}: {e}") from e
        return klass(**parameters)

    def reset(self):
        """Forget the backend, the next call builds it again from the settings."""
        if "backend" in self.__dict__:
            del self.backend
        self._backend = None
        self._loops = None
