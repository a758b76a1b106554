"""Custom value classes for django-configurations."""

import os

from configurations import values


class ApiKeyValue(values.Value):
    """
    Loops API key read from the environment.

    The value set is either (in order of priority):
    * The content of the file named by the environment variable `{name}_FILE`,
      handy with Docker or Kubernetes secrets.
    * The value of the environment variable `{name}`.
    * The default value.

    Surrounding whitespace is stripped. A key with inner whitespace would break
    the Authorization header and is rejected.
    """

    def _read_file(self, filename):
        try:
            with open(filename) as file:
                return file.read()
        except OSError as err:
            raise ValueError(f"API key file {filename!r} cannot be read: {err!r}") from err

    def to_python(self, value):
        """Strip the key and check it fits in a header."""
        if value is None:
            return None
        value = value.strip()
        if any(char.isspace() for char in value):
            raise ValueError("The Loops API key must not contain whitespace.")
        return value

    def setup(self, name):
        """Get the value from the environment."""
        value = self.default
        if self.environ:
            environ_name = self.full_environ_name(name)
            file_environ_name = f"{environ_name}_FILE"
            if file_environ_name in os.environ:
                value = self.to_python(self._read_file(os.environ[file_environ_name]))
            elif environ_name in os.environ:
                value = self.to_python(os.environ[environ_name])
            elif self.environ_required:
                raise ValueError(
                    f"Value {name!r} is required to be set as the "
                    f"environment variable {file_environ_name!r} or {environ_name!r}"
                )
        self.value = value
        return value
