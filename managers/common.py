import functools

from errors import ConnectionFailedError


def requires_connection(func):
    """Decorator to ensure a vSphere connection is established before calling the method."""
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs):
        if not self.connection:
            raise ConnectionFailedError("Not connected to vSphere. Please establish a connection first.")
        return func(self, *args, **kwargs)
    return wrapper
