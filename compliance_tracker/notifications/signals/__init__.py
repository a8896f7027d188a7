from . import compliance  # noqa: F401
