"""Exception taxonomy.

* :class:`ValidationError` is raised while loading assets or building
  configuration when the input is malformed. The offending asset is rejected
  and nothing shared is modified.
* :class:`ConsistencyError` signals a broken internal invariant (an unknown
  tile id, duplicate tile content). It is never recovered from inside the
  engine; the current operation aborts.
"""


class ValidationError(ValueError):
    """Malformed sprite raster, tile buffer or configuration value."""


class ConsistencyError(RuntimeError):
    """A tile id or atlas entry does not match what the atlas produced."""
