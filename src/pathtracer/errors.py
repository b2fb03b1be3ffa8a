"""Exceptions raised by the path tracer."""


class PathTracerError(Exception):
    """Base class for errors raised by this package."""


class BoundingBoxError(PathTracerError):
    """A primitive handed to the BVH builder cannot report a bounding box.

    An unbounded primitive cannot be spatially indexed, so the build is
    aborted; there is no meaningful partial tree.
    """


class SceneNotFoundError(PathTracerError, KeyError):
    """No demo scene is registered under the requested name."""
