"""Error taxonomy for progress shapes.

Every error here signals programmer misuse. They are raised synchronously and
never retried by the library.
"""

from __future__ import annotations

DESTROYED_ERROR = "Object is destroyed"


class ProgressBarError(Exception):
    """Base class for all svgprogress errors."""


class ConstructorMisuseError(ProgressBarError, TypeError):
    """A shape was constructed without its required collaborators."""


class UnknownShapeError(ConstructorMisuseError):
    """No geometry is registered under the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown shape: {name!r}")
        self.name = name


class ContainerNotFoundError(ProgressBarError, LookupError):
    """The container selector or node did not resolve inside the document."""

    def __init__(self, container: object) -> None:
        super().__init__(f"Container does not exist: {container}")
        self.container = container


class DestroyedObjectError(ProgressBarError, RuntimeError):
    """An operation was invoked on a destroyed shape."""

    def __init__(self) -> None:
        super().__init__(DESTROYED_ERROR)


class UnimplementedGeometryError(ProgressBarError, NotImplementedError):
    """A geometry hook was called on the base geometry."""

    def __init__(self, hook: str) -> None:
        super().__init__(f"Override {hook}() for each progress bar geometry")
        self.hook = hook
