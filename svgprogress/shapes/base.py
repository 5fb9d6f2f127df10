"""ProgressShape — lifecycle and animation bridge shared by every shape.

A shape is built from three collaborators passed in explicitly: the document
it renders into, the geometry that supplies its path strings, and
(optionally) the frame scheduler that drives its animations.

Lifecycle is ALIVE -> DESTROYED, one way. Every public operation refuses to
run on a destroyed shape, and that includes a second destroy().
"""

from __future__ import annotations

import functools
import logging
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from typing import Any, Callable

from svgprogress.engine.path import PathAnimator
from svgprogress.engine.scheduler import FrameScheduler
from svgprogress.errors import (
    ConstructorMisuseError,
    ContainerNotFoundError,
    DestroyedObjectError,
)
from svgprogress.shapes.geometry import Geometry, get_geometry
from svgprogress.shapes.options import DEFAULT_OPTIONS, ShapeOptions, resolve_options
from svgprogress.shapes.renderer import ShapeRenderer
from svgprogress.svg.document import Document

logger = logging.getLogger(__name__)


def _requires_alive(method):
    @functools.wraps(method)
    def wrapper(self: ProgressShape, *args, **kwargs):
        if self._progress_path is None:
            raise DestroyedObjectError()
        return method(self, *args, **kwargs)

    return wrapper


class ProgressShape:
    """One progress indicator: an SVG root, a primary path, optional trail and text."""

    def __init__(
        self,
        container: str | ET.Element,
        options: Mapping[str, Any] | ShapeOptions | None = None,
        *,
        document: Document,
        geometry: Geometry,
        scheduler: FrameScheduler | None = None,
    ) -> None:
        if not isinstance(document, Document):
            raise ConstructorMisuseError(f"{type(self).__name__} needs a Document, got {document!r}")
        if not isinstance(geometry, Geometry):
            raise ConstructorMisuseError(
                f"{type(self).__name__} needs a Geometry instance, got {geometry!r}"
            )

        self._document = document
        self._geometry = geometry
        self._renderer = ShapeRenderer(geometry, document)
        self.options = resolve_options(DEFAULT_OPTIONS, options)

        # Nothing is attached until the container is known to exist
        self._container = self._resolve_container(container)
        view = self._renderer.build(self.options)

        # Public before the animator exists: its first step() may read them
        self.svg: ET.Element | None = view.svg
        self.path: ET.Element | None = view.path
        self.trail: ET.Element | None = view.trail
        self.text: ET.Element | None = None

        self._progress_path: PathAnimator | None = PathAnimator(
            view.path,
            self.options.animation_options(),
            attachment=self,
            scheduler=scheduler,
            reset=False,
        )
        # Bound before the first step(), which may call back into this shape
        self.scheduler: FrameScheduler | None = self._progress_path.scheduler
        self._progress_path.set(0)

        document.append_child(self._container, view.svg)
        if self.options.text.value:
            self._attach_text(self.options.text.value)

        logger.debug("Created %r", self)

    @property
    def destroyed(self) -> bool:
        return self._progress_path is None

    @_requires_alive
    def animate(
        self,
        progress: float,
        opts: Mapping[str, Any] | Callable[[], None] | None = None,
        callback: Callable[[], None] | None = None,
    ) -> None:
        self._progress_path.animate(progress, opts, callback)

    @_requires_alive
    def stop(self) -> None:
        self._progress_path.stop()

    @_requires_alive
    def set(self, progress: float) -> None:
        self._progress_path.set(progress)

    @_requires_alive
    def value(self) -> float:
        return self._progress_path.value()

    @_requires_alive
    def set_text(self, text: Any) -> None:
        """Show ``text`` over the shape, creating the text node on first use."""
        if self.text is None:
            self._attach_text(str(text))
            return
        # The node holds at most one text-content child; replace it
        self._document.remove_text_content(self.text)
        self._document.append_text_content(self.text, str(text))

    @_requires_alive
    def destroy(self) -> None:
        """Detach every node and release all references. Not idempotent."""
        self.stop()
        self._document.detach(self.svg, self._container)
        self.svg = None
        self.path = None
        self.trail = None
        self._progress_path = None
        self.scheduler = None

        if self.text is not None:
            self._document.detach(self.text, self._container)
            self.text = None

        self._container = None
        self._renderer = None
        self.options = None
        logger.debug("Destroyed %s", type(self).__name__)

    def _attach_text(self, value: str) -> None:
        self.text = self._renderer.create_text_element(self.options, self._container)
        self._document.append_text_content(self.text, value)
        self._document.append_child(self._container, self.text)

    def _resolve_container(self, container: str | ET.Element | None) -> ET.Element:
        if isinstance(container, str):
            element = self._document.query_selector(container)
        elif isinstance(container, ET.Element):
            element = container if self._document.contains(container) else None
        elif container is None:
            element = None
        else:
            raise ConstructorMisuseError(
                f"container must be a selector or an element, got {type(container).__name__}"
            )

        if element is None:
            raise ContainerNotFoundError(container)
        return element

    def __repr__(self) -> str:
        state = "destroyed" if self.destroyed else "alive"
        return f"<{type(self).__name__} {self._geometry.name} {state}>"


class _RegisteredShape(ProgressShape):
    """A shape bound to a registered geometry by name."""

    geometry_name: str = ""

    def __init__(
        self,
        container: str | ET.Element,
        options: Mapping[str, Any] | ShapeOptions | None = None,
        *,
        document: Document,
        scheduler: FrameScheduler | None = None,
    ) -> None:
        super().__init__(
            container,
            options,
            document=document,
            geometry=get_geometry(self.geometry_name),
            scheduler=scheduler,
        )


class Line(_RegisteredShape):
    geometry_name = "line"


class Circle(_RegisteredShape):
    geometry_name = "circle"


class SemiCircle(_RegisteredShape):
    geometry_name = "semicircle"


class Square(_RegisteredShape):
    geometry_name = "square"


def create_shape(
    kind: str,
    container: str | ET.Element,
    options: Mapping[str, Any] | ShapeOptions | None = None,
    *,
    document: Document,
    scheduler: FrameScheduler | None = None,
) -> ProgressShape:
    """Build a shape from a registered geometry name."""
    return ProgressShape(
        container,
        options,
        document=document,
        geometry=get_geometry(kind),
        scheduler=scheduler,
    )
