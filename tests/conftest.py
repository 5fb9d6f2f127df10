"""Shared test fixtures."""

from __future__ import annotations

import pytest

from svgprogress.engine.scheduler import SteppedFrameScheduler
from svgprogress.svg.document import Document

# Host page with one container for shapes and a decoy with a class
HOST_HTML = '''<html>
  <body>
    <div id="c"></div>
    <div id="other" class="box wide"></div>
  </body>
</html>'''

# 10ms frames keep the frame arithmetic easy to follow
FRAME_MS = 10.0


@pytest.fixture
def document() -> Document:
    return Document.from_string(HOST_HTML)


@pytest.fixture
def container(document: Document):
    return document.query_selector("#c")


@pytest.fixture
def scheduler() -> SteppedFrameScheduler:
    return SteppedFrameScheduler(interval_ms=FRAME_MS)
