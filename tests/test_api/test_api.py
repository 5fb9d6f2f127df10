"""Tests for API endpoints."""

from __future__ import annotations

import xml.etree.ElementTree as ET

from fastapi.testclient import TestClient

from svgprogress.main import app

client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["shapes"] == ["circle", "line", "semicircle", "square"]


def test_easings():
    response = client.get("/api/easings")
    assert response.status_code == 200
    assert "easeInOut" in response.json()


def test_render_svg():
    response = client.post(
        "/api/render",
        json={"shape": "circle", "progress": 0.5, "options": {"color": "#000", "trailColor": "#eee"}},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("image/svg+xml")
    root = ET.fromstring(response.text.split("\n", 1)[1])
    paths = [child for child in root if child.tag.endswith("path")]
    assert len(paths) == 2
    assert paths[0].get("stroke") == "#eee"
    assert paths[1].get("stroke") == "#000"
    assert root.find("{http://www.w3.org/2000/svg}title").text == "50%"


def test_render_html_with_text():
    response = client.post(
        "/api/render",
        json={"shape": "line", "progress": 0.3, "text": "30%", "format": "html"},
    )
    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/html")
    assert "progressbar-text" in response.text
    assert ">30%</p>" in response.text


def test_render_unknown_shape():
    response = client.post("/api/render", json={"shape": "hexagon", "progress": 0.5})
    assert response.status_code == 404


def test_render_progress_out_of_range():
    response = client.post("/api/render", json={"shape": "circle", "progress": 1.5})
    assert response.status_code == 422


def test_render_invalid_options():
    response = client.post(
        "/api/render",
        json={"shape": "circle", "progress": 0.5, "options": {"strokeWidth": "wide"}},
    )
    assert response.status_code == 422


def test_frames():
    response = client.post(
        "/api/frames",
        json={"shape": "line", "progress": 1.0, "fps": 10, "options": {"duration": 500}},
    )
    assert response.status_code == 200
    data = response.json()
    assert data["value"] == 1.0
    assert data["duration_ms"] == 500
    assert len(data["frames"]) >= 5
    assert 'stroke-dashoffset="0"' in data["frames"][-1]


def test_frames_bad_easing():
    response = client.post(
        "/api/frames",
        json={"shape": "line", "progress": 1.0, "options": {"easing": "wobble"}},
    )
    assert response.status_code == 422


def test_frames_too_many_rejected():
    response = client.post(
        "/api/frames",
        json={"shape": "line", "progress": 1.0, "fps": 120, "options": {"duration": 1e9}},
    )
    assert response.status_code == 422
    assert "limit" in response.json()["detail"]


def test_frames_at_limit_accepted():
    # 2000 frames at 100 fps is 20 seconds
    response = client.post(
        "/api/frames",
        json={"shape": "line", "progress": 1.0, "fps": 100, "options": {"duration": 20_000}},
    )
    assert response.status_code == 200
    assert response.json()["value"] == 1.0
