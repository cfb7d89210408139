"""
Shipbreakers Test Configuration and Fixtures
"""

import json

import pytest

from shipbreakers.layout.models import Layout, RoomDescriptor


# Reference outputs of the layout generator, shared with the game's other
# layout implementations.
REFERENCE_LAYOUTS = {
    (1, "I-hauler"): [(1, -1, 6, 2, "cargo"), (0, 0, 6, 2, "crew")],
    (7, "nonexistent"): [(-1, 1, 3, 2, "cargo")],
    (42, "T-freighter"): [(1, 0, 4, 2, "cargo"), (-1, 1, 3, 3, "engine"), (4, 2, 3, 2, "bridge")],
    (0, "Scattered-derelict"): [(-1, 1, 1, 2, "shard"), (3, 0, 2, 1, "shard"), (1, 3, 2, 2, "core")],
    (123456789, "I-hauler"): [(-1, -1, 6, 1, "cargo"), (0, 1, 7, 1, "crew")],
}


@pytest.fixture(autouse=True)
def restore_logging():
    """Drop CLI log handlers bound to captured streams after each test."""
    import logging
    from shipbreakers.bootstrap.entrypoints import reset_logging

    root = logging.getLogger()
    level = root.level
    yield
    reset_logging()
    root.setLevel(level)


@pytest.fixture
def reference_layouts():
    """(seed, template) -> expected room tuples."""
    return REFERENCE_LAYOUTS


@pytest.fixture
def hauler_layout():
    """Layout generated from seed 1 with the I-hauler template."""
    return Layout(
        template="I-hauler",
        rooms=(
            RoomDescriptor(1, -1, 6, 2, "cargo"),
            RoomDescriptor(0, 0, 6, 2, "crew"),
        ),
    )


@pytest.fixture
def layout_file(tmp_path, hauler_layout):
    """hauler_layout written to a JSON file."""
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(hauler_layout.to_dict()))
    return path


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SHIPBREAKERS_* variables for config tests."""
    import os
    for key in list(os.environ):
        if key.startswith("SHIPBREAKERS_"):
            monkeypatch.delenv(key, raising=False)
    return monkeypatch
