"""
Pytest configuration and shared fixtures for asesheet tests.

The sample documents mirror real exports: ``boonga`` is an Aseprite 1.1.6
array export with tags and one layer, ``full`` adds groups and slices.
"""

import copy
import json

import pytest


BOONGA_TEXT = r"""{ "frames": [
   {
    "filename": "boonga 0.ase",
    "frame": { "x": 1, "y": 1, "w": 18, "h": 18 },
    "rotated": false,
    "trimmed": false,
    "spriteSourceSize": { "x": 0, "y": 0, "w": 16, "h": 16 },
    "sourceSize": { "w": 16, "h": 16 },
    "duration": 250
   },
   {
    "filename": "boonga 1.ase",
    "frame": { "x": 20, "y": 1, "w": 18, "h": 18 },
    "rotated": false,
    "trimmed": false,
    "spriteSourceSize": { "x": 0, "y": 0, "w": 16, "h": 16 },
    "sourceSize": { "w": 16, "h": 16 },
    "duration": 250
   }
 ],
 "meta": {
  "app": "http://www.aseprite.org/",
  "version": "1.1.6-dev",
  "image": "boonga.png",
  "format": "RGBA8888",
  "size": { "w": 39, "h": 20 },
  "scale": "1",
  "frameTags": [
   { "name": "testtag", "from": 0, "to": 1, "direction": "forward" }
  ],
  "layers": [
   { "name": "Layer 1", "opacity": 255, "blendMode": "normal" }
  ]
 }
}
"""


def _frame(x, duration=100):
    return {
        "frame": {"x": x, "y": 0, "w": 8, "h": 8},
        "rotated": False,
        "trimmed": False,
        "spriteSourceSize": {"x": 0, "y": 0, "w": 8, "h": 8},
        "sourceSize": {"w": 8, "h": 8},
        "duration": duration,
    }


FULL_DOC = {
    "frames": [
        dict(filename="hero 0.ase", **_frame(0, 100)),
        dict(filename="hero 1.ase", **_frame(8, 150)),
        dict(filename="hero 2.ase", **_frame(16, 200)),
    ],
    "meta": {
        "app": "http://www.aseprite.org/",
        "version": "1.3.2-x64",
        "image": "hero.png",
        "format": "I8",
        "size": {"w": 24, "h": 8},
        "scale": "2",
        "frameTags": [
            {"name": "walk", "from": 0, "to": 2, "direction": "pingpong"},
            {"name": "back", "from": 1, "to": 2, "direction": "reverse"},
        ],
        "layers": [
            {"name": "Body", "color": "#6acd5bff", "data": "skin"},
            {"name": "Torso", "group": "Body", "opacity": 200, "blendMode": "hard_light"},
            {"name": "Shadow", "opacity": 64, "blendMode": "multiply"},
        ],
        "slices": [
            {
                "name": "button",
                "color": "#0000FFFF",
                "data": "ui",
                "keys": [
                    {
                        "frame": 0,
                        "bounds": {"x": 0, "y": 0, "w": 8, "h": 8},
                        "center": {"x": 2, "y": 2, "w": 4, "h": 4},
                        "pivot": {"x": 4, "y": 8},
                    },
                    {"frame": 2, "bounds": {"x": 1, "y": 1, "w": 6, "h": 6}},
                ],
            }
        ],
    },
}


@pytest.fixture
def boonga_text():
    """Aseprite 1.1.6 array export, as text."""
    return BOONGA_TEXT


@pytest.fixture
def boonga_doc():
    return json.loads(BOONGA_TEXT)


@pytest.fixture
def minimal_doc(boonga_doc):
    """Array export whose meta only has the required fields."""
    doc = boonga_doc
    for key in ("image", "frameTags", "layers"):
        del doc["meta"][key]
    return doc


@pytest.fixture
def full_doc():
    """Export with every optional block filled in."""
    return copy.deepcopy(FULL_DOC)


@pytest.fixture
def hash_doc(full_doc):
    """``full_doc`` with the frames rewritten in the json-hash shape."""
    frames = {}
    for item in full_doc["frames"]:
        item = dict(item)
        frames[item.pop("filename")] = item
    full_doc["frames"] = frames
    return full_doc
