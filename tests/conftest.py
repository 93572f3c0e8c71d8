# Copyright (c) 2026 Pickr
# SPDX-License-Identifier: MIT

"""Shared fixtures: a recording host and a headless picker factory."""

from __future__ import annotations

import pytest

from pickr.geometry.placement import Rect, Viewport
from pickr.picker.controller import PickerController
from pickr.picker.controls import HeadlessSurface


class RecordingHost:
    """Collects every on_change / on_save notification."""

    def __init__(self):
        self.changes = []
        self.saves = []

    def on_change(self, color, picker):
        self.changes.append(color)

    def on_save(self, color, picker):
        self.saves.append(color)

    def reset(self):
        self.changes.clear()
        self.saves.clear()


@pytest.fixture
def host():
    return RecordingHost()


@pytest.fixture
def surface():
    return HeadlessSurface(
        anchor=Rect(10.0, 10.0, 100.0, 30.0),
        popup_size=(250.0, 300.0),
        viewport_size=Viewport(800.0, 600.0),
    )


@pytest.fixture
def make_picker(host, surface):
    """Build a picker wired to the recording host; notifications from
    construction are discarded."""

    def factory(**options):
        options.setdefault("on_change", host.on_change)
        options.setdefault("on_save", host.on_save)
        picker = PickerController(options, surface=surface)
        host.reset()
        return picker

    return factory
