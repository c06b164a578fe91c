# -*- coding: Utf-8 -*-

from __future__ import annotations

import os
import pathlib
from random import Random

import pytest

################################## Environment initialization ##################################
# Always hide support on pygame import
os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

# Geometry warnings are turned into errors by the pytest configuration
os.environ["POLYKIT_GEOMETRY_WARNINGS"] = "1"


################################## fixtures ##################################


@pytest.fixture(scope="session")
def polykit_rootdirs_list() -> list[pathlib.Path]:
    import importlib

    polykit_spec = importlib.import_module("polykit").__spec__
    assert polykit_spec is not None
    assert polykit_spec.submodule_search_locations is not None

    return [pathlib.Path(path) for path in polykit_spec.submodule_search_locations]


@pytest.fixture
def rng() -> Random:
    return Random(0x5EED)


@pytest.fixture
def unit_square() -> list[tuple[float, float]]:
    return [(0, 0), (1, 0), (1, 1), (0, 1)]
