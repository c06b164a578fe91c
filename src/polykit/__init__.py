# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""pygame-based 2D geometry toolkit

polykit provides polygon projection, Separating Axis Theorem collision,
point-in-polygon tests, small matrices and immutable transformable shapes,
using the vector type of the popular pygame library (https://github.com/pygame/pygame/).

This program is free software: you can redistribute it and/or modify it under
the terms of the GNU General Public License as published by the Free Software
Foundation, either version 3 of the License, or (at your option) any later
version.
This program is distributed in the hope that it will be useful, but WITHOUT
ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with
this program. If not, see <http://www.gnu.org/licenses/>.
"""

from __future__ import annotations

__all__ = []  # type: list[str]

__author__ = "FrankySnow9"
__contact__ = "clairicia.rcj.francis@gmail.com"
__copyright__ = "Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine"
__credits__ = ["FrankySnow9"]
__deprecated__ = False
__email__ = "clairicia.rcj.francis@gmail.com"
__license__ = "GNU GPL v3.0"
__maintainer__ = "FrankySnow9"
__status__ = "Development"
__version__ = "1.0.0.dev1"

import os
import sys

############ Environment initialization ############
if sys.version_info < (3, 12):
    raise ImportError(
        "This package must be run with python >= 3.12 (actual={}.{}.{})".format(*sys.version_info[0:3]),
        name=__name__,
        path=__file__,
    )

if os.environ.get("POLYKIT_GEOMETRY_WARNINGS", "1") not in ("0", "1"):
    raise ValueError(f"Invalid value for 'POLYKIT_GEOMETRY_WARNINGS', got {os.environ['POLYKIT_GEOMETRY_WARNINGS']!r}")

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

############ Package initialization ############
try:
    import pygame
except ModuleNotFoundError as exc:
    raise ModuleNotFoundError(
        "'pygame' package must be installed in order to use polykit",
        name=exc.name,
        path=exc.path,
    ) from exc

if os.environ.get("POLYKIT_GEOMETRY_WARNINGS", "1") == "0":
    import warnings as _warnings

    from .warnings import PolykitGeometryWarning

    _warnings.filterwarnings("ignore", category=PolykitGeometryWarning)

    del _warnings, PolykitGeometryWarning

############ Cleanup ############
del os, sys, pygame
