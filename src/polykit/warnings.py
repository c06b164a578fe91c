# Copyright (c) 2021-2025, Francis Clairicia-Rose-Claire-Josephine
#
#
"""polykit custom warnings module"""

from __future__ import annotations

__all__ = [
    "PolykitGeometryWarning",
]

import os


class PolykitGeometryWarning(UserWarning):
    pass


# Frames under this prefix are skipped when a warning is attributed to the caller's code
_PACKAGE_PREFIX: str = os.path.dirname(os.path.abspath(__file__)) + os.sep
