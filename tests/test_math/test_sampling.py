# -*- coding: Utf-8 -*-

from __future__ import annotations

from random import Random
from typing import TYPE_CHECKING

from polykit.math.sampling import random_float, random_int, random_point_in_circle
from polykit.math.vector2 import Vector2

import pytest

if TYPE_CHECKING:
    from unittest.mock import MagicMock

    from pytest_mock import MockerFixture


@pytest.fixture
def mock_rng(mocker: MockerFixture) -> MagicMock:
    return mocker.NonCallableMagicMock(spec=Random)


class TestRandomInt:
    def test____random_int____delegates_to_randrange(self, mock_rng: MagicMock) -> None:
        # Arrange
        mock_rng.randrange.return_value = 4

        # Act
        value = random_int(mock_rng, 2, 10)

        # Assert
        mock_rng.randrange.assert_called_once_with(2, 10)
        assert value == 4

    def test____random_int____max_value_is_excluded(self, rng: Random) -> None:
        # Arrange

        # Act
        values = {random_int(rng, 0, 3) for _ in range(200)}

        # Assert
        assert values == {0, 1, 2}

    @pytest.mark.parametrize(["min_value", "max_value"], [(5, 5), (6, 5)], ids=["empty", "reversed"])
    def test____random_int____empty_range(self, rng: Random, min_value: int, max_value: int) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ValueError, match=r"Empty range"):
            random_int(rng, min_value, max_value)


class TestRandomFloat:
    @pytest.mark.parametrize(
        ["drawn", "expected"],
        [
            pytest.param(0.0, -2.0, id="lower bound"),
            pytest.param(0.5, 1.0, id="middle"),
            pytest.param(0.75, 2.5, id="upper quarter"),
        ],
    )
    def test____random_float____scales_unit_value(self, mock_rng: MagicMock, drawn: float, expected: float) -> None:
        # Arrange
        mock_rng.random.return_value = drawn

        # Act
        value = random_float(mock_rng, -2, 4)

        # Assert
        mock_rng.random.assert_called_once_with()
        assert value == pytest.approx(expected)

    def test____random_float____stays_in_range(self, rng: Random) -> None:
        # Arrange

        # Act
        values = [random_float(rng, 1.5, 2.5) for _ in range(200)]

        # Assert
        assert all(1.5 <= v < 2.5 for v in values)

    def test____random_float____same_seed_same_values(self) -> None:
        # Arrange
        rng_a = Random(42)
        rng_b = Random(42)

        # Act & Assert
        assert [random_float(rng_a, 0, 10) for _ in range(5)] == [random_float(rng_b, 0, 10) for _ in range(5)]

    def test____random_float____reversed_bounds(self, rng: Random) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ValueError):
            random_float(rng, 3, 1)


class TestRandomPointInCircle:
    def test____random_point_in_circle____polar_coordinates(self, mock_rng: MagicMock) -> None:
        # Arrange
        # First draw gives the angle (pi / 2), the second the distance (3)
        mock_rng.random.side_effect = [0.25, 0.5]

        # Act
        point = random_point_in_circle(mock_rng, 6, center=(10, 20))

        # Assert
        assert point.x == pytest.approx(10)
        assert point.y == pytest.approx(23)

    def test____random_point_in_circle____inside_disk(self, rng: Random) -> None:
        # Arrange
        center = Vector2(5, -5)

        # Act
        points = [random_point_in_circle(rng, 2.5, center) for _ in range(200)]

        # Assert
        assert all(center.distance_to(p) <= 2.5 for p in points)

    def test____random_point_in_circle____negative_radius_is_clamped(self, rng: Random) -> None:
        # Arrange

        # Act
        point = random_point_in_circle(rng, -4)

        # Assert
        assert point == Vector2(0, 0)
