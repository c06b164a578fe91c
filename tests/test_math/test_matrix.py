# -*- coding: Utf-8 -*-

from __future__ import annotations

import pickle

from polykit.exceptions import DimensionMismatchError
from polykit.math.matrix import Matrix
from polykit.math.vector2 import Vector2

import numpy as np
import pytest


class TestMatrix:
    def test____init____copies_and_freezes_data(self) -> None:
        # Arrange
        data = np.array([[1.0, 2.0], [3.0, 4.0]])

        # Act
        matrix = Matrix(data)
        data[0, 0] = 100

        # Assert
        assert matrix[0, 0] == 1
        assert not matrix.array.flags.writeable
        with pytest.raises(ValueError):
            matrix.array[0, 0] = 100

    def test____init____requires_two_dimensions(self) -> None:
        # Arrange

        # Act & Assert
        with pytest.raises(ValueError, match=r"2 dimensions"):
            _ = Matrix([1, 2, 3])

    def test____zeros____shape(self) -> None:
        # Arrange

        # Act
        matrix = Matrix.zeros(2, 3)

        # Assert
        assert matrix.shape == (2, 3)
        assert matrix.rows == 2
        assert matrix.columns == 3
        assert matrix == Matrix([[0, 0, 0], [0, 0, 0]])

    def test____from_vertices____homogeneous_layout(self) -> None:
        # Arrange
        vertices = [(1, 2), Vector2(3, 4)]

        # Act
        matrix = Matrix.from_vertices(vertices)

        # Assert
        assert matrix == Matrix([[1, 3], [2, 4], [1, 1]])
        assert matrix.to_vertices() == (Vector2(1, 2), Vector2(3, 4))

    def test____from_vertices____plain_layout(self) -> None:
        # Arrange

        # Act
        matrix = Matrix.from_vertices([(1, 2), (3, 4)], homogeneous=False)

        # Assert
        assert matrix.shape == (2, 2)

    def test____instance____picklable(self) -> None:
        # Arrange
        matrix = Matrix([[1, 2], [3, 4]])

        # Act
        reconstructed = pickle.loads(pickle.dumps(matrix))

        # Assert
        assert reconstructed == matrix
        assert not reconstructed.array.flags.writeable

    def test____hash____unhashable(self) -> None:
        # Arrange
        matrix = Matrix([[1]])

        # Act & Assert
        with pytest.raises(TypeError):
            hash(matrix)


class TestMatrixArithmetic:
    def test____multiplied____default(self) -> None:
        # Arrange
        lhs = Matrix([[1, 2, 3], [4, 5, 6]])
        rhs = Matrix([[7], [8], [9]])

        # Act
        result = lhs @ rhs

        # Assert
        assert result == Matrix([[50], [122]])
        assert lhs.multiplied(rhs) == result

    def test____multiplied____dimension_mismatch(self) -> None:
        # Arrange
        lhs = Matrix([[1, 2, 3], [4, 5, 6]])
        rhs = Matrix([[1, 2], [3, 4]])

        # Act & Assert
        with pytest.raises(DimensionMismatchError) as exc_info:
            _ = lhs @ rhs

        assert exc_info.value.left == (2, 3)
        assert exc_info.value.right == (2, 2)

    def test____dimension_mismatch____is_a_value_error(self) -> None:
        # Arrange
        lhs = Matrix([[1, 2]])
        rhs = Matrix([[1, 2]])

        # Act & Assert
        with pytest.raises(ValueError):
            lhs.multiplied(rhs)

    def test____added____default(self) -> None:
        # Arrange
        lhs = Matrix([[1, 2], [3, 4]])
        rhs = Matrix([[10, 20], [30, 40]])

        # Act & Assert
        assert lhs + rhs == Matrix([[11, 22], [33, 44]])
        assert rhs - lhs == Matrix([[9, 18], [27, 36]])

    @pytest.mark.parametrize("operation", ["added", "subtracted"])
    def test____added_subtracted____dimension_mismatch(self, operation: str) -> None:
        # Arrange
        lhs = Matrix([[1, 2], [3, 4]])
        rhs = Matrix([[1, 2, 3], [4, 5, 6]])

        # Act & Assert
        with pytest.raises(DimensionMismatchError):
            getattr(lhs, operation)(rhs)

    def test____operators____not_a_matrix(self) -> None:
        # Arrange
        matrix = Matrix([[1, 2], [3, 4]])

        # Act & Assert
        with pytest.raises(TypeError):
            _ = matrix + 1  # type: ignore[operator]


class TestMatrixTransform:
    def test____rotated____counterclockwise(self) -> None:
        # Arrange
        matrix = Matrix.from_vertices([(1, 0), (0, 2)])

        # Act
        rotated = matrix.rotated(90)

        # Assert
        assert np.allclose(rotated.array, [[0, -2], [1, 0], [1, 1]])

    @pytest.mark.parametrize("angle", [0, 360, -360])
    def test____rotated____full_turns_are_identity(self, angle: float) -> None:
        # Arrange
        matrix = Matrix.from_vertices([(1, 5), (-3, 2)])

        # Act
        rotated = matrix.rotated(angle)

        # Assert
        assert np.allclose(rotated.array, matrix.array)

    def test____rotated____negative_angle(self) -> None:
        # Arrange
        matrix = Matrix.from_vertices([(1, 0)])

        # Act & Assert
        assert np.allclose(matrix.rotated(-90).array, matrix.rotated(270).array)

    def test____rotated____needs_two_rows(self) -> None:
        # Arrange
        matrix = Matrix([[1, 2, 3]])

        # Act & Assert
        with pytest.raises(DimensionMismatchError):
            matrix.rotated(45)

    def test____scaled____default(self) -> None:
        # Arrange
        matrix = Matrix.from_vertices([(1, 2), (3, 4)])

        # Act & Assert
        assert matrix.scaled(2) == Matrix([[2, 6], [4, 8], [1, 1]])
        assert matrix.scaled(2, -1) == Matrix([[2, 6], [-2, -4], [1, 1]])

    @pytest.mark.parametrize(
        ["x", "y", "expected"],
        [
            pytest.param(False, False, [[1, 3], [2, 4], [1, 1]], id="none"),
            pytest.param(True, False, [[-1, -3], [2, 4], [1, 1]], id="x"),
            pytest.param(False, True, [[1, 3], [-2, -4], [1, 1]], id="y"),
            pytest.param(True, True, [[-1, -3], [-2, -4], [1, 1]], id="both"),
        ],
    )
    def test____reflected____negates_rows(self, x: bool, y: bool, expected: list[list[float]]) -> None:
        # Arrange
        matrix = Matrix.from_vertices([(1, 2), (3, 4)])

        # Act & Assert
        assert matrix.reflected(x=x, y=y) == Matrix(expected)
