"""
Shared pytest fixtures for the matrix tool tests.
"""

import pytest

from SquareMatrix import SquareMat


def make_matrix(rows, element_type=int):
    matrix = SquareMat.empty(element_type)
    matrix.set_all(rows)
    return matrix


@pytest.fixture
def build_matrix():
    """Factory building a matrix from nested row lists."""
    return make_matrix


@pytest.fixture
def counting_matrix():
    """4x4 integer matrix holding 1..16 in row-major order."""
    return make_matrix([[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12], [13, 14, 15, 16]])


@pytest.fixture
def small_pair():
    return make_matrix([[1, 2], [3, 4]]), make_matrix([[5, 6], [7, 8]])


class ScriptedConsole:
    """Feeds prepared lines to a session and records everything it prints."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.output = []

    def input(self, prompt=""):
        self.output.append(prompt)
        if not self.lines:
            raise EOFError
        return self.lines.pop(0)

    def print(self, text=""):
        self.output.append(text)

    @property
    def text(self):
        return "\n".join(self.output)


@pytest.fixture
def console_factory():
    return ScriptedConsole
