import pytest
from exactgauss import AugmentedMatrix, PREDEFINED_SYSTEMS


@pytest.fixture(params=range(len(PREDEFINED_SYSTEMS)), scope="session")
def predefined_grid(request: pytest.FixtureRequest) -> list:
    """Provide session-level fixture for every predefined augmented system."""
    return PREDEFINED_SYSTEMS[request.param]


@pytest.fixture
def column_recorder():
    """Observer that records the column indices it is notified with."""

    class ColumnRecorder(list):

        def __call__(self, col):
            self.append(col)

    return ColumnRecorder()


@pytest.fixture
def unique_solution_matrix() -> AugmentedMatrix:
    """x + y + 2z = 9, 2x + 4y - 3z = 1, 3x + 6y - 5z = 0 with solution (1, 2, 3)."""
    return AugmentedMatrix([[1, 1, 2, 9], [2, 4, -3, 1], [3, 6, -5, 0]])


@pytest.fixture
def rank_deficient_matrix() -> AugmentedMatrix:
    return AugmentedMatrix([[1, 6, 0, 0, 4, -2], [0, 0, 1, 0, 3, 1], [0, 0, 0, 1, 5, 2], [0, 0, 0, 0, 0, 0]])
