import pytest

from app.engine.progression import Rank, derive_level, derive_rank, derive_standing, level_progress


@pytest.mark.parametrize(
    "points,level",
    [(0, 1), (99, 1), (100, 2), (250, 3), (-1, 0), (-100, 0), (-101, -1)],
)
def test_derive_level(points, level):
    assert derive_level(points) == level


@pytest.mark.parametrize(
    "level,rank",
    [
        (0, Rank.BEGINNER),
        (2, Rank.BEGINNER),
        (3, Rank.NOVICE),
        (5, Rank.NOVICE),
        (6, Rank.INTERMEDIATE),
        (11, Rank.ADVANCED),
        (16, Rank.EXPERT),
        (20, Rank.EXPERT),
        (21, Rank.MASTER),
    ],
)
def test_derive_rank(level, rank):
    assert derive_rank(level) is rank


def test_rank_values_are_display_labels():
    assert derive_rank(5).value == "Novice"
    assert derive_rank(21).value == "Master"


def test_standing_from_assessment_points():
    standing = derive_standing(300)
    assert standing.level == 4
    assert standing.rank is Rank.NOVICE


def test_level_progress():
    progress = level_progress(250)
    assert progress.level == 3
    assert progress.points_into_level == 50
    assert progress.points_to_next_level == 50
    assert progress.percentage == 50.0

    assert level_progress(0).percentage == 0.0
    assert level_progress(-5).points_into_level == 95
