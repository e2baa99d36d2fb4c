"""
Test utilities for creating game snapshots easily.

These utilities create pure scoring_core structures without database
dependencies, making it easy to test formats, leaderboards and detail views.
"""

from golfscore.scoring_core.builder import GameBuilder
from golfscore.scoring_core.structure import Game


# Convenience functions for common test scenarios


def create_american_game(format: str = "american") -> Game:
    """Three players over three holes.

    Hole 1: 4, 4, 5 -> 3, 3, 0
    Hole 2: 3, 4, 5 -> 4, 2, 0
    Hole 3: 5, 4, 4 -> 0, 3, 3
    """
    return (
        GameBuilder(format)
        .player("ann", gross=[4, 3, 5], name="Ann")
        .player("bob", gross=[4, 4, 4], name="Bob")
        .player("cat", gross=[5, 5, 4], name="Cat")
        .build()
    )


def create_wolf_game(format: str = "wolf") -> Game:
    """Three players, tee order a-b-c, Cat plays off 18.

    Hole 1: Ann is Wolf and takes Bob
    Hole 2: Bob goes Lone Wolf
    Hole 3: Cat goes Blind Lone Wolf
    Hole 4: Ann is Wolf again but no decision was recorded
    """
    return (
        GameBuilder(format)
        .player("a", gross=[4, 4, 4, 4], name="Ann")
        .player("b", gross=[5, 3, 6, 4], name="Bob")
        .player("c", handicap=18, gross=[5, 5, 5, 4], name="Cat")
        .wolf_order("a", "b", "c")
        .wolf(1, "a", partner="b")
        .wolf(2, "b", lone=True)
        .wolf(3, "c", blind=True)
        .build()
    )


def create_match(format: str, left_gross, right_gross, left_handicap=None, right_handicap=None) -> Game:
    """A head-to-head game between Ann and Bob."""
    return (
        GameBuilder(format)
        .player("ann", left_handicap, left_gross, name="Ann")
        .player("bob", right_handicap, right_gross, name="Bob")
        .build()
    )


def create_fourball(format: str = "2v2 gross") -> Game:
    """Two teams of two.

    Hole 1: team one's 4 beats 5
    Hole 2: team two's 3 beats 4
    Hole 3: team two has no score yet
    """
    return (
        GameBuilder(format)
        .player("ann", gross=[4, None, 4])
        .player("bob", gross=[5, 4])
        .player("cat", gross=[5, 3])
        .player("dan", gross=[5])
        .team("t1", "ann", "bob", name="Eagles")
        .team("t2", "cat", "dan", name="Hawks")
        .build()
    )
