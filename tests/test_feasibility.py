import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from gift_exchange.engine.feasibility import valid_solution_exists
from gift_exchange.models.participant import Participant
from gift_exchange.rules import valid_pair


def test_empty_givers_is_always_solvable():
    receivers = [Participant("A", "1")]
    assert valid_solution_exists([], receivers, valid_pair)
    assert valid_solution_exists([], [], valid_pair)


def test_alternating_groups_solvable(alternating_roster):
    assert valid_solution_exists(
        list(alternating_roster), list(alternating_roster), valid_pair
    )


def test_single_group_unsolvable():
    people = [Participant("A", "1"), Participant("B", "1")]
    assert not valid_solution_exists(list(people), list(people), valid_pair)


def test_dominant_group_unsolvable():
    # three people of group 1 can only give to the two outsiders
    people = [
        Participant("A", "1"),
        Participant("B", "1"),
        Participant("C", "1"),
        Participant("D", "2"),
        Participant("E", "3"),
    ]
    assert not valid_solution_exists(list(people), list(people), valid_pair)


def test_search_leaves_pools_untouched(alternating_roster):
    unsolvable = [Participant("A", "1"), Participant("B", "1"), Participant("C", "2")]
    for people in (alternating_roster, unsolvable):
        givers = list(people)
        receivers = list(reversed(people))
        before = (list(givers), list(receivers))
        valid_solution_exists(givers, receivers, valid_pair)
        assert (givers, receivers) == before


def test_receivers_tried_in_index_order():
    calls = []

    def spy(giver, receiver):
        calls.append((giver.name, receiver.name))
        return True

    givers = [Participant("G")]
    receivers = [Participant("R1"), Participant("R2"), Participant("R3")]
    assert valid_solution_exists(givers, receivers, spy)
    assert calls == [("G", "R1"), ("G", "R2"), ("G", "R3")]


def test_givers_consumed_from_end():
    seen = []

    def spy(giver, receiver):
        seen.append(giver.name)
        return True

    givers = [Participant("first"), Participant("last")]
    receivers = [Participant("x"), Participant("y")]
    valid_solution_exists(givers, receivers, spy)
    assert seen[0] == "last"
