import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parents[1]))

from gift_exchange.models.participant import Participant
from gift_exchange.reporting import explain_pairing, explain_unmatched
from gift_exchange.rules import AvoidPairingsRule, DifferentGroupRule, default_rules

ALICE = Participant("Alice", "Smith")
BOB = Participant("Bob", "Smith")
CAROL = Participant("Carol", "Jones")


def test_explain_pairing_uses_first_rejecting_rule():
    rules = [
        DifferentGroupRule(
            name="different_group", explain_exclude="{giver.name} shares a group"
        ),
        AvoidPairingsRule(
            name="avoid_pairings",
            params={"pairs": [{"giver": "Alice", "receiver": "Bob"}]},
            explain_exclude="{giver.name} had {receiver.name} last year",
        ),
    ]
    assert explain_pairing(rules, ALICE, BOB) == "Alice shares a group"
    assert explain_pairing(rules[1:], ALICE, BOB) == "Alice had Bob last year"
    assert explain_pairing(rules, ALICE, CAROL) == ""


def test_explain_unmatched_lists_only_stranded_givers():
    roster = [ALICE, BOB, CAROL]
    rules = [
        DifferentGroupRule(name="different_group"),
        AvoidPairingsRule(
            name="avoid_pairings",
            params={"pairs": [{"giver": "Alice", "receiver": "Carol"}]},
            explain_exclude="{giver.name} had {receiver.name} last year",
        ),
    ]
    unmatched = explain_unmatched(roster, rules)
    assert list(unmatched) == ["Alice"]
    assert unmatched["Alice"] == [
        "Alice -> Alice excluded by different_group",
        "Alice -> Bob excluded by different_group",
        "Alice had Carol last year",
    ]


def test_explain_unmatched_empty_when_everyone_has_a_receiver():
    assert explain_unmatched([ALICE, CAROL], default_rules()) == {}
