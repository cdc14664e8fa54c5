import csv
import os
import sys
from pathlib import Path

import pytest
import yaml

sys.path.append(str(Path(__file__).resolve().parents[1]))

from gift_exchange.cli.main import main

ROSTER = "name,group\nAlice,Smith\nBob,Jones\nCarol,Smith\nDave,Jones\n"


@pytest.fixture
def roster_file(tmp_path):
    path = tmp_path / "roster.csv"
    path.write_text(ROSTER, encoding="utf8")
    return path


def test_full_draw_flow(tmp_path, roster_file, capsys):
    state = tmp_path / "state.yaml"
    main(["start", str(roster_file), str(state)])
    assert state.exists()

    main(["draw", str(state)])
    first = capsys.readouterr().out.strip().splitlines()[-1]
    assert first.startswith("Dave - Jones ==> ")

    main(["draw-all", str(state)])
    data = yaml.safe_load(state.read_text())
    assert data["givers"] == []
    assert len(data["drawn"]) == 4

    main(["draw", str(state)])
    assert "No one left to assign" in capsys.readouterr().out

    output = tmp_path / "out" / "results.csv"
    main(["export", str(state), "--output", str(output), "--format", "csv"])
    with open(output, newline="", encoding="utf8") as handle:
        rows = list(csv.DictReader(handle))
    assert len(rows) == 4
    assert all(r["giver_group"] != r["receiver_group"] for r in rows)

    main(["status", str(state)])
    assert "Results (4):" in capsys.readouterr().out

    main(["reset", str(state)])
    data = yaml.safe_load(state.read_text())
    assert len(data["givers"]) == 4
    assert data["drawn"] == []


def test_check(tmp_path, roster_file, capsys):
    main(["check", str(roster_file)])
    assert "A complete assignment exists" in capsys.readouterr().out

    same_group = tmp_path / "same.csv"
    same_group.write_text("name,group\nAlice,Smith\nBob,Smith\n", encoding="utf8")
    main(["check", str(same_group)])
    assert "It isn't possible to assign everyone" in capsys.readouterr().out


def test_rules_option(tmp_path, capsys):
    roster = tmp_path / "roster.csv"
    roster.write_text("name,group\nAlice,\nBob,\n", encoding="utf8")
    rules = tmp_path / "rules.yaml"
    rules.write_text("- name: not_self\n  priority: 1\n", encoding="utf8")

    # blank groups are all the same group for the default rule
    main(["check", str(roster)])
    assert "isn't possible" in capsys.readouterr().out

    main(["check", str(roster), "--rules", str(rules)])
    assert "A complete assignment exists" in capsys.readouterr().out


def test_bad_input_exits_non_zero(tmp_path):
    bad = tmp_path / "roster.csv"
    bad.write_text("group\nSmith\n", encoding="utf8")
    with pytest.raises(SystemExit) as excinfo:
        main(["start", str(bad), str(tmp_path / "state.yaml")])
    assert excinfo.value.code == 1


def test_start_rules_carry_over_to_later_draws(tmp_path, capsys):
    roster = tmp_path / "roster.csv"
    roster.write_text("name,group\nAlice,\nBob,\n", encoding="utf8")
    rules = tmp_path / "rules.yaml"
    rules.write_text("- name: not_self\n  priority: 1\n", encoding="utf8")
    state = tmp_path / "state.yaml"

    main(["start", str(roster), str(state), "--rules", str(rules)])
    assert yaml.safe_load(state.read_text())["rules"] == os.path.abspath(rules)

    main(["draw", str(state)])
    assert capsys.readouterr().out.strip().splitlines()[-1] == "Bob ==> Alice"

    main(["draw-all", str(state)])
    assert capsys.readouterr().out.strip().splitlines()[-1] == "Alice ==> Bob"
    data = yaml.safe_load(state.read_text())
    assert data["givers"] == []
    assert data["receivers"] == []


def test_check_explains_stranded_givers(tmp_path, capsys):
    roster = tmp_path / "roster.csv"
    roster.write_text("name,group\nAlice,Smith\nBob,Smith\nCarol,Jones\n", encoding="utf8")
    rules = tmp_path / "rules.yaml"
    rules.write_text(
        "- name: different_group\n"
        "  priority: 1\n"
        "  explain_exclude: '{receiver.name} is also a {giver.group}'\n"
        "- name: avoid_pairings\n"
        "  priority: 2\n"
        "  params:\n"
        "    pairs:\n"
        "      - giver: Alice\n"
        "        receiver: Carol\n"
        "  explain_exclude: '{giver.name} gave to {receiver.name} last year'\n",
        encoding="utf8",
    )

    main(["check", str(roster), "--rules", str(rules)])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "It isn't possible to assign everyone",
        "Alice has no one to give to:",
        "  Alice is also a Smith",
        "  Bob is also a Smith",
        "  Alice gave to Carol last year",
    ]
