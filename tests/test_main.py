import json

import pytest

from fit_coach.main import main


def test_main_prints_json(capsys):
    assert main(["--equipment", "dumbbells,bodyweight", "--schedule", "3", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["name"] == "2-week baseline"
    assert [d["title"] for d in data["weeks"][0]["days"]] == [
        "Full Body A",
        "Full Body B",
        "Full Body A",
    ]


def test_main_prints_text(capsys):
    assert main(["--equipment", "gym", "--schedule", "5"]) == 0
    out = capsys.readouterr().out
    assert "Day 4 — Lower" in out


@pytest.mark.parametrize("equipment", ["", "kettlebell", "gym,kettlebell"])
def test_main_rejects_bad_equipment(equipment):
    with pytest.raises(SystemExit) as exc:
        main(["--equipment", equipment])
    assert exc.value.code == 2


def test_main_rejects_bad_schedule():
    with pytest.raises(SystemExit):
        main(["--equipment", "gym", "--schedule", "9"])
