"""Tests for points/models.py: dataclass serialization."""

from points.models import ComputedDayProgress, ComputedTaskPoints, DayRecord, DaySnapshot, History, TaskSnapshot


def test_task_from_dict_defaults():
    t = TaskSnapshot.from_dict({"title": "Walk", "target": 3})
    assert t.max == 3
    assert t.scalar == 1.0
    assert t.bonus == 0.0
    assert t.is_routine is False


def test_task_from_dict_accepts_original_names():
    t = TaskSnapshot.from_dict({"title": "Walk", "points": 2, "routine": True, "optional": True, "target": 1})
    assert t.base_points == 2.0
    assert t.is_routine is True
    assert t.is_optional is True


def test_task_to_dict_omits_defaults():
    d = TaskSnapshot(title="Walk", base_points=2, target=1, max=2).to_dict()
    assert d == {"title": "Walk", "basePoints": 2, "target": 1, "completed": 0, "max": 2, "isRoutine": False}


def test_task_round_trip():
    t = TaskSnapshot(title="Walk", base_points=2, target=1, max=3, is_routine=True, reward=1, scalar=1.5, bonus=0.2)
    assert TaskSnapshot.from_dict(t.to_dict()) == t


def test_day_from_dict():
    d = DaySnapshot.from_dict({
        "date": "2026-02-11",
        "targetPoints": 10,
        "priorConsecutiveDays": 3,
        "tasks": [{"title": "A", "target": 1}, "junk"],
    })
    assert d.target_points == 10.0
    assert d.prior_consecutive_days == 3
    assert len(d.tasks) == 1


def test_day_from_empty():
    assert DaySnapshot.from_dict({}) == DaySnapshot()


def test_progress_to_dict():
    p = ComputedDayProgress(
        total_points=11.5,
        progress_ratio=1.0,
        task_points=(ComputedTaskPoints(earned_points=11.5, title="A", ratio=1.0),),
        date="2026-02-11",
    )
    d = p.to_dict()
    assert d["totalPoints"] == 11.5
    assert d["tasks"][0]["earnedPoints"] == 11.5
    assert "unscoreable" not in d


def test_history_sorted_and_filtered():
    h = History.from_dict({"days": [
        {"date": "2026-02-10", "targetPoints": 5, "totalPoints": 6},
        {"date": "2026-02-09", "targetPoints": 5, "totalPoints": 1},
        None,
    ]})
    assert [r.date for r in h.days] == ["2026-02-09", "2026-02-10"]
    assert h.get("2026-02-11") is None


def test_day_record_met_target():
    assert DayRecord(target_points=5, total_points=5).met_target is True
    assert DayRecord(target_points=0, total_points=5).met_target is False


def test_task_from_dict_unreadable_numbers(caplog):
    with caplog.at_level("WARNING", logger="points.models"):
        t = TaskSnapshot.from_dict({
            "title": "Walk",
            "target": 2,
            "basePoints": "lots",
            "completed": "n/a",
            "scalar": float("inf"),
            "bonus": [0.1],
        })
    assert t.base_points == 0.0
    assert t.completed == 0
    assert t.scalar == 1.0
    assert t.bonus == 0.0
    assert "basePoints" in caplog.text


def test_task_from_dict_numeric_strings():
    t = TaskSnapshot.from_dict({"title": "Walk", "target": "3", "max": "5.0", "basePoints": "1.5"})
    assert t.target == 3
    assert t.max == 5
    assert t.base_points == 1.5


def test_task_from_dict_unreadable_target_is_zero():
    assert TaskSnapshot.from_dict({"title": "Walk", "target": "soon"}).target == 0


def test_day_from_dict_unreadable_numbers():
    d = DaySnapshot.from_dict({"targetPoints": "ten", "priorConsecutiveDays": "n/a", "tasks": []})
    assert d.target_points == 0.0
    assert d.prior_consecutive_days == 0


def test_history_record_unreadable_totals():
    h = History.from_dict({"days": [{"date": "2026-02-10", "targetPoints": "x", "totalPoints": None}]})
    assert h.days[0].target_points == 0.0
    assert h.days[0].total_points == 0.0
