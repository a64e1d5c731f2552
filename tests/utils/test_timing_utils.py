import pytest

from utils.timing import PhaseTimer


def test_phase_timer_records_phase_and_context():
    timer = PhaseTimer({"combinations": 4})

    with timer.measure("calculate", {"papers": 2}):
        pass

    with timer.measure("assemble"):
        pass

    entries = timer.as_list()
    assert len(entries) == 2

    first, second = entries
    assert first["phase"] == "calculate"
    assert first["combinations"] == 4
    assert first["papers"] == 2
    assert first["duration"] >= 0

    assert second["phase"] == "assemble"
    assert "papers" not in second
    assert timer.total() == pytest.approx(first["duration"] + second["duration"])


def test_phase_timer_records_failed_phase():
    timer = PhaseTimer()

    with pytest.raises(RuntimeError):
        with timer.measure("calculate"):
            raise RuntimeError("boom")

    assert [entry["phase"] for entry in timer.as_list()] == ["calculate"]
