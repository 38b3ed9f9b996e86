import pytest

from worker.tasks import inspiral_task, potential_task


def test_inspiral_task_runs_inline():
    result = inspiral_task(1.0, 1.0, steps=10)
    assert len(result["times"]) == 10
    assert result["final_mass"] == pytest.approx(2.0)


def test_potential_task_runs_inline():
    result = potential_task("newton", 1.0, 0.97, 4.0, 2.0, 20.0, steps=5)
    assert result["theory"] == "newton"
    assert result["radii"] == pytest.approx([2.0, 6.5, 11.0, 15.5, 20.0])
