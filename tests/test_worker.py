from worker.tasks import integrate_task, scenario_task


def test_integrate_task_runs_inline():
    result = integrate_task(8.54e36, 200.0, 300.0, steps=300)
    assert result["absorbed"] is True
    assert result["path"][0] == [200.0, 300.0]


def test_scenario_task_returns_snapshot():
    snap = scenario_task("reference", ticks=20)
    assert snap["ticks"] == 20
    (photon,) = snap["photons"]
    assert len(photon["path"]) == 21
    assert photon["absorbed"] is False
