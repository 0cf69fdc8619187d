import pytest

from rainwalk.model.exposure import simulate_rain_hit
from rainwalk.view.widgets.exposure_chart import ExposureChart


@pytest.fixture
def chart(qapp):
    c = ExposureChart()
    c.resize(800, 500)
    yield c
    c.deleteLater()


def results(speeds):
    return [simulate_rain_hit(10.0, 5.0, v, 0.1, 0.5) for v in speeds]


def test_append_and_clear(chart):
    assert not chart.btn_export.isEnabled()
    for r in results([0.5, 1.0]):
        chart.append_result(r)
    assert len(chart.results) == 2
    assert chart.btn_export.isEnabled()
    x, y = chart.curves["total_rain"].getData()
    assert list(x) == [0.5, 1.0]

    chart.clear()
    assert chart.results == ()
    assert not chart.btn_export.isEnabled()


@pytest.mark.parametrize("speeds", [[2.0], [0.5, 1.0, 2.0, 3.0, 4.0]])
def test_export_png(chart, tmp_path, speeds):
    for r in results(speeds):
        chart.append_result(r)
    chart.mark_best()

    out = tmp_path / "chart.png"
    chart.export(str(out), width=800)
    assert out.exists()
    assert out.stat().st_size > 0
