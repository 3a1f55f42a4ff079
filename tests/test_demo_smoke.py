"""
SMOKE TEST: SINGLE TOWER DEMO
=============================

Runs the command-line demo end to end on a small tower and checks that every
artifact is written. It does not check geometry; the unit tests do that.
"""

import importlib.util
from pathlib import Path

import pytest

DEMO_PATH = Path(__file__).parent.parent / "demos" / "run_tower_single.py"


@pytest.fixture
def demo():
    spec = importlib.util.spec_from_file_location("run_tower_single", DEMO_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_demo_writes_artifacts(demo, tmp_path):
    code = demo.main([
        '--floors', '6',
        '--bend-angle', '35', '--bend-direction', '45',
        '--shape-bottom', 'triangle', '--shape-top', 'circle',
        '--twist-y', '0', '90',
        '--outdir', str(tmp_path),
    ])
    assert code == 0
    for name in ('tower_schedule.csv', 'tower_profiles.png', 'tower_3d.html', 'towercraft.log'):
        assert (tmp_path / name).exists(), f"missing {name}"


def test_demo_rejects_out_of_range(demo, tmp_path):
    code = demo.main(['--floors', '500', '--outdir', str(tmp_path)])
    assert code == 2
    assert not (tmp_path / 'tower_3d.html').exists()


def test_demo_rejects_bad_color(demo, tmp_path):
    assert demo.main(['--color-top', 'orange', '--outdir', str(tmp_path)]) == 2


def test_demo_log_file_option(demo, tmp_path):
    log_path = tmp_path / 'logs' / 'run.log'
    code = demo.main(['--floors', '3', '--outdir', str(tmp_path), '--log-file', str(log_path)])
    assert code == 0
    assert 'Logging initialized' in log_path.read_text(encoding='utf-8')
