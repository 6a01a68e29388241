"""
Unit tests for the command-line driver
"""
import matplotlib
matplotlib.use('Agg')

import argparse
import json
import math
import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import main
from main import build_config, run


def make_args(**kwargs):
    defaults = dict(nmc=None, mean=None, sigma=None, accept_threshold=None, mutate_rate=None,
                    mutate_size=None, max_generations=None, population_size=None, seed=None,
                    config=None)
    defaults.update(kwargs)
    return argparse.Namespace(**defaults)


class TestBuildConfig:
    """命令列設定"""

    def test_defaults(self):
        config = build_config(make_args())
        assert config['data']['n_samples'] == 10000
        assert config['fitness']['accept_threshold'] == 0.85
        assert config['evolution']['population_size'] == 500

    def test_cli_overrides(self):
        config = build_config(make_args(nmc=500, max_generations=20, mutate_rate=0.2, seed=7))
        assert config['data']['n_samples'] == 500
        assert config['evolution']['generations'] == 20
        assert config['population']['mutate_rate'] == 0.2
        assert config['population']['seed'] == 7

    def test_starting_parameters_follow_the_data(self):
        config = build_config(make_args(mean=0.5, sigma=2.0))
        constant, mean, sigma = config['model']['parameters']
        assert constant == pytest.approx(1.0 / (2.0 * math.sqrt(2 * math.pi)))
        assert mean == 0.5
        assert sigma == 2.0

    def test_config_file_is_overridden_by_cli(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({'evolution': {'population_size': 40, 'generations': 5}}))

        config = build_config(make_args(config=str(path), population_size=30))
        assert config['evolution'] == {'population_size': 30, 'generations': 5}


class TestRun:
    """端到端執行"""

    def test_small_run(self, tmp_path):
        config = build_config(make_args(nmc=2000, max_generations=10, population_size=30,
                                        accept_threshold=0.0))

        result, df, reference = run(config, run_tests=True, patience=3, output_dir=str(tmp_path))

        assert len(df) == 100
        assert reference.parameter_count() == 3
        assert result.generations_completed <= 11
        assert (tmp_path / 'C_fit.png').exists()
        assert (tmp_path / 'score_history.csv').exists()
        assert (tmp_path / 'C_Score.png').exists()

    def test_run_tests_defaults_to_figures_directory(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        config = build_config(make_args(nmc=1000, max_generations=2, population_size=10))

        run(config, run_tests=True)

        assert (tmp_path / 'figures' / 'C_fit.png').exists()
        assert (tmp_path / 'figures' / 'C_Score.png').exists()

    def test_progress_bar_covers_the_extra_generation(self, monkeypatch):
        totals = []

        class RecordingBar:
            def __init__(self, total=None, **kwargs):
                totals.append(total)
                self.updates = 0

            def __enter__(self):
                return self

            def __exit__(self, *exc):
                return False

            def set_description(self, desc):
                pass

            def update(self, n=1):
                self.updates += n
                assert self.updates <= totals[0]

        monkeypatch.setattr(main, 'tqdm', RecordingBar)
        config = build_config(make_args(nmc=1000, max_generations=3, population_size=10,
                                        accept_threshold=0.0))

        result, _, _ = run(config)

        assert totals == [4]
        assert result.generations_completed == 4
