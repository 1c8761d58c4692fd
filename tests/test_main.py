"""Unit tests for application entry point and configuration."""

import json

import pytest

from windfarm_route.main import WindFarmApplication, deep_merge, load_config, main


@pytest.fixture
def seed_file(tmp_path):
    path = tmp_path / "turbines.json"
    path.write_text(json.dumps([
        {"position": [0, 0, 0]},
        {"position": [10, 0, 0]},
        {"position": [1, 0, 0]},
    ]))
    return path


class TestConfig:
    """Tests for configuration loading."""

    def test_defaults_without_file(self, tmp_path):
        """Test missing config file gives defaults."""
        config = load_config(str(tmp_path / "missing.yaml"))
        assert config["planner"]["add_distance"] == 5.0
        assert config["logging"]["level"] == "INFO"

    def test_yaml_overrides(self, tmp_path):
        """Test YAML values are merged over defaults."""
        path = tmp_path / "config.yaml"
        path.write_text("planner:\n  add_distance: 2.5\nlogging:\n  level: DEBUG\n")

        config = load_config(str(path))

        assert config["planner"]["add_distance"] == 2.5
        assert config["logging"]["level"] == "DEBUG"
        assert config["path"]["curve_points"] == 100

    def test_deep_merge(self):
        """Test nested dicts merge instead of replacing."""
        base = {"a": {"b": 1, "c": 2}, "d": 3}
        deep_merge(base, {"a": {"c": 5}, "e": 6})
        assert base == {"a": {"b": 1, "c": 5}, "d": 3, "e": 6}


class TestWindFarmApplication:
    """Tests for WindFarmApplication class."""

    def test_loads_seed(self, seed_file):
        """Test the seed file populates shared positions and the planner."""
        app = WindFarmApplication(seed_path=str(seed_file))

        assert len(app.shared_positions) == 3
        assert len(app.planner.store) == 3

    def test_no_seed(self):
        """Test starting with no points."""
        app = WindFarmApplication()
        assert len(app.planner.store) == 0

    def test_no_seed_syncs_shared_positions(self):
        """Test points added without a seed reach the app's shared store."""
        app = WindFarmApplication()

        app.console.execute("add 1 2 3")

        assert app.planner.shared_positions is app.shared_positions
        assert app.shared_positions.get_positions() == [(1.0, 2.0, 3.0)]

    def test_uses_given_config(self, seed_file):
        """Test a loaded config dict is used as is."""
        config = load_config(None)
        config["planner"]["add_distance"] = 2.0

        app = WindFarmApplication(seed_path=str(seed_file), config=config)

        assert app.config is config
        assert app.planner.add_distance == 2.0

    def test_run_batch_and_export(self, seed_file, tmp_path, capsys):
        """Test batch mode prints and exports the path."""
        app = WindFarmApplication(seed_path=str(seed_file))
        output = tmp_path / "out" / "path.json"

        path = app.run_batch(str(output))

        assert len(path) == 3
        assert "Length: 10.00" in capsys.readouterr().out
        data = json.loads(output.read_text())
        assert [p["position"] for p in data["path"]] == [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [10.0, 0.0, 0.0]]
        assert data["length"] == pytest.approx(10.0)

    def test_export_default_location(self, seed_file, tmp_path):
        """Test export falls back to the configured output directory."""
        app = WindFarmApplication(seed_path=str(seed_file))
        app.config["export"]["output_dir"] = str(tmp_path / "exports")
        app.planner.recompute_path()

        target = app.export_path()

        assert target == tmp_path / "exports" / "path.json"
        assert target.exists()


class TestMain:
    """Tests for the command-line entry point."""

    def test_batch(self, seed_file, tmp_path):
        """Test a successful batch run."""
        output = tmp_path / "path.json"
        code = main(["--config", str(tmp_path / "none.yaml"), "--seed", str(seed_file), "--output", str(output)])

        assert code == 0
        assert output.exists()

    def test_malformed_seed(self, tmp_path):
        """Test a malformed seed exits with status 1."""
        bad = tmp_path / "bad.json"
        bad.write_text(json.dumps([{"position": [0, 0]}]))

        assert main(["--config", str(tmp_path / "none.yaml"), "--seed", str(bad)]) == 1

    def test_missing_seed(self, tmp_path):
        """Test a missing seed file exits with status 1."""
        assert main(["--config", str(tmp_path / "none.yaml"), "--seed", str(tmp_path / "nope.json")]) == 1

    def test_huge_number_seed(self, tmp_path):
        """Test an out-of-range coordinate exits with status 1."""
        bad = tmp_path / "huge.json"
        bad.write_text('[{"position": [1' + "0" * 400 + ', 0, 0]}]')

        assert main(["--config", str(tmp_path / "none.yaml"), "--seed", str(bad)]) == 1

    def test_undecodable_seed(self, tmp_path):
        """Test a non-UTF-8 seed file exits with status 1."""
        bad = tmp_path / "binary.json"
        bad.write_bytes(b'[{"position": [0, 0, 0], "name": "\xff\xfe"}]')

        assert main(["--config", str(tmp_path / "none.yaml"), "--seed", str(bad)]) == 1
