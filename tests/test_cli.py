"""Tests for the command-line interface."""

import numpy as np
import yaml
from click.testing import CliRunner

from percolation_threshold.cli.main import cli
from percolation_threshold.percolation.stats import PercolationStats


class TestStatsCommand:
    """Tests for `percolate stats`."""

    def test_report(self):
        """Test the report lines are printed."""
        result = CliRunner().invoke(cli, ['stats', '10', '5', '--seed', '1'])

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].startswith("mean                    = ")
        assert lines[1].startswith("stddev                  = ")
        assert lines[2].startswith("95% confidence interval = [")

    def test_matches_library(self):
        """Test the printed mean matches the library result for the same seed."""
        result = CliRunner().invoke(cli, ['stats', '8', '4', '--seed', '3'])
        expected = PercolationStats(8, 4, seed=3).mean()

        assert f"{expected:.16f}" in result.output

    def test_missing_argument(self):
        """Test that a missing trial count is a usage error."""
        result = CliRunner().invoke(cli, ['stats', '10'])

        assert result.exit_code == 2

    def test_non_integer(self):
        """Test that non-integer arguments are a usage error."""
        result = CliRunner().invoke(cli, ['stats', 'ten', '5'])

        assert result.exit_code == 2

    def test_non_positive(self):
        """Test that non-positive arguments are a usage error."""
        runner = CliRunner()

        assert runner.invoke(cli, ['stats', '0', '5']).exit_code == 2
        assert runner.invoke(cli, ['stats', '5', '--', '-1']).exit_code == 2

    def test_output_and_summarize(self, tmp_path):
        """Test saving a sample and summarizing it later."""
        runner = CliRunner()
        samples = tmp_path / 'out' / 'samples.npz'

        result = runner.invoke(cli, ['stats', '6', '5', '--seed', '9', '-o', str(samples)])
        assert result.exit_code == 0
        assert samples.exists()

        summary = runner.invoke(cli, ['summarize', str(samples)])
        assert summary.exit_code == 0
        assert "5 trials on a 6x6 grid" in summary.output
        assert result.output.splitlines()[:3] == summary.output.splitlines()[1:4]

    def test_negative_seed(self):
        """Test that a negative seed is a usage error."""
        result = CliRunner().invoke(cli, ['stats', '5', '3', '--seed', '-1'])

        assert result.exit_code == 2

    def test_verbose(self):
        """Test verbose mode prints parameters."""
        result = CliRunner().invoke(cli, ['stats', '5', '2', '--seed', '1', '-v'])

        assert result.exit_code == 0
        assert "Running 2 trials on a 5x5 grid" in result.output


class TestRunCommand:
    """Tests for `percolate run`."""

    def test_run_from_config(self, tmp_path):
        """Test running with a YAML config."""
        samples = tmp_path / 'samples.npz'
        config = tmp_path / 'threshold.yaml'
        config.write_text(yaml.safe_dump({
            'simulation': {'grid_size': 6, 'trials': 4, 'seed': 7},
            'output': {'samples': str(samples)},
        }))

        result = CliRunner().invoke(cli, ['run', '--config', str(config)])

        assert result.exit_code == 0
        assert "mean" in result.output
        assert samples.exists()

    def test_run_invalid_trials(self, tmp_path):
        """Test that a non-positive trial count in the config is a usage error."""
        config = tmp_path / 'threshold.yaml'
        config.write_text(yaml.safe_dump({'simulation': {'grid_size': 6, 'trials': 0}}))

        result = CliRunner().invoke(cli, ['run', '--config', str(config)])

        assert result.exit_code == 2

    def test_run_missing_section(self, tmp_path):
        """Test that a config without a simulation section is rejected."""
        config = tmp_path / 'threshold.yaml'
        config.write_text(yaml.safe_dump({'output': {}}))

        result = CliRunner().invoke(cli, ['run', '--config', str(config)])

        assert result.exit_code == 2

    def test_run_non_integer_value(self, tmp_path):
        """Test that a non-integer grid size in the config is a usage error."""
        config = tmp_path / 'threshold.yaml'
        config.write_text(yaml.safe_dump({'simulation': {'grid_size': 'abc', 'trials': 3}}))

        result = CliRunner().invoke(cli, ['run', '--config', str(config)])

        assert result.exit_code == 2
        assert "grid_size" in result.output


class TestSummarizeCommand:
    """Tests for `percolate summarize`."""

    def test_empty_sample(self, tmp_path):
        """Test that a sample with no trials is a usage error."""
        samples = tmp_path / 'empty.npz'
        np.savez(samples, n=5, trials=0, fractions=np.array([]))

        result = CliRunner().invoke(cli, ['summarize', str(samples)])

        assert result.exit_code == 2

    def test_missing_key(self, tmp_path):
        """Test that a sample without fractions is a usage error."""
        samples = tmp_path / 'partial.npz'
        np.savez(samples, n=5)

        result = CliRunner().invoke(cli, ['summarize', str(samples)])

        assert result.exit_code == 2
        assert "fractions" in result.output


class TestTraceCommand:
    """Tests for `percolate trace`."""

    def test_trace(self, tmp_path):
        """Test replaying a percolating site file."""
        sites = tmp_path / 'input3.txt'
        sites.write_text("3\n1 1\n2 1\n3 1\n3 3\n")

        result = CliRunner().invoke(cli, ['trace', str(sites), '--show-grid'])

        assert result.exit_code == 0
        assert result.output.splitlines() == [
            "4 open sites",
            "percolates",
            "~##",
            "~##",
            "~#.",
        ]

    def test_trace_not_percolating(self, tmp_path):
        """Test replaying a site file that does not percolate."""
        sites = tmp_path / 'input2-no.txt'
        sites.write_text("2\n1 1\n2 2\n")

        result = CliRunner().invoke(cli, ['trace', str(sites)])

        assert result.exit_code == 0
        assert "does not percolate" in result.output

    def test_trace_out_of_range(self, tmp_path):
        """Test that a site outside the grid is a usage error."""
        sites = tmp_path / 'bad.txt'
        sites.write_text("2\n3 1\n")

        result = CliRunner().invoke(cli, ['trace', str(sites)])

        assert result.exit_code == 2
