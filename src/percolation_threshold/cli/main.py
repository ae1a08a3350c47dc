"""
Command-line interface for percolation_threshold.

Commands:
    percolate stats 200 100 --seed 42 --workers 4
    percolate run --config config/threshold.yaml
    percolate summarize results/samples.npz
    percolate trace input10.txt --show-grid
"""

import time

import click
from pathlib import Path

from ..percolation.errors import InvalidDimension


def _echo_report(ps, output_file=None):
    from ..percolation.stats import format_report

    click.echo(format_report(ps))

    if output_file is not None:
        output_file = Path(output_file)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        ps.save(output_file)
        click.echo(f"Saved {ps.trials} trial fractions to {output_file}")


@click.group()
@click.version_option()
def cli():
    """Percolation Threshold - Monte Carlo estimation of the site percolation threshold."""
    pass


@cli.command('stats')
@click.argument('n', type=click.IntRange(min=1))
@click.argument('trials', type=click.IntRange(min=1))
@click.option('--seed', type=click.IntRange(min=0), default=None, help='Random seed for reproducible trials')
@click.option('--workers', '-w', type=click.IntRange(min=1), default=1,
              help='Number of worker processes')
@click.option('--output', '-o', 'output_file', type=click.Path(),
              help='Save trial fractions to this .npz file')
@click.option('--verbose', '-v', is_flag=True, help='Print parameters and timing')
def stats(n, trials, seed, workers, output_file, verbose):
    """Estimate the threshold on an N-by-N grid over TRIALS trials."""
    from ..percolation.stats import PercolationStats

    if verbose:
        click.echo(f"Running {trials} trials on a {n}x{n} grid "
                   f"(seed={seed}, workers={workers})")

    start_time = time.time()
    ps = PercolationStats(n, trials, seed=seed, workers=workers)

    if verbose:
        click.echo(f"Finished in {time.time() - start_time:.1f}s")

    _echo_report(ps, output_file)


@cli.command('run')
@click.option('--config', '-c', 'config_file', required=True, type=click.Path(exists=True),
              help='Simulation config YAML')
@click.option('--verbose', '-v', is_flag=True, help='Print parameters and timing')
def run(config_file, verbose):
    """Estimate the threshold using parameters from a config file."""
    from ..config import SimulationConfig
    from ..percolation.stats import PercolationStats

    try:
        config = SimulationConfig.from_yaml(config_file)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint='--config')

    if verbose:
        click.echo(f"Loaded {config_file}")
        click.echo(f"  grid_size={config.grid_size}, trials={config.trials}, "
                   f"seed={config.seed}, workers={config.workers}")

    start_time = time.time()
    try:
        ps = PercolationStats(config.grid_size, config.trials,
                              seed=config.seed, workers=config.workers)
    except InvalidDimension as e:
        raise click.UsageError(str(e))

    if verbose:
        click.echo(f"Finished in {time.time() - start_time:.1f}s")

    _echo_report(ps, config.samples_path)


@cli.command('summarize')
@click.argument('samples_file', type=click.Path(exists=True))
def summarize(samples_file):
    """Print the report for a trial sample saved with --output."""
    from ..percolation.stats import PercolationStats

    try:
        ps = PercolationStats.load(samples_file)
    except KeyError as e:
        raise click.BadParameter(f"sample file is missing key {e}", param_hint='SAMPLES_FILE')
    except (ValueError, OSError) as e:
        raise click.BadParameter(str(e), param_hint='SAMPLES_FILE')

    click.echo(f"{ps.trials} trials on a {ps.n}x{ps.n} grid")
    _echo_report(ps)


@cli.command('trace')
@click.argument('sites_file', type=click.Path(exists=True))
@click.option('--show-grid', is_flag=True, help='Render the final grid')
def trace(sites_file, show_grid):
    """Replay a site file and report whether the grid percolates."""
    from ..percolation.io import read_sites, replay_sites, render_grid

    try:
        n, sites = read_sites(sites_file)
        perc = replay_sites(n, sites)
    except (ValueError, IndexError) as e:
        raise click.BadParameter(str(e), param_hint='SITES_FILE')

    click.echo(f"{perc.number_of_open_sites()} open sites")
    click.echo("percolates" if perc.percolates() else "does not percolate")

    if show_grid:
        click.echo(render_grid(perc))


if __name__ == '__main__':
    cli()
