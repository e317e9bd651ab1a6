"""
Command-line interface for percolation_stats.

Usage:
    percolation-stats N T
    percolation-stats N T --seed 42 --workers 4
    percolation-stats N T --config experiment.yaml --verbose

Runs T percolation trials on N-by-N grids and prints:

    mean = <float>
    stddev = <float>
    95% confidence interval = <lo>, <hi>
"""

import click

from .. import __version__
from ..exceptions import InvalidArgument
from ..percolation.stats import ExperimentRunner
from ..run.config import ExperimentConfig
from ..utils.timing import format_duration, timed

USAGE = "Usage: percolation-stats N T [--seed S] [--workers W] [--config FILE] [--verbose]"


def _fail(ctx: click.Context, message: str) -> None:
    click.echo(message, err=True)
    ctx.exit(1)


@click.command(context_settings={'ignore_unknown_options': True})
@click.argument('args', nargs=-1)
@click.option('--seed', '-s', type=int, default=None,
              help='Seed for the random generator (default: fresh entropy)')
@click.option('--workers', '-w', type=int, default=None,
              help='Number of worker processes (default: 1)')
@click.option('--config', '-c', 'config_file', type=click.Path(exists=True),
              help='YAML experiment config (seed, workers, verbose)')
@click.option('--verbose/--quiet', '-v/-q', default=None,
              help='Echo run parameters and elapsed time to stderr')
@click.version_option(version=__version__)
@click.pass_context
def cli(ctx, args, seed, workers, config_file, verbose):
    """Estimate the site percolation threshold of N-by-N grids over T trials."""
    import numpy as np

    if len(args) != 2:
        _fail(ctx, USAGE)

    try:
        n, trials = int(args[0]), int(args[1])
    except ValueError:
        _fail(ctx, f"ERROR: N and T must be integers, got {args[0]!r} {args[1]!r}\n{USAGE}")

    try:
        config = ExperimentConfig.from_yaml(config_file) if config_file else ExperimentConfig()
        config = config.merged(seed=seed, workers=workers, verbose=verbose)
    except ValueError as e:
        _fail(ctx, f"ERROR: {e}")

    try:
        runner = ExperimentRunner(
            n, trials,
            rng=np.random.default_rng(config.seed),
            workers=config.workers,
        )
    except InvalidArgument as e:
        _fail(ctx, f"ERROR: {e}")

    if config.verbose:
        click.echo(f"Running {trials} trials on {n}x{n} grids", err=True)
        click.echo(f"  seed={config.seed}, workers={config.workers}", err=True)

    with timed() as timing:
        runner.run()

    if config.verbose:
        click.echo(f"✓ Completed {trials} trials in {format_duration(timing['seconds'])}", err=True)

    click.echo(f"mean = {runner.mean()}")
    click.echo(f"stddev = {runner.stddev()}")
    click.echo(f"95% confidence interval = {runner.confidence_lo()}, {runner.confidence_hi()}")


if __name__ == '__main__':
    cli()
