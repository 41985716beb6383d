"""
spherekit Command Line Interface.

Main entry point for the spherekit CLI application.
"""

import json
import sys
from pathlib import Path
from typing import Optional

import click

from spherekit import __version__
from spherekit.cli.utils import (
    setup_logging,
    validate_path,
    emit_result,
)
from spherekit.config import Config
from spherekit.core import geometry

# Lets numeric arguments such as "-1" or "-0.5" through the option parser
NUMERIC_ARGS = {"ignore_unknown_options": True}


def _emit(ctx: click.Context, **fields: float) -> None:
    config: Config = ctx.obj["config"]
    emit_result(fields, config.output.precision, config.output.format)


# Create main CLI group
@click.group()
@click.version_option(version=__version__, prog_name="spherekit")
@click.option(
    "-v", "--verbose",
    count=True,
    help="Increase verbosity (use -vv for debug output)"
)
@click.option(
    "-q", "--quiet",
    is_flag=True,
    help="Suppress non-error log output"
)
@click.option(
    "-c", "--config-file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Configuration file (.toml, .yaml or .yml)"
)
@click.option(
    "--precision",
    type=click.IntRange(0, 17),
    default=None,
    help="Decimal places in printed results"
)
@click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Result output format"
)
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: bool,
    config_file: Optional[str],
    precision: Optional[int],
    output_format: Optional[str],
) -> None:
    """
    spherekit: spherical coordinate conversions and sphere measurements.

    Angles are in radians. theta is the azimuth from the +X axis,
    phi is the polar angle from the +Z axis.

    \b
    Commands:
      to-cartesian     Convert (r, theta, phi) to (x, y, z)
      from-cartesian   Convert (x, y, z) to (r, theta, phi)
      surface-area     Surface area of a sphere
      volume           Volume of a sphere
      distance         Great-circle distance between two points
      cap              Spherical cap surface area
      zone             Spherical zone surface area
      segment-volume   Spherical segment volume
      sector-volume    Spherical sector volume
      config           Manage configuration
      info             Show system and package information

    Use 'spherekit COMMAND --help' for command-specific help.
    """
    # Ensure context object exists
    ctx.ensure_object(dict)

    if config_file:
        try:
            config = Config.from_file(config_file)
        except Exception as e:
            raise click.ClickException(f"Invalid configuration {config_file}: {e}")
    else:
        config = Config()

    # Command-line options override the config file
    if precision is not None:
        config.output.precision = precision
    if output_format is not None:
        config.output.format = output_format

    ctx.obj["config"] = config

    if quiet:
        log_level = "ERROR"
    elif verbose:
        log_level = "DEBUG" if verbose > 1 else "INFO"
    else:
        log_level = config.logging.level
    setup_logging(log_level)


@cli.command("to-cartesian", context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.argument("theta", type=float)
@click.argument("phi", type=float)
@click.pass_context
def to_cartesian(ctx: click.Context, radius: float, theta: float, phi: float) -> None:
    """Convert spherical (RADIUS, THETA, PHI) to Cartesian (x, y, z)."""
    point = geometry.to_cartesian(radius, theta, phi)
    _emit(ctx, x=point.x, y=point.y, z=point.z)


@cli.command("from-cartesian", context_settings=NUMERIC_ARGS)
@click.argument("x", type=float)
@click.argument("y", type=float)
@click.argument("z", type=float)
@click.pass_context
def from_cartesian(ctx: click.Context, x: float, y: float, z: float) -> None:
    """Convert Cartesian (X, Y, Z) to spherical (radius, theta, phi)."""
    point = geometry.from_cartesian(geometry.CartesianPoint(x, y, z))
    _emit(ctx, radius=point.radius, theta=point.theta, phi=point.phi)


@cli.command("surface-area", context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.pass_context
def surface_area(ctx: click.Context, radius: float) -> None:
    """Surface area of a sphere of RADIUS."""
    _emit(ctx, surface_area=geometry.surface_area(radius))


@cli.command(context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.pass_context
def volume(ctx: click.Context, radius: float) -> None:
    """Volume of a sphere of RADIUS."""
    _emit(ctx, volume=geometry.volume(radius))


@cli.command(context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.argument("phi1", type=float)
@click.argument("theta1", type=float)
@click.argument("phi2", type=float)
@click.argument("theta2", type=float)
@click.pass_context
def distance(
    ctx: click.Context,
    radius: float,
    phi1: float,
    theta1: float,
    phi2: float,
    theta2: float,
) -> None:
    """Great-circle distance between (PHI1, THETA1) and (PHI2, THETA2)."""
    _emit(
        ctx,
        distance=geometry.great_circle_distance(radius, phi1, theta1, phi2, theta2),
    )


@cli.command(context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.argument("height", type=float)
@click.pass_context
def cap(ctx: click.Context, radius: float, height: float) -> None:
    """Curved surface area of a spherical cap of HEIGHT."""
    _emit(ctx, cap_area=geometry.spherical_cap(radius, height))


@cli.command(context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.argument("height1", type=float)
@click.argument("height2", type=float)
@click.pass_context
def zone(ctx: click.Context, radius: float, height1: float, height2: float) -> None:
    """Curved surface area of the zone between HEIGHT1 and HEIGHT2."""
    _emit(ctx, zone_area=geometry.spherical_zone(radius, height1, height2))


@cli.command("segment-volume", context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.argument("height", type=float)
@click.pass_context
def segment_volume(ctx: click.Context, radius: float, height: float) -> None:
    """Volume of a spherical segment of HEIGHT."""
    _emit(ctx, segment_volume=geometry.spherical_segment_volume(radius, height))


@cli.command("sector-volume", context_settings=NUMERIC_ARGS)
@click.argument("radius", type=float)
@click.argument("phi", type=float)
@click.pass_context
def sector_volume(ctx: click.Context, radius: float, phi: float) -> None:
    """Volume of a spherical sector with half-angle PHI."""
    _emit(ctx, sector_volume=geometry.spherical_sector_volume(radius, phi))


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Show system and package information."""
    import platform
    from importlib.metadata import PackageNotFoundError, version

    click.echo("\nspherekit System Information")
    click.echo("=" * 40)

    # Package info
    click.echo(f"spherekit Version: {__version__}")
    click.echo(f"Python Version: {platform.python_version()}")
    click.echo(f"Platform: {platform.system()} {platform.release()}")

    click.echo("\nDependencies:")

    deps = [
        ("numpy", "NumPy"),
        ("pydantic", "Pydantic"),
        ("click", "Click"),
        ("PyYAML", "PyYAML"),
        ("tomli-w", "tomli-w"),
    ]

    for dist, name in deps:
        try:
            click.echo(f"  {name}: {version(dist)}")
        except PackageNotFoundError:
            click.echo(f"  {name}: not installed")


@cli.command()
@click.option(
    "--format", "file_format",
    type=click.Choice(["yaml", "json", "toml"]),
    default="toml",
    help="Configuration format"
)
@click.option(
    "-o", "--output",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path"
)
@click.option(
    "--force",
    is_flag=True,
    help="Overwrite an existing file"
)
@click.pass_context
def init(ctx: click.Context, file_format: str, output: Optional[str], force: bool) -> None:
    """Initialize a new configuration file."""
    config = Config()

    # Determine output path
    if output is None:
        output = f"spherekit.{file_format}"

    output_path = validate_path(
        output, must_exist=False, must_be_file=True, create_dirs=True
    )
    if output_path.exists() and not force:
        raise click.ClickException(
            f"{output_path} already exists (use --force to overwrite)"
        )

    # Export config
    if file_format == "yaml":
        config.to_yaml(output_path)
    elif file_format == "toml":
        config.to_toml(output_path)
    else:
        output_path.write_text(json.dumps(config.to_dict(), indent=2))

    click.echo(f"Created configuration file: {output_path}")


@cli.group()
@click.pass_context
def config(ctx: click.Context) -> None:
    """Manage configuration settings."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show the effective configuration."""
    current: Config = ctx.obj["config"]

    click.echo("\nCurrent Configuration:")
    click.echo("=" * 40)

    # Show as YAML-like format
    def show_dict(d, indent=0):
        for key, value in d.items():
            prefix = "  " * indent
            if isinstance(value, dict):
                click.echo(f"{prefix}{key}:")
                show_dict(value, indent + 1)
            else:
                click.echo(f"{prefix}{key}: {value}")

    show_dict(current.to_dict())


@config.command("validate")
@click.argument("config_file", type=click.Path(exists=True, dir_okay=False))
@click.pass_context
def config_validate(ctx: click.Context, config_file: str) -> None:
    """Validate a configuration file."""
    try:
        Config.from_file(Path(config_file))
        click.echo(f"Configuration is valid: {config_file}")
    except Exception as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(1)


def main() -> int:
    """Main entry point for CLI."""
    try:
        rv = cli.main(obj={}, standalone_mode=False)
    except click.ClickException as e:
        e.show()
        return e.exit_code
    except click.Abort:
        click.echo("Aborted!", err=True)
        return 1
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        return 1
    # --help and --version return their exit code
    return rv if isinstance(rv, int) else 0


if __name__ == "__main__":
    sys.exit(main())
