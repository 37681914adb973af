"""Main CLI interface"""

from decimal import Decimal, InvalidOperation

import click

from ..config.settings import AlgebraConfiguration
from ..core.exceptions import UnitAlgebraError
from ..core.units.converter import UnitConverter
from ..core.units.definitions import UnitType, get_all_unit_symbols, get_unit_info, list_units_by_type
from ..infrastructure.logging.logger import setup_logging


def _load_converter(config, verbose) -> UnitConverter:
    if config:
        config_obj = AlgebraConfiguration.from_file(config)
    else:
        config_obj = AlgebraConfiguration()

    setup_logging(log_file=config_obj.log_file, verbose=verbose, level=config_obj.log_level)
    return UnitConverter(config_obj)


@click.group()
@click.version_option(package_name="unit-algebra")
def cli():
    """Unit Algebra - exact conversions between physical units"""
    pass


@cli.command()
@click.argument('value')
@click.argument('from_unit')
@click.argument('to_unit')
@click.option('--exact', is_flag=True, help='Use decimal arithmetic')
@click.option('--config', '-c', type=click.Path(exists=True), help='Configuration file')
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging')
def convert(value, from_unit, to_unit, exact, config, verbose):
    """Convert VALUE from FROM_UNIT to TO_UNIT"""

    try:
        magnitude = Decimal(value) if exact else float(value)
    except (ValueError, InvalidOperation):
        raise click.BadParameter(f"'{value}' is not a number", param_hint='VALUE')

    try:
        converter = _load_converter(config, verbose)
        if exact:
            result = converter.convert_exact(magnitude, from_unit, to_unit)
        else:
            result = converter.convert(magnitude, from_unit, to_unit)
    except UnitAlgebraError as e:
        raise click.ClickException(str(e))

    click.echo(f"{value} {from_unit} = {result} {to_unit}")


@cli.command()
@click.argument('from_unit')
@click.argument('to_unit')
@click.option('--verbose', '-v', is_flag=True, help='Verbose logging')
def steps(from_unit, to_unit, verbose):
    """Show the conversion pipeline from FROM_UNIT to TO_UNIT"""

    try:
        converter = _load_converter(None, verbose).get_converter(from_unit, to_unit)
    except UnitAlgebraError as e:
        raise click.ClickException(str(e))

    pipeline = converter.flatten_to_steps()
    if not pipeline:
        click.echo("identity")
        return

    for i, step in enumerate(pipeline, 1):
        click.echo(f"{i}. {step!r}")


@cli.command()
@click.option('--type', 'unit_type', type=click.Choice([t.value for t in UnitType]),
              help='Only list units of this type')
def units(unit_type):
    """List registered unit symbols"""

    if unit_type:
        for unit_def in list_units_by_type(UnitType(unit_type)):
            click.echo(f"{unit_def.symbol:<6} {unit_def.name}")
        return

    for symbol in get_all_unit_symbols():
        unit_def = get_unit_info(symbol)
        click.echo(f"{symbol:<6} {unit_def.name}")


if __name__ == '__main__':
    cli()
