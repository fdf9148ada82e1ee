"""
fao56_et CLI Interface

Command-line interface for the FAO-56 formulas and the Pearson Type III
distribution. Results are printed as JSON on stdout.
"""

import json
import click
from pathlib import Path
from typing import Optional
from functools import wraps

import numpy as np
import yaml
import logging

from ..config.settings import merge_cli_config
from ..distributions import dpearson3, ppearson3, qpearson3, rpearson3
from ..et import ReferenceCrop, et0_hargreaves, et0_penman_monteith
from ..radiation import (
    EmissivityMethod,
    extraterrestrial_radiation,
    incoming_longwave_radiation,
    solar_radiation,
)
from ..utils.exceptions import FAO56Error, ConfigurationError
from ..utils.logger import Logger, log_step

# Configure logger
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# ============================================================================
# Utility Functions and Decorators
# ============================================================================

def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration overrides from a YAML or JSON file."""
    if config_path is None:
        return {}

    config_path = Path(config_path)

    if not config_path.exists():
        raise click.ClickException(f'Configuration file not found: {config_path}')

    try:
        if config_path.suffix in ['.yaml', '.yml']:
            with open(config_path, 'r') as f:
                data = yaml.safe_load(f) or {}
        elif config_path.suffix == '.json':
            with open(config_path, 'r') as f:
                data = json.load(f)
        else:
            raise click.ClickException(
                f'Unsupported config format: {config_path.suffix}. Use .yaml or .json'
            )
    except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
        raise click.ClickException(f'Error loading config: {str(e)}')

    if not isinstance(data, dict):
        raise click.ClickException(f'Configuration must be a mapping: {config_path}')
    return data


def library_errors(func):
    """Report package errors as click errors instead of tracebacks."""
    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except FAO56Error as e:
            logger.debug(f'{func.__name__} failed: {e}')
            raise click.ClickException(str(e))
    return wrapper


def echo_result(name: str, values, **extra) -> None:
    """Print a result as JSON."""
    payload = {'quantity': name}
    payload.update(extra)
    payload['values'] = np.atleast_1d(np.asarray(values, dtype=float)).tolist()
    click.echo(json.dumps(payload))


# ============================================================================
# Main Command Group
# ============================================================================

@click.group()
@click.option('--verbose', '-v', is_flag=True, default=False, help='Enable verbose logging')
@click.option('--log-file', type=click.Path(path_type=Path), help='Custom log file path')
@click.option('--config', type=click.Path(exists=True, path_type=Path), help='Configuration file path (YAML or JSON)')
@click.version_option(version='0.1.0', prog_name='fao56')
@click.pass_context
def cli(ctx, verbose, log_file, config):
    """
    fao56 - FAO-56 reference evapotranspiration and Pearson III tools.

    \b
    Common commands:
      fao56 pearson3 quantile   Design values for given probabilities
      fao56 hargreaves          ET0 from temperature only
      fao56 penman-monteith     ET0 by FAO-56 Penman-Monteith
      fao56 ext-rad             Extraterrestrial radiation
      fao56 solar               Solar radiation from sunshine hours

    For help on a specific command, run: fao56 COMMAND --help
    """
    ctx.ensure_object(dict)

    level = 'DEBUG' if verbose else 'WARNING'
    Logger.setup(name='fao56_et', log_file=str(log_file) if log_file else None, level=level)
    if verbose:
        logging.getLogger('fao56_et').setLevel(logging.DEBUG)
        logger.debug('Verbose logging enabled')

    try:
        ctx.obj['config'] = merge_cli_config(load_config(config))
    except ConfigurationError as e:
        raise click.ClickException(str(e))
    if config:
        logger.debug(f'Loaded configuration from: {config}')

    ctx.obj['verbose'] = verbose


# ============================================================================
# Pearson III Commands
# ============================================================================

def pearson3_options(func):
    """Options shared by every Pearson III command."""
    func = click.option('--cs', type=float, required=True, help='Skewness coefficient')(func)
    func = click.option('--cv', type=float, required=True, help='Coefficient of variation (> 0)')(func)
    func = click.option('--xm', type=float, required=True, help='Mean')(func)
    return func


@cli.group()
def pearson3():
    """Pearson Type III distribution."""


@pearson3.command()
@click.argument('x', type=float, nargs=-1, required=True)
@pearson3_options
@library_errors
def density(x, xm, cv, cs):
    """Probability density at X."""
    echo_result('density', dpearson3(list(x), xm, cv, cs), xm=xm, cv=cv, cs=cs)


@pearson3.command()
@click.argument('q', type=float, nargs=-1, required=True)
@pearson3_options
@click.option('--upper-tail', is_flag=True, default=False, help='Return P[X > q] instead of P[X <= q]')
@library_errors
def cdf(q, xm, cv, cs, upper_tail):
    """Cumulative probability at Q."""
    echo_result('probability', ppearson3(list(q), xm, cv, cs, lower_tail=not upper_tail),
                xm=xm, cv=cv, cs=cs, lower_tail=not upper_tail)


@pearson3.command()
@click.argument('p', type=float, nargs=-1, required=True)
@pearson3_options
@click.option('--upper-tail', is_flag=True, default=False, help='Interpret P as exceedance probability')
@library_errors
def quantile(p, xm, cv, cs, upper_tail):
    """
    Quantile for probabilities P.

    \b
    Example (100-year flood, exceedance probability 0.01):
      fao56 pearson3 quantile 0.01 --xm 850 --cv 0.45 --cs 1.2 --upper-tail
    """
    echo_result('quantile', qpearson3(list(p), xm, cv, cs, lower_tail=not upper_tail),
                xm=xm, cv=cv, cs=cs, lower_tail=not upper_tail)


@pearson3.command()
@pearson3_options
@click.option('--n', 'n', type=click.IntRange(min=0), default=10, show_default=True, help='Number of samples')
@click.option('--seed', type=int, default=None, help='Random seed (overrides the configured seed)')
@click.pass_context
@library_errors
def sample(ctx, xm, cv, cs, n, seed):
    """Random samples."""
    if seed is None:
        seed = ctx.obj['config']['seed']
    rng = np.random.default_rng(seed)
    echo_result('sample', rpearson3(n, xm, cv, cs, random_state=rng), xm=xm, cv=cv, cs=cs, seed=seed)


# ============================================================================
# Radiation Commands
# ============================================================================

@cli.command('ext-rad')
@click.option('--lat', type=float, required=True, help='Latitude in degrees')
@click.option('--doy', type=int, multiple=True, required=True, help='Day of year (repeatable)')
@library_errors
def ext_rad(lat, doy):
    """Extraterrestrial radiation [MJ m-2 day-1]."""
    echo_result('extraterrestrial_radiation', extraterrestrial_radiation(lat, list(doy)), lat=lat)


@cli.command()
@click.option('--ssd', type=float, help='Sunshine duration [hours]')
@click.option('--cld', type=float, help='Cloud cover fraction, used instead of --ssd')
@click.option('--lat', type=float, required=True, help='Latitude in degrees')
@click.option('--doy', type=int, required=True, help='Day of year')
@click.pass_context
@library_errors
def solar(ctx, ssd, cld, lat, doy):
    """Solar radiation at the surface [MJ m-2 day-1]."""
    cfg = ctx.obj['config']
    rs = solar_radiation(ssd, lat, dates=doy, a=cfg['angstrom_a'], b=cfg['angstrom_b'], cld=cld)
    echo_result('solar_radiation', rs, lat=lat, doy=doy)


@cli.command('longwave-in')
@click.option('--temp', type=float, required=True, help='Air temperature [°C]')
@click.option('--ea', type=float, required=True, help='Actual vapour pressure [kPa]')
@click.option('--s', 's', type=float, default=1.0, show_default=True, help='Cloudiness weight')
@click.option('--method', type=click.Choice([m.value for m in EmissivityMethod], case_sensitive=False),
              help='Clear-sky emissivity scheme (default from configuration)')
@click.pass_context
@library_errors
def longwave_in(ctx, temp, ea, s, method):
    """Incoming longwave radiation [W m-2]."""
    method = method or ctx.obj['config']['emissivity_method']
    rl = incoming_longwave_radiation(temp, ea, s=s, method=method)
    echo_result('incoming_longwave_radiation', rl, method=str(method).upper())


# ============================================================================
# Reference ET Commands
# ============================================================================

@cli.command()
@click.option('--tmax', type=float, required=True, help='Maximum air temperature [°C]')
@click.option('--tmin', type=float, required=True, help='Minimum air temperature [°C]')
@click.option('--tmean', type=float, help='Mean air temperature [°C]')
@click.option('--ra', type=float, help='Extraterrestrial radiation [MJ m-2 day-1]')
@click.option('--lat', type=float, help='Latitude in degrees (with --doy, instead of --ra)')
@click.option('--doy', type=int, help='Day of year')
@library_errors
def hargreaves(tmax, tmin, tmean, ra, lat, doy):
    """ET0 by the Hargreaves equation [mm day-1]."""
    with log_step('Hargreaves ET0'):
        et0 = et0_hargreaves(tmax, tmin, tmean=tmean, ra=ra, lat=lat, dates=doy)
    echo_result('et0', et0, method='hargreaves')


@cli.command('penman-monteith')
@click.option('--rs', type=float, required=True, help='Solar radiation [MJ m-2 day-1]')
@click.option('--tmax', type=float, required=True, help='Maximum air temperature [°C]')
@click.option('--tmin', type=float, required=True, help='Minimum air temperature [°C]')
@click.option('--ws', type=float, required=True, help='Wind speed [m s-1]')
@click.option('--z', type=float, help='Elevation [m]')
@click.option('--pres', type=float, help='Atmospheric pressure [kPa]')
@click.option('--rso', type=float, help='Clear-sky solar radiation [MJ m-2 day-1]')
@click.option('--cld', type=float, help='Cloud cover fraction')
@click.option('--ea', type=float, help='Actual vapour pressure [kPa]')
@click.option('--rhmean', type=float, help='Mean relative humidity [%]')
@click.option('--g', type=float, default=0.0, show_default=True, help='Soil heat flux [MJ m-2 day-1]')
@click.option('--tall-crop', is_flag=True, default=False, help='Use the tall (alfalfa) reference')
@click.pass_context
@library_errors
def penman_monteith(ctx, rs, tmax, tmin, ws, z, pres, rso, cld, ea, rhmean, g, tall_crop):
    """ET0 by the FAO-56 Penman-Monteith equation [mm day-1]."""
    cfg = ctx.obj['config']
    crop = ReferenceCrop.TALL if tall_crop else ReferenceCrop.SHORT
    with log_step('Penman-Monteith ET0'):
        et0 = et0_penman_monteith(
            rs, tmax, tmin, ws,
            g=g,
            h_ws=cfg['wind_height'],
            albedo=cfg['albedo'],
            z=z,
            pres=pres,
            rso=rso,
            cld=cld,
            ea=ea,
            rhmean=rhmean,
            crop=crop,
        )
    echo_result('et0', et0, method='penman-monteith', crop=crop.value)


# ============================================================================
# Entry Point
# ============================================================================

if __name__ == '__main__':
    cli()
