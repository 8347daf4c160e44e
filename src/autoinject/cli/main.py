"""
CLI: run the injection demo and inspect the configuration table.
Defaults come from AUTOINJECT_* environment variables (see Settings.load_from_env).
"""
import logging
from pathlib import Path
from typing import Optional

import typer

from autoinject.core.config import Settings
from autoinject.core.errors import ConfigurationError, InjectionError
from autoinject.core.injector import Injector
from autoinject.demo import SomeBean, registry

app = typer.Typer(help="autoinject CLI: field injection demo and configuration inspection.")

_CONFIG_OPTION = typer.Option(None, "--config", "-c", help="Properties file (default: bundled demo resource)")
_VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging")


def _settings(config: Optional[Path], verbose: bool) -> Settings:
    settings = Settings.load_from_env()
    if config is not None:
        settings.config_path = str(config)
    if verbose:
        settings.log_level = "DEBUG"
    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        typer.echo(f"Unknown log level: {settings.log_level}", err=True)
        raise typer.Exit(1)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    return settings


def _injector(settings: Settings) -> Injector:
    try:
        return Injector.from_settings(settings, registry)
    except ConfigurationError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)


@app.command()
def demo(
    config: Optional[Path] = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Show SomeBean before and after injection."""
    settings = _settings(config, verbose)

    typer.echo("1. Without injection")
    bare = SomeBean()
    typer.echo(f"   field1: {bare.field1}")
    typer.echo(f"   field2: {bare.field2}")
    typer.echo("foo():")
    bare.foo()

    typer.echo("2. With Injector")
    injector = _injector(settings)
    try:
        bean = injector.inject(SomeBean())
    except InjectionError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(1)
    typer.echo(f"   field1: {type(bean.field1).__name__}")
    typer.echo(f"   field2: {type(bean.field2).__name__}")
    typer.echo("foo():")
    bean.foo()


@app.command()
def show_config(
    config: Optional[Path] = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Print contract -> implementation bindings."""
    injector = _injector(_settings(config, verbose))
    for contract, implementation in sorted(injector.properties.items()):
        typer.echo(f"{contract}={implementation}")


def main() -> None:
    """Entry point for the autoinject console command."""
    app()


if __name__ == "__main__":
    main()
