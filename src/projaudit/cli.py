"""Command-line interface for projaudit."""

import logging
import os
import sys
from pathlib import Path
from typing import Optional

import click
import yaml

from projaudit import __version__, schemas
from projaudit.auditor import audit_project
from projaudit.cleanup import delete_empty_folders
from projaudit.config import AuditConfig, get_default_config
from projaudit.report import print_report
from projaudit.types import AuditResults

CONTEXT_SETTINGS = {
    'help_option_names': ['-h', '--help'],
    'max_content_width': 120
}

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR']

@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(version=__version__)
@click.option('--log-level', type=click.Choice(LOG_LEVELS, case_sensitive=False),
              default='WARNING', show_default=True, help='Logging verbosity (logs go to stderr)')
@click.pass_context
def cli(ctx, log_level: str):
    """projaudit: find hygiene problems in a project folder."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

@cli.command()
@click.argument('path', required=False, type=click.Path(exists=True, file_okay=False))
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file')
@click.option('--json', 'as_json', is_flag=True, help='Print results as JSON instead of a report')
@click.option('--delete-empty/--keep-empty', default=None,
              help='Delete empty folders without asking (or keep them). Asks when omitted.')
@click.option('--fail-on-findings', is_flag=True, help='Exit with status 1 when any check fails')
def audit(
    path: Optional[str],
    config_path: Optional[str],
    as_json: bool,
    delete_empty: Optional[bool],
    fail_on_findings: bool
):
    """Audit a project folder and report hygiene problems."""
    if path is None:
        path = click.prompt(
            'Please enter the path of the project folder to audit',
            default='.',
            type=click.Path(exists=True, file_okay=False),
        )
    full_path = os.path.abspath(path)

    cfg = _load_config(config_path)
    try:
        results = _run_audit(full_path, cfg, as_json, delete_empty)
    except (click.ClickException, click.Abort):
        raise
    except Exception as e:
        raise click.ClickException(f"Audit of {full_path} failed: {e}") from e

    if fail_on_findings and results.has_findings():
        sys.exit(1)

@cli.command()
@click.option('--output', '-o', type=click.Path(dir_okay=False), help='Output config file path')
@click.option('--overwrite', is_flag=True, help='Replace an existing output file')
def config(output: Optional[str], overwrite: bool):
    """Generate a configuration file with default settings."""
    cfg = get_default_config()

    if output:
        output_path = Path(output)
        if output_path.exists() and not overwrite:
            raise click.ClickException(f"{output_path} already exists. Use --overwrite to replace it.")
        output_path.parent.mkdir(parents=True, exist_ok=True)
        cfg.to_yaml(output_path)
        click.echo(f"Configuration saved to {output_path}")
    else:
        yaml.dump(cfg.to_dict(), sys.stdout, default_flow_style=False, sort_keys=False)

@cli.command(name='schemas')
@click.argument('output_dir', type=click.Path(file_okay=False))
def export_schemas(output_dir: str):
    """Export the JSON schemas of --json output and --config files."""
    for path in schemas.export(Path(output_dir)):
        click.echo(f"Schema written to {path}")

def _run_audit(
    full_path: str,
    cfg: AuditConfig,
    as_json: bool,
    delete_empty: Optional[bool]
) -> AuditResults:
    """Audit, print the results and optionally delete empty folders."""
    results = audit_project(full_path, cfg)

    if as_json:
        click.echo(results.to_json())
    else:
        click.echo(full_path)
        print_report(results, cfg)

    if results.empty_folders:
        if delete_empty is None and not as_json:
            delete_empty = click.confirm(
                f"Delete {len(results.empty_folders)} empty folders?", default=False
            )
        if delete_empty:
            report = delete_empty_folders(results.empty_folders, progress=cfg.cleanup.progress)
            for folder, message in report.failed:
                click.echo(f"Couldn't delete folder on path {folder}. Error: {message}", err=True)
            if not as_json:
                click.echo(f"Deleted {len(report.deleted)} empty folders.")
        elif not as_json:
            click.secho('No folders were deleted.', fg='bright_black')

    return results

def _load_config(config_path: Optional[str]) -> AuditConfig:
    """Load configuration from *config_path*, or the defaults."""
    if not config_path:
        return get_default_config()
    try:
        return AuditConfig.from_yaml(config_path)
    except (yaml.YAMLError, ValueError, TypeError) as e:
        raise click.BadParameter(str(e), param_hint="'--config'") from e

if __name__ == '__main__':
    cli()
