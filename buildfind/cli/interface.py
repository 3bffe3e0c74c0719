# buildfind/cli/interface.py
import sys
from pathlib import Path
from typing import Any, Dict, List

import click
from click_option_group import optgroup
from rich.console import Console as RichConsole
from rich.table import Table
import structlog

from buildfind import __version__ as app_version
from buildfind.config.settings import FinderConfig, DEFAULT_CONSOLE_SHOW_SUMMARY
from buildfind.config.loader import load_and_merge_configs, resolve_config_options
from buildfind.logging_setup import configure_logging
from buildfind.core.discovery import expand_paths, load_ignored_prefixes
from buildfind.core.output import format_paths, write_to_stdout, write_to_file
from buildfind.exceptions import BuildFindError

log = structlog.get_logger(__name__)

# cli parameter name -> FinderConfig attribute, for options that map one to one.
CLI_PARAM_TO_CONFIG_ATTR: Dict[str, str] = {
    "input_paths": "input_paths",
    "workspace_root": "workspace_root",
    "no_ignore": "no_ignore",
    "absolute_paths": "absolute_paths",
    "null_separated": "null_separated",
    "output_file": "output_file",
    "console_show_summary": "console_show_summary",
}

def _print_cli_summary_output(config: FinderConfig, found: List[Path]):
    console = RichConsole(stderr=True)
    table = Table(title="buildfind summary", show_header=True, header_style="bold cyan")
    table.add_column("input")
    table.add_column("ignored prefixes", justify="right")
    table.add_column("files", justify="right")
    for input_path in config.input_paths or [Path(".")]:
        resolved = input_path.resolve()
        if config.no_ignore:
            prefix_count = "off"
        else:
            ignore_root = config.workspace_root or resolved
            prefix_count = str(len(load_ignored_prefixes(ignore_root)))
        count = sum(1 for p in found if p == resolved or resolved in p.parents)
        table.add_row(str(input_path), prefix_count, str(count))
    console.print(table)
    console.print(f"[yellow]Total files: {len(found)}[/yellow]")

def _run_discovery_flow(config: FinderConfig):
    log.info("discovery_flow_started", inputs=[str(p) for p in config.input_paths])
    found = expand_paths(
        config.input_paths,
        respect_ignore=not config.no_ignore,
        workspace_root=config.workspace_root,
    )
    rendered = format_paths(found, config.base_dir, absolute=config.absolute_paths, null_separated=config.null_separated)

    if config.output_file:
        write_to_file(config.output_file, rendered)
        click.echo(f"Info: Output written to: {config.output_file}", err=True)
    else:
        write_to_stdout(rendered)

    if config.console_show_summary:
        _print_cli_summary_output(config, found)
    log.info("discovery_flow_complete", found=len(found))


@click.command(context_settings=dict(help_option_names=["-h", "--help"]))
@click.argument("input_paths", nargs=-1, type=click.Path(path_type=Path))
@optgroup.group("Workspace Options", help="Where ignore rules are read from.")
@optgroup.option("-w", "--workspace-root", "workspace_root", type=click.Path(exists=True, file_okay=False, path_type=Path), default=None, help="Directory whose .bazelignore applies to every input. Default: each input directory.")
@optgroup.option("--no-ignore", "no_ignore", is_flag=True, default=False, help="Disable .bazelignore processing.")
@optgroup.group("Output Options", help="Control how discovered files are reported.")
@optgroup.option("--absolute-paths", "absolute_paths", is_flag=True, default=False, help="Print absolute paths instead of paths relative to the current directory.")
@optgroup.option("-0", "--null", "null_separated", is_flag=True, default=False, help="Separate paths with NUL (for use with xargs -0).")
@optgroup.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, writable=True, path_type=Path), default=None, help="Path to write the output to.")
@optgroup.option("--console-summary/--no-console-summary", "console_show_summary", default=None, help=f"Show a per-input summary on stderr. Default: {'on' if DEFAULT_CONSOLE_SHOW_SUMMARY else 'off'}.")
@optgroup.group("Application Behavior", help="Configuration profiles and logging.")
@optgroup.option("--config-profile", "active_config_profile_name", default=None, help="Load a profile from config file(s).")
@optgroup.option("--verbose", "-v", "verbosity_level", count=True, help="Verbosity: -v info, -vv debug.")
@optgroup.option("--force-json-logs", "force_json_logs_cli", is_flag=True, default=False, help="Force JSON logs.")
@click.version_option(version=app_version, package_name="buildfind", prog_name="buildfind", help="Show version and exit.")
@click.pass_context
def main_cli(ctx: click.Context, **cli_params: Any):
    """buildfind: list BUILD, WORKSPACE, MODULE.bazel and .bzl files under the given
    paths, skipping directories excluded by the workspace's .bazelignore."""

    log_level = "warning"
    if cli_params.get("verbosity_level", 0) == 1: log_level = "info"
    elif cli_params.get("verbosity_level", 0) >= 2: log_level = "debug"
    configure_logging(log_level_str=log_level, force_json_logs=cli_params.get("force_json_logs_cli", False))

    log.debug("cli_command_invoked", params=cli_params)

    try:
        raw_configs_from_toml_files = load_and_merge_configs()
        effective_options = resolve_config_options(
            raw_configs_from_toml_files, cli_params.get("active_config_profile_name")
        )

        # command line values win over anything read from toml.
        for param_name, attr in CLI_PARAM_TO_CONFIG_ATTR.items():
            if ctx.get_parameter_source(param_name) == click.core.ParameterSource.COMMANDLINE:
                value = cli_params[param_name]
                effective_options[attr] = list(value) if param_name == "input_paths" else value

        final_config = FinderConfig(**effective_options)
        _run_discovery_flow(final_config)

    except BuildFindError as e:
        log.error("handled_application_error_in_cli", error_type=type(e).__name__, message=str(e))
        click.secho(f"Error: {e}", fg="red", err=True)
        sys.exit(1)
    except click.ClickException:
        raise
    except Exception as e:
        log.critical("unexpected_critical_error_in_cli", message=str(e), exc_info=True)
        click.secho(f"Unexpected critical error: {e}. Please report this.", fg="red", err=True)
        sys.exit(1)
