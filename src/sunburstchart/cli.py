"""Command-line interface."""
import logging
import sys

import click

from sunburstchart.config import DEFAULT_HEIGHT, DEFAULT_WIDTH, SAMPLE_ISSUES_PATH
from sunburstchart.exceptions import SunburstError
from sunburstchart.logging_config import setup_logging
from sunburstchart.model.chart import build_chart
from sunburstchart.model.io import load_issues, load_tree, render_svg, save_svg
from sunburstchart.model.issues import GroupBy, build_issue_tree

logger = logging.getLogger(__name__)

GROUP_BY_CHOICES = [g.value for g in GroupBy]


def _load_root(input_file, issues, group_by):
    if issues:
        return build_issue_tree(load_issues(input_file), GroupBy(group_by))
    return load_tree(input_file)


@click.group()
@click.version_option(version="0.1.0")
@click.option('--log-level', type=click.Choice(['DEBUG', 'INFO', 'WARNING', 'ERROR'], case_sensitive=False),
              default='WARNING', help='Logging level')
@click.option('--log-file', type=click.Path(), help='Optional log file path')
def cli(log_level, log_file):
    """
    Issue Sunburst - radial breakdown of data-quality issues.

    Lays out a weighted hierarchy (or a list of detected issues grouped by
    severity, table or issue type) as a sunburst chart.
    """
    setup_logging(level=getattr(logging, log_level.upper()), log_file=log_file)


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None,
              help='SVG output path (default: stdout)')
@click.option('--width', '-w', type=click.IntRange(min=1), default=DEFAULT_WIDTH, show_default=True)
@click.option('--height', '-h', type=click.IntRange(min=1), default=DEFAULT_HEIGHT, show_default=True)
@click.option('--issues', is_flag=True, help='INPUT_FILE is an issue list, not a tree')
@click.option('--group-by', type=click.Choice(GROUP_BY_CHOICES), default=GroupBy.SEVERITY.value,
              show_default=True, help='Grouping for issue lists')
@click.option('--no-hole', is_flag=True, help='Fill the center instead of reserving it for the label')
def render(input_file, output, width, height, issues, group_by, no_hole):
    """
    Render INPUT_FILE (JSON) as an SVG sunburst.

    Examples:

    \b
    # A hierarchy {name, value?, color?, children?}
    sunburstchart render tree.json -o tree.svg

    \b
    # Issues grouped by table, then severity
    sunburstchart render issues.json --issues --group-by table -o tables.svg
    """
    try:
        root = _load_root(input_file, issues, group_by)
        chart = build_chart(root, width, height, center_hole=not no_hole)
    except SunburstError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if output:
        save_svg(chart, output)
        click.echo(f"Wrote {len(chart.visible_segments)} segments to {output}", err=True)
    else:
        click.echo(render_svg(chart), nl=False)


@cli.command()
@click.argument('input_file', type=click.Path(exists=True, dir_okay=False), required=False)
@click.option('--issues', is_flag=True, help='INPUT_FILE is an issue list, not a tree')
@click.option('--group-by', type=click.Choice(GROUP_BY_CHOICES), default=GroupBy.SEVERITY.value,
              show_default=True, help='Initial grouping for issue lists')
def show(input_file, issues, group_by):
    """
    Open INPUT_FILE in an interactive window.

    Without INPUT_FILE the bundled sample issue list is shown.
    """
    from sunburstchart.main import main

    if input_file is None:
        input_file, issues = SAMPLE_ISSUES_PATH, True

    try:
        if issues:
            exit_code = main(issues=load_issues(input_file), group_by=GroupBy(group_by))
        else:
            exit_code = main(tree=load_tree(input_file))
    except SunburstError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)
    sys.exit(exit_code)


if __name__ == '__main__':
    cli()
