import click
import logging

from hostreport.config.settings import config

@click.command()
@click.pass_context
def main(ctx):
    """Collect host telemetry and write it to system_info_<hostname>.txt."""
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    from hostreport.hwosinfo.collector import collect_report
    from hostreport.report.formatter import format_report
    from hostreport.report.writer import report_filename, write_report

    report = collect_report()
    path = report_filename(report.identity.hostname)
    result = write_report(format_report(report), path)

    click.echo(result.message)
    if not result.ok:
        ctx.exit(1)
