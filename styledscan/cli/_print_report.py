from styledscan.api.scan import AggregateReport, render_report


def _print_report(output: dict) -> None:
    """Render a scan command's output payload as the text report."""
    render_report(AggregateReport.model_validate(output))
