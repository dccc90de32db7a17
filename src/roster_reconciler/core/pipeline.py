from __future__ import annotations

from roster_reconciler.core.context import ReconcileContext
from roster_reconciler.core.exceptions import ReconcileExecutionError
from roster_reconciler.core.settings import ReconcileSettings
from roster_reconciler.engine import build_report
from roster_reconciler.exporter import export_report_to_json
from roster_reconciler.loader import load_registry_file
from roster_reconciler.records import build_employment_records, build_training_records
from roster_reconciler.reporting.findings import ReconciliationReport


class Pipeline:
    """
    Orchestrates load -> settings -> reconcile -> export.
    No business logic lives here.
    """

    def __init__(self, context: ReconcileContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> ReconciliationReport:
        self.log.info("Pipeline starting")

        try:
            rows_a = load_registry_file(self.ctx.registry_a_path)
            rows_b = load_registry_file(self.ctx.registry_b_path)
            registry_a = build_employment_records(rows_a)
            registry_b = build_training_records(rows_b)

            settings = ReconcileSettings.from_config(self.ctx.config)
            report = build_report(
                registry_a,
                registry_b,
                settings=settings,
                as_of=self.ctx.as_of,
            )

            self.ctx.stats.update(
                registry_a=len(registry_a),
                registry_b=len(registry_b),
                findings=report.summary.total_findings,
                organizations=report.summary.organization_count,
            )

            if self.ctx.output_path:
                export_report_to_json(report, self.ctx.output_path, pretty=self.ctx.pretty)

            self.log.info("Pipeline completed successfully")

            return report

        except Exception as exc:
            self.ctx.errors.append(str(exc))
            self.log.exception("Pipeline execution failed")
            raise ReconcileExecutionError(str(exc)) from exc
