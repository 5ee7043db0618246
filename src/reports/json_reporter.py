"""JSON reporter"""

import json
import logging
from pathlib import Path
from typing import Optional

from .report_generator import BaseReporter, ReportGenerator
from ..analyzers.analyzer import AnalysisResult


logger = logging.getLogger(__name__)


class JsonReporter(BaseReporter):
    """Writes the report as JSON to a file, or to stdout without a path"""

    def get_format_name(self) -> str:
        return "json"

    def to_json(self, analysis_result: AnalysisResult) -> str:
        report_data = analysis_result.to_dict()
        if not report_data['summary']:
            report_data['summary'] = ReportGenerator.create_summary(analysis_result.issues)
        return json.dumps(report_data, indent=2)

    def generate(self, analysis_result: AnalysisResult, output_path: Optional[Path] = None) -> None:
        payload = self.to_json(analysis_result)

        if output_path is None:
            print(payload)
            return

        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, 'w', encoding='utf-8') as f:
            f.write(payload)
        logger.info(f"JSON report written to {output_path}")
