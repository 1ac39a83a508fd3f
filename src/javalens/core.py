"""
javalens entry point.

CLDK dispatches on the source language and hands back the matching
analysis object.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from javalens.analysis.java_analysis import JavaAnalysis
from javalens.config.models import AnalysisConfig
from javalens.models.base import AnalysisLevel

logger = logging.getLogger(__name__)

SUPPORTED_LANGUAGES = ("java",)


class CLDK:
    """Language-dispatching factory for analysis objects.

    Usage:
        cldk = CLDK("java")
        analysis = cldk.analysis(project_path="/tmp/codeanalyzer-out")
        classes = analysis.get_all_classes()
    """

    def __init__(self, language: str, config: AnalysisConfig | None = None) -> None:
        """Initialize the factory.

        Args:
            language: Programming language of the analyzed project
            config: Analysis settings (level and analyzer file name)
        """
        self.language = language
        self._config = config or AnalysisConfig()

    def analysis(
        self,
        project_path: str | Path | None = None,
        analysis_json: str | Path | Mapping[str, Any] | None = None,
        analysis_level: str | AnalysisLevel | None = None,
    ) -> JavaAnalysis:
        """Create an analysis over analyzer output.

        Exactly one of project_path and analysis_json must be given.

        Args:
            project_path: Directory holding the analyzer output
            analysis_json: Path to an analyzer JSON file, or a decoded document
            analysis_level: Requested level (defaults to the configured level)

        Returns:
            JavaAnalysis over the given output

        Raises:
            ValueError: If both or neither sources are given
            NotImplementedError: If the language is not supported
        """
        if project_path is None and analysis_json is None:
            raise ValueError("Either project_path or analysis_json must be provided.")

        if project_path is not None and analysis_json is not None:
            raise ValueError(
                "Both project_path and analysis_json are provided. Please provide only one."
            )

        if self.language not in SUPPORTED_LANGUAGES:
            raise NotImplementedError(
                f"Analysis support for {self.language} is not implemented yet."
            )

        level = analysis_level if analysis_level is not None else self._config.level
        source = project_path if project_path is not None else analysis_json
        logger.debug(
            f"Creating {self.language} analysis at level {AnalysisLevel.from_name(level).name}"
        )
        return JavaAnalysis(
            source,
            analysis_level=level,
            analysis_file=self._config.analysis_file,
        )
