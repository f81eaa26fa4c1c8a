from __future__ import annotations

import logging
from pathlib import Path

from mfemap.config.schema import MapperConfig
from mfemap.core.browser import BrowserSession
from mfemap.core.capture import PageCapture
from mfemap.core.detector import detect_mfe
from mfemap.core.mapper import map_interactions
from mfemap.core.metadata import RunRecord
from mfemap.core.records import InteractionMap, MfeAnalysis, PageSnapshot
from mfemap.logging.artifacts import ArtifactManager
from mfemap.logging.audit import RunAuditLogger

log = logging.getLogger(__name__)


class Pipeline:
    """Runs the capture, detection and mapping stages against one output directory."""

    def __init__(
        self,
        config: MapperConfig,
        artifact_manager: ArtifactManager | None = None,
        audit_logger: RunAuditLogger | None = None,
        page_capture: PageCapture | None = None,
    ) -> None:
        self.config = config
        self.artifact_manager = artifact_manager or ArtifactManager(config.output_dir)
        self.audit_logger = audit_logger or RunAuditLogger(config.output_dir)
        self.page_capture = page_capture or PageCapture(BrowserSession(config), config)

    def analyze(self, url: str) -> InteractionMap:
        log.info("Starting analysis for URL: %s", url)
        record = RunRecord(stage="capture", source=url, success=False)
        try:
            snapshot = self.page_capture.capture(url)
            record.artifact_paths["snapshot"] = str(self.artifact_manager.write_snapshot(snapshot))
            record.success = True
        except Exception as exc:  # noqa: BLE001 - the audit record needs the concrete failure.
            record.error = f"{type(exc).__name__}: {exc}"
            log.error("Analysis failed: %s", exc)
            raise
        finally:
            self.audit_logger.write(record)

        analysis = self.analyze_mfe(snapshot=snapshot)
        interaction_map = self.analyze_interactions(snapshot=snapshot, analysis=analysis)
        log.info("Analysis completed successfully")
        return interaction_map

    def analyze_mfe(
        self,
        snapshot_path: str | Path | None = None,
        snapshot: PageSnapshot | None = None,
    ) -> MfeAnalysis:
        source = str(snapshot_path or self.artifact_manager.snapshot_path)
        record = RunRecord(stage="detect", source=source, success=False)
        try:
            if snapshot is None:
                snapshot = self.artifact_manager.read_snapshot(snapshot_path)
            analysis = detect_mfe(snapshot)
            record.artifact_paths["analysis"] = str(self.artifact_manager.write_analysis(analysis))
            record.shell = analysis.shell
            record.mfe_count = len(analysis.mfes)
            record.success = True
        except Exception as exc:  # noqa: BLE001 - the audit record needs the concrete failure.
            record.error = f"{type(exc).__name__}: {exc}"
            log.error("MFE analysis failed: %s", exc)
            raise
        finally:
            self.audit_logger.write(record)

        log.info("MFE analysis completed successfully")
        log.info("Shell: %s", analysis.shell)
        log.info("Remote MFEs: %d", len(analysis.mfes))
        return analysis

    def analyze_interactions(
        self,
        snapshot_path: str | Path | None = None,
        analysis_path: str | Path | None = None,
        snapshot: PageSnapshot | None = None,
        analysis: MfeAnalysis | None = None,
    ) -> InteractionMap:
        source = str(snapshot_path or self.artifact_manager.snapshot_path)
        record = RunRecord(stage="map", source=source, success=False)
        try:
            if snapshot is None:
                snapshot = self.artifact_manager.read_snapshot(snapshot_path)
            if analysis is None:
                analysis = self.artifact_manager.read_analysis(analysis_path)
            interaction_map = map_interactions(snapshot, analysis)
            record.artifact_paths["interaction_map"] = str(
                self.artifact_manager.write_interaction_map(interaction_map)
            )
            record.shell = analysis.shell
            record.mfe_count = len(analysis.mfes)
            record.element_count = interaction_map.element_count
            record.success = True
        except Exception as exc:  # noqa: BLE001 - the audit record needs the concrete failure.
            record.error = f"{type(exc).__name__}: {exc}"
            log.error("Interaction mapping failed: %s", exc)
            raise
        finally:
            self.audit_logger.write(record)

        log.info("Interaction mapping completed successfully")
        return interaction_map
