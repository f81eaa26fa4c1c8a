from __future__ import annotations

import pytest

from mfemap.config.schema import MapperConfig
from mfemap.core.records import MfeAnalysis, MfeInfo
from mfemap.logging.artifacts import ArtifactManager
from mfemap.logging.audit import RunAuditLogger


@pytest.fixture()
def mapper_config(tmp_path):
    return MapperConfig(output_dir=str(tmp_path / "outputs"), settle_timeout_seconds=0)


@pytest.fixture()
def artifact_manager(mapper_config):
    manager = ArtifactManager(mapper_config.output_dir)
    manager.reset()
    return manager


@pytest.fixture()
def audit_logger(mapper_config):
    return RunAuditLogger(mapper_config.output_dir)


@pytest.fixture()
def two_mfe_analysis():
    return MfeAnalysis(
        shell="https://shell.com",
        mfes=[
            MfeInfo(name="mfe1-com", scripts=["https://mfe1.com/remoteEntry.js"]),
            MfeInfo(name="mfe2-io", scripts=["https://mfe2.io/remoteEntry.js"]),
        ],
    )
