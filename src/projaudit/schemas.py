"""JSON contracts of ``projaudit audit --json`` output and ``--config`` files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List

from pydantic import TypeAdapter

from .config import AuditConfig
from .types import AuditResults

RESULTS_SCHEMA_FILE = "audit_results.schema.json"
CONFIG_SCHEMA_FILE = "audit_config.schema.json"

_results_adapter = TypeAdapter(AuditResults)
_config_adapter = TypeAdapter(AuditConfig)


def results_schema() -> Dict:
    """Schema of the document printed by ``projaudit audit --json``."""
    schema = _results_adapter.json_schema()
    schema["title"] = "projaudit audit results"
    schema["description"] = (
        "Folder, lock file and duplicate paths are absolute; "
        "unstaged file paths are relative to the repository."
    )
    return schema


def config_schema() -> Dict:
    """Schema of a YAML file accepted by ``projaudit audit --config``."""
    schema = _config_adapter.json_schema()
    schema["title"] = "projaudit configuration"
    return schema


def parse_results(text: str) -> AuditResults:
    """Read back ``--json`` output, rejecting documents that break the contract.

    Raises:
        pydantic.ValidationError: if *text* is not a valid results document
    """
    return _results_adapter.validate_json(text)


def export(output_dir: Path) -> List[Path]:
    """Write both schemas to *output_dir* and return the written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for name, schema in ((RESULTS_SCHEMA_FILE, results_schema()), (CONFIG_SCHEMA_FILE, config_schema())):
        path = output_dir / name
        with open(path, "w", encoding="utf-8") as f:
            json.dump(schema, f, indent=2)
        written.append(path)
    return written
