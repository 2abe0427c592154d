"""Audit trail for pipeline runs.

Main Components
---------------
- RunContext: run lifecycle, used as a context manager
- AuditLogger: JSONL event logger (events.jsonl)
- ManifestWriter: run manifest builder (run.json)
"""

from provdedupe.audit.context import RunContext
from provdedupe.audit.helpers import generate_run_id
from provdedupe.audit.logger import AuditLogger
from provdedupe.audit.manifest import ManifestWriter

__all__ = [
    "AuditLogger",
    "ManifestWriter",
    "RunContext",
    "generate_run_id",
]
