"""Audit trail for solver runs.

Main Components
---------------
- RunContext: Context manager for one run
- AuditLogger: JSONL event logger (``events.jsonl``)
- ManifestWriter: Run manifest builder (``run.json``)
"""

from kruskalmst.audit.context import RunContext
from kruskalmst.audit.helpers import generate_run_id
from kruskalmst.audit.logger import AuditLogger
from kruskalmst.audit.manifest import ManifestWriter

__all__ = [
    "RunContext",
    "AuditLogger",
    "ManifestWriter",
    "generate_run_id",
]
