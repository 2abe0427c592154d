"""All-or-nothing JSON artifact writer.

Artifacts are serialized up front, written to hidden temporary siblings and
only then renamed over their final paths. A failure before the renames
leaves any previous artifacts untouched. The renames themselves are not one
atomic step.
"""

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from provdedupe.utils import calculate_bytes_sha256

__all__ = ["WrittenArtifact", "dumps_json", "write_json", "write_artifacts"]


@dataclass(frozen=True)
class WrittenArtifact:
    """Metadata of one written artifact.

    Attributes
    ----------
    path : Path
        Final location.
    sha256 : str
        Digest of the written bytes with "sha256:" prefix.
    bytes : int
        Size in bytes.
    """

    path: Path
    sha256: str
    bytes: int


def dumps_json(payload: Any) -> str:
    """Serialize with 2-space indentation, insertion-ordered keys and a trailing newline."""
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"


def _temp_path(path: Path) -> Path:
    return path.with_name(f".{path.name}.tmp")


def _write_temp(path: Path, data: bytes) -> None:
    with path.open("wb") as f:
        f.write(data)
        f.flush()
        os.fsync(f.fileno())


def write_json(payload: Any, path: Path | str) -> WrittenArtifact:
    """Atomically write a single JSON document."""
    target = Path(path)
    return write_artifacts(target.parent, {target.name: payload})[target.name]


def write_artifacts(output_dir: Path, payloads: dict[str, Any]) -> dict[str, WrittenArtifact]:
    """Write several JSON documents into ``output_dir`` as one unit.

    Parameters
    ----------
    output_dir : Path
        Destination directory; created if needed.
    payloads : dict[str, Any]
        File name to JSON-serializable payload.

    Returns
    -------
    dict[str, WrittenArtifact]
        Metadata per file name, in ``payloads`` order.

    Raises
    ------
    OSError
        If a temporary file cannot be written or renamed. Every leftover
        temporary is removed. A failure while writing temporaries touches no
        final path; a failure during the renames leaves the files renamed so
        far replaced and the rest at their previous content.
    """
    encoded = {name: dumps_json(payload).encode("utf-8") for name, payload in payloads.items()}

    output_dir.mkdir(parents=True, exist_ok=True)
    temps: dict[str, Path] = {}
    try:
        for name, data in encoded.items():
            temp = _temp_path(output_dir / name)
            temps[name] = temp
            _write_temp(temp, data)
    except OSError:
        for temp in temps.values():
            temp.unlink(missing_ok=True)
        raise

    written: dict[str, WrittenArtifact] = {}
    try:
        for name, data in encoded.items():
            final = output_dir / name
            temps[name].replace(final)
            written[name] = WrittenArtifact(
                path=final,
                sha256=calculate_bytes_sha256(data),
                bytes=len(data),
            )
    finally:
        for temp in temps.values():
            temp.unlink(missing_ok=True)
    return written
