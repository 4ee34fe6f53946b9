"""JSON array writer for exported spectrum samples."""

import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any


def write_json(output_path: Path, records: Iterable[dict[str, Any]]) -> int:
    """Write records as a JSON array with one compact record per line.

    Records are consumed lazily, so a generator over fetched samples is
    never materialised a second time. Values json cannot encode are written
    as their ``str()``.

    Returns:
        Number of records written.
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    count = 0
    with output_path.open("w", encoding="utf-8") as f:
        f.write("[")
        for record in records:
            f.write(",\n" if count else "\n")
            f.write(json.dumps(record, ensure_ascii=False, default=str))
            count += 1
        f.write("\n]\n" if count else "]\n")

    return count
