"""JSON file sink for exporting wizard records."""

import json
from pathlib import Path
from typing import Any

from contract_gen.sinks.serialization import to_dict


class JsonFileSink:
    """Output records to JSON files, one file per record type."""

    def __init__(self, output_dir: str | Path, pretty: bool = False) -> None:
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.pretty = pretty
        self._counts: dict[str, int] = {}

    def write_batch(self, record_type: str, records: list[Any]) -> Path:
        """Write a batch of dataclass records to ``<record_type>.json``."""
        file_path = self.output_dir / f"{record_type}.json"
        data = [to_dict(record) for record in records]

        with open(file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2 if self.pretty else None, ensure_ascii=False)

        self._counts[record_type] = len(records)
        return file_path

    @property
    def counts(self) -> dict[str, int]:
        return dict(self._counts)

    def close(self) -> None:
        """Print summary."""
        print(f"JSON files written to: {self.output_dir}")
        for record_type, count in self._counts.items():
            print(f"  {record_type}: {count} records")
