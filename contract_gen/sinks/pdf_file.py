"""File sink for rendered PDF documents."""

import logging
from pathlib import Path

from contract_gen.documents import DocumentBlob

logger = logging.getLogger(__name__)


class PdfFileSink:
    """Write ``DocumentBlob`` objects into a directory."""

    def __init__(self, output_dir: str | Path) -> None:
        """Initialize PDF file sink.

        Parameters
        ----------
        output_dir : str | Path
            Directory to write PDF files; created when missing.
        """
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self._written: list[Path] = []

    def write(self, blob: DocumentBlob, filename: str | None = None) -> Path:
        """Write one document and return its path.

        Existing files with the same name get a numeric suffix instead of
        being overwritten.
        """
        path = self._free_path(filename or blob.filename)
        path.write_bytes(blob.content)
        self._written.append(path)
        logger.debug("Wrote %s (%d bytes)", path, len(blob), extra={"pages": blob.page_count})
        return path

    @property
    def written(self) -> list[Path]:
        return list(self._written)

    def _free_path(self, filename: str) -> Path:
        path = self.output_dir / filename
        counter = 2
        while path.exists():
            path = self.output_dir / f"{Path(filename).stem}-{counter}{Path(filename).suffix}"
            counter += 1
        return path

    def close(self) -> None:
        """Log summary."""
        logger.info("%d PDF file(s) written to %s", len(self._written), self.output_dir)
