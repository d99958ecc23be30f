"""JSON result sink adapter."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Sequence

from ...config import OutputConfig, get_config
from ...domain.errors import OutputUnwritableError
from ...domain.models import ResultRecord


def render_results(
    records: Sequence[ResultRecord], config: OutputConfig | None = None
) -> str:
    """Serialize result records to the output document text."""
    config = config or get_config().output
    payload = [record.to_dict(omit_empty_path=config.omit_empty_path) for record in records]
    return json.dumps(payload, indent=config.indent, ensure_ascii=False) + "\n"


@dataclass
class JSONResultSink:
    """Result sink that writes an indented JSON document.

    Attributes:
        path: Destination of the result document
        config: Serialization settings
    """

    path: Path = field(default_factory=lambda: get_config().data.output_path)
    config: OutputConfig = field(default_factory=lambda: get_config().output)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.path = Path(self.path)
        self._logger = logging.getLogger(__name__)

    def write(self, records: Sequence[ResultRecord]) -> None:
        """Write the full ordered list of result records.

        Raises:
            OutputUnwritableError: If the document cannot be written.
        """
        try:
            text = render_results(records, self.config)
            self.path.write_text(text, encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            raise OutputUnwritableError(
                f"Write file failed: {self.path}",
                file_path=str(self.path),
                cause=e,
            )

        self._logger.info(
            "Results written",
            extra={"results_path": str(self.path), "records": len(records)},
        )
