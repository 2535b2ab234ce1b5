"""
Output writers for compiled dialects.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, Optional

from jinja2 import Environment, FileSystemLoader

from .models import Dialect

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


class IREmitter:
    """Writes dialect IR as JSON and renders the magic number table."""

    def __init__(self, template_dir: Optional[Path] = None):
        """
        Initialize emitter with Jinja2 templates.

        Args:
            template_dir: Directory containing .j2 templates (defaults to the bundled ones)
        """
        self.env = Environment(
            loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )

    def write_dialect_json(self, dialect: Dialect, output_dir: Path) -> Path:
        """
        Write the IR of one dialect to <output_dir>/<name>.json.

        Returns:
            Path of the written file
        """
        output_file = Path(output_dir) / f"{dialect.name}.json"
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8") as f:
            f.write(dialect.model_dump_json(indent=2))

        logger.info("Generated %s", output_file)
        return output_file

    def render_magic_numbers(
        self,
        magic_numbers: Dict[int, int],
        sources: Iterable[str] = (),
    ) -> str:
        """Render the id → CRC_EXTRA table as a Python module."""
        template = self.env.get_template("magic_numbers.py.j2")
        return template.render(
            magic_numbers=sorted(magic_numbers.items()),
            sources=list(sources),
        )

    def write_magic_numbers(
        self,
        magic_numbers: Dict[int, int],
        output_dir: Path,
        sources: Iterable[str] = (),
    ) -> Path:
        output_file = Path(output_dir) / "magic_numbers.py"
        output_file.parent.mkdir(parents=True, exist_ok=True)

        with open(output_file, "w", encoding="utf-8") as f:
            f.write(self.render_magic_numbers(magic_numbers, sources))

        logger.info("Generated %s (%d messages)", output_file, len(magic_numbers))
        return output_file
