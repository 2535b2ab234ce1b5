"""
Batch compilation of dialect files.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from lxml import etree
from pydantic import BaseModel, ConfigDict, Field

from .errors import DialectError, MavSchemaError
from .models import Dialect
from .parser import MAVLinkParser
from .reader import SchemaReader

logger = logging.getLogger(__name__)


class CompilationResult(BaseModel):
    """Outcome of compiling several dialect files."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    dialects: List[Dialect] = Field(default_factory=list)
    magic_numbers: Dict[int, int] = Field(default_factory=dict)
    errors: Dict[str, DialectError] = Field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.errors


def merge_magic_numbers(
    magic_numbers: Dict[int, int],
    dialect: Dialect,
) -> Dict[int, int]:
    """Fold one finished dialect into the id → magic map (last write wins)."""
    merged = dict(magic_numbers)
    merged.update(dialect.magic_numbers)
    return merged


def compile_dialect(
    path: Union[str, Path],
    parser: Optional[MAVLinkParser] = None,
    reader: Optional[SchemaReader] = None,
) -> Dialect:
    """
    Parse and analyse one dialect file.

    Raises:
        DialectError: the file could not be read, parsed or analysed
    """
    parser = parser or MAVLinkParser()
    reader = reader or SchemaReader()
    try:
        return reader.read(parser.parse_file(path))
    except (MavSchemaError, etree.XMLSyntaxError, OSError, ValueError) as e:
        raise DialectError(path, e) from e


def compile_dialects(
    paths: Iterable[Union[str, Path]],
    reader: Optional[SchemaReader] = None,
) -> CompilationResult:
    """
    Compile dialect files in the given order.

    A failing file is recorded in `errors` and left out of the magic number
    map; the other files are unaffected.
    """
    parser = MAVLinkParser()
    reader = reader or SchemaReader()
    result = CompilationResult()

    for path in paths:
        try:
            dialect = compile_dialect(path, parser, reader)
        except DialectError as e:
            logger.error("%s", e)
            result.errors[str(path)] = e
            continue
        result.dialects.append(dialect)
        result.magic_numbers = merge_magic_numbers(result.magic_numbers, dialect)

    return result
