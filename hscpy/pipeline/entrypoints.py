"""Text and file entrypoints for the sketch and raw formats."""

from __future__ import annotations

import logging
from pathlib import Path

from hscpy.diagnostics import Diagnostic
from hscpy.diagnostics.codes import RAW_INVALID_STREAM
from hscpy.lexer import Lexer
from hscpy.pipeline.result import RawParseResult, SketchParseResult
from hscpy.raw import parse_raw, verify_raw
from hscpy.sketch.options import ParseMode, ParserOptions, resolve_options
from hscpy.sketch.parser import parse_tokens
from hscpy.text import TextRange

logger = logging.getLogger(__name__)


def parse_sketch_text(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
    source_path: str = "<memory>",
) -> SketchParseResult:
    """Lex and parse one sketch source buffer."""
    resolved_options = resolve_options(options=options, mode=mode)
    tokens = Lexer(text).lex()
    logger.debug("Lexed %d tokens from %s", len(tokens), source_path)

    parsed = parse_tokens(text, tokens, resolved_options)
    if parsed.sketch is None:
        logger.debug("Sketch %s rejected: %s", source_path, [d.code for d in parsed.diagnostics])
    else:
        logger.debug(
            "Sketch %s parsed: %d elements, %d atoms",
            source_path,
            len(parsed.sketch.elements),
            len(parsed.sketch.atoms),
        )

    return SketchParseResult(
        source_text=text,
        tokens=tokens,
        parsed=parsed,
        options=resolved_options,
        source_path=source_path,
    )


def parse_sketch_file(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> SketchParseResult:
    """Parse one sketch file from disk."""
    file_path = Path(path)
    text = read_source(file_path)
    return parse_sketch_text(
        text,
        options=options,
        mode=mode,
        source_path=str(file_path).replace("\\", "/"),
    )


def parse_raw_text(text: str, *, source_path: str = "<memory>") -> RawParseResult:
    """Verify then decode one raw sketch buffer."""
    if not verify_raw(text):
        logger.debug("Raw sketch %s failed verification", source_path)
        diagnostic = Diagnostic.from_spec(
            RAW_INVALID_STREAM,
            TextRange.up_to(len(text)),
        )
        return RawParseResult(source_text=text, sketch=None, diagnostics=[diagnostic], source_path=source_path)

    sketch = parse_raw(text)
    logger.debug("Raw sketch %s parsed: %d strokes", source_path, len(sketch.strokes))
    return RawParseResult(source_text=text, sketch=sketch, diagnostics=[], source_path=source_path)


def parse_raw_file(path: str | Path) -> RawParseResult:
    file_path = Path(path)
    return parse_raw_text(read_source(file_path), source_path=str(file_path).replace("\\", "/"))


def read_source(path: Path) -> str:
    decoded = path.read_bytes().decode("utf-8")
    logger.debug("Read %d characters from %s", len(decoded), path)
    return decoded.removeprefix("\ufeff")
