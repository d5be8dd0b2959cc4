"""
Stemming of whole lines, texts and files.

Only the tokens found by the tokenizer are replaced; whitespace, punctuation,
digits and line terminators pass through verbatim and in order.
"""
from __future__ import annotations

import logging
import re
import threading
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, List, Optional, Tuple

from .logging_config import ProgressLogger, log_with_context
from .stemmer import Stemmer, default_stemmer
from .tokenizer import iter_tokens, word_pattern

logger = logging.getLogger(__name__)


class StemmingCancelled(RuntimeError):
    """Raised when a document-level run is cancelled between lines."""


@dataclass
class FileStats:
    """Counters for one stemmed file."""
    lines: int = 0
    tokens: int = 0
    changed: int = 0

    def add(self, tokens: int, changed: int):
        self.lines += 1
        self.tokens += tokens
        self.changed += changed


def _splice(line: str, stemmer: Stemmer, pattern: re.Pattern) -> Tuple[str, int, int]:
    """Stem every token of ``line``; returns (text, token count, changed count)."""
    parts = []
    pos = 0
    tokens = 0
    changed = 0

    for token in iter_tokens(line, pattern):
        parts.append(line[pos:token.start])
        stemmed = stemmer.stem_word(token.text)
        parts.append(stemmed)
        tokens += 1
        if stemmed != token.text:
            changed += 1
        pos = token.end

    parts.append(line[pos:])
    return "".join(parts), tokens, changed


def stem_line(line: str, stemmer: Optional[Stemmer] = None, pattern: Optional[re.Pattern] = None) -> str:
    """
    Stem all words of a single line.

    Examples:
        >>> stem_line("La birdoj kantas, ĉu ne?")
        'La bird kant, ĉu ne?'
    """
    return _splice(line, stemmer or default_stemmer(), pattern or word_pattern())[0]


def stem_text(text: str, stemmer: Optional[Stemmer] = None, pattern: Optional[re.Pattern] = None) -> str:
    """Stem a multi-line text, keeping every line terminator."""
    stemmer = stemmer or default_stemmer()
    pattern = pattern or word_pattern()
    return "".join(stem_line(line, stemmer, pattern) for line in text.splitlines(keepends=True))


def _check_cancelled(cancel_event: Optional[threading.Event]):
    if cancel_event is not None and cancel_event.is_set():
        raise StemmingCancelled("Stemming cancelled")


def _stem_all(
    lines: List[str],
    stemmer: Stemmer,
    pattern: re.Pattern,
    workers: int,
    cancel_event: Optional[threading.Event],
    progress=None,
) -> List[Tuple[str, int, int]]:
    if workers <= 1:
        results = []
        for line in lines:
            _check_cancelled(cancel_event)
            results.append(_splice(line, stemmer, pattern))
            if progress is not None:
                progress.update(1)
        return results

    def work(line):
        _check_cancelled(cancel_event)
        return _splice(line, stemmer, pattern)

    results = []
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = [pool.submit(work, line) for line in lines]
        try:
            for future in futures:
                results.append(future.result())
                if progress is not None:
                    progress.update(1)
        except StemmingCancelled:
            for future in futures:
                future.cancel()
            raise
    return results


def stem_lines(
    lines: Iterable[str],
    stemmer: Optional[Stemmer] = None,
    pattern: Optional[re.Pattern] = None,
    workers: int = 1,
    cancel_event: Optional[threading.Event] = None,
) -> List[str]:
    """
    Stem many lines, optionally on a thread pool.

    Args:
        lines: Lines to stem (terminators, if any, are kept).
        stemmer: Stemmer to use (default: full rule set).
        pattern: Token pattern (default: letters and hyphens).
        workers: Number of worker threads; 1 stems in the calling thread.
        cancel_event: When set, stops the run before the next line with
            :class:`StemmingCancelled`.

    Returns:
        Stemmed lines in input order.
    """
    results = _stem_all(
        list(lines),
        stemmer or default_stemmer(),
        pattern or word_pattern(),
        workers,
        cancel_event,
    )
    return [text for text, _, _ in results]


def _count_lines(path: Path) -> int:
    with open(path, 'r', encoding='utf-8', newline='') as f:
        return sum(1 for _ in f)


def stem_file(
    input_path,
    output_path,
    stemmer: Optional[Stemmer] = None,
    pattern: Optional[re.Pattern] = None,
    workers: int = 1,
    cancel_event: Optional[threading.Event] = None,
    progress=None,
) -> FileStats:
    """
    Stem a UTF-8 text file line by line into ``output_path``.

    Each input line produces exactly one output line, with the same line
    terminator.

    Args:
        input_path: UTF-8 file to read.
        output_path: File to write (overwritten).
        stemmer: Stemmer to use (default: full rule set).
        pattern: Token pattern (default: letters and hyphens).
        workers: Worker threads; with more than one the file is read whole.
        cancel_event: Cooperative cancellation between lines.
        progress: Object with ``update(n)`` (e.g. a tqdm bar). Defaults to a
            :class:`ProgressLogger` on this module's logger.

    Raises:
        FileNotFoundError: ``input_path`` does not exist.
        UnicodeDecodeError: ``input_path`` is not valid UTF-8.
        StemmingCancelled: ``cancel_event`` was set during the run.
    """
    input_path = Path(input_path)
    output_path = Path(output_path)
    stemmer = stemmer or default_stemmer()
    pattern = pattern or word_pattern()
    stats = FileStats()

    log_with_context(f"Stemming {input_path} -> {output_path}", {
        "variant": stemmer.variant.value,
        "workers": workers,
    }, logger=logger)

    owns_progress = progress is None
    try:
        if owns_progress:
            progress = ProgressLogger(_count_lines(input_path), desc=f"Stemming {input_path.name}",
                                      logger=logger)

        with open(input_path, 'r', encoding='utf-8', newline='') as source, \
                open(output_path, 'w', encoding='utf-8', newline='') as sink:
            if workers > 1:
                for text, tokens, changed in _stem_all(
                        source.readlines(), stemmer, pattern, workers, cancel_event, progress):
                    sink.write(text)
                    stats.add(tokens, changed)
            else:
                for line in source:
                    _check_cancelled(cancel_event)
                    text, tokens, changed = _splice(line, stemmer, pattern)
                    sink.write(text)
                    stats.add(tokens, changed)
                    progress.update(1)
        if owns_progress:
            progress.close()
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Failed to stem {input_path}: {e}")
        raise
    except StemmingCancelled:
        logger.warning(f"Stemming of {input_path} cancelled after {stats.lines} lines")
        raise

    logger.info(f"Stemmed {stats.lines} lines ({stats.changed}/{stats.tokens} words changed)")
    return stats
