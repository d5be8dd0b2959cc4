import logging
import sys
from datetime import datetime


class ProgressLogger:
    """
    Reports lines stemmed so far through logging, in steps of ``step`` percent.
    Stands in for a tqdm bar when no terminal is watching.
    """
    def __init__(self, total_lines, desc="Stemming", logger=None, step=10):
        self.total_lines = total_lines
        self.lines_done = 0
        self.desc = desc
        self.step = step
        self.logger = logger or logging.getLogger()
        self.start_time = datetime.now()
        self._last_reported = 0

    def _percent(self):
        if self.total_lines <= 0:
            return 100
        return min(100, self.lines_done * 100 // self.total_lines)

    def update(self, n=1):
        """Count ``n`` more stemmed lines."""
        self.lines_done += n
        percent = self._percent()
        if percent >= self._last_reported + self.step or (percent == 100 and self._last_reported != 100):
            self._report(percent)

    def _report(self, percent):
        elapsed = (datetime.now() - self.start_time).total_seconds()
        self.logger.info(
            f"{self.desc}: {self.lines_done}/{self.total_lines} lines ({percent}%) in {elapsed:.1f}s"
        )
        self._last_reported = percent

    def close(self):
        """Report the final count once, unless 100% was already reported."""
        if self._last_reported != 100:
            self._report(self._percent())


def setup_logging(log_file=None, level=logging.INFO, debug=False):
    """
    Set up logging for the stemmer CLI.

    Args:
        log_file: Optional path to a log file. Console logging goes to stderr
            so stemmed text on stdout stays clean.
        level: Logging level (default: INFO).
        debug: If True, enables DEBUG level with extra context.
    """
    # Clear existing handlers to avoid duplicates
    root_logger = logging.getLogger()
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    if debug:
        level = logging.DEBUG

    if debug:
        format_string = '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s'
    else:
        format_string = '%(asctime)s - %(levelname)s - %(message)s'

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(logging.Formatter(format_string))
    root_logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(logging.Formatter(format_string))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(level)

    # Run separator
    logging.info("=" * 80)
    logging.info(f"NEW RUN STARTED - {datetime.now().strftime('%Y-%m-%d %H:%M:%S')}")
    if debug:
        logging.info("DEBUG MODE ENABLED - Verbose logging active")
    logging.info("=" * 80)


def log_with_context(message, context=None, level=logging.DEBUG, logger=None):
    """
    Log a message with additional context (inputs, state, etc.).

    Args:
        message: Main log message
        context: Dict of contextual information
        level: Log level (default: DEBUG)
        logger: Logger to use (default: root logger)
    """
    logger = logger or logging.getLogger()
    logger.log(level, message)

    if context and logger.isEnabledFor(logging.DEBUG):
        for key, value in context.items():
            # Truncate long values
            str_value = str(value)
            if len(str_value) > 200:
                str_value = str_value[:200] + "..."
            logger.debug(f"  └─ {key}: {str_value}")
