"""
Command-Line Interface for the Tigo Esperanto stemmer.

- Stemming files, text and single words
- Inspecting the active rule set
"""
import sys
import argparse
import logging

from tqdm import tqdm

from .config import StemmerConfig
from .document import StemmingCancelled, stem_file, stem_text
from .logging_config import setup_logging
from .rules import RuleVariant
from .tokenizer import word_pattern

logger = logging.getLogger(__name__)


def cmd_file(args, config):
    """Stem a UTF-8 text file into another file."""
    stemmer = config.build_stemmer()
    pattern = word_pattern(config.include_hyphens)

    progress = None
    if not args.no_progress:
        progress = tqdm(desc="Stemming", unit=" lines", file=sys.stderr)

    try:
        stats = stem_file(
            args.input,
            args.output,
            stemmer=stemmer,
            pattern=pattern,
            workers=config.workers,
            progress=progress,
        )
    except FileNotFoundError as e:
        print(f"ERROR: File not found: {e.filename}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as e:
        print(f"ERROR: {args.input} is not valid UTF-8: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except StemmingCancelled:
        print("Stemming cancelled.", file=sys.stderr)
        return 1
    finally:
        if progress is not None:
            progress.close()

    if args.verbose:
        print(f"Lines: {stats.lines}")
        print(f"Words: {stats.tokens} ({stats.changed} stemmed)")
    print("Stemming complete.")
    return 0


def cmd_text(args, config):
    """Stem text given on the command line, in a file, or on stdin."""
    if args.text is not None:
        text = args.text
    elif args.file:
        try:
            with open(args.file, 'r', encoding='utf-8') as f:
                text = f.read()
        except (OSError, UnicodeDecodeError) as e:
            print(f"ERROR: {e}", file=sys.stderr)
            return 1
    else:
        text = sys.stdin.read()

    stemmed = stem_text(text, config.build_stemmer(), word_pattern(config.include_hyphens))
    sys.stdout.write(stemmed)
    if not stemmed.endswith("\n"):
        sys.stdout.write("\n")
    return 0


def cmd_word(args, config):
    """Stem individual words."""
    stemmer = config.build_stemmer()

    for word in args.words:
        if args.explain:
            trace = stemmer.explain(word)
            details = [f"rule={trace.rule}"]
            if trace.suffix:
                details.append(f"suffix=-{trace.suffix.lstrip('-')}")
            if trace.offset:
                details.append(f"plural/accusative={trace.offset}")
            details.append(f"min={trace.min_length}")
            print(f"{word} -> {trace.stem}  ({', '.join(details)})")
        else:
            print(stemmer.stem_word(word))
    return 0


def cmd_info(args, config):
    """Display the active rule set."""
    stemmer = config.build_stemmer()
    rule_set = stemmer.rule_set
    exceptions = stemmer.exceptions

    print("=== Tigo Esperanto Stemmer ===\n")
    print(f"Rule variant: {rule_set.variant.value}")
    print(f"  Suffixes: {len(rule_set.table)} (longest: {rule_set.table.max_length})")
    print(f"  Plural/accusative pre-pass: {'yes' if rule_set.strip_plural_accusative else 'no'}")
    print(f"  Hyphen boundaries: {'yes' if rule_set.hyphen_sentinel else 'no'}")
    print(f"  Minimum stem length: {stemmer.min_stem_length}")

    print(f"\nWord lists:")
    print(f"  Exceptions: {len(exceptions.stemmer_exceptions)}")
    print(f"  Basic numerals: {len(exceptions.basic_numerals)}")
    print(f"  Roman numerals: {len(exceptions.roman_numerals)}")
    print(f"  Plural-direct roots: {len(exceptions.plural_direct_checks)}")

    if args.suffixes:
        print(f"\nSuffixes:")
        for suffix in rule_set.table:
            print(f"  {suffix}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        prog='tigo',
        description='Tigo: rule-based stemmer for Esperanto',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Stem a file
  tigo file libro.txt libro.stem.txt
  tigo --variant participial file libro.txt libro.stem.txt --workers 4

  # Stem text
  tigo text "La birdoj kantas en la arboj."
  cat libro.txt | tigo text

  # Stem words, showing which rule applied
  tigo word birdojn kantis --explain

  # Rule set info
  tigo info --suffixes

Environment:
  TIGO_RULE_VARIANT, TIGO_MIN_STEM_LENGTH, TIGO_INCLUDE_HYPHENS, TIGO_WORKERS
        """
    )

    parser.add_argument('--variant', choices=[v.value for v in RuleVariant],
                        help='Rule set variant (default: full)')
    parser.add_argument('--min-stem-length', type=int,
                        help='Minimum stem length (default: 2)')
    parser.add_argument('--no-hyphens', action='store_true',
                        help='Do not treat hyphens as part of words')
    parser.add_argument('--debug', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Also write logs to this file')

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # --- file command ---
    parser_file = subparsers.add_parser('file', help='Stem a UTF-8 text file')
    parser_file.add_argument('input', help='Path to the UTF-8 TXT file to be stemmed')
    parser_file.add_argument('output', help='Path to the file to store the output in')
    parser_file.add_argument('--workers', type=int, help='Worker threads (default: 1)')
    parser_file.add_argument('--no-progress', action='store_true', help='Hide the progress bar')
    parser_file.add_argument('-v', '--verbose', action='store_true', help='Show word counts')
    parser_file.set_defaults(func=cmd_file)

    # --- text command ---
    parser_text = subparsers.add_parser('text', help='Stem text and print it')
    parser_text.add_argument('text', nargs='?', help='Esperanto text (default: read stdin)')
    parser_text.add_argument('-f', '--file', help='Read input from file')
    parser_text.set_defaults(func=cmd_text)

    # --- word command ---
    parser_word = subparsers.add_parser('word', help='Stem single words')
    parser_word.add_argument('words', nargs='+', help='Words to stem')
    parser_word.add_argument('--explain', action='store_true',
                             help='Show which rule decided each stem')
    parser_word.set_defaults(func=cmd_word)

    # --- info command ---
    parser_info = subparsers.add_parser('info', help='Display the active rule set')
    parser_info.add_argument('--suffixes', action='store_true', help='List every suffix')
    parser_info.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    # Keep the console quiet unless a log file was asked for
    level = logging.INFO if args.log_file else logging.WARNING
    setup_logging(log_file=args.log_file, level=level, debug=args.debug)

    try:
        config = StemmerConfig.from_env().override(
            variant=args.variant,
            min_stem_length=args.min_stem_length,
            include_hyphens=False if args.no_hyphens else None,
            workers=getattr(args, 'workers', None),
        )
    except ValueError as e:
        parser.error(str(e))

    logger.debug(f"Configuration: {config}")
    return args.func(args, config)


if __name__ == '__main__':
    sys.exit(main())
