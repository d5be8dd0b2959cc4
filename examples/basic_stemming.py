#!/usr/bin/env python3
"""
Basic Esperanto Stemming Examples

This script demonstrates how to stem words and text, and how the rule
variants differ.
"""
import sys
from pathlib import Path

# Add parent directory to path to import tigo
sys.path.insert(0, str(Path(__file__).parent.parent))

from tigo import RuleVariant, Stemmer, get_rule_set, stem, stem_text


def example_1_single_words():
    """Stem a few inflected words."""
    print("=" * 60)
    print("Example 1: Single Words")
    print("=" * 60)

    for word in ["hundo", "hundojn", "grandaj", "kantis", "vidinta", "manĝantoj"]:
        print(f"  {word:<12} -> {stem(word)}")

    print("\nExplanation:")
    print("  'hundojn' = hund (root) + o (noun) + j (plural) + n (accusative)")
    print("  Participles lose the whole -int-/-ant-/-it- ending when the root stays long enough")


def example_2_exceptions():
    """Function words and numerals are left alone."""
    print("\n" + "=" * 60)
    print("Example 2: Exception Words")
    print("=" * 60)

    for word in ["la", "kaj", "tamen", "dudek", "tricent", "min", "ilin", "kiujn"]:
        print(f"  {word:<12} -> {stem(word)}")

    print("\nExplanation:")
    print("  'dudek' = du + dek (twenty) is a constructed numeral, not a noun")
    print("  'min' and 'ilin' only lose the accusative -n")


def example_3_explain():
    """Show which rule produced each stem."""
    print("\n" + "=" * 60)
    print("Example 3: Explaining Stems")
    print("=" * 60)

    stemmer = Stemmer()
    for word in ["birdojn", "kantas", "stro", "bird-o", "dudek"]:
        trace = stemmer.explain(word)
        print(f"  {word:<12} -> {trace.stem:<10} rule={trace.rule} suffix={trace.suffix} offset={trace.offset}")


def example_4_variants():
    """Compare the rule variants on the same words."""
    print("\n" + "=" * 60)
    print("Example 4: Rule Variants")
    print("=" * 60)

    words = ["birdojn", "kantas", "vidinta", "min", "bird-o"]
    stemmers = {variant.value: Stemmer(get_rule_set(variant)) for variant in RuleVariant}

    print("  " + "word".ljust(10) + "".join(name.ljust(13) for name in stemmers))
    for word in words:
        row = "".join(s.stem_word(word).ljust(13) for s in stemmers.values())
        print(f"  {word.ljust(10)}{row}")


def example_5_text():
    """Stem a short text; punctuation and layout are kept."""
    print("\n" + "=" * 60)
    print("Example 5: Text")
    print("=" * 60)

    text = "La birdoj kantas en la arboj.\nĈu vi vidis ilin hieraŭ?\n"
    print(text)
    print(stem_text(text))


def main():
    """Run all examples."""
    print("\n")
    print("*" * 60)
    print("  TIGO: Basic Esperanto Stemming Examples")
    print("*" * 60)

    example_1_single_words()
    example_2_exceptions()
    example_3_explain()
    example_4_variants()
    example_5_text()

    print("=" * 60)
    print("Examples Complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
