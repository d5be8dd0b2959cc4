# This file makes the 'tigo' directory a Python package.

from tigo.rules import RuleSet, RuleTable, RuleVariant, build_rule_set, get_rule_set
from tigo.lexicon import ExceptionSets, build_exception_sets
from tigo.stemmer import Stemmer, StemTrace, stem
from tigo.document import StemmingCancelled, stem_file, stem_line, stem_lines, stem_text
from tigo.config import StemmerConfig

__version__ = "0.1.0"

__all__ = [
    'RuleSet',
    'RuleTable',
    'RuleVariant',
    'build_rule_set',
    'get_rule_set',
    'ExceptionSets',
    'build_exception_sets',
    'Stemmer',
    'StemTrace',
    'stem',
    'StemmingCancelled',
    'stem_file',
    'stem_line',
    'stem_lines',
    'stem_text',
    'StemmerConfig',
]
