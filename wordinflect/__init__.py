from .exceptions import UnknownLocaleError, InvalidScopeError, InvalidRuleConfig
from .inflections import DEFAULT_LOCALE, Inflections, RuleStore
from .inflector import Inflector, logger
from .string_utils import (
    pluralize,
    singularize,
    camelize,
    underscore,
    humanize,
    classify,
    dasherize,
    ordinal,
    ordinalize,
    titleize,
    tableize,
    demodulize,
    deconstantize,
    foreign_key,
    upcase_first,
)

__version__ = '0.1.0'

__all__ = [
    '__version__',
    'DEFAULT_LOCALE',
    'Inflections',
    'Inflector',
    'RuleStore',
    'logger',
    'UnknownLocaleError',
    'InvalidScopeError',
    'InvalidRuleConfig',
    'pluralize',
    'singularize',
    'camelize',
    'underscore',
    'humanize',
    'classify',
    'dasherize',
    'ordinal',
    'ordinalize',
    'titleize',
    'tableize',
    'demodulize',
    'deconstantize',
    'foreign_key',
    'upcase_first',
]
