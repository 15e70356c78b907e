"""
Module level inflection functions using the default English rules.

To use other rules, create a ``RuleStore`` and an ``Inflector`` with it instead.
"""
from .inflections import DEFAULT_LOCALE
from .inflector import Inflector

default_inflector = Inflector()


def pluralize(word: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Return the plural form of a word.

    :param word: The word to pluralize.
    :param locale: The locale of the rules to use.
    :return: The plural form, like ``posts`` for ``post`` or ``octopi`` for ``octopus``.
    """
    return default_inflector.pluralize(word, locale)


def singularize(word: str, locale: str = DEFAULT_LOCALE) -> str:
    """
    Return the singular form of a word.

    :param word: The word to singularize.
    :param locale: The locale of the rules to use.
    :return: The singular form, like ``post`` for ``posts`` or ``octopus`` for ``octopi``.
    """
    return default_inflector.singularize(word, locale)


def camelize(term: str, uppercase_first_letter=True, locale: str = DEFAULT_LOCALE) -> str:
    return default_inflector.camelize(term, uppercase_first_letter, locale)


def underscore(camel_cased_word: str) -> str:
    return default_inflector.underscore(camel_cased_word)


def humanize(word: str, capitalize=True, keep_id_suffix=False, locale: str = DEFAULT_LOCALE) -> str:
    return default_inflector.humanize(word, capitalize, keep_id_suffix, locale)


def classify(table_name: str, locale: str = DEFAULT_LOCALE) -> str:
    return default_inflector.classify(table_name, locale)


def dasherize(underscored_word: str) -> str:
    return default_inflector.dasherize(underscored_word)


def ordinal(number) -> str:
    return default_inflector.ordinal(number)


def ordinalize(number) -> str:
    return default_inflector.ordinalize(number)


def titleize(word: str, keep_id_suffix=False, locale: str = DEFAULT_LOCALE) -> str:
    return default_inflector.titleize(word, keep_id_suffix, locale)


def tableize(class_name: str, locale: str = DEFAULT_LOCALE) -> str:
    return default_inflector.tableize(class_name, locale)


def demodulize(path: str) -> str:
    return default_inflector.demodulize(path)


def deconstantize(path: str) -> str:
    return default_inflector.deconstantize(path)


def foreign_key(class_name: str, separate_class_name_and_id_with_underscore=True) -> str:
    return default_inflector.foreign_key(class_name, separate_class_name_and_id_with_underscore)


def upcase_first(string: str) -> str:
    return Inflector.upcase_first(string)
