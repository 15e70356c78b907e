import re
from typing import List

from .inflections import logger, DEFAULT_LOCALE, Rule, RuleStore


class Inflector:
    """
    Word transformations driven by the tables of a ``RuleStore``.

    The inflector keeps no state between calls and never modifies the store, so
    a single instance can be shared. Every method taking a ``locale`` raises
    ``UnknownLocaleError`` if the store has no tables for it.
    """

    def __init__(self, rule_store: RuleStore = None, log_rules=False):
        self.rule_store = rule_store if rule_store is not None else RuleStore.default()
        self.log_rules = log_rules

    def apply_inflections(self, word: str, rules: List[Rule], locale: str = DEFAULT_LOCALE) -> str:
        """
        Apply the first rule of ``rules`` that matches ``word``.

        :param word: The word to inflect.
        :param rules: Ordered ``(pattern, replacement)`` pairs.
        :param locale: The locale whose uncountable words are left untouched.
        :return: The inflected word, or ``word`` itself if it is uncountable or no rule matches.

        Only one rule is applied: the scan stops at the first pattern found anywhere
        in the word, and every occurrence of that pattern is replaced.
        """
        if not word or self.rule_store.inflections(locale).is_uncountable(word):
            return word

        return self._apply_first_match(word, rules)

    def _apply_first_match(self, word: str, rules: List[Rule]) -> str:
        for rule, replacement in rules:
            if rule.search(word):
                result = rule.sub(replacement, word)
                self._log_rule(word, rule, result)
                return result
        return word

    def pluralize(self, word: str, locale: str = DEFAULT_LOCALE) -> str:
        return self.apply_inflections(word, self.rule_store.inflections(locale).plurals, locale)

    def singularize(self, word: str, locale: str = DEFAULT_LOCALE) -> str:
        return self.apply_inflections(word, self.rule_store.inflections(locale).singulars, locale)

    def camelize(self, term: str, uppercase_first_letter=True, locale: str = DEFAULT_LOCALE) -> str:
        """
        Convert an underscored path to UpperCamelCase, or lowerCamelCase if ``uppercase_first_letter`` is false.

        ``/`` becomes ``::``, so ``active_model/errors`` becomes ``ActiveModel::Errors``.
        Registered acronyms keep their spelling: with ``SSL`` registered, ``ssl_error``
        becomes ``SSLError``.
        """
        inflections = self.rule_store.inflections(locale)

        def acronym_or_capitalized(word):
            return inflections.lookup_acronym(word) or word.capitalize()

        if uppercase_first_letter:
            string = re.sub(r'^[a-z\d]*', lambda m: acronym_or_capitalized(m.group(0)), term, count=1)
        else:
            leading = re.compile(rf'^(?:(?:{inflections.acronym_pattern.pattern})(?=\b|[A-Z_])|\w)')
            string = leading.sub(lambda m: m.group(0).lower(), term, count=1)

        string = re.sub(r'(?:_|(/))([a-z\d]*)',
                        lambda m: (m.group(1) or '') + acronym_or_capitalized(m.group(2)),
                        string,
                        flags=re.IGNORECASE)
        return string.replace('/', '::')

    def underscore(self, camel_cased_word: str) -> str:
        """
        Convert CamelCase to lowercase with underscores, and ``::`` to ``/``.

        Acronyms are split with a plain character class rule: a run of capitals
        followed by a capitalized word is split before the last capital, so
        ``SSLError`` becomes ``ssl_error``.
        """
        if not re.search(r'[A-Z-]|::', camel_cased_word):
            return camel_cased_word

        word = camel_cased_word.replace('::', '/')
        word = re.sub(r'([A-Z\d]+)([A-Z][a-z])', r'\1_\2', word)
        word = re.sub(r'([a-z\d])([A-Z])', r'\1_\2', word)
        word = word.replace('-', '_')
        return word.lower()

    def humanize(self, word: str, capitalize=True, keep_id_suffix=False, locale: str = DEFAULT_LOCALE) -> str:
        """
        Tweak an attribute name for display to end users.

        :param word: The attribute name, like ``employee_salary`` or ``author_id``.
        :param capitalize: Upper case the first letter of the result.
        :param keep_id_suffix: Keep a trailing ``_id`` as the word ``id``.
        :param locale: The locale of the human rules and acronyms.
        :return: The human readable text, like ``Employee salary`` or ``Author``.

        Human rules are applied first, also to uncountable words. Then leading
        underscores and a trailing ``_id`` are removed, underscores become spaces,
        and every word is lower cased unless it is a registered acronym.
        """
        inflections = self.rule_store.inflections(locale)

        result = self._apply_first_match(word, inflections.humans)

        result = re.sub(r'\A_+', '', result)
        if not keep_id_suffix:
            result = re.sub(r'_id\Z', '', result)
        result = result.replace('_', ' ')

        def acronym_or_lower(match):
            run = match.group(0)
            return inflections.lookup_acronym(run) or run.lower()

        result = re.sub(r'[a-z\d]+', acronym_or_lower, result, flags=re.IGNORECASE)

        if capitalize:
            result = self.upcase_first(result)

        return result

    def classify(self, table_name: str, locale: str = DEFAULT_LOCALE) -> str:
        """
        Create a class name from a plural table name, like ``egg_and_hams`` to ``EggAndHam``.

        A schema prefix like ``public.`` is dropped. Words that are already singular
        are singularized anyway: ``calculus`` becomes ``Calculu``.
        """
        table_name = re.sub(r'.*\.', '', table_name)
        return self.camelize(self.singularize(table_name, locale), locale=locale)

    def dasherize(self, underscored_word: str) -> str:
        return underscored_word.replace('_', '-')

    def ordinal(self, number) -> str:
        """
        Return the suffix of the ordinal of ``number``: ``st``, ``nd``, ``rd`` or ``th``.

        The sign is ignored, ``ordinal(-11)`` is ``th`` and ``ordinal(-1021)`` is ``st``.
        """
        number = abs(int(number))

        if number % 100 in (11, 12, 13):
            return 'th'

        return {
            1: 'st',
            2: 'nd',
            3: 'rd',
        }.get(number % 10, 'th')

    def ordinalize(self, number) -> str:
        return f'{number}{self.ordinal(number)}'

    def titleize(self, word: str, keep_id_suffix=False, locale: str = DEFAULT_LOCALE) -> str:
        """Capitalize every word, like ``man_from_the_boondocks`` to ``Man From The Boondocks``."""
        result = self.humanize(self.underscore(word), keep_id_suffix=keep_id_suffix, locale=locale)
        return re.sub(r"\b(?<!\w['’`])[a-z]", lambda m: m.group(0).upper(), result)

    def tableize(self, class_name: str, locale: str = DEFAULT_LOCALE) -> str:
        return self.pluralize(self.underscore(class_name), locale)

    def demodulize(self, path: str) -> str:
        """Remove the namespaces, like ``ActiveModel::Errors`` to ``Errors``."""
        i = path.rfind('::')
        return path if i < 0 else path[i + 2:]

    def deconstantize(self, path: str) -> str:
        """Remove the rightmost segment, like ``ActiveModel::Errors`` to ``ActiveModel``."""
        i = path.rfind('::')
        return '' if i < 0 else path[:i]

    def foreign_key(self, class_name: str, separate_class_name_and_id_with_underscore=True) -> str:
        separator = '_' if separate_class_name_and_id_with_underscore else ''
        return f'{self.underscore(self.demodulize(class_name))}{separator}id'

    @staticmethod
    def upcase_first(string: str) -> str:
        return string[:1].upper() + string[1:]

    def _log_rule(self, word, rule, result):
        if not self.log_rules:
            return
        logger.debug(f'{word!r} -> {result!r} with rule {rule.pattern!r}')
