import json
import logging
import re
from re import Pattern
from typing import Dict, List, Tuple, Union

from .english import load_english
from .exceptions import UnknownLocaleError, InvalidScopeError, InvalidRuleConfig

logger = logging.getLogger('WordInflect')

DEFAULT_LOCALE = 'en'

Rule = Tuple[Pattern, str]
RuleSource = Union[str, Pattern]

# Matches nothing, used while no acronym is registered
NO_ACRONYM_PATTERN = r'(?=a)b'


def compile_rule(rule: RuleSource) -> Pattern:
    """String rules are compiled case-insensitively, compiled patterns are used as they are."""
    if isinstance(rule, str):
        return re.compile(rule, re.IGNORECASE)
    return rule


class Inflections:
    """
    The inflection tables of one locale.

    Every rule is inserted at the top of its list, so the most recently registered
    rule is the first one tried. The default tables register the general rules
    first and the special cases later, and rely on this order.
    """
    SCOPES = ('plurals', 'singulars', 'uncountables', 'humans', 'acronyms')

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale
        self.plurals: List[Rule] = []
        self.singulars: List[Rule] = []
        self.humans: List[Rule] = []
        self.uncountables = set()
        self.acronyms: Dict[str, str] = {}
        self.acronym_pattern: Pattern = re.compile(NO_ACRONYM_PATTERN)

    def plural(self, rule: RuleSource, replacement: str):
        """
        Register a pluralization rule.

        :param rule: A regular expression, or a string compiled case-insensitively.
        :param replacement: The replacement template, it may contain ``\\1`` and ``\\2``.
        """
        if isinstance(rule, str):
            self.uncountables.discard(rule)
        self.uncountables.discard(replacement)
        self.plurals.insert(0, (compile_rule(rule), replacement))

    def singular(self, rule: RuleSource, replacement: str):
        """
        Register a singularization rule.

        :param rule: A regular expression, or a string compiled case-insensitively.
        :param replacement: The replacement template, it may contain ``\\1`` and ``\\2``.
        """
        if isinstance(rule, str):
            self.uncountables.discard(rule)
        self.uncountables.discard(replacement)
        self.singulars.insert(0, (compile_rule(rule), replacement))

    def irregular(self, singular: str, plural: str):
        """
        Register a pair of forms that do not follow the rules, for example ``person`` and ``people``.

        The first letter keeps the case of the word being inflected, so ``People``
        singularizes to ``Person``. Both words stop being uncountable.
        """
        self.uncountables.discard(singular)
        self.uncountables.discard(plural)

        s0, s_rest = singular[0], singular[1:]
        p0, p_rest = plural[0], plural[1:]

        if s0.upper() == p0.upper():
            self.plural(re.compile(f'({re.escape(s0)}){re.escape(s_rest)}$', re.IGNORECASE), r'\1' + p_rest)
            self.plural(re.compile(f'({re.escape(p0)}){re.escape(p_rest)}$', re.IGNORECASE), r'\1' + p_rest)
            self.singular(re.compile(f'({re.escape(s0)}){re.escape(s_rest)}$', re.IGNORECASE), r'\1' + s_rest)
            self.singular(re.compile(f'({re.escape(p0)}){re.escape(p_rest)}$', re.IGNORECASE), r'\1' + s_rest)
        else:
            for first in (str.upper, str.lower):
                self.plural(re.compile(f'{re.escape(first(s0))}(?i:{re.escape(s_rest)})$'), first(p0) + p_rest)
                self.plural(re.compile(f'{re.escape(first(p0))}(?i:{re.escape(p_rest)})$'), first(p0) + p_rest)
                self.singular(re.compile(f'{re.escape(first(s0))}(?i:{re.escape(s_rest)})$'), first(s0) + s_rest)
                self.singular(re.compile(f'{re.escape(first(p0))}(?i:{re.escape(p_rest)})$'), first(s0) + s_rest)

    def uncountable(self, *words: str):
        for word in words:
            self.uncountables.add(word.lower())

    def human(self, rule: RuleSource, replacement: str):
        """
        Register a rule applied by ``humanize`` before anything else.

        :param rule: A regular expression, or a string compiled case-insensitively.
        :param replacement: The replacement template.
        """
        self.humans.insert(0, (compile_rule(rule), replacement))

    def acronym(self, word: str):
        """
        Register an acronym, for example ``acronym('SSL')``.

        ``camelize`` and ``humanize`` will then write ``ssl`` as ``SSL``.
        """
        self.acronyms[word.lower()] = word
        self._define_acronym_pattern()

    def _define_acronym_pattern(self):
        if not self.acronyms:
            self.acronym_pattern = re.compile(NO_ACRONYM_PATTERN)
            return

        # registration order, an acronym registered earlier wins over a longer one
        self.acronym_pattern = re.compile('|'.join(re.escape(word) for word in self.acronyms.values()))

    def lookup_acronym(self, key: str):
        """Return the display form of the acronym registered as ``key``, or ``None``."""
        return self.acronyms.get(key)

    def is_uncountable(self, word: str) -> bool:
        match = re.search(r'\b\w+(?=\n?\Z)', word.lower())
        return bool(match) and match.group(0) in self.uncountables

    def clear(self, scope: str = 'all'):
        """
        Remove the registered rules.

        :param scope: One of ``plurals``, ``singulars``, ``uncountables``, ``humans``, ``acronyms`` or ``all``.
        :raises InvalidScopeError: If the scope is not one of the above.
        """
        if scope == 'all':
            for s in self.SCOPES:
                self.clear(s)
            return

        if scope not in self.SCOPES:
            raise InvalidScopeError(f'Unknown scope "{scope}", expected one of {", ".join(self.SCOPES)} or all.')

        if scope == 'uncountables':
            self.uncountables = set()
        elif scope == 'acronyms':
            self.acronyms = {}
            self._define_acronym_pattern()
        else:
            setattr(self, scope, [])

    def __repr__(self):
        return f'<Inflections {self.locale}: {len(self.plurals)} plurals, {len(self.singulars)} singulars, ' \
               f'{len(self.uncountables)} uncountables, {len(self.humans)} humans, {len(self.acronyms)} acronyms>'


class RuleStore:
    """
    The inflection tables of every locale.

    A store is built once, usually with ``RuleStore.default()`` or ``RuleStore.from_config()``,
    and passed to an ``Inflector``. Asking for a locale that was never added raises
    ``UnknownLocaleError``, there is no fallback to the default locale.
    """
    CONFIG_KEYS = ('defaults', 'plurals', 'singulars', 'irregulars', 'uncountables', 'humans', 'acronyms')

    def __init__(self):
        self._locales: Dict[str, Inflections] = {}

    @classmethod
    def default(cls) -> 'RuleStore':
        store = cls()
        load_english(store.add_locale(DEFAULT_LOCALE))
        return store

    @classmethod
    def from_config(cls, config: dict) -> 'RuleStore':
        """
        Create a store from a dictionary with one entry per locale.

        :param config: A dictionary like ``{'en': {'defaults': True, 'acronyms': ['SSL']}}``.
        :return: The new store.
        :raises InvalidRuleConfig: If a locale contains unknown keys or malformed rules.

        Each locale accepts the keys ``defaults`` (start from the English tables),
        ``plurals``, ``singulars`` and ``humans`` (lists of ``[pattern, replacement]``),
        ``irregulars`` (list of ``[singular, plural]``), ``uncountables`` and ``acronyms``
        (lists of words). Entries are registered in the order they appear, so the
        last entry of a list has the highest priority.
        """
        store = cls()
        for locale, locale_config in config.items():
            if not isinstance(locale_config, dict):
                raise InvalidRuleConfig(f'The configuration of locale "{locale}" must be a dictionary, got {locale_config!r}')

            unknown_keys = set(locale_config) - set(cls.CONFIG_KEYS)
            if unknown_keys:
                quoted_keys = ', '.join(f'"{key}"' for key in sorted(unknown_keys))
                raise InvalidRuleConfig(f'Unknown keys in the configuration of locale "{locale}": {quoted_keys}')

            inflections = store.add_locale(locale)
            if locale_config.get('defaults', False):
                load_english(inflections)

            for key, register in [('plurals', inflections.plural),
                                  ('singulars', inflections.singular),
                                  ('irregulars', inflections.irregular),
                                  ('humans', inflections.human)]:
                for pair in locale_config.get(key, []):
                    if not isinstance(pair, (list, tuple)) or len(pair) != 2:
                        raise InvalidRuleConfig(f'Each item of "{key}" in locale "{locale}" must be a pair, got {pair!r}')
                    first, second = pair
                    rule_types = str if key == 'irregulars' else (str, Pattern)
                    if not isinstance(first, rule_types) or not isinstance(second, str):
                        raise InvalidRuleConfig(f'Each item of "{key}" in locale "{locale}" must be a pair of strings, got {pair!r}')
                    register(first, second)

            for key in ['uncountables', 'acronyms']:
                words = locale_config.get(key, [])
                if not isinstance(words, (list, tuple)) or not all(isinstance(word, str) for word in words):
                    raise InvalidRuleConfig(f'"{key}" in locale "{locale}" must be a list of words, got {words!r}')

            inflections.uncountable(*locale_config.get('uncountables', []))
            for word in locale_config.get('acronyms', []):
                inflections.acronym(word)

        logger.info(f'Inflection rules loaded for locales: {", ".join(store.locales) or "none"}')
        return store

    @classmethod
    def from_json_file(cls, file_name: str) -> 'RuleStore':
        with open(file_name, 'r') as f:
            return cls.from_config(json.load(f))

    @property
    def locales(self) -> List[str]:
        return list(self._locales)

    def add_locale(self, locale: str) -> Inflections:
        """Return the tables of ``locale``, creating empty ones if the locale is new."""
        if locale not in self._locales:
            self._locales[locale] = Inflections(locale)
        return self._locales[locale]

    def inflections(self, locale: str = DEFAULT_LOCALE) -> Inflections:
        try:
            return self._locales[locale]
        except KeyError:
            raise UnknownLocaleError(f'No inflection rules defined for locale "{locale}".') from None

    def __contains__(self, locale):
        return locale in self._locales

    def __repr__(self):
        return f'<RuleStore {", ".join(self.locales) or "empty"}>'
