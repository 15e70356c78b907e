import pytest

from wordinflect.english import UNCOUNTABLES
from wordinflect.exceptions import UnknownLocaleError
from wordinflect.string_utils import (pluralize, singularize, camelize, underscore, humanize, classify, dasherize,
                                      ordinal, ordinalize, titleize, tableize, demodulize, deconstantize, foreign_key,
                                      upcase_first)


def test_pluralize():
    assert pluralize('post') == 'posts'
    assert pluralize('octopus') == 'octopi'
    assert pluralize('sheep') == 'sheep'
    assert pluralize('words') == 'words'
    assert pluralize('CamelOctopus') == 'CamelOctopi'
    assert pluralize('bus') == 'buses'
    assert pluralize('city') == 'cities'
    assert pluralize('fox') == 'foxes'
    assert pluralize('woman') == 'women'
    assert pluralize('child') == 'children'
    assert pluralize('ox') == 'oxen'
    assert pluralize('sky') == 'skies'
    assert pluralize('man') == 'men'
    assert pluralize('wolf') == 'wolves'
    assert pluralize('knife') == 'knives'
    assert pluralize('person') == 'people'
    assert pluralize('Person') == 'People'
    assert pluralize('matrix') == 'matrices'
    assert pluralize('quiz') == 'quizzes'
    assert pluralize('analysis') == 'analyses'
    assert pluralize('') == ''


def test_singularize():
    assert singularize('posts') == 'post'
    assert singularize('octopi') == 'octopus'
    assert singularize('sheep') == 'sheep'
    assert singularize('word') == 'word'
    assert singularize('CamelOctopi') == 'CamelOctopus'
    assert singularize('buses') == 'bus'
    assert singularize('cities') == 'city'
    assert singularize('foxes') == 'fox'
    assert singularize('oxen') == 'ox'
    assert singularize('children') == 'child'
    assert singularize('women') == 'woman'
    assert singularize('skies') == 'sky'
    assert singularize('men') == 'man'
    assert singularize('wolves') == 'wolf'
    assert singularize('knives') == 'knife'
    assert singularize('people') == 'person'
    assert singularize('matrices') == 'matrix'
    assert singularize('quizzes') == 'quiz'
    assert singularize('news') == 'news'
    assert singularize('') == ''


def test_uncountable_words_are_not_inflected():
    for word in UNCOUNTABLES:
        assert pluralize(word) == word
        assert singularize(word) == word

    assert pluralize('Sheep') == 'Sheep'
    assert pluralize('black sheep') == 'black sheep'
    assert singularize('the police') == 'the police'
    assert pluralize('sheep\n') == 'sheep\n'
    assert singularize('Sheep\n') == 'Sheep\n'


def test_unknown_locale():
    with pytest.raises(UnknownLocaleError) as excinfo:
        pluralize('post', 'xx')
    assert 'xx' in str(excinfo.value)

    with pytest.raises(UnknownLocaleError):
        singularize('posts', 'xx')


def test_camelize():
    assert camelize('active_model') == 'ActiveModel'
    assert camelize('active_model', False) == 'activeModel'
    assert camelize('active_model/errors') == 'ActiveModel::Errors'
    assert camelize('active_model/errors', False) == 'activeModel::Errors'
    assert camelize('uno_due_tre') == 'UnoDueTre'
    assert camelize('uno_dUE_tre') == 'UnoDueTre'
    assert camelize('uno') == 'Uno'
    assert camelize('UnoDueTre') == 'UnoDueTre'
    assert camelize('/active_model') == '::ActiveModel'
    assert camelize('ssl_error') == 'SslError'
    assert camelize('') == ''


def test_underscore():
    assert underscore('ActiveModel') == 'active_model'
    assert underscore('ActiveModel::Errors') == 'active_model/errors'
    assert underscore('SSLError') == 'ssl_error'
    assert underscore('HTTPServer') == 'http_server'
    assert underscore('camelCase') == 'camel_case'
    assert underscore('dasherized-word') == 'dasherized_word'
    assert underscore('Area51Controller') == 'area51_controller'
    assert underscore('already_underscored') == 'already_underscored'
    assert underscore('') == ''


def test_camelize_is_not_always_the_inverse_of_underscore():
    assert camelize(underscore('SSLError')) == 'SslError'
    assert camelize(underscore('ActiveModel::Errors')) == 'ActiveModel::Errors'


def test_humanize():
    assert humanize('employee_salary') == 'Employee salary'
    assert humanize('author_id') == 'Author'
    assert humanize('author_id', capitalize=False) == 'author'
    assert humanize('author_id', keep_id_suffix=True) == 'Author id'
    assert humanize('_id') == 'Id'
    assert humanize('__private_field') == 'Private field'
    assert humanize('SHOUTED_Words') == 'Shouted words'
    assert humanize('') == ''


def test_classify():
    assert classify('egg_and_hams') == 'EggAndHam'
    assert classify('posts') == 'Post'
    assert classify('public.posts') == 'Post'
    assert classify('db.public.egg_and_hams') == 'EggAndHam'
    # already singular words are singularized anyway
    assert classify('calculus') == 'Calculu'


def test_dasherize():
    assert dasherize('puni_puni') == 'puni-puni'
    assert dasherize('no_more_underscores_') == 'no-more-underscores-'
    assert dasherize('plain') == 'plain'

    for s in ['puni_puni', '_a_b_', 'x', '', 'snake_case_with_9_parts']:
        assert dasherize(s).replace('-', '_') == s


def test_ordinal():
    assert ordinal(1) == 'st'
    assert ordinal(2) == 'nd'
    assert ordinal(3) == 'rd'
    assert ordinal(4) == 'th'
    assert ordinal(11) == 'th'
    assert ordinal(12) == 'th'
    assert ordinal(13) == 'th'
    assert ordinal(21) == 'st'
    assert ordinal(111) == 'th'
    assert ordinal(1002) == 'nd'
    assert ordinal(1003) == 'rd'
    assert ordinal(-11) == 'th'
    assert ordinal(-1021) == 'st'
    assert ordinal(0) == 'th'

    for n in range(1, 250):
        assert ordinal(n) == ordinal(-n)


def test_ordinalize():
    assert ordinalize(1) == '1st'
    assert ordinalize(2) == '2nd'
    assert ordinalize(1002) == '1002nd'
    assert ordinalize(1003) == '1003rd'
    assert ordinalize(-11) == '-11th'
    assert ordinalize(-1021) == '-1021st'


def test_titleize():
    assert titleize('man_from_the_boondocks') == 'Man From The Boondocks'
    assert titleize('x-men: the last stand') == 'X Men: The Last Stand'
    assert titleize('TheManWithoutAPast') == 'The Man Without A Past'
    assert titleize('raiders_of_the_lost_ark') == 'Raiders Of The Lost Ark'
    assert titleize('string_ending_with_id') == 'String Ending With'
    assert titleize('string_ending_with_id', keep_id_suffix=True) == 'String Ending With Id'


def test_tableize():
    assert tableize('RawScaledScorer') == 'raw_scaled_scorers'
    assert tableize('egg_and_ham') == 'egg_and_hams'
    assert tableize('fancyCategory') == 'fancy_categories'


def test_demodulize_and_deconstantize():
    assert demodulize('ActiveSupport::Inflector::Inflections') == 'Inflections'
    assert demodulize('Inflections') == 'Inflections'
    assert demodulize('::Inflections') == 'Inflections'
    assert demodulize('') == ''

    assert deconstantize('Net::HTTP') == 'Net'
    assert deconstantize('::Net::HTTP') == '::Net'
    assert deconstantize('String') == ''
    assert deconstantize('::String') == ''


def test_foreign_key():
    assert foreign_key('Message') == 'message_id'
    assert foreign_key('Message', False) == 'messageid'
    assert foreign_key('Admin::Post') == 'post_id'


def test_upcase_first():
    assert upcase_first('what a Lovely Day') == 'What a Lovely Day'
    assert upcase_first('w') == 'W'
    assert upcase_first('') == ''
