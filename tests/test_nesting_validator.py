import pytest

from tag_validator.models import MessageLevel, MessageType
from tag_validator.utils.nesting_validator import NestingValidator
from tag_validator.utils.validator_config import ValidatorConfig


@pytest.fixture
def nesting():
    return NestingValidator()


def tags_of(make_tag, *raws):
    return [make_tag(raw, line=i + 1) for i, raw in enumerate(raws)]


def test_well_nested_tags(nesting, make_tag):
    tags = tags_of(make_tag, '<html>', '<body>', '<div class="a">', '<p>', '</p>', '</div>', '</body>', '</html>')
    assert nesting.validate('f', tags) == []


def test_single_unclosed_tag(nesting, make_tag):
    messages = nesting.validate('f', tags_of(make_tag, '<div>'))
    assert len(messages) == 1
    assert messages[0].level == MessageLevel.ERROR
    assert messages[0].message_type == MessageType.MISSING_END_TAG
    assert messages[0].primary_tag.name == 'div'
    assert messages[0].message == 'f [ERROR] missing end tag: <div>, line 1, col 0'


def test_only_innermost_unclosed_tag_reported(nesting, make_tag):
    messages = nesting.validate('f', tags_of(make_tag, '<div>', '<span>'))
    assert [m.primary_tag.name for m in messages] == ['span']


def test_mismatch(nesting, make_tag):
    messages = nesting.validate('f', tags_of(make_tag, '<div>', '<p>', '</div>'))
    assert len(messages) == 1
    message = messages[0]
    assert message.message_type == MessageType.TAG_MISMATCH
    assert message.primary_tag.name == 'p'
    assert message.secondary_tag.name == '/div'
    assert message.message == 'f [ERROR] tag mismatch: <p>, line 2, col 0 and </div>, line 3, col 0'


def test_only_first_mismatch_reported(nesting, make_tag):
    tags = tags_of(make_tag, '<a>', '<b>', '</a>', '<c>', '<d>', '</c>')
    messages = nesting.validate('f', tags)
    assert [m.message_type for m in messages] == [MessageType.TAG_MISMATCH]
    assert messages[0].secondary_tag.name == '/a'


def test_name_matching_is_case_sensitive(nesting, make_tag):
    messages = nesting.validate('f', tags_of(make_tag, '<DIV>', '</div>'))
    assert [m.message_type for m in messages] == [MessageType.TAG_MISMATCH]


@pytest.mark.parametrize("raws", [
    ('<br>', '<BR>', '<hr>', '<img src="a.png">', '<meta charset="utf-8">', '<!DOCTYPE html>'),
    ('<input type="text">', '<link rel="x">', '<wbr>', '<Keygen>'),
])
def test_void_elements_never_open(nesting, make_tag, raws):
    assert nesting.validate('f', tags_of(make_tag, *raws)) == []


def test_redundant_self_close_on_void_element(nesting, make_tag):
    messages = nesting.validate('f', tags_of(make_tag, '<br />', '<img src="x.png"/>', '<hr>'))
    assert [m.level for m in messages] == [MessageLevel.WARNING, MessageLevel.WARNING]
    assert all(m.message_type == MessageType.REDUNDANT_SELF_CLOSE for m in messages)


def test_self_closing_non_void_is_ignored(nesting, make_tag):
    assert nesting.validate('f', tags_of(make_tag, '<div/>', '<br/>', '<my-widget a="1"/>')) == []


@pytest.mark.parametrize("raws", [
    ('</br>',),
    ('<div>', '</br>', '</div>'),
    ('<p>', '</IMG>', '</p>'),
])
def test_void_end_tag_always_one_error(nesting, make_tag, raws):
    messages = nesting.validate('f', tags_of(make_tag, *raws))
    assert [m.message_type for m in messages] == [MessageType.VOID_END_TAG]
    assert messages[0].level == MessageLevel.ERROR


def test_stray_end_tag_on_empty_stack_is_kept_open(nesting, make_tag):
    messages = nesting.validate('f', tags_of(make_tag, '<div>', '</div>', '</span>'))
    assert [m.message_type for m in messages] == [MessageType.MISSING_END_TAG]
    assert messages[0].primary_tag.name == '/span'


def test_missing_end_tag_suppressed_after_other_messages(nesting, make_tag):
    messages = nesting.validate('f', tags_of(make_tag, '<div>', '<br/>', '<br />'))
    assert [m.message_type for m in messages] == [MessageType.REDUNDANT_SELF_CLOSE]


def test_custom_void_vocabulary(make_tag):
    nesting = NestingValidator(ValidatorConfig(void_elements=frozenset({'c:set'})))
    assert nesting.validate('f', tags_of(make_tag, '<c:set var="x">', '<br>', '</br>')) == []
