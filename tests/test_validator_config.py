import dataclasses

import pytest

from tag_validator import HtmlTagValidator
from tag_validator.utils.validator_config import ValidatorConfig, ValidatorDefaults


def test_defaults():
    config = ValidatorConfig.default()
    assert config.file_extensions == ('htm', 'html', 'jsp')
    assert config.charset == 'utf-8'
    assert config.void_elements == ValidatorDefaults.VOID_ELEMENTS


def test_vocabularies_are_normalized():
    config = ValidatorConfig(void_elements=frozenset({'BR'}), file_extensions=('.HTML',))
    assert config.is_void('br')
    assert config.is_void('Br')
    assert config.accepts('a/b/page.html')
    assert not config.accepts('a/b/page.htm')


def test_config_is_immutable():
    config = ValidatorConfig.default()
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.charset = 'gbk'


def test_with_extensions_falls_back_to_defaults():
    assert ValidatorConfig.with_extensions(None).file_extensions == ValidatorDefaults.FILE_EXTENSIONS
    assert ValidatorConfig.with_extensions([]).file_extensions == ValidatorDefaults.FILE_EXTENSIONS
    assert ValidatorConfig.with_extensions(['vm'], 'gbk') == ValidatorConfig(file_extensions=('vm',), charset='gbk')


@pytest.mark.parametrize("config", [
    ValidatorConfig(file_extensions=()),
    ValidatorConfig(file_extensions=('',)),
    ValidatorConfig(charset=''),
])
def test_invalid_configuration_rejected(config):
    with pytest.raises(ValueError):
        HtmlTagValidator(config)
