from .base_validator import BaseValidator
from .html_tag_validator import HtmlTagValidator


__all__ = ['BaseValidator', 'HtmlTagValidator']
