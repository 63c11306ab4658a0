from .validation_report import ValidationReporter


__all__ = ['ValidationReporter']
