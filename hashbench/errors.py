# -*- coding: utf-8 -*-
"""Exceptions raised by the benchmark harness."""


class InvalidConfiguration(ValueError):
    """Malformed harness setup (empty sizes, no operations, zero iterations)."""


class OperationFailure(RuntimeError):
    """A single invocation of an operation under test failed."""


class NoReportAvailable(RuntimeError):
    """A report was requested before a run completed."""
