"""Tests for the package logger factory."""

from __future__ import annotations

import logging

from pr_refs.telemetry.logger import get_logger


def test_logger_configured_once():
    logger = get_logger("pr_refs.test_once", "DEBUG")
    again = get_logger("pr_refs.test_once", "ERROR")

    assert logger is again
    assert len(logger.handlers) == 1
    assert logger.level == logging.DEBUG


def test_unknown_level_falls_back_to_info():
    assert get_logger("pr_refs.test_level", "chatty").level == logging.INFO


def test_non_level_attribute_falls_back_to_info():
    """``logging.BASIC_FORMAT`` is a string, not a level."""
    assert get_logger("pr_refs.test_basic_format", "basic_format").level == logging.INFO
