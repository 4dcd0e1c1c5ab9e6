"""
-------
conftest.py
-------
Shared pytest fixtures for infline tests.
"""

import logging

import pytest
import matplotlib
matplotlib.use("Agg")  # ensure headless backend for CI
import matplotlib.pyplot as plt


# -----------------------------------------------------------------------------
# Core Matplotlib fixtures
# -----------------------------------------------------------------------------
@pytest.fixture(scope="function")
def fig_ax():
  """
  Create and yield an isolated Matplotlib Figure/Axes pair.

  The figure is automatically closed after the test to avoid memory leaks.
  """
  fig, ax = plt.subplots(figsize=(4, 3))
  yield fig, ax
  plt.close(fig)


@pytest.fixture
def view_ax(fig_ax):
  """Axes with fixed limits x=(0, 10), y=(-1, 1)."""
  _, ax = fig_ax
  ax.set_xlim(0, 10)
  ax.set_ylim(-1, 1)
  return ax


# -----------------------------------------------------------------------------
# Logging fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def clean_logger():
  """Yield the package logger and drop any handlers a test installed on it."""
  logger = logging.getLogger("infline")
  level = logger.level
  yield logger
  for h in list(logger.handlers):
    logger.removeHandler(h)
    h.close()
  logger.setLevel(level)
