"""Reusable UI widgets"""

from .loading_indicator import (
    SpinnerWidget,
    LoadingMessage,
)
