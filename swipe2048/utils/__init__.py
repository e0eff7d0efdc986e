# -*- coding: utf-8 -*-
"""
This module provides a `WindowBoard` class to display a game board in a Matplotlib window.
"""

from .windows import WindowBoard

__all__ = ['WindowBoard']
