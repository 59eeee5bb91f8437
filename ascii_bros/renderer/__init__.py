"""Rendering subpackage.

Turns actors plus the shared tile atlas into display output:

* :mod:`ascii_bros.renderer.compositor` culls, orders and blits actors into a
  :class:`Frame` of glyphs and colors.
* :mod:`ascii_bros.renderer.terminal` presents frames as ANSI text.
* :mod:`ascii_bros.renderer.image` rasterizes frames with Pillow.
"""
