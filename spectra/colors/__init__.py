"""
Spectra Color Class
===================

``Color`` is a single color readable and writable as RGB (0-255 integer
channels), HSV and HSL, with an alpha channel in [0, 1].

Usage
-----
>>> from spectra.colors import Color
>>> color = Color({"r": 255, "g": 25, "b": 75, "a": 0.6})
>>> color.hex()
'#ff194b'
>>> color.complement().hex()
'#19ffcd'
>>> color.lighten(10).hex()
'#ff4c73'
>>> [c.hex() for c in Color("#000").gradient("#505050", 3)]
['#000000', '#282828', '#505050']

Accepted inputs
---------------
- another ``Color`` (copied)
- mappings ``{r,g,b[,a]}``, ``{h,s,v[,a]}``, ``{h,s,l[,a]}``
- strings: ``#rgb``, ``#rrggbb``, ``rgb()``, ``rgba()``, ``hsl()``,
  ``hsla()`` and CSS3 color names

Anything else raises ``InvalidColorInput``.
"""

from .color import Color, coerce_color
from .harmony import HarmonyScheme, harmony_offsets

__all__ = ['Color', 'coerce_color', 'HarmonyScheme', 'harmony_offsets']
