from __future__ import annotations

"""
fuzzel-pass.

Password selection front-end for the 'pass' password store. Parses the
store listing and entry bodies, lets the user pick a path and a field
through a dmenu-style picker and delivers the value to the clipboard or
to the focused window.
"""

__version__ = "0.1.0"
