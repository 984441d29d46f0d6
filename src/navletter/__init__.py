"""navletter: outline citation and naval correspondence formatting engine."""

from __future__ import annotations

__version__ = "0.1.0"
