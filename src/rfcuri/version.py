from __future__ import annotations


__all__ = ["version"]


version = "1.0"
