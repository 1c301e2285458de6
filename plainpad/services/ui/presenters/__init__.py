from __future__ import annotations

from .main_presenter import MainPresenter

__all__ = ["MainPresenter"]
