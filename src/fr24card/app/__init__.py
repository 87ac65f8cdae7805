"""Application layer: render pipeline, card lifecycle and popup contract."""

from .card import FlightCard
from .pipeline import RenderResult, render_cycle
from .popup import Popup, PopupContent

__all__ = ["FlightCard", "RenderResult", "render_cycle", "Popup", "PopupContent"]
