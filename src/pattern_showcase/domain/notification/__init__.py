"""Notification broadcast - Observer pattern example."""

from .observers import MobileAppDisplay, StockObserver, WebDashboardDisplay
from .stock import Stock

__all__ = ["Stock", "StockObserver", "MobileAppDisplay", "WebDashboardDisplay"]
