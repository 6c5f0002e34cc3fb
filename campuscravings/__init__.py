"""Terminal food ordering system for a campus canteen: menus, pricing, data files and buyer and seller screens."""

__version__ = "0.1.0"