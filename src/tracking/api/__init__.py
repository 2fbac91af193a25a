"""Tracking domain API package."""

from tracking.api.routes import access_control_router, shipment_router

__all__ = ["access_control_router", "shipment_router"]
