# src/courier/services/__init__.py
"""Business logic services for the Courier application.

Import concrete services from their modules (``courier.services.messaging``,
``courier.services.session_manager``); repositories depend on
``courier.services.errors`` so this package stays free of eager imports.
"""
