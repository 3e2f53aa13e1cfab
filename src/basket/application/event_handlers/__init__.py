from basket.application.event_handlers.cart_activity_log_handler import CartActivityLogHandler

__all__ = ["CartActivityLogHandler"]
