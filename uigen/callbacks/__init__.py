from uigen.callbacks.logging import LoggingCallback

__all__ = ["LoggingCallback"]
