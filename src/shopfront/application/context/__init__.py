from shopfront.application.context.principal import Principal

__all__ = ["Principal"]
