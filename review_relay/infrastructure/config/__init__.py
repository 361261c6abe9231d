from .settings import Settings, LLMSettings, SMSSettings, ServerSettings, get_settings

__all__ = ["Settings", "LLMSettings", "SMSSettings", "ServerSettings", "get_settings"]
