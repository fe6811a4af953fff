from vehicle_compare.config import Settings, settings


def get_settings() -> Settings:
    """FastAPI dependency returning the active settings (overridable in tests)."""
    return settings
