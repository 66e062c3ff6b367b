import os

_SETTINGS_BY_ENV = {
    "development": "config.development",
    "dev": "config.development",
    "testing": "config.testing",
    "test": "config.testing",
    "production": "config.production",
    "prod": "config.production",
}


def get_settings_module() -> str:
    """Dotted path of the settings module for ``APP_ENV``.

    Unknown or unset environments fall back to development settings.
    """

    env = os.getenv("APP_ENV", "development").strip().lower()
    return _SETTINGS_BY_ENV.get(env, _SETTINGS_BY_ENV["development"])
