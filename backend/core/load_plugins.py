def load_plugins(settings_obj, rng=None):
    # Route providers
    from core.register_providers import register_providers

    register_providers(settings_obj, rng=rng)
