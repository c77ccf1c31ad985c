"""Built-in plugins registered by :class:`gqlnno.plugins.PluginManager`."""
