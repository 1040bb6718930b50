"""
Cursor Explorer Package
An interactive terminal file browser with basic file operations

Version: 1.2.0
"""

__version__ = "1.2.0"
__author__ = "Cursor Explorer Team"

# Lazy imports for the main entry classes
__all__ = [
    'ApplicationContext',
    'ConfigManager',
    'NavigationLoop',
    '__version__'
]

def __getattr__(name):
    """Lazy import for the main entry classes"""
    if name == 'ApplicationContext':
        from cursor_explorer.core.application_context import ApplicationContext
        return ApplicationContext
    elif name == 'ConfigManager':
        from cursor_explorer.utils.config_manager import ConfigManager
        return ConfigManager
    elif name == 'NavigationLoop':
        from cursor_explorer.core.navigation import NavigationLoop
        return NavigationLoop
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
