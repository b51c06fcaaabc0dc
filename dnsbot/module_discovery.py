"""
Automatic module discovery.
Discovers all lookup modules in dnsbot/modules/ and returns their instances.
"""
import os
import importlib
import logging
from typing import Dict, Optional
from dnsbot.modules.base import BaseModule

logger = logging.getLogger(__name__)


def discover_modules(modules_dir: Optional[str] = None, package: str = "dnsbot.modules") -> Dict[str, BaseModule]:
    """
    Discover all modules in the modules directory.

    Args:
        modules_dir: Path to modules directory (default: dnsbot/modules)
        package: Dotted package name the directory is imported as

    Returns:
        Dictionary mapping module names to module instances
    """
    if modules_dir is None:
        modules_dir = os.path.join(os.path.dirname(__file__), 'modules')

    discovered_modules = {}

    if not os.path.exists(modules_dir):
        logger.warning(f"Modules directory not found: {modules_dir}")
        return discovered_modules

    # Sorted so discovery order does not depend on the filesystem
    for item in sorted(os.listdir(modules_dir)):
        module_path = os.path.join(modules_dir, item)

        # Skip plain files, __pycache__ and private directories
        if not os.path.isdir(module_path) or item.startswith('_'):
            continue

        try:
            module = importlib.import_module(f"{package}.{item}")

            if hasattr(module, 'module') and isinstance(module.module, BaseModule):
                module_instance = module.module
                discovered_modules[module_instance.MODULE_NAME] = module_instance
                logger.info(f"Discovered module: {module_instance.MODULE_NAME}")
            else:
                logger.warning(f"Module {item} does not have a valid module instance in __init__.py")
        except ImportError as e:
            logger.warning(f"Could not import module {item}: {e}")

    return discovered_modules
