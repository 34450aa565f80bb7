"""
Discovery and loading of command and event modules.

Each module in a handler directory exposes its handler class as the module
attribute ``HANDLER``. The loader imports every module, instantiates that
class with no arguments and keeps the instances that pass a validator.
A broken module is logged and skipped; it never stops the others from loading.
"""

import importlib
import importlib.util
import inspect
from pathlib import Path
from types import ModuleType
from typing import Any, Callable, List, Optional, Union

from .logging import logger

# Module attribute holding the handler class
DEFAULT_EXPORT = "HANDLER"


def discover_module_files(directory: Union[str, Path]) -> List[Path]:
    """List the loadable module files of a directory, sorted by name.

    Skips the package aggregator (``__init__.py``) and private ``_*.py`` files.

    Raises:
        FileNotFoundError: If the directory does not exist.
        NotADirectoryError: If the path is not a directory.
    """
    directory = Path(directory)
    if not directory.exists():
        raise FileNotFoundError(f"Module directory not found: {directory}")
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    return sorted(
        path for path in directory.iterdir()
        if path.is_file() and path.suffix == ".py" and not path.name.startswith("_")
    )


def _import_file(path: Path, package: Optional[str]) -> ModuleType:
    """Import a module file, by dotted name when it belongs to a package."""
    if package:
        return importlib.import_module(f"{package}.{path.stem}")

    spec = importlib.util.spec_from_file_location(path.stem, str(path))
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def load_modules(
    directory: Union[str, Path],
    validator: Callable[[Any], bool],
    package: Optional[str] = None,
    kind: str = "module"
) -> List[Any]:
    """Load and instantiate the handler of every module in a directory.

    Args:
        directory: Directory holding the module files.
        validator: Returns True if an instance has the required shape.
        package: Dotted package name of the directory, if it is importable.
        kind: Label used in log messages ("command", "event").

    Returns:
        The validated instances, in discovery order.

    Raises:
        FileNotFoundError, NotADirectoryError, OSError: If the directory
            cannot be listed. Per-file problems never raise.
    """
    files = discover_module_files(directory)
    loaded: List[Any] = []

    for path in files:
        try:
            module = _import_file(path, package)
            handler_class = getattr(module, DEFAULT_EXPORT, None)

            if handler_class is None or not inspect.isclass(handler_class):
                logger.warning(f"{kind.capitalize()} at {path} doesn't export a {DEFAULT_EXPORT} class")
                continue

            instance = handler_class()

            if not validator(instance):
                logger.warning(f"{kind.capitalize()} at {path} does not have the required shape")
                continue

            loaded.append(instance)
        except Exception as e:
            logger.error(f"Error importing {kind} at {path}: {e}", exc_info=True)

    logger.debug(f"Loaded {len(loaded)} {kind}(s) from {len(files)} file(s)")
    return loaded
