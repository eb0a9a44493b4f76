#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/md2markup/utils/decorators.py
"""Decorators and context managers shared by the tokenizer and renderers.

``requires_dependencies`` turns a missing or outdated optional library into a
:class:`~md2markup.exceptions.DependencyError` at call time, so importing
md2markup never requires the tokenizer backend. ``debug_timer`` logs how
long a block took when DEBUG logging is on.

"""

from __future__ import annotations

import importlib
import logging
import time
from contextlib import contextmanager
from functools import wraps
from typing import Any, Callable, Iterator, List, Optional, Tuple

from md2markup.exceptions import DependencyError
from md2markup.utils.packages import check_version_requirement

PackageRequirement = Tuple[str, str, str]


def _check_requirements(
    packages: List[PackageRequirement],
) -> Tuple[List[Tuple[str, str]], List[Tuple[str, str, str]], Optional[ImportError]]:
    """Import each required module and compare installed versions.

    Returns
    -------
    tuple
        ``(missing, version_mismatches, first_import_error)``

    """
    missing: List[Tuple[str, str]] = []
    mismatches: List[Tuple[str, str, str]] = []
    first_error: Optional[ImportError] = None

    for install_name, import_name, version_spec in packages:
        try:
            importlib.import_module(import_name)
        except ImportError as e:
            missing.append((install_name, version_spec))
            first_error = first_error or e
            continue

        if not version_spec:
            continue
        ok, installed = check_version_requirement(install_name, version_spec)
        if not ok:
            mismatches.append((install_name, version_spec, installed or "unknown"))

    return missing, mismatches, first_error


def requires_dependencies(component_name: str, packages: List[PackageRequirement]) -> Callable:
    """Verify optional packages before running the decorated function.

    Parameters
    ----------
    component_name : str
        Name shown in the error message (e.g., "markdown")
    packages : list of (install_name, import_name, version_spec)
        ``install_name`` is the distribution name given to pip, ``import_name``
        the module to import and ``version_spec`` a PEP 440 specifier such as
        ``">=3.0.0"`` (empty for any version).

    Returns
    -------
    Callable
        Decorator

    Raises
    ------
    DependencyError
        When the decorated function is called and a package is missing or too old

    Examples
    --------
        >>> @requires_dependencies("markdown", [("mistune", "mistune", ">=3.0.0")])
        ... def tokenize(text):
        ...     import mistune
        ...     return mistune.create_markdown(renderer=None).parse(text)

    """

    def decorator(func: Callable) -> Callable:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            missing, mismatches, import_error = _check_requirements(packages)
            if missing or mismatches:
                raise DependencyError(
                    component_name=component_name,
                    missing_packages=missing,
                    version_mismatches=mismatches,
                    original_import_error=import_error,
                ) from import_error
            return func(*args, **kwargs)

        return wrapper

    return decorator


@contextmanager
def debug_timer(logger: logging.Logger, operation: str) -> Iterator[None]:
    """Log the wall time of the enclosed block at DEBUG level.

    Nothing is measured when the logger is not enabled for DEBUG.

    Examples
    --------
        >>> with debug_timer(logger, "Tokenizing markdown"):
        ...     events = parser.parse(text)

    """
    if not logger.isEnabledFor(logging.DEBUG):
        yield
        return

    started = time.perf_counter()
    yield
    logger.debug("%s completed in %.2fs", operation, time.perf_counter() - started)
