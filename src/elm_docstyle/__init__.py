"""elm_docstyle — driver for the elm-docstyle documentation linter."""

__all__ = [
    "__version__",
    "load_exclusions",
    "explore",
    "run_lint",
    "aggregate",
    "RunOutcome",
    "DocstyleError",
]
__version__ = "0.1.0"

from elm_docstyle.errors import DocstyleError  # noqa: E402, F401
from elm_docstyle.core.exclusions import load_exclusions  # noqa: E402, F401
from elm_docstyle.core.explore import explore  # noqa: E402, F401
from elm_docstyle.core.runner import run_lint  # noqa: E402, F401
from elm_docstyle.model.outcome import RunOutcome  # noqa: E402, F401
from elm_docstyle.reports.aggregate import aggregate  # noqa: E402, F401
