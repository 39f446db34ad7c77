"""quadbench: trapezoidal vs Monte Carlo integration, side by side."""

import logging

# Silent unless the application configures logging.
logging.getLogger("quadbench").addHandler(logging.NullHandler())

from quadbench.errors import IntegrationError, NonFiniteEvaluationError
from quadbench.integrands import (
    DEMO_INTEGRANDS,
    SINGULARITY_EPSILON,
    NamedIntegrand,
    gaussian,
    make_sinusoid,
    sinusoid,
)
from quadbench.logging_config import (
    disable_logging,
    enable_console_logging,
    enable_file_logging,
    enable_json_logging,
    set_level,
    set_module_level,
)
from quadbench.numerics import SAMPLING_EPSILON, integrate_monte_carlo, integrate_trapezoid
from quadbench.report import (
    ConvergenceRow,
    ConvergenceTable,
    ReportConfig,
    build_convergence_table,
    format_table,
    print_table,
)

__all__ = [
    # Estimators
    "integrate_monte_carlo",
    "integrate_trapezoid",
    "SAMPLING_EPSILON",
    # Integrands
    "DEMO_INTEGRANDS",
    "NamedIntegrand",
    "SINGULARITY_EPSILON",
    "gaussian",
    "make_sinusoid",
    "sinusoid",
    # Report
    "ConvergenceRow",
    "ConvergenceTable",
    "ReportConfig",
    "build_convergence_table",
    "format_table",
    "print_table",
    # Errors
    "IntegrationError",
    "NonFiniteEvaluationError",
    # Logging
    "disable_logging",
    "enable_console_logging",
    "enable_file_logging",
    "enable_json_logging",
    "set_level",
    "set_module_level",
]
