"""
wordrng.diagnostics.logging

Logging utilities for diagnostics runs.
"""

from pathlib import Path
from typing import Callable, Union


def create_logger(output_dir: Union[str, Path]) -> Callable[[dict], None]:
    """Create logging function for diagnostics metrics.

    Args:
        output_dir: Run output directory. A 'logs' subdirectory is created
            on first write.

    Returns:
        Logging callback function that accepts a metrics dict.
    """
    log_file = Path(output_dir) / "logs" / "diagnostics.log"

    def log(metrics: dict):
        if "check" in metrics:
            # One statistical check
            status = "PASS" if metrics.get("passed") else "FAIL"
            print(f"  {metrics['check']:<24} | "
                  f"stat: {metrics.get('statistic', float('nan')):10.4f} | "
                  f"p: {metrics.get('p_value', float('nan')):.4g} | "
                  f"{status}")
        elif "n_checks" in metrics:
            # Battery summary
            print(f"  {metrics.get('engine', '?')}: "
                  f"{metrics.get('n_passed', 0)}/{metrics['n_checks']} checks passed")

        # Write all metrics to log file
        log_file.parent.mkdir(parents=True, exist_ok=True)
        with open(log_file, "a") as f:
            f.write(f"{metrics}\n")

    return log
