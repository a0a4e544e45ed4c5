"""Demonstration script for the evaluation fallback chain."""
import logging
from pathlib import Path

from tabeval import TableContext, evaluate


def setup_logging():
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s -> %(message)s"
    )


def demonstrate_fallback():
    """Evaluate a few inputs with and without lookup tables."""
    setup_logging()
    current_file = Path(__file__)
    data_dir = current_file.parent / "data"
    if not data_dir.exists():
        raise FileNotFoundError(f"Example data directory not found: {data_dir}")
    contexts = {
        "example tables": TableContext(data_dir),
        "no tables": TableContext(current_file.parent / "missing"),
    }
    inputs = [(2.0, 3.0, 0.5), (0.0, 0.0, 0.0), (1.0, 2.0, 2.0), (0.5, 2.0, 3.0), (-3.0, 4.0, -0.2)]
    for label, context in contexts.items():
        print(f"\n{'=' * 80}")
        print(f"CONTEXT: {label} ({context.data_dir})")
        print(f"{'=' * 80}")
        for x, y, z in inputs:
            result = evaluate(x, y, z, context)
            trail = " -> ".join(type(failure).__name__ for failure in result.escalations) or "-"
            print(f"fun({x:5}, {y:5}, {z:5}) = {result.value:<14.6g} algorithm {int(result.algorithm)}"
                  f"   escalations: {trail}")


if __name__ == "__main__":
    demonstrate_fallback()
