"""Run every demo, or only the ones named on the command line."""
import sys
from typing import List, Optional
from demos import DEMOS
from demos.runner import create_metrics, run_demos, setup
from utils.logging_config import get_logger

logger = get_logger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    names = list(sys.argv[1:] if argv is None else argv) or list(DEMOS)

    unknown = [name for name in names if name not in DEMOS]
    if unknown:
        print(f"Unknown demo(s): {', '.join(unknown)}. Available: {', '.join(DEMOS)}", file=sys.stderr)
        return 2

    settings = setup()
    metrics = create_metrics(settings)
    failures = run_demos(DEMOS, names, settings, metrics)

    if metrics:
        logger.info(f"Metrics:\n{metrics.get_metrics()}")
    if failures:
        for failure in failures:
            print(f"{failure['demo']} failed: {failure['error_type']}: {failure['message']}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
