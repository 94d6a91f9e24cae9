import logging
import time

from bench.core.log import setup_logging
from bench.services.bench_service import bench

logger = logging.getLogger(__name__)


def main(kill: bool | None = None) -> None:
    """Time a few sleeps with the shared bench and dump the result."""
    setup_logging()
    logger.info("Starting demo run")
    bench.start()
    for step in ("connect", "query", "render"):
        time.sleep(0.05)
        bench.mark(step)
    bench.stop()
    logger.info("Demo finished in %.3fs", bench.get_elapsed())
    bench.dump(kill=kill)


if __name__ == "__main__":
    main()
