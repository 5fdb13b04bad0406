import sys

from loguru import logger

from commit_ai.cli import main_cli


def main() -> int:
    return main_cli()


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        logger.info("Application stopped by user")
        sys.exit(130)
    except Exception as e:
        logger.exception("Fatal error: " f"{str(e)}")
        sys.exit(1)
