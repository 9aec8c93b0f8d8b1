"""Main entry point for the linmatch package."""

from loguru import logger

from linmatch.cli import create_parser
from linmatch.core import load_config
from linmatch.demo import run_demo
from linmatch.reports import format_report, write_json_report
from linmatch.search import run_search
from linmatch.utils.logging import add_log_file_handler, setup_logger


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    config = load_config(args.config, args, parser)

    setup_logger(verbose=config.verbose, debug=config.debug)
    if config.log_file:
        add_log_file_handler(config.log_file, verbose=config.verbose, debug=config.debug)

    if config.demo:
        run_demo()
        return 0

    # Validate
    if config.pattern is None:
        parser.error("Must specify --pattern (an empty string is allowed)")
    if config.text is None and not config.text_file:
        parser.error("Must specify either --text or --text-file")

    if config.verbose:
        logger.info("Configuration:")
        logger.info(f"  Algorithm: {config.algorithm}")
        logger.info(f"  Pattern length: {len(config.pattern)}")
        if config.text_file:
            logger.info(f"  Text file: {config.text_file}")
        if config.lines:
            logger.info("  Scanning line by line")
        logger.info("")

    try:
        reports = run_search(config)
    except KeyboardInterrupt:
        logger.warning("⚠️  Search interrupted by user")
        raise

    for line in format_report(reports, show_array=config.show_array):
        print(line)

    if config.output:
        write_json_report(config.output, config.pattern, reports)

    if not all(report.consistent for report in reports):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
