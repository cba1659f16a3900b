"""
Run the name score pipeline once from the command line.

This script:
1. Fetches the name list from SOURCE_URL
2. Normalizes, ranks, and scores the names
3. Prints the total score
4. Submits it to TARGET_URL

Exits with status 1 if any phase fails.
"""
import sys
from typing import Optional, Sequence

from core.logging import get_logger, setup_logging
from core.settings import get_settings
from pipelines import get_pipeline
from schemas.common import ApiStatus


def main(argv: Optional[Sequence[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(description="Score the source name list and submit the total")
    parser.add_argument("--subject", help="Subject name reported to the sink (default: SUBJECT_NAME)")
    parser.add_argument(
        "--test",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Submit as a test run (prueba=1); --no-test forces prueba=0 (default: TEST_MODE)",
    )
    parser.add_argument("--log-format", choices=["json", "console"], help="Override LOG_FORMAT")
    parser.add_argument("--verbose", action="store_true", help="Log every scored name")
    args = parser.parse_args(argv)

    settings = get_settings()
    setup_logging(
        log_level="DEBUG" if args.verbose else settings.log_level,
        json_format=(args.log_format or settings.log_format) == "json",
        service_name=settings.service_name,
    )
    log = get_logger("cli")

    pipeline = get_pipeline(
        "name_score",
        settings=settings,
        subject_name=args.subject,
        test_mode=args.test,
    )
    result = pipeline.run_sync()

    if result.total_score is not None:
        print(f"Total Score: {result.total_score}")

    if result.status != ApiStatus.SUCCESS:
        log.error("name_score_run_failed", message=result.message)
        print(f"An error occurred: {result.message}", file=sys.stderr)
        return 1

    print(f"Response Code: {result.submission_status}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
