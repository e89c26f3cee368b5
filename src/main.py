"""Main entry point for running one practice exercise in the terminal."""

import argparse
import asyncio
import logging
import sys

from src.config import settings
from src.ui.api_client import APIClient
from src.ui.state import Step
from src.ui.utils import format_vocabulary_markdown, truncate_text
from src.ui.workflow import WorkflowController

# Configure logging
logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        description="Practice discussing a topic: get a question, answer it, "
        "and review an enhanced answer with key vocabulary"
    )
    parser.add_argument(
        "--category",
        type=str,
        default=None,
        help="Topic to practice (prompted for if not specified)",
    )
    parser.add_argument(
        "--answer",
        type=str,
        default=None,
        help="Answer to the generated question (prompted for if not specified)",
    )
    parser.add_argument(
        "--base-url",
        type=str,
        default=None,
        help="Service base URL (uses API_BASE_URL if not specified)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Only keep bulleted lines when parsing vocabulary",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


async def run_exercise(
    controller: WorkflowController,
    category: str | None,
    answer: str | None,
) -> bool:
    """Drive the controller from category to results.

    Missing inputs are read from stdin.

    Returns:
        True if the results step was reached.
    """
    controller.edit_category(category if category is not None else input("Category: "))
    if not await controller.submit_category():
        return False

    print(f"\nQuestion: {controller.state.question}\n")
    logger.info(f"Question generated: {truncate_text(controller.state.question, 60)}")

    controller.edit_answer(answer if answer is not None else input("Your answer: "))
    if not await controller.submit_answer():
        return False

    state = controller.state
    print("\nEnhanced answer:")
    print(state.enhanced_answer)
    print("\nKey vocabulary:")
    print(format_vocabulary_markdown(state.vocabularies))
    return state.step == Step.RESULTS


def main():
    """Main function for the practice CLI."""
    args = build_parser().parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    controller = WorkflowController(
        client=APIClient(base_url=args.base_url),
        vocabulary_parse_mode="strict" if args.strict else None,
    )

    try:
        completed = asyncio.run(run_exercise(controller, args.category, args.answer))
    except (EOFError, KeyboardInterrupt):
        logger.error("Input aborted")
        sys.exit(1)

    if not completed:
        state = controller.state
        logger.error(state.error_message or "Input must not be blank")
        sys.exit(1)


if __name__ == "__main__":
    main()
