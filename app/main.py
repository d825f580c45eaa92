import argparse
import asyncio
from pathlib import Path

from app.config.settings import Settings
from app.database.connection import close_pool, init_pool
from app.intake.intake_pipeline import IntakePipeline, build_pipeline
from app.intake.models import PipelineStatus
from app.logging.logger import Log
from app.presentation.console import ConsoleObserver


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="material-advisor",
        description="Identify materials in a photo and estimate their environmental impact.",
    )
    parser.add_argument("image", type=Path, help="path to the image file")
    parser.add_argument(
        "--media-type",
        default=None,
        help="declared media type (default: guessed from the file extension)",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="do not print progress or results"
    )
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


async def run(
    args: argparse.Namespace, settings: Settings, pipeline: IntakePipeline
) -> PipelineStatus:
    """Open the pool -> process one image -> close the pool."""
    await init_pool(settings)
    try:
        if not args.quiet:
            pipeline.store.subscribe(ConsoleObserver())
        state = await pipeline.run(args.image, args.media_type)
        return state.status
    finally:
        await close_pool()


def main(argv: list[str] | None = None) -> int:
    """Entry point: parse arguments, configure logging, run the pipeline once.

    Invalid configuration exits with status 2 and a usage message.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = Settings()
        Log.configure(settings.log_level)
        pipeline = build_pipeline(settings)
    except ValueError as exc:
        parser.error(str(exc))
    status = asyncio.run(run(args, settings, pipeline))
    return 0 if status is PipelineStatus.SUCCEEDED else 1


if __name__ == "__main__":
    raise SystemExit(main())
